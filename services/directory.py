"""
Device discovery and selection for Chemion glasses
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from utils.exceptions import SelectionError, RequestInProgressError


@dataclass(frozen=True)
class Device:
    """A glasses peripheral reported by the service"""
    name: str
    address: str

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Device":
        return cls(name=data["device_name"], address=data["device_address"])

    def to_json(self) -> Dict[str, str]:
        return {"device_name": self.name, "device_address": self.address}

    def __str__(self) -> str:
        return f"{self.name} ({self.address})"


class DeviceDirectory:
    """Holds the last discovered devices and the user's selection"""

    def __init__(self, client, logger: Optional[logging.Logger] = None):
        self.client = client
        self.logger = logger or logging.getLogger("Chemion")
        self._devices: List[Device] = []
        self._selected_index: Optional[int] = None
        self._discovering = False

    def __len__(self) -> int:
        return len(self._devices)

    @property
    def devices(self) -> List[Device]:
        return list(self._devices)

    @property
    def selected_index(self) -> Optional[int]:
        return self._selected_index

    def selected(self) -> Optional[Device]:
        """Get the selected device, if any"""
        if self._selected_index is None:
            return None
        return self._devices[self._selected_index]

    def select(self, index: int) -> Device:
        """Select a device by its position in the last discovery"""
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self._devices):
            raise SelectionError(
                f"No device at index {index!r} ({len(self._devices)} discovered)"
            )
        self._selected_index = index
        device = self._devices[index]
        self.logger.debug(f"Selected device: {device}")
        return device

    def clear_selection(self):
        self._selected_index = None

    async def discover(self) -> List[Device]:
        """Replace the device list with a fresh discovery

        The selection is dropped before querying, even if the service returns
        the same devices again. On failure the list is left empty.
        """
        if self._discovering:
            raise RequestInProgressError("discover", "discover")

        self._discovering = True
        self.clear_selection()
        self._devices = []
        try:
            self.logger.info("Scanning for glasses...")
            devices = await self.client.discover()
        finally:
            self._discovering = False

        self._devices = list(devices)
        self.logger.info(f"Found {len(self._devices)} device(s)")
        for device in self._devices:
            self.logger.debug(f"  {device}")
        return self.devices
