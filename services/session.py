"""Connection session management for Chemion glasses"""
import logging
from typing import Callable, List, Optional

from services.directory import Device, DeviceDirectory
from utils.constants import ConnectionState
from utils.exceptions import DeviceConnectionError, NoSelectionError, RequestInProgressError


class ConnectionSession:
    """Tracks the connection to the selected glasses

    Only DISCONNECTED and CONNECTED are stable states. While a connect or
    disconnect request is waiting for the service, the shared command gate
    is held and the state keeps its previous value.
    """

    def __init__(self, client, directory: DeviceDirectory, gate, logger: Optional[logging.Logger] = None):
        self.client = client
        self.directory = directory
        self.gate = gate
        self.logger = logger or logging.getLogger("Chemion")
        self._connection_state = ConnectionState.DISCONNECTED
        self._device: Optional[Device] = None
        self._state_callbacks: List[Callable] = []

    def add_state_callback(self, callback: Callable):
        """Add callback called with the new state on every change"""
        if callback not in self._state_callbacks:
            self._state_callbacks.append(callback)

    def remove_state_callback(self, callback: Callable):
        """Remove state callback"""
        if callback in self._state_callbacks:
            self._state_callbacks.remove(callback)

    @property
    def connection_state(self) -> ConnectionState:
        """Get current connection state"""
        return self._connection_state

    @connection_state.setter
    def connection_state(self, state: ConnectionState):
        """Set connection state"""
        if state != self._connection_state:
            self._connection_state = state
            self.logger.info(f"Connection state changed to: {state.value}")
            self._notify_state_callbacks()

    @property
    def is_connected(self) -> bool:
        return self._connection_state == ConnectionState.CONNECTED

    @property
    def device(self) -> Optional[Device]:
        """Device captured when the current connection was made"""
        return self._device

    def describe(self) -> str:
        """Status line for the UI"""
        if self.is_connected and self._device:
            return f"Connected to {self._device.name}"
        return ""

    def _notify_state_callbacks(self):
        """Notify all state callbacks"""
        for callback in self._state_callbacks:
            try:
                callback(self._connection_state)
            except Exception as e:
                self.logger.error(f"Error in state callback: {e}")

    async def connect(self) -> Device:
        """Connect to the device currently selected in the directory"""
        async with self.gate.hold("connect"):
            if self.is_connected:
                raise DeviceConnectionError(
                    f"Already connected to {self._device.name}, disconnect first"
                )
            device = self.directory.selected()
            if device is None:
                raise NoSelectionError()

            self.logger.info(f"Connecting to {device}...")
            await self.client.connect(device)

            self._device = device
            self.connection_state = ConnectionState.CONNECTED
            return device

    async def disconnect(self):
        """Disconnect, then refresh the device list

        Without a connection there is nothing to tell the service, the
        request only resets the selection and rescans.
        """
        async with self.gate.hold("disconnect"):
            if self.is_connected:
                self.logger.info("Disconnecting...")
                await self.client.disconnect()
            else:
                self.logger.debug("Not connected, skipping disconnect request")

            self._device = None
            self.connection_state = ConnectionState.DISCONNECTED
            self.directory.clear_selection()
            try:
                await self.directory.discover()
            except RequestInProgressError:
                # A refresh started by the user will install the new list
                self.logger.warning("Device scan already running, skipped rescan")
