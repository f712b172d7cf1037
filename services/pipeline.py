"""
Display pipeline for Chemion glasses
"""
import logging
from typing import Any, Optional

from services.grid import PixelGrid
from services.serializer import serialize
from services.session import ConnectionSession
from utils.exceptions import DisplayError


class DisplayPipeline:
    """Pushes a grid to the glasses: encode first, then display

    Pushing is only legal while the session is connected. The display call
    only ever receives what the encode call returned, and is never issued
    when encoding failed. A failed display does not undo anything, encoding
    has no effect on the device.
    """

    def __init__(self, client, session: ConnectionSession, gate, logger: Optional[logging.Logger] = None):
        self.client = client
        self.session = session
        self.gate = gate
        self.logger = logger or logging.getLogger("Chemion")
        self.last_encoded: Optional[Any] = None

    async def push(self, grid: PixelGrid) -> Any:
        """Send the grid to the glasses, returns the encoded frame"""
        async with self.gate.hold("display"):
            if not self.session.is_connected:
                raise DisplayError("Please connect to a device first")

            matrix = serialize(grid)
            self.logger.debug(f"Encoding frame with {grid.lit_count()} lit pixel(s)")
            encoded = await self.client.encode(matrix)

            self.last_encoded = encoded
            self.logger.debug("Frame encoded, sending to glasses")
            await self.client.display(encoded)
            return encoded
