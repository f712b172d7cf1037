"""
Base designer class for Chemion glasses
"""
from rich.console import Console
from typing import Awaitable, List, Optional, Sequence

import httpx

from connector.client import GlassesClient
from connector.commands import CommandGate
from services.directory import Device, DeviceDirectory
from services.grid import Brush, PixelGrid
from services.pipeline import DisplayPipeline
from services.serializer import deserialize
from services.session import ConnectionSession
from services.status import StatusManager
from utils.config import Config
from utils.constants import NOSE_CUTOUT, ConnectionState, Intensity
from utils.exceptions import GlassesError
from utils.logger import get_console, setup_logger, user_guidance


class GlassesDesigner:
    """Frame designer and connection controller for Chemion glasses

    Each public method maps to one user action. Failures are logged and kept
    in ``last_error`` so a UI can show them, and the method returns False.
    """

    def __init__(self, config: Optional[Config] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        """Initialize designer with optional config"""
        self.config = config or Config.load()
        self.logger = setup_logger(self.config)
        self.console: Console = get_console()
        self.last_error: Optional[str] = None

        self._initialize_services(transport)
        self._setup_event_handlers()

    def _initialize_services(self, transport: Optional[httpx.AsyncBaseTransport]):
        """Initialize services in correct order"""
        self.client = GlassesClient(
            self.config.service_url,
            timeout=self.config.request_timeout,
            logger=self.logger,
            transport=transport,
        )
        self.gate = CommandGate(self.logger)

        # Frame editing
        self.grid = PixelGrid()
        self.brush = Brush(Intensity.parse(self.config.default_intensity))

        # Device handling
        self.directory = DeviceDirectory(self.client, self.logger)
        self.session = ConnectionSession(self.client, self.directory, self.gate, self.logger)
        self.pipeline = DisplayPipeline(self.client, self.session, self.gate, self.logger)

        self.status_manager = StatusManager(self)

    def _setup_event_handlers(self):
        """Set up core event handlers"""
        self.session.add_state_callback(self._handle_connection_state)

    def _handle_connection_state(self, state: ConnectionState):
        """Handle connection state changes"""
        if state == ConnectionState.CONNECTED:
            self.logger.success(self.session.describe())

    async def __aenter__(self) -> "GlassesDesigner":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def close(self):
        """Release the HTTP connection pool"""
        await self.client.aclose()

    async def _attempt(self, action: str, request: Awaitable) -> bool:
        """Await a service request, recording its failure message"""
        try:
            await request
        except GlassesError as e:
            self.last_error = e.message
            self.logger.error(f"{action} failed: {e.message}")
            return False
        self.last_error = None
        return True

    # Frame editing

    def toggle_pixel(self, row: int, col: int) -> Intensity:
        """Toggle a pixel with the current brush, returns its new intensity"""
        self.brush.paint(self.grid, row, col)
        return self.grid.intensity_at(row, col)

    def set_pixel(self, row: int, col: int, intensity) -> Intensity:
        self.grid.set_intensity(row, col, Intensity.parse(intensity))
        return self.grid.intensity_at(row, col)

    def select_intensity(self, intensity) -> Intensity:
        """Pick the intensity used by the next toggles"""
        selected = self.brush.select(intensity)
        self.logger.debug(f"Brush intensity set to {selected.value}")
        return selected

    def clear(self):
        """Turn every pixel off and restore the nose cutout"""
        self.grid.clear()
        self.grid.disable_region(NOSE_CUTOUT)
        self.logger.debug("Grid cleared")

    def load_frame(self, matrix: Sequence[Sequence[int]]):
        """Replace the grid content with a wire format matrix"""
        self.grid.apply_levels(deserialize(matrix))

    # Devices

    @property
    def devices(self) -> List[Device]:
        return self.directory.devices

    async def refresh_devices(self) -> bool:
        """Discover devices, dropping the current selection"""
        if not await self._attempt("Discovery", self.directory.discover()):
            return False
        if not len(self.directory):
            user_guidance(self.logger, "[yellow]No glasses found. Make sure they are switched on and close to the service host.[/yellow]")
        return True

    def select_device(self, index: int) -> bool:
        """Select a discovered device by position"""
        try:
            device = self.directory.select(index)
        except GlassesError as e:
            self.last_error = e.message
            self.logger.error(f"Selection failed: {e.message}")
            return False
        self.logger.info(f"Selected {device}")
        return True

    async def connect(self) -> bool:
        """Connect to the selected glasses"""
        return await self._attempt("Connection", self.session.connect())

    async def disconnect(self) -> bool:
        """Disconnect from the glasses and rescan"""
        return await self._attempt("Disconnect", self.session.disconnect())

    async def display(self) -> bool:
        """Send the current grid to the glasses"""
        if not await self._attempt("Display", self.pipeline.push(self.grid)):
            return False
        self.logger.success("Frame displayed")
        return True

    def show_status(self):
        """Print the status table and grid preview once"""
        self.console.print(self.status_manager.generate_view())
