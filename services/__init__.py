"""
Chemion services module - frame model and device handling
"""

from .grid import PixelCell, PixelGrid, Brush
from .serializer import serialize, deserialize
from .directory import Device, DeviceDirectory
from .session import ConnectionSession
from .pipeline import DisplayPipeline
from .status import StatusManager, render_grid

__all__ = [
    'PixelCell',
    'PixelGrid',
    'Brush',
    'serialize',
    'deserialize',
    'Device',
    'DeviceDirectory',
    'ConnectionSession',
    'DisplayPipeline',
    'StatusManager',
    'render_grid'
]
