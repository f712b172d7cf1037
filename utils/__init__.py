"""Utility functions and constants for Chemion glasses designer"""

from utils.logger import setup_logger, user_guidance
from utils.constants import (
    GRID_ROWS, GRID_COLUMNS, NOSE_CUTOUT, ENDPOINTS,
    Intensity, ConnectionState, StateColors, PixelColors, StateDisplay
)

__all__ = [
    'setup_logger',
    'user_guidance',
    'GRID_ROWS',
    'GRID_COLUMNS',
    'NOSE_CUTOUT',
    'ENDPOINTS',
    'Intensity',
    'ConnectionState',
    'StateColors',
    'PixelColors',
    'StateDisplay'
]
