"""
Frame serialization between the pixel grid and the service wire format

The glasses service expects each pixel as an integer from 0 (off) to 3 (full
brightness). This module is the only place that mapping is defined.
"""
from typing import Dict, List, Sequence

from services.grid import PixelGrid
from utils.constants import GRID_ROWS, GRID_COLUMNS, Intensity

WIRE_VALUES: Dict[Intensity, int] = {
    Intensity.OFF: 0,
    Intensity.QUARTER: 1,
    Intensity.MID: 2,
    Intensity.FULL: 3,
}

_FROM_WIRE: Dict[int, Intensity] = {value: level for level, value in WIRE_VALUES.items()}


def to_wire(intensity: Intensity) -> int:
    return WIRE_VALUES[intensity]


def from_wire(value: int) -> Intensity:
    # bool is an int subclass but never a valid pixel value
    if isinstance(value, bool) or not isinstance(value, int) or value not in _FROM_WIRE:
        raise ValueError(f"Wrong value in frame: {value!r}")
    return _FROM_WIRE[value]


def serialize(grid: PixelGrid) -> List[List[int]]:
    """Convert the grid into the matrix sent to /encode"""
    return [[WIRE_VALUES[cell.intensity] for cell in line] for line in grid]


def deserialize(matrix: Sequence[Sequence[int]]) -> List[List[Intensity]]:
    """Convert a wire matrix back into intensities"""
    if (
        not isinstance(matrix, (list, tuple))
        or len(matrix) != GRID_ROWS
        or any(not isinstance(line, (list, tuple)) or len(line) != GRID_COLUMNS for line in matrix)
    ):
        raise ValueError(f"Frame must be {GRID_ROWS}x{GRID_COLUMNS}")
    return [[from_wire(value) for value in line] for line in matrix]
