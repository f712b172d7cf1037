"""
Pixel grid model for Chemion glasses
"""
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

from utils.constants import GRID_ROWS, GRID_COLUMNS, NOSE_CUTOUT, Intensity


@dataclass
class PixelCell:
    """Single LED of the matrix"""
    intensity: Intensity = Intensity.OFF
    enabled: bool = True


class PixelGrid:
    """Fixed size matrix of pixels, with the nose cutout disabled"""

    def __init__(self):
        self._rows = GRID_ROWS
        self._columns = GRID_COLUMNS
        self._cells: List[List[PixelCell]] = [
            [PixelCell() for _ in range(self._columns)]
            for _ in range(self._rows)
        ]
        self.disable_region(NOSE_CUTOUT)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._columns

    def __iter__(self) -> Iterator[List[PixelCell]]:
        """Iterate over copies of the rows"""
        for line in self._cells:
            yield [PixelCell(cell.intensity, cell.enabled) for cell in line]

    def _check(self, row: int, col: int):
        if not (0 <= row < self._rows and 0 <= col < self._columns):
            raise IndexError(f"Pixel ({row}, {col}) outside {self._rows}x{self._columns} grid")

    def cell(self, row: int, col: int) -> PixelCell:
        """Get a copy of the cell at (row, col)"""
        self._check(row, col)
        cell = self._cells[row][col]
        return PixelCell(cell.intensity, cell.enabled)

    def intensity_at(self, row: int, col: int) -> Intensity:
        self._check(row, col)
        return self._cells[row][col].intensity

    def is_enabled(self, row: int, col: int) -> bool:
        self._check(row, col)
        return self._cells[row][col].enabled

    def toggle(self, row: int, col: int, intensity: Intensity):
        """Switch a pixel on at the given intensity, or off if it is lit"""
        intensity = Intensity.parse(intensity)
        self._check(row, col)
        cell = self._cells[row][col]
        if not cell.enabled:
            return
        cell.intensity = intensity if cell.intensity == Intensity.OFF else Intensity.OFF

    def set_intensity(self, row: int, col: int, intensity: Intensity):
        """Set a pixel directly, disabled pixels are left untouched"""
        intensity = Intensity.parse(intensity)
        self._check(row, col)
        cell = self._cells[row][col]
        if cell.enabled:
            cell.intensity = intensity

    def apply_levels(self, levels: Sequence[Sequence[Intensity]]):
        """Set every pixel from a full matrix of intensities"""
        if len(levels) != self._rows or any(len(line) != self._columns for line in levels):
            raise ValueError(f"Expected a {self._rows}x{self._columns} matrix")
        for row, line in enumerate(levels):
            for col, intensity in enumerate(line):
                self.set_intensity(row, col, intensity)

    def clear(self):
        """Turn every pixel off"""
        for line in self._cells:
            for cell in line:
                cell.intensity = Intensity.OFF

    def disable_region(self, coords: Iterable[Tuple[int, int]]):
        """Mark pixels as physically absent"""
        for row, col in coords:
            self._check(row, col)
            cell = self._cells[row][col]
            cell.enabled = False
            cell.intensity = Intensity.OFF

    def lit_count(self) -> int:
        """Number of pixels that are not off"""
        return sum(
            1 for line in self._cells for cell in line
            if cell.intensity != Intensity.OFF
        )


class Brush:
    """Tracks the intensity applied by the next toggles"""

    def __init__(self, intensity: Intensity = Intensity.FULL):
        self._intensity = Intensity.parse(intensity)

    @property
    def intensity(self) -> Intensity:
        return self._intensity

    def select(self, intensity) -> Intensity:
        """Change the paint intensity, accepts a member or its name"""
        self._intensity = Intensity.parse(intensity)
        return self._intensity

    def paint(self, grid: PixelGrid, row: int, col: int):
        """Toggle a pixel of the grid with the current intensity"""
        grid.toggle(row, col, self._intensity)
