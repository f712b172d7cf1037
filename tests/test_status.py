"""
Tests for the rich status table and grid preview.
"""

from rich.console import Console

from connector.base import GlassesDesigner
from services.grid import PixelGrid
from services.status import render_grid
from utils.constants import Intensity, PixelColors


def render(renderable) -> str:
    console = Console(width=120, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


def test_render_grid_shape():
    grid = PixelGrid()
    grid.set_intensity(0, 0, Intensity.FULL)
    text = render_grid(grid)
    lines = text.plain.split("\n")
    assert len(lines) == 9
    assert all(len(line) == 48 for line in lines)
    assert text.spans[0].style == PixelColors.LEVELS[Intensity.FULL]


def test_status_table_contents(test_config, transport):
    glasses = GlassesDesigner(test_config, transport=transport)
    glasses.last_error = "Couldn't reach glasses"
    glasses.toggle_pixel(0, 0)

    output = render(glasses.status_manager.generate_table())

    assert "Disconnected" in output
    assert "Full" in output
    assert "Couldn't reach glasses" in output
    assert "Lit pixels" in output


def test_show_status_prints_table_and_preview(test_config, transport):
    glasses = GlassesDesigner(test_config, transport=transport)
    glasses.console = Console(width=120, record=True, color_system=None)
    glasses.toggle_pixel(0, 0)

    glasses.show_status()

    output = glasses.console.export_text()
    assert "Disconnected" in output
    assert "Lit pixels" in output
    assert "██" in output
