"""Status display service for Chemion glasses"""
from rich.console import Group
from rich.table import Table
from rich.text import Text

from services.grid import PixelGrid
from utils.constants import PixelColors, StateColors, StateDisplay


def render_grid(grid: PixelGrid) -> Text:
    """Draw the grid as colored blocks, cutout pixels shown as gaps"""
    text = Text()
    for row, line in enumerate(grid):
        for cell in line:
            if cell.enabled:
                text.append("██", style=PixelColors.LEVELS[cell.intensity])
            else:
                text.append("  ", style=f"on {PixelColors.DISABLED}")
        if row < grid.rows - 1:
            text.append("\n")
    return text


class StatusManager:
    """Manages status display for the designer"""

    def __init__(self, designer):
        self.designer = designer
        self.logger = designer.logger

    def generate_table(self) -> Table:
        """Generate status table for display"""
        table = Table(title="Chemion Glasses Status")
        table.add_column("Item", style="cyan")
        table.add_column("Value")

        self._add_connection_status(table)
        self._add_designer_status(table)
        return table

    def _add_connection_status(self, table: Table):
        """Add connection status information"""
        session = self.designer.session
        state = session.connection_state
        color = StateDisplay.CONNECTION_STATES[state]
        table.add_row("Connection", f"[{color}]{state.value}[/{color}]")

        if session.device:
            table.add_row("Device", str(session.device))

        directory = self.designer.directory
        selected = directory.selected()
        table.add_row("Discovered", str(len(directory)))
        table.add_row(
            "Selected",
            str(selected) if selected else f"[{StateColors.NEUTRAL}]None[/{StateColors.NEUTRAL}]"
        )

        pending = self.designer.gate.pending
        if pending:
            table.add_row("Pending", f"[{StateColors.WARNING}]{pending}[/{StateColors.WARNING}]")

    def _add_designer_status(self, table: Table):
        """Add brush, frame and error information"""
        table.add_section()
        table.add_row(
            "Brush",
            f"[{StateColors.HIGHLIGHT}]{self.designer.brush.intensity.value}[/{StateColors.HIGHLIGHT}]"
        )
        table.add_row("Lit pixels", str(self.designer.grid.lit_count()))

        if self.designer.last_error:
            table.add_row("Last Error", f"[{StateColors.ERROR}]{self.designer.last_error}[/{StateColors.ERROR}]")

    def generate_view(self) -> Group:
        """Status table followed by the grid preview"""
        return Group(self.generate_table(), render_grid(self.designer.grid))

