"""Interactive terminal designer for Chemion glasses"""
import asyncio
import json
from rich.prompt import Prompt
from rich.table import Table
from connector import GlassesDesigner
from utils.constants import StateColors

HELP = [
    ("t ROW COL", "Toggle a pixel with the current intensity"),
    ("i LEVEL", "Select intensity (off/quarter/mid/full)"),
    ("clear", "Turn every pixel off"),
    ("load FILE", "Load a JSON 9x24 matrix of 0-3 values"),
    ("scan", "Discover devices"),
    ("select N", "Select device N from the last scan"),
    ("connect", "Connect to the selected device"),
    ("disconnect", "Disconnect and rescan"),
    ("display", "Send the grid to the glasses"),
    ("show", "Show status and grid"),
    ("quit", "Exit"),
]

def print_help(glasses: GlassesDesigner):
    table = Table(title="Commands")
    table.add_column("Command", style=StateColors.HIGHLIGHT)
    table.add_column("Action")
    for command, action in HELP:
        table.add_row(command, action)
    glasses.console.print(table)

def print_devices(glasses: GlassesDesigner):
    for index, device in enumerate(glasses.devices):
        glasses.console.print(f"  [{StateColors.HIGHLIGHT}]{index}[/{StateColors.HIGHLIGHT}] {device}")

async def handle(glasses: GlassesDesigner, command: str, args) -> bool:
    """Run one command, returns False to exit"""
    if command in ("q", "quit", "exit"):
        return False
    if command == "t" and len(args) == 2:
        level = glasses.toggle_pixel(int(args[0]), int(args[1]))
        glasses.console.print(f"Pixel ({args[0]}, {args[1]}) is now {level.value}")
    elif command == "i" and len(args) == 1:
        glasses.select_intensity(args[0])
    elif command == "clear":
        glasses.clear()
    elif command == "load" and len(args) == 1:
        with open(args[0]) as f:
            glasses.load_frame(json.load(f))
    elif command == "scan":
        if await glasses.refresh_devices():
            print_devices(glasses)
    elif command == "select" and len(args) == 1:
        glasses.select_device(int(args[0]))
    elif command == "connect":
        await glasses.connect()
    elif command == "disconnect":
        if await glasses.disconnect():
            print_devices(glasses)
    elif command == "display":
        await glasses.display()
    elif command == "show":
        glasses.show_status()
    else:
        print_help(glasses)
    return True

async def main():
    async with GlassesDesigner() as glasses:
        print_help(glasses)
        await glasses.refresh_devices()
        print_devices(glasses)

        while True:
            line = await asyncio.to_thread(
                Prompt.ask, f"[{StateColors.INFO}]{glasses.brush.intensity.value}[/{StateColors.INFO}]"
            )
            parts = line.split()
            if not parts:
                continue
            try:
                if not await handle(glasses, parts[0].lower(), parts[1:]):
                    break
            except (ValueError, IndexError, OSError) as e:
                glasses.logger.error(f"Invalid command: {e}")

if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nExited by user")
