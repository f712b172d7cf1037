"""
Example of sending a frame to Chemion glasses

Frames are 9 rows of 24 pixels, each pixel one of 0 (off), 1 (quarter),
2 (mid) or 3 (full). The service encodes the frame into the UART command
understood by the glasses before it can be displayed.
"""

import asyncio
import sys
from connector import GlassesDesigner
from utils.constants import Intensity

# Two hearts, one per lens
HEART = [
    "  ##  ##  ",
    " ######## ",
    " ######## ",
    "  ######  ",
    "   ####   ",
    "    ##    ",
]

async def main(device_index: int = 0):
    async with GlassesDesigner() as glasses:
        if not await glasses.refresh_devices():
            return
        if not glasses.select_device(device_index) or not await glasses.connect():
            return

        for row, line in enumerate(HEART, start=1):
            for offset, level in ((1, Intensity.FULL), (13, Intensity.MID)):
                for col, char in enumerate(line):
                    if char == "#":
                        glasses.set_pixel(row, offset + col, level)

        glasses.show_status()
        await glasses.display()
        await asyncio.sleep(5)

        # Blank the glasses before leaving
        glasses.clear()
        await glasses.display()
        await glasses.disconnect()

if __name__ == "__main__":
    try:
        asyncio.run(main(int(sys.argv[1]) if len(sys.argv) > 1 else 0))
    except KeyboardInterrupt:
        print("\nExited by user")
