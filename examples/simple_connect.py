"""
Simple connection example
"""

import asyncio
from connector import GlassesDesigner

async def main():
    async with GlassesDesigner() as glasses:
        if await glasses.refresh_devices() and glasses.devices:
            glasses.select_device(0)
            await glasses.connect()
        glasses.show_status()

if __name__ == "__main__":
    asyncio.run(main())
