#!/usr/bin/env python3
"""
Replace the whole dish catalog with the fixed new menu.

Deletes every dish (and the links that reference dishes), restarts dish ids at
1 and inserts NEW_MENU_ITEMS with prices converted from rupees to euros.
"""

import asyncio
import os
import sys

# Add the project root to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from menu_maintenance.db.session import open_menu_store
from menu_maintenance.services.errors import MenuMaintenanceError, describe_error
from menu_maintenance.services.replacement import replace_menu
from menu_maintenance.utils.logger import menu_logger


async def main() -> int:
    menu_logger.info("Starting menu replacement...")
    try:
        async with open_menu_store() as store:
            result = await replace_menu(store)
    except MenuMaintenanceError as e:
        menu_logger.error(f"Error replacing menu: {describe_error(e)}")
        return 1
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
