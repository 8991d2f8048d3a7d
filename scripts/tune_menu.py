#!/usr/bin/env python3
"""
One-off category reorganization.

Renames category 25 to "Burgers and Pizzas", creates "Pasta/Sandwiches" if
needed and splits VIANDES between meats, the kids menu and pasta/sandwiches.
Safe to run more than once.
"""

import asyncio
import os
import sys

# Add the project root to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from menu_maintenance.db.session import open_menu_store
from menu_maintenance.services.errors import MenuMaintenanceError, describe_error
from menu_maintenance.services.reorg import tune_categories
from menu_maintenance.utils.logger import reorg_logger


async def main() -> int:
    reorg_logger.info("Starting category tuning...")
    try:
        async with open_menu_store() as store:
            result = await tune_categories(store)
    except MenuMaintenanceError as e:
        reorg_logger.error(f"Error tuning categories: {describe_error(e)}")
        return 1
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
