"""
The persistence handle passed into the maintenance procedures.

`MenuStore` bundles one `AsyncRecordService` per menu table over a single
async session, plus the raw-statement escape hatch used to reset the dish id
sequence after a full wipe.
"""

from typing import Any, Dict, Optional
import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from menu_maintenance.models import Category, Dish, DishCategory, DishCuisson, DishIngredient
from menu_maintenance.services.base import AsyncRecordService
from menu_maintenance.services.errors import STORE_ERRORS, ErrorClassifier

logger = logging.getLogger(__name__)

DISH_ID_SEQUENCE = "dishes_dish_id_seq"


class MenuStore:
    """Record access for dishes, categories and their join tables."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.dishes = AsyncRecordService(Dish, db)
        self.categories = AsyncRecordService(Category, db)
        self.dish_categories = AsyncRecordService(DishCategory, db)
        self.dish_ingredients = AsyncRecordService(DishIngredient, db)
        self.dish_cuissons = AsyncRecordService(DishCuisson, db)

    @property
    def dialect_name(self) -> str:
        return self.db.get_bind().dialect.name

    async def execute_raw(self, statement: str, params: Optional[Dict[str, Any]] = None) -> int:
        """Run one raw SQL statement and commit; returns the affected row count."""
        try:
            result = await self.db.execute(text(statement), params or {})
            await self.db.commit()
            return result.rowcount
        except STORE_ERRORS as e:
            try:
                await self.db.rollback()
            except STORE_ERRORS as rollback_error:
                logger.warning(f"Rollback after failed raw statement did not complete: {rollback_error}")
            logger.error(f"Error executing raw statement: {e}")
            raise ErrorClassifier.wrap(e, "Raw statement") from e

    async def reset_dish_sequence(self) -> bool:
        """
        Restart dish ids at 1. Only valid once the dishes table is empty.

        Returns:
            False when the backend has no known way to reset the counter
        """
        dialect = self.dialect_name
        if dialect == "postgresql":
            await self.execute_raw(f"ALTER SEQUENCE {DISH_ID_SEQUENCE} RESTART WITH 1")
        elif dialect == "sqlite":
            await self.execute_raw(
                "DELETE FROM sqlite_sequence WHERE name = :table",
                {"table": Dish.__tablename__},
            )
        else:
            logger.warning(f"Dish id sequence reset not supported on {dialect}")
            return False
        return True

    async def link_exists(self, category_id: int, dish_id: int) -> bool:
        return await self.dish_categories.exists({"category_id": category_id, "dish_id": dish_id})

    async def ensure_link(self, category_id: int, dish_id: int) -> bool:
        """Create the (category, dish) link unless it already exists; True if created."""
        if await self.link_exists(category_id, dish_id):
            return False
        await self.dish_categories.create({"category_id": category_id, "dish_id": dish_id})
        return True

    async def unlink(self, category_id: int, dish_id: int) -> int:
        return await self.dish_categories.delete_many({"category_id": category_id, "dish_id": dish_id})
