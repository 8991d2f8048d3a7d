"""
Base record service for async database operations.

This module provides the filter-driven CRUD operations the maintenance
procedures issue against each menu table. Every mutation commits on its own.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, func
import logging

from menu_maintenance.models.base import Base
from menu_maintenance.services.errors import STORE_ERRORS, ErrorClassifier

ModelType = TypeVar("ModelType", bound=Base)

logger = logging.getLogger(__name__)


class AsyncRecordService(Generic[ModelType]):
    """
    Record access for one table, bound to an async session.

    Provides:
    - bulk delete by filter (or of every row)
    - single-record create
    - update by filter
    - find first / find all by filter
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Initialize the service with a SQLAlchemy model and the session to use.

        Args:
            model: The SQLAlchemy model class this service operates on
            db: Async database session shared by the whole run
        """
        self.model = model
        self.db = db

    @property
    def name(self) -> str:
        return self.model.__name__

    def _apply_filters(self, stmt, filters: Optional[Dict[str, Any]]):
        """Add an equality (or IN for lists) clause per field:value pair."""
        if not filters:
            return stmt
        for field, value in filters.items():
            if not hasattr(self.model, field):
                # An ignored filter would widen a delete to the whole table
                raise ValueError(f"{self.name} has no column '{field}'")
            column = getattr(self.model, field)
            if isinstance(value, (list, tuple, set, frozenset)):
                stmt = stmt.where(column.in_(list(value)))
            else:
                stmt = stmt.where(column == value)
        return stmt

    async def _fail(self, error: Exception, action: str):
        try:
            await self.db.rollback()
        except STORE_ERRORS as rollback_error:
            # A dead connection cannot roll back; the failure above is what gets raised
            logger.warning(f"Rollback after failed {action} {self.name} did not complete: {rollback_error}")
        logger.error(f"Error {action} {self.name}: {error}")
        raise ErrorClassifier.wrap(error, f"{action.capitalize()} {self.name}") from error

    async def find_first(self, filters: Optional[Dict[str, Any]] = None) -> Optional[ModelType]:
        """
        Get the first record matching the filters.

        Args:
            filters: Dictionary of field:value pairs

        Returns:
            Model instance or None if nothing matches
        """
        try:
            stmt = self._apply_filters(select(self.model), filters).limit(1)
            result = await self.db.execute(stmt)
            return result.scalars().first()
        except STORE_ERRORS as e:
            await self._fail(e, "finding")

    async def find_many(
        self,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[str] = None
    ) -> List[ModelType]:
        """
        Get every record matching the filters.

        Args:
            filters: Dictionary of field:value pairs, all rows when omitted
            order_by: Field name to order by (prefix with '-' for descending)

        Returns:
            List of model instances
        """
        try:
            stmt = self._apply_filters(select(self.model), filters)

            if order_by:
                field_name = order_by.lstrip('-')
                if hasattr(self.model, field_name):
                    column = getattr(self.model, field_name)
                    stmt = stmt.order_by(column.desc() if order_by.startswith('-') else column)

            result = await self.db.execute(stmt)
            return list(result.scalars().all())
        except STORE_ERRORS as e:
            await self._fail(e, "listing")

    async def exists(self, filters: Dict[str, Any]) -> bool:
        return await self.find_first(filters) is not None

    async def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        try:
            stmt = self._apply_filters(select(func.count()).select_from(self.model), filters)
            result = await self.db.execute(stmt)
            return result.scalar()
        except STORE_ERRORS as e:
            await self._fail(e, "counting")

    async def create(self, values: Dict[str, Any]) -> ModelType:
        """
        Create a new record.

        Args:
            values: Column values for the new row

        Returns:
            Created model instance with its generated key loaded
        """
        try:
            db_obj = self.model(**values)
            self.db.add(db_obj)
            await self.db.commit()
            await self.db.refresh(db_obj)
            return db_obj
        except STORE_ERRORS as e:
            await self._fail(e, "creating")

    async def update_many(self, filters: Dict[str, Any], values: Dict[str, Any]) -> int:
        """
        Update every record matching the filters.

        Returns:
            Number of rows updated
        """
        try:
            stmt = self._apply_filters(update(self.model), filters).values(**values)
            result = await self.db.execute(stmt)
            await self.db.commit()
            return result.rowcount
        except STORE_ERRORS as e:
            await self._fail(e, "updating")

    async def delete_many(self, filters: Optional[Dict[str, Any]] = None) -> int:
        """
        Delete every record matching the filters, or the whole table when
        no filters are given.

        Returns:
            Number of rows deleted
        """
        try:
            stmt = self._apply_filters(delete(self.model), filters)
            result = await self.db.execute(stmt)
            await self.db.commit()
            return result.rowcount
        except STORE_ERRORS as e:
            await self._fail(e, "deleting")
