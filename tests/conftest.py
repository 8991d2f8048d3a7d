"""
Test configuration and fixtures for pytest.

Integration tests run the procedures against an in-memory SQLite database
(aiosqlite) built from the ORM metadata; every test gets a fresh database.
"""

import pytest
import pytest_asyncio
from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from menu_maintenance.core.catalog import BURGERS, FINGER_FOOD, KIDS_MENU, VIANDES
from menu_maintenance.db.session import open_menu_store
from menu_maintenance.models import Base
from menu_maintenance.services.store import MenuStore


@pytest.fixture
def async_test_db_url() -> str:
    """Get the async test database URL."""
    return "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def async_engine(async_test_db_url):
    """Create an async engine with all menu tables."""
    engine = create_async_engine(
        async_test_db_url,
        echo=False,
        poolclass=StaticPool,
        connect_args={
            "check_same_thread": False,
        },
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def menu_store(async_engine) -> AsyncGenerator[MenuStore, None]:
    """A MenuStore bound to the test database."""
    async with open_menu_store(engine=async_engine) as store:
        yield store


@pytest_asyncio.fixture
async def dish_categories(menu_store: MenuStore):
    """The dish categories of the production database, with their real ids."""
    rows = [
        (FINGER_FOOD, "FINGER FOOD"),
        (BURGERS, "BURGERS avec FRITES MAISON"),
        (VIANDES, "VIANDES"),
        (KIDS_MENU, "KIDS MENU"),
    ]
    categories = {}
    for category_id, name in rows:
        categories[category_id] = await menu_store.categories.create(
            {"category_id": category_id, "name": name, "type": "dish"}
        )
    return categories
