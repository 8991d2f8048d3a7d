from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional
import logging

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from menu_maintenance.core.config import settings
from menu_maintenance.services.errors import ConfigurationError
from menu_maintenance.services.store import MenuStore
from menu_maintenance.utils.logger import db_logger

logger = logging.getLogger(__name__)


def create_menu_engine(database_url: Optional[str] = None, **engine_kwargs) -> AsyncEngine:
    """Create the async engine for the menu database."""
    url = database_url or settings.async_database_url
    if not url:
        raise ConfigurationError(
            f"No database URL configured for environment '{settings.ENVIRONMENT}'"
        )

    engine_kwargs.setdefault("echo", settings.DB_ECHO)
    engine_kwargs.setdefault("pool_pre_ping", settings.DB_POOL_PRE_PING)

    logger.info(f"Creating async engine with URL: {url[:50]}...")
    return create_async_engine(url, **engine_kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Keep created rows readable after each commit
        autoflush=False,
    )


@asynccontextmanager
async def open_menu_store(
    database_url: Optional[str] = None,
    engine: Optional[AsyncEngine] = None,
) -> AsyncGenerator[MenuStore, None]:
    """
    Acquire the database connection for one maintenance run.

    The session is closed and, when this function created it, the engine
    disposed on every exit path.

    Args:
        database_url: Overrides the URL derived from settings
        engine: Use an existing engine instead of creating one (left open)
    """
    owns_engine = engine is None
    if owns_engine:
        engine = create_menu_engine(database_url)

    session_factory = create_session_factory(engine)
    db_logger.info("Database session opened", environment=settings.ENVIRONMENT)
    try:
        async with session_factory() as session:
            yield MenuStore(session)
    finally:
        if owns_engine:
            await engine.dispose()
        db_logger.info("Database connection released")
