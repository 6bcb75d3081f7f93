from functools import lru_cache
from typing import AsyncGenerator, Optional, Type
import enum

from sqlalchemy import Enum as SQLEnum
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from travel_hub.config import get_settings

# SQLAlchemy declarative base for models
Base = declarative_base()


def enum_column(enum_cls: Type[enum.Enum]) -> SQLEnum:
    """String-backed enum column that stores member values, not names."""
    return SQLEnum(
        enum_cls,
        native_enum=False,
        length=32,
        values_callable=lambda members: [m.value for m in members],
        validate_strings=True,
    )


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    db_settings = get_settings().database
    return create_async_engine(
        db_settings.url,
        echo=db_settings.echo,
        pool_pre_ping=db_settings.pool_pre_ping,
        future=True,
    )


@lru_cache(maxsize=1)
def get_session_factory() -> async_sessionmaker:
    return async_sessionmaker(
        bind=get_engine(), autoflush=False, expire_on_commit=False
    )


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with get_session_factory()() as session:
        yield session


async def create_all_tables(engine: Optional[AsyncEngine] = None) -> None:
    """Create any missing tables; used on startup in development."""
    import travel_hub.models  # noqa: F401  registers all tables on Base

    async with (engine or get_engine()).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
