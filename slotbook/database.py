"""Database engine, session factory and transaction boundary."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncGenerator

from sqlalchemy import DateTime
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.orm.exc import StaleDataError
from sqlalchemy.types import TypeDecorator

from slotbook.config import get_settings
from slotbook.core.clock import ensure_utc
from slotbook.core.errors import ConflictError

settings = get_settings()
logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base for all models."""

    pass


class UTCDateTime(TypeDecorator):
    """Timestamp column that always hands back aware UTC datetimes.

    Some backends (SQLite) drop the offset on the way in; values are
    normalized to UTC before binding so stored instants compare correctly.
    """

    impl = DateTime
    cache_ok = True

    def __init__(self) -> None:
        super().__init__(timezone=True)

    def process_bind_param(self, value: datetime | None, dialect) -> datetime | None:
        if value is None:
            return None
        return ensure_utc(value)

    def process_result_value(self, value: datetime | None, dialect) -> datetime | None:
        if value is None:
            return None
        return ensure_utc(value)


engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a request-scoped session."""
    async with async_session_maker() as session:
        yield session


@asynccontextmanager
async def run_in_transaction(db: AsyncSession) -> AsyncGenerator[AsyncSession, None]:
    """All-or-nothing unit of work on ``db``.

    Commits when the block exits cleanly, rolls back otherwise. A version
    mismatch on a versioned row or a unique-constraint hit surfaces as
    ConflictError; any other store failure propagates unchanged.
    """
    try:
        yield db
        await db.commit()
    except StaleDataError as e:
        await db.rollback()
        logger.warning(f"Optimistic version check failed: {e}")
        raise ConflictError("Slot was modified concurrently. Please retry.") from e
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"Integrity violation: {e.orig}")
        raise ConflictError("Request conflicts with existing data") from e
    except Exception:
        await db.rollback()
        raise
