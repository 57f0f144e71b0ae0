"""Shared fixtures: a throwaway SQLite store per test and registered users."""

import os

os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-long-enough-for-hs256-signing")

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

import slotbook.models  # noqa: F401
from slotbook.database import Base
from slotbook.services.user import UserService


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'slotbook.db'}",
        connect_args={"timeout": 30},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def run(session_maker):
    """Call one service method in its own session, like one request would."""

    async def _run(service_cls, method: str, *args, **kwargs):
        async with session_maker() as db:
            return await getattr(service_cls(db), method)(*args, **kwargs)

    return _run


@pytest_asyncio.fixture
async def alice(run):
    return await run(UserService, "register", "  Alice@Example.com ", "password123", "Alice")


@pytest_asyncio.fixture
async def bob(run):
    return await run(UserService, "register", "bob@example.com", "password123", "Bob")


@pytest_asyncio.fixture
async def carol(run):
    return await run(UserService, "register", "carol@example.com", "password123", "Carol")
