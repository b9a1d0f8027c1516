# tests/conftest.py
import logging

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from consistent_seeding.database import DatabaseManager
from consistent_seeding.generator import new_generator, reset_generator

from .models import Base


def pytest_configure(config):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@pytest.fixture
def database_url(tmp_path) -> str:
    """A throwaway SQLite file per test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'seeding.db'}"


@pytest_asyncio.fixture
async def test_engine(database_url):
    engine = create_async_engine(database_url, echo=False, poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine):
    """Session for a single test; nothing is committed unless the test does it."""
    session_factory = async_sessionmaker(
        bind=test_engine, expire_on_commit=False, class_=AsyncSession
    )
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def db_manager(database_url):
    manager = DatabaseManager()
    await manager.initialize(database_url=database_url, poolclass=NullPool)
    await manager.create_all_tables(Base.metadata)

    yield manager

    await manager.close()


@pytest.fixture
def faker():
    """An isolated generator so tests never depend on the shared one."""
    return new_generator("en_GB")


@pytest.fixture(autouse=True)
def fresh_shared_generator():
    reset_generator()
    yield
    reset_generator()
