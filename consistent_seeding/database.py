# consistent_seeding/database.py

"""
Async engine and session management for seeder runs.
"""

import asyncio
import logging
from typing import Optional, AsyncGenerator, Any
from contextlib import asynccontextmanager

from sqlalchemy import MetaData, text
from sqlalchemy.ext.asyncio import (
    create_async_engine,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
)

from .config import settings

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Manages the async SQLAlchemy engine and session factory."""

    def __init__(self) -> None:
        self.engine: Optional[AsyncEngine] = None
        self.AsyncSessionLocal: Optional[async_sessionmaker] = None
        self._is_initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._is_initialized

    async def initialize(
        self,
        database_url: Optional[str] = None,
        echo: Optional[bool] = None,
        max_retries: int = 3,
        retry_delay: float = 1,
        **engine_kwargs: Any,
    ) -> None:
        """
        Create the async engine and session factory, retrying on failure.
        """
        if self.is_initialized:
            logger.warning("Database already initialized")
            return

        db_url = database_url or settings.DATABASE_URL
        if not db_url:
            raise ValueError("Database URL is required and must be async driver compatible")

        # Convert sync prefix to async if needed
        if db_url.startswith("postgresql://"):
            db_url = db_url.replace("postgresql://", "postgresql+asyncpg://", 1)
        elif db_url.startswith("sqlite://"):
            db_url = db_url.replace("sqlite://", "sqlite+aiosqlite://", 1)

        last_error = None
        for attempt in range(max_retries):
            try:
                self.engine = create_async_engine(
                    db_url,
                    echo=settings.DB_ECHO if echo is None else echo,
                    pool_pre_ping=True,
                    **engine_kwargs,
                )
                self.AsyncSessionLocal = async_sessionmaker(
                    bind=self.engine, expire_on_commit=False, class_=AsyncSession
                )

                await self._test_connection()

                self._is_initialized = True
                logger.info("Async database initialized successfully")
                return
            except Exception as e:
                last_error = e
                logger.error(
                    f"Database initialization attempt {attempt + 1}/{max_retries} failed: {e}"
                )
                if self.engine is not None:
                    await self.engine.dispose()
                    self.engine = None
                if attempt < max_retries - 1:
                    await asyncio.sleep(retry_delay * (attempt + 1))

        raise RuntimeError(
            f"Failed to initialize async database after {max_retries} attempts"
        ) from last_error

    async def _test_connection(self) -> None:
        """Run a lightweight query to ensure connectivity."""
        engine = self.engine
        if engine is None:
            raise RuntimeError("Engine not initialized")

        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.debug("Database connection test successful")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Async context manager returning a plain AsyncSession. Rolls back on error.
        """
        if not self.is_initialized or not self.AsyncSessionLocal:
            raise RuntimeError("Database not initialized. Call initialize() first.")

        async with self.AsyncSessionLocal() as session:
            try:
                yield session
            except Exception as e:
                logger.error(f"Async DB session error: {e}")
                await session.rollback()
                raise

    @asynccontextmanager
    async def get_db_transaction(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Async context manager with commit on success and rollback on failure.
        """
        if not self.is_initialized or not self.AsyncSessionLocal:
            raise RuntimeError("Database not initialized. Call initialize() first.")

        async with self.AsyncSessionLocal() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logger.error(f"Transaction error ({type(e).__name__}): {e}")
                await session.rollback()
                raise

    async def create_all_tables(self, metadata: MetaData) -> None:
        """Create every table in ``metadata`` that does not exist yet."""
        if not self.is_initialized or self.engine is None:
            raise RuntimeError("Database not initialized")

        async with self.engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
        logger.info(f"Created tables: {', '.join(sorted(metadata.tables))}")

    async def close(self) -> None:
        """Dispose the async engine."""
        if self.engine:
            await self.engine.dispose()
            logger.info("Database connections closed")
        self.engine = None
        self.AsyncSessionLocal = None
        self._is_initialized = False
