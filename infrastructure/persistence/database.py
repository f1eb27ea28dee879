import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from infrastructure.persistence.models.transaction import Base

logger = logging.getLogger(__name__)


class Database:
    """Async engine plus a session factory for the SQL transaction store."""

    def __init__(self, db_url: str, echo: bool = False):
        engine_kwargs = {'echo': echo}
        url = make_url(db_url)
        if url.get_backend_name() == 'sqlite' and url.database in (None, '', ':memory:'):
            # every connection to an in-memory SQLite database would otherwise see a fresh, empty one
            engine_kwargs['poolclass'] = StaticPool

        self.engine = create_async_engine(db_url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info('Transaction tables ready')

    async def drop_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def close(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Session that commits on success, so a completed save is visible to every later read."""
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
