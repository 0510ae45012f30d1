import contextlib
import logging
from collections.abc import AsyncIterator
from pathlib import Path

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from wedding_rsvp.config.settings import settings
from wedding_rsvp.models.base import BaseModel
from wedding_rsvp.rsvps.repository import orm_models  # noqa: F401  registers the rsvps table

logger = logging.getLogger(__name__)


def create_engine(url: str) -> AsyncEngine:
    use_echo = settings.log_db
    connect_args = {}
    if "sqlite" in url:
        connect_args = {"timeout": 15}
    return create_async_engine(
        url,
        echo=use_echo,
        future=True,  # use the sqlalchemy 2.0 classes
        connect_args=connect_args,
    )


def generate_sqlite_dsn(db_path: str | Path) -> str:
    return f"sqlite+aiosqlite:///{db_path}"


class Database:
    """Owns the engine and session factory for one SQLite store.

    Built once per application and handed to the read/write models,
    so tests can point the app at a temporary file.
    """

    def __init__(self, url: str, location: str | None = None) -> None:
        self.location = location or url
        self.engine = create_engine(url)
        self.session_maker = async_sessionmaker(self.engine, expire_on_commit=False)

    @classmethod
    def from_path(cls, db_path: str | Path) -> "Database":
        return cls(generate_sqlite_dsn(db_path), location=str(db_path))

    async def initialize(self) -> None:
        """Create the tables if they are missing. Safe to call repeatedly."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(BaseModel.metadata.create_all)
        except Exception:
            logger.exception(f"Failed to open database at {self.location}")
            raise
        logger.info(f"Database ready at {self.location}")

    async def ping(self) -> bool:
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.warning(f"Database ping failed for {self.location}: {e}")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()

    @contextlib.asynccontextmanager
    async def session(self, auto_commit: bool = True) -> AsyncIterator[AsyncSession]:
        async with self.session_maker() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                raise e
            else:
                if auto_commit:
                    await session.commit()


def get_database(request: Request) -> Database:
    """Dependency returning the database attached to the running app."""
    return request.app.state.database
