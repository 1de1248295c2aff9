"""
Connection pool for the application database.

A bounded SQLAlchemy QueuePool with pre-ping on checkout, wrapped in a small
handle. The handle is built once at startup and injected into the app
(app.state.pool); handlers only ever call acquire().
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import QueuePool
from sqlmodel import Session

from postapi.core.config import Settings
from postapi.core.errors import PoolUnavailableError

_log = logging.getLogger(__name__)


class ConnectionPool:
    """Shared handle over the engine's pool. Safe to use from concurrent handlers."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @property
    def engine(self) -> Engine:
        return self._engine

    @contextmanager
    def acquire(self) -> Generator[Session, None, None]:
        """
        Check out one connection and yield a Session bound to it.

        The connection belongs to the caller until the block exits, then goes
        back to the pool. Raises PoolUnavailableError when no live connection
        can be checked out within the pool timeout.
        """
        try:
            conn = self._engine.connect()
        except SQLAlchemyError as e:
            _log.warning("Connection checkout failed: %s", e)
            raise PoolUnavailableError(e) from e
        try:
            with Session(bind=conn) as session:
                yield session
        finally:
            conn.close()

    def ping(self) -> bool:
        """
        Check out a connection and run SELECT 1. Returns True if ok.

        Uses the same bounded pool as the handlers: when every connection is
        checked out this waits up to pool_timeout, then returns False.
        """
        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError:
            _log.warning("Database ping failed", exc_info=True)
            return False

    def stats(self) -> dict[str, int]:
        """Return pool counters for monitoring (empty for non-queue pools)."""
        pool = self._engine.pool
        if not isinstance(pool, QueuePool):
            return {}
        return {
            "size": pool.size(),
            "checked_in": pool.checkedin(),
            "checked_out": pool.checkedout(),
            "overflow": pool.overflow(),
        }

    def dispose(self) -> None:
        """Close all idle pooled connections."""
        self._engine.dispose()


def get_connection_pool(
    url: str,
    *,
    pool_size: int = 10,
    max_overflow: int = 0,
    pool_timeout: float = 30.0,
    pool_recycle: int = 1800,
) -> ConnectionPool:
    """
    Build the pool from a database URL.

    Connections are opened lazily; an unreachable database shows up on the
    first checkout (see backend_pre_start).
    """
    engine = create_engine(
        url,
        pool_pre_ping=True,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_timeout=pool_timeout,
        pool_recycle=pool_recycle,
    )
    _log.info(
        "Connection pool created for %s (size=%d, max_overflow=%d)",
        engine.url.render_as_string(hide_password=True),
        pool_size,
        max_overflow,
    )
    return ConnectionPool(engine)


def pool_from_settings(settings: Settings) -> ConnectionPool:
    return get_connection_pool(
        settings.DATABASE_URL,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
    )
