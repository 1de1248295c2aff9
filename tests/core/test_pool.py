"""
Tests for core.pool: get_connection_pool, ConnectionPool.acquire / ping / stats / dispose.

Uses a temporary SQLite file; an unreachable database is simulated with a
path inside a directory that does not exist.
"""

from pathlib import Path

import pytest
from sqlalchemy.exc import ArgumentError
from sqlmodel import select

from postapi.core.config import Settings
from postapi.core.errors import PoolUnavailableError, StorageError
from postapi.core.pool import ConnectionPool, get_connection_pool, pool_from_settings


def _unreachable_pool(tmp_path: Path) -> ConnectionPool:
    return get_connection_pool(f"sqlite:///{tmp_path / 'missing' / 'nope.db'}")


def test_pool_is_built_with_pre_ping(pool: ConnectionPool) -> None:
    assert pool.engine.pool._pre_ping is True


def test_acquire_yields_working_session(pool: ConnectionPool) -> None:
    with pool.acquire() as session:
        assert session.exec(select(1)).first() is not None


def test_acquire_returns_connection_to_pool(pool: ConnectionPool) -> None:
    with pool.acquire():
        assert pool.stats()["checked_out"] == 1
    assert pool.stats()["checked_out"] == 0


def test_acquire_returns_connection_on_error(pool: ConnectionPool) -> None:
    with pytest.raises(RuntimeError):
        with pool.acquire():
            raise RuntimeError("boom")
    assert pool.stats()["checked_out"] == 0


def test_acquire_raises_pool_unavailable(tmp_path: Path) -> None:
    pool = _unreachable_pool(tmp_path)
    with pytest.raises(PoolUnavailableError) as exc_info:
        with pool.acquire():
            pass  # pragma: no cover
    assert isinstance(exc_info.value, StorageError)
    assert exc_info.value.cause is not None
    assert exc_info.value.message == "Database unavailable"


def test_acquire_times_out_when_pool_exhausted(tmp_path: Path) -> None:
    pool = get_connection_pool(
        f"sqlite:///{tmp_path / 'small.db'}",
        pool_size=1,
        max_overflow=0,
        pool_timeout=0.1,
    )
    try:
        with pool.acquire():
            with pytest.raises(PoolUnavailableError):
                with pool.acquire():
                    pass  # pragma: no cover
    finally:
        pool.dispose()


def test_ping(pool: ConnectionPool, tmp_path: Path) -> None:
    assert pool.ping() is True
    assert _unreachable_pool(tmp_path).ping() is False


def test_stats(pool: ConnectionPool) -> None:
    stats = pool.stats()
    assert stats["size"] == 5
    assert stats["checked_out"] == 0
    assert set(stats) == {"size", "checked_in", "checked_out", "overflow"}


def test_invalid_url_raises_at_construction() -> None:
    with pytest.raises(ArgumentError):
        get_connection_pool("not a url")


def test_pool_from_settings(tmp_path: Path) -> None:
    settings = Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 's.db'}",
        DB_POOL_SIZE=3,
        DB_MAX_OVERFLOW=2,
        DB_POOL_TIMEOUT=1.5,
    )
    pool = pool_from_settings(settings)
    try:
        assert pool.stats()["size"] == 3
        assert pool.engine.pool._max_overflow == 2
        assert pool.engine.pool._timeout == 1.5
    finally:
        pool.dispose()


def test_ping_returns_false_when_pool_exhausted(tmp_path: Path) -> None:
    pool = get_connection_pool(
        f"sqlite:///{tmp_path / 'busy.db'}",
        pool_size=1,
        max_overflow=0,
        pool_timeout=0.1,
    )
    try:
        with pool.acquire():
            assert pool.ping() is False
        assert pool.ping() is True
    finally:
        pool.dispose()
