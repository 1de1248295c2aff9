from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlmodel import Session

from postapi.core.db import init_db
from postapi.core.pool import ConnectionPool, get_connection_pool
from postapi.main import create_app


@pytest.fixture
def pool(tmp_path: Path) -> Generator[ConnectionPool, None, None]:
    """Real pool over a temporary SQLite file, with the posts table created."""
    pool = get_connection_pool(
        f"sqlite:///{tmp_path / 'posts.db'}",
        pool_size=5,
        max_overflow=5,
        pool_timeout=5.0,
    )
    init_db(pool)
    yield pool
    pool.dispose()


@pytest.fixture
def db(pool: ConnectionPool) -> Generator[Session, None, None]:
    with Session(pool.engine) as session:
        yield session


@pytest.fixture
def app(pool: ConnectionPool) -> FastAPI:
    return create_app(pool)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c
