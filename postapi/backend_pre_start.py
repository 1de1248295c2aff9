import logging

from sqlmodel import select

from postapi.core.errors import PoolUnavailableError
from postapi.core.pool import ConnectionPool

logger = logging.getLogger(__name__)


def init(pool: ConnectionPool) -> None:
    """Check out one connection and run SELECT 1. Raises PoolUnavailableError if the DB is unreachable."""
    try:
        with pool.acquire() as session:
            session.exec(select(1)).first()
    except PoolUnavailableError:
        logger.error("Database is not reachable")
        raise
    logger.info("Database connection verified %s", pool.stats())
