import logging

from sqlmodel import SQLModel

from postapi.core.pool import ConnectionPool

# Import models so the posts table is registered on SQLModel.metadata
from postapi.models import Post  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(pool: ConnectionPool) -> None:
    """Create the posts table if it does not exist. No migrations are run."""
    SQLModel.metadata.create_all(pool.engine)
    logger.info("Tables ensured: %s", ", ".join(sorted(SQLModel.metadata.tables)))
