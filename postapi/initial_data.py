"""Create the posts table for local / dev databases."""

import logging

from postapi.core.config import get_settings
from postapi.core.db import init_db
from postapi.core.pool import pool_from_settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    logger.info("Creating initial data")
    pool = pool_from_settings(get_settings())
    try:
        init_db(pool)
    finally:
        pool.dispose()
    logger.info("Initial data created")


if __name__ == "__main__":
    main()
