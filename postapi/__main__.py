"""
Process entrypoint: python -m postapi (or the ``postapi`` console script).

Missing configuration or an unreachable database aborts before serving.
"""

import logging
import sys

import sentry_sdk
import uvicorn
from pydantic import ValidationError
from sqlalchemy.exc import ArgumentError

from postapi import backend_pre_start
from postapi.core.config import get_settings
from postapi.core.errors import PoolUnavailableError
from postapi.core.pool import pool_from_settings
from postapi.main import create_app

logger = logging.getLogger("postapi")


def main() -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        logging.basicConfig(level=logging.INFO)
        fields = [".".join(str(l) for l in err["loc"]) for err in e.errors()]
        if "DATABASE_URL" in fields:
            logger.error("Invalid configuration (DATABASE_URL must be set): %s", e)
        else:
            logger.error("Invalid configuration (%s): %s", ", ".join(fields), e)
        return 1

    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    if settings.SENTRY_DSN and settings.ENVIRONMENT != "local":
        sentry_sdk.init(dsn=str(settings.SENTRY_DSN), enable_tracing=True)

    try:
        pool = pool_from_settings(settings)
        backend_pre_start.init(pool)
    except (ArgumentError, PoolUnavailableError) as e:
        logger.error("Could not build connection pool: %s", e)
        return 1

    app = create_app(pool, settings)
    logger.info("Serving on %s:%d", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
