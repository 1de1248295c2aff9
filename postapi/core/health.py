"""
Readiness probe: can the service handle traffic? (a live connection can be checked out)
"""

import logging

from postapi.core.pool import ConnectionPool

logger = logging.getLogger(__name__)


def readiness_check(pool: ConnectionPool) -> tuple[bool, list[str]]:
    """
    Returns (ok, list of failed dependencies).

    A saturated pool counts as not ready, reported after DB_POOL_TIMEOUT.
    """
    failures: list[str] = []

    if not pool.ping():
        failures.append("database")

    if failures:
        logger.warning("Readiness check failed: %s", ", ".join(failures))
    return (len(failures) == 0, failures)
