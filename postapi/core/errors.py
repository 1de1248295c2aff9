"""
Storage error types.

Everything that goes wrong between a handler and the database is raised as a
StorageError subclass, so the transport layer maps all of it with one handler.
"""


class StorageError(Exception):
    """Base for pool checkout and query failures. ``message`` is safe to return to clients."""

    message = "Database error"

    def __init__(self, cause: BaseException | None = None) -> None:
        self.cause = cause
        super().__init__(str(cause) if cause is not None else self.message)


class PoolUnavailableError(StorageError):
    """No live connection could be checked out (database down, pre-ping failed, pool timeout)."""

    message = "Database unavailable"


class QueryError(StorageError):
    """A query failed after a connection was checked out."""

    message = "Database error"
