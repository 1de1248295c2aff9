import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from postapi.api.main import api_router
from postapi.core.config import Settings
from postapi.core.errors import StorageError
from postapi.core.pool import ConnectionPool

_logger = logging.getLogger(__name__)


def create_app(pool: ConnectionPool, settings: Settings | None = None) -> FastAPI:
    """
    Build the application around an already constructed pool.

    The pool is stored on app.state and reaches handlers through
    api.deps.get_pool; it is disposed when the app shuts down.
    """
    expose_errors = settings is not None and settings.ENVIRONMENT == "local"

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        _logger.info("Disposing connection pool %s", pool.stats())
        pool.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME if settings else "postapi",
        lifespan=lifespan,
    )
    app.state.pool = pool

    # -----------------------------------------------------------------------
    # Exception handlers: standardized {"detail": ...} error bodies
    # -----------------------------------------------------------------------

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Return 400 with a human-readable detail string instead of raw Pydantic errors."""
        messages = []
        for err in exc.errors():
            loc = " → ".join(str(l) for l in err.get("loc", []) if l != "body")
            msg = err.get("msg", "Invalid value")
            messages.append(f"{loc}: {msg}" if loc else msg)
        return JSONResponse(
            status_code=400,
            content={"detail": "; ".join(messages)},
        )

    @app.exception_handler(StorageError)
    async def storage_exception_handler(
        request: Request, exc: StorageError
    ) -> JSONResponse:
        """Pool checkout and query failures: log the cause, return 500 with a safe message."""
        _logger.error(
            "Storage error on %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc.cause,
        )
        detail = exc.message
        if expose_errors and exc.cause is not None:
            detail = f"{exc.message}: {exc.cause}"
        return JSONResponse(status_code=500, content={"detail": detail})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unhandled exceptions: log and return 500 with safe message."""
        _logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        detail = "Internal server error"
        if expose_errors:
            detail = f"Internal server error: {exc}"
        return JSONResponse(status_code=500, content={"detail": detail})

    app.include_router(api_router)
    return app
