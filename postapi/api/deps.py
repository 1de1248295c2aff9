from typing import Annotated

from fastapi import Depends, Request

from postapi.core.pool import ConnectionPool


def get_pool(request: Request) -> ConnectionPool:
    """The pool injected by create_app (app.state.pool)."""
    return request.app.state.pool


PoolDep = Annotated[ConnectionPool, Depends(get_pool)]
