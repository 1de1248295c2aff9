from fastapi import APIRouter
from fastapi.responses import JSONResponse

from postapi.api.deps import PoolDep
from postapi.core.health import readiness_check

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=str)
def health() -> str:
    """
    Liveness probe. Always "ok".

    Takes no pool dependency, so it answers even when the database is down.
    """
    return "ok"


@router.get("/ready", response_model=None)
def ready(pool: PoolDep) -> bool | JSONResponse:
    """
    Readiness probe. Can the service handle traffic?

    Returns 200 with true when a live connection can be checked out; 503 otherwise.
    With every pooled connection busy the answer waits up to DB_POOL_TIMEOUT.
    """
    ok, failures = readiness_check(pool)
    if not ok:
        return JSONResponse(
            status_code=503,
            content={"success": False, "message": "Service not ready", "data": failures},
        )
    return True
