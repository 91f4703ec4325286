from fastapi import APIRouter, Request

from app.navguard.core.error_catalog import ErrorCatalog
from app.navguard.core.errors import error_response

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    trace_id = getattr(request.state, "trace_id", "")
    return {"status": "ok", "trace_id": trace_id}


@router.get("/ready")
async def ready(request: Request):
    trace_id = getattr(request.state, "trace_id", "")
    registry = getattr(request.app.state, "navigation_registry", None)
    if registry is None or not registry.names():
        return error_response(
            code=ErrorCatalog.NAVIGATION_UNAVAILABLE.code,
            message=ErrorCatalog.NAVIGATION_UNAVAILABLE.message,
            details=None,
            trace_id=trace_id,
            status_code=ErrorCatalog.NAVIGATION_UNAVAILABLE.status_code,
        )
    return {"status": "ready", "families": registry.names(), "trace_id": trace_id}
