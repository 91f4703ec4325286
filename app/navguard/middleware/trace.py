import re
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

TRACE_HEADER = "X-Trace-ID"
_TRACE_ID_PATTERN = re.compile(r"[A-Za-z0-9._:-]{1,128}")


def resolve_trace_id(raw: str | None) -> str:
    """Caller's trace id when it is a plain token, a fresh uuid4 otherwise."""
    if raw and _TRACE_ID_PATTERN.fullmatch(raw):
        return raw
    return str(uuid.uuid4())


class TraceIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        trace_id = resolve_trace_id(request.headers.get(TRACE_HEADER))
        request.state.trace_id = trace_id
        response: Response = await call_next(request)
        response.headers[TRACE_HEADER] = trace_id
        return response
