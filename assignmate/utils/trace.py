from __future__ import annotations

import uuid
from contextvars import ContextVar

import structlog
from fastapi import Request, status
from fastapi.responses import ORJSONResponse

from assignmate.core.logging import get_logger

TRACE_HEADER = "x-trace-id"

trace_id_ctx: ContextVar[str] = ContextVar("trace_id", default="")
logger = get_logger(__name__)


def make_trace_id() -> str:
    return uuid.uuid4().hex


async def trace_context_middleware(request: Request, call_next):
    """Bind a per-request trace id and echo it on every response.

    Exceptions that no handler converted are answered here, so the 500 keeps the
    header and its log event carries the request's trace id.
    """
    trace_id = request.headers.get(TRACE_HEADER) or make_trace_id()
    token = trace_id_ctx.set(trace_id)
    structlog.contextvars.bind_contextvars(trace_id=trace_id)
    try:
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception("unhandled_exception", error=str(exc), path=request.url.path)
            response = ORJSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": "Internal server error"},
            )
        response.headers[TRACE_HEADER] = trace_id
        return response
    finally:
        structlog.contextvars.unbind_contextvars("trace_id")
        trace_id_ctx.reset(token)


def get_trace_id() -> str:
    return trace_id_ctx.get() or make_trace_id()
