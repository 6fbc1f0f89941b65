from __future__ import annotations

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.exceptions import HTTPException as StarletteHTTPException

from assignmate.api.v1.router import router as v1_router
from assignmate.core.config import get_settings
from assignmate.core.errors import AssignMateError
from assignmate.core.logging import configure_logging, get_logger
from assignmate.schemas.common import ErrorResponse, HealthResponse
from assignmate.utils.trace import get_trace_id, trace_context_middleware

settings = get_settings()
configure_logging()
logger = get_logger(__name__)

if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn, environment=settings.environment)


app = FastAPI(title=settings.app_name, default_response_class=ORJSONResponse)
app.middleware("http")(trace_context_middleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

Instrumentator().instrument(app).expose(app)


def _error(status_code: int, message: str) -> ORJSONResponse:
    return ORJSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@app.exception_handler(AssignMateError)
async def assignmate_exception_handler(_: Request, exc: AssignMateError):
    if exc.status_code >= 500:
        logger.error("request_failed", error=exc.message, error_type=type(exc).__name__, trace_id=get_trace_id())
    else:
        logger.info("request_rejected", error=exc.message, trace_id=get_trace_id())
    return _error(exc.status_code, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(_: Request, exc: StarletteHTTPException):
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(_: Request, exc: RequestValidationError):
    return _error(400, str(exc))


# Reached only by errors raised outside trace_context_middleware.
@app.exception_handler(Exception)
async def unhandled_exception_handler(_: Request, exc: Exception):
    logger.exception("unhandled_exception", error=str(exc), trace_id=get_trace_id())
    return _error(500, "Internal server error")


@app.on_event("startup")
async def startup_event() -> None:
    logger.info("startup_complete", environment=settings.environment, model=settings.hf_model)


@app.get("/healthz", response_model=HealthResponse)
async def healthz() -> HealthResponse:
    return HealthResponse(status="ok")


app.include_router(v1_router, prefix=settings.api_prefix)
