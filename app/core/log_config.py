import logging
import sys
import time
import uuid
from collections.abc import Awaitable, Callable
from typing import Any

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.config import settings

REQUEST_ID_HEADER = "X-Request-ID"

# Polled by load balancers; logging them only adds noise
UNLOGGED_PATHS = frozenset({"/health"})


def _log_level() -> int:
    if settings.DEBUG:
        return logging.DEBUG
    return logging.getLevelNamesMapping().get(settings.LOG_LEVEL.upper(), logging.INFO)


def setup_logging() -> None:
    """Configure structlog for JSON output in production, pretty output in dev.

    Analytics and attendance services log event-style messages
    (``analytics_computed``, ``attendance_recorded``...) with keyword context;
    stdlib loggers such as ``app.core.exceptions`` and uvicorn are rendered
    through the same pipeline.
    """
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.DEBUG:
        render_processors: list[Any] = [structlog.dev.ConsoleRenderer()]
    else:
        # Tracebacks from logger.exception end up as a JSON string field
        render_processors = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *render_processors,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(_log_level())

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with method, path, query, status, and duration.

    The request id (taken from the incoming header or generated) is bound to
    structlog's context, so the ``analytics_computed`` or
    ``attendance_recorded`` events of a request carry the same id, and is
    echoed back in the response header. Server errors are logged as warnings.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - start) * 1000, 2)

        response.headers[REQUEST_ID_HEADER] = request_id
        if request.url.path in UNLOGGED_PATHS:
            return response

        logger = structlog.get_logger("http")
        log = logger.awarning if response.status_code >= 500 else logger.ainfo
        await log(
            "request",
            method=request.method,
            path=request.url.path,
            query=request.url.query or None,
            status=response.status_code,
            duration_ms=duration_ms,
            client=request.client.host if request.client else "unknown",
        )

        return response
