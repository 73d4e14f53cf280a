# fastlonn/core/request_logging.py
"""
Access log for the API.

Every request gets an ID (taken from an incoming X-Request-ID header when
the client sends one) that is echoed back in the response.
"""

import time
import uuid
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from fastlonn.core.logging_config import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def _is_chatty(path: str) -> bool:
    """Health checks and pointer events during a drag are logged at DEBUG."""
    return path == "/health" or path.endswith("/pointer") or path.startswith("/static/")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        path = request.url.path
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            elapsed = (time.perf_counter() - started) * 1000
            logger.exception(
                f"{request.method} {path} failed after {elapsed:.1f}ms",
                extra={"extra_fields": {"request_id": request_id, "method": request.method, "path": path}},
            )
            raise

        elapsed = (time.perf_counter() - started) * 1000
        fields = {
            "request_id": request_id,
            "method": request.method,
            "path": path,
            "status_code": response.status_code,
            "duration_ms": round(elapsed, 2),
        }
        message = f"{request.method} {path} -> {response.status_code} ({elapsed:.1f}ms)"

        if response.status_code >= 500:
            logger.error(message, extra={"extra_fields": fields})
        elif response.status_code >= 400:
            logger.warning(message, extra={"extra_fields": fields})
        elif _is_chatty(path):
            logger.debug(message, extra={"extra_fields": fields})
        else:
            logger.info(message, extra={"extra_fields": fields})

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
