"""Request Middleware for Logging and Tracing

Every request gets a correlation ID (taken from X-Correlation-ID or freshly
generated) that is bound into the structlog context, echoed on the response
and picked up by the error handlers. Requests against a learner session also
bind its session_id, so transition logs can be followed per learner.
"""
import re
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from core.logging import api_logger, bind_context, clear_context, generate_correlation_id

log = api_logger()

_SESSION_PATH = re.compile(r"^/api/sessions/(?P<session_id>[^/]+)")

# Polled by load balancers; only logged at debug
_QUIET_PATHS = frozenset({"/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs requests/responses and manages correlation context."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        correlation_id = request.headers.get("X-Correlation-ID") or generate_correlation_id()
        path = request.url.path

        clear_context()
        bind_context(correlation_id=correlation_id, method=request.method, path=path)
        if match := _SESSION_PATH.match(path):
            bind_context(session_id=match["session_id"])

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            log.exception(
                "request_failed",
                error_type=type(exc).__name__,
                duration_ms=_elapsed_ms(start),
            )
            raise
        finally:
            clear_context()

        response.headers["X-Correlation-ID"] = correlation_id
        _log_response(path, response.status_code, _elapsed_ms(start), correlation_id)
        return response


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


def _log_response(path: str, status: int, duration_ms: float, correlation_id: str) -> None:
    if path in _QUIET_PATHS and status < 400:
        log_method = log.debug
    elif status >= 500:
        log_method = log.error
    elif status >= 400:
        log_method = log.warning
    else:
        log_method = log.info
    log_method(
        "request_completed",
        path=path,
        status=status,
        duration_ms=duration_ms,
        correlation_id=correlation_id,
    )
