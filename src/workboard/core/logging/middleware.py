"""Access log middleware.

One ``request_started`` and one ``request_completed`` event per API call,
both carrying the request id bound by ``RequestIdMiddleware``.
"""

import time
from typing import Any

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint


logger = structlog.get_logger()

QUIET_PATH_PREFIXES = ("/health", "/docs", "/redoc", "/openapi.json")


def _level_for(status_code: int) -> str:
    if status_code >= 500:
        return "error"
    if status_code >= 400:
        return "warning"
    return "info"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every API request with its outcome and duration.

    Client errors are logged at warning level and server errors at error
    level. Once the caller is identified, its account and organization
    are added to the completion event.
    """

    def __init__(
        self,
        app: Any,
        quiet_prefixes: tuple[str, ...] = QUIET_PATH_PREFIXES,
    ) -> None:
        super().__init__(app)
        self.quiet_prefixes = quiet_prefixes

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.url.path.startswith(self.quiet_prefixes):
            return await call_next(request)

        log = logger.bind(method=request.method, path=request.url.path)
        log.info(
            "request_started",
            client_ip=get_client_ip(request),
            query=str(request.url.query) or None,
        )

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            log.exception("request_failed", duration_ms=_elapsed_ms(started))
            raise

        fields: dict[str, Any] = {
            "status_code": response.status_code,
            "duration_ms": _elapsed_ms(started),
        }
        context = getattr(request.state, "access_context", None)
        if context is not None and context.is_authenticated:
            fields["user_id"] = str(context.user_id)
            fields["organization_id"] = str(context.organization_id)

        getattr(log, _level_for(response.status_code))("request_completed", **fields)
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def get_client_ip(request: Request) -> str | None:
    """Return the originating client address, honouring proxy headers."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        # The left-most entry is the original client
        return forwarded.split(",")[0].strip()

    return request.headers.get("X-Real-IP") or (
        request.client.host if request.client else None
    )
