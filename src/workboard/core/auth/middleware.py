"""Request id and caller context middleware.

Both middlewares only annotate the request and the structlog context.
Neither rejects a request; authorization belongs to the
``require_access_context`` dependency.
"""

import uuid

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from workboard.core.auth.context import resolve_access_context


REQUEST_ID_HEADER = "X-Request-ID"
BOUND_KEYS = ("request_id", "organization_id", "user_id")


def _bearer_token(request: Request) -> str | None:
    scheme, _, credentials = request.headers.get("Authorization", "").partition(" ")
    if scheme.lower() != "bearer" or not credentials:
        return None
    return credentials.strip()


class OrganizationContextMiddleware(BaseHTTPMiddleware):
    """Resolve the caller's access context once per request.

    The context lands on ``request.state.access_context``; for an
    identified caller the account and organization ids are bound to the
    log context as well.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        context = resolve_access_context(_bearer_token(request))
        request.state.access_context = context

        if context.is_authenticated:
            structlog.contextvars.bind_contextvars(
                organization_id=str(context.organization_id),
                user_id=str(context.user_id),
            )

        return await call_next(request)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id, echoed in the ``X-Request-ID`` header.

    A caller-supplied id is kept. The id doubles as the ``trace_id`` of
    error responses.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        request.state.trace_id = request_id

        structlog.contextvars.bind_contextvars(request_id=request_id)
        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars(*BOUND_KEYS)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
