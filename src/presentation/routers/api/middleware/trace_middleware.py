"""Trace middleware to inject a trace_id per request.

- Adds X-Trace-Id response header
- Binds trace_id into structlog's context so every log line carries it
- Exposes get_trace_id() helper for code outside request handlers
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Awaitable, Callable
from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

trace_id_context: ContextVar[str | None] = ContextVar("trace_id", default=None)


def get_trace_id() -> str | None:
    """Return the current trace ID.

    Returns:
        str | None: The current request trace ID, or None if no active request.
    """
    return trace_id_context.get()


class TraceMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that injects a trace ID into each request context."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Set and propagate a trace ID for the request.

        An incoming X-Trace-Id header is reused; otherwise a new UUID is
        generated.
        """
        trace_id = request.headers.get("X-Trace-Id") or str(uuid4())
        trace_id_context.set(trace_id)
        request.state.trace_id = trace_id
        structlog.contextvars.bind_contextvars(trace_id=trace_id)
        try:
            response = await call_next(request)
            response.headers["X-Trace-Id"] = trace_id
            return response
        finally:
            # Clear context after request to prevent leakage
            trace_id_context.set(None)
            structlog.contextvars.unbind_contextvars("trace_id")
