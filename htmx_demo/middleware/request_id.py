"""
htmx_demo.middleware.request_id

Purpose:
    Middleware that gives each request a request-id, flags htmx requests,
    and propagates both to the response (X-Request-Id, Vary: HX-Request).
"""

from __future__ import annotations

import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from htmx_demo.contracts.request_id_policy import RequestIdPolicy
from htmx_demo.logging.request_context import htmx_request_ctx_var, request_id_ctx_var


def _append_vary(response: Response, value: str) -> None:
    existing = response.headers.get("vary")
    if not existing:
        response.headers["Vary"] = value
        return
    parts = [p.strip() for p in existing.split(",")]
    if value.lower() not in (p.lower() for p in parts):
        response.headers["Vary"] = f"{existing}, {value}"


class RequestIdMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, policy: RequestIdPolicy | None = None) -> None:
        super().__init__(app)
        self._policy = policy or RequestIdPolicy()

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        policy = self._policy

        incoming = (
            request.headers.get(policy.request_id_header)
            or request.headers.get(policy.correlation_id_header)
        )
        request_id = incoming if incoming else str(uuid.uuid4())

        is_htmx = request.headers.get(policy.htmx_request_header) == "true"

        request.state.request_id = request_id
        request.state.is_htmx = is_htmx
        rid_token = request_id_ctx_var.set(request_id)
        hx_token = htmx_request_ctx_var.set(is_htmx)
        try:
            response: Response = await call_next(request)
        finally:
            htmx_request_ctx_var.reset(hx_token)
            request_id_ctx_var.reset(rid_token)

        response.headers[policy.response_header] = request_id
        _append_vary(response, policy.vary_header_value)
        return response
