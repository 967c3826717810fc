"""
htmx_demo.logging.request_context

Purpose:
    Request-scoped context storage using contextvars.
    Carries the request id and whether the request came from htmx (HX-Request: true)
    so log lines can tell partial (AJAX) requests from full page loads.
"""

from __future__ import annotations

import contextvars

request_id_ctx_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id",
    default=None,
)

htmx_request_ctx_var: contextvars.ContextVar[bool] = contextvars.ContextVar(
    "htmx_request",
    default=False,
)
