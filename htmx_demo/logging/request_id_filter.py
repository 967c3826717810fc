"""
htmx_demo.logging.request_id_filter

Purpose:
    Logging filter that stamps request_id and an `hx` marker onto log records.
    `hx` is "htmx" for requests sent by htmx and "page" otherwise ("-" outside a request).
"""

from __future__ import annotations

import logging

from htmx_demo.logging.request_context import htmx_request_ctx_var, request_id_ctx_var


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        request_id = request_id_ctx_var.get()
        record.request_id = request_id or "-"
        if request_id is None:
            record.hx = "-"
        else:
            record.hx = "htmx" if htmx_request_ctx_var.get() else "page"
        return True
