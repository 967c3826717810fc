"""
htmx_demo.contracts.request_id_policy

Purpose:
    Central policy for request-scoped headers: request/correlation IDs and
    the HX-Request marker htmx sends on every AJAX request.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestIdPolicy:
    request_id_header: str = "X-Request-Id"
    correlation_id_header: str = "X-Correlation-Id"
    response_header: str = "X-Request-Id"

    htmx_request_header: str = "HX-Request"
    # Responses differ for htmx vs. full-page requests; caches must key on it.
    vary_header_value: str = "HX-Request"
