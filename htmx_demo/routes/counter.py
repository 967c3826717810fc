"""
htmx_demo.routes.counter

Purpose:
    Counter demo. Each POST returns the incremented input partial; when the new
    value is divisible by 3 a `showAlert` event is fired after the swap, with
    the message as the event detail.

    GET serves the full page for browser loads and just the reset input
    partial when htmx asks for it (HX-Request: true).
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse

from htmx_demo import templates
from htmx_demo.contracts.demo_paths import DemoPaths
from htmx_headers import TriggerEvent, TriggerTiming, set_response_headers, trigger_with_detail

logger = logging.getLogger(__name__)

_paths = DemoPaths()

router = APIRouter(tags=["counter"])

ALERT_EVENT = "showAlert"


def _parse_value(raw: str | None) -> int:
    # Missing or non-numeric input counts as 0.
    if raw is None:
        return 0
    try:
        return int(raw.strip())
    except ValueError:
        return 0


@router.get(_paths.counter, response_class=HTMLResponse)
def counter_page(request: Request) -> HTMLResponse:
    # htmx callers (e.g. an hx-get "reset" button) only need the input partial.
    if getattr(request.state, "is_htmx", False):
        return HTMLResponse(templates.counter_input_partial(0))
    return HTMLResponse(templates.counter_page())


@router.post(_paths.increment, response_class=HTMLResponse)
def increment(value: str = Form(default="")) -> HTMLResponse:
    new_value = _parse_value(value) + 1
    response = HTMLResponse(templates.counter_input_partial(new_value))

    if new_value % 3 == 0:
        event = TriggerEvent(name=ALERT_EVENT, detail=f"Number {new_value} is divisible by 3!")
        set_response_headers(response, trigger_with_detail(TriggerTiming.AFTER_SWAP, event))
        logger.debug("Triggering %s for value=%d", ALERT_EVENT, new_value)

    return response
