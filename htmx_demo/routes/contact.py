"""
htmx_demo.routes.contact

Purpose:
    Contact form demo. A valid submission redirects the browser to the
    thank-you page via HX-Redirect.

Notes:
    - Missing subject/message: the error partial is returned and HX-Retarget +
      HX-Reswap point htmx at the #error element (outerHTML), instead of the
      form's own hx-target/hx-swap.
    - Nothing is actually sent; the submission is only logged.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Form
from fastapi.responses import HTMLResponse

from htmx_demo import templates
from htmx_demo.contracts.demo_paths import DemoPaths
from htmx_headers import SwapStrategy, redirect, reswap, retarget, set_response_headers

logger = logging.getLogger(__name__)

_paths = DemoPaths()

router = APIRouter(tags=["contact"])

MISSING_FIELDS_MESSAGE = "You must provide a subject and a message."


@router.get(_paths.index, response_class=HTMLResponse)
def contact_form() -> HTMLResponse:
    return HTMLResponse(templates.contact_page())


@router.post(_paths.send, response_class=HTMLResponse)
def send(subject: str = Form(default=""), message: str = Form(default="")) -> HTMLResponse:
    if not subject.strip() or not message.strip():
        response = HTMLResponse(templates.error_partial(MISSING_FIELDS_MESSAGE))
        set_response_headers(
            response,
            retarget(f"#{templates.ERROR_ELEMENT_ID}"),
            reswap(SwapStrategy.OUTER_HTML),
        )
        return response

    logger.info("Contact form submitted: subject=%r message_len=%d", subject, len(message))

    response = HTMLResponse("")
    set_response_headers(response, redirect(_paths.thank_you))
    return response


@router.get(_paths.thank_you, response_class=HTMLResponse)
def thank_you() -> HTMLResponse:
    return HTMLResponse(templates.thank_you_page())
