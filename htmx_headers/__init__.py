"""Helpers for setting htmx (HX-*) response headers."""

from htmx_headers.contracts import KNOWN_HX_HEADERS, HeaderErrorCode, HxHeaders
from htmx_headers.decorators import (
    location,
    location_with_context,
    prevent_push_url,
    prevent_refresh,
    prevent_replace_url,
    push_url,
    redirect,
    refresh,
    replace_url,
    reselect,
    reswap,
    retarget,
    trigger,
    trigger_with_detail,
)
from htmx_headers.errors import (
    HeaderValueError,
    HtmxHeaderError,
    PreconditionError,
    SerializationError,
    SwapValidationError,
)
from htmx_headers.models import (
    LocationContext,
    SwapStrategy,
    TriggerEvent,
    TriggerTiming,
    string_to_swap,
    swap_from_string,
)
from htmx_headers.pipeline import (
    HeaderDecorator,
    HeaderSink,
    add_custom_header,
    remove_hx_headers,
    set_response_headers,
)

__all__ = [
    # Pipeline
    "HeaderDecorator",
    "HeaderSink",
    "set_response_headers",
    "add_custom_header",
    "remove_hx_headers",
    # Navigation
    "location",
    "location_with_context",
    "push_url",
    "prevent_push_url",
    "redirect",
    "refresh",
    "prevent_refresh",
    "replace_url",
    "prevent_replace_url",
    # Swap / target / select
    "reswap",
    "retarget",
    "reselect",
    # Triggers
    "trigger",
    "trigger_with_detail",
    # Models
    "SwapStrategy",
    "swap_from_string",
    "string_to_swap",
    "TriggerTiming",
    "TriggerEvent",
    "LocationContext",
    # Contracts / errors
    "HxHeaders",
    "KNOWN_HX_HEADERS",
    "HeaderErrorCode",
    "HtmxHeaderError",
    "HeaderValueError",
    "PreconditionError",
    "SerializationError",
    "SwapValidationError",
]
