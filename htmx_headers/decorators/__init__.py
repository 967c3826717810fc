from htmx_headers.decorators.navigation import (
    location,
    location_with_context,
    prevent_push_url,
    prevent_refresh,
    prevent_replace_url,
    push_url,
    redirect,
    refresh,
    replace_url,
)
from htmx_headers.decorators.targeting import reselect, reswap, retarget
from htmx_headers.decorators.trigger import trigger, trigger_with_detail

__all__ = [
    "location",
    "location_with_context",
    "push_url",
    "prevent_push_url",
    "redirect",
    "refresh",
    "prevent_refresh",
    "replace_url",
    "prevent_replace_url",
    "reswap",
    "retarget",
    "reselect",
    "trigger",
    "trigger_with_detail",
]
