"""
htmx_headers.contracts.header_names

Purpose:
    Central definition of the HX-* response header names.
    Keeps decorators and the bulk-removal helper free of scattered string literals.

Notes:
    - Header names are case-sensitive literals as documented by htmx.
    - Trigger headers are selected through TriggerTiming and are not part of
      KNOWN_HX_HEADERS (remove_hx_headers leaves them alone).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HxHeaders:
    location: str = "HX-Location"
    push_url: str = "HX-Push-Url"
    redirect: str = "HX-Redirect"
    refresh: str = "HX-Refresh"
    replace_url: str = "HX-Replace-Url"
    reswap: str = "HX-Reswap"
    retarget: str = "HX-Retarget"
    reselect: str = "HX-Reselect"

    trigger: str = "HX-Trigger"
    trigger_after_settle: str = "HX-Trigger-After-Settle"
    trigger_after_swap: str = "HX-Trigger-After-Swap"


_h = HxHeaders()

# Order matches the htmx response header reference.
KNOWN_HX_HEADERS: tuple[str, ...] = (
    _h.location,
    _h.push_url,
    _h.redirect,
    _h.refresh,
    _h.replace_url,
    _h.reswap,
    _h.retarget,
    _h.reselect,
)
