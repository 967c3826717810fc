# htmx_headers/decorators/targeting.py
# Purpose: HX-Reswap / HX-Retarget / HX-Reselect decorators (override swap, target and selection).

from __future__ import annotations

from htmx_headers.contracts.header_names import HxHeaders
from htmx_headers.models.enums import SwapStrategy
from htmx_headers.pipeline import HeaderDecorator, add_custom_header

_h = HxHeaders()


def reswap(strategy: SwapStrategy) -> HeaderDecorator:
    return add_custom_header(_h.reswap, SwapStrategy(strategy).value)


def retarget(selector: str) -> HeaderDecorator:
    """CSS selector that replaces the element the response is swapped into."""
    return add_custom_header(_h.retarget, selector)


def reselect(selector: str) -> HeaderDecorator:
    """CSS selector choosing which part of the response is swapped in (overrides hx-select)."""
    return add_custom_header(_h.reselect, selector)
