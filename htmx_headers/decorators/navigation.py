"""
htmx_headers.decorators.navigation

Purpose:
    Decorators for client-side navigation and browser history headers:
    HX-Location, HX-Push-Url, HX-Redirect, HX-Refresh, HX-Replace-Url.
"""

from __future__ import annotations

from htmx_headers.contracts.header_names import HxHeaders
from htmx_headers.models.location import LocationContext
from htmx_headers.pipeline import HeaderDecorator, HeaderSink, add_custom_header

_h = HxHeaders()


def location(path: str) -> HeaderDecorator:
    """Client-side redirect without a full page reload. https://htmx.org/headers/hx-location/"""
    return add_custom_header(_h.location, path)


def location_with_context(path: str, context: LocationContext) -> HeaderDecorator:
    """
    Client-side redirect with extra options (target, swap, values, ...).

    The context is encoded when the decorator is applied, so a SerializationError
    surfaces from set_response_headers.
    """

    def _decorate(headers: HeaderSink) -> None:
        headers[_h.location] = context.to_header_value(path)

    _decorate.__qualname__ = "location_with_context"
    return _decorate


def push_url(url: str) -> HeaderDecorator:
    """Push a new url into the history stack. https://htmx.org/headers/hx-push-url/"""
    return add_custom_header(_h.push_url, url)


def prevent_push_url() -> HeaderDecorator:
    return push_url("false")


def redirect(path: str) -> HeaderDecorator:
    """Client-side redirect to a new location (full page load)."""
    return add_custom_header(_h.redirect, path)


def refresh() -> HeaderDecorator:
    return add_custom_header(_h.refresh, "true")


def prevent_refresh() -> HeaderDecorator:
    return add_custom_header(_h.refresh, "false")


def replace_url(url: str) -> HeaderDecorator:
    """Replace the current URL in the location bar. https://htmx.org/headers/hx-replace-url/"""
    return add_custom_header(_h.replace_url, url)


def prevent_replace_url() -> HeaderDecorator:
    return replace_url("false")
