"""
tests.headers.test_location_context

Purpose:
    LocationContext JSON encoding and the location_with_context decorator.
"""

from __future__ import annotations

import json
import math

import pytest
from pydantic import ValidationError
from starlette.responses import Response

from htmx_headers import (
    LocationContext,
    SerializationError,
    SwapStrategy,
    location_with_context,
    set_response_headers,
)


def test_only_path_and_target_present() -> None:
    headers: dict[str, str] = {}
    set_response_headers(headers, location_with_context("/p", LocationContext(target="#t")))
    assert json.loads(headers["HX-Location"]) == {"path": "/p", "target": "#t"}


def test_empty_context_still_has_path() -> None:
    assert json.loads(LocationContext().to_header_value("/only")) == {"path": "/only"}


def test_empty_strings_are_omitted() -> None:
    ctx = LocationContext(source="", event="", target="#t", select="")
    assert json.loads(ctx.to_header_value("/p")) == {"path": "/p", "target": "#t"}


def test_swap_is_encoded_as_canonical_string() -> None:
    ctx = LocationContext(target="#my-target", swap=SwapStrategy.AFTER_BEGIN)
    data = json.loads(ctx.to_header_value("/some/path"))
    assert data == {"path": "/some/path", "target": "#my-target", "swap": "afterbegin"}


def test_swap_accepts_string_form() -> None:
    ctx = LocationContext(swap="outerHTML")
    assert ctx.swap is SwapStrategy.OUTER_HTML


def test_invalid_swap_rejected() -> None:
    with pytest.raises(ValidationError):
        LocationContext(swap="sideways")


def test_unknown_field_rejected() -> None:
    with pytest.raises(ValidationError):
        LocationContext(tagret="#t")


def test_all_fields() -> None:
    ctx = LocationContext(
        source="#src",
        event="click",
        handler="myHandler",
        target="#t",
        swap=SwapStrategy.NONE,
        values={"id": 7},
        headers={"X-Token": "abc"},
        select="#content",
    )
    data = json.loads(ctx.to_header_value("/p"))
    assert data == {
        "source": "#src",
        "event": "click",
        "handler": "myHandler",
        "target": "#t",
        "swap": "none",
        "values": {"id": 7},
        "headers": {"X-Token": "abc"},
        "select": "#content",
        "path": "/p",
    }


def test_sets_header_on_starlette_response() -> None:
    response = Response("")
    set_response_headers(response, location_with_context("/p", LocationContext(event="load")))
    assert json.loads(response.headers["HX-Location"]) == {"event": "load", "path": "/p"}


def test_unencodable_values_raise_serialization_error() -> None:
    ctx = LocationContext(values={"when": object()})
    headers: dict[str, str] = {}
    with pytest.raises(SerializationError) as exc_info:
        set_response_headers(headers, location_with_context("/p", ctx))

    assert exc_info.value.header == "HX-Location"
    assert exc_info.value.details == {"path": "/p"}
    assert headers == {}


@pytest.mark.parametrize("bad", [math.inf, -math.inf, math.nan])
def test_non_finite_values_raise_serialization_error(bad: float) -> None:
    headers: dict[str, str] = {}
    with pytest.raises(SerializationError) as exc_info:
        set_response_headers(headers, location_with_context("/p", LocationContext(values={"x": bad})))

    assert exc_info.value.header == "HX-Location"
    assert "HX-Location" not in headers
