"""
tests.headers.test_swap_strategy

Purpose:
    SwapStrategy string codec and the HX-Reswap decorator.
"""

from __future__ import annotations

import pytest

from htmx_headers import (
    HeaderErrorCode,
    SwapStrategy,
    SwapValidationError,
    reswap,
    set_response_headers,
    string_to_swap,
    swap_from_string,
)

EXPECTED = {
    SwapStrategy.INNER_HTML: "innerHTML",
    SwapStrategy.OUTER_HTML: "outerHTML",
    SwapStrategy.BEFORE_BEGIN: "beforebegin",
    SwapStrategy.AFTER_BEGIN: "afterbegin",
    SwapStrategy.BEFORE_END: "beforeend",
    SwapStrategy.AFTER_END: "afterend",
    SwapStrategy.DELETE: "delete",
    SwapStrategy.NONE: "none",
}


def test_all_strategies_have_expected_string() -> None:
    assert len(SwapStrategy) == 8
    for strategy, text in EXPECTED.items():
        assert str(strategy) == text
        assert strategy.value == text


@pytest.mark.parametrize("strategy", list(SwapStrategy))
def test_decode_of_encode_is_identity(strategy: SwapStrategy) -> None:
    decoded, err = swap_from_string(str(strategy))
    assert err is None
    assert decoded is strategy


@pytest.mark.parametrize("text", ["", "innerhtml", "InnerHTML", "outer", "swap", " none"])
def test_unknown_string_returns_default_and_error(text: str) -> None:
    decoded, err = swap_from_string(text)
    assert decoded is SwapStrategy.INNER_HTML
    assert isinstance(err, SwapValidationError)
    assert err.value == text
    assert err.fallback is SwapStrategy.INNER_HTML
    assert err.error_code == HeaderErrorCode.INVALID_SWAP
    assert repr(text) in str(err)


def test_string_to_swap_is_alias() -> None:
    assert string_to_swap("afterend") == (SwapStrategy.AFTER_END, None)


def test_parse_raises_with_fallback() -> None:
    assert SwapStrategy.parse("delete") is SwapStrategy.DELETE

    with pytest.raises(ValueError) as exc_info:
        SwapStrategy.parse("bogus")
    assert isinstance(exc_info.value, SwapValidationError)
    assert exc_info.value.fallback is SwapStrategy.default()


@pytest.mark.parametrize("strategy", list(SwapStrategy))
def test_reswap_sets_canonical_value(strategy: SwapStrategy) -> None:
    headers: dict[str, str] = {}
    set_response_headers(headers, reswap(strategy))
    assert headers == {"HX-Reswap": EXPECTED[strategy]}
