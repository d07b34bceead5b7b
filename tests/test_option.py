"""Tests for the Option values returned by `Cursor.next()`."""

from __future__ import annotations

import pytest

import pyoiter as po


def test_option_pattern_matching() -> None:
    """Test Option pattern matching."""

    def _describe(option: po.Option[str]) -> str:
        match option:
            case po.Some(value):
                return f"some {value}"
            case _:
                return "none"

    assert _describe(po.Some("hello")) == "some hello"
    assert _describe(po.NONE) == "none"


def test_next_pattern_matching_loop() -> None:
    """Test draining a cursor with a match statement on `next()`."""
    cursor = po.Chain("ab", "c")
    seen: list[str] = []
    while True:
        match cursor.next():
            case po.Some(value):
                seen.append(value)
            case _:
                break
    assert seen == ["a", "b", "c"]


def test_none_value_is_some() -> None:
    """Test a produced `None` is distinguished from exhaustion."""
    option = po.Repeat(None, 1).next()
    assert option.is_some()
    assert option.unwrap() is None


def test_unwrap_none() -> None:
    """Test unwrapping NONE raises OptionUnwrapError."""
    with pytest.raises(po.OptionUnwrapError, match="called `unwrap` on a `None`"):
        po.NONE.unwrap()


def test_expect_none() -> None:
    """Test expect includes the caller message."""
    with pytest.raises(po.OptionUnwrapError, match="cursor is empty"):
        po.Chain().next().expect("cursor is empty")


def test_unwrap_error_is_runtime_error() -> None:
    """Test OptionUnwrapError can be caught as a RuntimeError."""
    assert issubclass(po.OptionUnwrapError, RuntimeError)


def test_defaults() -> None:
    """Test unwrap_or and unwrap_or_else."""
    assert po.Some(1).unwrap_or(2) == 1
    assert po.NONE.unwrap_or(2) == 2
    assert po.NONE.unwrap_or_else(lambda: 3) == 3
    assert po.Some(1).unwrap_or_else(lambda: 3) == 1


def test_map_and_then() -> None:
    """Test map and and_then only call the function on Some."""
    assert po.Some(2).map(lambda x: x * 10) == po.Some(20)
    assert po.NONE.map(lambda x: x * 10).is_none()
    assert po.Some(2).and_then(lambda x: po.Some(x + 1) if x else po.NONE) == po.Some(3)
    assert po.Some(0).and_then(lambda x: po.Some(x + 1) if x else po.NONE).is_none()


def test_none_singleton_repr() -> None:
    """Test the NONE repr."""
    assert repr(po.NONE) == "NONE"
    assert repr(po.Some("a")) == "Some('a')"
