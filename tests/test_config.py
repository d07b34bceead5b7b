"""Tests for the process-wide configuration."""

import sys

import pytest

import pyoiter as po


def test_defaults() -> None:
    """Test the default configuration values."""
    config = po.get_config()
    assert config.max_index == sys.maxsize
    assert config.iter_repr_max_items == 20


def test_config_context_restores() -> None:
    """Test the previous config is restored on exit, even on error."""
    previous = po.get_config()
    with pytest.raises(KeyError), po.config_context(max_index=3):
        assert po.get_config().max_index == 3
        raise KeyError
    assert po.get_config() is previous


def test_set_config() -> None:
    """Test set_config replaces the active config."""
    previous = po.get_config()
    try:
        assert po.set_config(iter_repr_max_items=1).iter_repr_max_items == 1
        assert po.get_config().iter_repr_max_items == 1
    finally:
        po.set_config(iter_repr_max_items=previous.iter_repr_max_items)
    assert po.get_config() == previous


def test_invalid_values() -> None:
    """Test invalid settings are rejected."""
    with pytest.raises(ValueError, match="max_index"):
        po.Config(max_index=0)
    with pytest.raises(ValueError, match="iter_repr_max_items"):
        po.Config(iter_repr_max_items=-1)


def test_unknown_field() -> None:
    """Test unknown settings are rejected."""
    with pytest.raises(TypeError):
        po.set_config(unknown=1)


def test_config_is_frozen() -> None:
    """Test the config cannot be mutated in place."""
    with pytest.raises(AttributeError):
        po.get_config().max_index = 1  # type: ignore[misc]


def test_cursor_captures_max_index() -> None:
    """Test a cursor keeps the maximum index active at its construction."""
    with po.config_context(max_index=3):
        cursor = po.Islice(po.Count(), 0, None, 2)
    assert (cursor.next(), cursor.next(), cursor.next()) == (
        po.Some(0),
        po.Some(2),
        po.Some(3),
    )
