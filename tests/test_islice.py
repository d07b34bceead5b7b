"""Tests for Islice."""

import itertools
import logging

import pytest

import pyoiter as po


@pytest.mark.parametrize(
    "args",
    [
        (5,),
        (0,),
        (2, 8),
        (2, None),
        (None, None),
        (1, 9, 3),
        (0, None, 4),
        (None, 3, None),
        (7, 3),
        (20, 30),
    ],
)
def test_matches_itertools(args: tuple[int | None, ...]) -> None:
    """Test Islice selects the same values as itertools.islice."""
    assert po.Islice(range(10), *args).collect() == tuple(
        itertools.islice(range(10), *args)
    )


def test_stop_does_not_overpull() -> None:
    """Test no value past stop is pulled from the source."""
    source = iter(range(10))
    assert po.Islice(source, 3).collect() == (0, 1, 2)
    assert next(source) == 3


def test_step_does_not_overpull() -> None:
    """Test values skipped by the step before stop are the only ones pulled."""
    source = iter(range(10))
    assert po.Islice(source, 0, 5, 2).collect() == (0, 2, 4)
    assert next(source) == 5


def test_sticky_stop() -> None:
    """Test Islice stays exhausted once stop is reached."""
    source = iter(range(10))
    cursor = po.Islice(source, 2)
    assert cursor.collect() == (0, 1)
    assert cursor.next().is_none()
    assert next(source) == 2


def test_infinite_source() -> None:
    """Test Islice bounds an infinite source."""
    assert po.Islice(po.Count(), 2, 10, 3).collect() == (2, 5, 8)


@pytest.mark.parametrize(
    ("args", "name"),
    [((-1,), "Stop"), ((-1, None), "Start"), ((0, None, -1), "Step"), (("a",), "Stop")],
)
def test_invalid_arguments(args: tuple[object, ...], name: str) -> None:
    """Test invalid bounds raise ValueError naming the argument."""
    with pytest.raises(
        ValueError, match=f"{name} argument for islice\\(\\) must be None or an integer"
    ):
        po.Islice(range(3), *args)  # type: ignore[arg-type]


def test_zero_step() -> None:
    """Test a zero step is rejected."""
    with pytest.raises(ValueError, match="Step for islice"):
        po.Islice(range(3), 0, None, 0)


def test_argument_count() -> None:
    """Test a wrong number of arguments raises TypeError."""
    with pytest.raises(TypeError, match="islice expected"):
        po.Islice(range(3))
    with pytest.raises(TypeError, match="islice expected"):
        po.Islice(range(3), 1, 2, 3, 4)  # type: ignore[call-arg]


def test_max_index_from_config() -> None:
    """Test bounds are checked against the configured maximum index."""
    with po.config_context(max_index=5):
        with pytest.raises(ValueError, match="0 <= x <= 5"):
            po.Islice(range(10), 6)
        assert po.Islice(range(10), 5).collect() == (0, 1, 2, 3, 4)


def test_saturates_at_max_index(caplog: pytest.LogCaptureFixture) -> None:
    """Test the target index saturates at the maximum index without a stop."""
    with po.config_context(max_index=4):
        cursor = po.Islice(po.Count(), 0, None, 3)
    with caplog.at_level(logging.DEBUG, logger="pyoiter._islice"):
        values = (cursor.next(), cursor.next(), cursor.next(), cursor.next())
    assert values == (po.Some(0), po.Some(3), po.Some(4), po.Some(5))
    assert "saturated" in caplog.text


def test_non_iterable() -> None:
    """Test a non-iterable source raises TypeError."""
    with pytest.raises(TypeError, match="not iterable"):
        po.Islice(5, 1)  # type: ignore[arg-type]
