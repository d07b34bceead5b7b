"""Tests for the filtering and mapping combinators."""

import operator

import pytest

import pyoiter as po


class TestCompress:
    """Test Compress."""

    def test_basic(self) -> None:
        """Test values are kept where the selector is truthy."""
        assert po.Compress("ABCDEF", [1, 0, 1, 0, 1, 1]).collect() == (
            "A",
            "C",
            "E",
            "F",
        )

    def test_stops_on_shortest(self) -> None:
        """Test Compress stops when either input is exhausted."""
        assert po.Compress("AB", [1, 1, 1, 1]).collect() == ("A", "B")
        assert po.Compress("ABCD", [0, 1]).collect() == ("B",)

    def test_selector_pulled_first(self) -> None:
        """Test the selector is pulled before the data value."""
        order: list[str] = []

        def _data() -> object:
            order.append("data")
            yield 1

        def _selectors() -> object:
            order.append("selector")
            yield True

        po.Compress(_data(), _selectors()).collect()  # type: ignore[arg-type]
        assert order == ["selector", "data"]

    def test_bool_error_propagates(self) -> None:
        """Test an exception raised by bool() on a selector propagates."""

        class _Bad:
            def __bool__(self) -> bool:
                msg = "no truth"
                raise ZeroDivisionError(msg)

        with pytest.raises(ZeroDivisionError, match="no truth"):
            po.Compress([1], [_Bad()]).collect()


class TestFilterFalse:
    """Test FilterFalse."""

    def test_predicate(self) -> None:
        """Test values failing the predicate are kept."""
        assert po.FilterFalse(lambda x: x % 2, range(10)).collect() == (0, 2, 4, 6, 8)

    def test_none_predicate(self) -> None:
        """Test falsy values are kept when no predicate is given."""
        assert po.FilterFalse(None, [0, 1, 0, 2, 0]).collect() == (0, 0, 0)

    def test_non_callable(self) -> None:
        """Test a non-callable predicate is rejected at construction."""
        with pytest.raises(TypeError, match="not callable"):
            po.FilterFalse(3, [1])  # type: ignore[arg-type]


class TestTakeWhile:
    """Test TakeWhile."""

    def test_basic(self) -> None:
        """Test values are taken until the predicate fails."""
        assert po.TakeWhile(lambda x: x < 5, [1, 4, 6, 4, 1]).collect() == (1, 4)

    def test_sticky(self) -> None:
        """Test TakeWhile never resumes, and does not pull after stopping."""
        source = iter([1, 0, 1, 1])
        cursor = po.TakeWhile(bool, source)
        assert cursor.collect() == (1,)
        assert cursor.next().is_none()
        assert next(source) == 1

    def test_predicate_error_propagates(self) -> None:
        """Test an exception raised by the predicate propagates."""
        with pytest.raises(ZeroDivisionError):
            po.TakeWhile(lambda x: 1 / x, [1, 0]).collect()


class TestDropWhile:
    """Test DropWhile."""

    def test_basic(self) -> None:
        """Test values are dropped until the predicate fails."""
        assert po.DropWhile(lambda x: x < 5, [1, 4, 6, 4, 1]).collect() == (6, 4, 1)

    def test_predicate_called_until_first_failure(self) -> None:
        """Test the predicate is not called once a value fails it."""
        calls: list[int] = []

        def _pred(x: int) -> bool:
            calls.append(x)
            return x < 2

        assert po.DropWhile(_pred, [0, 1, 2, 0, 1]).collect() == (2, 0, 1)
        assert calls == [0, 1, 2]

    def test_all_dropped(self) -> None:
        """Test DropWhile is exhausted when every value satisfies the predicate."""
        assert po.DropWhile(lambda _: True, range(5)).collect() == ()


class TestStarmap:
    """Test Starmap."""

    def test_basic(self) -> None:
        """Test each value is unpacked into the function call."""
        assert po.Starmap(pow, [(2, 5), (3, 2)]).collect() == (32, 9)

    def test_non_iterable_argument(self) -> None:
        """Test a value that cannot be unpacked raises TypeError."""
        with pytest.raises(TypeError):
            po.Starmap(pow, [1]).collect()  # type: ignore[list-item]


class TestAccumulate:
    """Test Accumulate."""

    def test_running_sum(self) -> None:
        """Test the default function is addition."""
        assert po.Accumulate(range(5)).collect() == (0, 1, 3, 6, 10)

    def test_custom_function(self) -> None:
        """Test a custom binary function is used."""
        assert po.Accumulate([1, 2, 3, 4], operator.mul).collect() == (1, 2, 6, 24)

    def test_initial(self) -> None:
        """Test initial is emitted first and seeds the total."""
        assert po.Accumulate([1, 2], initial=10).collect() == (10, 11, 13)

    def test_initial_on_empty(self) -> None:
        """Test initial is still emitted over an empty source."""
        assert po.Accumulate([], initial=5).collect() == (5,)

    def test_strings(self) -> None:
        """Test addition works for any type supporting it."""
        assert po.Accumulate("abc").collect() == ("a", "ab", "abc")


class TestPairwise:
    """Test Pairwise."""

    def test_basic(self) -> None:
        """Test overlapping pairs are produced."""
        assert po.Pairwise(range(4)).collect() == ((0, 1), (1, 2), (2, 3))

    def test_short_inputs(self) -> None:
        """Test zero or one value produce no pair."""
        assert po.Pairwise([]).collect() == ()
        assert po.Pairwise([1]).collect() == ()

    def test_none_values(self) -> None:
        """Test None is a legitimate value."""
        assert po.Pairwise([None, None, 1]).collect() == ((None, None), (None, 1))
