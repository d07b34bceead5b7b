"""Tests for Chain and ZipLongest."""

import pytest

import pyoiter as po


class TestChain:
    """Test Chain."""

    def test_concatenates_in_order(self) -> None:
        """Test values come from each iterable in turn."""
        assert po.Chain([1, 2], (), "ab", range(3, 4)).collect() == (1, 2, "a", "b", 3)

    def test_empty(self) -> None:
        """Test a Chain without iterables is exhausted."""
        assert po.Chain().next().is_none()

    def test_lazy_conversion(self) -> None:
        """Test each iterable is only converted once the previous one is exhausted."""
        opened: list[str] = []

        class _Source:
            def __init__(self, name: str) -> None:
                self.name = name

            def __iter__(self) -> object:
                opened.append(self.name)
                return iter((self.name,))

        cursor = po.Chain(_Source("a"), _Source("b"))
        assert opened == []
        assert cursor.next() == po.Some("a")
        assert opened == ["a"]
        assert cursor.collect() == ("b",)
        assert opened == ["a", "b"]

    def test_non_iterable_source(self) -> None:
        """Test a non-iterable source raises TypeError when it is reached."""
        cursor = po.Chain([1], 2)  # type: ignore[arg-type]
        assert cursor.next() == po.Some(1)
        with pytest.raises(TypeError, match="not iterable"):
            cursor.next()

    def test_from_iterable(self) -> None:
        """Test the alternate constructor flattens one level."""
        assert po.Chain.from_iterable(["ab", [1], ()]).collect() == ("a", "b", 1)

    def test_from_iterable_generator(self) -> None:
        """Test the inner iterables stay lazy with from_iterable."""
        inner = (range(n) for n in range(4))
        assert po.Chain.from_iterable(inner).collect() == (0, 0, 1, 0, 1, 2)


class TestZipLongest:
    """Test ZipLongest."""

    def test_pads_shorter(self) -> None:
        """Test exhausted sources are replaced by the fill value."""
        assert po.ZipLongest("ABCD", "xy", fillvalue="-").collect() == (
            ("A", "x"),
            ("B", "y"),
            ("C", "-"),
            ("D", "-"),
        )

    def test_default_fillvalue(self) -> None:
        """Test the default fill value is None."""
        assert po.ZipLongest([1], [1, 2]).collect() == ((1, 1), (None, 2))

    def test_no_source(self) -> None:
        """Test ZipLongest without sources is exhausted."""
        assert po.ZipLongest().collect() == ()

    def test_single_source(self) -> None:
        """Test a single source produces 1-tuples."""
        assert po.ZipLongest([1, 2]).collect() == ((1,), (2,))

    def test_exhausted_source_not_pulled_again(self) -> None:
        """Test a source which reported exhaustion is never pulled again."""
        pulls: list[int] = []

        class _Flaky:
            def __iter__(self) -> "_Flaky":
                return self

            def __next__(self) -> int:
                pulls.append(1)
                if len(pulls) == 1:
                    raise StopIteration
                return 99

        assert po.ZipLongest(_Flaky(), range(3), fillvalue=0).collect() == (
            (0, 0),
            (0, 1),
            (0, 2),
        )
        assert len(pulls) == 1

    def test_sticky(self) -> None:
        """Test ZipLongest stays exhausted."""
        cursor = po.ZipLongest([1], [])
        assert cursor.collect() == ((1, None),)
        assert cursor.next().is_none()
