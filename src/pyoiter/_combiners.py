from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from typing import Any

from ._cursor import Cursor, to_cursor
from ._types import MISSING


class Chain[T](Cursor[T]):
    """Return values from the first iterable until it is exhausted, then proceed to the next iterable, until all of them are exhausted.

    Each iterable is only converted to an iterator when the previous one is exhausted.

    Args:
        *iterables (Iterable[T]): The iterables to concatenate, in order.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.Chain("ABC", "", "DEF").collect()
    ('A', 'B', 'C', 'D', 'E', 'F')
    >>> po.Chain.from_iterable(["AB", [1, 2]]).collect()
    ('A', 'B', 1, 2)

    ```
    """

    __slots__ = ("_active", "_index", "_lock", "_sources")

    def __init__(self, *iterables: Iterable[T]) -> None:
        self._sources = iterables
        self._index = 0
        self._active: Iterator[T] | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_iterable[U](cls, iterables: Iterable[Iterable[U]]) -> Chain[U]:
        """Alternate constructor, taking the iterables to concatenate from a single iterable.

        The outer iterable is fully drained at construction, each inner iterable stays lazy.

        Args:
            iterables (Iterable[Iterable[U]]): The iterables to concatenate, in order.

        Returns:
            Chain[U]: A new `Chain` over the inner iterables.
        """
        return cls(*to_cursor(iterables))  # type: ignore[return-value]

    def __next__(self) -> T:
        while True:
            with self._lock:
                position = self._index
                if position >= len(self._sources):
                    raise StopIteration
                active = self._active
            if active is None:
                # may run arbitrary code, so the lock must not be held
                active = to_cursor(self._sources[position])
                with self._lock:
                    if self._index != position:
                        continue
                    self._active = active
            value: Any = next(active, MISSING)
            if value is not MISSING:
                return value
            with self._lock:
                if self._index == position:
                    self._index = position + 1
                    self._active = None


class ZipLongest(Cursor[tuple[Any, ...]]):
    """Aggregate values from each of the iterables, in parallel.

    If the iterables are of uneven length, exhausted ones contribute **fillvalue** to each tuple until the longest one is exhausted.
    An exhausted iterable is never pulled again.

    Args:
        *iterables (Iterable[Any]): The iterables to zip.
        fillvalue (Any): Value used in place of values from exhausted iterables. Defaults to None.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.ZipLongest([1, 2, 3], [1], fillvalue=0).collect()
    ((1, 1), (2, 0), (3, 0))
    >>> po.ZipLongest("AB", "xyz").collect()
    (('A', 'x'), ('B', 'y'), (None, 'z'))
    >>> po.ZipLongest().collect()
    ()

    ```
    """

    __slots__ = ("_active", "_fillvalue", "_sources")

    def __init__(self, *iterables: Iterable[Any], fillvalue: Any = None) -> None:  # noqa: ANN401
        self._sources: list[Iterator[Any] | None] = [to_cursor(it) for it in iterables]
        self._active = len(self._sources)
        self._fillvalue = fillvalue

    def __next__(self) -> tuple[Any, ...]:
        if not self._active:
            raise StopIteration
        sources = self._sources
        result: list[Any] = []
        for idx, source in enumerate(sources):
            if source is None:
                result.append(self._fillvalue)
                continue
            value = next(source, MISSING)
            if value is MISSING:
                self._active -= 1
                if not self._active:
                    raise StopIteration
                sources[idx] = None
                value = self._fillvalue
            result.append(value)
        return tuple(result)
