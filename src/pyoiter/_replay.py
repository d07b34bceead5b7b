from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator
from typing import Any, Self

from ._core import get_config
from ._cursor import Cursor, check_count, to_cursor
from ._types import MISSING

logger = logging.getLogger(__name__)


class Cycle[T](Cursor[T]):
    """Return values from **iterable**, saving a copy of each, then replay the saved values indefinitely.

    **iterable** is consumed once. If it produced nothing, the cursor is exhausted for good.

    **Warning** ⚠️
        Unless **iterable** is empty, this cursor is never exhausted.

    Args:
        iterable (Iterable[T]): The values to cycle through.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.Islice(po.Cycle([1, 2, 3]), 7).collect()
    (1, 2, 3, 1, 2, 3, 1)
    >>> po.Cycle([]).collect()
    ()

    ```
    """

    __slots__ = ("_index", "_lock", "_replaying", "_saved", "_source")

    def __init__(self, iterable: Iterable[T]) -> None:
        self._source = to_cursor(iterable)
        self._saved: list[T] = []
        self._index = 0
        self._replaying = False
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        with self._lock:
            saved = tuple(self._saved)
        return f"Cycle({get_config().iter_repr(saved)})"

    def __next__(self) -> T:
        if not self._replaying:
            value: Any = next(self._source, MISSING)
            if value is not MISSING:
                with self._lock:
                    self._saved.append(value)
                return value
            with self._lock:
                self._replaying = True
                logger.debug("cycle source exhausted, replaying %d values", len(self._saved))
        with self._lock:
            saved = self._saved
            if not saved:
                raise StopIteration
            index = self._index
            self._index = 0 if index >= len(saved) - 1 else index + 1
            return saved[index]


class TeeBuffer[T]:
    """Append-only backing store shared by every `Tee` cursor derived from the same source.

    Slot *i* is filled at most once, by pulling the shared source, and can then be read by any cursor.
    Only one pull from the source is in flight at any time: cursors asking for a slot being filled wait for it, instead of pulling again.
    The source is always pulled without holding the lock.
    """

    __slots__ = ("_cond", "_filler", "_source", "_values")

    def __init__(self, source: Iterator[T]) -> None:
        self._source = source
        self._values: list[T] = []
        self._cond = threading.Condition(threading.Lock())
        self._filler: int | None = None
        logger.debug("tee buffer created over %s", type(source).__name__)

    def __len__(self) -> int:
        with self._cond:
            return len(self._values)

    def get(self, index: int) -> T:
        """Get the value at **index**, pulling the source once if it isn't buffered yet.

        Args:
            index (int): The slot to read. Must not be past the end of the buffer.

        Returns:
            T: The value at **index**.

        Raises:
            RuntimeError: If the source re-enters the buffer while it is being filled.
        """
        me = threading.get_ident()
        with self._cond:
            while index >= len(self._values):
                if self._filler is None:
                    self._filler = me
                    break
                if self._filler == me:
                    msg = "cannot re-enter the tee iterator"
                    raise RuntimeError(msg)
                self._cond.wait()
            else:
                return self._values[index]
        value: Any = MISSING
        try:
            value = next(self._source)
        finally:
            with self._cond:
                if value is not MISSING:
                    self._values.append(value)
                self._filler = None
                self._cond.notify_all()
        return value


class Tee[T](Cursor[T]):
    """One of the independent cursors returned by `tee`.

    All cursors derived from the same source share one `TeeBuffer`, each keeping its own read index.
    Pulling one cursor ahead of another never makes the other skip or duplicate values.

    `copy.copy()` on a `Tee` returns a new cursor sharing the same buffer, starting at the same position.

    Args:
        buffer (TeeBuffer[T]): The shared backing buffer.
        index (int): The position of the first value to read. Defaults to 0.

    Example:
    ```python
    >>> import copy
    >>> import pyoiter as po
    >>> first, second = po.tee(iter("abc"))
    >>> first.next()
    Some('a')
    >>> third = copy.copy(first)
    >>> (first.collect(), second.collect(), third.collect())
    (('b', 'c'), ('a', 'b', 'c'), ('b', 'c'))

    ```
    """

    __slots__ = ("_buffer", "_index")

    def __init__(self, buffer: TeeBuffer[T], index: int = 0) -> None:
        self._buffer = buffer
        self._index = index

    @classmethod
    def from_iter[U](cls, iterable: Iterable[U]) -> Tee[U]:
        """Create a `Tee` over **iterable**.

        If **iterable** already is a `Tee`, it is copied instead of wrapped in a new buffer.

        Args:
            iterable (Iterable[U]): The source values.

        Returns:
            Tee[U]: A cursor at the start of a new (or shared) buffer.
        """
        source = to_cursor(iterable)
        if isinstance(source, Tee):
            return source.__copy__()
        return cls(TeeBuffer(source))  # type: ignore[arg-type]

    def __copy__(self) -> Self:
        return type(self)(self._buffer, self._index)

    def __repr__(self) -> str:
        return f"Tee(index={self._index}, buffered={len(self._buffer)})"

    def __next__(self) -> T:
        value = self._buffer.get(self._index)
        self._index += 1
        return value


def tee[T](iterable: Iterable[T], n: int = 2) -> tuple[Tee[T], ...]:
    """Return **n** independent cursors over a single iterable.

    Every value pulled from the source is kept in a shared buffer for as long as any of the cursors is alive, even once every cursor has read it.

    If the iterator of **iterable** supports `__copy__` (a `Tee` for example), its copies are returned instead of buffering it again.

    Args:
        iterable (Iterable[T]): The source values, consumed lazily.
        n (int): Number of cursors to return. Defaults to 2.

    Returns:
        tuple[Tee[T], ...]: The **n** cursors, all at the start of the source.

    Raises:
        ValueError: If **n** is negative.

    Example:
    ```python
    >>> import pyoiter as po
    >>> a, b, c = po.tee(range(3), 3)
    >>> (a.next(), a.next(), b.next(), c.collect(), a.next(), b.collect())
    (Some(0), Some(1), Some(0), (0, 1, 2), Some(2), (1, 2))
    >>> po.tee([1], 0)
    ()

    ```
    """
    n = check_count(n, "n")
    source = to_cursor(iterable)
    origin: Any = source if hasattr(type(source), "__copy__") else Tee.from_iter(source)
    return tuple(origin.__copy__() for _ in range(n))
