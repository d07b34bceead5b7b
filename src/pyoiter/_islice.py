from __future__ import annotations

import logging
import operator
from collections.abc import Iterable

from ._core import get_config
from ._cursor import Cursor, to_cursor

logger = logging.getLogger(__name__)


def _as_index(value: int | None, name: str, max_index: int) -> int | None:
    if value is None:
        return None
    msg = f"{name} argument for islice() must be None or an integer: 0 <= x <= {max_index}."
    try:
        index = operator.index(value)
    except TypeError:
        raise ValueError(msg) from None
    if not 0 <= index <= max_index:
        raise ValueError(msg)
    return index


class Islice[T](Cursor[T]):
    """Return selected values from **iterable**, like slicing a sequence but lazily.

    Accepts the same argument shapes as a `slice`:

    - `Islice(iterable, stop)`
    - `Islice(iterable, start, stop[, step])`

    Values are skipped (pulled and discarded) until **start** is reached, then every **step**-th value is returned, until **stop** is reached.
    If **stop** is `None`, iteration continues until **iterable** is exhausted.
    Without a **stop**, the target index saturates at `Config.max_index`: once it is reached, **step** no longer applies and every remaining value is returned.

    Unlike a regular slice, negative values are not supported.

    Once **stop** is reached, the cursor stays exhausted.

    Args:
        iterable (Iterable[T]): The source values.
        *args (int | None): `stop`, or `start, stop` or `start, stop, step`.

    Raises:
        TypeError: If the number of arguments is wrong.
        ValueError: If an argument is not `None` or an integer in `[0, Config.max_index]`, or if **step** is zero.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.Islice(range(10), 2, 7, 2).collect()
    (2, 4, 6)
    >>> po.Islice("ABCDEFG", 2).collect()
    ('A', 'B')
    >>> po.Islice("ABCDEFG", 2, None).collect()
    ('C', 'D', 'E', 'F', 'G')
    >>> po.Islice("ABCDEFG", 0, None, 2).collect()
    ('A', 'C', 'E', 'G')
    >>> po.Islice("ABC", -1)  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    ValueError: Stop argument for islice() must be None or an integer: 0 <= x <= ...

    ```
    """

    __slots__ = ("_consumed", "_max_index", "_next", "_source", "_step", "_stop")

    def __init__(self, iterable: Iterable[T], *args: int | None) -> None:
        match len(args):
            case 1:
                start, stop, step = None, args[0], None
            case 2:
                start, stop, step = args[0], args[1], None
            case 3:
                start, stop, step = args
            case _:
                msg = f"islice expected 2 to 4 arguments, got {len(args) + 1}"
                raise TypeError(msg)
        max_index = get_config().max_index
        step_value = _as_index(step, "Step", max_index)
        if step_value == 0:
            msg = "Step for islice() must be a positive integer or None."
            raise ValueError(msg)
        start_value = _as_index(start, "Start", max_index)
        self._stop = _as_index(stop, "Stop", max_index)
        self._step = 1 if step_value is None else step_value
        self._next = 0 if start_value is None else start_value
        self._consumed = 0
        self._max_index = max_index
        self._source = to_cursor(iterable)

    def __next__(self) -> T:
        source = self._source
        while self._consumed < self._next:
            next(source)
            self._consumed += 1
        stop = self._stop
        if stop is not None and self._consumed >= stop:
            raise StopIteration
        value = next(source)
        self._consumed += 1
        self._next = self._next_target(stop)
        return value

    def _next_target(self, stop: int | None) -> int:
        target = self._next + self._step
        if stop is not None and target > stop:
            return stop
        if target > self._max_index:
            logger.debug("islice target saturated at %d", self._max_index)
            return self._max_index
        return target
