from __future__ import annotations

import operator
from typing import Any, Self

from ._cursor import Cursor, check_count


class Count(Cursor[int]):
    """An infinite arithmetic sequence of integers: **start**, **start** + **step**, **start** + 2 * **step**, ...

    Arbitrary precision, so the sequence never overflows.

    **Warning** ⚠️
        This cursor is never exhausted.
        Be sure to bound it, with `Islice` or `TakeWhile` for example.

    Args:
        start (int): Starting value of the sequence. Defaults to 0.
        step (int): Difference between consecutive values. Defaults to 1.

    Raises:
        TypeError: If **start** or **step** cannot be interpreted as an integer.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.Islice(po.Count(10, 2), 3).collect()
    (10, 12, 14)
    >>> po.Islice(po.Count(2**64, -2**64), 3).collect()
    (18446744073709551616, 0, -18446744073709551616)

    ```
    """

    __slots__ = ("_current", "_step")

    def __init__(self, start: int = 0, step: int = 1) -> None:
        self._current = operator.index(start)
        self._step = operator.index(step)

    def __repr__(self) -> str:
        if self._step == 1:
            return f"Count({self._current})"
        return f"Count({self._current}, {self._step})"

    def __next__(self) -> int:
        current = self._current
        self._current = current + self._step
        return current


class Repeat[T](Cursor[T]):
    """Returns **obj** over and over again, **times** times or forever.

    Args:
        obj (T): The value to repeat.
        times (int | None): How many times to produce **obj**. `None` repeats it indefinitely. Defaults to None.

    Raises:
        TypeError: If **times** is neither `None` nor an integer.
        ValueError: If **times** is negative or above `Config.max_index`.

    Example:
    ```python
    >>> import operator
    >>> import pyoiter as po
    >>> po.Repeat("x", 3).collect()
    ('x', 'x', 'x')
    >>> rep = po.Repeat(0, 5)
    >>> rep.next()
    Some(0)
    >>> operator.length_hint(rep)
    4
    >>> operator.length_hint(po.Repeat(0), -1)
    -1

    ```
    """

    __slots__ = ("_object", "_times")

    def __init__(self, obj: T, times: int | None = None) -> None:
        self._object = obj
        self._times = None if times is None else check_count(times, "times")

    def __repr__(self) -> str:
        if self._times is None:
            return f"Repeat({self._object!r})"
        return f"Repeat({self._object!r}, {self._times})"

    def __length_hint__(self) -> int:
        """Return the remaining count.

        Raises:
            TypeError: For an unbounded `Repeat`, so that `operator.length_hint` falls back to its default.
        """
        if self._times is None:
            msg = "length of unsized object."
            raise TypeError(msg)
        return self._times

    def __reduce__(self) -> tuple[type[Self], tuple[Any, ...]]:
        """Reconstruction support: `Repeat(obj)` or `Repeat(obj, remaining)`.

        Example:
        ```python
        >>> import copy
        >>> import pyoiter as po
        >>> rep = po.Repeat("a", 3)
        >>> _ = rep.next()
        >>> rep.__reduce__()
        (<class 'pyoiter._producers.Repeat'>, ('a', 2))
        >>> copy.copy(rep).collect()
        ('a', 'a')

        ```
        """
        if self._times is None:
            return (type(self), (self._object,))
        return (type(self), (self._object, self._times))

    def __next__(self) -> T:
        times = self._times
        if times is not None:
            if times == 0:
                raise StopIteration
            self._times = times - 1
        return self._object
