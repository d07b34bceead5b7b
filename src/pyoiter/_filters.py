from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from typing import Any

from ._cursor import Cursor, check_callable, to_cursor
from ._types import MISSING


class Compress[T](Cursor[T]):
    """Filter **data** using a parallel iterable of **selectors**, keeping the values whose selector is truthy.

    Selectors and data are consumed in lockstep, one for one, selector first: a data value is still pulled (and discarded) when its selector is falsy.

    Stops as soon as either iterable is exhausted.

    Args:
        data (Iterable[T]): The values to filter.
        selectors (Iterable[object]): Truthiness of each selector decides if the matching value is kept.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.Compress("ABCDEF", [1, 0, 1, 0, 1, 1]).collect()
    ('A', 'C', 'E', 'F')
    >>> po.Compress("ABCDEF", [True, True]).collect()
    ('A', 'B')

    ```
    """

    __slots__ = ("_data", "_selectors")

    def __init__(self, data: Iterable[T], selectors: Iterable[object]) -> None:
        self._data = to_cursor(data)
        self._selectors = to_cursor(selectors)

    def __next__(self) -> T:
        while True:
            verdict = bool(next(self._selectors))
            value = next(self._data)
            if verdict:
                return value


class FilterFalse[T](Cursor[T]):
    """Return the values for which **predicate** is false.

    If **predicate** is `None`, the truthiness of each value is used instead.

    Args:
        predicate (Callable[[T], object] | None): Function to evaluate each value.
        iterable (Iterable[T]): The values to filter.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.FilterFalse(lambda x: x > 1, [1, 2, 3, 0]).collect()
    (1, 0)
    >>> po.FilterFalse(None, [0, 1, "", "a", None]).collect()
    (0, '', None)

    ```
    """

    __slots__ = ("_predicate", "_source")

    def __init__(
        self, predicate: Callable[[T], object] | None, iterable: Iterable[T]
    ) -> None:
        if predicate is not None:
            check_callable(predicate, "predicate")
        self._predicate = predicate
        self._source = to_cursor(iterable)

    def __next__(self) -> T:
        predicate = self._predicate
        while True:
            value = next(self._source)
            verdict = value if predicate is None else predicate(value)
            if not verdict:
                return value


class TakeWhile[T](Cursor[T]):
    """Return values while **predicate** holds.

    The first value failing the predicate is consumed and dropped, and the cursor stays exhausted afterwards, even if later values would satisfy **predicate**.

    Args:
        predicate (Callable[[T], object]): Function to evaluate each value.
        iterable (Iterable[T]): The source values.

    Example:
    ```python
    >>> import pyoiter as po
    >>> cursor = po.TakeWhile(lambda x: x < 3, [1, 2, 3, 1, 2])
    >>> cursor.collect()
    (1, 2)
    >>> cursor.next()
    NONE

    ```
    """

    __slots__ = ("_predicate", "_source", "_stopped")

    def __init__(self, predicate: Callable[[T], object], iterable: Iterable[T]) -> None:
        check_callable(predicate, "predicate")
        self._predicate = predicate
        self._source = to_cursor(iterable)
        self._stopped = False

    def __next__(self) -> T:
        if self._stopped:
            raise StopIteration
        value = next(self._source)
        if self._predicate(value):
            return value
        self._stopped = True
        raise StopIteration


class DropWhile[T](Cursor[T]):
    """Drop values while **predicate** holds, then return every remaining value.

    Once a value fails **predicate**, the predicate is never called again.

    Args:
        predicate (Callable[[T], object]): Function to evaluate each value.
        iterable (Iterable[T]): The source values.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.DropWhile(lambda x: x < 3, [1, 2, 3, 1, 2]).collect()
    (3, 1, 2)

    ```
    """

    __slots__ = ("_predicate", "_source", "_started")

    def __init__(self, predicate: Callable[[T], object], iterable: Iterable[T]) -> None:
        check_callable(predicate, "predicate")
        self._predicate = predicate
        self._source = to_cursor(iterable)
        self._started = False

    def __next__(self) -> T:
        if not self._started:
            while True:
                value = next(self._source)
                if not self._predicate(value):
                    self._started = True
                    return value
        return next(self._source)


class Starmap[R](Cursor[R]):
    """Apply **function** to each value of **iterable**, unpacking the value as positional arguments.

    Args:
        function (Callable[..., R]): Function to call with the unpacked values.
        iterable (Iterable[Iterable[Any]]): Values to unpack, each being an iterable of arguments.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.Starmap(pow, [(2, 5), (3, 2), (10, 3)]).collect()
    (32, 9, 1000)

    ```
    """

    __slots__ = ("_function", "_source")

    def __init__(
        self, function: Callable[..., R], iterable: Iterable[Iterable[Any]]
    ) -> None:
        check_callable(function, "function")
        self._function = function
        self._source = to_cursor(iterable)

    def __next__(self) -> R:
        args = next(self._source)
        return self._function(*args)


class Accumulate[T](Cursor[T]):
    """Return running totals, or the running results of a binary **func**.

    The first value is either **initial** if given, or the first value of **iterable**.
    Every next value is `func(previous_total, value)`.

    Args:
        iterable (Iterable[T]): The source values.
        func (Callable[[T, T], T] | None): Binary function combining the running total with the next value. Defaults to addition.
        initial (T | None): Value emitted first, seeding the running total. Defaults to None.

    Example:
    ```python
    >>> import operator
    >>> import pyoiter as po
    >>> po.Accumulate([1, 2, 3, 4, 5]).collect()
    (1, 3, 6, 10, 15)
    >>> po.Accumulate([1, 2, 3, 4, 5], initial=100).collect()
    (100, 101, 103, 106, 110, 115)
    >>> po.Accumulate([3, 4, 6, 2, 1, 9, 0], max).collect()
    (3, 4, 6, 6, 6, 9, 9)
    >>> po.Accumulate([], operator.mul).collect()
    ()

    ```
    """

    __slots__ = ("_func", "_initial", "_source", "_total")

    def __init__(
        self,
        iterable: Iterable[T],
        func: Callable[[T, T], T] | None = None,
        *,
        initial: T | None = None,
    ) -> None:
        if func is not None:
            check_callable(func, "func")
        self._source = to_cursor(iterable)
        self._func: Callable[[Any, Any], Any] = operator.add if func is None else func
        self._initial: Any = MISSING if initial is None else initial
        self._total: Any = MISSING

    def __next__(self) -> T:
        total = self._total
        if total is MISSING:
            total = next(self._source) if self._initial is MISSING else self._initial
        else:
            total = self._func(total, next(self._source))
        self._total = total
        return total


class Pairwise[T](Cursor[tuple[T, T]]):
    """Return successive overlapping pairs taken from **iterable**.

    The number of pairs is one less than the number of values, zero if there is less than two values.

    Args:
        iterable (Iterable[T]): The source values.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.Pairwise("ABCD").collect()
    (('A', 'B'), ('B', 'C'), ('C', 'D'))
    >>> po.Pairwise([1]).collect()
    ()

    ```
    """

    __slots__ = ("_previous", "_source")

    def __init__(self, iterable: Iterable[T]) -> None:
        self._source = to_cursor(iterable)
        self._previous: Any = MISSING

    def __next__(self) -> tuple[T, T]:
        previous = self._previous
        if previous is MISSING:
            previous = next(self._source)
        current = next(self._source)
        self._previous = current
        return (previous, current)
