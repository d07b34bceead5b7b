from __future__ import annotations

import operator
from abc import abstractmethod
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Self

from ._core import Pipeable, get_config
from ._results import NONE, Option, Some
from ._types import MISSING


def to_cursor[T](data: Iterable[T]) -> Iterator[T]:
    """Adapt any `Iterable` to a pull-based `Iterator`.

    This is the only place where a source is converted, and it happens once, when a combinator is constructed.

    Args:
        data (Iterable[T]): Any object that can be iterated over.

    Returns:
        Iterator[T]: The iterator over **data**.

    Raises:
        TypeError: If **data** is not iterable.
    """
    return iter(data)


def check_count(value: object, name: str) -> int:
    """Validate a count-like numeric parameter (`r`, `times`, `n`, `repeat`).

    Args:
        value (object): The value to validate.
        name (str): The parameter name, used in error messages.

    Returns:
        int: The value, as an `int` in `[0, max_index]`.

    Raises:
        TypeError: If **value** cannot be interpreted as an integer.
        ValueError: If **value** is negative or above `Config.max_index`.
    """
    count = operator.index(value)  # type: ignore[arg-type]
    if count < 0:
        msg = f"{name} must be non-negative"
        raise ValueError(msg)
    max_index = get_config().max_index
    if count > max_index:
        msg = f"{name} must not exceed {max_index}"
        raise ValueError(msg)
    return count


def check_callable(func: object, name: str) -> None:
    if not callable(func):
        msg = f"'{type(func).__name__}' object is not callable (argument '{name}')"
        raise TypeError(msg)


class Cursor[T](Pipeable, Iterator[T]):
    """Base class for every combinator: a stateful handle producing one value per advancement, or signaling exhaustion.

    Implements the `Iterator` Protocol from `collections.abc`, so any `Cursor` can be used as a standard iterator:

    - `__next__` returns the next value, or raises `StopIteration` once the cursor is exhausted.
    - Any other exception raised while advancing (by an upstream cursor, a supplied callable, a comparison) is forwarded unchanged.

    `Cursor.next()` exposes the same advancement as an `Option`, for callers who prefer not to rely on `StopIteration`.

    Cursors are single-pass: once exhausted, they cannot be reset.
    """

    __slots__ = ()

    def __iter__(self) -> Self:
        return self

    @abstractmethod
    def __next__(self) -> T:
        """Produce the next value, or raise `StopIteration` once exhausted."""
        ...

    def next(self) -> Option[T]:
        """Advance the cursor by one step.

        Note:
            The actual `.__next__()` method is conform to the Python `Iterator` Protocol, and is what will be actually called if you iterate over the cursor.

            `Cursor.next()` is a convenience method that wraps the outcome in an `Option` to handle exhaustion explicitly.

        Returns:
            Option[T]: `Some(value)` if a value was produced, `NONE` if the cursor is exhausted.

        Example:
        ```python
        >>> import pyoiter as po
        >>> cursor = po.Repeat(None, 1)
        >>> cursor.next()
        Some(None)
        >>> cursor.next()
        NONE

        ```
        """
        value: Any = next(self, MISSING)
        if value is MISSING:
            return NONE
        return Some(value)

    def collect[R](self, collector: Callable[[Iterable[T]], R] = tuple) -> R:  # type: ignore[assignment]
        """Drain the cursor into a collection.

        This is a terminal operation: the cursor is exhausted afterwards.

        Args:
            collector (Callable[[Iterable[T]], R]): The collection constructor. Defaults to `tuple`.

        Returns:
            R: The collected values.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Pairwise("abc").collect()
        (('a', 'b'), ('b', 'c'))
        >>> po.Chain([3, 1], [2]).collect(sorted)
        [1, 2, 3]

        ```
        """
        return collector(self)
