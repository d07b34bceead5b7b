from __future__ import annotations

import logging
import threading
import weakref
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from ._cursor import Cursor, check_callable, to_cursor
from ._types import MISSING, Group

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _GroupByState:
    current_key: Any = MISSING
    current_value: Any = MISSING
    next_group: bool = False
    grouper: weakref.ref[Grouper[Any]] | None = None

    def is_current(self, grouper: Grouper[Any]) -> bool:
        return self.grouper is not None and self.grouper() is grouper


class GroupBy[K, T](Cursor[Group[K, T]]):
    """Return consecutive keys and groups from **iterable**.

    Values are grouped by adjacency only: a key appearing again after a different key starts a new group.
    Sort **iterable** by **key** beforehand to get one group per distinct key.

    Each group is a `Group(key, values)` named tuple, **values** being a `Grouper` sharing the source with this cursor.
    Advancing the `GroupBy` invalidates the previously returned `Grouper`: any value it did not yield yet is skipped, and it is exhausted from then on.

    Args:
        iterable (Iterable[T]): The values to group.
        key (Callable[[T], K] | None): Function computing the key of each value. Defaults to None, using the value itself as its key.

    Example:
    ```python
    >>> import pyoiter as po
    >>> [(k, g.collect()) for k, g in po.GroupBy([1, 1, 2, 2, 1])]
    [(1, (1, 1)), (2, (2, 2)), (1, (1,))]
    >>> [k for k, _ in po.GroupBy("AAAABBBCCDAABBB")]
    ['A', 'B', 'C', 'D', 'A', 'B']
    >>> [(k, g.collect(list)) for k, g in po.GroupBy(["ab", "cd", "e"], len)]
    [(2, ['ab', 'cd']), (1, ['e'])]

    ```
    """

    __slots__ = ("_key_func", "_lock", "_source", "_state")

    def __init__(
        self, iterable: Iterable[T], key: Callable[[T], K] | None = None
    ) -> None:
        if key is not None:
            check_callable(key, "key")
        self._source = to_cursor(iterable)
        self._key_func = key
        self._state = _GroupByState()
        self._lock = threading.Lock()

    def _advance(self) -> tuple[T, K]:
        value = next(self._source)
        key: Any = value if self._key_func is None else self._key_func(value)
        return value, key

    def __next__(self) -> Group[K, T]:
        with self._lock:
            state = self._state
            superseded = state.grouper is not None and state.grouper() is not None
            state.grouper = None
            needs_advance = not state.next_group
            old_key = state.current_key
        if superseded:
            logger.debug("groupby advanced, superseding group %r", old_key)
        if needs_advance:
            value, key = self._advance()
            if old_key is not MISSING:
                while key == old_key:
                    value, key = self._advance()
            with self._lock:
                state.current_value = value
                state.current_key = key
        with self._lock:
            state.next_group = False
            grouper = Grouper(self)
            state.grouper = weakref.ref(grouper)
            return Group(state.current_key, grouper)


class Grouper[T](Cursor[T]):
    """A single-pass cursor over one group of a `GroupBy`.

    Only valid while it is the current group of its parent: once the parent is advanced, or once this group reaches a value with a different key, it is exhausted for good.

    Example:
    ```python
    >>> import pyoiter as po
    >>> groups = po.GroupBy("aabbb")
    >>> _, a_values = groups.next().unwrap()
    >>> _, b_values = groups.next().unwrap()
    >>> (a_values.collect(), b_values.collect())
    ((), ('b', 'b', 'b'))

    ```
    """

    __slots__ = ("__weakref__", "_parent")

    def __init__(self, parent: GroupBy[Any, T]) -> None:
        self._parent = parent

    def __repr__(self) -> str:
        return f"Grouper(current={self.is_current()})"

    def is_current(self) -> bool:
        """Check if this group can still produce values.

        Returns:
            bool: True if this is the current group of its parent.
        """
        parent = self._parent
        with parent._lock:  # noqa: SLF001
            return parent._state.is_current(self)  # noqa: SLF001

    def __next__(self) -> T:
        parent = self._parent
        with parent._lock:  # noqa: SLF001
            state = parent._state  # noqa: SLF001
            if not state.is_current(self):
                raise StopIteration
            buffered = state.current_value
            if buffered is not MISSING:
                state.current_value = MISSING
                return buffered
            old_key = state.current_key
        value, key = parent._advance()  # noqa: SLF001
        if key == old_key:
            return value
        with parent._lock:  # noqa: SLF001
            state.current_value = value
            state.current_key = key
            state.next_group = True
            state.grouper = None
        raise StopIteration
