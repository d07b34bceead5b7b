from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ._core import get_config
from ._cursor import Cursor, check_count, to_cursor


class Product(Cursor[tuple[Any, ...]]):
    """Cartesian product of the input iterables, equivalent to nested for-loops.

    Each iterable is fully consumed into a pool at construction.
    Tuples are emitted in lexicographic order of the pools positions, the rightmost pool advancing on every step, like an odometer.

    To compute the product of an iterable with itself, specify the number of repetitions with **repeat**.

    Args:
        *iterables (Iterable[Any]): The iterables to combine.
        repeat (int): Number of times the list of pools is repeated. Defaults to 1.

    Raises:
        ValueError: If **repeat** is negative.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.Product([0, 1], [0, 1]).collect()
    ((0, 0), (0, 1), (1, 0), (1, 1))
    >>> po.Product("AB", repeat=2).collect()
    (('A', 'A'), ('A', 'B'), ('B', 'A'), ('B', 'B'))
    >>> po.Product("AB", []).collect()
    ()
    >>> po.Product().collect()
    ((),)

    ```
    """

    __slots__ = ("_active", "_indices", "_pools", "_stopped")

    def __init__(self, *iterables: Iterable[Any], repeat: int = 1) -> None:
        repeat = check_count(repeat, "repeat")
        pools = tuple(tuple(to_cursor(iterable)) for iterable in iterables) * repeat
        self._pools = pools
        self._indices = [0] * len(pools)
        self._active = len(pools) - 1
        self._stopped = any(not pool for pool in pools)

    def __repr__(self) -> str:
        pools = ", ".join(get_config().iter_repr(pool) for pool in self._pools)
        return f"Product({pools})"

    def __next__(self) -> tuple[Any, ...]:
        if self._stopped:
            raise StopIteration
        result = tuple(
            pool[idx] for pool, idx in zip(self._pools, self._indices, strict=True)
        )
        self._update_indices()
        return result

    def _update_indices(self) -> None:
        indices = self._indices
        if not indices:
            self._stopped = True
            return
        active = self._active
        while indices[active] == len(self._pools[active]) - 1:
            if active == 0:
                self._stopped = True
                return
            indices[active] = 0
            active -= 1
        indices[active] += 1
        self._active = len(indices) - 1


class Combinations(Cursor[tuple[Any, ...]]):
    """Return successive **r**-length combinations of values from **iterable**.

    Combinations are emitted in lexicographic order of the positions in the pool: values are treated as unique based on their position, not on their value.

    Args:
        iterable (Iterable[Any]): The pool of values, fully consumed at construction.
        r (int): Length of each combination.

    Raises:
        ValueError: If **r** is negative.

    Example:
    ```python
    >>> import pyoiter as po
    >>> ["".join(c) for c in po.Combinations("ABCD", 2)]
    ['AB', 'AC', 'AD', 'BC', 'BD', 'CD']
    >>> po.Combinations(range(4), 3).collect()
    ((0, 1, 2), (0, 1, 3), (0, 2, 3), (1, 2, 3))
    >>> po.Combinations("AB", 0).collect()
    ((),)
    >>> po.Combinations("AB", 3).collect()
    ()

    ```
    """

    __slots__ = ("_exhausted", "_indices", "_pool", "_r")

    def __init__(self, iterable: Iterable[Any], r: int) -> None:
        r = check_count(r, "r")
        self._pool = tuple(to_cursor(iterable))
        self._r = r
        self._exhausted = r > len(self._pool)
        self._indices = [] if self._exhausted else list(range(r))

    def __repr__(self) -> str:
        return f"Combinations({get_config().iter_repr(self._pool)}, r={self._r})"

    def __next__(self) -> tuple[Any, ...]:
        if self._exhausted:
            raise StopIteration
        r = self._r
        if r == 0:
            self._exhausted = True
            return ()
        pool, indices = self._pool, self._indices
        result = tuple(pool[i] for i in indices)
        n = len(pool)
        # rightmost index not at its maximum, i + n - r
        idx = r - 1
        while idx >= 0 and indices[idx] == idx + n - r:
            idx -= 1
        if idx < 0:
            self._exhausted = True
        else:
            indices[idx] += 1
            for j in range(idx + 1, r):
                indices[j] = indices[j - 1] + 1
        return result


class CombinationsWithReplacement(Cursor[tuple[Any, ...]]):
    """Return successive **r**-length combinations of values from **iterable**, allowing individual values to be repeated.

    Combinations are emitted in lexicographic order of the positions in the pool.

    Args:
        iterable (Iterable[Any]): The pool of values, fully consumed at construction.
        r (int): Length of each combination.

    Raises:
        ValueError: If **r** is negative.

    Example:
    ```python
    >>> import pyoiter as po
    >>> ["".join(c) for c in po.CombinationsWithReplacement("ABC", 2)]
    ['AA', 'AB', 'AC', 'BB', 'BC', 'CC']
    >>> po.CombinationsWithReplacement([], 2).collect()
    ()
    >>> po.CombinationsWithReplacement([], 0).collect()
    ((),)

    ```
    """

    __slots__ = ("_exhausted", "_indices", "_pool", "_r")

    def __init__(self, iterable: Iterable[Any], r: int) -> None:
        r = check_count(r, "r")
        self._pool = tuple(to_cursor(iterable))
        self._r = r
        self._exhausted = not self._pool and r > 0
        self._indices = [] if self._exhausted else [0] * r

    def __repr__(self) -> str:
        return f"CombinationsWithReplacement({get_config().iter_repr(self._pool)}, r={self._r})"

    def __next__(self) -> tuple[Any, ...]:
        if self._exhausted:
            raise StopIteration
        r = self._r
        if r == 0:
            self._exhausted = True
            return ()
        pool, indices = self._pool, self._indices
        result = tuple(pool[i] for i in indices)
        last = len(pool) - 1
        idx = r - 1
        while idx >= 0 and indices[idx] == last:
            idx -= 1
        if idx < 0:
            self._exhausted = True
        else:
            value = indices[idx] + 1
            for j in range(idx, r):
                indices[j] = value
        return result


class Permutations(Cursor[tuple[Any, ...]]):
    """Return successive **r**-length permutations of values from **iterable**.

    Permutations are emitted in lexicographic order of the positions in the pool.

    Args:
        iterable (Iterable[Any]): The pool of values, fully consumed at construction.
        r (int | None): Length of each permutation. Defaults to None, meaning the length of the pool.

    Raises:
        TypeError: If **r** is neither `None` nor an integer.
        ValueError: If **r** is negative.

    Example:
    ```python
    >>> import pyoiter as po
    >>> ["".join(p) for p in po.Permutations("ABC")]
    ['ABC', 'ACB', 'BAC', 'BCA', 'CAB', 'CBA']
    >>> po.Permutations(range(3), 2).collect()
    ((0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1))
    >>> po.Permutations("AB", 3).collect()
    ()

    ```
    """

    __slots__ = ("_cycles", "_exhausted", "_indices", "_pool", "_r", "_result")

    def __init__(self, iterable: Iterable[Any], r: int | None = None) -> None:
        if r is not None:
            r = check_count(r, "r")
        self._pool = tuple(to_cursor(iterable))
        n = len(self._pool)
        self._r = n if r is None else r
        self._indices = list(range(n))
        self._cycles = [n - i for i in range(min(self._r, n))]
        self._result: list[int] | None = None
        self._exhausted = self._r > n

    def __repr__(self) -> str:
        return f"Permutations({get_config().iter_repr(self._pool)}, r={self._r})"

    def __next__(self) -> tuple[Any, ...]:
        if self._exhausted:
            raise StopIteration
        pool = self._pool
        if not pool:
            self._exhausted = True
            return ()
        if self._result is None:
            self._result = list(range(self._r))
        elif not self._rotate(self._result):
            self._exhausted = True
            raise StopIteration
        return tuple(pool[i] for i in self._result)

    def _rotate(self, result: list[int]) -> bool:
        n, r = len(self._pool), self._r
        indices, cycles = self._indices, self._cycles
        for i in reversed(range(r)):
            cycles[i] -= 1
            if cycles[i] == 0:
                indices[i:] = [*indices[i + 1 :], indices[i]]
                cycles[i] = n - i
            else:
                j = cycles[i]
                indices[i], indices[n - j] = indices[n - j], indices[i]
                result[i:r] = indices[i:r]
                return True
        return False
