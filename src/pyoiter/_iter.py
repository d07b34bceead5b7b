from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, overload

import cytoolz as cz
import more_itertools as mit

from ._combinatorics import (
    Combinations,
    CombinationsWithReplacement,
    Permutations,
    Product,
)
from ._combiners import Chain, ZipLongest
from ._cursor import Cursor, to_cursor
from ._filters import (
    Accumulate,
    Compress,
    DropWhile,
    FilterFalse,
    Pairwise,
    Starmap,
    TakeWhile,
)
from ._groupby import GroupBy
from ._islice import Islice
from ._producers import Count, Repeat
from ._replay import Cycle, tee
from ._results import NONE, Option, Some
from ._types import MISSING, Group


class Iter[T](Cursor[T]):
    """A fluent wrapper around any `Iterator`, exposing every combinator as a chainable method.

    - An `Iterable` is any object capable of returning its members one at a time, permitting it to be iterated over in a for-loop.
    - An `Iterator` is an object representing a stream of data; returned by calling `iter()` on an `Iterable`.
    - Once an `Iterator` is exhausted, it cannot be reused or reset.

    Every method returning an `Iter` is lazy: nothing is pulled from the source until the result is advanced.
    The only exceptions are the combinatoric methods (`product`, `combinations`, ...), which consume the source into a pool right away.

    Keep in mind that `Iter` instances are single-use; once exhausted, they cannot be reused or reset.
    If you need to reuse the data, consider collecting it first with `.collect()`, or splitting it with `.tee()`.

    In general, avoid intermediate references when dealing with lazy iterators, and prioritize method chaining instead.

    Args:
        data (Iterable[T]): Any object that can be iterated over.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.Iter(range(10)).filter_false(lambda x: x % 3).pairwise().collect()
    ((0, 3), (3, 6), (6, 9))

    ```
    """

    __slots__ = ("_inner",)

    def __init__(self, data: Iterable[T]) -> None:
        self._inner = to_cursor(data)

    def __next__(self) -> T:
        return next(self._inner)

    def __repr__(self) -> str:
        return f"Iter({self._inner!r})"

    def _iter[U](self, cursor: Iterator[U]) -> Iter[U]:
        return Iter(cursor)

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Iter[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Iter[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Iter[U]:
        """Create an `Iter` from an `Iterable`, or from unpacked values.

        Args:
            data (Iterable[U] | U): Iterable to wrap, or a first value.
            *more_data (U): More values, if **data** is not an `Iterable`.

        Returns:
            Iter[U]: A new `Iter` over the provided data.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter.from_(1, 2, 3).collect()
        (1, 2, 3)
        >>> po.Iter.from_([1, 2]).collect()
        (1, 2)

        ```
        """
        if cz.itertoolz.isiterable(data):
            return Iter(data)  # type: ignore[arg-type]
        return Iter((data, *more_data))  # type: ignore[arg-type]

    @staticmethod
    def from_count(start: int = 0, step: int = 1) -> Iter[int]:
        """Create an infinite `Iter` of evenly spaced integers.

        **Warning** ⚠️
            This creates an infinite iterator.
            Be sure to use `Iter.take()` or `Iter.slice()` to limit the number of items taken.

        Args:
            start (int): Starting value of the sequence. Defaults to 0.
            step (int): Difference between consecutive values. Defaults to 1.

        Returns:
            Iter[int]: An iterator generating the sequence.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter.from_count(10, 2).take(3).collect()
        (10, 12, 14)

        ```
        """
        return Iter(Count(start, step))

    @staticmethod
    def from_repeat[U](value: U, times: int | None = None) -> Iter[U]:
        """Create an `Iter` returning **value** **times** times, or forever.

        Args:
            value (U): The value to repeat.
            times (int | None): Number of repetitions. Defaults to None, repeating forever.

        Returns:
            Iter[U]: An iterator over the repeated value.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter.from_repeat("a", 2).chain("b").collect()
        ('a', 'a', 'b')

        ```
        """
        return Iter(Repeat(value, times))

    def chain(self, *others: Iterable[T]) -> Iter[T]:
        """Concatenate **others** after the values of `self`.

        Args:
            *others (Iterable[T]): Iterables to chain after `self`, in order.

        Returns:
            Iter[T]: An iterator over all the values.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2]).chain([3], (), range(4, 6)).collect()
        (1, 2, 3, 4, 5)

        ```
        """
        return self._iter(Chain(self._inner, *others))

    def compress(self, *selectors: object) -> Iter[T]:
        """Filter elements using boolean selectors, one per element.

        Args:
            *selectors (object): Values whose truthiness indicate which elements to keep.

        Returns:
            Iter[T]: An iterator of the selected elements.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter("ABCDEF").compress(1, 0, 1, 0, 1, 1).collect()
        ('A', 'C', 'E', 'F')

        ```
        """
        return self._iter(Compress(self._inner, selectors))

    def filter_false(self, func: Callable[[T], object] | None = None) -> Iter[T]:
        """Return elements for which **func** is false, or which are falsy if **func** is None.

        Args:
            func (Callable[[T], object] | None): Function to evaluate each element. Defaults to None.

        Returns:
            Iter[T]: An iterator of the elements that do not satisfy the predicate.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2, 3]).filter_false(lambda x: x > 1).collect()
        (1,)

        ```
        """
        return self._iter(FilterFalse(func, self._inner))

    def take_while(self, predicate: Callable[[T], object]) -> Iter[T]:
        """Take elements while **predicate** holds.

        Args:
            predicate (Callable[[T], object]): Function to evaluate each element.

        Returns:
            Iter[T]: An iterator of the elements taken while the predicate is true.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter((1, 2, 0)).take_while(lambda x: x > 0).collect()
        (1, 2)

        ```
        """
        return self._iter(TakeWhile(predicate, self._inner))

    def skip_while(self, predicate: Callable[[T], object]) -> Iter[T]:
        """Drop elements while **predicate** holds.

        Args:
            predicate (Callable[[T], object]): Function to evaluate each element.

        Returns:
            Iter[T]: An iterator of the elements after the first one failing the predicate, included.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter((1, 2, 0, 3)).skip_while(lambda x: x > 0).collect()
        (0, 3)

        ```
        """
        return self._iter(DropWhile(predicate, self._inner))

    def map_star[R](self: Iter[Iterable[Any]], func: Callable[..., R]) -> Iter[R]:
        """Apply **func** to each element, unpacking the element as positional arguments.

        Args:
            func (Callable[..., R]): Function to apply to the unpacked elements.

        Returns:
            Iter[R]: An iterator of the results.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([("a", 2), ("b", 3)]).map_star(lambda s, n: s * n).collect()
        ('aa', 'bbb')

        ```
        """
        return self._iter(Starmap(func, self._inner))

    def accumulate(
        self, func: Callable[[T, T], T] | None = None, initial: T | None = None
    ) -> Iter[T]:
        """Return running totals, or the running results of **func**.

        Args:
            func (Callable[[T, T], T] | None): Binary function to combine the total with each element. Defaults to addition.
            initial (T | None): Value returned first, seeding the total. Defaults to None.

        Returns:
            Iter[T]: An iterator of the running totals.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2, 3]).accumulate().collect()
        (1, 3, 6)
        >>> po.Iter([1, 2, 3]).accumulate(lambda a, b: a * b, initial=10).collect()
        (10, 10, 20, 60)

        ```
        """
        return self._iter(Accumulate(self._inner, func, initial=initial))

    def pairwise(self) -> Iter[tuple[T, T]]:
        """Return successive overlapping pairs of elements.

        Returns:
            Iter[tuple[T, T]]: An iterator of the pairs.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2, 3]).pairwise().collect()
        ((1, 2), (2, 3))

        ```
        """
        return self._iter(Pairwise(self._inner))

    def slice(
        self,
        start: int | None = None,
        stop: int | None = None,
        step: int | None = None,
    ) -> Iter[T]:
        """Return a lazy slice of the elements.

        Args:
            start (int | None): Starting index of the slice. Defaults to None.
            stop (int | None): Ending index of the slice. Defaults to None.
            step (int | None): Step size for the slice. Defaults to None.

        Returns:
            Iter[T]: An iterator of the sliced elements.

        Example:
        ```python
        >>> import pyoiter as po
        >>> data = (1, 2, 3, 4, 5)
        >>> po.Iter(data).slice(1, 4).collect()
        (2, 3, 4)
        >>> po.Iter(data).slice(step=2).collect()
        (1, 3, 5)

        ```
        """
        return self._iter(Islice(self._inner, start, stop, step))

    def take(self, n: int) -> Iter[T]:
        """Yield the first **n** elements, or fewer if the underlying iterator ends sooner.

        Args:
            n (int): Number of elements to take.

        Returns:
            Iter[T]: An iterator of the first **n** elements.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2, 3]).take(2).collect()
        (1, 2)
        >>> po.Iter([1, 2, 3]).take(5).collect()
        (1, 2, 3)

        ```
        """
        return self._iter(Islice(self._inner, n))

    def skip(self, n: int) -> Iter[T]:
        """Drop the first **n** elements.

        Args:
            n (int): Number of elements to skip.

        Returns:
            Iter[T]: An iterator of the elements after the first **n** ones.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter((1, 2, 3)).skip(1).collect()
        (2, 3)

        ```
        """
        return self._iter(Islice(self._inner, n, None))

    def step_by(self, step: int) -> Iter[T]:
        """Yield every **step**-th element, starting with the first one.

        Args:
            step (int): Step size for selecting elements.

        Returns:
            Iter[T]: An iterator of every **step**-th element.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([0, 1, 2, 3, 4, 5]).step_by(2).collect()
        (0, 2, 4)

        ```
        """
        return self._iter(Islice(self._inner, 0, None, step))

    def cycle(self) -> Iter[T]:
        """Repeat the elements indefinitely.

        **Warning** ⚠️
            Unless `self` is empty, this creates an infinite iterator.

        Returns:
            Iter[T]: An iterator cycling through the elements.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2]).cycle().take(5).collect()
        (1, 2, 1, 2, 1)

        ```
        """
        return self._iter(Cycle(self._inner))

    def tee(self, n: int = 2) -> tuple[Iter[T], ...]:
        """Split the iterator into **n** independent iterators.

        `self` should not be used after calling this method.

        Args:
            n (int): Number of iterators to return. Defaults to 2.

        Returns:
            tuple[Iter[T], ...]: The independent iterators.

        Example:
        ```python
        >>> import pyoiter as po
        >>> evens, odds = po.Iter(range(6)).tee()
        >>> evens.step_by(2).collect(), odds.skip(1).step_by(2).collect()
        ((0, 2, 4), (1, 3, 5))

        ```
        """
        return tuple(Iter(cursor) for cursor in tee(self._inner, n))

    def group_by[K](self, key: Callable[[T], K] | None = None) -> Iter[Group[K, T]]:
        """Group consecutive elements sharing the same key.

        Each group is only valid until the next one is requested.

        Args:
            key (Callable[[T], K] | None): Function computing the key of each element. Defaults to None, using the element itself.

        Returns:
            Iter[Group[K, T]]: An iterator of `Group(key, values)`.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 3, 2, 4, 5]).group_by(lambda x: x % 2).map_star(lambda k, g: (k, g.collect())).collect()
        ((1, (1, 3)), (0, (2, 4)), (1, (5,)))

        ```
        """
        return self._iter(GroupBy(self._inner, key))

    def zip_longest(self, *others: Iterable[Any], fillvalue: Any = None) -> Iter[tuple[Any, ...]]:  # noqa: ANN401
        """Zip with **others**, padding the shorter iterables with **fillvalue**.

        Args:
            *others (Iterable[Any]): Other iterables to zip with.
            fillvalue (Any): Value used for missing elements. Defaults to None.

        Returns:
            Iter[tuple[Any, ...]]: An iterator of tuples.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2, 3]).zip_longest([1], fillvalue=0).collect()
        ((1, 1), (2, 0), (3, 0))

        ```
        """
        return self._iter(ZipLongest(self._inner, *others, fillvalue=fillvalue))

    def product(self, *others: Iterable[Any], repeat: int = 1) -> Iter[tuple[Any, ...]]:
        """Cartesian product of the elements with **others**.

        Args:
            *others (Iterable[Any]): Other iterables to combine with.
            repeat (int): Number of times the pools are repeated. Defaults to 1.

        Returns:
            Iter[tuple[Any, ...]]: An iterator of tuples.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter("ab").product([1, 2]).collect()
        (('a', 1), ('a', 2), ('b', 1), ('b', 2))

        ```
        """
        return self._iter(Product(self._inner, *others, repeat=repeat))

    def combinations(self, r: int) -> Iter[tuple[T, ...]]:
        """Return successive **r**-length combinations of elements.

        Args:
            r (int): Length of each combination.

        Returns:
            Iter[tuple[T, ...]]: An iterator of combinations.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2, 3]).combinations(2).collect()
        ((1, 2), (1, 3), (2, 3))

        ```
        """
        return self._iter(Combinations(self._inner, r))

    def combinations_with_replacement(self, r: int) -> Iter[tuple[T, ...]]:
        """Return successive **r**-length combinations of elements, allowing repeated elements.

        Args:
            r (int): Length of each combination.

        Returns:
            Iter[tuple[T, ...]]: An iterator of combinations.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2]).combinations_with_replacement(2).collect()
        ((1, 1), (1, 2), (2, 2))

        ```
        """
        return self._iter(CombinationsWithReplacement(self._inner, r))

    def permutations(self, r: int | None = None) -> Iter[tuple[T, ...]]:
        """Return successive **r**-length permutations of elements.

        Args:
            r (int | None): Length of each permutation. Defaults to None, meaning all elements.

        Returns:
            Iter[tuple[T, ...]]: An iterator of permutations.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2, 3]).permutations(2).collect()
        ((1, 2), (1, 3), (2, 1), (2, 3), (3, 1), (3, 2))

        ```
        """
        return self._iter(Permutations(self._inner, r))

    def length(self) -> int:
        """Return the number of remaining elements.

        This is a terminal operation.

        Returns:
            int: The count of elements.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter(range(5)).length()
        5

        ```
        """
        return cz.itertoolz.count(self._inner)

    def last(self) -> Option[T]:
        """Return the last element.

        This is a terminal operation.

        Returns:
            Option[T]: `Some(last)`, or `NONE` if there is no element left.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter([1, 2, 3]).last()
        Some(3)
        >>> po.Iter([]).last()
        NONE

        ```
        """
        value: Any = mit.last(self._inner, MISSING)
        return NONE if value is MISSING else Some(value)

    def nth(self, n: int) -> Option[T]:
        """Return the element at index **n**, consuming the elements before it.

        Args:
            n (int): Index of the element to return.

        Returns:
            Option[T]: `Some(element)`, or `NONE` if there are **n** elements or fewer left.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Iter("abc").nth(1)
        Some('b')
        >>> po.Iter("abc").nth(3)
        NONE

        ```
        """
        value: Any = mit.nth(self._inner, n, MISSING)
        return NONE if value is MISSING else Some(value)
