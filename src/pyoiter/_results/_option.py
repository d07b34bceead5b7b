from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """Outcome of a single cursor advancement: `Some(value)` if a value was produced, `NONE` once the cursor is exhausted.

    Returned by `Cursor.next()`, as an explicit alternative to catching `StopIteration`.
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the option is a `Some` value.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Some(2).is_some()
        True
        >>> po.NONE.is_some()
        False

        ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is the `NONE` value.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Some(2).is_none()
        False
        >>> po.NONE.is_none()
        True

        ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Some` value.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Some("car").unwrap()
        'car'
        >>> po.NONE.unwrap()
        Traceback (most recent call last):
            ...
        pyoiter._results._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def expect(self, msg: str) -> T:
        """Returns the contained `Some` value, or raise with a provided message if the value is `NONE`.

        Args:
            msg (str): The message to include in the exception.

        Returns:
            T: The contained value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Count().next().expect("count never ends")
        0
        >>> po.Repeat(1, 0).next().expect("nothing left")
        Traceback (most recent call last):
            ...
        pyoiter._results._option.OptionUnwrapError: nothing left (called `expect` on a `None`)

        ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Some` value or a provided default.

        Args:
            default (T): The value to return if the option is `NONE`.

        Returns:
            T: The contained value or **default**.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Some("car").unwrap_or("bike")
        'car'
        >>> po.NONE.unwrap_or("bike")
        'bike'

        ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, func: Callable[[], T]) -> T:
        """Returns the contained `Some` value or computes it from **func**.

        Args:
            func (Callable[[], T]): Called only if the option is `NONE`.

        Returns:
            T: The contained value or the result of **func**.
        """
        return self.unwrap() if self.is_some() else func()

    def map[U](self, func: Callable[[T], U]) -> Option[U]:
        """Maps an `Option[T]` to `Option[U]` by applying **func** to a contained value, leaving `NONE` untouched.

        Args:
            func (Callable[[T], U]): The function to apply to the `Some` value.

        Returns:
            Option[U]: The mapped option.

        Example:
        ```python
        >>> import pyoiter as po
        >>> po.Some("Hello, World!").map(len)
        Some(13)
        >>> po.NONE.map(len)
        NONE

        ```
        """
        if self.is_some():
            return Some(func(self.unwrap()))
        return NONE

    def and_then[U](self, func: Callable[[T], Option[U]]) -> Option[U]:
        """Calls **func** with the contained value if `Some`, otherwise returns `NONE`.

        Args:
            func (Callable[[T], Option[U]]): The function to call with the `Some` value.

        Returns:
            Option[U]: The result of **func**, or `NONE`.
        """
        if self.is_some():
            return func(self.unwrap())
        return NONE


@dataclass(slots=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.Some(42)
    Some(42)
    >>> match po.Iter([None]).next():
    ...     case po.Some(value):
    ...         print(f"got {value}")
    got None

    ```
    """

    value: T

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        msg = "called `unwrap` on a `None`"
        raise OptionUnwrapError(msg)


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
