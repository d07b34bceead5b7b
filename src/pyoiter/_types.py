from __future__ import annotations

from typing import TYPE_CHECKING, Final, NamedTuple

if TYPE_CHECKING:
    from ._groupby import Grouper


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<missing>"


MISSING: Final = _Missing()
"""Marks an absent slot where `None` is a legitimate value (buffered values, accumulators, defaults)."""


class Group[K, V](NamedTuple):
    """Represents a run of adjacent values sharing a common key.

    See `GroupBy` for details.
    """

    key: K
    """The common key for the group."""
    values: Grouper[V]
    """A single-pass cursor over the values associated with the key."""

    def __repr__(self) -> str:
        return f"({self.key!r}, {self.values!r})"
