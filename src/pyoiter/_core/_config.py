from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Any

from ._format import iter_repr


@dataclass(slots=True, frozen=True)
class Config:
    """Process-wide settings shared by every cursor.

    Cursors read the settings they need once, at construction, so replacing the config never alters a cursor already in flight.

    Args:
        max_index (int): Largest index or count accepted by numeric parameters (`Islice` bounds, `Repeat` times, ...). Defaults to `sys.maxsize`.
        iter_repr_max_items (int): Number of pool items shown by cursor reprs before truncating. Defaults to 20.

    Example:
    ```python
    >>> import pyoiter as po
    >>> po.get_config().max_index == __import__("sys").maxsize
    True
    >>> po.get_config().iter_repr(range(3))
    '(0, 1, 2)'

    ```
    """

    max_index: int = sys.maxsize
    iter_repr_max_items: int = 20

    def __post_init__(self) -> None:
        if self.max_index < 1:
            msg = f"max_index must be a positive integer, got {self.max_index}"
            raise ValueError(msg)
        if self.iter_repr_max_items < 0:
            msg = f"iter_repr_max_items must be non-negative, got {self.iter_repr_max_items}"
            raise ValueError(msg)

    def iter_repr(self, data: Sequence[Any]) -> str:
        return iter_repr(data, self.iter_repr_max_items)


_CONFIG = Config()


def get_config() -> Config:
    """Get the active `Config`.

    Returns:
        Config: The settings currently used by new cursors.
    """
    return _CONFIG


def set_config(**changes: Any) -> Config:  # noqa: ANN401
    """Replace fields of the active `Config`.

    Args:
        **changes (Any): Field names and their new values.

    Returns:
        Config: The new active config.

    Example:
    ```python
    >>> import pyoiter as po
    >>> previous = po.get_config()
    >>> po.set_config(iter_repr_max_items=2).iter_repr([1, 2, 3])
    '(1, 2, ...)'
    >>> po.set_config(iter_repr_max_items=previous.iter_repr_max_items).iter_repr_max_items
    20

    ```
    """
    global _CONFIG  # noqa: PLW0603
    _CONFIG = replace(_CONFIG, **changes)
    return _CONFIG


@contextmanager
def config_context(**changes: Any) -> Iterator[Config]:  # noqa: ANN401
    """Temporarily replace fields of the active `Config`, restoring the previous one on exit.

    Args:
        **changes (Any): Field names and their new values.

    Yields:
        Config: The config active inside the block.

    Example:
    ```python
    >>> import pyoiter as po
    >>> with po.config_context(max_index=10) as cfg:
    ...     cfg.max_index
    10
    >>> po.get_config().max_index > 10
    True

    ```
    """
    global _CONFIG  # noqa: PLW0603
    previous = _CONFIG
    _CONFIG = replace(previous, **changes)
    try:
        yield _CONFIG
    finally:
        _CONFIG = previous
