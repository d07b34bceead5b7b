from collections.abc import Sequence
from typing import Any


def iter_repr(data: Sequence[Any], max_items: int = 20) -> str:
    truncated = ", ".join(repr(item) for item in data[:max_items])
    suffix = ", ..." if len(data) > max_items else ""
    match len(data):
        case 1:
            return f"({truncated},)"
        case _:
            return f"({truncated}{suffix})"
