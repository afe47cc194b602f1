from collections.abc import Collection
from pprint import pformat
from typing import Any


def format_items(
    v: Collection[Any],
    max_items: int = 20,
    depth: int = 3,
    width: int = 80,
    *,
    compact: bool = True,
) -> str:
    truncated = tuple(v)[:max_items]
    suffix = ", ..." if len(v) > max_items else ""
    return (
        ", ".join(
            pformat(item, depth=depth, width=width, compact=compact)
            for item in truncated
        )
        + suffix
    )
