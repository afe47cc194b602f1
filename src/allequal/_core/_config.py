from collections.abc import Collection, Iterable
from dataclasses import dataclass
from typing import Any

from ._format import format_items


@dataclass(slots=True)
class Config:
    """Representation settings shared by all wrappers.

    Attributes:
        max_items (int): Maximum number of elements shown by `repr()`. Defaults to 20.
        depth (int): Maximum nesting depth of each formatted element. Defaults to 3.
        width (int): Target line width of each formatted element. Defaults to 80.
    """

    max_items: int = 20
    depth: int = 3
    width: int = 80

    def iter_repr(self, data: Iterable[Any]) -> str:
        """Format the elements of **data** for display.

        Lazy iterators are never consumed: only sized collections get their elements formatted.

        Args:
            data (Iterable[Any]): The data to format.

        Returns:
            str: The formatted elements, comma separated.

        Example:
        ```python
        >>> from allequal import get_config
        >>> get_config().iter_repr([1, 2, 3])
        '1, 2, 3'
        >>> get_config().iter_repr(iter([1, 2, 3]))  # doctest: +ELLIPSIS
        '<list_iterator object at ...>'

        ```
        """
        if not isinstance(data, Collection):
            return repr(data)
        return format_items(data, self.max_items, self.depth, self.width)


_CONFIG = Config()


def get_config() -> Config:
    """Get the process-wide `Config` instance.

    Its attributes can be mutated to change how wrappers are displayed.

    Returns:
        Config: The shared configuration.

    Example:
    ```python
    >>> import allequal as ae
    >>> ae.get_config().max_items
    20

    ```
    """
    return _CONFIG
