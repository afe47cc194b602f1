from __future__ import annotations

from collections.abc import Callable, Iterable

import more_itertools as mit

from ._core import check_not_none
from .comparers import Comparer, default


def all_equal[T](source: Iterable[T]) -> bool:
    """Return True if all elements of **source** are equal to the first one, using `==`.

    An empty **source** is vacuously equal.

    Args:
        source (Iterable[T]): The elements to check.

    Returns:
        bool: True if all elements are equal, False otherwise.

    Raises:
        ArgumentNoneError: If **source** is None.

    Example:
    ```python
    >>> import allequal as ae
    >>> ae.all_equal([3, 3, 3])
    True
    >>> ae.all_equal([3, 3, 4])
    False
    >>> ae.all_equal([])
    True

    ```
    """
    check_not_none(source=source)
    return mit.all_equal(source)


def all_equal_by[T](source: Iterable[T], comparer: Comparer[T]) -> bool:
    """Return True if **comparer** considers all elements of **source** equal to the first one.

    The first element is always passed as the left argument of **comparer**.

    **source** is iterated once, and iteration stops at the first mismatch.

    Args:
        source (Iterable[T]): The elements to check.
        comparer (Comparer[T]): Equality function called as `comparer(first, other)`.

    Returns:
        bool: True if all elements are equal, False otherwise.

    Raises:
        ArgumentNoneError: If **source** or **comparer** is None.

    Example:
    ```python
    >>> import allequal as ae
    >>> ae.all_equal_by(["ab", "AB", "aB"], ae.comparers.casefold)
    True
    >>> ae.all_equal_by([1.0, 1.1], ae.comparers.isclose(abs_tol=0.01))
    False

    ```
    """
    check_not_none(source=source, comparer=comparer)
    iterator = iter(source)
    try:
        first = next(iterator)
    except StopIteration:
        return True
    return all(comparer(first, other) for other in iterator)


def all_equal_by_key[T, U](
    source: Iterable[T],
    key: Callable[[T], U],
    comparer: Comparer[U] = default,
) -> bool:
    """Return True if the values produced by **key** are all equal.

    **key** is applied lazily, at most once per element, and never to elements following the first mismatch.

    Args:
        source (Iterable[T]): The elements to check.
        key (Callable[[T], U]): Function to transform items before comparison.
        comparer (Comparer[U]): Equality function for the transformed items. Defaults to `==`.

    Returns:
        bool: True if all transformed items are equal, False otherwise.

    Raises:
        ArgumentNoneError: If **source**, **key** or **comparer** is None.

    Example:
    ```python
    >>> import allequal as ae
    >>> ae.all_equal_by_key([{"x": 1}, {"x": 1}, {"x": 2}], lambda e: e["x"])
    False
    >>> ae.all_equal_by_key([2, 4, 6], lambda x: x % 2)
    True
    >>> ae.all_equal_by_key(["Ada", "ADA"], lambda s: s[:2], ae.comparers.casefold)
    True

    ```
    """
    check_not_none(source=source, key=key, comparer=comparer)
    if comparer is default:
        return mit.all_equal(source, key=key)
    return all_equal_by(map(key, source), comparer)
