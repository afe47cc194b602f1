"""Ready-made equality comparers.

A comparer is any callable taking two values and returning whether they should be considered equal.

They can be passed to `all_equal_by` and `all_equal_by_key`, or to the methods of the same name on `Seq` and `Iter`.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from ._core import check_not_none

__all__ = ["Comparer", "casefold", "default", "identity", "isclose", "on"]

type Comparer[T] = Callable[[T, T], bool]


def default[T](left: T, right: T) -> bool:
    """Compare two values with `==`.

    Example:
    ```python
    >>> from allequal import comparers
    >>> comparers.default(1, 1.0)
    True

    ```
    """
    return left == right


def identity[T](left: T, right: T) -> bool:
    """Compare two values by reference.

    Example:
    ```python
    >>> from allequal import comparers
    >>> a, b = [1], [1]
    >>> comparers.identity(a, a), comparers.identity(a, b)
    (True, False)

    ```
    """
    return left is right


def casefold(left: str, right: str) -> bool:
    """Compare two strings ignoring case.

    Uses `str.casefold`, which is more aggressive than `str.lower` for caseless matching.

    Example:
    ```python
    >>> from allequal import comparers
    >>> comparers.casefold("Straße", "STRASSE")
    True

    ```
    """
    return left.casefold() == right.casefold()


def isclose(*, rel_tol: float = 1e-09, abs_tol: float = 0.0) -> Comparer[float]:
    """Create a comparer considering two numbers equal if they are close to each other.

    See `math.isclose` for the meaning of the tolerances.

    Args:
        rel_tol (float): Maximum allowed difference, relative to the larger absolute value. Defaults to 1e-09.
        abs_tol (float): Minimum absolute tolerance. Defaults to 0.0.

    Returns:
        Comparer[float]: The comparer.

    Raises:
        ValueError: If a tolerance is negative.

    Example:
    ```python
    >>> from allequal import comparers
    >>> close = comparers.isclose(abs_tol=0.01)
    >>> close(1.0, 1.005), close(1.0, 1.1)
    (True, False)

    ```
    """
    if rel_tol < 0 or abs_tol < 0:
        msg = f"tolerances must be non-negative, got rel_tol={rel_tol}, abs_tol={abs_tol}"
        raise ValueError(msg)

    def _isclose(left: float, right: float) -> bool:
        return math.isclose(left, right, rel_tol=rel_tol, abs_tol=abs_tol)

    return _isclose


def on[T, U](key: Callable[[T], U], comparer: Comparer[U] = default) -> Comparer[T]:
    """Create a comparer applying **key** to both values before comparing them with **comparer**.

    Args:
        key (Callable[[T], U]): The projection applied to each value.
        comparer (Comparer[U]): The comparer used on the projected values. Defaults to `default`.

    Returns:
        Comparer[T]: The composed comparer.

    Example:
    ```python
    >>> from allequal import comparers
    >>> same_name = comparers.on(lambda p: p["name"], comparers.casefold)
    >>> same_name({"name": "Ada"}, {"name": "ADA"})
    True

    ```
    """
    check_not_none(key=key, comparer=comparer)

    def _on(left: T, right: T) -> bool:
        return comparer(key(left), key(right))

    return _on
