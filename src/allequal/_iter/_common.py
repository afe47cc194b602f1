from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Concatenate

import cytoolz as cz

from .._core import CommonBase, get_config
from .._predicates import all_equal, all_equal_by, all_equal_by_key
from ..comparers import Comparer, default

if TYPE_CHECKING:
    from ._eager import Seq
    from ._lazy import Iter


def convert_data[T](data: Iterable[T] | T, *more_data: T) -> Iterable[T]:
    if more_data or not cz.itertoolz.isiterable(data):
        return (data, *more_data)
    return data


class CommonMethods[T](CommonBase[Iterable[T]]):
    _inner: Iterable[T]

    __slots__ = ()

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def _eager[**P, U](
        self,
        factory: Callable[Concatenate[Iterable[T], P], Iterable[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Seq[U]:
        from ._eager import Seq

        def _(data: Iterable[T]) -> Seq[U]:
            return Seq(tuple(factory(data, *args, **kwargs)))

        return self.into(_)

    def _lazy[**P, U](
        self,
        factory: Callable[Concatenate[Iterable[T], P], Iterator[U]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Iter[U]:
        from ._lazy import Iter

        def _(data: Iterable[T]) -> Iter[U]:
            return Iter(factory(data, *args, **kwargs))

        return self.into(_)

    def all_equal(self) -> bool:
        """Return True if all items are equal to the first one, using `==`.

        An empty instance is vacuously equal.

        Returns:
            bool: True if all items are equal, False otherwise.

        Example:
        ```python
        >>> import allequal as ae
        >>> ae.Seq.from_(3, 3, 3).all_equal()
        True
        >>> ae.Seq.from_(3, 3, 4).all_equal()
        False
        >>> ae.Seq.from_([]).all_equal()
        True

        ```
        """
        return self.into(all_equal)

    def all_equal_by(self, comparer: Comparer[T]) -> bool:
        """Return True if **comparer** considers all items equal to the first one.

        Args:
            comparer (Comparer[T]): Equality function called as `comparer(first, other)`.

        Returns:
            bool: True if all items are equal, False otherwise.

        Raises:
            ArgumentNoneError: If **comparer** is None.

        Example:
        ```python
        >>> import allequal as ae
        >>> ae.Seq.from_("ab", "AB").all_equal_by(ae.comparers.casefold)
        True
        >>> ae.Iter.from_(1.0, 1.0001, 1.5).all_equal_by(ae.comparers.isclose(rel_tol=0.01))
        False

        ```
        """
        return self.into(all_equal_by, comparer)

    def all_equal_by_key[U](
        self,
        key: Callable[[T], U],
        comparer: Comparer[U] = default,
    ) -> bool:
        """Return True if the values produced by **key** are all equal.

        Args:
            key (Callable[[T], U]): Function to transform items before comparison.
            comparer (Comparer[U]): Equality function for the transformed items. Defaults to `==`.

        Returns:
            bool: True if all transformed items are equal, False otherwise.

        Raises:
            ArgumentNoneError: If **key** or **comparer** is None.

        Example:
        ```python
        >>> import allequal as ae
        >>> ae.Seq.from_("AaaA").all_equal_by_key(str.casefold)
        True
        >>> ae.Seq.from_(1, 2, 3).all_equal_by_key(lambda x: x < 10)
        True
        >>> ae.Seq.from_("ab", "Ab", "b").all_equal_by_key(lambda s: s[0], ae.comparers.casefold)
        False

        ```
        """
        return self.into(all_equal_by_key, key, comparer)
