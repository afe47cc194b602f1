from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, overload, override

from ._common import CommonMethods, convert_data

if TYPE_CHECKING:
    from ._eager import Seq


class Iter[T](CommonMethods[T]):
    """A wrapper around Python's built-in `Iterators`/`Generators` types.

    - An `Iterable` is any object capable of returning its members one at a time, permitting it to be iterated over in a for-loop.
    - An `Iterator` is an object representing a stream of data; returned by calling `iter()` on an `Iterable`.
    - Once an `Iterator` is exhausted, it cannot be reused or reset.

    `Iter` instances are single-use: checking them with `all_equal` and friends consumes the underlying iterator, up to the first mismatch.

    Each element is pulled, and projected if a key is given, at most once, so generators with side effects are safe to check.

    If you need to reuse the data, collect it into a `Seq` first with `.collect()`.

    Args:
        data (Iterator[T]): An iterator or generator to wrap.
    """

    _inner: Iterator[T]

    __slots__ = ()

    def __init__(self, data: Iterator[T]) -> None:
        self._inner = data

    @override
    def inner(self) -> Iterator[T]:
        return self._inner

    def __next__(self) -> T:
        return next(self._inner)

    @overload
    @staticmethod
    def from_[U](data: Iterable[U]) -> Iter[U]: ...
    @overload
    @staticmethod
    def from_[U](data: U, *more_data: U) -> Iter[U]: ...
    @staticmethod
    def from_[U](data: Iterable[U] | U, *more_data: U) -> Iter[U]:
        """Create an `Iter` from an `Iterable` or unpacked values.

        Args:
            data (Iterable[U] | U): Iterable to iterate over, or a single value.
            *more_data (U): Unpacked items to include, if 'data' is not an Iterable.

        Returns:
            Iter[U]: A new Iter instance.

        Example:
        ```python
        >>> import allequal as ae
        >>> ae.Iter.from_([1, 1]).all_equal()
        True
        >>> ae.Iter.from_(1, 2).all_equal()
        False

        ```
        """
        return Iter(iter(convert_data(data, *more_data)))

    def collect(self) -> Seq[T]:
        """Collect the elements into a `Seq`.

        This is the way to check the same data more than once.

        Returns:
            Seq[T]: A `Seq` containing the collected elements.

        Example:
        ```python
        >>> import allequal as ae
        >>> seq = ae.Iter.from_(x % 2 for x in (2, 4, 5)).collect()
        >>> seq
        Seq(0, 0, 1)
        >>> seq.all_equal(), seq.all_equal_by_key(lambda x: x < 2)
        (False, True)

        ```
        """
        return self._eager(tuple)
