"""Tests for all_equal functions."""

from collections.abc import Iterator
from dataclasses import dataclass

import allequal as ae


@dataclass
class Point:
    x: int
    y: int


def test_all_equal_with_identical_elements() -> None:
    """Test all_equal with all identical elements."""
    assert ae.all_equal([3, 3, 3]) is True


def test_all_equal_with_different_elements() -> None:
    """Test all_equal with a single differing element."""
    assert ae.all_equal([3, 3, 4]) is False


def test_all_equal_empty_sequence() -> None:
    """Test every overload returns True on an empty sequence."""
    assert ae.all_equal([]) is True
    assert ae.all_equal_by([], ae.comparers.casefold) is True
    assert ae.all_equal_by_key([], len) is True
    assert ae.all_equal_by_key([], len, ae.comparers.identity) is True


def test_all_equal_single_element() -> None:
    """Test every overload returns True on a single element."""
    assert ae.all_equal([42]) is True
    assert ae.all_equal_by([42], lambda _a, _b: False) is True
    assert ae.all_equal_by_key((42,), lambda x: x) is True
    assert ae.all_equal_by_key((42,), lambda x: x, lambda _a, _b: False) is True


def test_all_equal_by_case_insensitive() -> None:
    """Test all_equal_by with a case-insensitive comparer."""
    assert ae.all_equal_by(["ab", "AB"], ae.comparers.casefold) is True
    assert ae.all_equal_by(["ab", "AC"], ae.comparers.casefold) is False


def test_all_equal_by_passes_first_as_left() -> None:
    """Test the first element is always the left argument of the comparer."""
    calls: list[tuple[int, int]] = []

    def _cmp(left: int, right: int) -> bool:
        calls.append((left, right))
        return True

    assert ae.all_equal_by([1, 2, 3], _cmp) is True
    assert calls == [(1, 2), (1, 3)]


def test_all_equal_by_key_with_projection() -> None:
    """Test all_equal_by_key on a projected attribute."""
    points = [Point(1, 0), Point(1, 5), Point(2, 0)]
    assert ae.all_equal_by_key(points, lambda p: p.x) is False
    assert ae.all_equal_by_key(points[:2], lambda p: p.x) is True


def test_all_equal_by_key_with_dicts() -> None:
    """Test all_equal_by_key on mapping items."""
    data = [{"x": 1}, {"x": 1}, {"x": 2}]
    assert ae.all_equal_by_key(data, lambda e: e["x"]) is False


def test_all_equal_by_key_with_key_function() -> None:
    """Test all_equal_by_key with a key function that groups elements."""
    assert ae.all_equal_by_key((2, 4, 6, 8), lambda x: x % 2) is True


def test_all_equal_by_key_with_comparer() -> None:
    """Test all_equal_by_key combining a projection and a comparer."""
    names = [{"name": "Ada"}, {"name": "ADA"}, {"name": "ada"}]
    assert ae.all_equal_by_key(names, lambda e: e["name"], ae.comparers.casefold)
    assert not ae.all_equal_by_key(names, lambda e: e["name"])


def test_all_equal_with_unhashable_elements() -> None:
    """Test all_equal on unhashable elements."""
    assert ae.all_equal([[1], [1]]) is True
    assert ae.all_equal([{"a": 1}, {"a": 2}]) is False


def test_generator_consumed_once() -> None:
    """Test a generator source is pulled and projected at most once per element."""
    pulled: list[int] = []
    projected: list[int] = []

    def _gen() -> Iterator[int]:
        for x in (5, 5, 5):
            pulled.append(x)
            yield x

    def _key(x: int) -> int:
        projected.append(x)
        return x

    assert ae.all_equal_by_key(_gen(), _key, ae.comparers.default) is True
    assert pulled == [5, 5, 5]
    assert projected == [5, 5, 5]


def test_short_circuit_on_first_mismatch() -> None:
    """Test iteration stops at the first mismatch."""
    source = iter([1, 2, 3, 4])
    assert ae.all_equal_by(source, ae.comparers.default) is False
    assert list(source) == [3, 4]


def test_short_circuit_key_not_applied_after_mismatch() -> None:
    """Test the projection is not applied past the first mismatch."""
    projected: list[int] = []

    def _key(x: int) -> int:
        projected.append(x)
        return x

    assert ae.all_equal_by_key([1, 2, 3, 4], _key, ae.comparers.default) is False
    assert projected == [1, 2]


def test_comparer_result_truthiness() -> None:
    """Test comparer results are interpreted by truthiness."""
    assert ae.all_equal_by([1, 2], lambda _a, _b: 1) is True
    assert ae.all_equal_by([1, 2], lambda _a, _b: 0) is False
