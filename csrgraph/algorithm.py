"""Sorted-sequence searches, merges and small container helpers."""

from __future__ import annotations

import bisect
from collections.abc import Hashable, MutableSequence, Sequence
from typing import Any

__all__ = [
    "UniqueMap",
    "equal_sorted",
    "sort_by_key",
    "merge",
    "inplace_merge",
    "lower_bound_left",
    "lower_bound_right",
    "upper_bound_left",
    "upper_bound_right",
    "binary_search",
    "merge_path_search",
    "NaturalIterator",
]


class UniqueMap(dict):
    """Map each distinct key to a dense id given in order of first insertion."""

    def insert(self, key: Hashable) -> int:
        """Return the id of ``key``, assigning the next free id if it is new."""
        try:
            return self[key]
        except KeyError:
            new_id = len(self)
            self[key] = new_id
            return new_id


def equal_sorted(first: Sequence, second: Sequence) -> bool:
    """True if both sequences hold the same elements, regardless of order."""
    first = list(first)
    second = list(second)
    if len(first) != len(second):
        return False
    return sorted(first) == sorted(second)


def sort_by_key(keys: MutableSequence, *args: MutableSequence) -> None:
    """Sort ``keys`` in place and apply the same reordering to every ``args`` list."""
    size = len(keys)
    for data in args:
        if len(data) != size:
            raise ValueError("every data sequence must be as long as the keys")
    order = sorted(range(size), key=keys.__getitem__)
    for sequence in (keys, *args):
        reordered = [sequence[index] for index in order]
        sequence[:] = reordered


def merge(left: Sequence, right: Sequence) -> list:
    """Merge two sorted sequences into a new sorted list (ties favour ``left``)."""
    result = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def inplace_merge(left: MutableSequence, right: Sequence) -> None:
    """Merge sorted ``right`` into sorted ``left``, growing ``left`` in place."""
    i = len(left) - 1
    j = len(right) - 1
    left.extend(right)
    k = len(left) - 1
    while i >= 0 and j >= 0:
        if left[i] <= right[j]:
            left[k] = right[j]
            j -= 1
        else:
            left[k] = left[i]
            i -= 1
        k -= 1
    while j >= 0:
        left[k] = right[j]
        j -= 1
        k -= 1


def lower_bound_right(mem: Sequence, searched: Any) -> int:
    """Leftmost index at which ``searched`` can be inserted keeping order."""
    return bisect.bisect_left(mem, searched)


def lower_bound_left(mem: Sequence, searched: Any) -> int:
    """Index of the first element equal to ``searched``, else of the last smaller one."""
    index = bisect.bisect_left(mem, searched)
    if index < len(mem) and mem[index] == searched:
        return index
    return index - 1


def upper_bound_right(mem: Sequence, searched: Any) -> int:
    """Index of the first element greater than ``searched``."""
    return bisect.bisect_right(mem, searched)


def upper_bound_left(mem: Sequence, searched: Any) -> int:
    """Index of the last element not greater than ``searched`` (-1 if none)."""
    return bisect.bisect_right(mem, searched) - 1


def binary_search(mem: Sequence, searched: Any) -> int:
    """Index of an element equal to ``searched``, or ``len(mem)`` if absent."""
    index = bisect.bisect_left(mem, searched)
    if index < len(mem) and mem[index] == searched:
        return index
    return len(mem)


def merge_path_search(a: Sequence, b: Sequence, diagonal: int) -> tuple[int, int]:
    """Split point ``(i, j)`` with ``i + j == diagonal`` on the merge path of ``a`` and ``b``."""
    x_min = max(diagonal - len(b), 0)
    x_max = min(diagonal, len(a))
    while x_min < x_max:
        pivot = (x_min + x_max) // 2
        if a[pivot] <= b[diagonal - pivot - 1]:
            x_min = pivot + 1
        else:
            x_max = pivot
    return min(x_min, len(a)), diagonal - x_min


class NaturalIterator:
    """Indexable view of the natural numbers starting at ``start``."""

    def __init__(self, start: int = 0) -> None:
        self.start = start

    def __getitem__(self, index: int) -> int:
        return self.start + index

    def __repr__(self) -> str:
        return f"NaturalIterator({self.start})"