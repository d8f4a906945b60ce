"""Array and matrix algorithms."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from typing import Any, Optional


def boolean_matrix(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a copy where every row and column holding a 1 is filled with 1s."""
    rows = {i for i, row in enumerate(matrix) if 1 in row}
    cols = {j for row in matrix for j, cell in enumerate(row) if cell == 1}
    return [
        [1 if i in rows or j in cols else cell for j, cell in enumerate(row)]
        for i, row in enumerate(matrix)
    ]


def shortest_subarray_with_sum(values: Sequence[int], k: int) -> Optional[int]:
    """Return the length of the shortest contiguous run of positive ``values`` summing to ``k``.

    Returns None when no run sums to ``k``.
    """
    best: Optional[int] = None
    total = 0
    left = 0
    for right, value in enumerate(values):
        total += value
        if total == k:
            best = _shorter(best, right - left + 1)
        elif total > k:
            while total > k:
                total -= values[left]
                left += 1
                if total == k:
                    best = _shorter(best, right - left + 1)
    return best


def _shorter(best: Optional[int], length: int) -> int:
    return length if best is None else min(best, length)


def min_size_subarray(nums: Sequence[int], target: int) -> int:
    """Length of the shortest run summing to ``target`` in ``nums`` repeated forever, or -1."""
    total = sum(nums)
    if total <= 0:
        raise ValueError("nums must hold positive values")
    whole, remainder = divmod(target, total)
    length = shortest_subarray_with_sum(list(nums) * 2, remainder)
    if length is None:
        return -1
    return length + whole * len(nums)


def unique_elements(items: Iterable[Hashable]) -> list[Any]:
    """Return the distinct items in the order they first appear."""
    return list(dict.fromkeys(items))


def binary_search(items: Sequence[Any], x: Any) -> int:
    """Return an index of ``x`` in the sorted ``items``, or -1 if it is absent."""
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if items[mid] == x:
            return mid
        if items[mid] < x:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def num_identical_pairs(nums: Iterable[Hashable]) -> int:
    """Count index pairs i < j with equal values."""
    return sum(c * (c - 1) // 2 for c in Counter(nums).values())