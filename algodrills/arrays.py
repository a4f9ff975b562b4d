"""Exercises on integer lists: intersection, subarray sums, min/max swap, unique values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import accumulate


def intersection(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the distinct values of ``first`` that also occur in ``second``.

    Values keep the order in which they first appear in ``first``.
    """
    wanted = set(second)
    return [value for value in dict.fromkeys(first) if value in wanted]


def subarray_sums(values: Iterable[int]) -> Iterator[int]:
    """Yield the sum of every contiguous run, by start index and then by end index."""
    tail = list(values)
    while tail:
        yield from accumulate(tail)
        tail = tail[1:]


def max_subarray_sum_brute(values: Iterable[int]) -> int:
    """Return the largest sum of a contiguous run, trying every run in turn."""
    try:
        return max(subarray_sums(values))
    except ValueError:
        raise ValueError("cannot take the maximum subarray sum of an empty list") from None


def swap_min_max(values: Iterable[int]) -> list[int]:
    """Return a copy in which every minimum becomes the maximum and vice versa."""
    items = list(values)
    if not items:
        return []
    low, high = min(items), max(items)
    exchange = {low: high, high: low}
    return [exchange.get(value, value) for value in items]


def unique_values(values: Iterable[int]) -> list[int]:
    """Return each distinct value once, in order of first appearance."""
    return list(dict.fromkeys(values))