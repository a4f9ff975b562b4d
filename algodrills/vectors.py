"""Exercises on integer vectors: pair sums, majority, profits, products, reversal."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from itertools import accumulate, combinations
from operator import mul


def pair_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the first index pair ``(i, j)``, ``i < j``, whose values add to ``target``."""
    for (i, a), (j, b) in combinations(enumerate(values), 2):
        if a + b == target:
            return i, j
    return None


def pair_sum_two_pointer(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find a pair adding to ``target`` in sorted ``values`` by closing in from both ends."""
    i, j = 0, len(values) - 1
    while i < j:
        total = values[i] + values[j]
        if total > target:
            j -= 1
        elif total < target:
            i += 1
        else:
            return i, j
    return None


def majority_brute_force(values: Sequence[int]) -> int | None:
    """Return the value occurring more than half the time, counting for each value."""
    half = len(values) // 2
    for candidate in values:
        if sum(1 for other in values if other == candidate) > half:
            return candidate
    return None


def majority_by_sorting(values: Iterable[int]) -> int | None:
    """Return the majority value by sorting and measuring runs of equal values."""
    ordered = sorted(values)
    half = len(ordered) // 2
    run_value = None
    run_length = 0
    for value in ordered:
        if value == run_value:
            run_length += 1
        else:
            run_value, run_length = value, 1
        if run_length > half:
            return run_value
    return None


def majority_moore(values: Iterable[int]) -> int | None:
    """Return the Moore voting candidate when its final count is non-zero.

    The candidate is not checked against the data, so a list without a majority
    may still yield a value.
    """
    candidate = None
    count = 0
    for value in values:
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    return candidate if count != 0 else None


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit from one buy followed by one later sale, or 0."""
    best = 0
    cheapest = None
    for price in prices:
        if cheapest is not None and price > cheapest:
            best = max(best, price - cheapest)
        cheapest = price if cheapest is None else min(cheapest, price)
    return best


def most_water(heights: Sequence[int]) -> int:
    """Return the most water two lines can hold, trying every pair."""
    return max(
        (min(a, b) * (j - i) for (i, a), (j, b) in combinations(enumerate(heights), 2)),
        default=0,
    )


def product_except_self_brute(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all other values, by direct multiplication."""
    result = []
    for i in range(len(nums)):
        product = 1
        for j, value in enumerate(nums):
            if i != j:
                product *= value
        result.append(product)
    return result


def product_except_self_prefix(nums: Sequence[int]) -> list[int]:
    """Return the products of all other values using prefix and suffix product lists."""
    prefix = [1, *accumulate(nums[:-1], mul)] if nums else []
    suffix = [1, *accumulate(reversed(nums[1:]), mul)][::-1] if nums else []
    return [before * after for before, after in zip(prefix, suffix)]


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return the products of all other values with one output list and a running suffix."""
    result = [1] * len(nums)
    for i in range(1, len(nums)):
        result[i] = result[i - 1] * nums[i - 1]
    suffix = 1
    for i in range(len(nums) - 2, -1, -1):
        suffix *= nums[i + 1]
        result[i] *= suffix
    return result


def reverse_in_place(values: MutableSequence[int]) -> None:
    """Reverse ``values`` in place by moving each earlier value to the end in turn."""
    for end in range(len(values) - 2, -1, -1):
        values.append(values.pop(end))