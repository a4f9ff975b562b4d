"""Solutions to a handful of classic interview problems."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from functools import reduce
from operator import xor


def my_pow(x: float, n: int) -> float:
    """Return ``x`` raised to the integer power ``n`` by repeated squaring.

    A zero base gives 0.0 for every non-zero exponent, negative ones included.
    """
    if n == 0:
        return 1.0
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    if x == -1:
        return 1.0 if n % 2 == 0 else -1.0
    base = float(x)
    exponent = n
    if exponent < 0:
        base = 1 / base
        exponent = -exponent
    result = 1.0
    while exponent > 0:
        if exponent % 2 == 1:
            result *= base
        base *= base
        exponent //= 2
    return result


def h_index(citations: Iterable[int]) -> int:
    """Return the largest h such that h papers have at least h citations each."""
    ordered = sorted(citations)
    total = len(ordered)
    for position, count in enumerate(ordered):
        remaining = total - position
        if count >= remaining:
            return remaining
    return 0


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest run of ``s`` without a repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    longest = 0
    for end, char in enumerate(s):
        previous = last_seen.get(char)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[char] = end
        longest = max(longest, end - start + 1)
    return longest


def max_subarray(nums: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane's algorithm)."""
    best: int | None = None
    running = 0
    for value in nums:
        running += value
        best = running if best is None else max(best, running)
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("cannot take the maximum subarray of an empty list")
    return best


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def max_area(heights: Sequence[int]) -> int:
    """Return the most water two lines can hold, closing in from both ends."""
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        level = min(heights[left], heights[right])
        best = max(best, level * (right - left))
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact sorted ``nums`` so its first k slots hold each value once; return k.

    Slots past k keep whatever they held before.
    """
    count = 0
    for value in list(nums):
        if count == 0 or nums[count - 1] != value:
            nums[count] = value
            count += 1
    return count


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Remove every occurrence of ``val`` from ``nums`` in place; return the new length."""
    nums[:] = [value for value in nums if value != val]
    return len(nums)