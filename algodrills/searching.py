"""Binary and linear search over integer lists."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def binary_search(values: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``values``, or -1 if absent."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] < target:
            start = mid + 1
        elif values[mid] > target:
            end = mid - 1
        else:
            return mid
    return -1


def binary_search_recursive(
    values: Sequence[int], target: int, start: int = 0, end: int | None = None
) -> int:
    """Return the index of ``target`` in sorted ``values[start:end + 1]``, or -1."""
    if end is None:
        end = len(values) - 1
    if start > end:
        return -1
    mid = start + (end - start) // 2
    if values[mid] < target:
        return binary_search_recursive(values, target, mid + 1, end)
    if values[mid] > target:
        return binary_search_recursive(values, target, start, mid - 1)
    return mid


def linear_search(values: Iterable[int], target: int) -> list[int]:
    """Return every index at which ``target`` occurs."""
    return [index for index, value in enumerate(values) if value == target]