"""Classic comparison sorts, an in-place merge and the colour-sorting problem."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, bubbling larger values to the end; stops early when sorted."""
    items = list(values)
    for last in range(len(items) - 1, 0, -1):
        swapped = False
        for i in range(last):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, inserting each value into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, selecting the smallest remaining value each pass."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def merge_sorted_into(buffer: MutableSequence[int], used: int, other: Sequence[int]) -> None:
    """Merge sorted ``other`` into the sorted first ``used`` slots of ``buffer``, in place.

    ``buffer`` must have room for ``used + len(other)`` values; merging runs from
    the back so nothing is overwritten before it is read.
    """
    total = used + len(other)
    if used < 0 or total > len(buffer):
        raise ValueError("buffer is too small for the merged values")
    i, j, k = used - 1, len(other) - 1, total - 1
    while i >= 0 and j >= 0:
        if buffer[i] > other[j]:
            buffer[k] = buffer[i]
            i -= 1
        else:
            buffer[k] = other[j]
            j -= 1
        k -= 1
    buffer[: j + 1] = other[: j + 1]


def sort_colors_brute(values: Iterable[int]) -> list[int]:
    """Return the colours sorted by exchanging every out-of-order pair."""
    items = list(values)
    for i in range(len(items) - 1):
        for j in range(i + 1, len(items)):
            if items[i] > items[j]:
                items[i], items[j] = items[j], items[i]
    return items


def sort_colors_counting(values: Iterable[int]) -> list[int]:
    """Return the colours sorted by counting them; anything not 0 or 1 counts as 2."""
    items = list(values)
    red = items.count(0)
    white = items.count(1)
    blue = len(items) - red - white
    return [0] * red + [1] * white + [2] * blue


def sort_colors_dutch_flag(values: Iterable[int]) -> list[int]:
    """Return the colours sorted in one pass with three pointers."""
    items = list(values)
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[mid], items[low] = items[low], items[mid]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items