"""Binary search on the answer: aggressive cows and book allocation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def can_place_cows(positions: Iterable[int], cows: int, min_distance: int) -> bool:
    """Tell whether ``cows`` cows fit on sorted ``positions`` at least ``min_distance`` apart."""
    if cows < 1:
        raise ValueError("at least one cow is required")
    stalls = iter(positions)
    try:
        last = next(stalls)
    except StopIteration:
        raise ValueError("no positions given") from None
    placed = 1
    if placed >= cows:
        return True
    for position in stalls:
        if position - last >= min_distance:
            placed += 1
            last = position
            if placed >= cows:
                return True
    return False


def largest_min_distance(positions: Iterable[int], cows: int) -> int:
    """Return the largest smallest gap at which ``cows`` cows fit, or -1 if none does."""
    ordered = sorted(positions)
    if not ordered:
        raise ValueError("no positions given")
    low, high = 1, ordered[-1] - ordered[0]
    best = -1
    while low <= high:
        mid = low + (high - low) // 2
        if can_place_cows(ordered, cows, mid):
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best


def can_allocate(pages: Iterable[int], students: int, max_pages: int) -> bool:
    """Tell whether the books, kept in order, fit ``students`` readers of ``max_pages`` each."""
    needed = 1
    load = 0
    for book in pages:
        if book > max_pages:
            return False
        if load + book <= max_pages:
            load += book
        else:
            needed += 1
            load = book
    return needed <= students


def allocate_books(pages: Sequence[int], students: int) -> int:
    """Return the smallest possible largest load when books are shared among students."""
    if students < 1:
        raise ValueError("at least one student is required")
    books = list(pages)
    low, high = 0, sum(books)
    best = None
    while low <= high:
        mid = low + (high - low) // 2
        if can_allocate(books, students, mid):
            best = mid
            high = mid - 1
        else:
            low = mid + 1
    if best is None:
        raise ValueError("the books cannot be allocated")
    return best