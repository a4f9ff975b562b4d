import random

import pytest

from algodrills.sorting import (
    bubble_sort,
    insertion_sort,
    merge_sorted_into,
    selection_sort,
    sort_colors_brute,
    sort_colors_counting,
    sort_colors_dutch_flag,
)

PLAIN_CASES = [[4, 1, 5, 2, 3], [], [7], [3, 3, 1, 1], [-2, 10, 0, -8, 10], [1, 2, 3]]
COLOUR_CASES = [[2, 0, 2, 1, 1, 0, 2], [], [2, 2], [0, 0, 2], [1, 0], [0, 1, 2, 0, 1, 2]]


def test_bubble_sort_source_example():
    assert bubble_sort([4, 1, 5, 2, 3]) == [1, 2, 3, 4, 5]


def test_insertion_sort_source_example():
    assert insertion_sort([4, 1, 5, 2, 3]) == [1, 2, 3, 4, 5]


def test_selection_sort_source_example():
    assert selection_sort([4, 1, 5, 2, 3]) == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("values", PLAIN_CASES)
def test_sorts_match_sorted(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert selection_sort(values) == expected


def test_sorts_random():
    rng = random.Random(1234)
    for _ in range(20):
        values = [rng.randint(-50, 50) for _ in range(rng.randint(0, 30))]
        expected = sorted(values)
        assert bubble_sort(values) == expected
        assert insertion_sort(values) == expected
        assert selection_sort(values) == expected


def test_input_not_mutated():
    original = [2, 0, 2, 1, 1, 0, 2]
    values = list(original)
    bubble_sort(values)
    insertion_sort(values)
    selection_sort(values)
    sort_colors_brute(values)
    sort_colors_counting(values)
    sort_colors_dutch_flag(values)
    assert values == original


def test_merge_into_empty_buffer():
    buffer = [0, 0, 0]
    merge_sorted_into(buffer, 0, [2, 6, 7])
    assert buffer == [2, 6, 7]


@pytest.mark.parametrize(
    "first, second",
    [([1, 2, 3], [2, 5, 6]), ([4, 5], []), ([], [1]), ([10, 20], [1, 2, 3, 30])],
)
def test_merge_sorted_into(first, second):
    buffer = first + [0] * len(second)
    merge_sorted_into(buffer, len(first), second)
    assert buffer == sorted(first + second)


def test_merge_leaves_extra_slots_alone():
    buffer = [1, 3, 0, 0, 99]
    merge_sorted_into(buffer, 2, [2, 4])
    assert buffer[:4] == sorted([1, 3, 2, 4])
    assert buffer[4] == 99


def test_merge_buffer_too_small():
    with pytest.raises(ValueError):
        merge_sorted_into([1, 2], 2, [3])


def test_colour_sorts_source_example():
    values = [2, 0, 2, 1, 1, 0, 2]
    expected = [0, 0, 1, 1, 2, 2, 2]
    assert sort_colors_brute(values) == expected
    assert sort_colors_counting(values) == expected
    assert sort_colors_dutch_flag(values) == expected


@pytest.mark.parametrize("values", COLOUR_CASES)
def test_colour_sorts(values):
    expected = sorted(values)
    assert sort_colors_brute(values) == expected
    assert sort_colors_counting(values) == expected
    assert sort_colors_dutch_flag(values) == expected


def test_colour_sorts_random():
    rng = random.Random(99)
    for _ in range(20):
        values = [rng.randint(0, 2) for _ in range(rng.randint(0, 25))]
        expected = sorted(values)
        assert sort_colors_brute(values) == expected
        assert sort_colors_counting(values) == expected
        assert sort_colors_dutch_flag(values) == expected