import pytest

from algodrills.searching import binary_search, binary_search_recursive, linear_search

SORTED = [1, 2, 3, 4, 5, 6]


@pytest.mark.parametrize("search", [binary_search, binary_search_recursive])
def test_finds_every_element(search):
    for index, value in enumerate(SORTED):
        assert search(SORTED, value) == index


@pytest.mark.parametrize("search", [binary_search, binary_search_recursive])
@pytest.mark.parametrize("target", [9, 0, -5])
def test_missing_returns_minus_one(search, target):
    assert search(SORTED, target) == -1


@pytest.mark.parametrize("search", [binary_search, binary_search_recursive])
def test_empty_list(search):
    assert search([], 3) == -1


def test_recursive_respects_bounds():
    assert binary_search_recursive(SORTED, 2, 2, 5) == -1
    assert binary_search_recursive(SORTED, 5, 2, 5) == SORTED.index(5)


def test_search_odd_length():
    values = [-10, -3, 0, 8, 21, 40, 77]
    for value in values:
        assert values[binary_search(values, value)] == value


def test_linear_search_finds_all():
    values = [4, 7, 4, 1, 4]
    found = linear_search(values, 4)
    assert all(values[i] == 4 for i in found)
    assert len(found) == values.count(4)
    assert found == sorted(found)


def test_linear_search_absent():
    assert linear_search([1, 2, 3], 8) == []