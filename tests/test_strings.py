import pytest

from algodrills.strings import reverse_string


def test_reverse_pinned():
    assert reverse_string("abc") == "cba"


@pytest.mark.parametrize("text", ["", "a", "hello world", "racecar", "ab cd!"])
def test_reverse_twice_is_identity(text):
    assert reverse_string(reverse_string(text)) == text


@pytest.mark.parametrize("text", ["hello", "xyz1"])
def test_reverse_swaps_ends(text):
    result = reverse_string(text)
    assert result[0] == text[-1]
    assert result[-1] == text[0]
    assert len(result) == len(text)


def test_palindrome_unchanged():
    assert reverse_string("racecar") == "racecar"