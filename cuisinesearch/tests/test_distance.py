import itertools

import pytest

from cuisinesearch.recommendations.distance import integer_distance, string_distance

WORDS = ["", "a", "A", "Pizza", "Pizza Place", "Pasta House", "caf\u00e9", "cafe", "a\U0001F600"]


def test_classic_edit_distance():
    assert string_distance("kitten", "sitting") == 3


def test_empty_strings():
    assert string_distance("", "") == 0
    assert string_distance("", "abc") == 3
    assert string_distance("abc", "") == 3


def test_case_sensitive():
    assert string_distance("italian", "Italian") == 1


def test_counts_code_points():
    assert string_distance("caf\u00e9", "cafe") == 1
    assert string_distance("a\U0001F600", "a") == 1


@pytest.mark.parametrize("word", WORDS)
def test_identity(word):
    assert string_distance(word, word) == 0


@pytest.mark.parametrize("a,b", list(itertools.combinations(WORDS, 2)))
def test_symmetry(a, b):
    assert string_distance(a, b) == string_distance(b, a)


def test_triangle_inequality():
    for a, b, c in itertools.permutations(WORDS[:6], 3):
        assert string_distance(a, c) <= string_distance(a, b) + string_distance(b, c)


@pytest.mark.parametrize("a,b,expected", [(0, 0, 0), (5, 3, 2), (3, 5, 2), (0, 10, 10)])
def test_integer_distance(a, b, expected):
    assert integer_distance(a, b) == expected
    assert integer_distance(b, a) == expected
