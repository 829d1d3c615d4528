import itertools

import pytest

from updock.utils.version_compare import UpdateType, is_newer, ordering_of, update_type


@pytest.mark.parametrize("a,b,expected", [
    ((14, 4), (14, 4), 0),
    ((14, 5), (14, 4), 1),
    ((13, 99), (14, 0), -1),
    ((2, 0, 0), (1, 99, 99), 1),
    ((1,), (2,), -1),
])
def test_ordering_is_lexicographic(a, b, expected):
    assert ordering_of(a, b) == expected
    assert ordering_of(b, a) == -expected


def test_ordering_agrees_with_tuple_order():
    versions = list(itertools.product(range(3), repeat=3))
    for a, b in itertools.product(versions, repeat=2):
        assert ordering_of(a, b) == (a > b) - (a < b)


def test_versions_of_different_length_are_not_comparable():
    with pytest.raises(ValueError):
        ordering_of((1, 2), (1, 2, 3))


def test_is_newer_is_strict():
    assert is_newer((1, 1), (1, 0))
    assert not is_newer((1, 0), (1, 0))
    assert not is_newer((0, 9), (1, 0))


@pytest.mark.parametrize("candidate,current,degree,expected", [
    ((15, 2), (14, 4), 0, UpdateType.BREAKING),
    ((14, 5), (14, 4), 0, UpdateType.COMPATIBLE),
    ((15, 0), (14, 4), 0, UpdateType.BREAKING),
    ((2, 0, 0), (1, 9, 9), 1, UpdateType.BREAKING),
    ((1, 10, 0), (1, 9, 9), 1, UpdateType.BREAKING),
    ((1, 9, 10), (1, 9, 9), 1, UpdateType.COMPATIBLE),
    ((15, 2), (14, 4), None, UpdateType.COMPATIBLE),
])
def test_update_type(candidate, current, degree, expected):
    assert update_type(candidate, current, degree) is expected


def test_without_breaking_degree_nothing_is_breaking():
    for major in range(1, 5):
        assert update_type((major, 0), (0, 0), None) is UpdateType.COMPATIBLE


@pytest.mark.parametrize("candidate", [(14, 4), (14, 3), (13, 9)])
def test_update_type_requires_newer_candidate(candidate):
    with pytest.raises(ValueError):
        update_type(candidate, (14, 4), 0)
