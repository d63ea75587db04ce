"""Tests for the permutation sequencer."""

import itertools

import pytest

from optcolor.permutations import iter_permutations, next_permutation


def test_next_permutation_simple():
    coloring = [0, 1, 2]
    assert next_permutation(coloring)
    assert coloring == [0, 2, 1]
    assert next_permutation(coloring)
    assert coloring == [1, 0, 2]


def test_next_permutation_with_repeated_labels():
    coloring = [0, 0, 1, 1]
    seen = [list(coloring)]
    while next_permutation(coloring):
        seen.append(list(coloring))
    assert seen == [
        [0, 0, 1, 1],
        [0, 1, 0, 1],
        [0, 1, 1, 0],
        [1, 0, 0, 1],
        [1, 0, 1, 0],
        [1, 1, 0, 0],
    ]


def test_next_permutation_last_returns_false_and_keeps_array():
    coloring = [2, 1, 1, 0]
    assert not next_permutation(coloring)
    assert coloring == [2, 1, 1, 0]


def test_next_permutation_single_and_constant():
    assert not next_permutation([0])
    assert not next_permutation([3, 3, 3])


@pytest.mark.parametrize(
    "multiset",
    [
        [0, 1, 2, 3],
        [0, 0, 0, 1],
        [0, 0, 1, 1, 2],
        [0, 0, 0, 1, 1, 2, 2],
        [0, 1, 1, 2, 2, 2],
    ],
)
def test_visits_every_distinct_permutation_once_in_order(multiset):
    seq = [tuple(p) for p in iter_permutations(sorted(multiset))]
    expected = sorted(set(itertools.permutations(multiset)))

    assert seq == expected


def test_iter_permutations_yields_copies():
    start = [0, 0, 1]
    seq = list(iter_permutations(start))
    assert start == [0, 0, 1]
    assert seq[0] is not start
    assert len({id(p) for p in seq}) == len(seq)
