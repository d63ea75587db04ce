"""
Lexicographic permutation sequencing for colorings with repeated labels.

Starting from the ascending arrangement of a multiset, repeated calls to
next_permutation visit every distinct arrangement exactly once, in
increasing lexicographic order, and report False on the descending one.
"""

from typing import Iterator


def next_permutation(coloring: list[int]) -> bool:
    """
    Advance a coloring to its lexicographic successor, in place.

    Args:
        coloring: Mutable sequence of color labels

    Returns:
        True if a successor was produced, False if the coloring was already
        the last (non-increasing) arrangement. In that case it is unchanged.
    """
    i = len(coloring) - 1
    while i > 0 and coloring[i - 1] >= coloring[i]:
        i -= 1
    if i <= 0:
        return False  # last permutation

    # Rightmost element strictly greater than the pivot
    j = len(coloring) - 1
    while coloring[j] <= coloring[i - 1]:
        j -= 1

    coloring[i - 1], coloring[j] = coloring[j], coloring[i - 1]

    # Suffix is non-increasing; reverse it back to ascending
    coloring[i:] = coloring[i:][::-1]
    return True


def iter_permutations(coloring: list[int]) -> Iterator[list[int]]:
    """Yield copies of coloring and each of its successors."""
    current = list(coloring)
    yield list(current)
    while next_permutation(current):
        yield list(current)
