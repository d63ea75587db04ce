"""
Integer partition sequencing.

A partition of n is kept as a list of positive parts in non-increasing
order. Partitions are produced grouped by part count (1, 2, ..., n) and,
within a part count, in reverse lexicographic order: the most front-loaded
shape [n-k+1, 1, ..., 1] first, the most balanced shape last.

## Successor rule:
1. If the partition already has n parts, the sequence is over
2. If the largest and smallest parts differ by less than 2, the shape is
   balanced and this part count is exhausted; move to k+1 parts
3. Otherwise take the rightmost part that can drop by one while the parts
   to its right can still absorb the surplus, decrement it, and refill only
   that suffix with the largest descending arrangement
"""

from typing import Iterator, Optional


def first_partition(n: int, min_parts: Optional[int] = None) -> list[int]:
    """
    Return the first partition of n with the given number of parts.

    Args:
        n: Number being partitioned (vertex count)
        min_parts: Number of parts. When omitted the sequence starts at two
                   parts, since a graph with an edge is never 1-colorable.

    Returns:
        [n - (min_parts - 1), 1, ..., 1]

    Example:
        >>> first_partition(5)
        [4, 1]
        >>> first_partition(5, 3)
        [3, 1, 1]
    """
    if n < 1:
        raise ValueError(f"Cannot partition {n}: n must be positive")
    if min_parts is None:
        min_parts = min(2, n)
    if not (1 <= min_parts <= n):
        raise ValueError(f"Number of parts must be in [1, {n}], got {min_parts}")

    return [n - (min_parts - 1)] + [1] * (min_parts - 1)


def next_partition(partition: list[int], n: int) -> Optional[list[int]]:
    """
    Compute the successor of a partition.

    Args:
        partition: Current partition (non-increasing, sums to n); not modified
        n: The number being partitioned

    Returns:
        The next partition, or None after the all-ones partition
    """
    k = len(partition)
    if k >= n:
        return None

    # Balanced shape: no more partitions with k parts
    if partition[0] - partition[-1] < 2:
        return first_partition(n, k + 1)

    result = list(partition)
    suffix_sum = 0
    for i in range(k - 2, -1, -1):
        suffix_sum += result[i + 1]
        new_value = result[i] - 1
        slots = k - 1 - i
        total = suffix_sum + 1
        if new_value < 1 or slots * new_value < total:
            continue

        result[i] = new_value
        for j in range(i + 1, k):
            part = min(new_value, total - (k - 1 - j))
            result[j] = part
            total -= part
        return result

    # Unreachable for a well-formed partition with an unbalanced shape
    return None


def iter_partitions(n: int, min_parts: Optional[int] = None) -> Iterator[list[int]]:
    """Yield every partition of n from first_partition(n, min_parts) onward."""
    partition = first_partition(n, min_parts)
    while partition is not None:
        yield partition
        partition = next_partition(partition, n)


def partition_to_coloring(partition: list[int], n: int) -> list[int]:
    """
    Expand a partition into the canonical (non-decreasing) coloring.

    The first partition[0] vertices get color 0, the next partition[1]
    vertices get color 1, and so on.

    Example:
        >>> partition_to_coloring([3, 2], 5)
        [0, 0, 0, 1, 1]
    """
    if sum(partition) != n:
        raise ValueError(f"Partition {partition} does not sum to {n}")

    coloring: list[int] = []
    for color, size in enumerate(partition):
        coloring.extend([color] * size)
    return coloring
