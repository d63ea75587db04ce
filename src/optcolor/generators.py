"""Small sample graphs for demos, tests and experiments."""

import random
from typing import Optional

from .graph import Graph

# Petersen graph: https://en.wikipedia.org/wiki/Petersen_graph
# Outer 5-cycle 0-4, inner pentagram 5-9, spokes i -- i+5
PETERSEN_ADJACENCY = [
    [1, 4, 5],
    [0, 2, 6],
    [1, 3, 7],
    [2, 4, 8],
    [0, 3, 9],
    [0, 7, 8],
    [1, 8, 9],
    [2, 5, 9],
    [3, 5, 6],
    [4, 6, 7],
]


def petersen_graph() -> Graph:
    """10 vertices, 3-regular, chromatic number 3."""
    return Graph.from_adjacency_list(PETERSEN_ADJACENCY, name="petersen")


def complete_graph(n: int) -> Graph:
    edges = [(i, j) for i in range(n) for j in range(i + 1, n)]
    return Graph.from_edges(n, edges, name=f"K{n}")


def cycle_graph(n: int) -> Graph:
    if n < 3:
        raise ValueError(f"A cycle needs at least 3 vertices, got {n}")
    edges = [(i, (i + 1) % n) for i in range(n)]
    return Graph.from_edges(n, edges, name=f"C{n}")


def path_graph(n: int) -> Graph:
    edges = [(i, i + 1) for i in range(n - 1)]
    return Graph.from_edges(n, edges, name=f"P{n}")


def empty_graph(n: int) -> Graph:
    return Graph.from_edges(n, [], name=f"E{n}")


def random_graph(n: int, p_edge: float, seed: Optional[int] = None) -> Graph:
    """
    G(n, p) random graph.

    Args:
        n: Number of vertices
        p_edge: Independent probability of each edge
        seed: Random seed for reproducibility (None for random)
    """
    rng = random.Random(seed)
    edges = []
    for i in range(n):
        for j in range(i + 1, n):
            if rng.random() < p_edge:
                edges.append((i, j))
    return Graph.from_edges(n, edges, name=f"gnp_n{n}_p{p_edge}_s{seed}")
