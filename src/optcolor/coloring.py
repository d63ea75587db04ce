"""
Coloring validation and inspection helpers.

A coloring is a list with one color label per vertex index. It is proper
when no edge joins two vertices with the same label.
"""

from .graph import Graph, as_graph


def _check_length(coloring: list[int], graph: Graph) -> None:
    if len(coloring) != graph.num_vertices:
        raise ValueError(f"Coloring has {len(coloring)} entries but graph has {graph.num_vertices} vertices")


def is_valid(coloring: list[int], graph) -> bool:
    """
    Verify that a coloring is proper (no adjacent vertices share a color).

    Args:
        coloring: Color label for each vertex
        graph: Graph, or any raw representation accepted by as_graph

    Returns:
        True if coloring is valid, False otherwise
    """
    graph = as_graph(graph)
    _check_length(coloring, graph)

    for v in range(graph.num_vertices):
        v_color = coloring[v]
        for neighbor in graph.neighbors(v):
            # Each undirected edge checked once, from its lower endpoint
            if neighbor > v and coloring[neighbor] == v_color:
                return False  # conflict

    return True


def conflicting_edges(coloring: list[int], graph) -> list[tuple[int, int]]:
    """Return every edge (u, v), u < v, whose endpoints share a color."""
    graph = as_graph(graph)
    _check_length(coloring, graph)
    return [(u, v) for u, v in graph.edges if coloring[u] == coloring[v]]


def count_colors(coloring: list[int]) -> int:
    """
    Count the number of distinct colors used in a coloring.

    Returns:
        Number of distinct colors (0 if empty)
    """
    if not coloring:
        return 0
    return len(set(coloring))


def canonical_form(coloring: list[int]) -> tuple[int, ...]:
    """
    Relabel colors in order of first appearance.

    Two colorings that differ only by a renaming of their labels have the
    same canonical form.

    Example:
        >>> canonical_form([2, 0, 2, 1])
        (0, 1, 0, 2)
    """
    relabel: dict[int, int] = {}
    for color in coloring:
        if color not in relabel:
            relabel[color] = len(relabel)
    return tuple(relabel[color] for color in coloring)
