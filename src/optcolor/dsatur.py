"""
DSATUR (Degree of Saturation) Graph Coloring Algorithm.

DSATUR is a greedy graph coloring heuristic that selects vertices based on
their "saturation degree" - the number of distinct colors already assigned
to their neighbors. The number of colors it uses is an upper bound on the
chromatic number, which is how the exhaustive search uses it: a lower-bound
hint larger than this number is provably wrong.

## Algorithm:
1. Start with all vertices uncolored
2. Repeat until all vertices are colored:
   a. Select the uncolored vertex with the highest saturation degree
   b. Break ties by selecting the vertex with highest degree
   c. Assign the smallest color not used by any neighbor
3. Return the coloring

Ref: https://www.geeksforgeeks.org/dsa/dsatur-algorithm-for-graph-coloring/
"""

from typing import Optional

from .graph import Graph


def dsatur_coloring(graph: Graph) -> list[int]:
    """
    Color a graph using the DSATUR algorithm.

    Args:
        graph: Graph to color

    Returns:
        List with the assigned color (0-indexed) of each vertex

    Example:
        >>> g = Graph.from_edges(3, [(0, 1), (1, 2)])
        >>> dsatur_coloring(g)  # [1, 0, 1]
    """
    n = graph.num_vertices

    color: list[int] = [-1] * n
    neighbor_colors: list[set[int]] = [set() for _ in range(n)]  # saturation tracking
    degree = [graph.degree(v) for v in range(n)]

    for _ in range(n):
        # Select vertex with max saturation, break ties by max degree
        best_vertex: Optional[int] = None
        best_saturation = -1
        best_degree = -1

        for v in range(n):
            if color[v] != -1:
                continue  # already colored

            sat = len(neighbor_colors[v])
            deg = degree[v]

            if sat > best_saturation or (sat == best_saturation and deg > best_degree):
                best_vertex = v
                best_saturation = sat
                best_degree = deg

        if best_vertex is None:
            break  # all colored

        # Find smallest available color for best_vertex
        used_colors = neighbor_colors[best_vertex]
        c = 0
        while c in used_colors:
            c += 1

        color[best_vertex] = c

        # Update saturation of uncolored neighbors
        for neighbor in graph.neighbors(best_vertex):
            if color[neighbor] == -1:
                neighbor_colors[neighbor].add(c)

    return color
