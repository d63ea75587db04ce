"""
Graph data structure, validated constructors and instance parser.

Instance file format:
- Line 1: n (number of vertices, numbered 0 to n-1)
- Line 2: m (number of edges)
- Next m lines: edges as "u v" pairs
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from numbers import Integral
from pathlib import Path
from typing import Union


class InvalidGraph(ValueError):
    """Raised when a graph representation violates its shape invariants."""


@dataclass(frozen=True)
class Graph:
    """Undirected simple graph on vertices 0..n-1.

    Built once through one of the ``from_*`` constructors, which check
    bounds and symmetry, and treated as read-only afterwards.
    """

    name: str
    num_vertices: int
    adjacency: tuple[tuple[int, ...], ...]

    # Derived data, computed after construction
    edges: tuple[tuple[int, int], ...] = field(default=(), repr=False, compare=False)

    def __post_init__(self):
        """Compute the edge list (i < j, each edge once)."""
        edges = tuple((i, j) for i, nbrs in enumerate(self.adjacency) for j in nbrs if j > i)
        object.__setattr__(self, "edges", edges)

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    def neighbors(self, vertex: int) -> tuple[int, ...]:
        """Neighbours of a vertex, in the order they were supplied."""
        return self.adjacency[vertex]

    def degree(self, vertex: int) -> int:
        return len(self.adjacency[vertex])

    def has_edge(self, u: int, v: int) -> bool:
        return v in self.adjacency[u]

    @classmethod
    def from_adjacency_list(
        cls,
        adjacency: Union[Sequence[Sequence[int]], Mapping[int, Sequence[int]]],
        name: str = "graph",
    ) -> "Graph":
        """
        Build a graph from per-vertex neighbour lists.

        Args:
            adjacency: Sequence (or mapping keyed 0..n-1) of neighbour sequences.
                       Every edge must be listed by both endpoints.
            name: Label used in reports

        Returns:
            Graph object

        Raises:
            InvalidGraph: On empty input, bad keys, out-of-range indices,
                          self-loops or asymmetric lists
        """
        if isinstance(adjacency, Mapping):
            n = len(adjacency)
            if set(adjacency.keys()) != set(range(n)):
                raise InvalidGraph(f"Adjacency keys must be exactly 0..{n - 1}, got {list(adjacency)}")
            rows = [adjacency[v] for v in range(n)]
        else:
            rows = list(adjacency)
            n = len(rows)

        if n == 0:
            raise InvalidGraph("Graph must have at least one vertex")

        neighbor_lists: list[tuple[int, ...]] = []
        for v, row in enumerate(rows):
            seen: dict[int, None] = {}
            for u in row:
                if isinstance(u, bool) or not isinstance(u, Integral):
                    raise InvalidGraph(f"Non-integer neighbour {u!r} of vertex {v}")
                if not (0 <= u < n):
                    raise InvalidGraph(f"Neighbour {u} of vertex {v} out of range [0, {n})")
                if u == v:
                    raise InvalidGraph(f"Self-loop on vertex {v}")
                seen[int(u)] = None
            neighbor_lists.append(tuple(seen))

        sets = [set(nbrs) for nbrs in neighbor_lists]
        for v, nbrs in enumerate(neighbor_lists):
            for u in nbrs:
                if v not in sets[u]:
                    raise InvalidGraph(f"Asymmetric adjacency: {v} lists {u} but {u} does not list {v}")

        return cls(name=name, num_vertices=n, adjacency=tuple(neighbor_lists))

    @classmethod
    def from_adjacency_matrix(cls, matrix: Sequence[Sequence[int]], name: str = "graph") -> "Graph":
        """
        Build a graph from an n x n 0/1 matrix.

        Raises:
            InvalidGraph: If the matrix is empty, not square, not 0/1,
                          asymmetric or has a non-zero diagonal
        """
        rows = [list(row) for row in matrix]
        n = len(rows)
        if n == 0:
            raise InvalidGraph("Graph must have at least one vertex")

        for i, row in enumerate(rows):
            if len(row) != n:
                raise InvalidGraph(f"Matrix is not square: row {i} has {len(row)} entries, expected {n}")
            for j, value in enumerate(row):
                if value not in (0, 1):
                    raise InvalidGraph(f"Matrix entry [{i}][{j}] = {value!r} is not 0 or 1")

        for i in range(n):
            if rows[i][i] != 0:
                raise InvalidGraph(f"Matrix diagonal entry [{i}][{i}] must be 0")
            for j in range(i + 1, n):
                if rows[i][j] != rows[j][i]:
                    raise InvalidGraph(f"Matrix is not symmetric at [{i}][{j}]")

        adjacency = tuple(tuple(j for j in range(n) if rows[i][j]) for i in range(n))
        return cls(name=name, num_vertices=n, adjacency=adjacency)

    @classmethod
    def from_edges(cls, num_vertices: int, edges: Sequence[tuple[int, int]], name: str = "graph") -> "Graph":
        """Build a graph from a vertex count and an undirected edge list."""
        if num_vertices < 1:
            raise InvalidGraph("Graph must have at least one vertex")

        adjacency: list[list[int]] = [[] for _ in range(num_vertices)]
        for u, v in edges:
            for w in (u, v):
                if isinstance(w, bool) or not isinstance(w, Integral):
                    raise InvalidGraph(f"Non-integer vertex {w!r} in edge ({u!r}, {v!r})")
            u, v = int(u), int(v)
            if not (0 <= u < num_vertices and 0 <= v < num_vertices):
                raise InvalidGraph(f"Invalid vertex in edge ({u}, {v})")
            if u == v:
                raise InvalidGraph(f"Self-loop on vertex {u}")
            if v not in adjacency[u]:
                adjacency[u].append(v)
                adjacency[v].append(u)

        return cls(name=name, num_vertices=num_vertices, adjacency=tuple(tuple(a) for a in adjacency))

    @classmethod
    def from_file(cls, filepath: Union[str, Path]) -> "Graph":
        """
        Parse a graph instance from a file.

        Args:
            filepath: Path to the instance file

        Returns:
            Graph object

        Raises:
            ValueError: If the file format is invalid
        """
        filepath = Path(filepath)

        with open(filepath, "r") as f:
            lines = [line.strip() for line in f.readlines()]

        # Remove empty lines at the end
        while lines and not lines[-1]:
            lines.pop()

        if len(lines) < 2:
            raise ValueError(f"Invalid instance file: {filepath} - too few lines")

        try:
            n = int(lines[0])  # vertices
            m = int(lines[1])  # edges
        except ValueError as e:
            raise ValueError(f"Invalid header in {filepath}: {e}")

        edges = []
        edge_start = 2
        for i in range(edge_start, edge_start + m):
            if i >= len(lines):
                raise ValueError(f"Missing edge on line {i + 1} in {filepath}")
            parts = lines[i].split()
            if len(parts) < 2:
                raise ValueError(f"Invalid edge format on line {i + 1} in {filepath}")
            try:
                u, v = int(parts[0]), int(parts[1])
            except ValueError:
                raise ValueError(f"Invalid edge format on line {i + 1} in {filepath}")
            edges.append((u, v))

        if len(lines) > edge_start + m:
            raise ValueError(
                f"Edge count mismatch in {filepath}: expected {m}, got {len(lines) - edge_start} lines of edges"
            )

        return cls.from_edges(n, edges, name=filepath.stem)

    def __str__(self) -> str:
        return f"Graph({self.name}: n={self.num_vertices}, m={self.num_edges})"


def _looks_like_matrix(rows: list) -> bool:
    n = len(rows)
    if n == 1:
        # [[0]] as a neighbour list is a self-loop, so read it as a matrix
        return rows[0] == [0]
    for i, row in enumerate(rows):
        if isinstance(row, Mapping) or len(row) != n:
            return False
        if any(x not in (0, 1) for x in row):
            return False
        # Vertex 0 of a neighbour list such as [[1, 1], [0, 0]] puts a 1 on the diagonal
        if row[i] != 0:
            return False
    return True


def as_graph(graph) -> Graph:
    """
    Coerce a raw representation into a validated Graph.

    Accepts a Graph (returned unchanged), a mapping of neighbour lists, or a
    sequence of rows. Rows form a matrix when they are all of length n and
    hold only 0/1 values; otherwise they are read as neighbour lists.
    """
    if isinstance(graph, Graph):
        return graph
    if isinstance(graph, Mapping):
        return Graph.from_adjacency_list(graph)

    rows = [list(row) for row in graph]
    if rows and _looks_like_matrix(rows):
        return Graph.from_adjacency_matrix(rows)
    return Graph.from_adjacency_list(rows)
