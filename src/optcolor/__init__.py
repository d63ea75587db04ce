"""
Optimal Vertex Coloring (optcolor)

This package enumerates the optimal colorings of small graphs by exhaustive
search over integer partitions of the vertex set.
"""

from .clique import CliqueResult, MaxCliqueSolver, SolverStatus, verify_clique
from .coloring import canonical_form, conflicting_edges, count_colors, is_valid
from .dsatur import dsatur_coloring
from .generators import complete_graph, cycle_graph, empty_graph, path_graph, petersen_graph, random_graph
from .graph import Graph, InvalidGraph, as_graph
from .partitions import first_partition, iter_partitions, next_partition, partition_to_coloring
from .permutations import iter_permutations, next_permutation
from .search import (
    ColoringResult,
    ExhaustiveColoringSolver,
    InvalidLowerBound,
    SearchStatus,
    find_optimal_colorings,
)

__all__ = [
    # Graph
    "Graph",
    "InvalidGraph",
    "as_graph",
    # Sequencers
    "first_partition",
    "next_partition",
    "iter_partitions",
    "partition_to_coloring",
    "next_permutation",
    "iter_permutations",
    # Validation
    "is_valid",
    "conflicting_edges",
    "count_colors",
    "canonical_form",
    # Exhaustive search
    "ExhaustiveColoringSolver",
    "ColoringResult",
    "SearchStatus",
    "InvalidLowerBound",
    "find_optimal_colorings",
    # Bounds
    "dsatur_coloring",
    "MaxCliqueSolver",
    "CliqueResult",
    "SolverStatus",
    "verify_clique",
    # Sample graphs
    "petersen_graph",
    "complete_graph",
    "cycle_graph",
    "path_graph",
    "empty_graph",
    "random_graph",
]
