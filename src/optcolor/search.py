"""
Exhaustive search for optimal vertex colorings.

## Algorithm:
1. A single vertex is trivially colored [0]
2. Start from the first partition of n with the starting number of colors
   (lower bound hint, else 2, else 1 for an edgeless graph)
3. For each partition, in order of non-decreasing part count:
   a. Stop if it has more parts than the best color count found so far
   b. Expand it into the canonical ascending coloring
   c. Walk every distinct arrangement of that coloring, keeping the first
      proper one (or every non-equivalent proper one with enumerate_all)
   d. Fix the best color count as soon as a proper coloring is found
4. Return the colorings found at the minimum color count

Only the first proper arrangement of each partition shape is kept by
default, so the result holds one representative per color-class size
distribution. Other arrangements of the same shape can also be proper,
so this is not every coloring up to relabeling; enumerate_all=True
collects those as well, de-duplicated by canonical form.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from numbers import Integral
from typing import Optional

from .clique import MaxCliqueSolver
from .coloring import canonical_form, count_colors, is_valid
from .dsatur import dsatur_coloring
from .graph import Graph, as_graph
from .partitions import first_partition, next_partition, partition_to_coloring
from .permutations import next_permutation

# Permutation steps between two deadline checks
_TIME_CHECK_INTERVAL = 4096


class InvalidLowerBound(ValueError):
    """Raised when a lower bound on the chromatic number is unusable or provably wrong."""


class SearchStatus(Enum):
    """How the search ended."""

    COMPLETE = "complete"  # all partitions up to the minimum examined
    PARTIAL = "partial"  # a limit stopped the search after the minimum was fixed
    TIMEOUT = "timeout"  # a limit stopped the search before any coloring was found


@dataclass
class ColoringResult:
    """Result of the exhaustive search on a graph."""

    instance_name: str
    num_vertices: int
    num_edges: int
    status: SearchStatus
    num_colors: Optional[int]  # Chromatic number, None if nothing found
    start_colors: int  # Part count the search started from
    runtime_seconds: float
    partitions_examined: int
    permutations_examined: int
    colorings: list[list[int]] = field(default_factory=list)

    def to_csv_row(self) -> str:
        """Format as CSV row."""
        return ",".join(
            [
                self.instance_name,
                str(self.num_vertices),
                str(self.num_edges),
                self.status.value,
                str(self.num_colors) if self.num_colors is not None else "",
                str(len(self.colorings)),
                str(self.partitions_examined),
                str(self.permutations_examined),
                f"{self.runtime_seconds:.3f}",
            ]
        )

    @staticmethod
    def csv_header() -> str:
        """Return CSV header."""
        return "instance,vertices,edges,status,colors,colorings,partitions,permutations,runtime_s"


class ExhaustiveColoringSolver:
    """
    Exhaustive solver returning every optimal coloring, one per partition shape.

    The search is exponential in the number of vertices and is meant for small
    graphs (up to roughly 15-20 vertices).
    """

    def __init__(
        self,
        lower_bound: Optional[int] = None,
        check_lower_bound: bool = True,
        use_clique_bound: bool = False,
        clique_time_limit_seconds: float = 60.0,
        clique_solver_name: str = "SCIP",
        enumerate_all: bool = False,
        max_partitions: Optional[int] = None,
        time_limit_seconds: Optional[float] = None,
        verbose: bool = False,
    ):
        """
        Initialize the solver.

        Args:
            lower_bound: Known lower bound on the chromatic number (e.g. a clique
                         size). The search starts at this many colors. It is a
                         trusted hint: a value above the chromatic number makes
                         the search miss the real optimum.
            check_lower_bound: Reject a lower bound larger than the number of
                               colors DSATUR needs, which proves it wrong
            use_clique_bound: Raise the starting color count to the maximum
                              clique size found by the ILP solver
            clique_time_limit_seconds: Time limit for the clique ILP
            clique_solver_name: OR-Tools backend for the clique ILP
            enumerate_all: Keep every proper arrangement at the minimum color
                           count (up to relabeling), not only the first per shape
            max_partitions: Stop after examining this many partitions
            time_limit_seconds: Stop after this much wall-clock time
            verbose: Whether to print progress
        """
        if lower_bound is not None and (
            isinstance(lower_bound, bool) or not isinstance(lower_bound, Integral) or lower_bound < 1
        ):
            raise InvalidLowerBound(f"Lower bound must be a positive integer, got {lower_bound!r}")
        if max_partitions is not None and max_partitions < 1:
            raise ValueError(f"max_partitions must be positive, got {max_partitions}")
        if time_limit_seconds is not None and time_limit_seconds < 0:
            raise ValueError(f"time_limit_seconds must be non-negative, got {time_limit_seconds}")

        self.lower_bound = int(lower_bound) if lower_bound is not None else None
        self.check_lower_bound = check_lower_bound
        self.use_clique_bound = use_clique_bound
        self.clique_time_limit_seconds = clique_time_limit_seconds
        self.clique_solver_name = clique_solver_name
        self.enumerate_all = enumerate_all
        self.max_partitions = max_partitions
        self.time_limit_seconds = time_limit_seconds
        self.verbose = verbose

    def get_params(self) -> dict:
        """Return solver parameters as a dictionary."""
        return {
            "solver": "Exhaustive",
            "lower_bound": self.lower_bound,
            "check_lower_bound": self.check_lower_bound,
            "use_clique_bound": self.use_clique_bound,
            "clique_time_limit_seconds": self.clique_time_limit_seconds,
            "clique_solver_name": self.clique_solver_name,
            "enumerate_all": self.enumerate_all,
            "max_partitions": self.max_partitions,
            "time_limit_seconds": self.time_limit_seconds,
        }

    def solve(self, graph) -> ColoringResult:
        """
        Find all optimal colorings of a graph.

        Args:
            graph: Graph, or a raw adjacency list/matrix accepted by as_graph

        Returns:
            ColoringResult with the colorings in discovery order

        Raises:
            InvalidGraph: If a raw representation is malformed
            InvalidLowerBound: If the lower bound exceeds the vertex count or
                               is disproved by a DSATUR coloring
        """
        graph = as_graph(graph)
        n = graph.num_vertices
        start_time = time.time()

        # Trivial case
        if n == 1:
            if self.lower_bound is not None and self.lower_bound > 1:
                raise InvalidLowerBound(f"Lower bound {self.lower_bound} exceeds vertex count 1")
            return ColoringResult(
                instance_name=graph.name,
                num_vertices=1,
                num_edges=0,
                status=SearchStatus.COMPLETE,
                num_colors=1,
                start_colors=1,
                runtime_seconds=time.time() - start_time,
                partitions_examined=0,
                permutations_examined=0,
                colorings=[[0]],
            )

        start_colors = self._start_colors(graph)

        if self.verbose:
            print(f"Searching {graph}: starting at {start_colors} colors")

        result = self._search(graph, start_colors, start_time)

        if self.verbose:
            print(
                f"  Done ({result.status.value}): {result.num_colors} colors, "
                f"{len(result.colorings)} colorings, {result.partitions_examined} partitions, "
                f"{result.permutations_examined} permutations in {result.runtime_seconds:.2f}s"
            )

        return result

    def _start_colors(self, graph: Graph) -> int:
        """Determine the part count of the first partition."""
        n = graph.num_vertices

        if self.lower_bound is not None:
            if self.lower_bound > n:
                raise InvalidLowerBound(f"Lower bound {self.lower_bound} exceeds vertex count {n}")
            if self.check_lower_bound:
                upper = count_colors(dsatur_coloring(graph))
                if self.lower_bound > upper:
                    raise InvalidLowerBound(
                        f"Lower bound {self.lower_bound} is above the chromatic number: "
                        f"DSATUR found a {upper}-coloring of {graph.name}"
                    )
            start = self.lower_bound
        elif graph.num_edges > 0:
            start = 2
        else:
            start = 1

        if self.use_clique_bound:
            clique_solver = MaxCliqueSolver(
                time_limit_seconds=self.clique_time_limit_seconds,
                solver_name=self.clique_solver_name,
                verbose=self.verbose,
            )
            clique = clique_solver.solve(graph)
            # Any clique, optimal or not, is a valid lower bound
            if clique.clique_size is not None and clique.clique_size > start:
                if self.verbose:
                    print(f"  Clique bound raises start from {start} to {clique.clique_size} colors")
                start = clique.clique_size

        return start

    def _search(self, graph: Graph, start_colors: int, start_time: float) -> ColoringResult:
        """Run the partition/permutation search from start_colors parts."""
        n = graph.num_vertices
        deadline = start_time + self.time_limit_seconds if self.time_limit_seconds is not None else None

        best_colors: Optional[int] = None
        colorings: list[list[int]] = []
        seen: set[tuple[int, ...]] = set()
        partitions_examined = 0
        permutations_examined = 0
        stopped = False

        partition = first_partition(n, start_colors)
        while partition is not None:
            if best_colors is not None and len(partition) > best_colors:
                # all colorings with best_colors colors have been found
                break
            if self.max_partitions is not None and partitions_examined >= self.max_partitions:
                stopped = True
                break
            if deadline is not None and time.time() > deadline:
                stopped = True
                break

            partitions_examined += 1
            coloring = partition_to_coloring(partition, n)
            while True:
                permutations_examined += 1
                if is_valid(coloring, graph):
                    if best_colors is None and self.verbose:
                        print(f"  Found {len(partition)}-coloring for partition {partition}")
                    best_colors = len(partition)

                    if not self.enumerate_all:
                        colorings.append(list(coloring))
                        break

                    key = canonical_form(coloring)
                    if key not in seen:
                        seen.add(key)
                        colorings.append(list(coloring))

                if (
                    deadline is not None
                    and permutations_examined % _TIME_CHECK_INTERVAL == 0
                    and time.time() > deadline
                ):
                    stopped = True
                    break
                if not next_permutation(coloring):
                    break

            if stopped:
                break
            partition = next_partition(partition, n)

        if stopped:
            status = SearchStatus.PARTIAL if colorings else SearchStatus.TIMEOUT
            if self.verbose:
                print(f"  Search limit reached after {partitions_examined} partitions")
        else:
            status = SearchStatus.COMPLETE

        return ColoringResult(
            instance_name=graph.name,
            num_vertices=n,
            num_edges=graph.num_edges,
            status=status,
            num_colors=best_colors,
            start_colors=start_colors,
            runtime_seconds=time.time() - start_time,
            partitions_examined=partitions_examined,
            permutations_examined=permutations_examined,
            colorings=colorings,
        )

    def verify_solution(self, graph, result: ColoringResult) -> bool:
        """
        Verify that every coloring in a result is proper and uses num_colors colors.

        Args:
            graph: The graph
            result: The solver result to verify

        Returns:
            True if the solution is valid
        """
        graph = as_graph(graph)
        if not result.colorings:
            return False
        for coloring in result.colorings:
            if not is_valid(coloring, graph):
                return False
            if count_colors(coloring) != result.num_colors:
                return False
        return True


def find_optimal_colorings(graph, lower_bound: Optional[int] = None, **options) -> list[list[int]]:
    """
    Return every optimal coloring of a graph, one per partition shape.

    Args:
        graph: Graph, adjacency list (sequence or mapping) or 0/1 adjacency matrix
        lower_bound: Optional known lower bound on the chromatic number
        **options: Further ExhaustiveColoringSolver arguments

    Returns:
        List of colorings, each a list of color labels indexed by vertex

    Example:
        >>> find_optimal_colorings([[1, 2], [0, 2], [0, 1]])
        [[0, 1, 2]]
    """
    solver = ExhaustiveColoringSolver(lower_bound=lower_bound, **options)
    return solver.solve(graph).colorings
