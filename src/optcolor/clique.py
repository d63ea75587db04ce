"""
Maximum clique ILP.

The vertices of a clique need pairwise distinct colors, so the clique
number is a lower bound on the chromatic number that is always safe to
seed the exhaustive search with.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ortools.linear_solver import pywraplp

from .graph import Graph


class SolverStatus(Enum):
    """Status of the solver after optimization."""

    OPTIMAL = "optimal"
    FEASIBLE = "feasible"
    INFEASIBLE = "infeasible"
    TIMEOUT = "timeout"
    ERROR = "error"


@dataclass
class CliqueResult:
    """Result of solving the maximum clique problem on a graph."""

    instance_name: str
    num_vertices: int
    num_edges: int
    status: SolverStatus
    clique_size: Optional[int]  # Clique number, or best found if not optimal
    runtime_seconds: float
    vertices: Optional[list[int]]  # Vertices of the clique found

    def is_proven(self) -> bool:
        """Whether clique_size is the exact clique number."""
        return self.status == SolverStatus.OPTIMAL


class MaxCliqueSolver:
    """
    ILP-based solver for the maximum clique problem.

    Uses OR-Tools with SCIP backend by default.
    """

    def __init__(
        self,
        time_limit_seconds: float = 60.0,
        solver_name: str = "SCIP",
        verbose: bool = False,
    ):
        """
        Initialize the solver.

        Args:
            time_limit_seconds: Maximum solving time
            solver_name: Backend solver ("SCIP", "CBC")
            verbose: Whether to print solver output
        """
        self.time_limit_seconds = time_limit_seconds
        self.solver_name = solver_name
        self.verbose = verbose

    def solve(self, graph: Graph) -> CliqueResult:
        """
        Find a maximum clique.

        Args:
            graph: The graph to search

        Returns:
            CliqueResult with solution details
        """
        solver = pywraplp.Solver.CreateSolver(self.solver_name)
        if solver is None:
            raise RuntimeError(f"OR-Tools backend {self.solver_name!r} is not available")
        solver.SetTimeLimit(int(self.time_limit_seconds * 1000))

        n = graph.num_vertices

        # x[v] = 1 if vertex v is in the clique
        x = {}
        for v in range(n):
            x[v] = solver.BoolVar(f"x_{v}")

        # Non-adjacent vertices cannot both be in the clique
        for u in range(n):
            for v in range(u + 1, n):
                if not graph.has_edge(u, v):
                    solver.Add(x[u] + x[v] <= 1, f"non_edge_{u}_{v}")

        solver.Maximize(sum(x[v] for v in range(n)))

        if self.verbose:
            print(f"Solving max clique for {graph.name}...")
            print(f"  Variables: {solver.NumVariables()}")
            print(f"  Constraints: {solver.NumConstraints()}")

        status = solver.Solve()

        runtime = solver.WallTime() / 1000.0  # convert ms to seconds

        if status == pywraplp.Solver.OPTIMAL:
            result_status = SolverStatus.OPTIMAL
        elif status == pywraplp.Solver.FEASIBLE:
            result_status = SolverStatus.FEASIBLE
        elif status == pywraplp.Solver.INFEASIBLE:
            result_status = SolverStatus.INFEASIBLE
        else:
            result_status = SolverStatus.TIMEOUT

        clique_size = None
        vertices = None

        if result_status in (SolverStatus.OPTIMAL, SolverStatus.FEASIBLE):
            vertices = [v for v in range(n) if x[v].solution_value() > 0.5]
            clique_size = len(vertices)

            if self.verbose:
                print(f"  Clique found: size {clique_size} ({result_status.value})")
                print(f"  Vertices: {vertices}")

        return CliqueResult(
            instance_name=graph.name,
            num_vertices=n,
            num_edges=graph.num_edges,
            status=result_status,
            clique_size=clique_size,
            runtime_seconds=runtime,
            vertices=vertices,
        )

    def verify_solution(self, graph: Graph, result: CliqueResult) -> bool:
        """
        Verify that a solution is a clique of the reported size.

        Args:
            graph: The graph
            result: The solver result to verify

        Returns:
            True if the solution is valid
        """
        if result.vertices is None:
            return False
        if len(result.vertices) != result.clique_size:
            return False
        return verify_clique(graph, result.vertices)


def verify_clique(graph: Graph, vertices: list[int]) -> bool:
    """Check that every pair of the given vertices is adjacent."""
    for i, u in enumerate(vertices):
        for v in vertices[i + 1 :]:
            if not graph.has_edge(u, v):
                return False
    return True
