"""
Experiment runner for graph instances.

Runs the exhaustive coloring solver over instance files and collects results.
"""

import csv
import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from .graph import Graph
from .search import ColoringResult, ExhaustiveColoringSolver, SearchStatus


class ExperimentRunner:
    """Runs experiments on graph instances and collects results."""

    def __init__(
        self,
        solver: ExhaustiveColoringSolver,
        output_dir: Optional[Path] = None,
    ):
        """
        Initialize the experiment runner.

        Args:
            solver: The coloring solver to use
            output_dir: Directory for output files (default: current directory)
        """
        self.solver = solver
        self.output_dir = Path(output_dir) if output_dir else Path.cwd()
        self.results: list[ColoringResult] = []

    def run_graph(self, graph: Graph) -> ColoringResult:
        """Run solver on an in-memory graph."""
        result = self.solver.solve(graph)
        self.results.append(result)
        return result

    def run_instance(self, filepath: Path) -> ColoringResult:
        """Run solver on a single instance file."""
        return self.run_graph(Graph.from_file(filepath))

    def run_directory(
        self,
        directory: Path,
        pattern: str = "*.txt",
        max_instances: Optional[int] = None,
        from_end: bool = False,
    ) -> list[ColoringResult]:
        """
        Run solver on all instances in a directory.

        Args:
            directory: Directory containing instance files
            pattern: Glob pattern for instance files
            max_instances: Maximum number of instances to run (for testing)
            from_end: If True, select instances from the end (larger instances first)

        Returns:
            List of results
        """
        directory = Path(directory)
        files = sorted(directory.glob(pattern))

        if max_instances:
            if from_end:
                files = files[-max_instances:]
            else:
                files = files[:max_instances]

        results = []
        for i, filepath in enumerate(files):
            print(f"[{i + 1}/{len(files)}] Processing {filepath.name}...", end=" ")
            sys.stdout.flush()

            try:
                result = self.run_instance(filepath)
            except ValueError as e:
                print(f"ERROR: {e}")
                continue

            self._print_result_line(result)
            results.append(result)

        return results

    def _print_result_line(self, result: ColoringResult) -> None:
        colors_str = str(result.num_colors) if result.num_colors is not None else "-"
        print(
            f"{result.status.value} - {colors_str} colors, {len(result.colorings)} colorings "
            f"in {result.runtime_seconds:.2f}s"
        )

    def run_all_families(
        self,
        instances_dir: Path,
        families: Optional[list[str]] = None,
        max_per_family: Optional[int] = None,
        from_end: bool = False,
    ) -> dict[str, list[ColoringResult]]:
        """
        Run solver on all instance families.

        Args:
            instances_dir: Root directory containing family subdirectories
            families: List of family names to run (default: all)
            max_per_family: Maximum instances per family (for testing)
            from_end: If True, select instances from the end

        Returns:
            Dictionary mapping family name to results
        """
        instances_dir = Path(instances_dir)

        if families is None:
            families = sorted(d.name for d in instances_dir.iterdir() if d.is_dir())

        all_results = {}
        for family in families:
            family_dir = instances_dir / family
            if not family_dir.exists():
                print(f"Warning: Family directory {family} not found, skipping.")
                continue

            print(f"\n{'=' * 60}")
            print(f"Running family: {family}")
            print(f"{'=' * 60}")

            results = self.run_directory(family_dir, max_instances=max_per_family, from_end=from_end)
            all_results[family] = results

        return all_results

    def save_results_csv(self, filename: Optional[str] = None) -> Path:
        """
        Save all results to a CSV file.

        Args:
            filename: Output filename (default: results_exhaustive_TIMESTAMP.csv)

        Returns:
            Path to the saved file
        """
        if filename is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            filename = f"results_exhaustive_{timestamp}.csv"

        filepath = self.output_dir / filename
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(
                [
                    "instance",
                    "vertices",
                    "edges",
                    "status",
                    "colors",
                    "colorings",
                    "partitions",
                    "permutations",
                    "runtime_s",
                ]
            )

            for result in self.results:
                writer.writerow(
                    [
                        result.instance_name,
                        result.num_vertices,
                        result.num_edges,
                        result.status.value,
                        result.num_colors if result.num_colors is not None else "",
                        len(result.colorings),
                        result.partitions_examined,
                        result.permutations_examined,
                        f"{result.runtime_seconds:.3f}",
                    ]
                )

        print(f"\nResults saved to: {filepath}")
        return filepath

    def save_params_json(self, csv_filepath: Path) -> Path:
        """
        Save solver parameters to a JSON file alongside the CSV.

        Args:
            csv_filepath: Path to the CSV file (JSON will be saved with same name)

        Returns:
            Path to the saved JSON file
        """
        json_filepath = Path(csv_filepath).with_suffix(".json")

        params = self.solver.get_params()
        params["timestamp"] = datetime.now().isoformat()
        params["num_instances"] = len(self.results)

        with open(json_filepath, "w") as f:
            json.dump(params, f, indent=2)

        print(f"Parameters saved to: {json_filepath}")
        return json_filepath

    def print_summary(self):
        """Print a summary of results."""
        if not self.results:
            print("No results to summarize.")
            return

        print(f"\n{'=' * 60}")
        print("SUMMARY")
        print(f"{'=' * 60}")

        total = len(self.results)
        complete = sum(1 for r in self.results if r.status == SearchStatus.COMPLETE)
        partial = sum(1 for r in self.results if r.status == SearchStatus.PARTIAL)
        timeout = sum(1 for r in self.results if r.status == SearchStatus.TIMEOUT)

        print(f"Total instances: {total}")
        print(f"  Complete: {complete} ({100 * complete / total:.1f}%)")
        print(f"  Partial:  {partial} ({100 * partial / total:.1f}%)")
        print(f"  Timeout:  {timeout} ({100 * timeout / total:.1f}%)")

        solved = [r for r in self.results if r.num_colors is not None]
        if solved:
            avg_colors = sum(r.num_colors for r in solved if r.num_colors is not None) / len(solved)
            avg_colorings = sum(len(r.colorings) for r in solved) / len(solved)
            avg_time = sum(r.runtime_seconds for r in solved) / len(solved)
            print(f"\nSolved instances: {len(solved)}")
            print(f"  Avg colors:    {avg_colors:.2f}")
            print(f"  Avg colorings: {avg_colorings:.2f}")
            print(f"  Avg time:      {avg_time:.2f}s")

    def print_table(self):
        """Print results as a formatted table."""
        if not self.results:
            print("No results to display.")
            return

        print(
            f"\n{'Instance':<25} {'V':>4} {'E':>5} {'Status':<9} {'Colors':>6} "
            f"{'Found':>6} {'Parts':>7} {'Perms':>10} {'Time(s)':>9}"
        )
        print("-" * 88)

        for r in self.results:
            colors_str = str(r.num_colors) if r.num_colors is not None else "-"
            print(
                f"{r.instance_name:<25} {r.num_vertices:>4} {r.num_edges:>5} {r.status.value:<9} "
                f"{colors_str:>6} {len(r.colorings):>6} {r.partitions_examined:>7} "
                f"{r.permutations_examined:>10} {r.runtime_seconds:>9.3f}"
            )
