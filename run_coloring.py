#!/usr/bin/env python3
"""
Main script to run the exhaustive coloring search.

Usage:
    # Color the Petersen graph (demo)
    python run_coloring.py --petersen

    # Run on a single instance
    python run_coloring.py --instance instances/small/cycle5.txt

    # Run on a family of instances (first 2)
    python run_coloring.py --family small --max-instances 2

    # Use the maximum clique as the starting bound
    python run_coloring.py --instance instances/small/two_triangles.txt --clique-bound

    # Collect every non-equivalent optimal coloring, not one per partition shape
    python run_coloring.py --petersen --all-colorings

    # Cap the search
    python run_coloring.py --family small --time-limit 60 --max-partitions 500
"""

import argparse
from pathlib import Path

from optcolor import ExhaustiveColoringSolver, Graph, petersen_graph
from optcolor.runner import ExperimentRunner


def main():
    parser = argparse.ArgumentParser(description="Enumerate optimal vertex colorings by exhaustive search")

    # Instance selection
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--petersen", action="store_true", help="Color the Petersen graph")
    group.add_argument("--instance", type=Path, help="Path to a single instance file")
    group.add_argument("--family", type=str, help="Instance family to run (subdirectory of --instances-dir)")

    # Solver parameters
    parser.add_argument(
        "--lower-bound",
        type=int,
        default=None,
        help="Known lower bound on the chromatic number, e.g. a clique size (default: none)",
    )
    parser.add_argument(
        "--no-check-lower-bound",
        action="store_true",
        help="Trust --lower-bound without checking it against a DSATUR coloring",
    )
    parser.add_argument(
        "--clique-bound",
        action="store_true",
        help="Start the search at the maximum clique size (OR-Tools ILP)",
    )
    parser.add_argument(
        "--clique-backend",
        type=str,
        default="SCIP",
        choices=["SCIP", "CBC"],
        help="ILP backend for --clique-bound (default: SCIP)",
    )
    parser.add_argument(
        "--clique-time-limit",
        type=float,
        default=60.0,
        help="Time limit in seconds for the clique ILP (default: 60)",
    )
    parser.add_argument(
        "--all-colorings",
        action="store_true",
        help="Collect every non-equivalent optimal coloring instead of one per partition shape",
    )
    parser.add_argument("--max-partitions", type=int, default=None, help="Stop after this many partitions")
    parser.add_argument(
        "--time-limit",
        type=float,
        default=None,
        help="Time limit per instance in seconds (default: none)",
    )
    parser.add_argument("--verbose", action="store_true", help="Print search progress")

    # Experiment parameters
    parser.add_argument("--max-instances", type=int, help="Maximum instances to run (for testing)")
    parser.add_argument(
        "--from-end",
        action="store_true",
        help="Select instances from end of sorted list",
    )
    parser.add_argument(
        "--instances-dir",
        type=Path,
        default=Path("instances"),
        help="Directory containing instance families",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("results"),
        help="Directory for output files",
    )
    parser.add_argument("--output-file", type=str, help="Output CSV filename (default: auto-generated)")

    args = parser.parse_args()

    solver = ExhaustiveColoringSolver(
        lower_bound=args.lower_bound,
        check_lower_bound=not args.no_check_lower_bound,
        use_clique_bound=args.clique_bound,
        clique_time_limit_seconds=args.clique_time_limit,
        clique_solver_name=args.clique_backend,
        enumerate_all=args.all_colorings,
        max_partitions=args.max_partitions,
        time_limit_seconds=args.time_limit,
        verbose=args.verbose,
    )
    runner = ExperimentRunner(solver, output_dir=args.output_dir)

    if args.petersen or args.instance:
        graph = petersen_graph() if args.petersen else Graph.from_file(args.instance)
        print(f"Running on instance: {graph}")

        result = runner.run_graph(graph)

        print(f"\nResult: {result.status.value}")
        if result.num_colors is not None:
            print(f"  Chromatic number: {result.num_colors}")
            print(f"  Colorings ({len(result.colorings)}):")
            for coloring in result.colorings:
                print(f"    {coloring}")
            if solver.verify_solution(graph, result):
                print("  Colorings verified: VALID")
            else:
                print("  Colorings verified: INVALID!")
        print(f"  Partitions examined: {result.partitions_examined}")
        print(f"  Permutations examined: {result.permutations_examined}")
        print(f"  Runtime: {result.runtime_seconds:.3f}s")

    else:
        runner.run_directory(
            args.instances_dir / args.family,
            max_instances=args.max_instances,
            from_end=args.from_end,
        )
        runner.print_table()
        runner.print_summary()

    csv_path = runner.save_results_csv(args.output_file)
    runner.save_params_json(csv_path)


if __name__ == "__main__":
    main()
