"""Tests for the experiment runner."""

import csv
import json
from pathlib import Path

from optcolor import ExhaustiveColoringSolver, Graph, SearchStatus
from optcolor.generators import petersen_graph
from optcolor.runner import ExperimentRunner

INSTANCES_DIR = Path(__file__).resolve().parent.parent / "instances"


def _write_instances(directory):
    directory.mkdir(parents=True)
    (directory / "a_triangle.txt").write_text("3\n3\n0 1\n1 2\n2 0\n")
    (directory / "b_path.txt").write_text("4\n3\n0 1\n1 2\n2 3\n")
    (directory / "c_broken.txt").write_text("3\n2\n0 1\n")


def test_run_directory_skips_invalid_instances(tmp_path, capsys):
    _write_instances(tmp_path / "family")
    runner = ExperimentRunner(ExhaustiveColoringSolver(), output_dir=tmp_path)

    results = runner.run_directory(tmp_path / "family")

    assert [r.instance_name for r in results] == ["a_triangle", "b_path"]
    assert [r.num_colors for r in results] == [3, 2]
    assert "ERROR" in capsys.readouterr().out


def test_run_directory_max_instances(tmp_path):
    _write_instances(tmp_path / "family")
    runner = ExperimentRunner(ExhaustiveColoringSolver(), output_dir=tmp_path)

    assert [r.instance_name for r in runner.run_directory(tmp_path / "family", max_instances=1)] == ["a_triangle"]
    assert [r.instance_name for r in runner.run_directory(tmp_path / "family", max_instances=2, from_end=True)] == [
        "b_path"
    ]


def test_run_all_families(tmp_path):
    _write_instances(tmp_path / "one")
    runner = ExperimentRunner(ExhaustiveColoringSolver(), output_dir=tmp_path)

    all_results = runner.run_all_families(tmp_path, families=["one", "missing"])

    assert list(all_results) == ["one"]
    assert len(all_results["one"]) == 2


def test_bundled_instances():
    runner = ExperimentRunner(ExhaustiveColoringSolver())
    results = runner.run_directory(INSTANCES_DIR / "small")

    colors = {r.instance_name: r.num_colors for r in results}
    assert colors == {"cycle5": 3, "k4": 4, "two_triangles": 3}
    assert all(r.status == SearchStatus.COMPLETE for r in results)


def test_save_results_csv_and_params(tmp_path):
    runner = ExperimentRunner(ExhaustiveColoringSolver(max_partitions=100), output_dir=tmp_path)
    runner.run_graph(petersen_graph())

    csv_path = runner.save_results_csv("out.csv")
    json_path = runner.save_params_json(csv_path)

    with open(csv_path, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0][0] == "instance"
    assert rows[1][0] == "petersen"
    assert rows[1][4] == "3"

    params = json.loads(json_path.read_text())
    assert params["max_partitions"] == 100
    assert params["num_instances"] == 1


def test_print_table_and_summary(capsys):
    runner = ExperimentRunner(ExhaustiveColoringSolver())
    runner.print_summary()
    assert "No results" in capsys.readouterr().out

    runner.run_graph(petersen_graph())
    runner.print_table()
    runner.print_summary()
    out = capsys.readouterr().out
    assert "petersen" in out
    assert "Complete: 1" in out


def test_save_results_csv_quotes_instance_names(tmp_path):
    runner = ExperimentRunner(ExhaustiveColoringSolver(), output_dir=tmp_path)
    runner.run_graph(Graph.from_edges(3, [(0, 1), (1, 2), (2, 0)], name="a,b"))

    with open(runner.save_results_csv("out.csv"), newline="") as f:
        rows = list(csv.reader(f))

    assert len(rows[1]) == len(rows[0])
    assert rows[1][0] == "a,b"
    assert rows[1][4] == "3"
