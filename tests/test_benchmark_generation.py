import json

import networkx as nx
import pytest

from benchmark_generation import build_walk_graph, main, run_benchmark, summarize, summarize_runs
from maze import Maze


def test_run_benchmark_produces_trees():
    runs = run_benchmark(3, seed=1, lengths=(4, 4, 2))

    assert len(runs) == 3
    for run in runs:
        assert run.is_tree
        assert run.cell_count == 32
        assert run.edge_count == 31
        assert run.diameter is not None
        assert 0 < run.dead_ends < run.cell_count
        assert run.rejected_cycles > 0


def test_run_benchmark_is_reproducible_with_harness_seed():
    first = run_benchmark(2, seed=9, lengths=(5, 5))
    second = run_benchmark(2, seed=9, lengths=(5, 5))

    assert [run.seed for run in first] == [run.seed for run in second]
    assert [run.diameter for run in first] == [run.diameter for run in second]


def test_diameter_skipped_above_cell_limit():
    runs = run_benchmark(1, seed=3, lengths=(6, 6), diameter_cell_limit=10)

    assert runs[0].diameter is None
    assert summarize_runs(runs)["diameter"] == {}


def test_build_walk_graph_includes_isolated_cells():
    maze = Maze((3, 2), [((0, 0), (1, 0))])

    graph = build_walk_graph(maze)

    assert graph.number_of_nodes() == 6
    assert graph.number_of_edges() == 1
    assert not nx.is_tree(graph)


def test_summarize_reports_median_and_p90():
    summary = summarize([float(value) for value in range(11)])

    assert summary["mean"] == pytest.approx(5.0)
    assert summary["min"] == 0.0
    assert summary["max"] == 10.0
    assert summary["p50"] == pytest.approx(5.0)
    assert summary["p90"] == pytest.approx(9.0)


def test_summarize_single_and_empty_values():
    assert summarize([]) == {}
    assert summarize([2.5]) == {"mean": 2.5, "min": 2.5, "max": 2.5, "p50": 2.5, "p90": 2.5}


def test_main_prints_runs_and_summary(capsys):
    main(["-n", "2", "--seed", "4", "--lengths", "4", "3"])

    out = capsys.readouterr().out
    assert "Run 01:" in out
    assert "Run 02:" in out
    assert "NOT A TREE" not in out
    assert "2 mazes of 4x3, 0 not spanning trees" in out
    assert "Saved benchmark results" not in out


def test_main_writes_json_report(tmp_path):
    output = tmp_path / "reports" / "bench.json"

    main(["-n", "2", "--seed", "4", "--lengths", "3", "3", "--output", str(output)])

    report = json.loads(output.read_text(encoding="utf-8"))
    assert report["lengths"] == [3, 3]
    assert len(report["runs"]) == 2
    assert all(run["is_tree"] for run in report["runs"])
    assert set(report["summary"]) == {
        "duration",
        "dead_end_fraction",
        "junction_fraction",
        "rejected_cycles",
        "diameter",
    }


@pytest.mark.parametrize("argv", [["--lengths", "0"], ["-n", "0"]])
def test_main_rejects_invalid_arguments(argv):
    with pytest.raises(SystemExit):
        main(argv)
