"""Tests for the benchmark runner and the results plotter."""

import json

import matplotlib
matplotlib.use("Agg")

import pytest

from search_core.benchmarks import plot_results, run_all


class TestRunAll:

    @pytest.mark.parametrize("problem,cost", [("romania", 418.0), ("grid", 10.0)])
    def test_runs_both_algorithms(self, tmp_path, problem, cost):
        out_path = tmp_path / "results.json"
        out = run_all.main(["--problem", problem, "--out", str(out_path)])

        assert [r["algo"] for r in out["results"]] == ["UCS", "RBFS"]
        assert all(r["success"] for r in out["results"])
        assert all(r["cost"] == cost for r in out["results"])
        assert json.loads(out_path.read_text())["problem"] == problem

    def test_expansion_budget_reported_as_failure(self, tmp_path):
        out = run_all.main(["--max-expansions", "1", "--no-check", "--out", str(tmp_path / "r.json")])
        for row in out["results"]:
            assert not row["success"]
            assert row["error"] == "expansion limit reached"
            assert row["cost"] is None

    def test_unknown_problem(self):
        with pytest.raises(SystemExit):
            run_all.main(["--problem", "nope"])

    def test_broken_algorithm_is_recorded(self):
        def broken(problem):
            raise ValueError("bad problem")

        rows = run_all.run(object(), [("Broken", broken)])
        assert rows[0]["success"] is False
        assert "bad problem" in rows[0]["error"]


class TestPlotResults:

    def test_writes_table_and_charts(self, tmp_path):
        results = tmp_path / "results.json"
        run_all.main(["--problem", "grid", "--out", str(results)])

        written = plot_results.main(["--results", str(results), "--out-dir", str(tmp_path / "plots")])

        names = sorted(p.name for p in written)
        assert names == ["cost.png", "nodes_expanded.png", "peak_kb.png", "results.md", "time.png"]
        assert all(p.stat().st_size > 0 for p in written)
        table = (tmp_path / "plots" / "results.md").read_text()
        assert "| UCS |" in table and "| RBFS |" in table

    def test_no_successful_rows(self, tmp_path):
        results = tmp_path / "results.json"
        results.write_text(json.dumps({"results": [{"algo": "UCS", "success": False}]}))
        with pytest.raises(SystemExit):
            plot_results.main(["--results", str(results)])

    def test_missing_results(self, tmp_path):
        with pytest.raises(SystemExit):
            plot_results.main(["--results", str(tmp_path / "absent.json")])
