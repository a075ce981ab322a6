import csv
import io

import pandas as pd
import pytest

from astar_tiles.experiments import analyze, plot, runner, solve, visualize_path


def test_solve_from_arguments(capsys):
    rc = solve.main(["--start", "1 2 3 4 0 6 7 5 8"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Best Path" in out
    assert "Moves: 2" in out
    assert "Number of nodes generated: 8" in out
    assert "Number of nodes expanded: 3" in out


def test_solve_reads_both_boards_from_stdin(capsys):
    stdin = io.StringIO("1 2 3\n4 0 6\n7 5 8\n\n1 2 3\n4 5 6\n7 8 0\n")
    rc = solve.main(["--heuristic", "misplaced"], stdin=stdin)
    out = capsys.readouterr().out
    assert rc == 0
    assert out.count("7 8 0") == 1
    assert "Moves: 2" in out


def test_solve_goal_flag_with_stdin_start(capsys):
    stdin = io.StringIO("1 2 3 0")
    rc = solve.main(["--n", "2", "--goal", "1 2 0 3"], stdin=stdin)
    assert rc == 0
    assert "Moves: 1" in capsys.readouterr().out


def test_solve_reports_unsolvable(capsys):
    rc = solve.main(["--n", "2", "--start", "2 1 3 0"])
    out = capsys.readouterr().out
    assert rc == 1
    assert "No solution found (exhausted)" in out
    assert "Number of nodes expanded: 12" in out


def test_solve_rejects_bad_grid(capsys):
    with pytest.raises(SystemExit) as exc:
        solve.main(["--start", "1 2 3 4 5 6 7 8 8"])
    assert exc.value.code == 2
    assert "permutation" in capsys.readouterr().err


def test_solve_rejects_short_stdin():
    with pytest.raises(SystemExit) as exc:
        solve.main([], stdin=io.StringIO("1 2 3"))
    assert exc.value.code == 2


def test_generate_instances_are_solvable():
    dom = runner.NPuzzle(3)
    insts = runner.generate_instances(dom, [2, 6], per_depth=3)
    assert [i.depth for i in insts] == [2, 2, 2, 6, 6, 6]
    assert all(dom.is_solvable(i.state) for i in insts)


@pytest.fixture
def results_csv(tmp_path):
    out = tmp_path / "p8.csv"
    rc = runner.main(["--depths", "2", "6", "--per_depth", "3", "--include_unsolvable",
                      "--out", str(out)])
    assert rc == 0
    return out


def test_runner_writes_one_row_per_run(results_csv):
    with results_csv.open(newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2 * 3 * 2 * 2
    assert set(rows[0]) == set(runner.HEADER)
    solved = [r for r in rows if r["solvable"] == "1"]
    assert {r["termination"] for r in solved} == {"ok"}
    assert {r["heuristic"] for r in solved} == {"misplaced", "manhattan"}
    assert all(int(r["g"]) <= int(r["depth"]) for r in solved)
    assert {r["termination"] for r in rows if r["solvable"] == "0"} == {"unsolvable"}


def test_analyze_summary_and_ratios(results_csv, tmp_path, capsys):
    df = analyze.load_results([results_csv])
    assert set(df["termination"]) == {"ok"}
    summary = analyze.summarize(df)
    assert set(summary["heuristic"]) == {"misplaced", "manhattan"}
    assert set(summary["runs"]) == {3}
    ratios = analyze.ratio_table(summary)
    assert list(ratios["depth"]) == [2, 6]
    assert (ratios["ratio"] > 0).all()

    out = tmp_path / "summary.csv"
    assert analyze.main([str(results_csv), "--out", str(out)]) == 0
    assert "Expanded ratio" in capsys.readouterr().out
    assert len(pd.read_csv(out)) == 4


def test_analyze_handles_empty_input(tmp_path, capsys):
    empty = tmp_path / "empty.csv"
    empty.write_text(",".join(runner.HEADER) + "\n")
    assert analyze.main([str(empty)]) == 0
    assert "No solved rows" in capsys.readouterr().out


def test_plot_saves_pngs(results_csv, tmp_path):
    saved = plot.make_plots([results_csv], tmp_path / "plots", log_y=True)
    assert len(saved) == 4
    assert all(p.exists() and p.stat().st_size > 0 for p in saved)


def test_visualize_path_frames(tmp_path, capsys):
    rc = visualize_path.main(["--start", "1 2 3 4 0 6 7 5 8", "--outdir", str(tmp_path)])
    assert rc == 0
    assert sorted(p.name for p in tmp_path.glob("*.png")) == [
        "step_000.png", "step_001.png", "step_002.png"]
