import pandas as pd
import pytest

import main as main_module
from graph_generators.two_cliques import generate_two_cliques
from instance_reader import write_col_instance
from main import main


def test_runs_built_in_example(capsys):
    results = main(["--seed", "1", "--repetitions", "300"])
    out = capsys.readouterr().out

    assert "|V| = 8, |E| = 14" in out
    assert out.count("Best minimum cut's size found: 2") == 2
    assert "{ 0 1 2 3 } { 4 5 6 7 }" in out
    assert set(results) == {'karger', 'karger-stein'}


def test_runs_single_algorithm_on_instance(tmp_path, capsys):
    path = tmp_path / "cliques.col"
    write_col_instance(generate_two_cliques(4, bridges=[(1, 4), (3, 4), (2, 6)]), str(path))

    results = main([str(path), "--algorithm", "karger", "--seed", "4", "--repetitions", "300"])
    out = capsys.readouterr().out

    assert list(results) == ['karger']
    assert results['karger'].cut_size == 3
    assert "Karger-Stein" not in out


def test_disconnected_instance_is_rejected(tmp_path):
    path = tmp_path / "split.col"
    path.write_text("p edge 4 2\ne 1 2\ne 3 4\n")
    with pytest.raises(ValueError, match="connected"):
        main([str(path)])


def test_missing_instance(tmp_path):
    with pytest.raises(FileNotFoundError):
        main([str(tmp_path / "missing.col")])


def test_benchmark_writes_csv_and_figures(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(main_module, "N_VALUES", [6, 8])
    monkeypatch.setattr(main_module, "TRIALS", 1)
    csv_path = tmp_path / "results.csv"
    plots_dir = tmp_path / "figs"

    df = main(["--benchmark", "--seed", "2", "--csv", str(csv_path), "--plots", str(plots_dir)])

    assert csv_path.exists()
    saved = pd.read_csv(csv_path)
    assert len(saved) == len(df) == 2 * 2 * 2
    assert set(saved['model']) == {'ER', 'BA'}
    assert list(plots_dir.glob("*.png"))
    assert "Figures saved to" in capsys.readouterr().out
