import importlib.util
import json
from pathlib import Path

import pandas as pd


def _load_script():
    path = Path(__file__).resolve().parents[1] / "scripts" / "select_cluster_count.py"
    spec = importlib.util.spec_from_file_location("select_cluster_count", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


main = _load_script().main


def _write_table(path, bic) -> None:
    pd.DataFrame({"n_clusters": list(range(1, 8)), "bic": bic}).to_csv(path, index=False)


def test_script_reports_optimal_count_and_writes_outputs(tmp_path, capsys) -> None:
    input_path = tmp_path / "bic.csv"
    _write_table(input_path, [-100, -80, -60, -50, -48, -47, -46.5])
    output_dir = tmp_path / "out"

    summary = main(["--input", str(input_path), "--output-dir", str(output_dir)])

    assert summary["optimal_cluster_count"] == 4
    assert summary["knee_cluster_count"] == 5
    assert (output_dir / "curves.csv").exists()
    assert (output_dir / "normalized_bic.png").exists()
    saved = json.loads((output_dir / "summary.json").read_text(encoding="utf-8"))
    assert saved["optimal_cluster_count"] == 4

    curves = pd.read_csv(output_dir / "curves.csv")
    assert len(curves) == 7
    assert "optimal k:       4" in capsys.readouterr().out


def test_script_negates_lower_is_better_scores(tmp_path) -> None:
    input_path = tmp_path / "bic.tsv"
    pd.DataFrame(
        {"k": list(range(1, 8)), "score": [100, 80, 60, 50, 48, 47, 46.5]}
    ).to_csv(input_path, sep="\t", index=False)

    summary = main(
        [
            "--input",
            str(input_path),
            "--sep",
            "\\t",
            "--score-column",
            "score",
            "--cluster-column",
            "k",
            "--lower-is-better",
        ]
    )

    assert summary["trend"] == "increasing"
    assert summary["optimal_cluster_count"] == 4


def test_script_applies_cluster_window(tmp_path) -> None:
    input_path = tmp_path / "bic.csv"
    _write_table(input_path, [-100, -80, -60, -50, -48, -47, -46.5])

    summary = main(["--input", str(input_path), "--max-clusters", "5"])

    assert summary["n_solutions"] == 5
