#!/usr/bin/env python3
"""Pick the optimal cluster count from a table of BIC scores."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd

from bic_knee_analysis import config
from bic_knee_analysis.core_utils.data_utils import (
    extract_score_series,
    orient_scores,
    select_cluster_window,
)
from bic_knee_analysis.knee import log_advisories, normalize_bic
from bic_knee_analysis.plot.normalized_bic_plot import plot_normalized_bic


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Detect the knee of a BIC curve and report the optimal cluster count."
    )
    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="CSV/TSV file with one row per clustering solution.",
    )
    parser.add_argument(
        "--sep",
        default=",",
        help="Column separator of the input file (use '\\t' for TSV).",
    )
    parser.add_argument(
        "--score-column",
        default="bic",
        help="Column holding the criterion score.",
    )
    parser.add_argument(
        "--cluster-column",
        default="n_clusters",
        help="Column holding the number of clusters.",
    )
    parser.add_argument(
        "--trend-mode",
        default=config.DEFAULT_TREND_MODE,
        choices=["auto", "sum", "diff"],
        help="How C1 and C2 are combined: follow the trend, or force a rule.",
    )
    parser.add_argument(
        "--lower-is-better",
        action="store_true",
        help="Negate scores first (e.g. scikit-learn's GaussianMixture.bic).",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Order rows by cluster count before the analysis.",
    )
    parser.add_argument(
        "--min-clusters",
        type=float,
        default=None,
        help="Ignore solutions with fewer clusters.",
    )
    parser.add_argument(
        "--max-clusters",
        type=float,
        default=None,
        help="Ignore solutions with more clusters.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Write curves.csv, summary.json and normalized_bic.png here.",
    )
    return parser


def _load_table(path: Path, sep: str) -> pd.DataFrame:
    sep = "\t" if sep in ("\\t", "tab") else sep
    table = pd.read_csv(path, sep=sep)
    if table.empty:
        raise ValueError(f"Input table is empty: {path}")
    return table


def main(argv: list[str] | None = None) -> dict:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    input_path = args.input
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    table = _load_table(input_path, args.sep)
    scores, counts = extract_score_series(
        table,
        score_column=args.score_column,
        cluster_column=args.cluster_column,
        sort=args.sort,
    )
    scores = orient_scores(scores, lower_is_better=args.lower_is_better)
    if args.min_clusters is not None or args.max_clusters is not None:
        scores, counts = select_cluster_window(
            scores, counts, min_clusters=args.min_clusters, max_clusters=args.max_clusters
        )

    result = normalize_bic(scores, counts, trend_mode=args.trend_mode)
    log_advisories(result.advisories)

    summary = result.summary()
    summary["input_path"] = str(input_path)
    summary["n_solutions"] = int(counts.size)

    if args.output_dir is not None:
        output_dir = args.output_dir
        output_dir.mkdir(parents=True, exist_ok=True)
        curves_path = output_dir / "curves.csv"
        summary_path = output_dir / "summary.json"
        figure_path = output_dir / "normalized_bic.png"

        result.to_frame().to_csv(curves_path, index=False)
        summary["output_files"] = {
            "curves_csv": str(curves_path),
            "summary_json": str(summary_path),
            "figure_png": str(figure_path),
        }
        summary_path.write_text(json.dumps(summary, indent=2), encoding="utf-8")

        fig, _ = plot_normalized_bic(result)
        fig.tight_layout()
        fig.savefig(figure_path, dpi=150)
        plt.close(fig)

    knee = summary["knee_cluster_count"]
    print("Analysis complete")
    print(f"  input:           {input_path}")
    print(f"  solutions:       {counts.size}")
    print(f"  trend:           {summary['trend']} (r = {summary['correlation']:.4f})")
    print(f"  rule:            {summary['combination_rule']}")
    print(f"  knee clusters:   {knee if knee is not None else 'not detected'}")
    print(f"  optimal k:       {summary['optimal_cluster_count']}")
    if args.output_dir is not None:
        print(f"  output_dir:      {args.output_dir}")
    return summary


if __name__ == "__main__":
    main()
