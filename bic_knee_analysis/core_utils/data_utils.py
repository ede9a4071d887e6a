from __future__ import annotations

import numpy as np
import pandas as pd

from .validation import as_aligned_series


def extract_column(df: pd.DataFrame, column_name: str) -> np.ndarray:
    """Extract a numeric column as a float64 array.

    Raises
    ------
    TypeError
        If ``df`` is not a DataFrame.
    ValueError
        If the DataFrame is empty or the column holds missing values.
    KeyError
        If the column is missing.
    """
    if not isinstance(df, pd.DataFrame):
        raise TypeError(f"Expected a pandas DataFrame for {column_name!r} extraction.")
    if df.empty:
        raise ValueError(f"Empty DataFrame; missing required column {column_name!r}.")
    if column_name not in df.columns:
        raise KeyError(f"Missing required column {column_name!r} in dataframe.")

    values = pd.to_numeric(df[column_name], errors="coerce").to_numpy(dtype=float)
    if np.isnan(values).any():
        missing = [str(idx) for idx, v in zip(df.index, values) if np.isnan(v)]
        preview = ", ".join(missing[:5])
        raise ValueError(
            f"Column {column_name!r} has missing or non-numeric values at rows: {preview}."
        )
    return values


def extract_score_series(
    df: pd.DataFrame,
    score_column: str = "bic",
    cluster_column: str = "n_clusters",
    sort: bool = False,
) -> tuple[np.ndarray, np.ndarray]:
    """Extract an aligned (scores, cluster counts) pair from a results table.

    Parameters
    ----------
    df
        One row per clustering solution.
    score_column
        Column holding the criterion score.
    cluster_column
        Column holding the number of clusters.
    sort
        If True, rows are ordered by cluster count first (stable sort).
        Otherwise the table order is kept, since it defines the progression.

    Returns
    -------
    tuple[np.ndarray, np.ndarray]
        Scores and cluster counts as float64 arrays.
    """
    scores = extract_column(df, score_column)
    counts = extract_column(df, cluster_column)
    if sort:
        order = np.argsort(counts, kind="stable")
        scores, counts = scores[order], counts[order]
    return as_aligned_series(scores, counts)


def orient_scores(scores, lower_is_better: bool = False) -> np.ndarray:
    """Return scores oriented so that larger values are preferred.

    Criteria where a lower value is better (e.g. scikit-learn's
    ``GaussianMixture.bic``) are negated.
    """
    arr = np.asarray(scores, dtype=np.float64)
    return -arr if lower_is_better else arr.copy()


def select_cluster_window(
    scores,
    n_clusters,
    min_clusters: float | None = None,
    max_clusters: float | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """Restrict a series of clustering solutions to a cluster-count window.

    Useful when the score curve shows both increasing and decreasing trends,
    e.g. when overfitting starts after a clear point.

    Raises
    ------
    ValueError
        If the window is inverted or keeps fewer than two solutions.
    """
    scores, counts = as_aligned_series(scores, n_clusters)
    if (
        min_clusters is not None
        and max_clusters is not None
        and min_clusters > max_clusters
    ):
        raise ValueError(
            f"min_clusters ({min_clusters}) must not exceed max_clusters ({max_clusters})."
        )

    mask = np.ones(counts.size, dtype=bool)
    if min_clusters is not None:
        mask &= counts >= min_clusters
    if max_clusters is not None:
        mask &= counts <= max_clusters

    return as_aligned_series(scores[mask], counts[mask])
