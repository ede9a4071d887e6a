from __future__ import annotations

import numpy as np

from bic_knee_analysis import config


def as_float_vector(values, name: str) -> np.ndarray:
    """Copy ``values`` into a finite 1-D float64 array.

    Parameters
    ----------
    values
        Array-like of numbers.
    name
        Name used in error messages.

    Returns
    -------
    np.ndarray
        A new float64 array; the caller's object is never referenced.

    Raises
    ------
    ValueError
        If the input is not one-dimensional or contains NaN/inf.
    """
    arr = np.array(values, dtype=np.float64, copy=True)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional. Got ndim={arr.ndim}.")
    if not np.all(np.isfinite(arr)):
        bad = np.flatnonzero(~np.isfinite(arr))
        preview = ", ".join(str(i) for i in bad[:5])
        raise ValueError(f"{name} contains non-finite values at positions: {preview}.")
    return arr


def as_aligned_series(
    bic, n_clusters, min_length: int | None = None
) -> tuple[np.ndarray, np.ndarray]:
    """Validate a score series and its cluster counts as index-aligned vectors.

    Parameters
    ----------
    bic
        Criterion score for each clustering solution.
    n_clusters
        Number of clusters of each clustering solution.
    min_length
        Minimum number of solutions. Defaults to ``config.MIN_SOLUTIONS``.

    Returns
    -------
    tuple[np.ndarray, np.ndarray]
        ``(scores, cluster_counts)`` as fresh float64 arrays.

    Raises
    ------
    ValueError
        If the inputs differ in length, are too short, or are not finite.
    """
    if min_length is None:
        min_length = config.MIN_SOLUTIONS

    scores = as_float_vector(bic, "bic")
    counts = as_float_vector(n_clusters, "n_clusters")

    if scores.size != counts.size:
        raise ValueError(
            "bic and n_clusters must have the same length. "
            f"Got {scores.size} and {counts.size}."
        )
    if scores.size < min_length:
        raise ValueError(
            f"At least {min_length} clustering solutions are required. "
            f"Got {scores.size}."
        )
    return scores, counts


def require_same_length(a: np.ndarray, b: np.ndarray, names: tuple[str, str]) -> None:
    """Raise ``ValueError`` when two curves are not index-aligned."""
    if a.shape != b.shape:
        raise ValueError(
            f"{names[0]} and {names[1]} must have the same shape. "
            f"Got {a.shape} and {b.shape}."
        )
