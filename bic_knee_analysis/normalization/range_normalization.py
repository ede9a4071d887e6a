"""Rescaling of score curves into the range spanned by the cluster counts."""

from __future__ import annotations

import numpy as np

from ..errors import DegenerateRangeError


def normalize_to_range(values, target_min: float, target_max: float) -> np.ndarray:
    """
    Map ``values`` affinely onto the width of ``[target_min, target_max]``.

    Each element ``v`` becomes
    ``(target_max - target_min) * (v - min(values)) / (max(values) - min(values))``.

    Parameters
    ----------
    values : array-like
        Values to rescale.
    target_min, target_max : float
        Bounds of the target range.

    Returns
    -------
    np.ndarray
        Rescaled values in ``[0, target_max - target_min]``.

    Raises
    ------
    ValueError
        If ``values`` is empty.
    DegenerateRangeError
        If all values are equal or the target range has zero width.

    Notes
    -----
    The target lower bound is not added back, so the output starts at 0 rather
    than at ``target_min``. Knee location compares curves produced this way,
    so the offset must stay out.

    Examples
    --------
    >>> normalize_to_range([10.0, 15.0, 20.0], 2, 6)
    array([0., 2., 4.])
    """
    v = np.asarray(values, dtype=np.float64)
    if v.size == 0:
        raise ValueError("Cannot normalize an empty sequence.")

    v_min = float(np.min(v))
    v_max = float(np.max(v))
    if v_max == v_min:
        raise DegenerateRangeError(
            f"Cannot normalize a flat sequence: all values equal {v_min!r}."
        )

    width = float(target_max) - float(target_min)
    if width == 0:
        raise DegenerateRangeError(
            f"Target range is degenerate: min and max both equal {float(target_min)!r}."
        )

    return width * (v - v_min) / (v_max - v_min)


def normalize_to_cluster_range(values, n_clusters) -> np.ndarray:
    """Normalize ``values`` into the range of the cluster counts.

    Raises
    ------
    DegenerateRangeError
        If the cluster counts hold a single distinct value or ``values`` is flat.
    """
    counts = np.asarray(n_clusters, dtype=np.float64)
    if counts.size == 0:
        raise ValueError("Cluster counts must not be empty.")
    lo, hi = float(np.min(counts)), float(np.max(counts))
    if lo == hi:
        raise DegenerateRangeError(
            f"Cluster counts span no range: every solution has {lo:g} clusters."
        )
    return normalize_to_range(values, lo, hi)


__all__ = ["normalize_to_range", "normalize_to_cluster_range"]
