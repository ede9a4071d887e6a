"""Weighting of a normalized curve by the number of clusters."""

from __future__ import annotations

import numpy as np

from ..core_utils.validation import require_same_length
from ..errors import ClusterCountDivisionError


def weight_by_cluster_count(c1, n_clusters) -> np.ndarray:
    """
    Divide a normalized curve element-wise by the cluster counts.

    The ratio between the normalized score and the number of clusters shows
    the global shape of the curve independent of the absolute score scale.

    Parameters
    ----------
    c1 : array-like
        Normalized score curve.
    n_clusters : array-like
        Cluster count for each element of ``c1``.

    Returns
    -------
    np.ndarray
        ``c1[i] / n_clusters[i]``, not clamped.

    Raises
    ------
    ValueError
        If the inputs are not index-aligned.
    ClusterCountDivisionError
        If any cluster count is zero.
    """
    curve = np.asarray(c1, dtype=np.float64)
    counts = np.asarray(n_clusters, dtype=np.float64)
    require_same_length(curve, counts, ("c1", "n_clusters"))

    zero = np.flatnonzero(counts == 0)
    if zero.size:
        positions = ", ".join(str(i) for i in zero[:5])
        raise ClusterCountDivisionError(
            f"Cluster count is zero at positions: {positions}."
        )

    return curve / counts


__all__ = ["weight_by_cluster_count"]
