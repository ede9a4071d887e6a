"""Linear correlation between a score curve and its position in the series."""

from __future__ import annotations

import numpy as np
from scipy.stats import pearsonr

from ..errors import DegenerateRangeError


def trend_correlation(scores) -> float:
    """
    Pearson correlation between ``scores`` and the positions ``1..N``.

    Parameters
    ----------
    scores : array-like
        Score of each clustering solution, in series order.

    Returns
    -------
    float
        Correlation coefficient in ``[-1, 1]``.

    Raises
    ------
    ValueError
        If fewer than two scores are given.
    DegenerateRangeError
        If all scores are equal (the coefficient is undefined).
    """
    s = np.asarray(scores, dtype=np.float64).ravel()
    if s.size < 2:
        raise ValueError(f"At least two scores are required. Got {s.size}.")
    if np.all(s == s[0]):
        raise DegenerateRangeError(
            "Correlation is undefined for a flat score curve."
        )

    positions = np.arange(1, s.size + 1, dtype=np.float64)
    r, _ = pearsonr(s, positions)
    return float(r)


__all__ = ["trend_correlation"]
