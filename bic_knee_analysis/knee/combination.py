"""Combination of the two normalized curves into the diff curve."""

from __future__ import annotations

import numpy as np

from ..core_utils.validation import require_same_length
from ..trend.classification import (
    CombinationRule,
    TrendDirection,
    TrendMode,
    resolve_combination_rule,
)


def combine_curves(
    c1, c2, rule: CombinationRule | TrendDirection
) -> np.ndarray:
    """
    Merge C1 and C2 into a single curve in the same range as C1.

    Parameters
    ----------
    c1 : array-like
        Normalized score curve.
    c2 : array-like
        Normalized cluster-weighted curve.
    rule : CombinationRule or TrendDirection
        ``SUM`` gives ``(c1 + c2) / 2``; ``ABSOLUTE_DIFFERENCE`` gives
        ``|c1 - c2| / 2``. A trend direction is mapped to its rule first.

    Returns
    -------
    np.ndarray
        The diff curve.

    Raises
    ------
    ValueError
        If the curves are not index-aligned.
    """
    a = np.asarray(c1, dtype=np.float64)
    b = np.asarray(c2, dtype=np.float64)
    require_same_length(a, b, ("c1", "c2"))

    if isinstance(rule, TrendDirection):
        rule = resolve_combination_rule(TrendMode.AUTO, rule)
    rule = CombinationRule(rule)

    if rule is CombinationRule.SUM:
        return (a + b) / 2.0
    return np.abs(a - b) / 2.0


__all__ = ["combine_curves"]
