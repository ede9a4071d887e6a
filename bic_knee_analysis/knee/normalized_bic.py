"""Knee point detection on a BIC curve.

The conventional choice of cluster count under BIC is the first decisive
local maximum of the curve. Clustering algorithms are noisy and can
overtrain, so that maximum is often misleading. A better estimate is the
knee: the solution that drives a large change in BIC after which the curve
plateaus, while still having a relatively good score.

The knee is accentuated following Zhao et al., "Knee Point Detection on
Bayesian Information Criterion" (ICTAI 2008):

1. normalize the scores into the range of the cluster counts (C1);
2. divide by the number of clusters (Cm);
3. normalize Cm into the same range (C2);
4. decide whether the raw curve increases or decreases globally;
5. combine C1 and C2 into the diff curve (sum when increasing, absolute
   difference when decreasing), halved to stay in the range of C1;
6. find where the diff curve crosses C1.

Scores must be oriented so that larger is better. The same procedure works
for other validation indices when they are oriented that way.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Dict, List

import numpy as np
import pandas as pd

from bic_knee_analysis import config
from ..core_utils.validation import as_aligned_series
from ..normalization import normalize_to_cluster_range, weight_by_cluster_count
from ..trend.classification import (
    CombinationRule,
    TrendDirection,
    TrendMode,
    classify_trend,
    coerce_trend_mode,
    resolve_combination_rule,
)
from .advisories import KneeAdvisory, knee_advisories
from .combination import combine_curves
from .locator import locate_knee

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizedBicResult:
    """All curves and decisions produced by :func:`normalize_bic`.

    Indices are 0-based positions in the input series.
    """

    n_clusters: np.ndarray
    bic: np.ndarray
    c1: np.ndarray
    cm: np.ndarray
    c2: np.ndarray
    diff_bic: np.ndarray
    correlation: float
    trend: TrendDirection
    trend_mode: TrendMode
    combination_rule: CombinationRule
    knee_index: int | None
    knee_cluster_count: float | None
    optimal_cluster_index: int
    optimal_cluster_count: float
    optimal_cluster_bic: float
    advisories: List[KneeAdvisory] = field(default_factory=list)

    @property
    def knee_detected(self) -> bool:
        return self.knee_index is not None

    def to_frame(self) -> pd.DataFrame:
        """Curves as a DataFrame with one row per clustering solution.

        The default RangeIndex matches the 0-based result indices; cluster
        counts are a column since they need not be unique.
        """
        frame = pd.DataFrame(
            {
                "n_clusters": self.n_clusters,
                "bic": self.bic,
                "c1": self.c1,
                "cm": self.cm,
                "c2": self.c2,
                "diff_bic": self.diff_bic,
            }
        )
        frame["is_knee"] = False
        frame["is_optimal"] = False
        if self.knee_index is not None:
            frame.loc[self.knee_index, "is_knee"] = True
        frame.loc[self.optimal_cluster_index, "is_optimal"] = True
        return frame

    def summary(self) -> Dict[str, Any]:
        """Flat, JSON-friendly description of the decision."""
        return {
            "optimal_cluster_count": _as_number(self.optimal_cluster_count),
            "optimal_cluster_index": int(self.optimal_cluster_index),
            "optimal_cluster_bic": float(self.optimal_cluster_bic),
            "knee_detected": self.knee_detected,
            "knee_index": self.knee_index,
            "knee_cluster_count": (
                None
                if self.knee_cluster_count is None
                else _as_number(self.knee_cluster_count)
            ),
            "correlation": float(self.correlation),
            "trend": self.trend.value,
            "trend_mode": self.trend_mode.value,
            "combination_rule": self.combination_rule.value,
            "advisories": [a.kind.value for a in self.advisories],
        }


def _as_number(value: float) -> int | float:
    v = float(value)
    return int(v) if v.is_integer() else v


def normalize_bic(
    bic,
    n_clusters,
    trend_mode: TrendMode | str = config.DEFAULT_TREND_MODE,
    zero_correlation_trend: str | None = config.ZERO_CORRELATION_TREND,
    zero_correlation_atol: float = config.ZERO_CORRELATION_ATOL,
) -> NormalizedBicResult:
    """
    Accentuate the knee of a BIC curve and pick the optimal cluster count.

    Parameters
    ----------
    bic : array-like
        Score of each clustering solution, larger is better.
    n_clusters : array-like
        Number of clusters of each solution, aligned with ``bic``.
    trend_mode : TrendMode or str, default=config.DEFAULT_TREND_MODE
        ``"auto"`` combines the curves according to the detected trend,
        ``"sum"`` always adds them, ``"diff"`` always takes the absolute
        difference. Use an explicit mode for criteria whose monotonicity
        convention differs from BIC.
    zero_correlation_trend : str or None
        Trend assumed in ``"auto"`` mode when the correlation is 0.
        ``None`` raises :class:`AmbiguousTrendError` instead.
    zero_correlation_atol : float, default=config.ZERO_CORRELATION_ATOL
        Correlations with ``|r|`` at or below this value count as 0.

    Returns
    -------
    NormalizedBicResult
        The four derived curves, the trend decision, the knee and the optimum.
        Boundary or missing knees are reported in ``advisories``.

    Raises
    ------
    ValueError
        If the inputs are misaligned, too short, or not finite.
    DegenerateRangeError
        If the scores, the cluster counts or the weighted curve are flat.
    ClusterCountDivisionError
        If a cluster count is zero.
    AmbiguousTrendError
        If ``"auto"`` mode meets a zero correlation with no fallback.

    Examples
    --------
    >>> result = normalize_bic([-100, -80, -60, -50, -48, -47, -46.5], range(1, 8))
    >>> result.optimal_cluster_count, result.knee_cluster_count
    (4.0, 5.0)
    """
    mode = coerce_trend_mode(trend_mode)
    scores, counts = as_aligned_series(bic, n_clusters)

    c1 = normalize_to_cluster_range(scores, counts)
    cm = weight_by_cluster_count(c1, counts)
    c2 = normalize_to_cluster_range(cm, counts)

    if mode is TrendMode.AUTO:
        trend, r = classify_trend(
            scores, zero_correlation_trend, zero_correlation_atol
        )
    else:
        # The rule is forced; the trend still labels the result.
        trend, r = classify_trend(
            scores, zero_correlation_trend or "decreasing", zero_correlation_atol
        )
    rule = resolve_combination_rule(mode, trend)
    diff_bic = combine_curves(c1, c2, rule)

    logger.debug(
        "BIC trend %s (r=%.4f, mode=%s) -> %s rule",
        trend.value,
        r,
        mode.value,
        rule.value,
    )

    location = locate_knee(c1, diff_bic)
    knee_index = location.knee_index
    knee_cluster_count = None if knee_index is None else float(counts[knee_index])

    return NormalizedBicResult(
        n_clusters=counts,
        bic=scores,
        c1=c1,
        cm=cm,
        c2=c2,
        diff_bic=diff_bic,
        correlation=r,
        trend=trend,
        trend_mode=mode,
        combination_rule=rule,
        knee_index=knee_index,
        knee_cluster_count=knee_cluster_count,
        optimal_cluster_index=location.optimal_index,
        optimal_cluster_count=float(counts[location.optimal_index]),
        optimal_cluster_bic=location.optimal_value,
        advisories=knee_advisories(knee_index, counts.size),
    )


__all__ = ["NormalizedBicResult", "normalize_bic"]
