"""Global trend of a score curve and the combination rule it implies.

A BIC curve can rise or fall globally over the tried cluster counts. The
direction decides how the two normalized curves are merged:

- increasing trend: the best point maximizes combined evidence, so the
  curves are summed;
- decreasing trend: the best point is where the curves diverge most, so the
  absolute difference is taken.

``TrendMode`` lets the caller bypass the correlation and pick a rule directly.
"""

from __future__ import annotations

from enum import Enum
import math
from typing import Tuple

from bic_knee_analysis import config
from ..errors import AmbiguousTrendError
from .correlation import trend_correlation


class TrendDirection(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"


class TrendMode(str, Enum):
    """How the combination rule is chosen."""

    AUTO = "auto"
    FORCE_SUM = "sum"
    FORCE_ABS_DIFF = "diff"


class CombinationRule(str, Enum):
    SUM = "sum"
    ABSOLUTE_DIFFERENCE = "absolute_difference"


_MODE_ALIASES = {
    "auto": TrendMode.AUTO,
    "sum": TrendMode.FORCE_SUM,
    "force_sum": TrendMode.FORCE_SUM,
    "diff": TrendMode.FORCE_ABS_DIFF,
    "abs_diff": TrendMode.FORCE_ABS_DIFF,
    "force_abs_diff": TrendMode.FORCE_ABS_DIFF,
}


def coerce_trend_mode(value: TrendMode | str) -> TrendMode:
    """Resolve a ``TrendMode`` from an enum member or one of its string names.

    Raises
    ------
    ValueError
        If ``value`` names no known mode.
    """
    if isinstance(value, TrendMode):
        return value
    key = str(value).strip().lower()
    if key in _MODE_ALIASES:
        return _MODE_ALIASES[key]
    raise ValueError(
        f"Unknown trend mode: {value!r}. "
        f"Expected a TrendMode or one of: {', '.join(sorted(_MODE_ALIASES))}"
    )


def trend_from_correlation(
    r: float,
    zero_correlation_trend: str | None = config.ZERO_CORRELATION_TREND,
    atol: float = config.ZERO_CORRELATION_ATOL,
) -> TrendDirection:
    """Map a correlation coefficient to a trend direction.

    Parameters
    ----------
    r
        Correlation between scores and their position in the series.
    zero_correlation_trend
        Direction used when ``|r| <= atol``. ``None`` makes a zero correlation
        an error.
    atol
        Coefficients this close to 0 count as no trend. A curve that is
        symmetric about its midpoint has r = 0 mathematically, but
        ``pearsonr`` returns rounding noise of either sign.

    Raises
    ------
    AmbiguousTrendError
        If ``r`` is not finite, or is zero and no fallback direction is set.
    """
    if not math.isfinite(r):
        raise AmbiguousTrendError(f"Correlation coefficient is not finite: {r!r}.")
    if abs(r) > atol:
        return TrendDirection.INCREASING if r > 0 else TrendDirection.DECREASING
    if zero_correlation_trend is None:
        raise AmbiguousTrendError(
            f"Scores show no linear trend (r = {r:.3g}); pass trend_mode='sum' or "
            "trend_mode='diff' to choose the combination rule explicitly."
        )
    return TrendDirection(zero_correlation_trend)


def classify_trend(
    scores,
    zero_correlation_trend: str | None = config.ZERO_CORRELATION_TREND,
    atol: float = config.ZERO_CORRELATION_ATOL,
) -> Tuple[TrendDirection, float]:
    """Classify the global trend of ``scores``.

    Returns
    -------
    (trend, r)
        The detected direction and the correlation coefficient it is based on.
    """
    r = trend_correlation(scores)
    return trend_from_correlation(r, zero_correlation_trend, atol), r


def resolve_combination_rule(
    trend_mode: TrendMode | str, trend: TrendDirection
) -> CombinationRule:
    """Pick the rule used to merge the normalized curves."""
    mode = coerce_trend_mode(trend_mode)
    if mode is TrendMode.FORCE_SUM:
        return CombinationRule.SUM
    if mode is TrendMode.FORCE_ABS_DIFF:
        return CombinationRule.ABSOLUTE_DIFFERENCE
    if TrendDirection(trend) is TrendDirection.INCREASING:
        return CombinationRule.SUM
    return CombinationRule.ABSOLUTE_DIFFERENCE


__all__ = [
    "TrendDirection",
    "TrendMode",
    "CombinationRule",
    "coerce_trend_mode",
    "trend_from_correlation",
    "classify_trend",
    "resolve_combination_rule",
]
