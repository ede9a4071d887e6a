"""Trend detection for score curves."""

from .correlation import trend_correlation
from .classification import (
    CombinationRule,
    TrendDirection,
    TrendMode,
    classify_trend,
    coerce_trend_mode,
    resolve_combination_rule,
    trend_from_correlation,
)

__all__ = [
    "trend_correlation",
    "CombinationRule",
    "TrendDirection",
    "TrendMode",
    "classify_trend",
    "coerce_trend_mode",
    "resolve_combination_rule",
    "trend_from_correlation",
]
