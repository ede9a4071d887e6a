"""
Knee detection on model-selection curves.

This package provides:
- Combination of the normalized curves into the diff curve
- Location of the crossing between the diff curve and the normalized curve
- Advisory signals for unreliable or missing knees
- The end-to-end ``normalize_bic`` pipeline
"""

from .advisories import AdvisoryKind, KneeAdvisory, knee_advisories, log_advisories
from .combination import combine_curves
from .locator import KneeLocation, SearchDirection, locate_knee
from .normalized_bic import NormalizedBicResult, normalize_bic

__all__ = [
    "AdvisoryKind",
    "KneeAdvisory",
    "knee_advisories",
    "log_advisories",
    "combine_curves",
    "KneeLocation",
    "SearchDirection",
    "locate_knee",
    "NormalizedBicResult",
    "normalize_bic",
]
