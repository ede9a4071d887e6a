"""
Central configuration for the BIC knee analysis library.
"""

# --- Trend Parameters ---

# Default rule for combining C1 and C2 into the diff curve.
# Options:
#   "auto": follow the sign of the correlation between scores and position
#   "sum": always add the two normalized curves
#   "diff": always take the absolute difference of the two normalized curves
DEFAULT_TREND_MODE: str = "auto"

# Trend assigned when the correlation between scores and position is 0
# in "auto" mode. Options: "decreasing", "increasing", or None to raise
# AmbiguousTrendError and make the caller choose a mode explicitly.
ZERO_CORRELATION_TREND: str | None = "decreasing"

# Correlation coefficients with |r| at or below this value count as r = 0.
ZERO_CORRELATION_ATOL: float = 1e-12

# --- Input Parameters ---

# Minimum number of clustering solutions accepted by the pipeline.
# Two points are the least that can span a normalization range.
MIN_SOLUTIONS: int = 2
