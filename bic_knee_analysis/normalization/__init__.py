"""Normalization stages applied to score curves."""

from .range_normalization import normalize_to_range, normalize_to_cluster_range
from .cluster_weighting import weight_by_cluster_count

__all__ = [
    "normalize_to_range",
    "normalize_to_cluster_range",
    "weight_by_cluster_count",
]
