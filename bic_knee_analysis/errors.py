"""Exceptions raised by the BIC knee analysis pipeline."""

from __future__ import annotations


class DegenerateRangeError(ValueError):
    """A normalization denominator (``max - min``) is zero."""


class ClusterCountDivisionError(ZeroDivisionError):
    """A cluster count of zero was passed to the weighting stage."""


class AmbiguousTrendError(ValueError):
    """The global trend cannot be decided from the correlation coefficient."""


__all__ = [
    "DegenerateRangeError",
    "ClusterCountDivisionError",
    "AmbiguousTrendError",
]
