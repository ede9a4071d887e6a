"""Knee location on the diff curve.

The diff curve starts on one side of C1 and, for a curve with a clear knee,
crosses to the other side where the score gain levels off. The first index
where the ordering flips is the knee; the best solution is the maximum of the
diff curve up to that index.

Only interior indices are scanned for the crossing. The first and last
elements can still be chosen as the optimum, since the argmax covers them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging

import numpy as np

from ..core_utils.validation import require_same_length

logger = logging.getLogger(__name__)


class SearchDirection(str, Enum):
    """Relation between the diff curve and C1 that marks the knee."""

    LESS_OR_EQUAL = "le"
    GREATER_OR_EQUAL = "ge"

    def is_satisfied(self, diff_value: float, c1_value: float) -> bool:
        if self is SearchDirection.LESS_OR_EQUAL:
            return diff_value <= c1_value
        return diff_value >= c1_value


@dataclass(frozen=True)
class KneeLocation:
    """Outcome of the knee search.

    Attributes
    ----------
    knee_index : int | None
        0-based index of the first crossing, or None when no crossing exists.
    optimal_index : int
        0-based index of the diff-curve maximum used as the optimum.
    optimal_value : float
        Diff-curve value at ``optimal_index``.
    search_direction : SearchDirection
        Relation that was searched for.
    """

    knee_index: int | None
    optimal_index: int
    optimal_value: float
    search_direction: SearchDirection

    @property
    def knee_detected(self) -> bool:
        return self.knee_index is not None


def initial_search_direction(c1: np.ndarray, diff_bic: np.ndarray) -> SearchDirection:
    """Direction implied by the ordering of the curves at their second element."""
    if diff_bic[1] > c1[1]:
        return SearchDirection.LESS_OR_EQUAL
    return SearchDirection.GREATER_OR_EQUAL


def find_crossing(
    c1: np.ndarray, diff_bic: np.ndarray, direction: SearchDirection
) -> int | None:
    """First interior index where ``direction`` holds, scanning left to right."""
    for idx in range(1, diff_bic.size - 1):
        if direction.is_satisfied(diff_bic[idx], c1[idx]):
            return idx
    return None


def locate_knee(c1, diff_bic) -> KneeLocation:
    """
    Locate the knee of the diff curve against C1.

    Parameters
    ----------
    c1 : array-like
        Normalized score curve.
    diff_bic : array-like
        Combined curve from :func:`combine_curves`.

    Returns
    -------
    KneeLocation
        When a crossing is found, the optimum is the argmax of
        ``diff_bic[:knee_index + 1]``; otherwise it is the argmax over the
        whole curve. Ties go to the first occurrence.

    Raises
    ------
    ValueError
        If the curves differ in length or hold fewer than two elements.
    """
    a = np.asarray(c1, dtype=np.float64)
    d = np.asarray(diff_bic, dtype=np.float64)
    require_same_length(a, d, ("c1", "diff_bic"))
    if d.ndim != 1 or d.size < 2:
        raise ValueError(
            f"Knee search needs 1-D curves with at least two points. Got shape {d.shape}."
        )

    direction = initial_search_direction(a, d)
    knee_index = find_crossing(a, d, direction)

    if knee_index is not None:
        window = d[: knee_index + 1]
    else:
        window = d
    optimal_index = int(np.argmax(window))

    logger.debug(
        "Knee search (%s): knee_index=%s optimal_index=%d",
        direction.value,
        knee_index,
        optimal_index,
    )
    return KneeLocation(
        knee_index=knee_index,
        optimal_index=optimal_index,
        optimal_value=float(d[optimal_index]),
        search_direction=direction,
    )


__all__ = [
    "SearchDirection",
    "KneeLocation",
    "initial_search_direction",
    "find_crossing",
    "locate_knee",
]
