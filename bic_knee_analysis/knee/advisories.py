"""Advisory signals raised alongside a knee result.

These never change the numeric result. The pipeline only collects them;
rendering is left to :func:`log_advisories` or to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from typing import Iterable, List


def _default_logger() -> logging.Logger:
    return logging.getLogger(__name__)


class AdvisoryKind(str, Enum):
    BOUNDARY_KNEE = "boundary_knee"
    NO_KNEE_DETECTED = "no_knee_detected"


@dataclass(frozen=True)
class KneeAdvisory:
    kind: AdvisoryKind
    message: str
    knee_index: int | None = None


BOUNDARY_KNEE_MESSAGE = (
    "The knee point was either the first or last clustering solution. "
    "This could be wrong; inspect the curves more closely."
)

NO_KNEE_MESSAGE = (
    "No knee detected; the optimal cluster count is set to the largest "
    "combined value, but the smallest value might make more sense."
)

NO_KNEE_HINT = (
    "Try restricting the analysis to a subset of clustering solutions, "
    "especially if the curve shows both increasing and decreasing trends "
    "(e.g. a clear point after which overfitting starts)."
)


def knee_advisories(knee_index: int | None, n_solutions: int) -> List[KneeAdvisory]:
    """Advisories for a knee search over ``n_solutions`` points."""
    if knee_index is None:
        return [
            KneeAdvisory(
                kind=AdvisoryKind.NO_KNEE_DETECTED,
                message=f"{NO_KNEE_MESSAGE} {NO_KNEE_HINT}",
            )
        ]
    if knee_index == 0 or knee_index == n_solutions - 1:
        return [
            KneeAdvisory(
                kind=AdvisoryKind.BOUNDARY_KNEE,
                message=BOUNDARY_KNEE_MESSAGE,
                knee_index=knee_index,
            )
        ]
    return []


def log_advisories(
    advisories: Iterable[KneeAdvisory], logger: logging.Logger | None = None
) -> int:
    """Emit each advisory as a warning record. Returns the number emitted."""
    logger = logger or _default_logger()
    count = 0
    for advisory in advisories:
        logger.warning("[%s] %s", advisory.kind.value, advisory.message)
        count += 1
    return count


__all__ = [
    "AdvisoryKind",
    "KneeAdvisory",
    "knee_advisories",
    "log_advisories",
]
