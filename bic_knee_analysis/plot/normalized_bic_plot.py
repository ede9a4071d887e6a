"""
Normalized BIC visualization (matplotlib).

Draws C1 and the diff curve against the cluster counts of a
:class:`NormalizedBicResult`. The figure is a pure consumer of the result;
nothing drawn here feeds back into the numbers.
"""

from __future__ import annotations

from typing import Optional, Tuple

import matplotlib.pyplot as plt

from ..knee.normalized_bic import NormalizedBicResult
from ..trend.classification import TrendDirection, TrendMode
from bic_knee_analysis.plot import config as style


def format_trend_title(result: NormalizedBicResult) -> str:
    """Describe the detected trend and correlation coefficient."""
    verb = "increases" if result.trend is TrendDirection.INCREASING else "decreases"
    title = (
        f"Original BIC {verb} globally according to linear correlation "
        f"(r = {result.correlation:.4g})"
    )
    if result.trend_mode is not TrendMode.AUTO:
        title += f"\ncombination forced to '{result.combination_rule.value}'"
    return title


def plot_normalized_bic(
    result: NormalizedBicResult,
    ax: Optional[plt.Axes] = None,
    title: Optional[str] = None,
    show: bool = False,
    annotate: bool = True,
) -> Tuple[plt.Figure, plt.Axes]:
    """Plot C1 and the diff curve versus the cluster counts.

    Parameters
    ----------
    result
        Output of :func:`normalize_bic`.
    ax
        Axes to draw on. A new figure is created when omitted.
    title
        Axes title. Defaults to :func:`format_trend_title`.
    show
        Call ``plt.show()`` after drawing.
    annotate
        Mark the knee (vertical line) and the optimal solution (star).

    Returns
    -------
    (fig, ax)
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(12, 7))
        fig.patch.set_facecolor(style.FIGURE_FACE_COLOR)
    else:
        fig = ax.figure

    x = result.n_clusters
    ax.plot(x, result.c1, **style.C1_LINE_STYLE)
    ax.plot(x, result.diff_bic, **style.DIFF_LINE_STYLE)

    if annotate:
        if result.knee_cluster_count is not None:
            ax.axvline(
                result.knee_cluster_count,
                label=f"Knee (k = {result.knee_cluster_count:g})",
                **style.KNEE_LINE_STYLE,
            )
        ax.scatter(
            [result.optimal_cluster_count],
            [result.optimal_cluster_bic],
            label=f"Optimal (k = {result.optimal_cluster_count:g})",
            **style.OPTIMAL_MARKER_STYLE,
        )

    for side in ("top", "right"):
        ax.spines[side].set_visible(False)
    ax.grid(True, axis="both")
    ax.tick_params(axis="x", labelrotation=style.X_TICK_ROTATION)
    ax.tick_params(labelsize=style.TICK_LABEL_FONT_SIZE)
    ax.set_xlabel(style.X_LABEL, fontsize=style.AXIS_LABEL_FONT_SIZE)
    ax.set_ylabel(style.Y_LABEL, fontsize=style.AXIS_LABEL_FONT_SIZE)
    ax.set_title(
        title if title is not None else format_trend_title(result),
        fontsize=style.TITLE_FONT_SIZE,
    )
    ax.legend(frameon=False)

    if show:
        plt.show()
    return fig, ax


__all__ = ["format_trend_title", "plot_normalized_bic"]
