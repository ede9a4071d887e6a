"""Configuration constants for plot styling."""

from __future__ import annotations

FIGURE_FACE_COLOR = "white"

C1_LINE_STYLE = {
    "color": (0.7, 0.7, 0.7),
    "linewidth": 2,
    "linestyle": "--",
    "marker": "o",
    "markersize": 7,
    "markerfacecolor": "white",
    "label": "Normalized BIC (C1)",
}

DIFF_LINE_STYLE = {
    "color": (0.2, 0.2, 0.2),
    "linewidth": 2,
    "linestyle": "--",
    "marker": "o",
    "markersize": 7,
    "markerfacecolor": "white",
    "label": "Combined normalized BIC and normalized BIC weighted by number of clusters",
}

KNEE_LINE_STYLE = {
    "color": "#B22222",
    "linewidth": 1.2,
    "linestyle": ":",
    "alpha": 0.9,
}

OPTIMAL_MARKER_STYLE = {
    "color": "#1F1F1F",
    "marker": "*",
    "s": 180,
    "zorder": 5,
}

X_LABEL = "Clustering solution"
Y_LABEL = "BIC"
AXIS_LABEL_FONT_SIZE = 18
TICK_LABEL_FONT_SIZE = 12
TITLE_FONT_SIZE = 16
X_TICK_ROTATION = 90

__all__ = [
    "FIGURE_FACE_COLOR",
    "C1_LINE_STYLE",
    "DIFF_LINE_STYLE",
    "KNEE_LINE_STYLE",
    "OPTIMAL_MARKER_STYLE",
    "X_LABEL",
    "Y_LABEL",
    "AXIS_LABEL_FONT_SIZE",
    "TICK_LABEL_FONT_SIZE",
    "TITLE_FONT_SIZE",
    "X_TICK_ROTATION",
]
