import json

import numpy as np
import pandas as pd
import pytest

from bic_knee_analysis.errors import (
    AmbiguousTrendError,
    ClusterCountDivisionError,
    DegenerateRangeError,
)
from bic_knee_analysis.knee import AdvisoryKind, normalize_bic
from bic_knee_analysis.trend import CombinationRule, TrendDirection, TrendMode


def test_increasing_curve_uses_sum_rule(increasing_bic) -> None:
    bic, n_clusters = increasing_bic
    result = normalize_bic(bic, n_clusters)

    assert result.trend is TrendDirection.INCREASING
    assert result.trend_mode is TrendMode.AUTO
    assert result.combination_rule is CombinationRule.SUM
    assert result.correlation > 0
    np.testing.assert_allclose(result.diff_bic, (result.c1 + result.c2) / 2)


def test_end_to_end_knee_and_optimum(increasing_bic) -> None:
    bic, n_clusters = increasing_bic
    result = normalize_bic(bic, n_clusters)

    np.testing.assert_allclose(
        result.c2, [0.0, 4.5, 6.0, 5.625, 4.68, 3.975, 6.0 * 53.5 / 7 / (40.0 / 3)]
    )

    # 0-based index 4 is the fifth solution: strictly between the 2nd and 6th.
    assert result.knee_index == 4
    assert 1 < result.knee_index < 5
    assert result.knee_cluster_count == 5.0

    window = ((result.c1 + result.c2) / 2)[: result.knee_index + 1]
    assert result.optimal_cluster_index == int(np.argmax(window)) == 3
    assert result.optimal_cluster_count == 4.0
    assert result.optimal_cluster_bic == pytest.approx(window.max())
    assert result.advisories == []


def test_derived_curves_are_index_aligned(increasing_bic) -> None:
    bic, n_clusters = increasing_bic
    result = normalize_bic(bic, n_clusters)
    for curve in (result.c1, result.cm, result.c2, result.diff_bic):
        assert curve.shape == bic.shape
    np.testing.assert_allclose(result.cm, result.c1 / n_clusters)


def test_identical_inputs_give_identical_results(increasing_bic) -> None:
    bic, n_clusters = increasing_bic
    first = normalize_bic(bic, n_clusters)
    second = normalize_bic(bic.copy(), n_clusters.copy())

    for name in ("c1", "cm", "c2", "diff_bic"):
        np.testing.assert_array_equal(getattr(first, name), getattr(second, name))
    assert first.summary() == second.summary()


def test_inputs_are_copied_not_mutated(increasing_bic) -> None:
    bic, n_clusters = increasing_bic
    original = bic.copy()
    result = normalize_bic(bic, n_clusters)

    np.testing.assert_array_equal(bic, original)
    assert not np.shares_memory(result.bic, bic)


def test_decreasing_curve_without_crossing_falls_back(increasing_bic) -> None:
    bic, n_clusters = increasing_bic
    result = normalize_bic(-bic, n_clusters)

    assert result.trend is TrendDirection.DECREASING
    assert result.combination_rule is CombinationRule.ABSOLUTE_DIFFERENCE
    np.testing.assert_allclose(result.diff_bic, np.abs(result.c1 - result.c2) / 2)

    assert result.knee_index is None
    assert result.knee_cluster_count is None
    assert result.optimal_cluster_index == int(np.argmax(result.diff_bic)) == 1
    assert result.optimal_cluster_count == 2.0
    assert [a.kind for a in result.advisories] == [AdvisoryKind.NO_KNEE_DETECTED]


def test_forced_mode_overrides_detected_trend(increasing_bic) -> None:
    bic, n_clusters = increasing_bic
    result = normalize_bic(bic, n_clusters, trend_mode="diff")

    assert result.trend is TrendDirection.INCREASING
    assert result.trend_mode is TrendMode.FORCE_ABS_DIFF
    assert result.combination_rule is CombinationRule.ABSOLUTE_DIFFERENCE

    forced_sum = normalize_bic(-bic, n_clusters, trend_mode=TrendMode.FORCE_SUM)
    assert forced_sum.trend is TrendDirection.DECREASING
    assert forced_sum.combination_rule is CombinationRule.SUM


def test_zero_correlation_follows_policy(increasing_bic, monkeypatch) -> None:
    bic, n_clusters = increasing_bic
    monkeypatch.setattr(
        "bic_knee_analysis.trend.classification.trend_correlation",
        lambda scores: 0.0,
    )

    result = normalize_bic(bic, n_clusters)
    assert result.trend is TrendDirection.DECREASING
    assert result.combination_rule is CombinationRule.ABSOLUTE_DIFFERENCE

    with pytest.raises(AmbiguousTrendError):
        normalize_bic(bic, n_clusters, zero_correlation_trend=None)

    forced = normalize_bic(bic, n_clusters, trend_mode="sum", zero_correlation_trend=None)
    assert forced.combination_rule is CombinationRule.SUM


def test_symmetric_curve_uses_zero_correlation_policy() -> None:
    bic = [-10.0, -3.0, -1.0, -3.0, -10.0]
    n_clusters = [1, 2, 3, 4, 5]

    result = normalize_bic(bic, n_clusters)
    assert abs(result.correlation) < 1e-12
    assert result.trend is TrendDirection.DECREASING
    assert result.combination_rule is CombinationRule.ABSOLUTE_DIFFERENCE

    increasing = normalize_bic(bic, n_clusters, zero_correlation_trend="increasing")
    assert increasing.combination_rule is CombinationRule.SUM

    with pytest.raises(AmbiguousTrendError, match="no linear trend"):
        normalize_bic(bic, n_clusters, zero_correlation_trend=None)

    forced = normalize_bic(bic, n_clusters, trend_mode="sum", zero_correlation_trend=None)
    assert forced.combination_rule is CombinationRule.SUM


def test_flat_scores_raise(increasing_bic) -> None:
    _, n_clusters = increasing_bic
    with pytest.raises(DegenerateRangeError):
        normalize_bic(np.full(n_clusters.size, -10.0), n_clusters)


def test_flat_cluster_counts_raise(increasing_bic) -> None:
    bic, _ = increasing_bic
    with pytest.raises(DegenerateRangeError):
        normalize_bic(bic, np.full(bic.size, 3.0))


def test_zero_cluster_count_raises() -> None:
    with pytest.raises(ClusterCountDivisionError):
        normalize_bic([1.0, 2.0, 3.0], [0, 1, 2])


def test_misaligned_inputs_raise() -> None:
    with pytest.raises(ValueError, match="same length"):
        normalize_bic([1.0, 2.0, 3.0], [1, 2])


def test_nonfinite_scores_raise() -> None:
    with pytest.raises(ValueError, match="non-finite"):
        normalize_bic([1.0, np.nan, 3.0], [1, 2, 3])


def test_single_solution_raises() -> None:
    with pytest.raises(ValueError, match="At least 2"):
        normalize_bic([1.0], [1])


def test_to_frame_marks_knee_and_optimum(increasing_bic) -> None:
    bic, n_clusters = increasing_bic
    frame = normalize_bic(bic, n_clusters).to_frame()

    assert list(frame.columns) == [
        "n_clusters",
        "bic",
        "c1",
        "cm",
        "c2",
        "diff_bic",
        "is_knee",
        "is_optimal",
    ]
    assert len(frame) == bic.size
    assert isinstance(frame.index, pd.RangeIndex)
    np.testing.assert_array_equal(frame["n_clusters"], n_clusters)
    assert frame.loc[frame["is_knee"], "n_clusters"].tolist() == [5.0]
    assert frame.loc[frame["is_optimal"], "n_clusters"].tolist() == [4.0]


def test_summary_is_json_serializable(increasing_bic) -> None:
    bic, n_clusters = increasing_bic
    summary = normalize_bic(bic, n_clusters).summary()

    assert summary["optimal_cluster_count"] == 4
    assert summary["knee_cluster_count"] == 5
    assert summary["knee_detected"] is True
    assert summary["trend"] == "increasing"
    assert summary["combination_rule"] == "sum"
    assert json.loads(json.dumps(summary)) == summary
