import numpy as np
import pytest

from bic_knee_analysis.errors import ClusterCountDivisionError
from bic_knee_analysis.normalization import weight_by_cluster_count


def test_divides_elementwise_by_cluster_count() -> None:
    out = weight_by_cluster_count([0.0, 2.0, 6.0, 8.0], [1, 2, 3, 4])
    np.testing.assert_allclose(out, [0.0, 1.0, 2.0, 2.0])


def test_result_is_not_clamped() -> None:
    out = weight_by_cluster_count([-3.0, 9.0], [3, 0.5])
    np.testing.assert_allclose(out, [-1.0, 18.0])


def test_zero_cluster_count_raises() -> None:
    with pytest.raises(ClusterCountDivisionError, match="positions: 1"):
        weight_by_cluster_count([1.0, 2.0, 3.0], [1, 0, 3])


def test_zero_cluster_count_is_a_zero_division_error() -> None:
    with pytest.raises(ZeroDivisionError):
        weight_by_cluster_count([1.0], [0])


def test_length_mismatch_raises() -> None:
    with pytest.raises(ValueError, match="same shape"):
        weight_by_cluster_count([1.0, 2.0], [1, 2, 3])
