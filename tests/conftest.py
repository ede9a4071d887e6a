import os
import sys

import numpy as np
import pytest

# Ensure the project root is on sys.path so tests can import
# ``bic_knee_analysis`` without installing the package.
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def increasing_bic() -> tuple[np.ndarray, np.ndarray]:
    """BIC curve that rises steeply and then plateaus after five clusters."""
    bic = np.array([-100.0, -80.0, -60.0, -50.0, -48.0, -47.0, -46.5])
    n_clusters = np.arange(1, 8, dtype=float)
    return bic, n_clusters
