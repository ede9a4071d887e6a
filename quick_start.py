import logging

import numpy as np
from sklearn.datasets import make_blobs
from sklearn.mixture import GaussianMixture

from bic_knee_analysis.core_utils.data_utils import orient_scores
from bic_knee_analysis.knee import log_advisories, normalize_bic


def main():
    """
    A small, self-contained example of the full analysis pipeline.
    """
    logging.basicConfig(level=logging.INFO)
    print("--- Starting Analysis Pipeline ---")

    # 1. --- Data Generation ---
    X, y_true = make_blobs(
        n_samples=400,
        n_features=2,
        centers=4,
        cluster_std=0.8,
        random_state=42,
    )
    print(
        f"\nStep 1: Generated {X.shape[0]} samples with {X.shape[1]} features."
    )
    print(f"Ground truth contains {len(np.unique(y_true))} clusters.")

    # 2. --- Score a series of clustering solutions ---
    cluster_counts = np.arange(1, 11)
    raw_bic = np.array(
        [
            GaussianMixture(n_components=k, random_state=0).fit(X).bic(X)
            for k in cluster_counts
        ]
    )
    print(f"\nStep 2: Fitted Gaussian mixtures for k = 1..{cluster_counts[-1]}.")

    # scikit-learn's BIC is lower-is-better; the knee search wants higher-is-better.
    bic = orient_scores(raw_bic, lower_is_better=True)

    # 3. --- Knee detection ---
    result = normalize_bic(bic, cluster_counts)
    log_advisories(result.advisories)
    print("Step 3: Normalized the BIC curve and located the knee.")

    # --- Display Results ---
    print("\n--- Analysis Complete ---")
    print(f"Trend: {result.trend.value} (r = {result.correlation:.3f})")
    if result.knee_detected:
        print(f"Knee at k = {result.knee_cluster_count:g}")
    print(f"Optimal number of clusters: {result.optimal_cluster_count:g}")
    print(result.to_frame().round(3).to_string(index=False))


if __name__ == "__main__":
    main()
