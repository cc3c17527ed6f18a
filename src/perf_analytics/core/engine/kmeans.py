from __future__ import annotations

from typing import Sequence

import numpy as np

from perf_analytics.core.engine.contract import (
    validate_k,
    validate_matrix,
    validate_max_iterations,
)
from perf_analytics.core.engine.rng import Mulberry32, create_rng
from perf_analytics.core.types import KMeansResult

DEFAULT_SEED = 1337
DEFAULT_MAX_ITERATIONS = 25


def squared_distances(points: np.ndarray, centers: np.ndarray) -> np.ndarray:
    """Pairwise squared Euclidean distances, shape ``(len(points), len(centers))``."""
    diff = points[:, None, :] - centers[None, :, :]
    return (diff * diff).sum(axis=2)


def _nearest_center(distances: np.ndarray) -> np.ndarray:
    # NaN never wins; an all-NaN row falls back to center 0. argmin keeps the
    # lowest index on ties.
    cleaned = np.where(np.isnan(distances), np.inf, distances)
    return np.argmin(cleaned, axis=1)


def _plus_plus_init(X: np.ndarray, k: int, rand: Mulberry32) -> np.ndarray:
    n = X.shape[0]
    centers = [X[rand.randrange(n)].copy()]
    while len(centers) < k:
        dist = squared_distances(X, np.asarray(centers)).min(axis=1)
        total = float(dist.sum())
        r = rand.next() * total
        idx = 0
        for i in range(n):
            r -= float(dist[i])
            if r <= 0:
                idx = i
                break
        centers.append(X[idx].copy())
    return np.asarray(centers, dtype=float)


def kmeans(
    X: Sequence[Sequence[float]] | np.ndarray,
    k: int,
    seed: int = DEFAULT_SEED,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> KMeansResult:
    """Cluster ``X`` into ``k`` groups with k-means++ seeding and Lloyd refinement.

    The result depends only on ``X``, ``k``, ``seed`` and ``max_iterations``.
    Clusters that lose all their points are reseeded from a uniformly drawn
    point of ``X``, so a run may still end with empty clusters. Non-finite
    features are not rejected and surface as NaN centers.
    """
    X = validate_matrix(X)
    n = X.shape[0]
    k = validate_k(k, n)
    max_iterations = validate_max_iterations(max_iterations)
    rand = create_rng(seed)

    with np.errstate(invalid="ignore", over="ignore"):
        centers = _plus_plus_init(X, k, rand)
        assignment = np.zeros(n, dtype=int)
        iterations = 0
        for _ in range(max_iterations):
            iterations += 1
            best = _nearest_center(squared_distances(X, centers))
            changed = bool(np.any(best != assignment))
            assignment = best

            updated = np.zeros_like(centers)
            for c in range(k):
                members = X[assignment == c]
                if members.shape[0] == 0:
                    updated[c] = X[rand.randrange(n)]
                else:
                    updated[c] = members.sum(axis=0) / members.shape[0]
            centers = updated
            if not changed:
                break

    return KMeansResult(centers=centers, assignment=assignment, iterations=iterations)
