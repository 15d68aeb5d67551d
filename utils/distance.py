"""
Distance utilities for the clustering engine.

Contains: squared Euclidean distances, closest center / closest point
lookups, bounding boxes and weighted index sampling.
"""
from __future__ import annotations

from collections.abc import Iterable

import numpy as np


# =============================================================================
# Euclidean Distances
# =============================================================================

def squared_distance(a: np.ndarray, b: np.ndarray) -> float:
    """Squared Euclidean distance between two points."""
    diff = np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64)
    return float(np.dot(diff, diff))


def pairwise_squared_distances(points: np.ndarray, centers: np.ndarray) -> np.ndarray:
    """
    Squared Euclidean distances between every point and every center.

    Computed from explicit coordinate differences so that equal distances
    compare exactly equal.

    Returns:
        Array of shape (n_points, n_centers)
    """
    diffs = points[:, np.newaxis, :] - centers[np.newaxis, :, :]
    return np.einsum('ijk,ijk->ij', diffs, diffs)


def closest_cluster(query_point: np.ndarray, centers: np.ndarray) -> int:
    """Index of the center nearest to query_point; ties go to the lowest index."""
    dists = pairwise_squared_distances(np.atleast_2d(query_point), centers)[0]
    return int(np.argmin(dists))


# =============================================================================
# Closest Point Lookups
# =============================================================================

def _distances_to(query_point: np.ndarray, points: np.ndarray,
                  excluded_ids: Iterable[int] = ()) -> np.ndarray:
    dists = pairwise_squared_distances(points, np.atleast_2d(query_point))[:, 0]
    excluded = list(excluded_ids)
    if excluded:
        dists = dists.copy()
        dists[excluded] = np.inf
    return dists


def closest_point_index(query_point: np.ndarray, points: np.ndarray,
                        excluded_ids: Iterable[int] = ()) -> int:
    """Index of the point nearest to query_point, skipping excluded_ids."""
    dists = _distances_to(query_point, points, excluded_ids)
    if np.all(np.isinf(dists)):
        raise ValueError("No candidate points left after exclusion")
    return int(np.argmin(dists))


def closest_point_distance(query_point: np.ndarray, points: np.ndarray,
                           excluded_ids: Iterable[int] = ()) -> float:
    """Euclidean distance from query_point to its nearest point, skipping excluded_ids."""
    dists = _distances_to(query_point, points, excluded_ids)
    if np.all(np.isinf(dists)):
        raise ValueError("No candidate points left after exclusion")
    return float(np.sqrt(dists.min()))


# =============================================================================
# Bounding Box
# =============================================================================

def bounding_box(points: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Per-dimension (min, max) of a point array."""
    return points.min(axis=0), points.max(axis=0)


def random_point_in_bounds(lower: np.ndarray, upper: np.ndarray,
                           rng: np.random.Generator) -> np.ndarray:
    """Draw one point uniformly from the axis-aligned box [lower, upper]."""
    return lower + rng.random(len(lower)) * (upper - lower)


# =============================================================================
# Weighted Sampling
# =============================================================================

def select_weighted_index(weights: np.ndarray, rng: np.random.Generator) -> int:
    """
    Select a random index with probability proportional to its weight.

    Zero-weight entries are never selected.

    Args:
        weights: Non-negative weights, at least one positive
        rng: Random generator to draw from

    Returns:
        Selected index
    """
    weights = np.asarray(weights, dtype=np.float64)
    if weights.ndim != 1 or len(weights) == 0:
        raise ValueError("Weights must be a non-empty 1-D sequence")
    if np.any(weights < 0) or not np.all(np.isfinite(weights)):
        raise ValueError("Weights must be finite and non-negative")

    cumulative = np.cumsum(weights)
    total = cumulative[-1]
    if total <= 0:
        raise ValueError("At least one weight must be positive")

    target = rng.random() * total
    index = int(np.searchsorted(cumulative, target, side='right'))
    # Rounding can push target onto the last boundary
    index = min(index, len(weights) - 1)
    while weights[index] == 0:
        index -= 1
    return index
