"""Center initialization - Random, bounding-box and K-means++ seeding."""
from __future__ import annotations

import logging
from enum import Enum

import numpy as np

from core.errors import InvalidConfigurationError
from utils.distance import (
    bounding_box,
    pairwise_squared_distances,
    random_point_in_bounds,
    select_weighted_index,
)

logger = logging.getLogger(__name__)


class InitMethod(str, Enum):
    """Choices of initialization methods."""

    RANDOM = "random"
    BOUNDING_BOX = "bounding_box"
    KMEANS_PLUS_PLUS = "kmeans++"

    @classmethod
    def parse(cls, value) -> InitMethod:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise InvalidConfigurationError(
                f"Unsupported init method: {value!r} (choose from {choices})"
            ) from None


def random_init(points: np.ndarray, k: int, rng: np.random.Generator) -> np.ndarray:
    """Pick k distinct existing points, uniformly at random, as centers."""
    indices = rng.choice(len(points), size=k, replace=False)
    return points[indices].copy()


def bounding_box_init(points: np.ndarray, k: int, rng: np.random.Generator) -> np.ndarray:
    """Draw k synthetic centers uniformly from the bounding box of the points."""
    lower, upper = bounding_box(points)
    return np.array([random_point_in_bounds(lower, upper, rng) for _ in range(k)])


def kmeans_plus_plus_next_index(points: np.ndarray, chosen: list[int],
                                rng: np.random.Generator,
                                nearest_sq: np.ndarray | None = None) -> int:
    """
    Select the index of the next K-means++ seed.

    Each point not yet chosen is weighted by its squared distance to the
    nearest chosen seed. Already chosen points have weight zero.

    Args:
        points: Array of shape (n_points, n_dimensions)
        chosen: Indices already selected as seeds (non-empty)
        rng: Random generator to draw from
        nearest_sq: Precomputed squared distance of each point to its
            nearest chosen seed

    Returns:
        Index of the next seed, never one of `chosen`
    """
    if nearest_sq is None:
        nearest_sq = pairwise_squared_distances(points, points[chosen]).min(axis=1)

    weights = np.array(nearest_sq, dtype=np.float64)
    weights[chosen] = 0.0

    if weights.sum() > 0:
        return select_weighted_index(weights, rng)

    # Every remaining point coincides with a seed
    candidates = np.setdiff1d(np.arange(len(points)), chosen)
    logger.debug("All K-means++ weights are zero, choosing uniformly among %d candidates",
                 len(candidates))
    return int(rng.choice(candidates))


def kmeans_plus_plus_init(points: np.ndarray, k: int, rng: np.random.Generator) -> np.ndarray:
    """Choose k distinct data points as centers with K-means++ weighting."""
    chosen = [int(rng.integers(len(points)))]
    nearest_sq = pairwise_squared_distances(points, points[chosen]).min(axis=1)

    while len(chosen) < k:
        index = kmeans_plus_plus_next_index(points, chosen, rng, nearest_sq)
        chosen.append(index)
        new_sq = pairwise_squared_distances(points, points[[index]])[:, 0]
        nearest_sq = np.minimum(nearest_sq, new_sq)

    logger.debug("K-means++ seeds: %s", chosen)
    return points[chosen].copy()


INITIALIZERS = {
    InitMethod.RANDOM: random_init,
    InitMethod.BOUNDING_BOX: bounding_box_init,
    InitMethod.KMEANS_PLUS_PLUS: kmeans_plus_plus_init,
}


def initialize_centers(points: np.ndarray, k: int, method, rng: np.random.Generator) -> np.ndarray:
    """
    Produce k initial centers with the chosen strategy.

    Args:
        points: Validated point array of shape (n_points, n_dimensions)
        k: Number of centers, 1 <= k <= n_points
        method: InitMethod member or its string value
        rng: Random generator owned by the current run

    Returns:
        Array of shape (k, n_dimensions)
    """
    if not 1 <= k <= len(points):
        raise InvalidConfigurationError(
            f"Cannot choose {k} centers from {len(points)} points"
        )
    method = InitMethod.parse(method)
    return INITIALIZERS[method](points, k, rng)
