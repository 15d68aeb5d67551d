"""KMeans Clusterer - Lloyd's algorithm with Random or K-means++ seeding."""
from __future__ import annotations

import logging
import numbers

import numpy as np

from core.errors import InvalidConfigurationError, InvalidStateError
from core.points import as_point_array
from core.result import ClusteringResult
from utils.distance import pairwise_squared_distances
from utils.initializers import InitMethod, initialize_centers

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITER = 300
DEFAULT_SEED = 42


# =============================================================================
# Lloyd Steps
# =============================================================================

def assign_labels(points: np.ndarray, centers: np.ndarray) -> np.ndarray:
    """Label each point with its nearest center; ties go to the lowest index."""
    return np.argmin(pairwise_squared_distances(points, centers), axis=1)


def compute_inertia(points: np.ndarray, centers: np.ndarray, labels: np.ndarray) -> float:
    """Total within-cluster sum of squared distances."""
    diffs = points - centers[labels]
    return float(np.sum(diffs * diffs))


def estimate_centers(points: np.ndarray, labels: np.ndarray,
                     previous_centers: np.ndarray) -> np.ndarray:
    """
    Recompute each center as the mean of the points labeled with it.

    An empty cluster is re-seeded at the point farthest from its own
    (re-estimated) center. Several empty clusters take successive farthest
    points. When no point lies at a positive distance the previous center
    is kept.

    Args:
        points: Array of shape (n_points, n_dimensions)
        labels: Cluster index of each point
        previous_centers: Centers used to compute labels, shape (k, n_dimensions)

    Returns:
        New centers array of shape (k, n_dimensions)
    """
    k, dims = previous_centers.shape
    counts = np.bincount(labels, minlength=k)
    sums = np.zeros((k, dims), dtype=np.float64)
    np.add.at(sums, labels, points)

    centers = np.array(previous_centers, dtype=np.float64, copy=True)
    filled = counts > 0
    centers[filled] = sums[filled] / counts[filled, np.newaxis]

    empty = np.flatnonzero(~filled)
    if len(empty) == 0:
        return centers

    diffs = points - centers[labels]
    spread = np.einsum('ij,ij->i', diffs, diffs)
    # Farthest first; stable sort keeps the lowest index on ties
    order = iter(np.argsort(-spread, kind='stable'))
    occupied = centers[filled]

    for cluster_id in empty:
        reseeded = False
        for point_index in order:
            if spread[point_index] <= 0:
                break
            if np.any(np.all(occupied == points[point_index], axis=1)):
                continue
            logger.warning("Cluster %d became empty; re-seeding at point %d (squared distance %.4g)",
                           cluster_id, point_index, spread[point_index])
            centers[cluster_id] = points[point_index]
            occupied = np.vstack([occupied, points[point_index]])
            reseeded = True
            break
        if not reseeded:
            logger.warning("Cluster %d is empty and no free off-center point remains; "
                           "keeping previous center", cluster_id)

    return centers


def lloyd(points: np.ndarray, initial_centers: np.ndarray,
          max_iter: int = DEFAULT_MAX_ITER) -> ClusteringResult:
    """
    Alternate assignment and estimation until no label changes.

    Args:
        points: Validated point array of shape (n_points, n_dimensions)
        initial_centers: Starting centers of shape (k, n_dimensions)
        max_iter: Maximum number of assign/estimate passes

    Returns:
        ClusteringResult; `converged` is False if max_iter was reached first
    """
    if max_iter < 1:
        raise InvalidConfigurationError(f"max_iter must be at least 1, got {max_iter}")

    points = as_point_array(points)
    centers = np.array(initial_centers, dtype=np.float64)
    if centers.ndim != 2 or centers.shape[1] != points.shape[1]:
        raise InvalidConfigurationError(
            f"Initial centers of shape {centers.shape} do not match "
            f"{points.shape[1]}-dimensional points"
        )

    previous_labels = None
    labels = None
    inertia_history = []
    converged = False
    iteration = 0

    while iteration < max_iter:
        iteration += 1
        labels = assign_labels(points, centers)
        inertia_history.append(compute_inertia(points, centers, labels))
        centers = estimate_centers(points, labels, centers)

        if previous_labels is not None:
            changed = int(np.count_nonzero(labels != previous_labels))
            logger.debug("Iteration %d: %d labels changed, inertia %.6g",
                         iteration, changed, inertia_history[-1])
            if changed == 0:
                converged = True
                break
        previous_labels = labels

    if converged:
        logger.info("Converged after %d iterations (inertia %.6g)", iteration, inertia_history[-1])
    else:
        logger.warning("Stopped after max_iter=%d iterations without converging; "
                       "returning last labels and centers", max_iter)

    return ClusteringResult(
        points=points,
        labels=labels,
        centers=centers,
        n_iter=iteration,
        converged=converged,
        inertia_history=inertia_history
    )


# =============================================================================
# KMeans Clusterer
# =============================================================================

class KMeansClusterer:
    """KMeans clustering engine with convenience accessors."""

    def __init__(self, n_clusters: int = 8, init_method=InitMethod.KMEANS_PLUS_PLUS,
                 deterministic: bool = False, max_iter: int = DEFAULT_MAX_ITER,
                 seed: int = DEFAULT_SEED) -> None:
        self._n_clusters = self._validate_k(n_clusters)
        self.init_method = InitMethod.parse(init_method)
        self.deterministic = bool(deterministic)
        if max_iter < 1:
            raise InvalidConfigurationError(f"max_iter must be at least 1, got {max_iter}")
        self.max_iter = max_iter
        self.seed = seed
        self.points: np.ndarray | None = None
        self.result: ClusteringResult | None = None

    @staticmethod
    def _validate_k(k) -> int:
        if isinstance(k, bool) or not isinstance(k, numbers.Integral):
            raise InvalidConfigurationError(f"K must be an integer, got {k!r}")
        if k < 1:
            raise InvalidConfigurationError(f"K must be at least 1, got {k}")
        return int(k)

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    @property
    def n_clusters(self) -> int:
        return self._n_clusters

    @n_clusters.setter
    def n_clusters(self, k: int) -> None:
        self.set_k(k)

    def set_k(self, k: int) -> None:
        """Set the number of clusters to find."""
        self._n_clusters = self._validate_k(k)
        self.result = None

    def get_k(self) -> int:
        """Get the number of clusters to find."""
        return self._n_clusters

    def set_points(self, points) -> None:
        """Set the points to cluster."""
        self.points = as_point_array(points)
        self.result = None

    def set_init_method(self, method) -> None:
        """Set which initialization method to use."""
        self.init_method = InitMethod.parse(method)

    def set_deterministic(self, deterministic: bool) -> None:
        """If True, seed every run with the fixed seed so results repeat."""
        self.deterministic = bool(deterministic)

    def set_random(self, random: bool) -> None:
        """Should runs be random? If False, every run is repeatable."""
        self.set_deterministic(not random)

    def make_rng(self) -> np.random.Generator:
        """Create the random generator for one run."""
        return np.random.default_rng(self.seed if self.deterministic else None)

    # -------------------------------------------------------------------------
    # Execution
    # -------------------------------------------------------------------------

    def cluster(self) -> ClusteringResult:
        """Run clustering on the configured points and return the result."""
        if self.points is None:
            raise InvalidStateError("No points set; call set_points() first")
        if self._n_clusters > len(self.points):
            raise InvalidConfigurationError(
                f"K={self._n_clusters} exceeds the number of points ({len(self.points)})"
            )

        self.result = None
        rng = self.make_rng()
        centers = initialize_centers(self.points, self._n_clusters, self.init_method, rng)
        logger.debug("Initialized %d centers with %s", self._n_clusters, self.init_method.value)

        self.result = lloyd(self.points, centers, max_iter=self.max_iter)
        return self.result

    def fit(self, points) -> KMeansClusterer:
        """
        Fit KMeans model to points.

        Args:
            points: Array of shape (n_samples, n_dimensions)

        Returns:
            self
        """
        self.set_points(points)
        self.cluster()
        return self

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def _require_result(self) -> ClusteringResult:
        if self.result is None:
            raise InvalidStateError("No completed clustering run; call cluster() or fit() first")
        return self.result

    def get_cluster_centers(self) -> np.ndarray:
        return self._require_result().centers

    def get_labels(self) -> np.ndarray:
        return self._require_result().labels

    def get_indices_with_label(self, label: int) -> np.ndarray:
        return self._require_result().indices_with_label(label)

    def get_points_with_label(self, label: int) -> np.ndarray:
        return self._require_result().points_with_label(label)

    @property
    def labels_(self) -> np.ndarray:
        return self.get_labels()

    @property
    def cluster_centers_(self) -> np.ndarray:
        return self.get_cluster_centers()

    @property
    def inertia_(self) -> float:
        return self._require_result().inertia

    @property
    def n_iter_(self) -> int:
        return self._require_result().n_iter
