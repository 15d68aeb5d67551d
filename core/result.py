"""Clustering result - immutable labels and centers from a completed run."""
from __future__ import annotations

import numbers

import numpy as np
import pandas as pd

from core.errors import InvalidInputError


def _read_only(array: np.ndarray) -> np.ndarray:
    array = np.array(array, copy=True)
    array.setflags(write=False)
    return array


class ClusteringResult:
    """Labels, centers and convergence info returned by a clustering run."""

    def __init__(self, points: np.ndarray, labels: np.ndarray, centers: np.ndarray,
                 n_iter: int, converged: bool, inertia_history: list[float]) -> None:
        self._points = _read_only(points)
        self._labels = _read_only(np.asarray(labels, dtype=np.intp))
        self._centers = _read_only(np.asarray(centers, dtype=np.float64))
        self._n_iter = int(n_iter)
        self._converged = bool(converged)
        self._inertia_history = tuple(float(v) for v in inertia_history)

    @property
    def points(self) -> np.ndarray:
        return self._points

    @property
    def labels(self) -> np.ndarray:
        return self._labels

    @property
    def centers(self) -> np.ndarray:
        return self._centers

    @property
    def n_clusters(self) -> int:
        return len(self._centers)

    @property
    def n_iter(self) -> int:
        return self._n_iter

    @property
    def converged(self) -> bool:
        return self._converged

    @property
    def inertia_history(self) -> tuple[float, ...]:
        return self._inertia_history

    @property
    def inertia(self) -> float:
        """Within-cluster sum of squared distances for the final labels and centers."""
        diffs = self._points - self._centers[self._labels]
        return float(np.sum(diffs * diffs))

    def _check_label(self, label: int) -> int:
        if isinstance(label, bool) or not isinstance(label, numbers.Integral):
            raise InvalidInputError(f"Label must be an integer, got {label!r}")
        if not 0 <= label < self.n_clusters:
            raise InvalidInputError(
                f"Label {label} out of range for {self.n_clusters} clusters"
            )
        return int(label)

    def indices_with_label(self, label: int) -> np.ndarray:
        """Return indices of the points carrying the given label, in ascending order."""
        label = self._check_label(label)
        return np.flatnonzero(self._labels == label)

    def points_with_label(self, label: int) -> np.ndarray:
        """Return the points carrying the given label."""
        return self._points[self.indices_with_label(label)]

    def cluster_sizes(self) -> np.ndarray:
        """Return the number of points in each cluster."""
        return np.bincount(self._labels, minlength=self.n_clusters)

    def to_frame(self) -> pd.DataFrame:
        """Return a DataFrame with one row per point: coordinates x0..xD-1 and label."""
        df = pd.DataFrame(
            self._points,
            columns=[f"x{d}" for d in range(self._points.shape[1])]
        )
        df['label'] = self._labels
        return df

    def __len__(self) -> int:
        return len(self._labels)

    def __repr__(self) -> str:
        return (f"ClusteringResult(n_points={len(self)}, n_clusters={self.n_clusters}, "
                f"n_iter={self.n_iter}, converged={self.converged})")
