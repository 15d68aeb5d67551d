"""Cluster model - represents a group of points sharing one center."""
import numpy as np

from utils.distance import closest_point_distance, closest_point_index


class Cluster:
    """A cluster of point indices that share a common center."""

    def __init__(self, id, center):
        self.id = id
        self.center = tuple(float(c) for c in center)
        self.point_indices = []

    @classmethod
    def from_result(cls, result):
        """Build one Cluster per center of a ClusteringResult."""
        clusters = [cls(id=i, center=center) for i, center in enumerate(result.centers)]
        for index, label in enumerate(result.labels):
            clusters[label].add_point(index)
        return clusters

    def add_point(self, index):
        """Add a point (by its index in the point set) to this cluster."""
        self.point_indices.append(int(index))

    def get_point_count(self):
        """Return count of points in this cluster."""
        return len(self.point_indices)

    def is_empty(self):
        return not self.point_indices

    def get_points(self, points):
        """Return the member coordinates taken from the full point array."""
        return np.asarray(points)[self.point_indices]

    def get_sum_of_squares(self, points):
        """Sum of squared Euclidean distances from members to the center."""
        if self.is_empty():
            return 0.0
        diffs = self.get_points(points) - np.asarray(self.center)
        return float(np.sum(diffs * diffs))

    def get_stats(self, points):
        """Return statistics about this cluster."""
        count = self.get_point_count()
        sse = self.get_sum_of_squares(points)

        stats = {
            'id': self.id,
            'center': self.center,
            'n_points': count,
            'sum_of_squares': sse,
        }

        if count:
            member_points = self.get_points(points)
            distances = np.sqrt(np.sum((member_points - np.asarray(self.center)) ** 2, axis=1))
            stats['mean_distance'] = float(distances.mean())
            stats['max_distance'] = float(distances.max())

            # Member nearest to the center; non-members are excluded
            others = np.setdiff1d(np.arange(len(points)), self.point_indices)
            center = np.asarray(self.center)
            stats['representative_index'] = closest_point_index(center, points, excluded_ids=others)
            stats['representative_distance'] = closest_point_distance(center, points, excluded_ids=others)

        return stats

    def __repr__(self):
        return f"Cluster(id={self.id}, points={len(self.point_indices)})"

    def __str__(self):
        center = ", ".join(f"{c:.4f}" for c in self.center)
        return f"Cluster {self.id}: {self.get_point_count()} points around ({center})"
