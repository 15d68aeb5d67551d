"""Clustering Service - runs the KMeans engine from configuration."""
import math

from core.cluster import Cluster
from core.errors import InvalidInputError, InvalidStateError
from core.points import as_point_array
from utils.distance import closest_cluster, squared_distance
from utils.kmeans import KMeansClusterer


class ClusteringService:
    """Service for clustering point sets into groups."""
    
    def __init__(self, config):
        self.config = config
        self.clusterer = None
        self.result = None
    
    def build_clusterer(self, num_clusters=None, init_method=None, deterministic=None):
        """Create a KMeansClusterer, filling unset options from config."""
        return KMeansClusterer(
            n_clusters=self.config.NUM_CLUSTERS if num_clusters is None else num_clusters,
            init_method=self.config.KMEANS_INIT_METHOD if init_method is None else init_method,
            deterministic=self.config.KMEANS_DETERMINISTIC if deterministic is None else deterministic,
            max_iter=self.config.KMEANS_MAX_ITERATIONS,
            seed=self.config.KMEANS_RANDOM_SEED
        )
    
    def cluster_points(self, points, num_clusters=None, init_method=None,
                       deterministic=None, reporter=None):
        """
        Cluster points into groups.
        
        Args:
            points: Array-like of shape (n_points, n_dimensions)
            num_clusters: Number of clusters to create
            init_method: 'random', 'bounding_box' or 'kmeans++'
            deterministic: Use the fixed seed for reproducible runs
            reporter: Optional callable invoked with the ClusteringResult
        
        Returns:
            List of Cluster objects with point indices assigned
        """
        result = self._cluster_kmeans(points, num_clusters, init_method, deterministic)
        
        if reporter is not None:
            reporter(result)
        
        return Cluster.from_result(result)
    
    def _cluster_kmeans(self, points, num_clusters, init_method, deterministic):
        """Perform KMeans clustering."""
        self.clusterer = self.build_clusterer(num_clusters, init_method, deterministic)
        self.clusterer.fit(points)
        self.result = self.clusterer.result
        
        if not self.result.converged:
            print(f"   WARNING: no convergence within {self.clusterer.max_iter} iterations, "
                  f"using last labels")
        
        return self.result
    
    def get_cluster_stats(self, clusters):
        """
        Summarize a list of clusters.
        
        Args:
            clusters: List of Cluster objects from cluster_points
            
        Returns:
            Dict with per-cluster stats and totals
        """
        if self.result is None:
            raise InvalidStateError("No clustering result available")
        
        points = self.result.points
        per_cluster = [cluster.get_stats(points) for cluster in clusters]
        
        return {
            'n_clusters': len(clusters),
            'n_points': len(points),
            'n_iter': self.result.n_iter,
            'converged': self.result.converged,
            'inertia': self.result.inertia,
            'empty_clusters': sum(1 for c in clusters if c.is_empty()),
            'clusters': per_cluster
        }
    
    def locate_point(self, point):
        """
        Find the nearest cluster center for a point outside the clustered set.
        
        Args:
            point: Coordinates with the same dimensionality as the clustered points
            
        Returns:
            Tuple of (cluster_id, distance to that cluster's center)
        """
        if self.result is None:
            raise InvalidStateError("No clustering result available")
        
        point = as_point_array([point])[0]
        if len(point) != self.result.centers.shape[1]:
            raise InvalidInputError(
                f"Point has {len(point)} coordinates, clusters have {self.result.centers.shape[1]}"
            )
        
        cluster_id = closest_cluster(point, self.result.centers)
        distance = math.sqrt(squared_distance(point, self.result.centers[cluster_id]))
        return cluster_id, distance
