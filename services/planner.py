"""Cluster Planner - main orchestrator for a clustering run."""
from services.clustering import ClusteringService
from services.reporting import output_cluster_centers
from utils.data_generator import DataGenerator


class ClusterPlanner:
    """Main orchestrator that generates points, clusters them and reports."""
    
    def __init__(self, config, reporter=output_cluster_centers):
        self.config = config
        self.reporter = reporter
        
        # Data containers
        self.points = None
        self.clusters = []
        
        # Services
        self.data_generator = DataGenerator(
            n_dimensions=config.NUM_DIMENSIONS,
            n_blobs=config.NUM_BLOBS,
            spread=config.BLOB_SPREAD
        )
        self.clustering_service = ClusteringService(config)
        
        # State
        self.stats = {}
    
    def generate_points(self, count=None, seed=None):
        """Generate synthetic points."""
        count = count or self.config.NUM_POINTS
        seed = seed if seed is not None else self.config.DATA_SEED
        
        print(f"[1] Generating {count} points in {self.config.NUM_DIMENSIONS}D "
              f"around {self.config.NUM_BLOBS} blobs...")
        self.points = self.data_generator.generate_points(n=count, seed=seed)
        print(f"    OK: {len(self.points)} points generated")
        
        return self.points
    
    def create_clusters(self, num_clusters=None):
        """Cluster the generated points."""
        num_clusters = num_clusters or self.config.NUM_CLUSTERS
        print(f"[2] Creating {num_clusters} clusters ({self.config.KMEANS_INIT_METHOD} seeding)...")
        
        self.clusters = self.clustering_service.cluster_points(
            self.points,
            num_clusters=num_clusters,
            reporter=self.reporter
        )
        
        result = self.clustering_service.result
        print(f"    OK: {len(self.clusters)} clusters created in {result.n_iter} iterations "
              f"(inertia {result.inertia:.2f})")
        
        return self.clusters
    
    def summarize(self):
        """Collect and print per-cluster statistics."""
        print("[3] Cluster summary...")
        self.stats = self.clustering_service.get_cluster_stats(self.clusters)
        
        for cluster in self.clusters:
            print(f"   {cluster}")
        if self.stats['empty_clusters']:
            print(f"   WARNING: {self.stats['empty_clusters']} empty clusters")
        
        return self.stats
    
    def run(self):
        """Run the full pipeline."""
        self.generate_points()
        self.create_clusters()
        return self.summarize()
