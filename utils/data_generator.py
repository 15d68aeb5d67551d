"""Data Generator - generates synthetic Gaussian point blobs."""
import numpy as np
import pandas as pd


class DataGenerator:
    """Generates points scattered around randomly placed blob centers."""
    
    def __init__(self, n_dimensions=2, n_blobs=3, spread=1.0, extent=10.0):
        self.n_dimensions = n_dimensions
        self.n_blobs = n_blobs
        self.spread = spread
        self.extent = extent
        self.blob_centers = None
    
    def coordinate_columns(self):
        """Names of the coordinate columns in generated frames."""
        return [f"x{d}" for d in range(self.n_dimensions)]
    
    def generate(self, n=100, seed=42):
        """
        Generate n points split as evenly as possible across the blobs.
        
        Args:
            n: Number of points to generate
            seed: Random seed for reproducibility
        
        Returns:
            DataFrame with id, x0..xD-1 and blob columns
        """
        rng = np.random.default_rng(seed)
        
        self.blob_centers = rng.uniform(
            -self.extent, self.extent,
            size=(self.n_blobs, self.n_dimensions)
        )
        
        blob_ids = np.arange(n) % self.n_blobs
        noise = rng.normal(0.0, self.spread, size=(n, self.n_dimensions))
        coords = self.blob_centers[blob_ids] + noise
        
        df = pd.DataFrame(coords, columns=self.coordinate_columns())
        df.insert(0, "id", np.arange(1, n + 1))
        df["blob"] = blob_ids
        
        return df
    
    def generate_points(self, n=100, seed=42):
        """Generate n points and return only the coordinate array."""
        df = self.generate(n=n, seed=seed)
        return df[self.coordinate_columns()].to_numpy()
