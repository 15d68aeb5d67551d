"""
Configuration settings for the K-means clustering engine.

This module centralizes all configuration parameters for synthetic data
generation, clustering and logging.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Config:
    """Central configuration for the clustering engine."""
    
    # =========================================================================
    # Presets
    # =========================================================================
    # "default", "fast" (few iterations, random seeding), "thorough" (large cap)
    # Unset: no preset, the KMEANS_* environment values below apply as given
    PRESET: str | None = os.getenv("KMEANS_PRESET")
    
    PRESETS: dict = {
        "fast": {
            "KMEANS_MAX_ITERATIONS": 50,
            "KMEANS_INIT_METHOD": "random",
        },
        "default": {
            "KMEANS_MAX_ITERATIONS": 300,
            "KMEANS_INIT_METHOD": "kmeans++",
        },
        "thorough": {
            "KMEANS_MAX_ITERATIONS": 1000,
            "KMEANS_INIT_METHOD": "kmeans++",
        },
    }
    
    # =========================================================================
    # Synthetic Data
    # =========================================================================
    NUM_POINTS: int = int(os.getenv("NUM_POINTS", "300"))
    NUM_DIMENSIONS: int = int(os.getenv("NUM_DIMENSIONS", "2"))
    NUM_BLOBS: int = int(os.getenv("NUM_BLOBS", "4"))
    BLOB_SPREAD: float = float(os.getenv("BLOB_SPREAD", "1.0"))
    DATA_SEED: int = int(os.getenv("DATA_SEED", "42"))
    
    # =========================================================================
    # Clustering
    # =========================================================================
    NUM_CLUSTERS: int = int(os.getenv("NUM_CLUSTERS", "4"))
    KMEANS_INIT_METHOD: str = os.getenv("KMEANS_INIT_METHOD", "kmeans++")  # random | bounding_box | kmeans++
    KMEANS_DETERMINISTIC: bool = _env_bool("KMEANS_DETERMINISTIC", "false")
    KMEANS_RANDOM_SEED: int = int(os.getenv("KMEANS_RANDOM_SEED", "42"))
    KMEANS_MAX_ITERATIONS: int = int(os.getenv("KMEANS_MAX_ITERATIONS", "300"))  # Safety bound on Lloyd passes
    
    @classmethod
    def apply_preset(cls, name: str | None = None) -> None:
        """Apply a named preset, overriding iteration cap and init method."""
        name = name or cls.PRESET
        if not name:
            return
        name = name.lower()
        preset = cls.PRESETS.get(name)
        if not preset:
            return
        cls.PRESET = name
        for key, value in preset.items():
            setattr(cls, key, value)
    
    # =========================================================================
    # Logging
    # =========================================================================
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")
