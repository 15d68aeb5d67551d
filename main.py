"""K-means Clustering Engine - Main Entry Point"""
import logging

from config import Config
from services.planner import ClusterPlanner


if __name__ == "__main__":
    Config.apply_preset()
    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    planner = ClusterPlanner(Config)
    planner.run()
