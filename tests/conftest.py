import numpy as np
import pytest

from utils.data_generator import DataGenerator


@pytest.fixture
def square_points():
    return np.array([[0.0, 0.0], [2.0, 0.0], [0.0, 2.0], [2.0, 2.0]])


@pytest.fixture
def separated_points():
    return np.array([
        [0.0, 0.0], [1.0, 0.0], [0.0, 1.0],
        [10.0, 10.0], [11.0, 10.0], [10.0, 11.0],
    ])


@pytest.fixture
def blob_points():
    generator = DataGenerator(n_dimensions=3, n_blobs=4, spread=0.5, extent=20.0)
    return generator.generate_points(n=200, seed=7)
