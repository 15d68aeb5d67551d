"""Point set validation - converts caller data into a (N, D) float array."""
from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from sklearn.utils import check_array

from core.errors import InvalidInputError


def as_point_array(points) -> np.ndarray:
    """
    Validate a point collection and return it as a float64 array.

    Args:
        points: Array-like of shape (n_points, n_dimensions), or a
            sequence of equal-length coordinate sequences

    Returns:
        Read-only numpy array of shape (n_points, n_dimensions)
    """
    if points is None:
        raise InvalidInputError("Point collection is empty")

    if isinstance(points, Sequence) and not isinstance(points, (str, bytes)):
        if len(points) == 0:
            raise InvalidInputError("Point collection is empty")
        try:
            dims = {len(p) for p in points}
        except TypeError as e:
            raise InvalidInputError("Each point must be a sequence of coordinates") from e
        if len(dims) > 1:
            raise InvalidInputError(
                f"Points have inconsistent dimensionality: {sorted(dims)}"
            )

    try:
        array = check_array(points, dtype=np.float64, ensure_2d=True, copy=True)
    except ValueError as e:
        raise InvalidInputError(f"Invalid point collection: {e}") from e

    if array.shape[0] == 0:
        raise InvalidInputError("Point collection is empty")

    array.setflags(write=False)
    return array
