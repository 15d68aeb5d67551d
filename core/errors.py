"""Clustering errors - raised for invalid configuration, input and state."""


class ClusteringError(Exception):
    """Base class for all clustering errors."""


class InvalidConfigurationError(ClusteringError, ValueError):
    """K is zero, negative, not an integer, or larger than the point count."""


class InvalidInputError(ClusteringError, ValueError):
    """Point collection is empty or has inconsistent dimensionality."""


class InvalidStateError(ClusteringError, RuntimeError):
    """A result was queried before any clustering run completed."""
