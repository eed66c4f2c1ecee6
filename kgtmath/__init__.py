"""Dense vector and matrix arithmetic on floats, with a random scalar helper."""

__version__ = "0.1.0"
__all__ = ["scalar", "vector", "matrix"]