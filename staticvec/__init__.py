"""A vector with fixed capacity and dynamic length, its capacity error, and a self-check."""

__version__ = "0.3.0"
__all__ = ["errors", "vector", "exercise"]