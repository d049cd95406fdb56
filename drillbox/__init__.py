"""A thread-safe circular buffer and a small pygame spaceship toy."""

__version__ = "0.1.0"
__all__ = ["__version__"]