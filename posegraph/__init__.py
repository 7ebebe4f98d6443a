"""Two-dimensional pose-graph construction from odometry, with display markers."""

__version__ = "0.1.0"

__all__ = ["__version__"]