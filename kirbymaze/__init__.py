"""A tile-based maze game: collect every star, then reach the exit."""

__version__ = "1.0.0"