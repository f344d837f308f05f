"""Word frequency ranks, actor co-star paths and word range counts."""

__version__ = "0.1.0"
__all__ = ["bard", "sixdegrees", "wordrange"]