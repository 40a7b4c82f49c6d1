"""best: pick the closest match to a query by edit distance."""

__version__ = "0.1.0"
