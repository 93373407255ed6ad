"""Approximate nearest-neighbour search and clustering of time-series curves."""

__version__ = "0.1.0"