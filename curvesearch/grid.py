"""Snapping curves onto a randomly shifted grid."""

from __future__ import annotations

import math

from .curve import Curve
from .vectors import uniform_real, vectors_are_equal


class Grid:
    """A regular grid with a fixed cell size and a random shift."""

    def __init__(self, grid_interval: float, noise: float | None = None) -> None:
        self.grid_interval = grid_interval
        self.noise = (
            uniform_real(0.0, float(int(grid_interval))) if noise is None else noise
        )

    def _snap(self, values: list[float]) -> list[float]:
        step, shift = self.grid_interval, self.noise
        return [math.floor((v - shift) / step + 0.5) * step + shift for v in values]

    def fit(self, curve: Curve) -> None:
        """Move every point of the curve to its nearest grid node, in place."""
        for point in curve.points:
            point.coordinates[:] = self._snap(point.coordinates)

    def remove_consecutive_duplicates(self, curve: Curve) -> None:
        """Collapse runs of equal consecutive points into one, in place."""
        points = curve.points
        i = 0
        while i < len(points) - 1:
            while i + 1 < len(points) and vectors_are_equal(
                points[i].coordinates, points[i + 1].coordinates
            ):
                del points[i + 1]
            i += 1