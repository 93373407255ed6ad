"""Points, polygonal curves and their flattened vector form."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

PADDING_VALUE = 1e9
DEFAULT_PRUNING_THRESHOLD = 0.02


@dataclass
class Point:
    """A point in space, given by its coordinates."""

    coordinates: list[float]

    def __post_init__(self) -> None:
        self.coordinates = list(self.coordinates)

    @property
    def dimensions(self) -> int:
        return len(self.coordinates)

    def coordinate(self, index: int) -> float:
        """Return the coordinate at ``index``."""
        if not 0 <= index < self.dimensions:
            raise IndexError(f"coordinate index {index} out of range")
        return self.coordinates[index]

    def copy(self) -> Point:
        return Point(self.coordinates)

    def __str__(self) -> str:
        return "( " + "".join(f"{c} " for c in self.coordinates) + ")"


@dataclass
class Curve:
    """A labelled polygonal curve made of points."""

    id: str
    points: list[Point] = field(default_factory=list)
    x_axis_erased: bool = False

    @property
    def size(self) -> int:
        return len(self.points)

    @property
    def data_dimensions(self) -> int:
        return self.points[0].dimensions if self.points else 0

    def copy(self) -> Curve:
        """Return a deep copy of the curve."""
        return Curve(self.id, [p.copy() for p in self.points], self.x_axis_erased)

    def coordinates_of_point(self, index: int) -> list[float]:
        """Return the (mutable) coordinate list of the point at ``index``."""
        if not 0 <= index < len(self.points):
            raise IndexError(f"point index {index} out of range")
        return self.points[index].coordinates

    def _prunable(self, index: int, threshold: float) -> bool:
        pts = self.points
        return (
            index + 1 < len(pts)
            and math.dist(pts[index - 1].coordinates, pts[index].coordinates) <= threshold
            and math.dist(pts[index].coordinates, pts[index + 1].coordinates) <= threshold
        )

    def _between_min_and_max(self, index: int) -> bool:
        if index + 1 >= len(self.points):
            return False
        left = self.coordinates_of_point(index - 1)
        middle = self.coordinates_of_point(index)
        right = self.coordinates_of_point(index + 1)
        return left <= middle <= right or right <= middle <= left

    def filter(self, pruning_threshold: float = DEFAULT_PRUNING_THRESHOLD) -> None:
        """Drop odd-indexed points lying close to both of their neighbours."""
        i = 1
        while i < len(self.points):
            while self._prunable(i, pruning_threshold):
                del self.points[i]
            i += 2

    def min_max_filter(self) -> None:
        """Drop odd-indexed points lying between their neighbours."""
        i = 1
        while i < len(self.points):
            while self._between_min_and_max(i):
                del self.points[i]
            i += 2

    def erase_time_axis(self) -> None:
        """Remove the first (time) coordinate of every point, once."""
        if self.x_axis_erased:
            return
        self.x_axis_erased = True
        for point in self.points:
            del point.coordinates[0]

    def apply_padding(self, limit: int) -> None:
        """Append far-away points until the curve holds ``limit`` points."""
        dims = self.points[0].dimensions
        while len(self.points) < limit:
            self.points.append(Point([PADDING_VALUE] * dims))

    def flatten(self) -> FlattenedCurve:
        return FlattenedCurve.from_curve(self)

    def __str__(self) -> str:
        return f"Curve: {self.id} |\n" + "".join(f"{p}\n" for p in self.points)


@dataclass
class FlattenedCurve:
    """A curve whose point coordinates are concatenated into a single vector."""

    id: str
    coordinates: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.coordinates = list(self.coordinates)

    @classmethod
    def from_curve(cls, curve: Curve) -> FlattenedCurve:
        return cls(curve.id, [c for point in curve.points for c in point.coordinates])

    @property
    def size(self) -> int:
        return len(self.coordinates)

    @property
    def data_dimensions(self) -> int:
        return len(self.coordinates)

    def copy(self) -> FlattenedCurve:
        return FlattenedCurve(self.id, self.coordinates)

    def apply_padding(self, limit: int) -> None:
        """Append zeros until the vector holds ``limit`` values."""
        missing = limit - len(self.coordinates)
        if missing > 0:
            self.coordinates.extend([0.0] * missing)