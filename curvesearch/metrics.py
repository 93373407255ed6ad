"""Distance functions between points, vectors and curves."""

from __future__ import annotations

import enum
import math

from .curve import Curve, FlattenedCurve, Point


class Metric(enum.Enum):
    EUCLIDEAN = "euclidean"
    DISCRETE_FRECHET = "discrete_frechet"
    CONTINUOUS_FRECHET = "continuous_frechet"


def _euclidean(a: list[float], b: list[float], kind: str) -> float:
    if len(a) != len(b):
        raise ValueError(
            f"{kind} do not have the same size. size(a) = {len(a)} size(b) = {len(b)}"
        )
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))


def point_distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points of equal dimension."""
    return _euclidean(a.coordinates, b.coordinates, "Points")


def flattened_distance(a: FlattenedCurve, b: FlattenedCurve) -> float:
    """Euclidean distance between two flattened curves of equal size."""
    return _euclidean(a.coordinates, b.coordinates, "FlattenedCurves")


def curve_euclidean_distance(a: Curve, b: Curve) -> float:
    """Mean distance between corresponding points over the shorter curve."""
    pairs = list(zip(a.points, b.points))
    if not pairs:
        return 0.0
    return sum(point_distance(p, q) for p, q in pairs) / len(pairs)


def _frechet_table(a: Curve, b: Curve) -> list[list[float]]:
    pa, pb = a.points, b.points
    if not pa or not pb:
        raise ValueError("discrete Frechet distance needs two non-empty curves")
    table = [[0.0] * len(pb) for _ in pa]
    for i, p in enumerate(pa):
        row = table[i]
        for j, q in enumerate(pb):
            d = point_distance(p, q)
            if i == 0 and j == 0:
                row[j] = d
            elif i == 0:
                row[j] = max(d, row[j - 1])
            elif j == 0:
                row[j] = max(d, table[i - 1][j])
            else:
                row[j] = max(d, min(table[i - 1][j], table[i - 1][j - 1], row[j - 1]))
    return table


def discrete_frechet_distance(a: Curve, b: Curve) -> float:
    """Discrete Fréchet distance between two curves."""
    return _frechet_table(a, b)[-1][-1]


def optimal_traversal(a: Curve, b: Curve) -> list[tuple[int, int]]:
    """Return the index pairs of an optimal discrete Fréchet coupling, in order."""
    table = _frechet_table(a, b)
    p, q = len(a.points) - 1, len(b.points) - 1
    path = [(p, q)]
    while p and q:
        up = table[p - 1][q]
        left = table[p][q - 1]
        diag = table[p - 1][q - 1]
        if up < left:
            choice = 0 if up < diag else 2
        else:
            choice = 1 if left < diag else 2
        if choice == 0:
            p -= 1
        elif choice == 1:
            q -= 1
        else:
            p -= 1
            q -= 1
        path.append((p, q))
    while p:
        p -= 1
        path.append((p, 0))
    while q:
        q -= 1
        path.append((0, q))
    path.reverse()
    return path