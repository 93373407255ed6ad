"""Dataset statistics used to tune hashing parameters."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .curve import Curve

SUBSET_THRESHOLD = 9999
SUBSET_FRACTION = 0.01


def estimate_window_size(
    data: Sequence[Curve], distance: Callable[[Curve, Curve], float]
) -> int:
    """Estimate a window as ten times the average pairwise distance.

    Datasets larger than 9999 curves are sampled down to their first 1%.
    """
    if not data:
        raise ValueError("cannot estimate a window size from an empty dataset")
    size = len(data)
    subset = size if size <= SUBSET_THRESHOLD else int(size * SUBSET_FRACTION)
    sample = data[:subset]
    total = 0.0
    for i, first in enumerate(sample):
        for second in sample[i + 1 :]:
            total += distance(first, second) / subset
    return int(total * (10.0 / subset))


def avg_point_size(curves: Sequence[Curve]) -> float:
    """Average number of points per curve."""
    count = len(curves)
    return sum(len(curve.points) / count for curve in curves)


def estimate_grid_interval(curves: Sequence[Curve]) -> float:
    """Grid cell size: 10e-4 times the dimension times the average curve length."""
    if not curves:
        raise ValueError("cannot estimate a grid interval from an empty dataset")
    dimensions = curves[0].data_dimensions
    return dimensions * avg_point_size(curves) * 10e-4


def max_curve_length(curves: Sequence[Curve]) -> int:
    """Number of points of the longest curve, 0 when there are none."""
    return max((len(curve.points) for curve in curves), default=0)