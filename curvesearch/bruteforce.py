"""Exhaustive nearest-neighbour search."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable

from .curve import Curve

NO_NEIGHBOUR = (sys.float_info.max, "-")


def bruteforce_nn(
    query: Curve,
    data: Iterable[Curve],
    distance: Callable[[Curve, Curve], float],
    best: tuple[float, str] = NO_NEIGHBOUR,
) -> tuple[float, str]:
    """Return the (distance, id) of the curve closest to ``query``.

    ``best`` is the result to improve upon; it is returned unchanged when no
    curve is strictly closer.
    """
    for curve in data:
        dist = distance(query, curve)
        if dist < best[0]:
            best = (dist, curve.id)
    return best