"""Small vector helpers and the random distributions used by the hashing code."""

from __future__ import annotations

import random
from collections.abc import Sequence

_rng = random.Random()

EQUALITY_TOLERANCE = 1e-5


def uniform_int(low: int, high: int) -> int:
    """Draw an integer uniformly from the closed range [low, high]."""
    return _rng.randint(int(low), int(high))


def uniform_real(low: float, high: float) -> float:
    """Draw a real number uniformly between low and high."""
    return _rng.uniform(low, high)


def normal() -> float:
    """Draw a sample from the standard normal distribution."""
    return _rng.gauss(0.0, 1.0)


def _check_same_size(a: Sequence[float], b: Sequence[float], operation: str) -> None:
    if len(a) != len(b):
        raise ValueError(
            f"{operation}: vectors do not have the same size "
            f"(size a = {len(a)}, size b = {len(b)})"
        )


def add_vectors(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """Return the element-wise sum of two vectors of equal length."""
    _check_same_size(a, b, "add_vectors")
    return [x + y for x, y in zip(a, b)]


def vectors_are_equal(a: Sequence[float], b: Sequence[float]) -> bool:
    """Tell whether two vectors agree element-wise within a small tolerance."""
    _check_same_size(a, b, "vectors_are_equal")
    return all(abs(x - y) <= EQUALITY_TOLERANCE for x, y in zip(a, b))


def dot_product(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the dot product of two vectors of equal length."""
    _check_same_size(a, b, "dot_product")
    return sum(x * y for x, y in zip(a, b))


def mod(a: int, b: int) -> int:
    """Return the non-negative remainder of a divided by b."""
    return a % b