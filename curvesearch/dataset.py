"""A collection of curves read from a file."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from .curve import Curve, FlattenedCurve
from .files import read_curves


@dataclass
class Dataset:
    """An ordered collection of curves."""

    curves: list[Curve] = field(default_factory=list)

    @classmethod
    def from_file(cls, path: str | Path) -> Dataset:
        return cls(read_curves(path))

    def __len__(self) -> int:
        return len(self.curves)

    def __iter__(self) -> Iterator[Curve]:
        return iter(self.curves)

    def flatten(self) -> list[FlattenedCurve]:
        """Return a flattened copy of every curve."""
        return [curve.flatten() for curve in self.curves]

    def erase_time_and_flatten(self) -> list[FlattenedCurve]:
        """Drop the time axis of every curve in place, then flatten them."""
        flattened = []
        for curve in self.curves:
            curve.erase_time_axis()
            flattened.append(curve.flatten())
        return flattened

    def __str__(self) -> str:
        return "".join(str(curve) for curve in self.curves)