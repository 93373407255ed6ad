"""Locality sensitive hashing index over curves and flattened curves."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator, Sequence

from .bruteforce import NO_NEIGHBOUR
from .curve import Curve, FlattenedCurve
from .grid import Grid
from .hashing import AmplifiedHash, HashTable
from .metrics import (
    Metric,
    curve_euclidean_distance,
    discrete_frechet_distance,
    flattened_distance,
)
from .stats import estimate_grid_interval, max_curve_length

PRUNING_THRESHOLD = 10
WINDOW_SIZE = 1000
DEFAULT_RADIUS = 10000.0

CurveDistance = Callable[[Curve, Curve], float]


def _table_size(count: int) -> int:
    """Scale table size as N / 2^(log10(N) - 1)."""
    if count < 1:
        raise ValueError("cannot build an LSH index over an empty dataset")
    divisor = int(2 ** (math.log10(count) - 1))
    return count // max(1, divisor)


def _resolve_distance(metric: Metric, distance: CurveDistance | None) -> CurveDistance:
    if distance is not None:
        return distance
    if metric is Metric.EUCLIDEAN:
        return curve_euclidean_distance
    if metric is Metric.DISCRETE_FRECHET:
        return discrete_frechet_distance
    raise ValueError(
        "the continuous Frechet metric needs an explicit distance function"
    )


class LSH:
    """L hash tables of amplified LSH functions over preprocessed curves."""

    def __init__(
        self,
        inputs: Iterable[Curve],
        metric: Metric,
        num_tables: int = 5,
        num_functions: int = 4,
        radius: float = DEFAULT_RADIUS,
        *,
        distance: CurveDistance | None = None,
    ) -> None:
        curves = list(inputs)
        size = _table_size(len(curves))
        self.metric = metric
        self.radius = radius
        self.raw_inputs = curves
        self.padding_len = max_curve_length(curves)
        if metric is Metric.DISCRETE_FRECHET:
            self.padding_len *= 2
        self.tables = [
            HashTable(size, AmplifiedHash(num_functions, WINDOW_SIZE, self.padding_len))
            for _ in range(num_tables)
        ]
        self._distance: CurveDistance | None = _resolve_distance(metric, distance)
        self._curve_queries = True
        self._label_to_curve: dict[str, Curve] = {}
        self._input_families: list[list[FlattenedCurve]] = []
        self._query_families: list[list[FlattenedCurve]] = []
        self._query_index: dict[str, int] = {}

        grid_interval = estimate_grid_interval(curves)
        self.grids: list[Grid] = (
            []
            if metric is Metric.EUCLIDEAN
            else [Grid(grid_interval) for _ in self.tables]
        )
        for curve in curves:
            self._preprocess(curve, is_query=False)
        self._load()

    @classmethod
    def from_flattened(
        cls,
        data: Sequence[FlattenedCurve],
        metric: Metric,
        num_tables: int = 5,
        num_functions: int = 4,
        radius: float = DEFAULT_RADIUS,
    ) -> LSH:
        """Build an index over ready-made vectors; only vector range search applies."""
        size = _table_size(len(data))
        dim = data[0].size
        index = cls.__new__(cls)
        index.metric = metric
        index.radius = radius
        index.raw_inputs = []
        index.padding_len = dim
        index.tables = [
            HashTable(size, AmplifiedHash(num_functions, WINDOW_SIZE, dim))
            for _ in range(num_tables)
        ]
        index._distance = None
        index._curve_queries = False
        index._label_to_curve = {}
        index._input_families = []
        index._query_families = []
        index._query_index = {}
        index.grids = []
        for table in index.tables:
            for point in data:
                table.insert(point)
        return index

    def _flatten_for_table(self, curve: Curve, index: int) -> FlattenedCurve:
        work = curve.copy()
        if self.metric is Metric.EUCLIDEAN:
            work.erase_time_axis()
            return work.flatten()
        grid = self.grids[index]
        if self.metric is Metric.CONTINUOUS_FRECHET:
            work.filter(PRUNING_THRESHOLD)
            work.erase_time_axis()
            grid.fit(work)
            work.min_max_filter()
            work.apply_padding(self.padding_len)
            return work.flatten()
        grid.fit(work)
        grid.remove_consecutive_duplicates(work)
        flattened = work.flatten()
        flattened.apply_padding(self.padding_len)
        return flattened

    def _preprocess(self, curve: Curve, is_query: bool) -> list[FlattenedCurve]:
        self._label_to_curve.setdefault(curve.id, curve)
        family = [self._flatten_for_table(curve, j) for j in range(len(self.tables))]
        if not is_query:
            self._input_families.append(family)
            return family
        self._query_families.append(family)
        self._query_index.setdefault(curve.id, len(self._query_families) - 1)
        return self._query_families[self._query_index[curve.id]]

    def _load(self) -> None:
        for i, table in enumerate(self.tables):
            for family in self._input_families:
                table.insert(family[i])

    def _query_family(self, query: Curve) -> list[FlattenedCurve]:
        if not self._curve_queries:
            raise RuntimeError(
                "this index holds flattened vectors only; curve queries need "
                "an index built from curves"
            )
        return self._preprocess(query, is_query=True)

    @staticmethod
    def _candidates(table: HashTable, query: FlattenedCurve) -> Iterator[FlattenedCurve]:
        ident = table.hash(query)
        for key, point in table.bucket(ident % table.table_size):
            if key == ident:
                yield point

    def _curve_distance(self, query: FlattenedCurve, point: FlattenedCurve) -> float:
        if self.metric is Metric.EUCLIDEAN or self._distance is None:
            return flattened_distance(query, point)
        return self._distance(
            self._label_to_curve[query.id], self._label_to_curve[point.id]
        )

    def nearest_neighbor(
        self, query: Curve, best: tuple[float, str] = NO_NEIGHBOUR
    ) -> tuple[float, str]:
        """Return the approximate nearest (distance, id), improving on ``best``."""
        family = self._query_family(query)
        seen: set[str] = set()
        for table, flat_query in zip(self.tables, family):
            for point in self._candidates(table, flat_query):
                if point.id in seen:
                    continue
                seen.add(point.id)
                dist = self._curve_distance(flat_query, point)
                if dist < best[0]:
                    best = (dist, point.id)
        return best

    def range_search(self, query: Curve) -> list[tuple[Curve, float]]:
        """Return indexed curves closer to ``query`` than the radius."""
        family = self._query_family(query)
        seen: set[str] = set()
        results: list[tuple[Curve, float]] = []
        for table, flat_query in zip(self.tables, family):
            for point in self._candidates(table, flat_query):
                if point.id in seen:
                    continue
                seen.add(point.id)
                raw = self._label_to_curve[point.id]
                dist = self._curve_distance(flat_query, point)
                if dist < self.radius:
                    results.append((raw, dist))
        return results

    def range_search_flattened(
        self, query: FlattenedCurve
    ) -> list[tuple[FlattenedCurve, float]]:
        """Return indexed vectors within the radius of ``query`` (Euclidean)."""
        seen: set[str] = set()
        results: list[tuple[FlattenedCurve, float]] = []
        for table in self.tables:
            for point in self._candidates(table, query):
                if point.id in seen:
                    continue
                seen.add(point.id)
                dist = flattened_distance(query, point)
                if dist < self.radius:
                    results.append((point, dist))
        return results