"""Hypercube projection index for approximate searches over flattened curves."""

from __future__ import annotations

import bisect
import random
from collections import deque
from collections.abc import Callable, Iterable, Iterator

from .curve import Curve, FlattenedCurve
from .hashing import UINT32_MASK, HashFunction
from .metrics import flattened_distance

WINDOW = 257

FlattenedDistance = Callable[[FlattenedCurve, FlattenedCurve], float]


class Hypercube:
    """Curves projected onto the vertices of a k-dimensional hypercube.

    Every one of the k hash functions maps a point to a bucket, and every
    (function, bucket) pair is mapped once, at random, to one bit of the
    vertex.
    """

    def __init__(
        self,
        dataset: Iterable[Curve],
        distance: FlattenedDistance = flattened_distance,
        k: int = 14,
        m: int = 10,
        probes: int = 2,
        n: int = 1,
        r: int = 10000,
        *,
        seed: int | None = None,
    ) -> None:
        curves = list(dataset)
        if not curves:
            raise ValueError("cannot build a hypercube over an empty dataset")
        self.init_dim = len(curves[0].points)
        self.k = k
        self.distance = distance
        self.set_limits(n, r, m, probes)
        self._rng = random.Random(seed)
        self.buckets: list[list[FlattenedCurve]] = [[] for _ in range(2**k)]
        self._bit_of: dict[tuple[int, int], int] = {}
        self.hash_family = [HashFunction(WINDOW, self.init_dim) for _ in range(k)]
        for curve in curves:
            self.insert(curve.flatten())

    def set_limits(self, n: int = 1, r: int = 10000, m: int = 10, probes: int = 2) -> None:
        """Set the neighbour count, radius, point budget and vertex budget of queries."""
        self.n = n
        self.r = r
        self.m = m
        self.probes = probes

    def vertex_of(self, point: FlattenedCurve) -> int:
        """Return the hypercube vertex the point projects to."""
        vertex = 0
        for i, function in enumerate(self.hash_family):
            key = (i, function.hash(point.coordinates) & UINT32_MASK)
            bit = self._bit_of.get(key)
            if bit is None:
                bit = self._rng.randint(0, 1)
                self._bit_of[key] = bit
            vertex = (vertex << 1) + bit
        return vertex

    def insert(self, point: FlattenedCurve) -> None:
        """Store the point in the bucket of its vertex."""
        self.buckets[self.vertex_of(point)].append(point)

    def _probe(self, query: FlattenedCurve) -> Iterator[FlattenedCurve]:
        """Yield stored points, visiting vertices in Hamming-distance order."""
        visited: set[int] = set()
        pending: deque[int] = deque()
        points_checked = 0
        vertices_checked = 0
        vertex = self.vertex_of(query)
        while True:
            for point in self.buckets[vertex]:
                yield point
                points_checked += 1
                if points_checked >= self.m:
                    break
            vertices_checked += 1
            if vertices_checked == self.probes:
                return
            visited.add(vertex)
            if len(visited) == self.k:
                return
            for i in range(self.k):
                neighbour = vertex ^ (1 << i)
                if neighbour not in visited:
                    pending.append(neighbour)
            if not pending:
                return
            vertex = pending.popleft()

    def knn(self, query: FlattenedCurve) -> list[tuple[float, str]]:
        """Return up to n (distance, id) pairs of approximate neighbours, nearest first."""
        if self.n == 0:
            return []
        top: list[tuple[float, str]] = []
        for point in self._probe(query):
            dist = self.distance(query, point)
            if len(top) == self.n:
                if dist < top[-1][0]:
                    top.pop()
                else:
                    continue
            bisect.insort(top, (dist, point.id), key=lambda entry: entry[0])
        return top

    def range_search(self, query: FlattenedCurve) -> list[tuple[FlattenedCurve, float]]:
        """Return the probed points closer to ``query`` than the radius."""
        results = []
        for point in self._probe(query):
            dist = self.distance(query, point)
            if dist < self.r:
                results.append((point, dist))
        return results