"""k-means style clustering of vectors and curves with several assignment methods."""

from __future__ import annotations

import enum
import itertools
import sys
import time
from collections.abc import Callable, Iterable, Sequence
from typing import Union

from .binary_tree import CompleteBinaryTree
from .curve import Curve, FlattenedCurve, Point
from .metrics import optimal_traversal
from .vectors import add_vectors, uniform_int, uniform_real

Item = Union[Curve, FlattenedCurve]
Distance = Callable[[Item, Item], float]
RangeSearch = Callable[[Item], Iterable[tuple[Item, float]]]

PRUNING_STEP = 0.005
CONVERGENCE_THRESHOLD = 10.0
MAX_UNASSIGNED = 87

_names = itertools.count(1)


class AssignmentMethod(enum.Enum):
    CLASSIC = "Classic"
    LSH = "LSH"
    HYPERCUBE = "Hypercube"


class UpdateMethod(enum.Enum):
    MEAN_VECTOR = "Mean_Vector"
    MEAN_FRECHET = "Mean_Frechet"


def mean_vector(centroid: FlattenedCurve, points: Sequence[FlattenedCurve]) -> FlattenedCurve:
    """Return the mean of ``points``; a zero vector when there are none."""
    result = [0.0] * centroid.data_dimensions
    count = len(points)
    for point in points:
        result = add_vectors(result, [c / count for c in point.coordinates])
    return FlattenedCurve(f"centroid_{next(_names)}", result)


def mean_traversal(c1: Curve, c2: Curve) -> Curve:
    """Return the curve of midpoints along an optimal discrete Fréchet coupling."""
    points = [
        Point(
            [
                v / 2
                for v in add_vectors(
                    c1.coordinates_of_point(i), c2.coordinates_of_point(j)
                )
            ]
        )
        for i, j in optimal_traversal(c1, c2)
    ]
    return Curve(f"ctr_{next(_names)}", points)


def _post_order(tree: CompleteBinaryTree[Curve], node: int) -> Curve | None:
    if tree.is_leaf(node):
        return tree[node]
    left = _post_order(tree, tree.left_child(node))
    right_node = tree.right_child(node)
    right = None if tree.is_empty(right_node) else _post_order(tree, right_node)
    if left is None:
        result = None
    elif right is None:
        result = left
    else:
        result = mean_traversal(left, right)
    tree[node] = None if result is left else result
    return result


def mean_of_curves(curves: Sequence[Curve]) -> Curve:
    """Combine curves pairwise, bottom-up over a complete binary tree, into a mean curve."""
    tree = CompleteBinaryTree(list(curves))
    result = _post_order(tree, tree.root)
    if result is None:
        raise ValueError("no curves to average")
    return result.copy()


def _mean_curve(centroid: Curve, points: Sequence[Curve]) -> Curve:
    ideal = len(centroid.points)
    if len(points) > 1:
        mean = mean_of_curves(points)
        threshold = PRUNING_STEP
        # Curves of fewer than three points cannot be pruned any further.
        while len(mean.points) > max(ideal, 2):
            mean.filter(threshold)
            threshold += PRUNING_STEP
        return mean
    if len(points) == 1:
        return points[0].copy()
    return centroid.copy()


class Clusterer:
    """Clusters items around centroids until the centroids stop moving.

    The LSH and hypercube assignments need ``range_search``, which returns
    (item, distance) pairs of indexed items near a centroid.
    """

    def __init__(
        self,
        num_clusters: int,
        data: Iterable[Item],
        distance: Distance,
        assign_method: AssignmentMethod = AssignmentMethod.CLASSIC,
        update_method: UpdateMethod = UpdateMethod.MEAN_VECTOR,
        range_search: RangeSearch | None = None,
    ) -> None:
        self.data: list[Item] = list(data)
        if num_clusters < 1:
            raise ValueError("the number of clusters must be positive")
        if not self.data:
            raise ValueError("cannot cluster an empty dataset")
        if assign_method is not AssignmentMethod.CLASSIC and range_search is None:
            raise ValueError(f"{assign_method.value} assignment needs a range search")
        self.num_clusters = num_clusters
        self.distance = distance
        self.assign_method = assign_method
        self.update_method = update_method
        self.range_search = range_search
        self.centroids: list[Item] = []
        self.clusters: list[tuple[Item, list[Item]]] = []
        self.time_taken = 0.0

    def _min_distance(self, point: Item, history: dict[tuple[str, str], float]) -> float:
        best = sys.float_info.max
        for centroid in self.centroids:
            key = (point.id, centroid.id)
            dist = history.get(key)
            if dist is None:
                dist = self.distance(point, centroid)
                history[key] = dist
            if dist < best:
                best = dist
        return best

    def _initialize_centroids(self) -> None:
        first = self.data[uniform_int(0, len(self.data) - 1)]
        self.centroids = [first.copy()]
        history: dict[tuple[str, str], float] = {}
        while len(self.centroids) < self.num_clusters:
            distances = [(p, self._min_distance(p, history)) for p in self.data]
            largest = max(0.0, *(d for _, d in distances))
            if not largest > 0:
                raise ValueError(
                    f"cannot pick {self.num_clusters} distinct centroids from the data"
                )
            weights = [(p, (d / largest) ** 2) for p, d in distances]
            total = sum(w for _, w in weights)
            pick = uniform_real(0.0, 100.0)
            cumulative = 0.0
            for point, weight in weights:
                cumulative += weight / total * 100
                if pick < cumulative:
                    self.centroids.append(point.copy())
                    break

    def _nearest(self, point: Item) -> int:
        best_index, best = 0, sys.float_info.max
        for i, centroid in enumerate(self.centroids):
            dist = self.distance(point, centroid)
            if dist < best:
                best_index, best = i, dist
        return best_index

    def _assign_exact(self) -> None:
        groups: list[tuple[Item, list[Item]]] = [(c, []) for c in self.centroids]
        for point in self.data:
            groups[self._nearest(point)][1].append(point)
        self.clusters = groups

    def _assign_reverse(self) -> None:
        groups: list[tuple[Item, list[Item]]] = [(c, []) for c in self.centroids]
        unassigned = {id(p): p for p in self.data}
        min_unassigned = min(len(self.data), MAX_UNASSIGNED)
        while len(unassigned) >= min_unassigned:
            round_best: dict[int, tuple[int, float]] = {}
            for index, (centroid, _) in enumerate(groups):
                for point, dist in self.range_search(centroid):
                    key = id(point)
                    if key not in unassigned:
                        continue
                    current = round_best.get(key)
                    if current is None or current[1] > dist:
                        round_best[key] = (index, dist)
            for key, (index, _) in round_best.items():
                groups[index][1].append(unassigned.pop(key))
            assigned = len(round_best)
            if assigned == 0 or assigned < self.num_clusters // 2:
                break
        for point in unassigned.values():
            groups[self._nearest(point)][1].append(point)
        self.clusters = groups

    def _update(self) -> float:
        new_centroid = (
            mean_vector if self.update_method is UpdateMethod.MEAN_VECTOR else _mean_curve
        )
        largest = -1.0
        centroids = []
        for centroid, points in self.clusters:
            moved = new_centroid(centroid, points)
            centroids.append(moved)
            shift = self.distance(centroid, moved)
            if shift > largest:
                largest = shift
        self.centroids = centroids
        return largest

    def perform_clustering(self) -> list[tuple[Item, list[Item]]]:
        """Run the clustering, record its time and return (centroid, members) pairs."""
        start = time.perf_counter()
        self._initialize_centroids()
        assign = (
            self._assign_exact
            if self.assign_method is AssignmentMethod.CLASSIC
            else self._assign_reverse
        )
        while True:
            assign()
            if self._update() <= CONVERGENCE_THRESHOLD:
                break
        self.time_taken = time.perf_counter() - start
        return self.clusters

    def second_closest_centroid(self, current: Item, query: Item) -> Item | None:
        """Return the centroid nearest to ``query`` other than ``current``."""
        best: Item | None = None
        best_dist = sys.float_info.max
        for centroid, _ in self.clusters:
            if centroid is current:
                continue
            dist = self.distance(query, centroid)
            if dist < best_dist:
                best, best_dist = centroid, dist
        return best