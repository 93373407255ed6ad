import math

from curvesearch.curve import Curve, Point
from curvesearch.grid import Grid


def make_curve(values):
    return Curve("g", [Point(v) for v in values])


def test_default_noise_within_truncated_interval():
    for _ in range(50):
        grid = Grid(3.7)
        assert 0.0 <= grid.noise <= 3.0


def test_fit_keeps_points_already_on_grid():
    curve = make_curve([[2.0, -3.0]])
    Grid(1.0, noise=0.0).fit(curve)
    assert curve.points[0].coordinates == [2.0, -3.0]


def test_fit_moves_points_onto_grid_nodes_nearby():
    original = [[0.37, 1.91], [4.2, -2.6], [10.05, 0.5001]]
    curve = make_curve(original)
    grid = Grid(0.75, noise=0.2)
    grid.fit(curve)
    for before, point in zip(original, curve.points):
        for b, a in zip(before, point.coordinates):
            cells = (a - grid.noise) / grid.grid_interval
            assert math.isclose(cells, round(cells), abs_tol=1e-9)
            assert abs(a - b) <= grid.grid_interval / 2 + 1e-9


def test_fit_is_idempotent():
    curve = make_curve([[0.37, 1.91], [4.2, -2.6]])
    grid = Grid(0.5, noise=0.1)
    grid.fit(curve)
    once = [list(p.coordinates) for p in curve.points]
    grid.fit(curve)
    for a, b in zip(once, curve.points):
        assert all(math.isclose(x, y, abs_tol=1e-9) for x, y in zip(a, b.coordinates))


def test_remove_consecutive_duplicates():
    curve = make_curve([[1.0], [1.0], [2.0], [2.0], [2.0], [1.0]])
    Grid(1.0, noise=0.0).remove_consecutive_duplicates(curve)
    assert [p.coordinates for p in curve.points] == [[1.0], [2.0], [1.0]]


def test_remove_consecutive_duplicates_on_empty_curve():
    curve = make_curve([])
    Grid(1.0, noise=0.0).remove_consecutive_duplicates(curve)
    assert curve.points == []


def test_fit_then_dedupe_merges_nearby_points():
    curve = make_curve([[0.1], [0.2], [3.0]])
    grid = Grid(1.0, noise=0.0)
    grid.fit(curve)
    grid.remove_consecutive_duplicates(curve)
    assert curve.size == 2
    assert curve.points[-1].coordinates == [3.0]