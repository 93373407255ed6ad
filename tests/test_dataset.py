from curvesearch.curve import Curve, Point
from curvesearch.dataset import Dataset


def _dataset():
    return Dataset(
        [
            Curve("a", [Point([1.0, 10.0]), Point([2.0, 20.0])]),
            Curve("b", [Point([1.0, 30.0])]),
        ]
    )


def test_from_file(tmp_path):
    path = tmp_path / "data.tsv"
    path.write_text("x\t1\t2\ny\t3\n")
    dataset = Dataset.from_file(path)
    assert len(dataset) == 2
    assert [c.id for c in dataset] == ["x", "y"]


def test_flatten_keeps_time_axis():
    dataset = _dataset()
    flat = dataset.flatten()
    assert [f.id for f in flat] == ["a", "b"]
    assert flat[0].coordinates == [1.0, 10.0, 2.0, 20.0]
    assert dataset.curves[0].points[0].coordinates == [1.0, 10.0]


def test_erase_time_and_flatten():
    dataset = _dataset()
    flat = dataset.erase_time_and_flatten()
    assert flat[0].coordinates == [10.0, 20.0]
    assert flat[1].coordinates == [30.0]
    assert dataset.curves[0].points[1].coordinates == [20.0]


def test_erase_time_and_flatten_is_idempotent():
    dataset = _dataset()
    first = dataset.erase_time_and_flatten()
    second = dataset.erase_time_and_flatten()
    assert [f.coordinates for f in first] == [f.coordinates for f in second]