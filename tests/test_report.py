import pytest

from curvesearch.clustering import AssignmentMethod, Clusterer, UpdateMethod
from curvesearch.curve import Curve, FlattenedCurve, Point
from curvesearch.metrics import flattened_distance
from curvesearch.report import format_vector, silhouette, write_report


def _clusterer():
    a0 = FlattenedCurve("a0", [0.0])
    a2 = FlattenedCurve("a2", [2.0])
    b = FlattenedCurve("b", [10.0])
    clusterer = Clusterer(2, [a0, a2, b], flattened_distance)
    ctr_a = FlattenedCurve("ctr_a", [1.0])
    ctr_b = FlattenedCurve("ctr_b", [10.0])
    clusterer.centroids = [ctr_a, ctr_b]
    clusterer.clusters = [(ctr_a, [a0, a2]), (ctr_b, [b])]
    return clusterer


def test_format_vector_brackets_and_separators():
    assert format_vector([1.0, 2.5]) == "[ 1, 2.5 ]"


def test_format_vector_empty_is_empty():
    assert format_vector([]) == ""


def test_silhouette_singleton_cluster_is_one():
    per_cluster, _ = silhouette(_clusterer())
    assert per_cluster[1] == pytest.approx(1.0)


def test_silhouette_overall_is_weighted_mean_of_clusters():
    clusterer = _clusterer()
    per_cluster, overall = silhouette(clusterer)
    sizes = [len(members) for _, members in clusterer.clusters]
    weighted = sum(s * n for s, n in zip(per_cluster, sizes)) / sum(sizes)
    assert overall == pytest.approx(weighted)
    assert all(-1.0 <= s <= 1.0 for s in per_cluster)


def test_silhouette_has_one_value_per_cluster():
    per_cluster, _ = silhouette(_clusterer())
    assert len(per_cluster) == 2


def test_write_report_layout(tmp_path):
    out = tmp_path / "out.txt"
    write_report(_clusterer(), out, verbose=True, evaluation=True)
    lines = out.read_text().splitlines()
    assert lines[0] == "Algorithm: ASSIGNMENT:Classic UPDATE:Mean Vector"
    assert lines[1] == "CLUSTER-1 {size: 2, centroid: [ 1 ]}"
    assert lines[2] == "CLUSTER-2 {size: 1, centroid: [ 10 ]}"
    assert lines[3].startswith("clustering_time: ")
    assert lines[3].endswith(" sec")
    assert lines[4].startswith("Silhouette: [ ")
    assert lines[5] == ""
    assert lines[6] == "CLUSTER-1 {centroid-1, a0, a2 }"
    assert lines[7] == "CLUSTER-2 {centroid-2, b }"


def test_write_report_without_options(tmp_path):
    out = tmp_path / "out.txt"
    write_report(_clusterer(), out, verbose=False, evaluation=False)
    text = out.read_text()
    assert "Silhouette" not in text
    assert "centroid-1" not in text
    assert len(text.splitlines()) == 4


def test_write_report_appends(tmp_path):
    out = tmp_path / "out.txt"
    write_report(_clusterer(), out, False, False)
    write_report(_clusterer(), out, False, False)
    assert out.read_text().count("Algorithm: ") == 2


def test_write_report_curve_centroid_and_frechet_description(tmp_path):
    c1 = Curve("c1", [Point([1.0, 2.0]), Point([2.0, 3.0])])
    clusterer = Clusterer(
        1,
        [c1],
        lambda a, b: 0.0,
        AssignmentMethod.LSH,
        UpdateMethod.MEAN_FRECHET,
        range_search=lambda item: [],
    )
    clusterer.clusters = [(c1, [c1])]
    out = tmp_path / "out.txt"
    write_report(clusterer, out, False, False)
    lines = out.read_text().splitlines()
    assert lines[0] == "Algorithm: ASSIGNMENT:LSH Frechet UPDATE:Mean Frechet"
    assert lines[1] == (
        "CLUSTER-1 {size: 1, centroid:  Point( [ 1, 2 ] )  Point( [ 2, 3 ] ) }"
    )


def test_write_report_unwritable_path(tmp_path):
    with pytest.raises(OSError):
        write_report(_clusterer(), tmp_path / "missing" / "out.txt", False, False)