import pytest

from curvesearch.files import (
    ClusterConfig,
    read_cluster_config,
    read_curves,
    write_query_result,
    write_summary,
)


def test_read_curves_zips_time_axis(tmp_path):
    path = tmp_path / "data.tsv"
    path.write_text("a\t1.5\t2\nb\t3\n")
    curves = read_curves(path)
    assert [c.id for c in curves] == ["a", "b"]
    assert [p.coordinates for p in curves[0].points] == [[1.0, 1.5], [2.0, 2.0]]
    assert [p.coordinates for p in curves[1].points] == [[1.0, 3.0]]


def test_read_curves_stops_at_blank_line(tmp_path):
    path = tmp_path / "data.tsv"
    path.write_text("a\t1\n\nb\t2\n")
    assert [c.id for c in read_curves(path)] == ["a"]


def test_read_curves_tolerates_trailing_tab_and_crlf(tmp_path):
    path = tmp_path / "data.tsv"
    path.write_bytes(b"a\t4\t5\t\r\nb\t6\r\n")
    curves = read_curves(path)
    assert [[p.coordinates[1] for p in c.points] for c in curves] == [[4.0, 5.0], [6.0]]


def test_read_curves_rejects_duplicates(tmp_path):
    path = tmp_path / "data.tsv"
    path.write_text("a\t1\na\t2\n")
    with pytest.raises(ValueError, match="duplicate IDs: a"):
        read_curves(path)


def test_read_curves_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_curves(tmp_path / "missing.tsv")


def test_write_query_result_format(tmp_path):
    out = tmp_path / "out.txt"
    write_query_result("q1", (1.5, "a"), (0.5, "b"), out, "LSH")
    assert out.read_text() == (
        "Query: q1\n"
        "Algorithm: LSH\n"
        "Approximate Nearest neighbor: a\n"
        "True Nearest neighbor: b\n"
        "distanceApproximate: 1.5\n"
        "distanceTrue: 0.5\n\n"
    )


def test_write_query_result_default_method_and_append(tmp_path):
    out = tmp_path / "out.txt"
    write_query_result("q1", (1.0, "a"), (1.0, "a"), out)
    write_query_result("q2", (2.0, "b"), (2.0, "b"), out)
    text = out.read_text()
    assert text.count("Algorithm: LSH_Frechet_Continuous\n") == 2
    assert text.index("Query: q1") < text.index("Query: q2")


def test_write_summary(tmp_path):
    out = tmp_path / "out.txt"
    write_summary(0.25, 0.5, 2.0, out)
    assert out.read_text() == "tApproximateAverage: 0.25\ntTrueAverage: 0.5\nMAF: 2\n"


def test_read_cluster_config_values(tmp_path):
    path = tmp_path / "cluster.conf"
    path.write_text(
        "number_of_clusters: 7\n"
        "number_of_vector_hash_tables: 5\n"
        "number_of_probes: 9\n"
        "unknown_key: 12\n"
    )
    config = read_cluster_config(path)
    assert config.number_of_clusters == 7
    assert config.number_of_vector_hash_tables == 5
    assert config.number_of_probes == 9
    assert config.number_of_vector_hash_functions == ClusterConfig().number_of_vector_hash_functions


def test_read_cluster_config_defaults(tmp_path):
    path = tmp_path / "cluster.conf"
    path.write_text("")
    assert read_cluster_config(path) == ClusterConfig()


def test_read_cluster_config_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_cluster_config(tmp_path / "nope.conf")