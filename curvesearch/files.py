"""Reading curve datasets and cluster configurations, and writing search results."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from .curve import Curve, Point

DEFAULT_METHOD = "LSH_Frechet_Continuous"

_CONFIG_LABELS = {
    "number_of_clusters:": "number_of_clusters",
    "number_of_vector_hash_tables:": "number_of_vector_hash_tables",
    "number_of_vector_hash_functions:": "number_of_vector_hash_functions",
    "max_number_M_hypercube:": "max_number_m_hypercube",
    "number_of_hypercube_dimensions:": "number_of_hypercube_dimensions",
    "number_of_probes:": "number_of_probes",
}


@dataclass
class ClusterConfig:
    """Parameters of a clustering run, as read from a configuration file."""

    number_of_clusters: int = 1
    number_of_vector_hash_tables: int = 3
    number_of_vector_hash_functions: int = 4
    max_number_m_hypercube: int = 10
    number_of_hypercube_dimensions: int = 3
    number_of_probes: int = 2


def _split_fields(line: str, sep: str) -> list[str]:
    """Split like repeated getline with a delimiter: no trailing empty field."""
    if not line:
        return []
    parts = line.split(sep)
    if parts[-1] == "":
        parts.pop()
    return parts


def _strtol(text: str) -> int:
    """Parse a leading base-10 integer, returning 0 when there is none."""
    text = text.lstrip()
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for ch in text:
        if not ch.isdigit():
            break
        digits += ch
    return sign * int(digits) if digits else 0


def _lines(path: str | Path) -> Iterator[str]:
    try:
        handle = open(path, encoding="utf-8")
    except FileNotFoundError as err:
        raise FileNotFoundError(f'File in path: "{path}" doesn\'t exist.') from err
    except OSError as err:
        raise OSError(f"Exception during the opening of {path}") from err
    with handle:
        for raw in handle:
            line = raw.rstrip("\n")
            if not line:
                return
            yield line


def _zip_with_time_axis(values: list[float]) -> list[Point]:
    return [Point([float(t), v]) for t, v in enumerate(values, start=1)]


def read_curves(path: str | Path) -> list[Curve]:
    """Read tab-separated curves (id followed by values) up to the first blank line."""
    seen: set[str] = set()
    curves: list[Curve] = []
    for line in _lines(path):
        fields = _split_fields(line, "\t")
        curve_id = fields[0] if fields else ""
        if curve_id in seen:
            raise ValueError(f"Error, input has duplicate IDs: {curve_id}")
        seen.add(curve_id)
        values: list[float] = []
        for token in fields[1:]:
            if token == "\r":
                break
            values.append(float(token))
        curves.append(Curve(curve_id, _zip_with_time_axis(values)))
    return curves


def _fmt(value: float) -> str:
    return format(value, "g")


def _append(out_path: str | Path, text: str) -> None:
    try:
        with open(out_path, "a", encoding="utf-8") as out:
            out.write(text)
    except OSError as err:
        raise OSError(f"Exception during the opening of {out_path}") from err


def write_query_result(
    query_id: str,
    approximate: tuple[float, str],
    true: tuple[float, str],
    out_path: str | Path,
    method: str = DEFAULT_METHOD,
) -> None:
    """Append the approximate and exact nearest neighbour of one query."""
    text = (
        f"Query: {query_id}\n"
        f"Algorithm: {method}\n"
        f"Approximate Nearest neighbor: {approximate[1]}\n"
        f"True Nearest neighbor: {true[1]}\n"
        f"distanceApproximate: {_fmt(approximate[0])}\n"
        f"distanceTrue: {_fmt(true[0])}\n\n"
    )
    _append(out_path, text)


def write_summary(
    approximate_time: float, true_time: float, maf: float, out_path: str | Path
) -> None:
    """Append the average query times and the maximum approximation factor."""
    text = (
        f"tApproximateAverage: {_fmt(approximate_time)}\n"
        f"tTrueAverage: {_fmt(true_time)}\n"
        f"MAF: {_fmt(maf)}\n"
    )
    _append(out_path, text)


def read_cluster_config(path: str | Path) -> ClusterConfig:
    """Read a cluster configuration; missing keys keep their defaults."""
    values: dict[str, int] = {}
    for line in _lines(path):
        fields = _split_fields(line, " ")
        if not fields:
            continue
        name = _CONFIG_LABELS.get(fields[0])
        for token in fields[1:]:
            if token == "\r":
                break
            if name is not None:
                values[name] = _strtol(token)
    return dataclasses.replace(ClusterConfig(), **values)