"""Silhouette evaluation and the text report of a clustering run."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from .clustering import AssignmentMethod, Clusterer, Item, UpdateMethod
from .curve import Curve

_SILHOUETTE_FORMAT = ".5g"


def _members_of(clusterer: Clusterer, centroid: Item) -> list[Item] | None:
    for candidate, members in clusterer.clusters:
        if candidate is centroid:
            return members
    return None


def _average_distance(clusterer: Clusterer, point: Item, members: Sequence[Item]) -> float:
    total = sum(clusterer.distance(point, other) for other in members)
    return total / len(members) if members else total


def silhouette(clusterer: Clusterer) -> tuple[list[float], float]:
    """Return the silhouette of every cluster and the overall silhouette."""
    per_cluster: list[float] = []
    overall = 0.0
    for centroid, members in clusterer.clusters:
        cluster_total = 0.0
        for point in members:
            a = _average_distance(clusterer, point, members)
            neighbour = clusterer.second_closest_centroid(centroid, point)
            others = None if neighbour is None else _members_of(clusterer, neighbour)
            if others is None:
                continue
            b = _average_distance(clusterer, point, others)
            si = (b - a) / max(a, b) if b != 0 else 0.0
            cluster_total += si
            overall += si
        if members:
            cluster_total /= len(members)
        per_cluster.append(cluster_total)
    overall /= len(clusterer.data)
    return per_cluster, overall


def _format_vector(values: Sequence[float], spec: str) -> str:
    if not values:
        return ""
    return "[ " + ", ".join(format(v, spec) for v in values) + " ]"


def format_vector(values: Sequence[float]) -> str:
    """Render values as ``[ a, b, c ]``; an empty sequence renders as nothing."""
    return _format_vector(values, "g")


def _format_centroid(centroid: Item) -> str:
    if isinstance(centroid, Curve):
        return "".join(
            f" Point( {format_vector(point.coordinates)} ) " for point in centroid.points
        )
    return format_vector(centroid.coordinates)


def _description(clusterer: Clusterer) -> str:
    if clusterer.update_method is UpdateMethod.MEAN_VECTOR:
        names = {
            AssignmentMethod.CLASSIC: "Classic",
            AssignmentMethod.LSH: "LSH",
            AssignmentMethod.HYPERCUBE: "Hypercube",
        }
        return f"ASSIGNMENT:{names[clusterer.assign_method]} UPDATE:Mean Vector"
    if clusterer.assign_method is AssignmentMethod.CLASSIC:
        return "ASSIGNMENT:Classic UPDATE:Mean Frechet"
    return "ASSIGNMENT:LSH Frechet UPDATE:Mean Frechet"


def write_report(
    clusterer: Clusterer,
    out_path: str | Path,
    verbose: bool = False,
    evaluation: bool = True,
) -> None:
    """Append the clusters, the run time and optionally silhouettes and members."""
    lines = [f"Algorithm: {_description(clusterer)}\n"]
    for index, (centroid, members) in enumerate(clusterer.clusters, start=1):
        lines.append(
            f"CLUSTER-{index} {{size: {len(members)}, centroid: "
            f"{_format_centroid(centroid)}}}\n"
        )
    lines.append(f"clustering_time: {clusterer.time_taken:g} sec\n")
    if evaluation:
        per_cluster, overall = silhouette(clusterer)
        rendered = _format_vector([*per_cluster, overall], _SILHOUETTE_FORMAT)
        lines.append(f"Silhouette: {rendered}\n")
    if verbose:
        lines.append("\n")
        for index, (_, members) in enumerate(clusterer.clusters, start=1):
            ids = "".join(f", {member.id}" for member in members)
            lines.append(f"CLUSTER-{index} {{centroid-{index}{ids} }}\n")
    try:
        with open(out_path, "a", encoding="utf-8") as out:
            out.write("".join(lines))
    except OSError as err:
        raise OSError(f"Exception during the opening of {out_path}") from err