"""Running a complete clustering job from a configuration file."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

from .clustering import AssignmentMethod, Clusterer, UpdateMethod
from .curve import FlattenedCurve
from .dataset import Dataset
from .files import read_cluster_config
from .hypercube import Hypercube
from .lsh import LSH
from .metrics import Metric, discrete_frechet_distance, flattened_distance
from .report import write_report

_UPDATES = {
    "Mean_Vector": UpdateMethod.MEAN_VECTOR,
    "Mean_Frechet": UpdateMethod.MEAN_FRECHET,
}
_ASSIGNMENTS = {
    "Classic": AssignmentMethod.CLASSIC,
    "LSH": AssignmentMethod.LSH,
    "LSH_Frechet": AssignmentMethod.LSH,
    "Hypercube": AssignmentMethod.HYPERCUBE,
}


def _mapped_to_data(
    search: Callable[[FlattenedCurve], Iterable[tuple[FlattenedCurve, float]]],
    data: list[FlattenedCurve],
) -> Callable[[FlattenedCurve], list[tuple[FlattenedCurve, float]]]:
    """Translate results over the index's own copies back to the clustered items."""
    by_id = {item.id: item for item in data}

    def run(query: FlattenedCurve) -> list[tuple[FlattenedCurve, float]]:
        return [(by_id[point.id], dist) for point, dist in search(query) if point.id in by_id]

    return run


def run_cluster(
    config_path: str | Path,
    out_path: str | Path,
    dataset: Dataset,
    assignment: str,
    update: str,
    verbose: bool = False,
    evaluation: bool = True,
) -> Clusterer:
    """Cluster the dataset as configured, append the report and return the clusterer."""
    config = read_cluster_config(config_path)

    update_method = _UPDATES.get(update)
    if update_method is None:
        raise ValueError(
            "Error, Update Method should be one of the following:\n"
            "> Mean_Vector\n> Mean_Frechet\n."
        )
    assign_method = _ASSIGNMENTS.get(assignment)
    if assign_method is None:
        raise ValueError(
            "Error, Assignment Method should be one of the following:\n"
            "> Classic\n> LSH\n> Hypercube\n> LSH_Frechet\n."
        )

    num_clusters = config.number_of_clusters
    if update_method is UpdateMethod.MEAN_VECTOR:
        data = dataset.erase_time_and_flatten()
        range_search = None
        if assign_method is AssignmentMethod.LSH:
            index = LSH.from_flattened(
                data,
                Metric.EUCLIDEAN,
                config.number_of_vector_hash_tables,
                config.number_of_vector_hash_functions,
            )
            range_search = index.range_search_flattened
        elif assign_method is AssignmentMethod.HYPERCUBE:
            cube = Hypercube(
                dataset,
                flattened_distance,
                config.number_of_hypercube_dimensions,
                config.max_number_m_hypercube,
                config.number_of_probes,
            )
            range_search = _mapped_to_data(cube.range_search, data)
        clusterer = Clusterer(
            num_clusters, data, flattened_distance, assign_method, update_method, range_search
        )
    else:
        range_search = None
        if assign_method is not AssignmentMethod.CLASSIC:
            index = LSH(
                dataset.curves,
                Metric.DISCRETE_FRECHET,
                config.number_of_vector_hash_tables,
                config.number_of_vector_hash_functions,
            )
            range_search = index.range_search
        clusterer = Clusterer(
            num_clusters,
            dataset.curves,
            discrete_frechet_distance,
            assign_method,
            update_method,
            range_search,
        )

    clusterer.perform_clustering()
    write_report(clusterer, out_path, verbose, evaluation)
    return clusterer