# curvesearch

Approximate nearest-neighbour search and clustering for time-series curves,
in pure Python with no dependencies outside the standard library.

Curves are read from plain text files. They can be indexed with
locality-sensitive hashing (LSH) or a randomized Hypercube projection. The
indexes answer nearest-neighbour and range queries, and an exhaustive search is
there to compare against. Curves or their flattened vectors can also be grouped
into clusters with a Lloyd's-style algorithm seeded by k-means++, with a
Silhouette evaluation and a text report.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Input format

Each line of an input file describes one curve: an identifier followed by the
curve's values, all separated by tabs.

```
curve_1	10.5	11.0	11.2	10.9
curve_2	8.1	8.4	8.0	7.7
```

Each value becomes a two-dimensional point `(t, y)`, with `t` counting from 1.
Identifiers must be unique; a repeated one raises `ValueError`. Reading stops
at the first empty line. A missing file raises `FileNotFoundError`.

```python
from curvesearch.dataset import Dataset

dataset = Dataset.from_file("input.tsv")
len(dataset)                        # number of curves
vectors = dataset.flatten()         # FlattenedCurve copies
values = dataset.erase_time_and_flatten()  # drops t in place, then flattens
```

`curvesearch.files.read_curves(path)` returns the list of `Curve` objects
directly.

## Curves

`curvesearch.curve` holds `Point`, `Curve` and `FlattenedCurve`. A `Curve`
has an `id` and a list of points; `flatten()` concatenates its coordinates
into a `FlattenedCurve`. Curves can be simplified in place with `filter`,
`min_max_filter`, `erase_time_axis` and `apply_padding`.
`curvesearch.grid.Grid` snaps a curve onto a randomly shifted grid (`fit`) and
collapses repeated consecutive points (`remove_consecutive_duplicates`).

## Distances

`curvesearch.metrics` provides:

- `point_distance(a, b)`: the Euclidean distance between two points.
- `flattened_distance(a, b)`: the Euclidean distance between two flattened
  curves of equal length.
- `curve_euclidean_distance(a, b)`: the mean point-to-point Euclidean distance
  over the common prefix of two curves.
- `discrete_frechet_distance(a, b)`: the discrete Fréchet distance.
- `optimal_traversal(a, b)`: the index pairs of an optimal discrete Fréchet
  coupling.

`Metric` (`EUCLIDEAN`, `DISCRETE_FRECHET`, `CONTINUOUS_FRECHET`) selects how an
LSH index preprocesses curves.

## Searching

```python
from curvesearch.bruteforce import bruteforce_nn
from curvesearch.dataset import Dataset
from curvesearch.lsh import LSH
from curvesearch.metrics import Metric, discrete_frechet_distance

data = Dataset.from_file("input.tsv")
queries = Dataset.from_file("queries.tsv")

index = LSH(data.curves, Metric.DISCRETE_FRECHET, num_tables=5, num_functions=4)
for query in queries:
    approx = index.nearest_neighbor(query)            # (distance, id)
    exact = bruteforce_nn(query, data, discrete_frechet_distance)
    nearby = index.range_search(query)                # [(Curve, distance), ...]
```

- `LSH(inputs, metric, num_tables, num_functions, radius, distance=...)`
  builds L hash tables over preprocessed curves. `Metric.CONTINUOUS_FRECHET`
  needs an explicit `distance` function, since none is included.
  `LSH.from_flattened(...)` indexes ready-made vectors, queried with
  `range_search_flattened`.
- `curvesearch.hypercube.Hypercube(dataset, distance, k, m, probes, n, r,
  seed=...)` projects flattened curves onto hypercube vertices. `knn(query)`
  returns up to `n` `(distance, id)` pairs, nearest first; `range_search(query)`
  returns points closer than `r`. `set_limits` changes the query limits.
- `curvesearch.bruteforce.bruteforce_nn(query, data, distance, best)` returns
  the exact `(distance, id)` nearest neighbour.

`curvesearch.files.write_query_result` and `curvesearch.files.write_summary`
append per-query results (`Query`, `Algorithm`, `Approximate Nearest
neighbor`, `True Nearest neighbor`, `distanceApproximate`, `distanceTrue`) and
the final averages (`tApproximateAverage`, `tTrueAverage`, `MAF`) to a text
file.

## Clustering

The configuration file holds `label: value` lines; a key left out keeps its
default (shown here):

```
number_of_clusters: 1
number_of_vector_hash_tables: 3
number_of_vector_hash_functions: 4
max_number_M_hypercube: 10
number_of_hypercube_dimensions: 3
number_of_probes: 2
```

```python
from curvesearch.cluster import run_cluster
from curvesearch.dataset import Dataset

dataset = Dataset.from_file("input.tsv")
clusterer = run_cluster(
    "cluster.conf",
    "clusters.txt",
    dataset,
    assignment="Classic",
    update="Mean_Vector",
    verbose=True,
    evaluation=True,
)
```

The assignment is one of `Classic`, `LSH`, `Hypercube` or `LSH_Frechet`; the
update is `Mean_Vector` (flattened curves, Euclidean distance) or
`Mean_Frechet` (curves, discrete Fréchet distance, mean curves along optimal
traversals). With `Mean_Frechet`, any assignment other than `Classic` uses an
LSH index over the discrete Fréchet distance. Any other value raises
`ValueError`.

The report is appended to the output file: the algorithm, each cluster's size
and centroid, and the clustering time. With `evaluation` it adds the
Silhouette of every cluster followed by the overall value; with `verbose` it
adds the members of each cluster.

The parts can be used separately: `curvesearch.clustering.Clusterer` (with
`AssignmentMethod` and `UpdateMethod`) runs the algorithm through
`perform_clustering()`, and `curvesearch.report` offers `silhouette`,
`format_vector` and `write_report`.

## Argument parsing

`curvesearch.cli` parses flag lists into dataclasses: `parse_lsh_args`,
`parse_hypercube_args`, `parse_cluster_args` and `parse_search_args`, raising
`UsageError` on malformed input. It also has the interactive prompts
`prompt_path`, `prompt_output_file` and `ask_user_to_repeat`.

## What the package does not do

- It installs no command-line programs; the argument parsers above are there
  for a program to use, but no entry point runs a search or a clustering job.
- It has no ready-made benchmark run that reads input and query files, times
  an index against the exhaustive search and writes the result file; that
  loop is left to the caller, using the pieces shown under *Searching*.
- It includes no continuous Fréchet distance; supply one to `LSH` through
  `distance` when using `Metric.CONTINUOUS_FRECHET`.