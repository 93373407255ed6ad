[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "curvesearch"
version = "0.1.0"
description = "Approximate nearest-neighbour search and clustering of time-series curves with LSH, Hypercube and discrete Fréchet distance"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "time series",
    "curves",
    "frechet",
    "locality sensitive hashing",
    "lsh",
    "hypercube",
    "nearest neighbour",
    "clustering",
    "k-means",
    "silhouette",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["curvesearch"]

[tool.hatch.build.targets.sdist]
include = ["curvesearch", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
