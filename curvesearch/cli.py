"""Command-line argument parsing and interactive prompts."""

from __future__ import annotations

import contextlib
import os
import re
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

LSH_USAGE = (
    "Usage: ./lsh –i <input file> –q <query file> –k <int> M <int> -ο <output file> "
    "-Ν <number of nearest> -R <radius>"
)
HYPERCUBE_USAGE = (
    "Usage: ./cube –i <input file> –q <query file> –k <int> -M <int> -probes <int> "
    "-ο <output file> -Ν <number of nearest> -R <radius>"
)
CLUSTER_USAGE = (
    "Usage ./cluster –i <input file> –c <configuration file> -o <output file>"
    "-update <Mean_Frechet or Mean_Vector> -assignment <Classic or LSH or Hypercube "
    "or LSH_Frechet>-complete <optional> -silhouette <optional>"
)
SEARCH_USAGE = (
    "Usage: ./search –i <input file> –q <query file> -L <int> –k <int> -M <int> "
    "-probes <int> -ο <output file> -algorithm <LSH or Hypercube or Frechet> "
    "-metric <discrete or continuous | only for –algorithm Frechet> -delta <double>"
)

ASSIGNMENTS = ("Classic", "LSH", "Hypercube", "LSH_Frechet")
UPDATES = ("Mean_Frechet", "Mean_Vector")

_DIGITS = frozenset("0123456789")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class UsageError(Exception):
    """Raised when command-line arguments are malformed or out of range."""


@dataclass
class LshArgs:
    input_file: str = ""
    query_file: str = ""
    output_file: str = ""
    k: int = 4
    num_tables: int = 5
    nearest: int = 1
    radius: int = 10000


@dataclass
class HypercubeArgs:
    input_file: str = ""
    query_file: str = ""
    output_file: str = ""
    k: int = 14
    m: int = 10
    probes: int = 2
    nearest: int = 1
    radius: int = 10000


@dataclass
class ClusterArgs:
    input_file: str = ""
    config_file: str = ""
    output_file: str = ""
    update: str = ""
    assignment: str = ""
    silhouette: bool = False
    complete: bool = False


@dataclass
class SearchArgs:
    input_file: str = ""
    query_file: str = ""
    output_file: str = ""
    num_tables: int = 5
    delta: float = 0.5
    k_lsh: int = 5
    k_hc: int = 14
    m: int = 10
    probes: int = 2
    algorithm: str = ""
    metric: str = ""


def is_uint(text: str) -> bool:
    """Tell whether ``text`` consists of decimal digits only."""
    return all(ch in _DIGITS for ch in text)


def _to_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _pairs(argv: Sequence[str], max_args: int, usage: str) -> Iterator[tuple[str, str]]:
    count = len(argv) + 1
    if count > max_args or count % 2 == 0:
        raise UsageError(usage)
    return zip(argv[0::2], argv[1::2])


def parse_lsh_args(argv: Sequence[str]) -> LshArgs:
    """Parse LSH program flags; raise UsageError on bad input."""
    args = LshArgs()
    for flag, value in _pairs(argv, 15, LSH_USAGE):
        numeric = is_uint(value)
        if flag == "-i" and not numeric:
            args.input_file = value
        elif flag == "-q" and not numeric:
            args.query_file = value
        elif flag == "-o" and not numeric:
            args.output_file = value
        elif flag == "-k" and numeric:
            args.k = _to_int(value)
        elif flag == "M" and numeric:
            args.num_tables = _to_int(value)
        elif flag == "-N" and numeric:
            args.nearest = _to_int(value)
        elif flag == "-R" and numeric:
            args.radius = _to_int(value)
    if args.k == 0:
        raise UsageError("Error, number of hash functions must be a positive integer.")
    if args.num_tables == 0:
        raise UsageError(
            "Error, number amplified hash functions must be a positive integer."
        )
    if args.nearest == 0:
        raise UsageError(
            "Error, number of nearest neighbours must be a positive integer."
        )
    if args.radius == 0:
        raise UsageError("Error, radius must be a positive integer.")
    return args


def parse_hypercube_args(argv: Sequence[str]) -> HypercubeArgs:
    """Parse hypercube program flags; raise UsageError on bad input."""
    args = HypercubeArgs()
    for flag, value in _pairs(argv, 17, HYPERCUBE_USAGE):
        numeric = is_uint(value)
        if flag == "-i" and not numeric:
            args.input_file = value
        elif flag == "-q" and not numeric:
            args.query_file = value
        elif flag == "-o" and not numeric:
            args.output_file = value
        elif flag == "-k" and numeric:
            args.k = _to_int(value)
        elif flag == "-M" and numeric:
            args.m = _to_int(value)
        elif flag == "-N" and numeric:
            args.nearest = _to_int(value)
        elif flag == "-R" and numeric:
            args.radius = _to_int(value)
        elif flag == "-probes" and numeric:
            args.probes = _to_int(value)
    if args.k == 0:
        raise UsageError(
            "Error, number of *Projected Dimensions* must be a positive integer."
        )
    if args.m == 0:
        raise UsageError("Error, max points to be checked must be a positive integer.")
    if args.probes == 0:
        raise UsageError(
            "Error, max vertices to be checked must be a positive integer."
        )
    if args.nearest == 0:
        raise UsageError(
            "Error, number of nearest neighbours must be a positive integer."
        )
    if args.radius == 0:
        raise UsageError("Error, radius must be a positive integer.")
    return args


def parse_cluster_args(argv: Sequence[str]) -> ClusterArgs:
    """Parse clustering program flags; raise UsageError on bad input."""
    if len(argv) + 1 > 13:
        raise UsageError(CLUSTER_USAGE)
    args = ClusterArgs()
    valued = {"-i", "-c", "-o", "-assignment", "-update"}
    for i, flag in enumerate(argv):
        value = argv[i + 1] if i + 1 < len(argv) else None
        if flag in valued and value is None:
            raise UsageError(CLUSTER_USAGE)
        text = value if value is not None else ""
        numeric = is_uint(text)
        if flag == "-i" and not numeric:
            args.input_file = text
        elif flag == "-c" and not numeric:
            args.config_file = text
        elif flag == "-o" and not numeric:
            args.output_file = text
        elif flag == "-assignment" and not numeric:
            args.assignment = text
            if text not in ASSIGNMENTS:
                raise UsageError(CLUSTER_USAGE)
        elif flag == "-update" and not numeric:
            args.update = text
            if text not in UPDATES:
                raise UsageError(CLUSTER_USAGE)
        elif flag == "-silhouette":
            args.silhouette = True
        elif flag == "-complete":
            args.complete = True
    return args


def parse_search_args(argv: Sequence[str]) -> SearchArgs:
    """Parse search program flags; raise UsageError on a bad argument count."""
    args = SearchArgs()
    for flag, value in _pairs(argv, 17, SEARCH_USAGE):
        numeric = is_uint(value)
        if flag == "-i" and not numeric:
            args.input_file = value
        elif flag == "-q" and not numeric:
            args.query_file = value
        elif flag == "-algorithm" and not numeric:
            args.algorithm = value
        elif flag == "-metric" and not numeric:
            args.metric = value
        elif flag == "-delta" and not numeric:
            args.delta = float(_to_int(value))
        elif flag == "-o" and not numeric:
            args.output_file = value
        elif flag == "-k" and numeric:
            args.k_lsh = _to_int(value)
            args.k_hc = args.k_lsh
        elif flag == "-M" and numeric:
            args.m = _to_int(value)
        elif flag == "-L" and numeric:
            args.num_tables = _to_int(value)
        elif flag == "-probes" and numeric:
            args.probes = _to_int(value)
    return args


def _read_token() -> str:
    while True:
        line = sys.stdin.readline()
        if not line:
            raise EOFError("no more input")
        tokens = line.split()
        if tokens:
            return tokens[0]


def prompt_path(mode: str) -> str:
    """Ask the user for the path of ``mode`` and return it."""
    print(f"Enter the path of the {mode}:")
    return _read_token()


def prompt_output_file() -> str:
    """Ask for an output path and remove any existing file there."""
    print("Enter the path of the output file:")
    path = _read_token()
    with contextlib.suppress(OSError):
        os.remove(path)
    return path


def ask_user_to_repeat() -> bool:
    """Ask until the user answers y or n; return True for y."""
    while True:
        print("\nRepeat the process with another query file?")
        print('Type "y" if YES, or "n" if NO.')
        answer = _read_token()
        if answer == "y":
            return True
        if answer == "n":
            return False