"""LSH hash functions, their amplified combination and a chained hash table."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .curve import FlattenedCurve
from .vectors import dot_product, normal, uniform_int, uniform_real

INT32_MAX = 2**31 - 1
UINT32_MASK = 0xFFFFFFFF
AMPLIFIED_MODULUS = UINT32_MASK - 4


class HashFunction:
    """h(p) = floor(p · v / w + t / w) with v normal and t uniform in [0, w]."""

    def __init__(self, window: int, dim: int) -> None:
        self.noise = uniform_real(0.0, float(window)) / float(window)
        self.normal_vector = [normal() / window for _ in range(dim)]

    def hash(self, query: Sequence[float]) -> int:
        return math.floor(dot_product(query, self.normal_vector) + self.noise)


class AmplifiedHash:
    """A random linear combination of several hash functions."""

    def __init__(self, num_functions: int, window: int, dim: int) -> None:
        self.random_vars: list[int] = []
        self.functions: list[HashFunction] = []
        for _ in range(num_functions):
            self.random_vars.append(uniform_int(0, INT32_MAX))
            self.functions.append(HashFunction(window, dim))

    def hash(self, query: Sequence[float]) -> int:
        m = AMPLIFIED_MODULUS
        result = 0
        for r, function in zip(self.random_vars, self.functions):
            # Accumulation wraps like 32-bit unsigned arithmetic.
            result = (result + (r % m) * (function.hash(query) % m)) & UINT32_MASK
        return result % m


class HashTable:
    """A fixed-size hash table with separate chaining of (id, curve) pairs."""

    def __init__(self, size: int, hash_function: AmplifiedHash) -> None:
        if size < 1:
            raise ValueError(f"hash table size must be positive, got {size}")
        self.hash_function = hash_function
        self.buckets: list[list[tuple[int, FlattenedCurve]]] = [[] for _ in range(size)]

    @property
    def table_size(self) -> int:
        return len(self.buckets)

    def hash(self, curve: FlattenedCurve) -> int:
        return self.hash_function.hash(curve.coordinates)

    def insert(self, curve: FlattenedCurve) -> None:
        ident = self.hash(curve)
        self.buckets[ident % len(self.buckets)].append((ident, curve))

    def bucket(self, index: int) -> list[tuple[int, FlattenedCurve]]:
        return self.buckets[index]