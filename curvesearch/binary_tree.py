"""A complete binary tree stored in an array, with the given items as leaves."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class CompleteBinaryTree(Generic[T]):
    """Array-backed complete binary tree whose last level holds the leaves.

    Internal nodes start out empty (``None``); reading an index past the end
    of the tree also gives ``None``.
    """

    root = 0

    def __init__(self, leaves: Sequence[T]) -> None:
        count = len(leaves)
        if count < 1:
            raise ValueError("a complete binary tree needs at least one leaf")
        height = math.ceil(math.log2(count)) + 1
        self.first_leaf = 2**height // 2 - 1
        self.size = self.first_leaf + count
        self._items: list[T | None] = [None] * self.first_leaf + list(leaves)

    def is_leaf(self, index: int) -> bool:
        return index >= self.first_leaf

    def is_internal(self, index: int) -> bool:
        return index < self.first_leaf

    def is_empty(self, index: int) -> bool:
        return index >= self.size

    def left_child(self, index: int) -> int:
        return 2 * index + 1

    def right_child(self, index: int) -> int:
        return 2 * index + 2

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index: int) -> T | None:
        if 0 <= index < self.size:
            return self._items[index]
        return None

    def __setitem__(self, index: int, item: T | None) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"node {index} is outside the tree")
        self._items[index] = item