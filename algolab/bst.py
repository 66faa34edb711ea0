"""An unbalanced binary search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    value: Any
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """Binary search tree; equal values go to the right subtree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for value in values:
            self.add(value)

    def add(self, value: Any) -> None:
        """Insert ``value`` into the tree."""
        node = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def search(self, key: Any) -> Any | None:
        """Return the stored value equal to ``key``, or None if absent."""
        current = self._root
        while current is not None:
            if current.value == key:
                return current.value
            current = current.left if key < current.value else current.right
        return None

    def _require_root(self) -> _Node:
        if self._root is None:
            raise ValueError("tree is empty")
        return self._root

    def min(self) -> Any:
        """Return the smallest value."""
        current = self._require_root()
        while current.left is not None:
            current = current.left
        return current.value

    def max(self) -> Any:
        """Return the largest value."""
        current = self._require_root()
        while current.right is not None:
            current = current.right
        return current.value

    def __iter__(self) -> Iterator[Any]:
        pending: list[_Node] = []
        current = self._root
        while pending or current is not None:
            while current is not None:
                pending.append(current)
                current = current.left
            current = pending.pop()
            yield current.value
            current = current.right

    def __contains__(self, key: Any) -> bool:
        current = self._root
        while current is not None:
            if current.value == key:
                return True
            current = current.left if key < current.value else current.right
        return False

    def __len__(self) -> int:
        return self._size