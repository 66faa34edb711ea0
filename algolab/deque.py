"""A double-ended queue with named back and front ends."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class LinkedDeque:
    """Double-ended queue; iteration runs from the back end to the front end."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def push_back(self, value: Any) -> None:
        """Add ``value`` at the back end."""
        self._items.appendleft(value)

    def push_front(self, value: Any) -> None:
        """Add ``value`` at the front end."""
        self._items.append(value)

    def _require_items(self) -> None:
        if not self._items:
            raise IndexError("deque is empty")

    def back(self) -> Any:
        """Return the value at the back end."""
        self._require_items()
        return self._items[0]

    def front(self) -> Any:
        """Return the value at the front end."""
        self._require_items()
        return self._items[-1]

    def pop_back(self) -> Any:
        """Remove and return the value at the back end."""
        self._require_items()
        return self._items.popleft()

    def pop_front(self) -> Any:
        """Remove and return the value at the front end."""
        self._require_items()
        return self._items.pop()

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def is_empty(self) -> bool:
        """Report whether the deque holds no values."""
        return not self._items

    def reverse(self) -> None:
        """Swap the two ends, reversing the order of the values."""
        self._items.reverse()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"LinkedDeque({list(self._items)!r})"