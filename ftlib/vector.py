"""A growable array of non-None items with an explicit capacity."""

from __future__ import annotations

from typing import Any, Callable, Iterator


class Vector:
    """Ordered items with a capacity that doubles when full.

    None is never stored: pushing it is ignored.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._items: list[Any] = []
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        """Number of slots currently available."""
        return self._capacity

    def push_back(self, item: Any) -> None:
        """Append item, doubling the capacity when full; None is ignored."""
        if item is None:
            return
        if len(self._items) >= self._capacity:
            self.reserve(self._capacity * 2)
        self._items.append(item)

    def pop_back(self) -> Any:
        """Remove and return the last item, or None when empty."""
        if not self._items:
            return None
        return self._items.pop()

    def reset(self) -> None:
        """Remove every item; the capacity is kept."""
        self._items.clear()

    def is_empty(self) -> bool:
        """True when no items are stored."""
        return not self._items

    def reserve(self, new_capacity: int) -> bool:
        """Grow the capacity to new_capacity; return False if it is not larger."""
        if new_capacity <= self._capacity:
            return False
        self._capacity = new_capacity
        return True

    def shrink_to_fit(self) -> bool:
        """Reduce the capacity to the number of items.

        An empty vector keeps its capacity. Returns True when the capacity changed.
        """
        if not self._items or len(self._items) >= self._capacity:
            return False
        self._capacity = len(self._items)
        return True

    def last(self) -> Any:
        """Return the last item, or None when empty."""
        return self._items[-1] if self._items else None

    def for_each(self, func: Callable[[Any], None]) -> None:
        """Call func on every item in order."""
        for item in self._items:
            func(item)

    def map(self, func: Callable[[Any], Any]) -> Vector:
        """Return a new vector of func applied to every item.

        Results that are None are left out, as push_back ignores them.
        """
        result = Vector(max(len(self._items), 1))
        for item in self._items:
            result.push_back(func(item))
        return result

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, capacity={self._capacity})"