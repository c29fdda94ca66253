"""A growable text buffer with an explicit capacity."""

from __future__ import annotations


class DynamicString:
    """Mutable text with a capacity that counts room for a terminator.

    The capacity always exceeds the text length by at least one and grows
    by doubling, the way the underlying buffer would.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._chars: list[str] = []
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        """Size of the buffer, terminator included."""
        return self._capacity

    def reserve(self, new_capacity: int) -> bool:
        """Set the capacity; return False if the text would not fit in it."""
        if new_capacity <= 0:
            raise ValueError("capacity must be positive")
        if len(self._chars) > new_capacity - 1:
            return False
        self._capacity = new_capacity
        return True

    def push_back(self, c: str) -> None:
        """Append one character, doubling the capacity when full."""
        if not isinstance(c, str) or len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        if len(self._chars) >= self._capacity - 1:
            self.reserve(self._capacity * 2)
        self._chars.append(c)

    def pop_back(self) -> str | None:
        """Remove and return the last character, or None when empty."""
        if not self._chars:
            return None
        return self._chars.pop()

    def append(self, text: str) -> None:
        """Append text, growing to twice the capacity plus its length if needed."""
        if not text:
            return
        if self._capacity - 1 < len(self._chars) + len(text):
            self.reserve(self._capacity * 2 + len(text))
        self._chars.extend(text)

    def _check_position(self, pos: int) -> None:
        size = len(self._chars)
        if pos < 0 or (size and pos > size - 1) or (not size and pos != 0):
            raise IndexError(f"position {pos} out of range for length {size}")

    def insert(self, pos: int, text: str) -> None:
        """Insert text before the character at pos.

        pos must name an existing character (or be 0 on an empty string).
        """
        self._check_position(pos)
        tail = "".join(self._chars[pos:])
        del self._chars[pos:]
        self.append(text)
        self.append(tail)

    def replace(self, pos: int, length: int, text: str) -> None:
        """Replace up to length characters starting at pos with text.

        A length of zero leaves the string unchanged.
        """
        if not self._chars or pos < 0 or pos > len(self._chars) - 1:
            raise IndexError(f"position {pos} out of range for length {len(self)}")
        if length < 0:
            raise ValueError("length must not be negative")
        if length == 0:
            return
        if len(self._chars) + len(text) > self._capacity - 1 + length:
            self.reserve(self._capacity * 2 + len(text))
        tail = "".join(self._chars[pos + length:])
        del self._chars[pos:]
        self.append(text)
        self.append(tail)

    def replace_all(self, old: str, new: str) -> None:
        """Repeatedly replace the first occurrence of old with new until none is left.

        Each search starts again from the beginning of the text.
        """
        if not old:
            raise ValueError("old must not be empty")
        if old in new:
            raise ValueError("replacement contains the searched text and would never finish")
        while (index := str(self).find(old)) >= 0:
            self.replace(index, len(old), new)

    def clear(self) -> None:
        """Remove all text; the capacity is kept."""
        self._chars.clear()

    def shrink_to_fit(self) -> None:
        """Reduce the capacity to the text length plus the terminator."""
        if len(self._chars) >= self._capacity - 1:
            return
        self.reserve(len(self._chars) + 1)

    def is_empty(self) -> bool:
        """True when the text is empty."""
        return not self._chars

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"DynamicString({str(self)!r}, capacity={self._capacity})"