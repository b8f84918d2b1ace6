"""A stack that reports its minimum in constant time."""

from __future__ import annotations

__all__ = ["MinStack"]


class MinStack:
    """Stack of integers tracking the current minimum alongside each entry."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def push(self, val: int) -> None:
        """Push a value."""
        current_min = val if not self._items else min(val, self._items[-1][1])
        self._items.append((val, current_min))

    def pop(self) -> int:
        """Remove and return the top value; IndexError if empty."""
        if not self._items:
            raise IndexError("pop from empty MinStack")
        return self._items.pop()[0]

    def top(self) -> int:
        """Return the top value; IndexError if empty."""
        if not self._items:
            raise IndexError("top of empty MinStack")
        return self._items[-1][0]

    def get_min(self) -> int:
        """Return the smallest value on the stack; IndexError if empty."""
        if not self._items:
            raise IndexError("minimum of empty MinStack")
        return self._items[-1][1]

    def __len__(self) -> int:
        return len(self._items)