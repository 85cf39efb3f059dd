"""Bounded deque, bounded queue and ordered stream containers."""

from __future__ import annotations

from collections import deque

EMPTY = -1


def _check_capacity(k: int) -> int:
    if k < 0:
        raise ValueError(f"capacity must not be negative, got {k}")
    return k


class CircularDeque:
    """A double-ended queue holding at most ``k`` integers."""

    def __init__(self, k: int) -> None:
        self._capacity = _check_capacity(k)
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def insert_front(self, value: int) -> bool:
        """Add at the front; False when full."""
        if self.is_full():
            return False
        self._items.appendleft(value)
        return True

    def insert_last(self, value: int) -> bool:
        """Add at the back; False when full."""
        if self.is_full():
            return False
        self._items.append(value)
        return True

    def delete_front(self) -> bool:
        """Remove the front item; False when empty."""
        if self.is_empty():
            return False
        self._items.popleft()
        return True

    def delete_last(self) -> bool:
        """Remove the back item; False when empty."""
        if self.is_empty():
            return False
        self._items.pop()
        return True

    def front(self) -> int:
        """The front item, or -1 when empty."""
        return self._items[0] if self._items else EMPTY

    def rear(self) -> int:
        """The back item, or -1 when empty."""
        return self._items[-1] if self._items else EMPTY

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity


class CircularQueue:
    """A first-in first-out queue holding at most ``k`` integers."""

    def __init__(self, k: int) -> None:
        self._capacity = _check_capacity(k)
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, value: int) -> bool:
        """Add at the back; False when full."""
        if self.is_full():
            return False
        self._items.append(value)
        return True

    def dequeue(self) -> bool:
        """Remove the front item; False when empty."""
        if self.is_empty():
            return False
        self._items.popleft()
        return True

    def front(self) -> int:
        """The front item, or -1 when empty."""
        return self._items[0] if self._items else EMPTY

    def rear(self) -> int:
        """The back item, or -1 when empty."""
        return self._items[-1] if self._items else EMPTY

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity


class OrderedStream:
    """Accepts ``n`` keyed values in any order and releases them in key order."""

    def __init__(self, n: int) -> None:
        self._size = _check_capacity(n)
        self._slots = [""] * (n + 1)
        self._ptr = 1

    def insert(self, id_key: int, value: str) -> list[str]:
        """Store ``value`` under ``id_key`` (1 to n) and return the newly ready run."""
        if not 1 <= id_key <= self._size:
            raise IndexError(f"key {id_key} outside 1..{self._size}")
        self._slots[id_key] = value
        ready: list[str] = []
        while self._ptr <= self._size and self._slots[self._ptr]:
            ready.append(self._slots[self._ptr])
            self._ptr += 1
        return ready