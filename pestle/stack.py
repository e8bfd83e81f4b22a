"""A stack that can be rewound to earlier snapshots."""

from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

__all__ = ["Stack"]

T = TypeVar("T")


class _Op(Enum):
    PUSH = "push"
    POP = "pop"


class Stack(Generic[T]):
    """A stack that logs its operations so it can be restored to a snapshot."""

    def __init__(self) -> None:
        self._ops: list[tuple[_Op, T]] = []
        self._cache: list[T] = []
        self._snapshots: list[int] = []

    def is_empty(self) -> bool:
        """Tell whether the stack holds no elements."""
        return not self._cache

    def peek(self) -> T | None:
        """Return the top element, or ``None`` when the stack is empty."""
        return self._cache[-1] if self._cache else None

    def push(self, elem: T) -> None:
        """Push ``elem`` onto the stack."""
        self._ops.append((_Op.PUSH, elem))
        self._cache.append(elem)

    def pop(self) -> T | None:
        """Remove and return the top element, or ``None`` when empty."""
        if not self._cache:
            return None
        elem = self._cache.pop()
        self._ops.append((_Op.POP, elem))
        return elem

    def __len__(self) -> int:
        return len(self._cache)

    def __getitem__(self, index):
        return self._cache[index]

    def snapshot(self) -> None:
        """Record the current state so that ``restore`` can return to it."""
        self._snapshots.append(len(self._ops))

    def clear_snapshot(self) -> None:
        """Forget the most recent snapshot, keeping the current state."""
        if self._snapshots:
            self._snapshots.pop()

    def restore(self) -> None:
        """Rewind to the most recent snapshot, or to empty when there is none."""
        if not self._snapshots:
            self._cache.clear()
            self._ops.clear()
            return
        index = self._snapshots.pop()
        for op, elem in reversed(self._ops[index:]):
            if op is _Op.PUSH:
                self._cache.pop()
            else:
                self._cache.append(elem)
        del self._ops[index:]

    def __repr__(self) -> str:
        return f"Stack({self._cache!r})"