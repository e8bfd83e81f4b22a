"""Spans of an input string, measured in UTF-8 bytes."""

from __future__ import annotations

from typing import Iterator

from .position import Position

__all__ = ["Span"]


def _is_boundary(data: bytes, index: int) -> bool:
    if index < 0 or index > len(data):
        return False
    return index == len(data) or (data[index] & 0xC0) != 0x80


class Span:
    """A byte range ``start``..``end`` over a string.

    Both ends lie on code point boundaries of the UTF-8 encoded input. Two
    spans are equal only when they cover the same range of the very same
    input object.
    """

    __slots__ = ("input", "start", "end", "_data")

    def __init__(self, input: str, start: int, end: int) -> None:
        data = input.encode("utf-8")
        if start > end or not _is_boundary(data, start) or not _is_boundary(data, end):
            raise ValueError(f"{start}..{end} is not a valid span of the input")
        self.input = input
        self.start = start
        self.end = end
        self._data = data

    def start_pos(self) -> Position:
        """Return the position where the span starts."""
        return Position._unchecked(self.input, self.start, self._data)

    def end_pos(self) -> Position:
        """Return the position where the span ends."""
        return Position._unchecked(self.input, self.end, self._data)

    def split(self) -> tuple[Position, Position]:
        """Return the start and end positions as a pair."""
        return self.start_pos(), self.end_pos()

    def as_str(self) -> str:
        """Return the text the span covers."""
        return self._data[self.start : self.end].decode("utf-8")

    def lines(self) -> Iterator[str]:
        """Yield every line that the span covers at least in part."""
        pos = self.start
        while pos <= self.end:
            cursor = Position._unchecked(self.input, pos, self._data)
            if cursor.at_end():
                return
            yield cursor.line_of()
            pos = cursor.find_line_end()

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        return f"Span(str={self.as_str()!r}, start={self.start}, end={self.end})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return (
            self.input is other.input
            and self.start == other.start
            and self.end == other.end
        )

    def __hash__(self) -> int:
        return hash((id(self.input), self.start, self.end))