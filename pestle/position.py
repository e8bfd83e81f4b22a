"""Cursor positions inside an input string, measured in UTF-8 bytes."""

from __future__ import annotations

from typing import Callable, Iterable

__all__ = ["Position"]

_MAX_UTF8_WIDTH = 4


def _is_boundary(data: bytes, index: int) -> bool:
    """Tell whether ``index`` falls on a code point boundary of ``data``."""
    if index < 0 or index > len(data):
        return False
    return index == len(data) or (data[index] & 0xC0) != 0x80


class Position:
    """A cursor into a string that offers the primitives of a hand-written parser.

    ``pos`` is a byte offset into the UTF-8 encoding of ``input`` and always
    lies on a code point boundary. Two positions are only comparable when they
    refer to the very same input object.
    """

    __slots__ = ("input", "pos", "_data")

    def __init__(self, input: str, pos: int) -> None:
        data = input.encode("utf-8")
        if not _is_boundary(data, pos):
            raise ValueError(f"{pos} is not a valid position in the input")
        self.input = input
        self.pos = pos
        self._data = data

    @classmethod
    def _unchecked(cls, input: str, pos: int, data: bytes) -> Position:
        position = cls.__new__(cls)
        position.input = input
        position.pos = pos
        position._data = data
        return position

    @classmethod
    def from_start(cls, input: str) -> Position:
        """Create a position at the start of ``input``."""
        return cls._unchecked(input, 0, input.encode("utf-8"))

    def copy(self) -> Position:
        """Return an independent cursor at the same place."""
        return Position._unchecked(self.input, self.pos, self._data)

    def span(self, other: Position):
        """Create a span from this position to ``other``."""
        if self.input is not other.input:
            raise ValueError("span created from positions from different inputs")
        from .span import Span

        return Span(self.input, self.pos, other.pos)

    def line_col(self) -> tuple[int, int]:
        """Return the 1-based line and column of this position.

        ``\\r\\n`` and ``\\n`` end a line; a lone ``\\r`` counts as a column.
        """
        before = self._data[: self.pos].decode("utf-8").replace("\r\n", "\n")
        line = before.count("\n") + 1
        column = len(before) - (before.rfind("\n") + 1) + 1
        return line, column

    def line_of(self) -> str:
        """Return the whole line, newline included, that holds this position."""
        return self._data[self.find_line_start() : self.find_line_end()].decode("utf-8")

    def find_line_start(self) -> int:
        """Return the byte offset where the current line starts."""
        if not self._data:
            return 0
        return self._data.rfind(b"\n", 0, self.pos) + 1

    def find_line_end(self) -> int:
        """Return the byte offset just past the end of the current line."""
        size = len(self._data)
        if size == 0:
            return 0
        if self.pos == size - 1:
            return size
        newline = self._data.find(b"\n", self.pos)
        return size if newline == -1 else newline + 1

    def at_start(self) -> bool:
        """Tell whether the position is at the start of the input."""
        return self.pos == 0

    def at_end(self) -> bool:
        """Tell whether the position is at the end of the input."""
        return self.pos == len(self._data)

    def skip(self, n: int) -> bool:
        """Move forward ``n`` characters; leave the position alone if that is impossible."""
        window = self._data[self.pos : self.pos + n * _MAX_UTF8_WIDTH]
        ahead = window.decode("utf-8", errors="ignore")
        if len(ahead) < n:
            return False
        self.pos += len(ahead[:n].encode("utf-8"))
        return True

    def skip_back(self, n: int) -> bool:
        """Move back ``n`` characters; leave the position alone if that is impossible."""
        window = self._data[max(0, self.pos - n * _MAX_UTF8_WIDTH) : self.pos]
        behind = window.decode("utf-8", errors="ignore")
        if len(behind) < n:
            return False
        if n:
            self.pos -= len(behind[-n:].encode("utf-8"))
        return True

    def skip_until(self, strings: Iterable[str]) -> bool:
        """Advance to the first place where one of ``strings`` starts.

        When none is found the position moves to the end of the input and
        ``False`` is returned.
        """
        size = len(self._data)
        found = None
        for string in strings:
            index = self._data.find(string.encode("utf-8"), self.pos)
            if index != -1 and index < size and (found is None or index < found):
                found = index
        if found is None:
            self.pos = size
            return False
        self.pos = found
        return True

    def _next_char(self) -> str | None:
        window = self._data[self.pos : self.pos + _MAX_UTF8_WIDTH]
        ahead = window.decode("utf-8", errors="ignore")
        return ahead[0] if ahead else None

    def _advance_over(self, char: str) -> None:
        self.pos += len(char.encode("utf-8"))

    def match_char_by(self, predicate: Callable[[str], bool]) -> bool:
        """Consume the next character if ``predicate`` accepts it."""
        char = self._next_char()
        if char is None or not predicate(char):
            return False
        self._advance_over(char)
        return True

    def match_string(self, string: str) -> bool:
        """Consume ``string`` if the input continues with it."""
        encoded = string.encode("utf-8")
        if not self._data.startswith(encoded, self.pos):
            return False
        self.pos += len(encoded)
        return True

    def match_insensitive(self, string: str) -> bool:
        """Consume ``string`` compared without regard to ASCII case."""
        encoded = string.encode("utf-8")
        end = self.pos + len(encoded)
        if end > len(self._data) or not _is_boundary(self._data, end):
            return False
        if self._data[self.pos : end].lower() != encoded.lower():
            return False
        self.pos = end
        return True

    def match_range(self, start: str, end: str) -> bool:
        """Consume the next character if it lies within ``start``..``end`` inclusive."""
        char = self._next_char()
        if char is None or not start <= char <= end:
            return False
        self._advance_over(char)
        return True

    def _same_input(self, other: Position) -> None:
        if self.input is not other.input:
            raise ValueError("cannot compare positions from different strs")

    def __repr__(self) -> str:
        return f"Position(pos={self.pos})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.input is other.input and self.pos == other.pos

    def __hash__(self) -> int:
        return hash((id(self.input), self.pos))

    def __lt__(self, other: Position) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        self._same_input(other)
        return self.pos < other.pos

    def __le__(self, other: Position) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        self._same_input(other)
        return self.pos <= other.pos

    def __gt__(self, other: Position) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        self._same_input(other)
        return self.pos > other.pos

    def __ge__(self, other: Position) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        self._same_input(other)
        return self.pos >= other.pos