"""Position-tracking cursor shared by fragment and inline parsers."""

from __future__ import annotations

from typing import Final, Iterable

from mdblocks.exceptions import ParseError

NEWLINE: Final[str] = "\n"
SAME_LINE_WHITESPACE: Final[frozenset[str]] = frozenset({" ", "\t"})


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


class Reader:
    """Cursor over Markdown source text.

    A single reader is owned by one parse attempt and passed explicitly to
    every nested parser. Backtracking is done by the caller through
    ``snapshot()`` and ``restore()``; the reader itself never rewinds.
    """

    def __init__(self, text: str) -> None:
        self._text = normalize_newlines(text)
        self._index = 0

    def __repr__(self) -> str:
        return f"Reader(index={self._index}, length={len(self._text)})"

    @property
    def index(self) -> int:
        return self._index

    @property
    def did_reach_end(self) -> bool:
        return self._index >= len(self._text)

    @property
    def current_character(self) -> str:
        """Return the character at the cursor.

        Raises:
            ParseError: If the cursor is at the end of the input.
        """
        if self.did_reach_end:
            raise ParseError("Unexpected end of input")
        return self._text[self._index]

    @property
    def is_at_newline(self) -> bool:
        return not self.did_reach_end and self._text[self._index] == NEWLINE

    def advance_index(self, by: int = 1) -> None:
        self._index = min(self._index + by, len(self._text))

    def read(self, character: str) -> None:
        """Consume ``character`` or fail the current parse attempt.

        Raises:
            ParseError: If the current character is not ``character``.
        """
        if self.did_reach_end or self._text[self._index] != character:
            found = "end of input" if self.did_reach_end else repr(self._text[self._index])
            raise ParseError(f"Expected {character!r} at index {self._index}, found {found}")
        self._index += 1

    def read_count(self, character: str) -> int:
        """Consume a contiguous run of ``character`` and return its length."""
        count = 0
        while not self.did_reach_end and self._text[self._index] == character:
            self._index += 1
            count += 1
        return count

    def read_whitespaces(self) -> None:
        """Consume one or more same-line whitespace characters.

        Raises:
            ParseError: If no whitespace is present at the cursor.
        """
        start = self._index
        self.discard_whitespaces()
        if self._index == start:
            raise ParseError(f"Expected whitespace at index {start}")

    def discard_whitespaces(self) -> None:
        while not self.did_reach_end and self._text[self._index] in SAME_LINE_WHITESPACE:
            self._index += 1

    def read_until(self, terminators: Iterable[str]) -> str:
        """Consume characters up to (not including) the first terminator or the end."""
        stops = frozenset(terminators)
        start = self._index
        while not self.did_reach_end and self._text[self._index] not in stops:
            self._index += 1
        return self._text[start : self._index]

    def read_line(self) -> str:
        """Consume the rest of the current line including its newline, if any."""
        line = self.read_until({NEWLINE})
        if self.is_at_newline:
            self._index += 1
        return line

    def peek_line(self) -> str:
        """Return the rest of the current line without consuming it."""
        end = self._text.find(NEWLINE, self._index)
        if end == -1:
            end = len(self._text)
        return self._text[self._index : end]

    def discard_blank_lines(self) -> None:
        """Skip lines that contain only same-line whitespace."""
        while not self.did_reach_end:
            line = self.peek_line()
            if line.strip(" \t"):
                return
            self._index += len(line)
            if self.is_at_newline:
                self._index += 1

    def snapshot(self) -> int:
        return self._index

    def restore(self, snapshot: int) -> None:
        if not 0 <= snapshot <= len(self._text):
            raise ValueError(f"Snapshot {snapshot} is outside the input")
        self._index = snapshot

    def source(self, start: int, end: int | None = None) -> str:
        """Return the raw source between two cursor positions."""
        return self._text[start : self._index if end is None else end]
