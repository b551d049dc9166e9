"""Pipe-delimited tables with optional header and column alignment."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Final

from pydantic import Field, model_validator

from mdblocks.exceptions import ParseError
from mdblocks.fragments.base import Fragment
from mdblocks.inline import FormattedText
from mdblocks.modifiers import ModifierTarget
from mdblocks.reader import NEWLINE

if TYPE_CHECKING:
    from mdblocks.modifiers import ModifierCollection
    from mdblocks.reader import Reader
    from mdblocks.references import NamedReferenceCollection

TABLE_DELIMITER: Final[str] = "|"
_CELL_TERMINATORS: Final[frozenset[str]] = frozenset({TABLE_DELIMITER, NEWLINE})
_ALIGNMENT_CHARACTERS: Final[frozenset[str]] = frozenset({"-", ":"})

Row = list[FormattedText]


class ColumnAlignment(str, Enum):
    """Horizontal alignment of a table column."""

    NONE = "none"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @property
    def attribute(self) -> str:
        if self is ColumnAlignment.NONE:
            return ""
        return f' align="{self.value}"'

    @classmethod
    def from_marker(cls, text: str) -> ColumnAlignment:
        """Infer alignment from an alignment-row cell such as ``:--`` or ``:-:``."""
        leading = text.startswith(":")
        trailing = text.endswith(":")
        if leading and trailing:
            return cls.CENTER
        if leading:
            return cls.LEFT
        if trailing:
            return cls.RIGHT
        return cls.NONE


class Table(Fragment):
    """A table block made of one or more ``|``-delimited rows.

    When the second row consists only of ``-``/``:`` cells and has as many
    cells as the first, the first row becomes the header and the second is
    consumed as the column alignment row. Rows may be ragged; rendering pads
    every row to ``column_count`` cells.
    """

    modifier_target: ClassVar[ModifierTarget] = ModifierTarget.TABLES

    header: Row | None = None
    rows: list[Row] = Field(default_factory=list)
    column_count: int = Field(default=0, ge=0)
    column_alignments: list[ColumnAlignment] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_alignments_fit_columns(self) -> Table:
        if len(self.column_alignments) > self.column_count:
            raise ValueError(
                f"{len(self.column_alignments)} column alignments for {self.column_count} columns"
            )
        return self

    @classmethod
    def read(cls, reader: Reader, references: NamedReferenceCollection) -> Table:
        rows: list[Row] = []
        column_count = 0

        while not reader.did_reach_end and not reader.is_at_newline:
            if reader.current_character != TABLE_DELIMITER:
                break
            row = _read_row(reader, references)
            rows.append(row)
            column_count = max(column_count, len(row))

        if not rows:
            raise ParseError("No table rows at cursor")

        header, alignments, body = _form_header_and_alignments(rows)
        return cls(
            header=header,
            rows=body,
            column_count=column_count,
            column_alignments=alignments,
        )

    def alignment_for(self, index: int) -> ColumnAlignment:
        if index < len(self.column_alignments):
            return self.column_alignments[index]
        return ColumnAlignment.NONE

    def html(
        self,
        references: NamedReferenceCollection,
        modifiers: ModifierCollection,
    ) -> str:
        parts = ["<table>"]
        if self.header is not None:
            header_html = self._row_html(self.header, "th", references, modifiers)
            parts.append(f"<thead>{header_html}</thead>")
        if self.rows:
            parts.append("<tbody>")
            parts.extend(self._row_html(row, "td", references, modifiers) for row in self.rows)
            parts.append("</tbody>")
        parts.append("</table>")
        return "".join(parts)

    def plain_text(self) -> str:
        lines = [self._row_plain_text(self.header)] if self.header is not None else []
        lines.extend(self._row_plain_text(row) for row in self.rows)
        return "\n".join(lines)

    def _padded(self, row: Row) -> list[FormattedText | None]:
        return [row[index] if index < len(row) else None for index in range(self.column_count)]

    def _row_html(
        self,
        row: Row,
        element_name: str,
        references: NamedReferenceCollection,
        modifiers: ModifierCollection,
    ) -> str:
        cells = []
        for index, cell in enumerate(self._padded(row)):
            contents = cell.html(references, modifiers) if cell is not None else ""
            attribute = self.alignment_for(index).attribute
            cells.append(f"<{element_name}{attribute}>{contents}</{element_name}>")
        return "<tr>" + "".join(cells) + "</tr>"

    def _row_plain_text(self, row: Row) -> str:
        cells = [cell.plain_text() if cell is not None else "" for cell in self._padded(row)]
        return " | ".join(cells) + " |"


def _read_row(reader: Reader, references: NamedReferenceCollection) -> Row:
    _read_delimiter(reader)
    row: Row = []

    while not reader.did_reach_end:
        cell = FormattedText.read(reader, references, terminators=_CELL_TERMINATORS)
        _read_delimiter(reader)
        row.append(cell)

        if reader.is_at_newline:
            reader.advance_index()
            break

    return row


def _read_delimiter(reader: Reader) -> None:
    reader.read(TABLE_DELIMITER)
    reader.discard_whitespaces()


def _form_header_and_alignments(
    rows: list[Row],
) -> tuple[Row | None, list[ColumnAlignment], list[Row]]:
    """Split captured rows into (header, alignments, body).

    Returns ``(None, [], rows)`` when the second row is not an alignment row.
    """
    if len(rows) < 2 or len(rows[0]) != len(rows[1]):
        return None, [], rows

    alignments: list[ColumnAlignment] = []
    for cell in rows[1]:
        text = cell.plain_text()
        if not set(text) <= _ALIGNMENT_CHARACTERS:
            return None, [], rows
        alignments.append(ColumnAlignment.from_marker(text))

    return rows[0], alignments, rows[2:]
