"""Fallback fragment for text that matches no other block kind."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Final

from pydantic import Field

from mdblocks.exceptions import ParseError
from mdblocks.fragments.base import Fragment
from mdblocks.inline import FormattedText
from mdblocks.modifiers import ModifierTarget
from mdblocks.reader import NEWLINE

if TYPE_CHECKING:
    from mdblocks.modifiers import ModifierCollection
    from mdblocks.reader import Reader
    from mdblocks.references import NamedReferenceCollection

# A line starting with one of these ends the paragraph so the next block can be tried.
_BLOCK_MARKERS: Final[tuple[str, ...]] = ("#", "|")


class Paragraph(Fragment):
    """Consecutive non-blank lines rendered as a single ``<p>`` element."""

    modifier_target: ClassVar[ModifierTarget] = ModifierTarget.PARAGRAPHS

    lines: list[FormattedText] = Field(..., min_length=1)

    @classmethod
    def read(cls, reader: Reader, references: NamedReferenceCollection) -> Paragraph:
        lines: list[FormattedText] = []

        while not reader.did_reach_end:
            lines.append(FormattedText.read(reader, references, terminators={NEWLINE}))
            if reader.did_reach_end:
                break
            reader.advance_index()
            next_line = reader.peek_line()
            if not next_line.strip() or next_line.startswith(_BLOCK_MARKERS):
                break

        if not lines:
            raise ParseError("No paragraph text at cursor")
        return cls(lines=lines)

    def html(
        self,
        references: NamedReferenceCollection,
        modifiers: ModifierCollection,
    ) -> str:
        body = " ".join(line.html(references, modifiers) for line in self.lines)
        return f"<p>{body}</p>"

    def plain_text(self) -> str:
        return " ".join(line.plain_text() for line in self.lines)
