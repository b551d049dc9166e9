"""ATX-style headings (``# Title`` through ``###### Title``)."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Final

from pydantic import Field

from mdblocks.config import MDBLOCKS_STRICT_CLOSING_SEQUENCE
from mdblocks.exceptions import ParseError
from mdblocks.fragments.base import Fragment
from mdblocks.inline import FormattedText
from mdblocks.modifiers import ModifierTarget
from mdblocks.reader import NEWLINE, SAME_LINE_WHITESPACE

if TYPE_CHECKING:
    from mdblocks.modifiers import ModifierCollection
    from mdblocks.reader import Reader
    from mdblocks.references import NamedReferenceCollection

HEADING_MARKER: Final[str] = "#"
MAX_HEADING_LEVEL: Final[int] = 6


class Heading(Fragment):
    """A heading with its level and inline content."""

    modifier_target: ClassVar[ModifierTarget] = ModifierTarget.HEADINGS

    level: int = Field(..., ge=1, le=MAX_HEADING_LEVEL)
    content: FormattedText

    @classmethod
    def read(cls, reader: Reader, references: NamedReferenceCollection) -> Heading:
        level = reader.read_count(HEADING_MARKER)
        if not 0 < level <= MAX_HEADING_LEVEL:
            raise ParseError(f"Heading level must be between 1 and {MAX_HEADING_LEVEL}, got {level}")
        reader.read_whitespaces()
        content = FormattedText.read(reader, references, terminators={NEWLINE})
        return cls(level=level, content=content)

    def html(
        self,
        references: NamedReferenceCollection,
        modifiers: ModifierCollection,
    ) -> str:
        body = strip_closing_sequence(self.content.html(references, modifiers))
        tag_name = f"h{self.level}"
        return f"<{tag_name}>{body}</{tag_name}>"

    def plain_text(self) -> str:
        return strip_closing_sequence(self.content.plain_text())


def strip_closing_sequence(text: str, *, strict: bool | None = None) -> str:
    """Remove a trailing run of heading markers from rendered heading text.

    Operates on rendered output, so markers produced by inline rendering are
    stripped as well. Whitespace between the content and the run is dropped
    along with it. Text made only of markers becomes empty.

    Args:
        text: Rendered heading content.
        strict: When True, the run is only stripped if whitespace precedes it
            (``C#`` stays ``C#``). Defaults to ``MDBLOCKS_STRICT_CLOSING_SEQUENCE``.

    Returns:
        The text without its closing sequence, or ``text`` unchanged when it
        has none.
    """
    if strict is None:
        strict = MDBLOCKS_STRICT_CLOSING_SEQUENCE

    content = text.rstrip(HEADING_MARKER)
    if content == text:
        return text
    if not content:
        return ""
    if strict and content[-1] not in SAME_LINE_WHITESPACE:
        return text
    return content.rstrip("".join(SAME_LINE_WHITESPACE))
