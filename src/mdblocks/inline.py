"""Inline content consumed by block fragments.

Inline syntax (emphasis, links, code spans) is not interpreted here: the text
between block delimiters is kept verbatim and escaped for HTML output.
"""

from __future__ import annotations

import html as html_lib
from typing import TYPE_CHECKING, Iterable

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from mdblocks.modifiers import ModifierCollection
    from mdblocks.reader import Reader
    from mdblocks.references import NamedReferenceCollection

_SAME_LINE_WHITESPACE = " \t"


class FormattedText(BaseModel):
    """Opaque inline tree produced for a heading, table cell or paragraph line."""

    model_config = ConfigDict(frozen=True)

    text: str = ""

    @classmethod
    def read(
        cls,
        reader: Reader,
        references: NamedReferenceCollection,
        terminators: Iterable[str],
    ) -> FormattedText:
        """Read inline content up to the first terminator or the end of input.

        The terminator itself is left for the caller to consume. Leading and
        trailing same-line whitespace is not part of the content.
        """
        raw = reader.read_until(terminators)
        return cls(text=raw.strip(_SAME_LINE_WHITESPACE))

    def html(
        self,
        references: NamedReferenceCollection | None = None,
        modifiers: ModifierCollection | None = None,
    ) -> str:
        return html_lib.escape(self.text, quote=False)

    def plain_text(self) -> str:
        return self.text
