"""Document-level dispatcher that splits Markdown into fragments."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final, Sequence

from mdblocks.exceptions import MdblocksError
from mdblocks.fragments import Fragment, Heading, Paragraph, Table
from mdblocks.modifiers import Modifier, ModifierCollection
from mdblocks.reader import Reader
from mdblocks.references import NamedReferenceCollection, read_reference_definition

logger = logging.getLogger(__name__)

DEFAULT_FRAGMENT_KINDS: Final[tuple[type[Fragment], ...]] = (Heading, Table)


@dataclass(frozen=True)
class ParsedFragment:
    """A fragment together with the raw Markdown it was parsed from."""

    fragment: Fragment
    markdown: str

    def html(self, references: NamedReferenceCollection, modifiers: ModifierCollection) -> str:
        html = self.fragment.html(references, modifiers)
        return modifiers.apply(self.fragment.modifier_target, html, self.markdown)


@dataclass
class Markdown:
    """Parsed Markdown document.

    Attributes:
        fragments: Parsed blocks in document order.
        references: Reference definitions collected while parsing.
        modifiers: Hooks applied to fragment HTML when rendering.
    """

    fragments: list[ParsedFragment] = field(default_factory=list)
    references: NamedReferenceCollection = field(default_factory=NamedReferenceCollection)
    modifiers: ModifierCollection = field(default_factory=ModifierCollection)

    @property
    def title(self) -> str | None:
        """Plain text of the first heading, if the document has one."""
        for parsed in self.fragments:
            if isinstance(parsed.fragment, Heading):
                return parsed.fragment.plain_text()
        return None

    def html(self) -> str:
        return "".join(parsed.html(self.references, self.modifiers) for parsed in self.fragments)

    def plain_text(self) -> str:
        return "\n".join(parsed.fragment.plain_text() for parsed in self.fragments)


class MarkdownParser:
    """Parse Markdown by trying each fragment kind in order at every block boundary.

    Text that no fragment kind accepts becomes a ``Paragraph``.
    """

    def __init__(
        self,
        modifiers: ModifierCollection | Sequence[Modifier] | None = None,
        fragment_kinds: Sequence[type[Fragment]] | None = None,
    ) -> None:
        if isinstance(modifiers, ModifierCollection):
            self.modifiers = modifiers
        else:
            self.modifiers = ModifierCollection(list(modifiers or []))
        self.fragment_kinds = tuple(fragment_kinds or DEFAULT_FRAGMENT_KINDS)

    def add_modifier(self, modifier: Modifier) -> None:
        self.modifiers.add(modifier)

    def parse(self, markdown: str) -> Markdown:
        """Parse a Markdown string into a ``Markdown`` document.

        Raises:
            MdblocksError: If a fragment kind reports success without consuming input.
        """
        reader = Reader(markdown)
        references = NamedReferenceCollection()
        fragments: list[ParsedFragment] = []

        while True:
            reader.discard_blank_lines()
            if reader.did_reach_end:
                break
            if read_reference_definition(reader, references):
                continue

            start = reader.snapshot()
            fragment = self._read_fragment(reader, references)
            if reader.index == start:
                raise MdblocksError(f"{type(fragment).__name__} consumed no input at index {start}")
            fragments.append(ParsedFragment(fragment=fragment, markdown=reader.source(start).rstrip("\n")))

        logger.debug(
            "Parsed %d fragments and %d references", len(fragments), len(references)
        )
        return Markdown(fragments=fragments, references=references, modifiers=self.modifiers)

    def html(self, markdown: str) -> str:
        return self.parse(markdown).html()

    def _read_fragment(self, reader: Reader, references: NamedReferenceCollection) -> Fragment:
        start = reader.snapshot()
        for kind in self.fragment_kinds:
            fragment = kind.parse(reader, references)
            if fragment is not None:
                return fragment
            reader.restore(start)
        return Paragraph.read(reader, references)


def render_html(markdown: str, *, modifiers: Sequence[Modifier] | None = None) -> str:
    """Convert Markdown to HTML with the default fragment kinds."""
    return MarkdownParser(modifiers=modifiers).parse(markdown).html()
