"""Block-level fragment kinds."""

from mdblocks.fragments.base import Fragment
from mdblocks.fragments.heading import Heading, strip_closing_sequence
from mdblocks.fragments.paragraph import Paragraph
from mdblocks.fragments.table import ColumnAlignment, Table

__all__ = [
    "ColumnAlignment",
    "Fragment",
    "Heading",
    "Paragraph",
    "Table",
    "strip_closing_sequence",
]
