"""mdblocks: block-level Markdown fragments rendered to HTML and plain text."""

from mdblocks.exceptions import MdblocksError, ParseError, RenderError
from mdblocks.fragments import ColumnAlignment, Fragment, Heading, Paragraph, Table
from mdblocks.inline import FormattedText
from mdblocks.modifiers import Modifier, ModifierCollection, ModifierTarget
from mdblocks.parser import Markdown, MarkdownParser, render_html
from mdblocks.reader import Reader
from mdblocks.references import NamedReferenceCollection

__version__ = "0.1.0"

__all__ = [
    "ColumnAlignment",
    "FormattedText",
    "Fragment",
    "Heading",
    "Markdown",
    "MarkdownParser",
    "MdblocksError",
    "Modifier",
    "ModifierCollection",
    "ModifierTarget",
    "NamedReferenceCollection",
    "Paragraph",
    "ParseError",
    "Reader",
    "RenderError",
    "Table",
    "render_html",
]
