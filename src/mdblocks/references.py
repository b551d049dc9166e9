"""Named link reference table."""

from __future__ import annotations

import re
from typing import Final

from mdblocks.reader import Reader

_DEFINITION_RE: Final[re.Pattern[str]] = re.compile(r"^ {0,3}\[([^\]\n]+)\]:[ \t]*(\S+)[ \t]*$")


class NamedReferenceCollection:
    """Case-insensitive mapping of reference names to URLs.

    Fragments never read from or write to this table; they forward it to the
    inline parser unchanged.
    """

    def __init__(self, references: dict[str, str] | None = None) -> None:
        self._urls: dict[str, str] = {}
        for name, url in (references or {}).items():
            self.add(name, url)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _normalize_name(name) in self._urls

    def __len__(self) -> int:
        return len(self._urls)

    def __repr__(self) -> str:
        return f"NamedReferenceCollection({self._urls!r})"

    def add(self, name: str, url: str) -> None:
        """Register ``url`` under ``name``; the first definition of a name wins."""
        self._urls.setdefault(_normalize_name(name), url)

    def url_for(self, name: str) -> str | None:
        return self._urls.get(_normalize_name(name))

    def as_dict(self) -> dict[str, str]:
        return dict(self._urls)


def read_reference_definition(reader: Reader, references: NamedReferenceCollection) -> bool:
    """Consume a ``[name]: url`` line at the cursor and register it.

    Returns:
        True if a definition was consumed, False if the line is something else
        (the cursor is left untouched in that case).
    """
    match = _DEFINITION_RE.match(reader.peek_line())
    if not match:
        return False
    references.add(match.group(1), match.group(2))
    reader.read_line()
    return True


def _normalize_name(name: str) -> str:
    return re.sub(r"\s+", " ", name.strip()).lower()
