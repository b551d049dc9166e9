"""Post-render hooks keyed by fragment kind."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator

from mdblocks.exceptions import RenderError


class ModifierTarget(str, Enum):
    """Fragment kinds that modifiers can be attached to."""

    HEADINGS = "headings"
    TABLES = "tables"
    PARAGRAPHS = "paragraphs"


ModifierClosure = Callable[[str, str], str]


@dataclass(frozen=True)
class Modifier:
    """A hook that rewrites the HTML of one fragment kind.

    Attributes:
        target: Fragment kind the modifier applies to.
        closure: Called with ``(html, markdown)`` where ``markdown`` is the raw
            source of the fragment; returns the replacement HTML.
    """

    target: ModifierTarget
    closure: ModifierClosure


class ModifierCollection:
    """Ordered registry of modifiers, queried only while rendering."""

    def __init__(self, modifiers: list[Modifier] | None = None) -> None:
        self._modifiers: dict[ModifierTarget, list[Modifier]] = {}
        for modifier in modifiers or []:
            self.add(modifier)

    def __len__(self) -> int:
        return sum(len(group) for group in self._modifiers.values())

    def add(self, modifier: Modifier) -> None:
        self._modifiers.setdefault(ModifierTarget(modifier.target), []).append(modifier)

    def modifiers_for(self, target: ModifierTarget | str) -> Iterator[Modifier]:
        yield from self._modifiers.get(ModifierTarget(target), [])

    def apply(self, target: ModifierTarget | str, html: str, markdown: str) -> str:
        """Run every modifier registered for ``target`` in registration order.

        Args:
            target: Fragment kind of the rendered HTML.
            html: HTML produced by the fragment.
            markdown: Raw Markdown source of the fragment.

        Returns:
            The HTML after all modifiers ran.

        Raises:
            RenderError: If a modifier returns something other than a string.
        """
        for modifier in self.modifiers_for(target):
            html = modifier.closure(html, markdown)
            if not isinstance(html, str):
                raise RenderError(
                    f"Modifier for {ModifierTarget(target).value!r} returned {type(html).__name__}, expected str"
                )
        return html
