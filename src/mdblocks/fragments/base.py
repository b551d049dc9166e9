"""Shared contract for block-level fragments."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Self

from pydantic import BaseModel, ConfigDict

from mdblocks.exceptions import ParseError
from mdblocks.modifiers import ModifierTarget

if TYPE_CHECKING:
    from mdblocks.modifiers import ModifierCollection
    from mdblocks.reader import Reader
    from mdblocks.references import NamedReferenceCollection

logger = logging.getLogger(__name__)


class Fragment(BaseModel, ABC):
    """A parsed block-level element.

    Concrete fragments implement ``read`` (raising ``ParseError`` when the
    input does not match), ``html`` and ``plain_text``. Instances are frozen
    once ``read`` returns.
    """

    model_config = ConfigDict(frozen=True)

    modifier_target: ClassVar[ModifierTarget]

    @classmethod
    @abstractmethod
    def read(cls, reader: Reader, references: NamedReferenceCollection) -> Self:
        """Parse one fragment at the cursor.

        Raises:
            ParseError: If the input at the cursor is not this kind of fragment.
        """

    @classmethod
    def parse(cls, reader: Reader, references: NamedReferenceCollection) -> Self | None:
        """Parse one fragment, returning None instead of raising on a mismatch.

        The cursor is not restored on failure; backtracking belongs to the caller.
        """
        start = reader.index
        try:
            return cls.read(reader, references)
        except ParseError as exc:
            logger.debug("%s did not match at index %d: %s", cls.__name__, start, exc)
            return None

    @abstractmethod
    def html(
        self,
        references: NamedReferenceCollection,
        modifiers: ModifierCollection,
    ) -> str: ...

    @abstractmethod
    def plain_text(self) -> str: ...
