"""Test setup for mdblocks."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from mdblocks.modifiers import ModifierCollection  # noqa: E402
from mdblocks.references import NamedReferenceCollection  # noqa: E402


@pytest.fixture
def references() -> NamedReferenceCollection:
    """Empty reference table forwarded through fragment parsers."""
    return NamedReferenceCollection()


@pytest.fixture
def modifiers() -> ModifierCollection:
    """Empty modifier registry used when rendering fragments directly."""
    return ModifierCollection()
