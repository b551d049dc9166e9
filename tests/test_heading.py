"""Tests for the Heading fragment."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from mdblocks.exceptions import ParseError
from mdblocks.fragments.heading import Heading, strip_closing_sequence
from mdblocks.inline import FormattedText
from mdblocks.modifiers import ModifierCollection, ModifierTarget
from mdblocks.reader import Reader
from mdblocks.references import NamedReferenceCollection


class TestHeadingRead:
    """Tests for Heading.read."""

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_reads_every_valid_level(
        self, level: int, references: NamedReferenceCollection
    ) -> None:
        heading = Heading.read(Reader("#" * level + " Title"), references)

        assert heading.level == level
        assert heading.content.plain_text() == "Title"

    @pytest.mark.parametrize("text", ["Title", "####### Title"])
    def test_rejects_out_of_range_levels(
        self, text: str, references: NamedReferenceCollection
    ) -> None:
        with pytest.raises(ParseError, match="Heading level"):
            Heading.read(Reader(text), references)

    def test_requires_whitespace_after_markers(
        self, references: NamedReferenceCollection
    ) -> None:
        with pytest.raises(ParseError, match="whitespace"):
            Heading.read(Reader("#Title"), references)

    def test_stops_before_newline(self, references: NamedReferenceCollection) -> None:
        reader = Reader("## Title\nNext line")

        heading = Heading.read(reader, references)

        assert heading.content.plain_text() == "Title"
        assert reader.is_at_newline

    def test_parse_returns_none_on_mismatch(
        self, references: NamedReferenceCollection, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="mdblocks.fragments.base"):
            assert Heading.parse(Reader("Title"), references) is None

        assert "Heading did not match at index 0" in caplog.text

    def test_parse_returns_heading_on_match(
        self, references: NamedReferenceCollection
    ) -> None:
        heading = Heading.parse(Reader("### Title"), references)

        assert heading is not None
        assert heading.level == 3


class TestHeadingModel:
    """Tests for Heading model constraints."""

    @pytest.mark.parametrize("level", [0, 7])
    def test_level_is_validated(self, level: int) -> None:
        with pytest.raises(ValidationError):
            Heading(level=level, content=FormattedText(text="Title"))

    def test_is_frozen(self) -> None:
        heading = Heading(level=1, content=FormattedText(text="Title"))
        with pytest.raises(ValidationError):
            heading.level = 2

    def test_modifier_target(self) -> None:
        assert Heading.modifier_target is ModifierTarget.HEADINGS


class TestHeadingRender:
    """Tests for Heading HTML and plain-text rendering."""

    def _heading(self, text: str) -> Heading:
        return Heading.read(Reader(text), NamedReferenceCollection())

    def test_closing_sequence_is_stripped(self, modifiers: ModifierCollection) -> None:
        heading = self._heading("## Title ##")

        assert heading.html(NamedReferenceCollection(), modifiers) == "<h2>Title</h2>"
        assert heading.plain_text() == "Title"

    def test_content_without_closing_sequence_is_unchanged(
        self, modifiers: ModifierCollection
    ) -> None:
        heading = self._heading("## Title")

        assert heading.html(NamedReferenceCollection(), modifiers) == "<h2>Title</h2>"

    @pytest.mark.parametrize("level", [1, 6])
    def test_tag_matches_level(self, level: int, modifiers: ModifierCollection) -> None:
        heading = self._heading("#" * level + " Title")

        assert heading.html(NamedReferenceCollection(), modifiers) == f"<h{level}>Title</h{level}>"

    def test_html_escapes_content(self, modifiers: ModifierCollection) -> None:
        heading = self._heading("# a < b & c")

        assert heading.html(NamedReferenceCollection(), modifiers) == "<h1>a &lt; b &amp; c</h1>"
        assert heading.plain_text() == "a < b & c"

    def test_closing_sequence_only_heading_is_empty(
        self, modifiers: ModifierCollection
    ) -> None:
        heading = self._heading("# ###")

        assert heading.html(NamedReferenceCollection(), modifiers) == "<h1></h1>"


class TestStripClosingSequence:
    """Tests for strip_closing_sequence."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Title ##", "Title"),
            ("Title \t#", "Title"),
            ("Title", "Title"),
            ("C#", "C#"),
            ("###", ""),
            ("", ""),
            ("Title ## more", "Title ## more"),
        ],
    )
    def test_strict(self, text: str, expected: str) -> None:
        assert strip_closing_sequence(text, strict=True) == expected

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Title ##", "Title"),
            ("C#", "C"),
            ("Title##", "Title"),
            ("###", ""),
            ("Title", "Title"),
        ],
    )
    def test_lax(self, text: str, expected: str) -> None:
        assert strip_closing_sequence(text, strict=False) == expected
