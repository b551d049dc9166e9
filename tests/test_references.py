"""Tests for the named reference table."""

from __future__ import annotations

from mdblocks.reader import Reader
from mdblocks.references import NamedReferenceCollection, read_reference_definition


class TestNamedReferenceCollection:
    """Tests for NamedReferenceCollection."""

    def test_lookup_is_case_insensitive(self) -> None:
        references = NamedReferenceCollection({"Docs  Home": "https://example.com/docs"})

        assert references.url_for("docs home") == "https://example.com/docs"
        assert "DOCS HOME" in references
        assert len(references) == 1

    def test_first_definition_wins(self) -> None:
        references = NamedReferenceCollection()
        references.add("a", "https://first.example")
        references.add("A", "https://second.example")

        assert references.url_for("a") == "https://first.example"

    def test_missing_name(self) -> None:
        references = NamedReferenceCollection()

        assert references.url_for("missing") is None
        assert "missing" not in references


class TestReadReferenceDefinition:
    """Tests for read_reference_definition."""

    def test_consumes_definition_line(self) -> None:
        reader = Reader("[id]: https://example.com\nnext")
        references = NamedReferenceCollection()

        assert read_reference_definition(reader, references)
        assert references.as_dict() == {"id": "https://example.com"}
        assert reader.peek_line() == "next"

    def test_leaves_cursor_on_other_lines(self) -> None:
        reader = Reader("[not a definition] text")
        references = NamedReferenceCollection()

        assert not read_reference_definition(reader, references)
        assert reader.index == 0
        assert len(references) == 0
