"""Unit tests for alignment string parsing."""

import pytest

from text_translator.core.exceptions import AlignmentParseError
from text_translator.schemas.document_schemas import AlignmentEntry
from text_translator.services.alignment.alignment_parser import parse_alignment


class TestParseAlignment:
    """Covers valid, empty and malformed alignment projections."""

    @pytest.mark.parametrize("raw_alignment", [None, "", "   "])
    def test_missing_alignment_returns_empty_list(self, raw_alignment):
        assert parse_alignment(raw_alignment) == []

    def test_parses_entries_in_input_order(self, sample_alignment):
        entries = parse_alignment(sample_alignment["alignment"])

        assert entries == [
            AlignmentEntry(source_start=0, source_end=2, target_start=0, target_end=1),
            AlignmentEntry(source_start=4, source_end=7, target_start=3, target_end=6),
        ]

    def test_tolerates_surrounding_and_repeated_spaces(self):
        entries = parse_alignment("  0:1-0:1   3:4-3:5 ")

        assert [entry.span(is_source=False) for entry in entries] == [(0, 1), (3, 5)]

    @pytest.mark.parametrize("malformed", ["abc-def", "0:1-0", "0:1-2:x", "0:1:2-3:4", "-1:2-0:1"])
    def test_malformed_entry_raises_parse_error(self, malformed):
        with pytest.raises(AlignmentParseError) as exc_info:
            parse_alignment(f"0:1-0:1 {malformed}")

        assert exc_info.value.entry == malformed
        assert exc_info.value.error_code == "ALIGNMENT_PARSE_ERROR"

    def test_reversed_span_raises_parse_error(self):
        with pytest.raises(AlignmentParseError):
            parse_alignment("3:1-0:0")
