"""Tests for question number and provenance extraction."""

from qbank_toolkit.parser.extraction.metadata import BlockMetadata, extract_metadata


class TestExtractMetadata:
    
    def test_extract_when_heading_board_and_year_then_all_read(self, mc_metadata_block):
        assert extract_metadata(mc_metadata_block) == BlockMetadata(
            sequence_number=7,
            source_board="CESGRANRIO",
            source_year=2018,
        )
    
    def test_extract_when_english_labels_then_read(self):
        meta = extract_metadata("QUESTION 12\nBOARD: State Exam Board\nYEAR: 2021")
        assert meta.sequence_number == 12
        assert meta.source_board == "State Exam Board"
        assert meta.source_year == 2021
    
    def test_extract_when_unaccented_heading_then_read(self):
        assert extract_metadata("QUESTAO 4\nTexto").sequence_number == 4
    
    def test_extract_when_nothing_declared_then_all_none(self, mc_simple_block):
        assert extract_metadata(mc_simple_block) == BlockMetadata()
    
    def test_extract_when_year_not_four_digits_then_none(self):
        assert extract_metadata("ANO: 18").source_year is None
