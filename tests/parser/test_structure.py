"""Tests for the structured-format pre-filter."""

from qbank_toolkit.parser.config import ParserConfig
from qbank_toolkit.parser.structure import looks_structured, structure_signals


class TestStructureSignals:
    
    def test_signals_when_metadata_block_then_five_found(self, mc_metadata_block):
        assert structure_signals(mc_metadata_block) == [
            "question_heading",
            "topic_label",
            "statement_label",
            "options_label",
            "answer_label",
        ]
    
    def test_signals_when_separated_document_then_separator_counted(self, separated_document):
        assert "separator_line" in structure_signals(separated_document)
    
    def test_signals_when_answer_label_empty_then_not_counted(self):
        assert structure_signals("TEMA: Juros\nEnunciado: Quanto rende?\nGABARITO:") == [
            "topic_label",
            "statement_label",
        ]


class TestLooksStructured:
    
    def test_looks_structured_when_three_signals_then_true(self, mc_simple_block):
        assert looks_structured(mc_simple_block)
    
    def test_looks_structured_when_two_signals_then_false(self):
        assert not looks_structured("TEMA: Juros\nEnunciado: Quanto rende?\nGABARITO:")
    
    def test_looks_structured_when_prose_then_false(self):
        assert not looks_structured("Meeting notes: buy coffee, call the bank, renew the lease.")
    
    def test_looks_structured_when_empty_then_false(self):
        assert not looks_structured("")
    
    def test_looks_structured_when_threshold_lowered_then_true(self):
        config = ParserConfig(min_structure_signals=2)
        assert looks_structured("TEMA: Juros\nEnunciado: Quanto rende?\nGABARITO:", config)
