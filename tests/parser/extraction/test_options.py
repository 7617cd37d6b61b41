"""Tests for answer-option extraction."""

from qbank_toolkit.core.models.formats import QuestionFormat
from qbank_toolkit.parser.extraction.options import (
    extract_options,
    inline_pass,
    option_block_start,
    options_region,
)


class TestMultipleChoiceOptions:
    
    def test_extract_when_bare_letter_lines_then_five_options(self, mc_simple_block):
        options = extract_options(mc_simple_block, QuestionFormat.MC_SIMPLE)
        assert options == {
            "A": "Fixed rate set by law",
            "B": "Variable rate agreed in the contract",
            "C": "No interest is ever charged",
            "D": "Only the late payment fee",
            "E": "The savings account rate",
        }
    
    def test_extract_when_parenthesized_then_letters_and_text(self, mc_metadata_block):
        options = extract_options(mc_metadata_block, QuestionFormat.MC_METADATA)
        assert list(options) == ["A", "B", "C", "D", "E"]
        assert options["B"] == "R$ 210,00"
    
    def test_extract_when_lowercase_letters_then_uppercased(self):
        block = "Enunciado: Qual destas é uma taxa?\nAlternativas:\na) Selic\nb) IPCA\nc) PIB"
        assert extract_options(block, QuestionFormat.MC_SIMPLE) == {
            "A": "Selic", "B": "IPCA", "C": "PIB",
        }
    
    def test_extract_when_final_period_then_stripped(self):
        block = "Options:\nA. Fixed rate.\nB. Variable rate.\nC. No rate."
        assert extract_options(block, QuestionFormat.MC_SIMPLE)["A"] == "Fixed rate"
    
    def test_extract_when_dash_separator_then_parsed(self):
        block = "Options:\nA - Fixed\nB - Variable\nC - None"
        assert extract_options(block, QuestionFormat.MC_SIMPLE) == {
            "A": "Fixed", "B": "Variable", "C": "None",
        }
    
    def test_extract_when_inline_dump_then_split_by_letter(self):
        block = "Options: A Fixed rate B Variable rate C No interest D Late fee E Savings rate"
        assert extract_options(block, QuestionFormat.MC_SIMPLE) == {
            "A": "Fixed rate",
            "B": "Variable rate",
            "C": "No interest",
            "D": "Late fee",
            "E": "Savings rate",
        }
    
    def test_extract_when_answer_follows_then_not_an_option(self):
        block = "Options:\nA) one\nB) two\nC) three\nANSWER: B"
        assert len(extract_options(block, QuestionFormat.MC_SIMPLE)) == 3
    
    def test_extract_when_later_pass_repeats_letter_then_earlier_text_kept(self):
        block = "Options:\n(A) first\nA) second\n(B) bee\nC) cee\nD) dee"
        assert extract_options(block, QuestionFormat.MC_SIMPLE) == {
            "A": "first", "B": "bee", "C": "cee", "D": "dee",
        }

    def test_extract_when_no_options_then_empty(self):
        assert extract_options("Plain prose, nothing to pick from.", QuestionFormat.UNKNOWN) == {}


class TestTrueFalseOptions:
    
    def test_extract_when_bracketed_then_synthetic_pair(self, tf_bracketed_block):
        assert extract_options(tf_bracketed_block, QuestionFormat.TF_BRACKETED) == {
            "A": "TRUE", "B": "FALSE",
        }
    
    def test_extract_when_bare_then_synthetic_pair(self, tf_bare_block):
        assert extract_options(tf_bare_block, QuestionFormat.TF_BARE) == {
            "A": "TRUE", "B": "FALSE",
        }
    
    def test_extract_when_one_marker_and_lenient_then_pair_synthesized(self):
        block = "BANCA: X\nANO: 2020\nEnunciado: Something to judge here.\n( ) CERTO"
        assert extract_options(block, QuestionFormat.TF_BRACKETED) == {"A": "TRUE", "B": "FALSE"}
    
    def test_extract_when_one_marker_and_strict_then_empty(self):
        block = "BANCA: X\nANO: 2020\nEnunciado: Something to judge here.\n( ) CERTO"
        assert extract_options(block, QuestionFormat.TF_BRACKETED, strict=True) == {}


class TestRegions:
    
    def test_option_block_start_when_statement_starts_with_a_then_real_list_found(self):
        text = "A taxa sobe?\n(A) Sim\n(B) Não"
        assert option_block_start(text) == text.index("(A)")
    
    def test_option_block_start_when_single_option_line_then_none(self):
        assert option_block_start("A taxa sobe quando a inflação cresce?") is None
    
    def test_options_region_when_label_present_then_until_answer(self):
        region = options_region("Q?\nOptions:\nA) x\nB) y\nGABARITO: A")
        assert "GABARITO" not in region
        assert "A) x" in region
    
    def test_inline_pass_when_single_line_then_one_option_per_letter(self):
        assert inline_pass("A abcdef B ghijkl C mnopqr", min_chars=5) == {
            "A": "abcdef", "B": "ghijkl", "C": "mnopqr",
        }
