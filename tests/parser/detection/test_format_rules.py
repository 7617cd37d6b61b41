"""
Tests for parser.detection.formats

Test Coverage:
- Each dialect of the sample fixtures
- True/false priority over the metadata dialect
- Partial structure and unknown blocks
"""

import pytest

from qbank_toolkit.core.models.formats import QuestionFormat
from qbank_toolkit.parser.detection.formats import FORMAT_RULES, block_features, detect_format


class TestDetectFormat:
    
    def test_detect_when_simple_block_then_format1(self, mc_simple_block):
        assert detect_format(mc_simple_block) is QuestionFormat.MC_SIMPLE
    
    def test_detect_when_metadata_block_then_format2(self, mc_metadata_block):
        assert detect_format(mc_metadata_block) is QuestionFormat.MC_METADATA
    
    def test_detect_when_bracketed_true_false_then_format3(self, tf_bracketed_block):
        assert detect_format(tf_bracketed_block) is QuestionFormat.TF_BRACKETED
    
    def test_detect_when_bare_true_false_then_format4(self, tf_bare_block):
        assert detect_format(tf_bare_block) is QuestionFormat.TF_BARE
    
    def test_detect_when_true_false_with_topic_then_true_false_wins(self, tf_bracketed_block):
        # Board, year and topic all present: the metadata rule would also match
        features = block_features(tf_bracketed_block)
        assert features.has_board and features.has_year and features.has_topic
        assert detect_format(tf_bracketed_block) is QuestionFormat.TF_BRACKETED
    
    def test_detect_when_markers_without_board_then_not_true_false(self):
        block = "TEMA: Juros\nEnunciado: Juros simples crescem linearmente.\nCERTO\nERRADO"
        assert detect_format(block) is QuestionFormat.MC_SIMPLE
    
    def test_detect_when_only_options_label_then_partial_format1(self):
        block = "Which of these is a prime number?\nOptions:\nA) 4\nB) 6\nC) 7"
        assert detect_format(block) is QuestionFormat.MC_SIMPLE
    
    def test_detect_when_plain_prose_then_unknown(self):
        assert detect_format("Just a paragraph of notes without any labels.") is QuestionFormat.UNKNOWN
    
    @pytest.mark.parametrize("text", [
        "",
        "BANCA: X\nANO: 2020",
        "TOPIC: Only a topic",
    ])
    def test_detect_when_any_input_then_exactly_one_tag(self, text):
        assert isinstance(detect_format(text), QuestionFormat)


class TestFormatRules:
    
    def test_rules_when_listed_then_true_false_first(self):
        assert FORMAT_RULES[0].name == "true_false"
        assert all(rule.rationale for rule in FORMAT_RULES)


class TestLabelsInProse:
    
    def test_features_when_options_word_mid_line_then_no_options_label(self):
        features = block_features("Pick one of the options: which rate applies here?")
        assert features.has_options is False
    
    def test_features_when_options_label_opens_line_then_detected(self):
        assert block_features("Which rate?\nOptions:\nA) x\nB) y").has_options is True
