"""
Tests for parser.segmentation

Test Coverage:
- Separator lines, question headings, whole-document fallback
- Noise filtering of short segments
"""

from qbank_toolkit.parser.config import ParserConfig
from qbank_toolkit.parser.segmentation import split_into_blocks


class TestSplitIntoBlocks:
    
    def test_split_when_empty_then_no_blocks(self):
        assert split_into_blocks("") == []
        assert split_into_blocks("  \n\t \r\n") == []
    
    def test_split_when_separator_lines_then_one_block_each(self, separated_document):
        blocks = split_into_blocks(separated_document)
        assert len(blocks) == 3
        assert blocks[0].startswith("TOPIC: Credit Cards")
        assert blocks[2].startswith("BOARD: X")
    
    def test_split_when_long_dash_run_then_separator(self, mc_simple_block, tf_bare_block):
        blocks = split_into_blocks(mc_simple_block + "\n  ----------  \n" + tf_bare_block)
        assert len(blocks) == 2
    
    def test_split_when_headings_only_then_split_before_each(self, headed_document):
        blocks = split_into_blocks(headed_document)
        assert len(blocks) == 2
        assert blocks[0].startswith("QUESTÃO 7")
        assert blocks[1].startswith("QUESTÃO 8")
    
    def test_split_when_no_delimiters_then_whole_document(self, mc_simple_block):
        assert split_into_blocks(mc_simple_block) == [mc_simple_block]
    
    def test_split_when_short_segment_then_dropped(self, mc_simple_block, tf_bare_block):
        doc = "\n---\n".join([mc_simple_block, "This block is thirty chars ok.", tf_bare_block])
        blocks = split_into_blocks(doc)
        assert blocks == [mc_simple_block, tf_bare_block]
    
    def test_split_when_separator_leaves_one_block_then_falls_back(self, mc_simple_block):
        doc = mc_simple_block + "\n---\ntiny"
        blocks = split_into_blocks(doc)
        assert len(blocks) == 1
        assert blocks[0].startswith("TOPIC:")
    
    def test_split_when_crlf_then_normalized(self, mc_simple_block):
        blocks = split_into_blocks(mc_simple_block.replace("\n", "\r\n"))
        assert blocks == [mc_simple_block]
    
    def test_split_when_min_block_chars_raised_then_more_dropped(self, separated_document):
        config = ParserConfig(min_block_chars=220)
        blocks = split_into_blocks(separated_document, config)
        assert all(len(b) > 220 for b in blocks)
