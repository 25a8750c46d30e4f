"""
Unit tests for block segmentation.

Run: pytest tests/unit/test_segmenter.py -v
"""
import pytest

from src.parsing.segmenter import ContentKind, segment, split_block_lines


class TestSplitBlockLines:

    def test_trims_and_drops_blank_lines(self):
        block = "  first  \n\n   \n\tsecond\r\n"
        assert split_block_lines(block) == ["first", "second"]

    def test_empty_block(self):
        assert split_block_lines("") == []

    @pytest.mark.parametrize("separator", ["\x0c", "\x0b", "\x1c", "\x85", "\u2028"])
    def test_only_newline_breaks_lines(self, separator):
        block = f"What does the form{separator}feed do here?\nA) x"
        assert split_block_lines(block) == [f"What does the form{separator}feed do here?", "A) x"]


class TestMCQSegmentation:
    """MCQ blocks split on rules, headers, bold markers and numbering."""

    def test_dash_rule_separates_questions(self):
        raw = "What is DNS?\nA) x\n---\nWhat is ARP?\nA) y"
        blocks = segment(raw, ContentKind.MCQ)
        assert len(blocks) == 2
        assert "DNS" in blocks[0]
        assert "ARP" in blocks[1]

    def test_long_dash_rule(self):
        raw = "What is DNS?\n---------\nWhat is ARP?"
        assert len(segment(raw, ContentKind.MCQ)) == 2

    def test_blank_line_before_header(self):
        raw = "## Question 1\nWhat is DNS?\n\n## Question 2\nWhat is ARP?"
        blocks = segment(raw, ContentKind.MCQ)
        assert len(blocks) == 2
        assert blocks[1].startswith("## Question 2")

    def test_blank_line_before_bold_question(self):
        raw = "**Question 1:** What is DNS?\n\n**Question 2:** What is ARP?"
        assert len(segment(raw, ContentKind.MCQ)) == 2

    def test_blank_line_before_numbered_item(self):
        raw = "1. What is DNS?\nA) x\n\n2. What is ARP?\nA) y"
        blocks = segment(raw, ContentKind.MCQ)
        assert len(blocks) == 2
        assert blocks[1].startswith("2.")

    def test_single_newline_does_not_split(self):
        raw = "1. What is DNS?\n2. What is ARP?"
        assert len(segment(raw, ContentKind.MCQ)) == 1

    def test_commentary_blocks_are_dropped(self):
        raw = "Here are your questions, enjoy.\n---\nWhat is DNS?\n---\nGood luck"
        blocks = segment(raw, ContentKind.MCQ)
        assert len(blocks) == 1
        assert "DNS" in blocks[0]

    def test_block_with_question_word_is_kept(self):
        raw = "Intro text\n---\nQuestion about routing"
        assert segment(raw, ContentKind.MCQ) == ["\nQuestion about routing"]

    def test_numbered_block_without_question_mark_is_kept(self):
        raw = "Intro text\n\n1. Name the layer that routes packets"
        blocks = segment(raw, ContentKind.MCQ)
        assert blocks == ["1. Name the layer that routes packets"]


class TestSlideSegmentation:
    """Slides split on dash rules and at every "## " line."""

    def test_header_starts_its_own_block(self):
        raw = "## One\n- a\n## Two\n- b"
        blocks = segment(raw, ContentKind.SLIDE)
        assert blocks == ["## One\n- a\n", "## Two\n- b"]

    def test_dash_rule(self):
        raw = "Intro slide\n---\nSecond slide"
        blocks = segment(raw, ContentKind.SLIDE)
        assert [b.strip() for b in blocks] == ["Intro slide", "Second slide"]

    def test_blank_blocks_dropped(self):
        raw = "---\n\n---\n## Only\n- a\n---\n"
        blocks = segment(raw, ContentKind.SLIDE)
        assert len(blocks) == 1

    def test_triple_hash_does_not_split(self):
        raw = "## One\n### Detail\n- a"
        assert len(segment(raw, ContentKind.SLIDE)) == 1


class TestNotesSegmentation:

    def test_notes_are_one_block(self):
        raw = "## A\ntext\n## B\ntext"
        assert segment(raw, ContentKind.NOTES) == [raw]


class TestEmptyInput:

    @pytest.mark.parametrize("kind", list(ContentKind))
    @pytest.mark.parametrize("raw", ["", "   ", "\n\n\t\n"])
    def test_blank_input_gives_no_blocks(self, kind, raw):
        assert segment(raw, kind) == []

    def test_kind_accepts_plain_string(self):
        assert segment("What is DNS?", "mcq") == ["What is DNS?"]
