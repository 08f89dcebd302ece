"""
test_blocks.py
--------------
Unit tests for topicview.parsing.blocks.

Tests block segmentation precedence, run merging, table detection and
paragraph continuation rules.
"""
from topicview.dataclasses.document import (
    BulletList,
    OrderedList,
    Paragraph,
    Quote,
    Table,
)
from topicview.parsing.blocks import segment_blocks, split_cells


def lines(text: str):
    return text.split("\n")


class TestTables:
    """Test table detection and row collection."""

    def test_basic_table(self):
        """Header, separator and one row."""
        blocks = segment_blocks(lines("| A | B |\n|---|---|\n| 1 | 2 |\n"))
        assert blocks == [Table(headers=("A", "B"), rows=(("1", "2"),))]

    def test_alignment_separator(self):
        """Colons in the separator are accepted."""
        blocks = segment_blocks(lines("| A | B |\n|:--|--:|\n| x | y |"))
        assert isinstance(blocks[0], Table)

    def test_rows_stop_at_non_pipe_line(self):
        """Row collection ends at the first line not starting with a pipe."""
        blocks = segment_blocks(lines("| A |\n|---|\n| 1 |\n| 2 |\nafter"))
        assert blocks == [
            Table(headers=("A",), rows=(("1",), ("2",))),
            Paragraph("after"),
        ]

    def test_indented_rows(self):
        """Leading whitespace before the pipe is tolerated."""
        blocks = segment_blocks(lines("  | A |\n  |---|\n  | 1 |"))
        assert blocks == [Table(headers=("A",), rows=(("1",),))]

    def test_unequal_row_lengths_kept(self):
        """Rows are neither padded nor truncated."""
        blocks = segment_blocks(lines("| A | B | C |\n|---|---|---|\n| 1 |\n| 1 | 2 | 3 | 4 |"))
        table = blocks[0]
        assert table.headers == ("A", "B", "C")
        assert table.rows == (("1",), ("1", "2", "3", "4"))

    def test_empty_cells_dropped(self):
        """Blank cells are discarded."""
        blocks = segment_blocks(lines("| A |  | B |\n|---|---|---|\n| 1 |  | 2 |"))
        assert blocks[0].headers == ("A", "B")
        assert blocks[0].rows == (("1", "2"),)

    def test_pipe_line_without_separator_is_paragraph(self):
        """A lone pipe line is prose, not a table."""
        blocks = segment_blocks(lines("| not a table |\nplain"))
        assert blocks == [Paragraph("| not a table | plain")]

    def test_separator_must_follow_immediately(self):
        """A blank line between header and separator prevents a table."""
        blocks = segment_blocks(lines("| A |\n\n|---|"))
        assert not any(isinstance(b, Table) for b in blocks)

    def test_table_without_rows_emits_nothing(self):
        """Header and separator alone produce no block."""
        blocks = segment_blocks(lines("| A | B |\n|---|---|\n\ntext"))
        assert blocks == [Paragraph("text")]


class TestQuotes:
    """Test quote runs."""

    def test_quote_run_merged(self):
        """Consecutive quote lines become one block joined by spaces."""
        blocks = segment_blocks(lines("> one\n> two\n> three"))
        assert blocks == [Quote("one two three")]

    def test_quote_run_ends_at_other_line(self):
        """A non-quote line terminates the run."""
        blocks = segment_blocks(lines("> one\nnext\n> two"))
        assert blocks == [Quote("one"), Paragraph("next"), Quote("two")]

    def test_quote_requires_space(self):
        """'>text' without a space is not a quote."""
        blocks = segment_blocks(lines(">tight"))
        assert blocks == [Paragraph(">tight")]

    def test_quote_text_trimmed(self):
        blocks = segment_blocks(lines(">   padded  "))
        assert blocks == [Quote("padded")]


class TestLists:
    """Test ordered and unordered list runs."""

    def test_ordered_list(self):
        blocks = segment_blocks(lines("1. first\n2. second\n10. tenth"))
        assert blocks == [OrderedList(("first", "second", "tenth"))]

    def test_bullet_list_dash_and_star(self):
        """Both markers belong to the same run."""
        blocks = segment_blocks(lines("- a\n* b\n- c"))
        assert blocks == [BulletList(("a", "b", "c"))]

    def test_list_run_ends_at_blank_line(self):
        """A blank line splits a list into two blocks."""
        blocks = segment_blocks(lines("- a\n\n- b"))
        assert blocks == [BulletList(("a",)), BulletList(("b",))]

    def test_ordered_then_bullets(self):
        """Switching marker type starts a new block."""
        blocks = segment_blocks(lines("1. one\n- dash"))
        assert blocks == [OrderedList(("one",)), BulletList(("dash",))]

    def test_marker_without_space_is_paragraph(self):
        """'-word' is not a bullet."""
        blocks = segment_blocks(lines("-word"))
        assert blocks == [Paragraph("-word")]

    def test_indented_item_not_a_list(self):
        """List markers must start the line."""
        blocks = segment_blocks(lines("  - nested"))
        assert blocks == [Paragraph("- nested")]

    def test_items_keep_inline_markup(self):
        blocks = segment_blocks(lines("- **bold** item"))
        assert blocks == [BulletList(("**bold** item",))]


class TestParagraphs:
    """Test paragraph accumulation."""

    def test_lines_joined_with_space(self):
        blocks = segment_blocks(lines("first line\nsecond line"))
        assert blocks == [Paragraph("first line second line")]

    def test_blank_line_splits_paragraphs(self):
        blocks = segment_blocks(lines("one\n\ntwo"))
        assert blocks == [Paragraph("one"), Paragraph("two")]

    def test_paragraph_stops_before_list(self):
        blocks = segment_blocks(lines("text\n- item"))
        assert blocks == [Paragraph("text"), BulletList(("item",))]

    def test_paragraph_stops_before_quote(self):
        blocks = segment_blocks(lines("text\n> quote"))
        assert blocks == [Paragraph("text"), Quote("quote")]

    def test_paragraph_stops_before_digit_line(self):
        """A continuation line starting with a digit ends the paragraph."""
        blocks = segment_blocks(lines("We shipped\n2024 was busy"))
        assert blocks == [Paragraph("We shipped"), Paragraph("2024 was busy")]

    def test_paragraph_stops_before_pipe(self):
        blocks = segment_blocks(lines("text\n| A |\n|---|\n| 1 |"))
        assert blocks == [Paragraph("text"), Table(("A",), (("1",),))]

    def test_heading_lines_skipped(self):
        """Stray heading lines produce no block."""
        blocks = segment_blocks(lines("### Sub\n\nbody"))
        assert blocks == [Paragraph("body")]

    def test_heading_absorbed_as_continuation(self):
        """A heading after prose continues the paragraph."""
        blocks = segment_blocks(lines("body\n### Sub"))
        assert blocks == [Paragraph("body ### Sub")]

    def test_whitespace_only_lines_skipped(self):
        assert segment_blocks(lines("   \n\t\n")) == []


class TestSegmentBlocks:
    """Test overall segmentation behavior."""

    def test_empty_input(self):
        assert segment_blocks([]) == []

    def test_block_order_preserved(self):
        blocks = segment_blocks(lines("p1\n\n> q\n\n1. o\n\n- u\n\n| h |\n|---|\n| r |"))
        assert [b.kind for b in blocks] == ["p", "quote", "olist", "list", "table"]

    def test_dash_line_is_list_not_paragraph(self):
        """Precedence puts list detection before paragraphs."""
        blocks = segment_blocks(lines("- item"))
        assert isinstance(blocks[0], BulletList)

    def test_numbered_quote_is_quote(self):
        """Quote detection precedes list detection."""
        blocks = segment_blocks(lines("> 1. inside quote"))
        assert blocks == [Quote("1. inside quote")]


class TestSplitCells:
    """Test split_cells helper."""

    def test_trim_and_discard(self):
        assert split_cells("|  a |b|   |") == ("a", "b")

    def test_no_pipes(self):
        assert split_cells("plain") == ("plain",)
