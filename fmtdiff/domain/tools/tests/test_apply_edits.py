"""
Tests for apply_edits.py
"""
import pytest

from fmtdiff.domain.schemas.diff import EditOperation
from fmtdiff.domain.tools.apply_edits import apply_edits


def _edit(start, end, text, end_character=None):
    return EditOperation(
        range_start_line=start,
        range_end_line=end,
        end_character=end_character,
        replacement_text=text,
    )


class TestApplyEdits:
    """Test in-memory edit application"""

    def test_no_edits(self):
        assert apply_edits("a\nb\n", []) == "a\nb\n"

    def test_full_width_replacement_keeps_line_terminator(self):
        assert apply_edits("a\nb\nc\n", [_edit(1, 1, "B")]) == "a\nB\nc\n"

    def test_multi_line_range(self):
        assert apply_edits("a\nb\nc\nd\n", [_edit(1, 2, "X\nY\nZ")]) == "a\nX\nY\nZ\nd\n"

    def test_crlf_terminator_preserved(self):
        assert apply_edits("a\r\nb\r\n", [_edit(0, 0, "A")]) == "A\r\nb\r\n"

    def test_insertion_at_column_zero(self):
        assert apply_edits("a\nb\n", [_edit(1, 1, "new\n", end_character=0)]) == "a\nnew\nb\n"

    def test_last_line_without_newline(self):
        assert apply_edits("a\nb", [_edit(1, 1, "B")]) == "a\nB"

    def test_line_past_end_clamps(self):
        assert apply_edits("a\n", [_edit(5, 5, "tail", end_character=0)]) == "a\ntail"

    def test_multiple_edits_in_order(self):
        edits = [_edit(0, 0, "A"), _edit(2, 3, "CD")]
        assert apply_edits("a\nb\nc\nd\ne\n", edits) == "A\nb\nCD\ne\n"

    def test_overlapping_edits_rejected(self):
        with pytest.raises(ValueError):
            apply_edits("a\nb\nc\n", [_edit(0, 1, "x"), _edit(1, 2, "y")])

    def test_out_of_order_edits_rejected(self):
        with pytest.raises(ValueError):
            apply_edits("a\nb\nc\n", [_edit(2, 2, "x"), _edit(0, 0, "y")])

    def test_negative_line_rejected(self):
        with pytest.raises(ValueError):
            apply_edits("a\n", [_edit(-1, 0, "x")])
