"""Tests for rawcommit.paragraphs module."""

import pytest

from rawcommit.lines import split_lines
from rawcommit.paragraphs import Paragraph, split_paragraphs


class TestSplitParagraphs:
    """Tests for split_paragraphs function."""

    def test_no_lines(self):
        """Test that no lines give no paragraphs."""
        assert split_paragraphs([]) == []

    def test_only_blank_lines(self):
        """Test that whitespace-only input has no paragraphs."""
        assert split_paragraphs(split_lines(" \n\t\n\n")) == []

    def test_single_paragraph(self):
        """Test that consecutive text lines form one paragraph."""
        paragraphs = split_paragraphs(split_lines("one\ntwo\r\nthree"))
        assert len(paragraphs) == 1
        assert paragraphs[0].text == "one\ntwo\nthree"
        assert paragraphs[0].first_line.number == 1

    def test_whitespace_lines_separate_paragraphs(self):
        """Test that whitespace-only lines end a paragraph."""
        paragraphs = split_paragraphs(split_lines("\n\nhead\n  \n\nbody a\nbody b\n\t\nfoot\n\n"))
        assert [p.text for p in paragraphs] == ["head", "body a\nbody b", "foot"]
        assert [p.first_line.number for p in paragraphs] == [3, 6, 9]

    def test_leading_whitespace_is_kept(self):
        """Test that indentation inside a paragraph is preserved."""
        paragraphs = split_paragraphs(split_lines(b"  - item\n    more\n"))
        assert paragraphs[0].text == "  - item\n    more"

    def test_paragraph_is_a_value(self):
        """Test that paragraphs compare by their lines."""
        lines = split_lines("a\n\nb")
        assert split_paragraphs(lines) == split_paragraphs(split_lines("a\n\nb"))
        assert Paragraph(tuple(lines[:1])).first_line is lines[0]

    def test_paragraph_requires_lines(self):
        """Test that a paragraph cannot be built without lines."""
        with pytest.raises(TypeError):
            Paragraph()
