"""Paragraph grouping for commit messages.

A paragraph is a maximal run of consecutive lines that are neither empty nor
whitespace-only.
"""

from dataclasses import dataclass
from typing import Iterable

from rawcommit.lines import Line, join_lines


@dataclass(frozen=True)
class Paragraph:
    """A group of consecutive non-blank lines."""

    lines: tuple[Line, ...]

    @property
    def first_line(self) -> Line:
        """First line of the paragraph."""
        return self.lines[0]

    @property
    def text(self) -> str:
        """Line contents joined with LF."""
        return join_lines(self.lines)


def split_paragraphs(lines: Iterable[Line]) -> list[Paragraph]:
    """Group lines into paragraphs separated by blank lines.

    Args:
        lines: Lines as produced by the line splitter.

    Returns:
        The paragraphs in message order. Blank lines belong to none of them.
    """
    paragraphs = []
    current: list[Line] = []

    for line in lines:
        if not line.is_blank:
            current.append(line)
        elif current:
            paragraphs.append(Paragraph(tuple(current)))
            current = []

    if current:
        paragraphs.append(Paragraph(tuple(current)))

    return paragraphs
