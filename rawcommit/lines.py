"""Line splitting for raw commit messages.

Contains:
- Line: A single line of content plus the terminator observed after it
- iter_byte_lines / iter_text_lines: Lazy splitters for bytes and text
- iter_lines / split_lines: Type-dispatching entry points
- Helpers for searching, trimming and rendering sequences of lines

Only CR and LF are line terminators. CRLF is a single terminator, a lone CR
or a lone LF each end a line. Concatenating every line's content and
terminator reproduces the input exactly.
"""

import re
from dataclasses import dataclass
from typing import Iterator, Sequence

from rawcommit.constants import COMMENT_CHAR, NON_BLANK_SEPARATORS, Terminator
from rawcommit.utils import Buffer, coerce_buffer, decode, encode

# CRLF must be tried before CR so it is never split in two.
_BYTE_BREAK = re.compile(rb"\r\n|\r|\n")
_TEXT_BREAK = re.compile(r"\r\n|\r|\n")

# Matched terminator (bytes or text) -> Terminator kind
_TERMINATORS = {}
for _kind in Terminator:
    if _kind is not Terminator.NONE:
        _TERMINATORS[_kind.value] = _kind
        _TERMINATORS[_kind.to_bytes()] = _kind
del _kind


@dataclass(frozen=True)
class Line:
    """A single line of a message.

    Attributes:
        number: Position of the line, starting at 1 as in a text editor.
        content: The line without its terminator, in the input's type.
        terminator: The terminator that ended the line, NONE for a final
            unterminated line.
    """

    number: int
    content: Buffer
    terminator: Terminator = Terminator.NONE

    @property
    def text(self) -> str:
        """Content as text."""
        return decode(self.content)

    @property
    def is_empty(self) -> bool:
        """True if the line has no content at all."""
        return len(self.content) == 0

    @property
    def is_blank(self) -> bool:
        """True if the line is empty or holds only whitespace."""
        return all(
            c.isspace() and c not in NON_BLANK_SEPARATORS for c in self.text
        )

    @property
    def is_comment(self) -> bool:
        """True if the first non-whitespace character is a comment marker."""
        return self.text.lstrip().startswith(COMMENT_CHAR)

    def to_bytes(self) -> bytes:
        """Return content and terminator as bytes."""
        return encode(self.content) + self.terminator.to_bytes()

    def to_text(self) -> str:
        """Return content and terminator as text."""
        return self.text + self.terminator.value


def _scan(data: Buffer, pattern: re.Pattern) -> Iterator[Line]:
    offset = 0
    number = 0
    for match in pattern.finditer(data):
        number += 1
        yield Line(number, data[offset:match.start()], _TERMINATORS[match.group()])
        offset = match.end()

    if offset < len(data):
        yield Line(number + 1, data[offset:], Terminator.NONE)


def iter_byte_lines(data: bytes) -> Iterator[Line]:
    """Lazily split bytes into lines.

    Each call returns a fresh iterator; call again to restart.

    Args:
        data: The bytes to split.

    Returns:
        An iterator of Line values with bytes content.
    """
    return _scan(bytes(data), _BYTE_BREAK)


def iter_text_lines(text: str) -> Iterator[Line]:
    """Lazily split text into lines.

    Each call returns a fresh iterator; call again to restart.

    Args:
        text: The string to split.

    Returns:
        An iterator of Line values with str content.
    """
    return _scan(text, _TEXT_BREAK)


def iter_lines(data) -> Iterator[Line]:
    """Lazily split bytes or text into lines.

    Raises:
        UnsupportedInputError: If data is neither bytes-like nor a string.
    """
    data = coerce_buffer(data)
    if isinstance(data, str):
        return iter_text_lines(data)
    return iter_byte_lines(data)


def split_lines(data) -> list[Line]:
    """Split bytes or text into a list of lines."""
    return list(iter_lines(data))


def first_text_index(lines: Sequence[Line]) -> int:
    """Return the index of the first non-blank line, or -1 if there is none."""
    for i, line in enumerate(lines):
        if not line.is_blank:
            return i
    return -1


def last_text_index(lines: Sequence[Line]) -> int:
    """Return the index of the last non-blank line, or -1 if there is none."""
    for i in range(len(lines) - 1, -1, -1):
        if not lines[i].is_blank:
            return i
    return -1


def trim_blank_lines(lines: Sequence[Line]) -> list[Line]:
    """Drop blank lines from the start and end of lines.

    Whitespace inside the remaining lines, including leading whitespace on the
    first kept line, is left alone.
    """
    first = first_text_index(lines)
    if first == -1:
        return []
    return list(lines[first:last_text_index(lines) + 1])


def join_lines(lines: Sequence[Line], separator: str = "\n") -> str:
    """Join the text content of lines, dropping their original terminators."""
    return separator.join(line.text for line in lines)


def render_bytes(lines: Sequence[Line]) -> bytes:
    """Rebuild the original bytes of lines, keeping each line's terminator."""
    return b"".join(line.to_bytes() for line in lines)


def render_text(lines: Sequence[Line]) -> str:
    """Rebuild the original text of lines, keeping each line's terminator."""
    return "".join(line.to_text() for line in lines)
