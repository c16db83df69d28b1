"""Raw commit message representation.

RawMessage splits a commit message into its subject (the first line) and its
body (everything after the first empty or whitespace-only line that follows
the subject), while keeping the original buffer so it can be reproduced
exactly.
"""

from typing import Optional

from rawcommit.constants import DEFAULT_REBUILD_TERMINATOR, Terminator
from rawcommit.lines import Line, iter_lines
from rawcommit.models import MessageParts
from rawcommit.paragraphs import Paragraph, split_paragraphs
from rawcommit.utils import Buffer, coerce_buffer, decode, encode


class RawMessage:
    """A commit message broken down into lines, subject and body.

    Instances are immutable. Editing methods return a new RawMessage.

    Attributes:
        raw: The original input, unmodified and in its original type.
        lines: All lines of the message.
        paragraphs: Runs of non-blank lines.
        separator: The blank line between subject and body, or None.
    """

    def __init__(self, message: Buffer = b""):
        """Parse a commit message.

        Any bytes or text is accepted, including empty input and bytes that
        are not valid UTF-8.

        Args:
            message: The raw commit message.

        Raises:
            UnsupportedInputError: If message is neither bytes-like nor a
                string.
        """
        self._raw = coerce_buffer(message)
        self._lines = tuple(iter_lines(self._raw))
        self._paragraphs = tuple(split_paragraphs(self._lines))
        self._separator = None
        self._body_start = len(self._raw)

        offset = 0
        for line in self._lines:
            offset += len(line.content) + len(line.terminator.value)
            if line.number > 1 and line.is_blank:
                self._separator = line
                self._body_start = offset
                break

    @classmethod
    def from_parts(cls, parts: MessageParts, as_bytes: bool = False) -> "RawMessage":
        """Build a message from a subject and body.

        Args:
            parts: The subject, body and rebuild terminator.
            as_bytes: Store the rendered message as bytes instead of text.

        Returns:
            A new RawMessage whose subject and body read back as given.
        """
        rendered = parts.render()
        return cls(encode(rendered) if as_bytes else rendered)

    @property
    def raw(self) -> Buffer:
        return self._raw

    @property
    def lines(self) -> tuple[Line, ...]:
        return self._lines

    @property
    def paragraphs(self) -> tuple[Paragraph, ...]:
        return self._paragraphs

    @property
    def separator(self) -> Optional[Line]:
        return self._separator

    @property
    def subject_bytes(self) -> bytes:
        if not self._lines:
            return b""
        return encode(self._lines[0].content)

    @property
    def subject(self) -> str:
        """First line of the message without its terminator."""
        if not self._lines:
            return ""
        return self._lines[0].text

    @property
    def body_bytes(self) -> bytes:
        if self._separator is None:
            return b""
        return encode(self._raw[self._body_start:])

    @property
    def body(self) -> str:
        """Everything after the separator line, verbatim.

        Empty when no blank line follows the subject.
        """
        if self._separator is None:
            return ""
        return decode(self._raw[self._body_start:])

    def to_bytes(self) -> bytes:
        """Return the original message as bytes."""
        return encode(self._raw)

    def to_text(self) -> str:
        """Return the original message as text."""
        return decode(self._raw)

    def to_parts(self, terminator: Terminator = DEFAULT_REBUILD_TERMINATOR) -> MessageParts:
        """Export subject and body for editing."""
        return MessageParts(subject=self.subject, body=self.body, terminator=terminator)

    def replace(
        self,
        subject: Optional[str] = None,
        body: Optional[str] = None,
        terminator: Terminator = DEFAULT_REBUILD_TERMINATOR,
    ) -> "RawMessage":
        """Return a new message with the subject and/or body replaced.

        The new message is rebuilt from its parts, so the separator and the
        subject terminator use ``terminator`` regardless of the original
        line endings. The body text itself is kept verbatim.

        Args:
            subject: New subject, or None to keep the current one.
            body: New body, or None to keep the current one.
            terminator: Terminator used to rebuild the message.

        Returns:
            A new RawMessage of the same buffer type as this one.

        Raises:
            pydantic.ValidationError: If subject spans more than one line.
        """
        parts = MessageParts(
            subject=self.subject if subject is None else subject,
            body=self.body if body is None else body,
            terminator=terminator,
        )
        return self.from_parts(parts, as_bytes=isinstance(self._raw, bytes))

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"RawMessage({self._raw!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, RawMessage):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)


def new_raw_message(message: Buffer) -> RawMessage:
    """Parse a commit message into a RawMessage."""
    return RawMessage(message)
