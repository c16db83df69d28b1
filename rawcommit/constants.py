"""Constants for the rawcommit package.

Contains:
- Terminator: Line terminator kinds recognised by the line splitter
- ENCODING / ENCODING_ERRORS: Codec used when converting bytes <-> text
- DEFAULT_REBUILD_TERMINATOR: Terminator used when rebuilding an edited message
- COMMENT_CHAR: Leading character of git comment lines
- NON_BLANK_SEPARATORS: Characters str.isspace() accepts that never make a
  line blank
"""

from enum import Enum


class Terminator(Enum):
    """Line terminator observed at the end of a line."""

    NONE = ""
    LF = "\n"
    CRLF = "\r\n"
    CR = "\r"

    def to_bytes(self) -> bytes:
        """Return the terminator as raw bytes."""
        return self.value.encode("ascii")


# Undecodable bytes map to lone surrogates and back, so text views of a
# bytes message can always be encoded again without loss.
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"

# Edited messages are rebuilt as: subject, T, T, body
DEFAULT_REBUILD_TERMINATOR = Terminator.LF

COMMENT_CHAR = "#"

# str.isspace() also accepts the ASCII information separators, which git
# tooling does not treat as whitespace.
NON_BLANK_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")
