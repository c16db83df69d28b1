"""Raw commit message parsing: subject/body split with exact round-trip."""

from importlib.metadata import version, PackageNotFoundError

from rawcommit.constants import Terminator
from rawcommit.exceptions import RawCommitError, UnsupportedInputError
from rawcommit.lines import (
    Line,
    iter_byte_lines,
    iter_lines,
    iter_text_lines,
    split_lines,
)
from rawcommit.message import RawMessage, new_raw_message
from rawcommit.models import MessageParts
from rawcommit.paragraphs import Paragraph, split_paragraphs

try:
    __version__ = version("rawcommit")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"

__all__ = [
    "Line",
    "MessageParts",
    "Paragraph",
    "RawCommitError",
    "RawMessage",
    "Terminator",
    "UnsupportedInputError",
    "iter_byte_lines",
    "iter_lines",
    "iter_text_lines",
    "new_raw_message",
    "split_lines",
    "split_paragraphs",
]
