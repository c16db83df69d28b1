"""Exception classes for rawcommit.

Contains:
- RawCommitError: Base exception for the package
- UnsupportedInputError: Raised when a message is neither bytes nor text
"""


class RawCommitError(Exception):
    """Base exception for rawcommit errors."""

    pass


class UnsupportedInputError(RawCommitError, TypeError):
    """Raised when the input is not a bytes-like object or a string."""

    pass
