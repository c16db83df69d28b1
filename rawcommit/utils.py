"""Buffer coercion and codec helpers shared by the rawcommit modules."""

from typing import Union

from rawcommit.constants import ENCODING, ENCODING_ERRORS
from rawcommit.exceptions import UnsupportedInputError

Buffer = Union[bytes, str]


def coerce_buffer(data) -> Buffer:
    """Return data as ``bytes`` or ``str``.

    bytearray and memoryview inputs are copied into ``bytes`` so that the
    result is immutable.

    Args:
        data: A bytes-like object or a string.

    Returns:
        The data as ``bytes`` or ``str``.

    Raises:
        UnsupportedInputError: If data is neither bytes-like nor a string.
    """
    if isinstance(data, (bytes, str)):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise UnsupportedInputError(
        f"Expected bytes or str, got {type(data).__name__}"
    )


def decode(data: Buffer) -> str:
    """Return data as text, decoding bytes without loss."""
    if isinstance(data, str):
        return data
    return data.decode(ENCODING, ENCODING_ERRORS)


def encode(data: Buffer) -> bytes:
    """Return data as bytes, reversing decode().

    Text holding lone surrogates that decode() never produces (outside
    U+DC80-U+DCFF) is encoded with "surrogatepass" instead, so encoding
    never fails.
    """
    if isinstance(data, bytes):
        return data
    try:
        return data.encode(ENCODING, ENCODING_ERRORS)
    except UnicodeEncodeError:
        return data.encode(ENCODING, "surrogatepass")
