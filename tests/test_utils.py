"""Tests for rawcommit.utils module."""

import pytest

from rawcommit.exceptions import UnsupportedInputError
from rawcommit.utils import coerce_buffer, decode, encode


class TestCoerceBuffer:
    """Tests for coerce_buffer function."""

    def test_bytes_and_str_pass_through(self):
        """Test that bytes and str are returned unchanged."""
        data = b"abc"
        assert coerce_buffer(data) is data
        assert coerce_buffer("abc") == "abc"

    def test_bytes_like_becomes_bytes(self):
        """Test that mutable bytes-like input is copied to bytes."""
        source = bytearray(b"abc")
        result = coerce_buffer(source)
        source[0] = ord("x")
        assert result == b"abc"
        assert isinstance(coerce_buffer(memoryview(b"abc")), bytes)

    @pytest.mark.parametrize("value", [None, 1, 1.5, ["a"], object()])
    def test_unsupported_types(self, value):
        """Test that other types raise UnsupportedInputError."""
        with pytest.raises(UnsupportedInputError):
            coerce_buffer(value)


class TestCodec:
    """Tests for decode and encode functions."""

    def test_utf8(self):
        """Test that valid UTF-8 decodes normally."""
        assert decode("café".encode()) == "café"
        assert encode("café") == "café".encode()

    def test_invalid_bytes_survive(self):
        """Test that invalid UTF-8 bytes round-trip through text."""
        data = b"\xff\x80 ok \xc3\x28"
        assert encode(decode(data)) == data

    def test_same_type_is_unchanged(self):
        """Test that no conversion happens for the matching type."""
        assert decode("x") == "x"
        assert encode(b"x") == b"x"

    def test_foreign_surrogates_encode(self):
        """Test that surrogates decode() never produces still encode."""
        assert encode("a\ud800b") == b"a\xed\xa0\x80b"
        assert encode("\udc80\ud800") == b"\xed\xb2\x80\xed\xa0\x80"
