"""Shared test fixtures and configuration."""

import pytest


@pytest.fixture
def conventional_message():
    """A multi-paragraph conventional commit message with CRLF endings."""
    return (
        b"feat(api): add pagination\r\n"
        b"\r\n"
        b"List endpoints now accept page and per_page.\r\n"
        b"Defaults are unchanged.\r\n"
        b"\r\n"
        b"Refs: #42\r\n"
    )


@pytest.fixture
def mixed_message():
    """A message mixing LF, CRLF and CR terminators."""
    return "fix: typo\r\n \t \nFirst body line\rSecond body line\n"


@pytest.fixture
def round_trip_samples():
    """Buffers covering terminator styles and degenerate input."""
    return [
        b"",
        b"\n",
        b"\r",
        b"\r\n",
        b"\r\n\r\n",
        b"\n\r",
        b"fix: typo",
        b"fix: typo\n",
        b"fix: typo\n\nBody text here.",
        b"fix: typo\r\n\r\nBody.\r\n",
        b"fix: typo\r\rBody.\r",
        b"fix: typo\n   \nBody.",
        b"a\r\nb\nc\r",
        b"\xff\xfe not utf-8 \x80\n\nbody \xc3\x28",
        b"  leading space\n\n\n\ntrailing blanks\n\n\n",
    ]
