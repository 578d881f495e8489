"""Tests for text.py -- byte/text coercion and builders."""

import pytest

from mediastrings.errors import BufferCapacityError
from mediastrings.text import (
    as_bytes,
    as_text,
    is_valid_utf8,
    str_concat,
    str_tolower,
    str_tolower_utf8,
)


class TestCoercion:
    def test_as_bytes(self):
        assert as_bytes("é") == b"\xc3\xa9"
        assert as_bytes(b"x") == b"x"
        assert as_bytes(bytearray(b"y")) == b"y"

    def test_undecodable_round_trip(self):
        text = as_text(b"caf\xe9")
        assert text == "caf\udce9"
        assert as_bytes(text) == b"caf\xe9"

    def test_as_text_passes_str(self):
        assert as_text("abc") == "abc"

    def test_is_valid_utf8(self):
        assert is_valid_utf8("é".encode())
        assert not is_valid_utf8(b"\xe9")


class TestStrConcat:
    def test_concat(self):
        assert str_concat("file://", b"/music", "/a.mp3") == "file:///music/a.mp3"

    def test_out_of_space(self):
        with pytest.raises(BufferCapacityError):
            str_concat("a" * 4096, "b")


class TestLower:
    def test_ascii_only(self):
        assert str_tolower("ÀBC") == "Àbc"

    def test_unicode(self):
        assert str_tolower_utf8("ÀBC") == "àbc"

    def test_unicode_never_expands(self):
        assert str_tolower_utf8("İSTANBUL") == "İstanbul"
        assert len(str_tolower_utf8("Aİ")) == 2
