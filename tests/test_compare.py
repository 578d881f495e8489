"""Tests for compare.py -- safe comparisons, case-insensitive search, hash."""

import pytest

from mediastrings.compare import (
    compare_nocase,
    compare_safe,
    find_nocase,
    find_nocase_text,
    has_prefix_nocase,
    has_suffix_nocase,
    str_hash,
)


def _plain_bernstein(data: bytes) -> int:
    h = 5381
    for c in data:
        h = (h * 33 + (c - 256 if c > 127 else c)) & 0xFFFFFFFF
    return h


class TestCompareSafe:
    def test_none_handling(self):
        assert compare_safe(None, None) == 0
        assert compare_safe(None, "x") == -1
        assert compare_safe("x", None) == 1

    def test_ordering(self):
        assert compare_safe("abc", "abd") == -1
        assert compare_safe("b", "a") == 1
        assert compare_safe("same", "same") == 0

    def test_case_sensitive(self):
        assert compare_safe("ABC", "abc") == -1

    def test_bounded(self):
        assert compare_safe("abc", "abd", 2) == 0
        assert compare_safe("abc", "abd", 3) == -1

    def test_bytes_and_str_agree(self):
        assert compare_safe(b"caf\xc3\xa9", "café") == 0


class TestCompareNocase:
    def test_none_handling(self):
        assert compare_nocase(None, None) == 0
        assert compare_nocase(None, "x") == -1
        assert compare_nocase("x", None) == 1

    def test_ignores_ascii_case(self):
        assert compare_nocase("ABC", "abc") == 0
        assert compare_nocase("abc", "ABD") == -1

    def test_bounded(self):
        assert compare_nocase("HelloX", "helloY", 5) == 0

    def test_non_ascii_not_folded(self):
        assert compare_nocase("É", "é") != 0


class TestPrefixSuffix:
    def test_prefix(self):
        assert has_prefix_nocase("File:///music", "FILE://")
        assert not has_prefix_nocase("http://x", "file://")

    def test_suffix(self):
        assert has_suffix_nocase("song.MP3", ".mp3")
        assert not has_suffix_nocase("mp3", ".mp3")


class TestStrHash:
    def test_empty_is_seed(self):
        assert str_hash("") == 5381

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("a", 177670),
            ("abcd", 2090069583),
            ("abcdefgh", 1722392489),
            ("abcdefghijklm", 1852101600),
        ],
    )
    def test_known_values(self, text, expected):
        assert str_hash(text) == expected

    def test_non_ascii_bytes_are_signed(self):
        assert str_hash("é") == 5857809
        assert str_hash(b"\xc3\xa9") == 5857809

    def test_stable_across_calls(self):
        assert str_hash("file:///music/a.mp3") == str_hash("file:///music/a.mp3")

    def test_fits_32_bits(self):
        assert 0 <= str_hash("x" * 1000) < 2**32

    def test_unrolled_matches_plain_definition(self):
        text = "file:///home/user/Music/Ünïcode Album/01 - Intro.flac"
        for n in range(len(text) + 1):
            data = text[:n].encode()
            assert str_hash(data) == _plain_bernstein(data)


class TestFindNocase:
    def test_match_offset(self):
        assert find_nocase("Hello World", "WORLD") == 6

    def test_not_found(self):
        assert find_nocase("abc", "x") is None
        assert find_nocase("ab", "abc") is None

    def test_empty_needle(self):
        assert find_nocase("abc", "") == 0

    def test_byte_offsets(self):
        assert find_nocase("é-ABC", "abc") == 3

    def test_first_match(self):
        assert find_nocase("xAbxab", "ab") == 1

    def test_nul_does_not_match_non_letters(self):
        assert find_nocase(b"a\x00b", b"1") is None
        assert find_nocase(b"a\x00b", b"-") is None
        assert find_nocase(b"a\x00b", b"\x00") == 1


class TestFindNocaseText:
    def test_ascii(self):
        assert find_nocase_text("abc", "B") == 1

    def test_unicode_folding(self):
        assert find_nocase_text("Ünïcode ÄBC", "äbc") == 8
        assert find_nocase_text("ÜNÏCODE", "ünïcode") == 0

    def test_code_point_offsets(self):
        assert find_nocase_text("ééé-x", "X") == 4

    def test_no_multi_character_folding(self):
        assert find_nocase_text("straße", "SS") is None

    def test_not_found(self):
        assert find_nocase_text("album", "track") is None

    def test_nul_does_not_match_non_letters(self):
        assert find_nocase_text("a1b", "\x00") is None
        assert find_nocase_text("a.b", "\x00") is None
