"""Tests for natsort.py -- natural and percent-decoding comparators."""

from mediastrings.natsort import (
    compare_natural,
    compare_natural_encoded,
    natural_sort_key,
    natural_sorted,
)


class TestCompareNatural:
    def test_numbers_by_value(self):
        assert compare_natural("track2", "track10") < 0
        assert compare_natural("file10.mp3", "file9.mp3") > 0

    def test_case_insensitive(self):
        assert compare_natural("TRACK2", "track2") == 0

    def test_none_handling(self):
        assert compare_natural(None, "x") < 0
        assert compare_natural("x", None) > 0
        assert compare_natural(None, None) == 0

    def test_leading_zeros_equal(self):
        assert compare_natural("a01", "a1") == 0

    def test_prefix_sorts_first(self):
        assert compare_natural("a", "a1") < 0
        assert compare_natural("track", "Track 1") < 0

    def test_non_ascii_by_raw_value(self):
        assert compare_natural("é", "z") > 0

    def test_digit_against_letter(self):
        assert compare_natural("1", "a") < 0

    def test_returns_unit_values(self):
        assert compare_natural("b", "a") == 1
        assert compare_natural("a", "b") == -1


class TestCompareNaturalEncoded:
    def test_decodes_escapes(self):
        assert compare_natural_encoded("a%20b", "a b") == 0
        assert compare_natural_encoded("%41", "a") == 0

    def test_plain_compare_does_not_decode(self):
        assert compare_natural("%41", "a") < 0

    def test_decoded_digit_starts_number(self):
        assert compare_natural_encoded("track%32", "track10") < 0

    def test_digits_continuing_a_run_are_read_raw(self):
        assert compare_natural_encoded("track%31%30", "track9") < 0

    def test_short_escape_compared_raw(self):
        assert compare_natural_encoded("a%4", "a%4") == 0

    def test_none_handling(self):
        assert compare_natural_encoded(None, "x") < 0
        assert compare_natural_encoded(None, None) == 0


class TestSorting:
    def test_natural_sorted(self):
        items = ["track10", "Track2", "track1"]
        assert natural_sorted(items) == ["track1", "Track2", "track10"]

    def test_encoded_sorted(self):
        items = ["file:///m/10%20x", "file:///m/9%20x"]
        assert natural_sorted(items, encoded=True) == ["file:///m/9%20x", "file:///m/10%20x"]

    def test_sort_key(self):
        assert sorted(["b10", "b9", "a"], key=natural_sort_key) == ["a", "b9", "b10"]
