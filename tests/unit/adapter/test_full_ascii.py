"""Tests for the full-ASCII extension table"""

import pytest

from barcode_server.adapter.output.encoders.full_ascii import FULL_ASCII, expand_full_ascii


class TestFullAsciiTable:
    """Tests for FULL_ASCII"""

    def test_covers_all_ascii(self):
        """Every 7-bit character has an entry"""
        assert len(FULL_ASCII) == 128

    @pytest.mark.parametrize("char", list("0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ -."))
    def test_native_characters(self, char: str):
        """Native characters map to themselves"""
        assert FULL_ASCII[char] == char

    @pytest.mark.parametrize(
        "char,expected",
        [
            ("\x00", "%U"),
            ("\x01", "$A"),
            ("\x1a", "$Z"),
            ("\x1b", "%A"),
            ("\x1f", "%E"),
            ("!", "/A"),
            ("$", "/D"),
            ("+", "/K"),
            (",", "/L"),
            ("/", "/O"),
            (":", "/Z"),
            (";", "%F"),
            ("?", "%J"),
            ("@", "%V"),
            ("[", "%K"),
            ("_", "%O"),
            ("`", "%W"),
            ("a", "+A"),
            ("z", "+Z"),
            ("{", "%P"),
            ("\x7f", "%T"),
        ],
    )
    def test_shifted_characters(self, char: str, expected: str):
        """Other characters map to a shift symbol and a letter"""
        assert FULL_ASCII[char] == expected


class TestExpandFullAscii:
    """Tests for expand_full_ascii"""

    def test_one_group_per_character(self):
        """Each input character yields one group"""
        assert expand_full_ascii("Ab1") == ["A", "+B", "1"]

    def test_empty(self):
        """Empty text yields no groups"""
        assert expand_full_ascii("") == []

    def test_non_ascii_raises_error(self):
        """Characters outside ASCII are rejected with their position"""
        with pytest.raises(ValueError, match="position 1 is not ASCII"):
            expand_full_ascii("aé")
