"""Tests for card-list files."""

import pytest

from uno_engine.card_file import read_card_file, write_card_file
from uno_engine.cards import Card, Color, ParseError, Rank
from uno_engine.deck import create_deck, is_complete_deck


class TestReadCardFile:
    def test_missing_file_is_empty(self, tmp_path):
        assert read_card_file(tmp_path / "nope.txt") == []

    def test_reads_tokens(self, tmp_path):
        path = tmp_path / "cards.txt"
        path.write_text("3|yellow\nplus-two|green\nwild\n")
        assert read_card_file(path) == [
            Card(Rank.THREE, Color.YELLOW),
            Card(Rank.DRAW_TWO, Color.GREEN),
            Card(Rank.WILD, Color.NONE),
        ]

    def test_skips_blank_lines(self, tmp_path):
        path = tmp_path / "cards.txt"
        path.write_text("\n3|yellow\n\n   \nwild draw four\n")
        assert len(read_card_file(path)) == 2

    def test_malformed_line(self, tmp_path):
        path = tmp_path / "cards.txt"
        path.write_text("3|yellow\n7\n")
        with pytest.raises(ParseError, match=r"cards\.txt:2"):
            read_card_file(path)

    def test_non_utf8_line(self, tmp_path):
        path = tmp_path / "cards.txt"
        path.write_bytes(b"3|yellow\n\xff\xfe|red\n")
        with pytest.raises(ParseError, match=r"UTF-8 \(.*cards\.txt:2\)"):
            read_card_file(path)

    def test_accented_color_is_unknown(self, tmp_path):
        path = tmp_path / "cards.txt"
        path.write_text("3|jauneé\n", encoding="utf-8")
        with pytest.raises(ParseError, match="unknown color"):
            read_card_file(path)

    def test_directory_path(self, tmp_path):
        with pytest.raises(IsADirectoryError):
            read_card_file(tmp_path)


class TestWriteCardFile:
    def test_write_full_deck(self, tmp_path):
        path = write_card_file(tmp_path / "deck" / "full.txt", create_deck())
        lines = path.read_text().splitlines()
        assert len(lines) == 108
        assert lines[0] == "0|red"
        assert lines[-1] == "wild-draw-four"
        assert is_complete_deck(read_card_file(path))
