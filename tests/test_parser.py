"""
Unit Tests for Best-Move Extraction

Tests for extract_best_move, focusing on:
    - Token found regardless of surrounding engine chatter
    - Ponder move ignored
    - Missing keyword and degenerate keyword-without-move cases
"""

import pytest

from chess_bot.engine.parser import extract_best_move


class TestExtractBestMove:
    """Tests for the 'bestmove' scanner."""

    def test_plain_bestmove_line(self):
        assert extract_best_move("bestmove e2e4") == "e2e4"

    def test_ponder_is_ignored(self):
        text = "info depth 20 score cp 31\nbestmove e2e4 ponder e7e5\n"
        assert extract_best_move(text) == "e2e4"

    def test_promotion_move(self):
        assert extract_best_move("bestmove e7e8q\n") == "e7e8q"

    @pytest.mark.parametrize("before, after", [
        ("", ""),
        ("id name Stockfish 16\nuciok\nreadyok\n", "\n"),
        ("info depth 1 pv g1f3\ninfo depth 2 pv g1f3 g8f6\n", "\ninfo string done\n"),
        ("garbage without newline ", " trailing words"),
    ])
    def test_surrounding_text_does_not_matter(self, before, after):
        assert extract_best_move(f"{before}bestmove g1f3{after}") == "g1f3"

    def test_first_occurrence_wins(self):
        text = "bestmove d2d4\nbestmove e2e4\n"
        assert extract_best_move(text) == "d2d4"

    def test_no_bestmove(self):
        assert extract_best_move("info depth 5 score cp 12\nreadyok\n") == ""

    def test_empty_text(self):
        assert extract_best_move("") == ""

    def test_keyword_at_end_of_text(self):
        assert extract_best_move("info depth 1\nbestmove") == ""

    def test_keyword_followed_by_newline(self):
        """Only a single space separates the keyword from its move."""
        assert extract_best_move("bestmove\nreadyok\n") == ""

    def test_keyword_followed_by_space_only(self):
        assert extract_best_move("bestmove ") == ""

    def test_double_space_gives_empty_move(self):
        assert extract_best_move("bestmove  e2e4") == ""

    def test_none_move_returned_verbatim(self):
        """Checkmated / stalemated positions: the caller decides what (none) means."""
        assert extract_best_move("bestmove (none)\n") == "(none)"
