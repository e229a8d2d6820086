"""Tests for the Bratko-Kopec suite runner."""

import chess

from chess_bot.utils.testing import (
    BRATKO_KOPEC_POSITIONS,
    evaluate_position,
    run_bratko_kopec,
)


class TestBratkoKopecPositions:
    """Test the bundled position data."""

    def test_position_count(self):
        assert len(BRATKO_KOPEC_POSITIONS) == 24

    def test_positions_parse(self):
        for position in BRATKO_KOPEC_POSITIONS:
            assert chess.Board(position.fen).king(chess.WHITE) is not None, position.id
            assert position.best_moves, position.id


class TestSuiteRunner:
    """Test running positions through a stub engine."""

    def test_evaluate_position(self, make_engine, fast_settings):
        position = BRATKO_KOPEC_POSITIONS[0]
        settings = fast_settings(make_engine(answer="bestmove d6d1"))

        result = evaluate_position(position, settings)

        assert result.found_move == "d6d1"
        assert result.correct
        assert not result.failed
        assert result.time_taken > 0

    def test_run_bratko_kopec_summary(self, make_engine, fast_settings):
        settings = fast_settings(make_engine(answer="bestmove d6d1"))

        summary = run_bratko_kopec(
            settings=settings,
            positions=BRATKO_KOPEC_POSITIONS[:2],
            progress=False,
        )

        # d6d1 solves BK.01 and is illegal in BK.02
        assert summary['score'] == 1
        assert summary['total'] == 2
        assert summary['failures'] == 1
        assert summary['percentage'] == 50.0
        assert len(summary['results']) == 2
        assert summary['avg_time'] > 0

    def test_empty_suite(self, make_engine, fast_settings):
        summary = run_bratko_kopec(fast_settings(make_engine()), positions=[], progress=False)

        assert summary['total'] == 0
        assert summary['percentage'] == 0.0
