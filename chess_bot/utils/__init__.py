"""
Utilities Module

Test-suite helpers for checking the engine pipeline end to end.

Key Components:
    - Bratko-Kopec test suite: 24 positions with known best moves
"""

from chess_bot.utils.testing import (
    BRATKO_KOPEC_POSITIONS,
    TestPosition,
    TestResult,
    evaluate_position,
    run_bratko_kopec,
)

__all__ = [
    'BRATKO_KOPEC_POSITIONS',
    'TestPosition',
    'TestResult',
    'evaluate_position',
    'run_bratko_kopec',
]
