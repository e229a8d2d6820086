"""
Engine Test Suites

Runs a UCI engine through the chess bot against positions with a known
best move, to check that the whole pipeline (locate, spawn, handshake,
search, parse, teardown) produces sensible moves.

This is a smoke test for the plumbing, not a strength rating: the number
that matters is how many positions came back with no move at all. The
accepted-move score is reported for reference only.

Test Suites:
    Bratko-Kopec Test: 24 tactical and positional positions
       - Created by Danny Kopec and Ivan Bratko (1982)
       - Each position has one or two accepted best moves

Metrics:
    - Correct Moves: positions where the engine played an accepted move
    - Failures: positions where no move came back at all
    - Time per Position: wall-clock time of each move() call

References:
    - Bratko-Kopec: https://www.chessprogramming.org/Bratko-Kopec_Test
"""

import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from tqdm import tqdm

from chess_bot.config import EngineSettings
from chess_bot.engine.client import move


@dataclass
class TestPosition:
    """
    A test position with expected best move(s).

    Attributes:
        fen: Board position in FEN notation
        best_moves: Acceptable best moves (UCI format)
        id: Position identifier (e.g., "BK.01")
    """
    __test__ = False

    fen: str
    best_moves: List[str]
    id: str = ""


@dataclass
class TestResult:
    """Result of asking the engine about a single position."""
    __test__ = False

    position: TestPosition
    found_move: str
    correct: bool
    time_taken: float

    @property
    def failed(self) -> bool:
        """True if the engine produced no move at all."""
        return not self.found_move


_BRATKO_KOPEC = [
    ("BK.01", "1k1r4/pp1b1R2/3q2pp/4p3/2B5/4Q3/PPP2B2/2K5 b - - 0 1", ["d6d1"]),
    ("BK.02", "3r1k2/4npp1/1ppr3p/p6P/P2PPPP1/1NR5/5K2/2R5 w - - 0 1", ["d4d5"]),
    ("BK.03", "2q1rr1k/3bbnnp/p2p1pp1/2pPp3/PpP1P1P1/1P2BNNP/2BQ1PRK/7R b - - 0 1", ["f6f5"]),
    ("BK.04", "rnbqkb1r/p3pppp/1p6/2ppP3/3N4/2P5/PPP1QPPP/R1B1KB1R w KQkq - 0 1", ["e5e6"]),
    ("BK.05", "r1b2rk1/2q1b1pp/p2ppn2/1p6/3QP3/1BN1B3/PPP3PP/R4RK1 w - - 0 1", ["d4d7", "c3d5"]),
    ("BK.06", "2r3k1/pppR1pp1/4p3/4P1P1/5P2/1P4K1/P1P5/8 w - - 0 1", ["g5g6"]),
    ("BK.07", "1nk1r1r1/pp2n1pp/4p3/q2pPp1N/b1pP1P2/B1P2R2/2P1B1PP/R2Q2K1 w - - 0 1", ["h5f6"]),
    ("BK.08", "4b3/p3kp2/6p1/3pP2p/2pP1P2/4K1P1/P3N2P/8 w - - 0 1", ["f4f5"]),
    ("BK.09", "2kr1bnr/pbpq4/2n1pp2/3p3p/3P1P1B/2N2N1Q/PPP3PP/2KR1B1R w - - 0 1", ["f4f5"]),
    ("BK.10", "3rr1k1/pp3pp1/1qn2np1/8/3p4/PP1R1P2/2P1NQPP/R1B3K1 b - - 0 1", ["c6e5"]),
    ("BK.11", "2r1nrk1/p2q1ppp/bp1p4/n1pPp3/P1P1P3/2PBB1N1/4QPPP/R4RK1 w - - 0 1", ["f2f4"]),
    ("BK.12", "r3r1k1/ppqb1ppp/8/4p1NQ/8/2P5/PP3PPP/R3R1K1 b - - 0 1", ["d7f5"]),
    ("BK.13", "r2q1rk1/4bppp/p2p4/2pP4/3pP3/3Q4/PP1B1PPP/R3R1K1 w - - 0 1", ["b2b4"]),
    ("BK.14", "rnb2r1k/pp2p2p/2pp2p1/q2P1p2/8/1Pb2NP1/PB2PPBP/R2Q1RK1 w - - 0 1", ["d5c6", "d5d6"]),
    ("BK.15", "2r3k1/1p2q1pp/2b1pr2/p1pp4/6Q1/1P1PP1R1/P1PN2PP/5RK1 w - - 0 1", ["g4g7"]),
    ("BK.16", "r1bqkb1r/4npp1/p1p4p/1p1pP1B1/3N1P2/2N5/PPP3PP/R2QK2R w KQkq - 0 1", ["e5e6"]),
    ("BK.17", "r2q1rk1/1ppnbppp/p2p1nb1/3Pp3/2P1P1P1/2N2N1P/PPB1QP2/R1B2RK1 b - - 0 1", ["h7h5"]),
    ("BK.18", "r1bq1rk1/pp2ppbp/2np2p1/2n5/P3PP2/N1P2N2/1PB3PP/R1B1QRK1 b - - 0 1", ["c6b4"]),
    ("BK.19", "3rr3/2pq2pk/p2p1pnp/8/2QBPP2/1P6/P5PP/4RRK1 b - - 0 1", ["e8e4"]),
    ("BK.20", "r4k2/pb2bp1r/1p1qp2p/3pNp2/3P1P2/2N3P1/PPP1Q2P/2KRR3 w - - 0 1", ["g3g4"]),
    ("BK.21", "3rn2k/ppb2rpp/2ppqp2/5N2/2P1P3/1P5Q/PB3PPP/3RR1K1 w - - 0 1", ["h3h7"]),
    ("BK.22", "2r2rk1/1bqnbpp1/1p1ppn1p/pP6/N1P1P3/P2B1N1P/1B2QPP1/R2R2K1 b - - 0 1", ["b7e4"]),
    ("BK.23", "r1bqk2r/pp2bppp/2p5/3pP3/P2Q1P2/2N1B3/1PP3PP/R4RK1 b kq - 0 1", ["e8g8"]),
    ("BK.24", "r2qnrnk/p2b2b1/1p1p2pp/2pPpp2/1PP1P3/PRNBB3/3QNPPP/5RK1 w - - 0 1", ["f2f4"]),
]

BRATKO_KOPEC_POSITIONS = [
    TestPosition(id=pos_id, fen=fen, best_moves=best_moves)
    for pos_id, fen, best_moves in _BRATKO_KOPEC
]


def evaluate_position(
    position: TestPosition,
    settings: Optional[EngineSettings] = None,
    verbose: bool = False,
) -> TestResult:
    """
    Ask the engine for its move in one test position.

    Args:
        position: Test position to evaluate
        settings: Engine settings (default: EngineSettings())
        verbose: If True, print the outcome

    Returns:
        TestResult with the engine's move and whether it was accepted
    """
    start_time = time.monotonic()
    found = move(position.fen, settings)
    time_taken = time.monotonic() - start_time
    correct = found in position.best_moves

    if verbose:
        outcome = "CORRECT" if correct else ("NO MOVE" if not found else "WRONG")
        print(f"{position.id}: expected {position.best_moves}, got {found or '-'} "
              f"({time_taken:.2f}s) {outcome}")

    return TestResult(
        position=position,
        found_move=found,
        correct=correct,
        time_taken=time_taken,
    )


def run_bratko_kopec(
    settings: Optional[EngineSettings] = None,
    positions: Optional[Sequence[TestPosition]] = None,
    verbose: bool = False,
    progress: bool = True,
) -> Dict[str, Any]:
    """
    Run the Bratko-Kopec test suite through the engine.

    Args:
        settings: Engine settings shared by every position
        positions: Positions to run (default: BRATKO_KOPEC_POSITIONS)
        verbose: If True, print each result
        progress: If True, show a progress bar

    Returns:
        Dictionary with test results:
            - score: Number of correct positions
            - total: Total number of positions
            - failures: Number of positions with no move at all
            - percentage: Success percentage
            - results: List of TestResult objects
            - avg_time: Average time per position
            - total_time: Sum of per-position times
    """
    if positions is None:
        positions = BRATKO_KOPEC_POSITIONS

    results = []
    for position in tqdm(positions, desc="Bratko-Kopec", disable=not progress, leave=False):
        results.append(evaluate_position(position, settings, verbose=verbose))

    total = len(results)
    correct_count = sum(1 for r in results if r.correct)
    total_time = sum(r.time_taken for r in results)

    return {
        'score': correct_count,
        'total': total,
        'failures': sum(1 for r in results if r.failed),
        'percentage': (correct_count / total * 100) if total else 0.0,
        'results': results,
        'avg_time': total_time / total if total else 0.0,
        'total_time': total_time,
    }
