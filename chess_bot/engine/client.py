"""
UCI Protocol Driver

Runs one best-move query against a freshly spawned engine:

    Client → "uci"
    Client → "setoption name Threads value 8"
    Client → "setoption name Hash value 512"
    Client → "setoption name Skill Level value 20"
    Client → "setoption name MultiPV value 1"
    Client → "isready"
    Engine → "readyok"                 (waited for up to 5s, optional)
    Client → "position fen <FEN>"
    Client → "go movetime 1000"
    Engine → "info depth 18 score cp 31 ..."
    Engine → "bestmove e2e4 ponder e7e5"   (waited for up to 7s)
    Client → "quit"                    (then SIGTERM and reap)

Each wait is a polling loop with a short sleep and a wall-clock deadline.
The engine is always shut down before best_move() returns or raises.

Reference:
    UCI Protocol: https://www.chessprogramming.org/UCI
"""

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional

import chess

from chess_bot.config import EngineSettings
from chess_bot.engine.errors import (
    EngineCommunicationError,
    EngineError,
    InvalidPositionError,
    ParseFailure,
    ProtocolTimeout,
)
from chess_bot.engine.locator import find_engine
from chess_bot.engine.parser import BESTMOVE_TOKEN, extract_best_move
from chess_bot.engine.process import EngineProcess

logger = logging.getLogger(__name__)

READY_TOKEN = "readyok"


@dataclass
class ProtocolSession:
    """Output captured during one wait phase."""

    token: str
    started: float = field(default_factory=time.monotonic)
    lines: List[str] = field(default_factory=list)
    found: bool = False

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self.started


class EngineClient:
    """
    Asks an external UCI engine for the best move in a position.

    Every call to best_move() locates the engine, spawns a new process,
    runs the handshake and query, and tears the process down again.

    Attributes:
        settings: Engine location, UCI options and timeouts
    """

    def __init__(self, settings: Optional[EngineSettings] = None):
        self.settings = settings if settings else EngineSettings()

    def best_move(self, fen: str) -> str:
        """
        Return the engine's best move for a FEN position.

        Args:
            fen: Position in Forsyth-Edwards Notation

        Returns:
            Move in coordinate notation (e.g. "e2e4", "e7e8q")

        Raises:
            InvalidPositionError: If the FEN cannot be parsed
            EngineNotFoundError: If no engine binary is available
            SpawnError: If the engine cannot be started
            EngineCommunicationError: If the engine pipes break
            ProtocolTimeout: If no 'bestmove' arrives in time
            ParseFailure: If the engine's answer holds no usable move
        """
        board = self._parse_position(fen)
        path = self._locate_engine()

        with EngineProcess.spawn(path) as engine:
            engine.write_line("uci")
            self._configure(engine)
            self._query(engine, fen)
            session = self._wait_for(engine, BESTMOVE_TOKEN, self.settings.bestmove_timeout)

        if not session.found:
            if engine.eof:
                raise EngineCommunicationError("Engine exited before sending bestmove")
            raise ProtocolTimeout("Result-Wait", BESTMOVE_TOKEN, self.settings.bestmove_timeout)

        return self._parse_result(session.text, board)

    # --- Phases ---

    def _parse_position(self, fen: str) -> Optional[chess.Board]:
        if not self.settings.validate_fen:
            return None

        try:
            return chess.Board(fen)
        except ValueError as e:
            raise InvalidPositionError(f"Invalid FEN {fen!r}: {e}") from e

    def _locate_engine(self) -> str:
        if self.settings.engine_path:
            return find_engine([self.settings.engine_path], use_env=False)
        return find_engine(self.settings.candidates)

    def _configure(self, engine: EngineProcess) -> None:
        """Send the UCI options and wait for 'readyok'; a timeout is non-fatal."""
        for name, value in self.settings.uci_options():
            engine.write_line(f"setoption name {name} value {value}")
        engine.write_line("isready")

        session = self._wait_for(engine, READY_TOKEN, self.settings.ready_timeout)
        if session.found:
            logger.debug(f"Engine ready after {session.elapsed:.3f}s")
        elif engine.eof:
            logger.warning("Engine closed its output before 'readyok'")
        else:
            logger.warning(
                f"No 'readyok' within {self.settings.ready_timeout:.1f}s, continuing anyway"
            )

    def _query(self, engine: EngineProcess, fen: str) -> None:
        engine.write_line(f"position fen {fen}")
        engine.write_line(f"go movetime {self.settings.movetime_ms}")

    def _wait_for(self, engine: EngineProcess, token: str, timeout: float) -> ProtocolSession:
        """
        Poll engine output until a line contains token.

        Stops at the first matching line, when the deadline passes, or
        when the engine closes its output. Never raises on timeout; the
        caller inspects session.found.
        """
        session = ProtocolSession(token)
        deadline = session.started + timeout

        while time.monotonic() < deadline:
            line = engine.poll_line()
            if line is None:
                if engine.eof:
                    break
                time.sleep(self.settings.poll_interval)
                continue

            session.lines.append(line)
            if token in line:
                session.found = True
                break

        return session

    @staticmethod
    def _parse_result(text: str, board: Optional[chess.Board]) -> str:
        best = extract_best_move(text)
        if not best:
            raise ParseFailure("'bestmove' not found in engine output", text)

        if board is not None:
            try:
                parsed = chess.Move.from_uci(best)
            except ValueError:
                raise ParseFailure(f"Engine returned an invalid move: {best!r}", text) from None
            if parsed not in board.legal_moves:
                raise ParseFailure(f"Engine returned an illegal move: {best}", text)

        logger.info(f"Engine best move: {best}")
        return best


def move(fen: str, settings: Optional[EngineSettings] = None) -> str:
    """
    Return the best move for a FEN position, or "" on any engine failure.

    Engine errors never reach the caller; they are logged instead.

    Example:
        >>> move("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1")
        'e2e4'
    """
    try:
        return EngineClient(settings).best_move(fen)
    except EngineError as e:
        logger.error(f"Error: {e}")
        return ""
