"""
Engine configuration for the chess bot.
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

# Probed in order; the bare name is resolved through PATH.
DEFAULT_ENGINE_CANDIDATES: Tuple[str, ...] = (
    "/usr/local/bin/stockfish",
    "/app/stockfish",
    "stockfish",
    "/opt/homebrew/bin/stockfish",
)

ENGINE_ENV_VAR = "CHESS_BOT_ENGINE"
"""Tried before the candidates by the engine locator"""


def _default_threads() -> int:
    return os.cpu_count() or 1


@dataclass
class EngineSettings:
    """Settings for one engine query.

    Groups the engine location, the UCI options sent during the handshake
    and the timeouts of each wait phase. Every call to move() spawns a
    fresh engine with these settings.
    """

    # Engine location
    engine_path: Optional[str] = None
    """Explicit engine binary (None = search the candidates)"""

    candidates: Tuple[str, ...] = DEFAULT_ENGINE_CANDIDATES
    """Ordered candidate locations probed when engine_path is None"""

    # UCI options
    threads: int = field(default_factory=_default_threads)
    """Search threads (passed through from the detected CPU count)"""

    hash_mb: int = 512
    """Hash table size in MB"""

    skill_level: int = 20
    """Skill Level option, 0 (weakest) to 20 (full strength)"""

    multipv: int = 1
    """Number of principal variations to search"""

    # Search
    movetime_ms: int = 1000
    """Fixed search time handed to 'go movetime'"""

    # Timeouts
    ready_timeout: float = 5.0
    """Seconds to wait for 'readyok' (non-fatal when exceeded)"""

    bestmove_timeout: float = 7.0
    """Seconds to wait for 'bestmove' after 'go'"""

    poll_interval: float = 0.01
    """Sleep between polls that returned no output"""

    # Validation
    validate_fen: bool = True
    """Parse the FEN and check the returned move with python-chess"""

    def __post_init__(self):
        """Validate settings after initialization."""
        self.candidates = tuple(self.candidates)

        if self.engine_path is None and not self.candidates:
            raise ValueError("candidates must not be empty when engine_path is None")

        if self.threads <= 0:
            raise ValueError(f"threads must be positive, got {self.threads}")

        if self.hash_mb <= 0:
            raise ValueError(f"hash_mb must be positive, got {self.hash_mb}")

        if not 0 <= self.skill_level <= 20:
            raise ValueError(f"skill_level should be between 0 and 20, got {self.skill_level}")

        if self.multipv <= 0:
            raise ValueError(f"multipv must be positive, got {self.multipv}")

        if self.movetime_ms <= 0:
            raise ValueError(f"movetime_ms must be positive, got {self.movetime_ms}")

        for name in ("ready_timeout", "bestmove_timeout", "poll_interval"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")

    @classmethod
    def from_env(cls, environ=None, **overrides) -> "EngineSettings":
        """
        Build settings from CHESS_BOT_* environment variables.

        The engine location itself (CHESS_BOT_ENGINE) is read by the
        locator, so it also applies to settings built directly.

        Args:
            environ: Mapping to read from (default: os.environ)
            **overrides: Field values that take precedence over the environment

        Returns:
            EngineSettings instance

        Raises:
            ValueError: If a numeric variable is not an integer
        """
        environ = os.environ if environ is None else environ
        values = {}

        int_vars = {
            "CHESS_BOT_THREADS": "threads",
            "CHESS_BOT_HASH_MB": "hash_mb",
            "CHESS_BOT_SKILL_LEVEL": "skill_level",
            "CHESS_BOT_MOVETIME_MS": "movetime_ms",
        }
        for var, name in int_vars.items():
            raw = environ.get(var)
            if raw:
                try:
                    values[name] = int(raw)
                except ValueError:
                    raise ValueError(f"{var} must be an integer, got {raw!r}") from None

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def uci_options(self) -> Tuple[Tuple[str, int], ...]:
        """UCI options sent before 'isready', in send order."""
        return (
            ("Threads", self.threads),
            ("Hash", self.hash_mb),
            ("Skill Level", self.skill_level),
            ("MultiPV", self.multipv),
        )
