"""
Engine Error Taxonomy

Every failure that can happen while talking to an external engine is an
EngineError. The top-level move() boundary catches EngineError and turns
it into an empty move string; anything else is a programming error and
propagates.

Hierarchy:
    EngineError
    ├── EngineNotFoundError       No candidate path is executable
    ├── SpawnError                Pipe / fork / exec failure
    ├── EngineCommunicationError  Broken or closed pipe after spawn
    ├── ProtocolTimeout           A wait phase exceeded its bound
    ├── ParseFailure              No usable bestmove in the output
    └── InvalidPositionError      Malformed FEN supplied by the caller
"""

from typing import Optional


class EngineError(Exception):
    """Base class for all engine client errors."""


class EngineNotFoundError(EngineError, FileNotFoundError):
    """No engine executable was found in any candidate location."""

    def __init__(self, candidates):
        self.candidates = list(candidates)
        super().__init__(
            "Could not find an engine executable in any of: "
            + ", ".join(self.candidates)
        )


class SpawnError(EngineError):
    """The engine process could not be started."""


class EngineCommunicationError(EngineError):
    """The engine pipes are closed or broken."""


class ProtocolTimeout(EngineError):
    """A protocol wait phase did not see its token in time."""

    def __init__(self, phase: str, token: str, timeout: float):
        self.phase = phase
        self.token = token
        self.timeout = timeout
        super().__init__(
            f"{phase}: no '{token}' from engine within {timeout:.1f}s"
        )


class ParseFailure(EngineError):
    """The engine output did not contain a usable best move."""

    def __init__(self, message: str, output: Optional[str] = None):
        self.output = output
        super().__init__(message)


class InvalidPositionError(EngineError, ValueError):
    """The FEN supplied by the caller could not be parsed."""
