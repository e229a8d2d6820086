"""
External Engine Client

This module drives an external UCI chess engine (Stockfish by default)
as a short-lived subprocess to obtain a single best move.

Components:
    - locator: find the engine binary among candidate paths
    - process: spawn, poll and reap the engine process
    - client: UCI handshake / query sequencing with timeouts
    - parser: extract the move token from the raw output
    - errors: failure taxonomy (all subclasses of EngineError)
"""

from chess_bot.engine.client import EngineClient, ProtocolSession, move
from chess_bot.engine.errors import (
    EngineCommunicationError,
    EngineError,
    EngineNotFoundError,
    InvalidPositionError,
    ParseFailure,
    ProtocolTimeout,
    SpawnError,
)
from chess_bot.engine.locator import find_engine
from chess_bot.engine.parser import extract_best_move
from chess_bot.engine.process import EngineProcess

__all__ = [
    'EngineClient',
    'ProtocolSession',
    'move',
    'find_engine',
    'extract_best_move',
    'EngineProcess',
    'EngineError',
    'EngineNotFoundError',
    'SpawnError',
    'EngineCommunicationError',
    'ProtocolTimeout',
    'ParseFailure',
    'InvalidPositionError',
]
