"""
Command-line interface: print the engine's best move for a position.

Usage:
    python -m chess_bot "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
    chess-bot --engine /usr/games/stockfish --movetime 500 <FEN fields...>
"""

import argparse
import logging
import sys
from typing import List, Optional

from chess_bot.config import EngineSettings
from chess_bot.engine.client import move


def setup_logging(verbose: bool = False):
    """Configure logging to stderr."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chess-bot",
        description="Ask an external UCI engine for the best move in a FEN position",
    )
    parser.add_argument(
        "fen",
        nargs="+",
        help="Position in FEN (one quoted argument or its space-separated fields)",
    )
    parser.add_argument(
        "--engine",
        type=str,
        default=None,
        help="Engine binary (default: auto-detect, or $CHESS_BOT_ENGINE)",
    )
    parser.add_argument(
        "--movetime",
        type=int,
        default=None,
        help="Search time in milliseconds (default: 1000)",
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=None,
        help="Engine threads (default: CPU count)",
    )
    parser.add_argument(
        "--hash",
        type=int,
        default=None,
        help="Hash table size in MB (default: 512)",
    )
    parser.add_argument(
        "--skill",
        type=int,
        default=None,
        help="Skill Level 0-20 (default: 20)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log the UCI traffic",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        settings = EngineSettings.from_env(
            engine_path=args.engine,
            movetime_ms=args.movetime,
            threads=args.threads,
            hash_mb=args.hash,
            skill_level=args.skill,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    best = move(" ".join(args.fen), settings)
    if not best:
        return 1

    print(best)
    return 0


if __name__ == "__main__":
    sys.exit(main())
