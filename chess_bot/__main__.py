"""
Main entry point for asking the engine for a move.

Usage:
    python -m chess_bot "<FEN>"
"""

import sys

from chess_bot.cli import main

if __name__ == "__main__":
    sys.exit(main())
