#!/usr/bin/env python3
"""
Bratko-Kopec Benchmark Runner

Sends the Bratko-Kopec positions through the chess bot at one or more
search times, to check the engine pipeline and compare move quality.

Usage:
    python tools/run_benchmark.py [--movetimes 100,500,1000] [--engine PATH] [--verbose]
"""

import sys
import argparse
import logging
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from chess_bot.cli import setup_logging
from chess_bot.config import EngineSettings
from chess_bot.utils.testing import run_bratko_kopec


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def run_benchmark(movetimes: list[int], engine_path: str | None = None, verbose: bool = False):
    """
    Run Bratko-Kopec benchmark at multiple search times.

    Args:
        movetimes: Search times in milliseconds
        engine_path: Engine binary (None = auto-detect)
        verbose: If True, print detailed results for each position
    """
    print("=" * 80)
    print("BRATKO-KOPEC BENCHMARK - chess-bot")
    print("=" * 80)
    print(f"Engine: {engine_path or 'auto-detect'}")
    print(f"Move times: {movetimes} ms")
    print("=" * 80)

    all_results = []

    for movetime in movetimes:
        settings = EngineSettings.from_env(engine_path=engine_path, movetime_ms=movetime)
        result = run_bratko_kopec(settings=settings, verbose=verbose)
        all_results.append({'movetime': movetime, **result})

        print(f"\nResults at movetime {movetime}ms:")
        print(f"  Correct: {result['score']}/{result['total']} ({result['percentage']:.1f}%)")
        print(f"  No move returned: {result['failures']}")
        print(f"  Total time: {format_time(result['total_time'])}")
        print(f"  Avg time per position: {format_time(result['avg_time'])}")

        failed = [r for r in result['results'] if not r.correct]
        if failed and verbose:
            print("\n  Failed positions:")
            for r in failed:
                print(f"    {r.position.id}: Expected {r.position.best_moves}, got {r.found_move or '-'}")

    print("\n" + "=" * 80)
    print("SUMMARY TABLE")
    print("=" * 80)
    print(f"{'Movetime':<10} {'Correct':<12} {'%':<8} {'No move':<10} {'Avg Time':<12}")
    print("-" * 80)

    for r in all_results:
        print(f"{r['movetime']:<10} {r['score']}/{r['total']:<9} {r['percentage']:<7.1f}% "
              f"{r['failures']:<10} {format_time(r['avg_time']):<12}")

    print("=" * 80)
    return all_results


def main():
    parser = argparse.ArgumentParser(
        description="Run the Bratko-Kopec benchmark through an external UCI engine"
    )
    parser.add_argument(
        "--movetimes",
        type=str,
        default="1000",
        help="Comma-separated list of search times in ms (default: 1000)"
    )
    parser.add_argument(
        "--engine",
        type=str,
        default=None,
        help="Engine binary (default: auto-detect)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print detailed results for each position"
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)
    if not args.verbose:
        logging.getLogger("chess_bot").setLevel(logging.WARNING)

    try:
        movetimes = [int(t.strip()) for t in args.movetimes.split(",")]
    except ValueError:
        print("Error: movetimes must be comma-separated integers")
        sys.exit(1)

    try:
        run_benchmark(movetimes, engine_path=args.engine, verbose=args.verbose)
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        sys.exit(1)
    except ValueError as e:
        print(f"\n\nError: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
