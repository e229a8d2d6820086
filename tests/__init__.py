"""
Unit Tests for the Chess Bot

This package contains unit tests for the engine client components.
Most tests drive stub UCI engines (see conftest.py); tests that need a
real Stockfish binary skip when none is installed.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_parser.py

    # Run with coverage
    pytest tests/ --cov=chess_bot --cov-report=html

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
