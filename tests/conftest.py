"""
Shared fixtures: stub UCI engines written as small Python scripts.

Each stub is an executable file in tmp_path whose shebang points at the
running interpreter, so EngineProcess can launch it like a real engine.
"""

import os
import stat
import sys
import textwrap

import pytest

from chess_bot.config import ENGINE_ENV_VAR, EngineSettings
from chess_bot.engine.process import EngineProcess

START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

STUB_ENGINE = '''
import sys

READY = {ready!r}
ANSWER = {answer!r}
LOG = {log!r}


def send(text):
    sys.stdout.write(text + "\\n")
    sys.stdout.flush()


log = open(LOG, "a") if LOG else None
while True:
    line = sys.stdin.readline()
    if not line:
        break
    cmd = line.strip()
    if log:
        log.write(cmd + "\\n")
        log.flush()
    if cmd == "uci":
        send("id name StubFish")
        send("id author Tests")
        send("option name Hash type spin default 16 min 1 max 1024")
        send("uciok")
    elif cmd == "isready" and READY:
        send("readyok")
    elif cmd.startswith("go") and ANSWER is not None:
        send("info depth 1 seldepth 1 score cp 25 nodes 20 pv e2e4")
        send(ANSWER)
    elif cmd == "quit":
        break
'''


def write_script(directory, name, body):
    """Write an executable Python script and return its path."""
    path = directory / name
    path.write_text(f"#!{sys.executable}\n" + textwrap.dedent(body))
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(path)


@pytest.fixture(autouse=True)
def no_engine_env(monkeypatch):
    """Keep a developer's CHESS_BOT_ENGINE out of the tests."""
    monkeypatch.delenv(ENGINE_ENV_VAR, raising=False)


@pytest.fixture
def make_engine(tmp_path):
    """
    Factory for stub engines.

    Args (of the returned function):
        ready: Answer 'isready' with 'readyok'
        answer: Line sent after 'go' (None = never answer)
        log: File that receives every command the stub reads
        body: Full script body, replacing the UCI stub entirely
    """
    counter = iter(range(1000))

    def factory(ready=True, answer="bestmove e2e4 ponder e7e5", log=None, body=None):
        if body is None:
            body = STUB_ENGINE.format(ready=ready, answer=answer, log=str(log) if log else None)
        return write_script(tmp_path, f"stub_engine_{next(counter)}", body)

    return factory


@pytest.fixture
def fast_settings():
    """Settings with short timeouts for stub engines."""

    def factory(engine_path, **overrides):
        values = dict(
            engine_path=engine_path,
            threads=1,
            hash_mb=16,
            movetime_ms=10,
            ready_timeout=1.0,
            bestmove_timeout=2.0,
        )
        values.update(overrides)
        return EngineSettings(**values)

    return factory


@pytest.fixture
def spawned(monkeypatch):
    """Record every EngineProcess spawned during the test."""
    processes = []
    original = EngineProcess.spawn.__func__

    def spawn(cls, path):
        process = original(cls, path)
        processes.append(process)
        return process

    monkeypatch.setattr(EngineProcess, "spawn", classmethod(spawn))
    return processes


def assert_reaped(process):
    """The process was shut down and the OS no longer knows the child."""
    assert process.closed, "shutdown() should have run"
    assert process.returncode is not None, "child should have been waited for"
    with pytest.raises(ChildProcessError):
        os.waitpid(process.pid, os.WNOHANG)
