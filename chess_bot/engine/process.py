"""
Engine Process Supervision

Owns one engine child process and its two pipes:

    parent ──(stdin pipe)──▶ engine     commands, one per line
    parent ◀─(stdout pipe)── engine     responses, read without blocking

The engine's stderr is inherited and never captured.

Lifecycle:
    1. spawn(): start the engine, make its stdout non-blocking
    2. write_line() / poll_line(): exchange UCI lines
    3. shutdown(): send 'quit', close both pipes, SIGTERM, reap

shutdown() is the only release path and is safe to call more than once.
Using the process as a context manager guarantees it runs on every exit
path, including exceptions raised mid-protocol.
"""

import logging
import os
import subprocess
from typing import Optional

from chess_bot.engine.errors import EngineCommunicationError, SpawnError

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 4096


class EngineProcess:
    """
    A running UCI engine wired to private stdin/stdout pipes.

    Attributes:
        path: Engine binary that was launched

    Methods:
        spawn: Start an engine and return its EngineProcess
        write_line: Send one newline-terminated command
        poll_line: Non-blocking read of the next complete output line
        shutdown: Quit, close pipes, terminate and reap the engine
    """

    def __init__(self, process: subprocess.Popen, path: str = ""):
        self.path = path or str(process.args)
        self._process = process
        self._stdin = process.stdin
        self._stdout = process.stdout
        self._buffer = bytearray()
        self._eof = False
        self._closed = False

        try:
            os.set_blocking(self._stdout.fileno(), False)
        except OSError as e:
            self.shutdown()
            raise SpawnError(f"Failed to make engine output non-blocking: {e}") from e

    @classmethod
    def spawn(cls, path: str) -> "EngineProcess":
        """
        Launch the engine binary with no arguments.

        Args:
            path: Executable engine path

        Returns:
            EngineProcess owning the new child

        Raises:
            SpawnError: If the pipes cannot be created or the exec fails
        """
        try:
            process = subprocess.Popen(
                [path],
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                close_fds=True,
            )
        except (OSError, ValueError) as e:
            raise SpawnError(f"Failed to start engine {path}: {e}") from e

        logger.info(f"Spawned engine {path} (pid {process.pid})")
        return cls(process, path)

    # --- Properties ---

    @property
    def pid(self) -> int:
        return self._process.pid

    @property
    def returncode(self) -> Optional[int]:
        return self._process.returncode

    @property
    def eof(self) -> bool:
        """True once the engine has closed its stdout."""
        return self._eof

    @property
    def closed(self) -> bool:
        """True once shutdown() has run."""
        return self._closed

    # --- I/O ---

    def write_line(self, text: str) -> None:
        """
        Send one command to the engine and flush it immediately.

        Args:
            text: Command without the trailing newline

        Raises:
            EngineCommunicationError: If the pipe is closed or broken
        """
        if self._closed:
            raise EngineCommunicationError(f"Cannot send '{text}': engine already shut down")

        logger.debug(f">>> {text}")
        try:
            self._stdin.write(text.encode("utf-8") + b"\n")
            self._stdin.flush()
        except (OSError, ValueError) as e:
            raise EngineCommunicationError(f"Failed to send '{text}' to engine: {e}") from e

    def poll_line(self) -> Optional[str]:
        """
        Return the next complete output line, or None if there is none yet.

        Performs at most one non-blocking read. Partial lines stay buffered
        until their terminator arrives. When the engine closes its output,
        a trailing unterminated line is returned once and eof becomes True.

        Raises:
            EngineCommunicationError: If reading fails for a reason other
                than "no data yet"
        """
        if self._closed:
            return None

        line = self._pop_line()
        if line is not None or self._eof:
            return line

        try:
            chunk = os.read(self._stdout.fileno(), READ_CHUNK_SIZE)
        except BlockingIOError:
            return None
        except OSError as e:
            raise EngineCommunicationError(f"Failed to read engine output: {e}") from e

        if not chunk:
            self._eof = True
            logger.debug(f"Engine pid {self.pid} closed its output")
            if self._buffer:
                return self._decode(self._take(len(self._buffer)))
            return None

        self._buffer += chunk
        return self._pop_line()

    def _pop_line(self) -> Optional[str]:
        end = self._buffer.find(b"\n")
        if end < 0:
            return None
        raw = self._take(end + 1)
        return self._decode(raw[:-1])

    def _take(self, size: int) -> bytes:
        raw = bytes(self._buffer[:size])
        del self._buffer[:size]
        return raw

    @staticmethod
    def _decode(raw: bytes) -> str:
        line = raw.decode("utf-8", errors="replace").rstrip("\r")
        logger.debug(f"<<< {line}")
        return line

    # --- Lifecycle ---

    def shutdown(self) -> None:
        """
        Quit the engine, close both pipes, terminate and reap it.

        The engine is signalled right after 'quit' with no grace period.
        Errors while sending 'quit' or closing are logged and ignored so
        the child is always reaped. Later calls do nothing.
        """
        if self._closed:
            return
        self._closed = True

        try:
            self._stdin.write(b"quit\n")
            self._stdin.flush()
            logger.debug(">>> quit")
        except (OSError, ValueError) as e:
            logger.debug(f"Could not send quit to engine: {e}")

        for stream in (self._stdin, self._stdout):
            try:
                stream.close()
            except OSError as e:
                logger.debug(f"Error closing engine pipe: {e}")

        self._process.terminate()
        returncode = self._process.wait()
        self._buffer.clear()
        logger.info(f"Engine pid {self.pid} exited with code {returncode}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()
        return False

    def __repr__(self) -> str:
        state = "closed" if self._closed else "running"
        return f"EngineProcess(path={self.path!r}, pid={self.pid}, {state})"
