"""
Line-based input/output collaborators.

The roster builder and the game session never touch stdin/stdout directly.
They talk to a ``LineReader`` (read one line) and a ``LineWriter`` (write one
message), so the same engine can be driven from a terminal, from a script
of canned lines in tests, or from the HTTP server.

Usage:
    class MyIO(LineReader, LineWriter):
        def read_line(self):
            ...

        def write(self, text):
            ...
"""

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from blackjack.core.exceptions import InputClosedError


class LineReader(ABC):
    """Source of input lines."""

    @abstractmethod
    def read_line(self) -> str:
        """
        Block until the next line is available and return it.

        The trailing newline is not included.

        Raises:
            InputClosedError: If the stream is exhausted.
        """
        pass


class LineWriter(ABC):
    """Sink for messages shown to the user."""

    @abstractmethod
    def write(self, text: str) -> None:
        """Show one message. Fire-and-forget."""
        pass


class ConsoleIO(LineReader, LineWriter):
    """
    Terminal-backed collaborator.

    Reads from ``stdin`` one line per call and prints to ``stdout``.
    Both streams can be swapped for any text stream.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def read_line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise InputClosedError("Input stream closed")
        return line.rstrip("\r\n")

    def write(self, text: str) -> None:
        print(text, file=self.stdout, flush=True)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
