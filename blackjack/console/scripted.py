"""
Scripted IO Implementation.

Replays a fixed list of input lines and records every message written.
Useful for tests and for driving a session from already-collected input
(the HTTP server feeds validated roster entries through it).
"""

from typing import Iterable, List

from blackjack.console.base import LineReader, LineWriter
from blackjack.core.exceptions import InputClosedError


class ScriptedIO(LineReader, LineWriter):
    """
    Collaborator backed by an in-memory script.

    Attributes:
        lines: Remaining input lines, consumed front to back
        output: Every message written so far, in order
    """

    def __init__(self, lines: Iterable[str] = ()):
        self.lines: List[str] = list(lines)
        self.output: List[str] = []
        self.lines_read = 0

    def read_line(self) -> str:
        if not self.lines:
            raise InputClosedError(f"Script exhausted after {self.lines_read} lines")
        self.lines_read += 1
        return self.lines.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)

    @property
    def remaining(self) -> int:
        """Number of input lines not yet read."""
        return len(self.lines)

    def __repr__(self) -> str:
        return f"ScriptedIO({self.remaining} lines remaining)"
