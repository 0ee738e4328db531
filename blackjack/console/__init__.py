"""
Blackjack Console - Line-based IO collaborators

This module provides the abstract reader/writer interface used by the
roster builder, a terminal implementation and a scripted one.
"""

from blackjack.console.base import LineReader, LineWriter, ConsoleIO
from blackjack.console.scripted import ScriptedIO

__all__ = ["LineReader", "LineWriter", "ConsoleIO", "ScriptedIO"]
