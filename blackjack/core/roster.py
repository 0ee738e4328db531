"""
Roster Builder - collects the players for a session.

The roster is read from a line-based collaborator in two steps:

1. One line of comma-separated names. Each name must be 1-5 characters;
   an empty line or any empty/too-long name rejects the whole line.
2. One betting amount per name, in name order. Each must parse as a
   strictly positive integer.

Every rejected line produces an error message and the same prompt is
shown again. There is no retry limit and no cancel path: the loop ends
only when valid input arrives (or the input stream closes, which raises
``InputClosedError``).
"""

from __future__ import annotations
import logging
import re
from typing import List

from blackjack.console.base import LineReader, LineWriter
from blackjack.core.exceptions import InvalidInputError
from blackjack.core.participant import Player
from blackjack.core.rules import (
    Message, NAME_SEPARATOR, NAME_MIN_LENGTH, NAME_MAX_LENGTH, MIN_BET,
)


logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_names(line: str) -> List[str]:
    """
    Split a line of input into player names.

    Tokens are kept exactly as typed: "Al, Bo" gives ["Al", " Bo"], and
    a space counts towards the length limit.

    Raises:
        InvalidInputError: If any name is empty or longer than the
            maximum length.
    """
    # An empty line splits into [""], which fails the length check
    names = line.split(NAME_SEPARATOR)

    for name in names:
        if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
            raise InvalidInputError(
                f"Name {name!r} must be {NAME_MIN_LENGTH}-{NAME_MAX_LENGTH} characters"
            )

    return names


def parse_bet(line: str) -> int:
    """
    Parse a betting amount.

    Raises:
        InvalidInputError: If the line is not an integer or is not positive.
    """
    text = line.strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        raise InvalidInputError(f"Betting amount {text!r} is not an integer")

    amount = int(text)
    if amount < MIN_BET:
        raise InvalidInputError(f"Betting amount must be positive, got {amount}")

    return amount


class RosterBuilder:
    """
    Builds the ordered player list from line-based input.

    Usage:
        io = ConsoleIO()
        players = RosterBuilder(io, io).build_roster()
    """

    def __init__(self, reader: LineReader, writer: LineWriter):
        self.reader = reader
        self.writer = writer

    def get_names(self) -> List[str]:
        """Prompt for the name line until a valid one is entered."""
        while True:
            self.writer.write(Message.GET_NAME)
            line = self.reader.read_line()
            try:
                return parse_names(line)
            except InvalidInputError as e:
                self._reject(e)

    def get_betting_amount(self, name: str) -> int:
        """Prompt ``name`` for a bet until a valid one is entered."""
        while True:
            self.writer.write(Message.BET_PLAYER.format(name=name))
            line = self.reader.read_line()
            try:
                return parse_bet(line)
            except InvalidInputError as e:
                self._reject(e)

    def build_roster(self) -> List[Player]:
        """
        Collect names, then one bet per name.

        Returns:
            Players in the order their names were entered
        """
        names = self.get_names()
        players = [Player(name=name, bet=self.get_betting_amount(name)) for name in names]
        logger.info(f"Roster built: {', '.join(p.name for p in players)}")
        return players

    def _reject(self, error: InvalidInputError) -> None:
        logger.warning(f"Rejected input: {error}")
        self.writer.write(Message.ERROR_INPUT)
