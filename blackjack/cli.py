"""
Console entry point: play one blackjack session in the terminal.

Usage:
    python -m blackjack
"""

import logging
import sys

from blackjack.config import get_settings
from blackjack.console import ConsoleIO
from blackjack.core.exceptions import InputClosedError
from blackjack.core.game import get_game
from blackjack.core.roster import RosterBuilder


logger = logging.getLogger(__name__)


def main() -> int:
    """Run initialize + opening deal once, reading the roster from stdin."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.logging_level(logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    io = ConsoleIO()
    game = get_game()
    try:
        game.play_game(RosterBuilder(io, io))
    except InputClosedError as e:
        logger.error(f"Input closed before the roster was complete: {e}")
        return 1

    game.announce_opening_deal(io)
    return 0


if __name__ == "__main__":
    sys.exit(main())
