"""
Blackjack Table - Single-table Blackjack Dealing Engine

A small blackjack session coordinator with:
- Pure Python deck, roster and opening-deal logic
- Line-based console collaborators (terminal or scripted)
- FastAPI server exposing the single table session

Usage:
    from blackjack.core import get_game, RosterBuilder
    from blackjack.console import ConsoleIO
"""

__version__ = "0.1.0"

from blackjack.core.card import Card, Rank, Suit
from blackjack.core.deck import create_deck
from blackjack.core.participant import Dealer, Player
from blackjack.core.roster import RosterBuilder
from blackjack.core.game import BlackjackGame, get_game

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "create_deck",
    "Dealer",
    "Player",
    "RosterBuilder",
    "BlackjackGame",
    "get_game",
    "__version__",
]
