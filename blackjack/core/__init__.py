"""
Blackjack Core - Pure Python deck, dealing and session logic

This module contains all game logic without any network dependencies.
"""

from blackjack.core.card import Card, Rank, Suit
from blackjack.core.deck import Deck, FULL_DECK, create_deck
from blackjack.core.participant import Participant, Dealer, Player
from blackjack.core.roster import RosterBuilder, parse_names, parse_bet
from blackjack.core.game import BlackjackGame, get_game
from blackjack.core.rules import GamePhase, Message

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Deck",
    "FULL_DECK",
    "create_deck",
    "Participant",
    "Dealer",
    "Player",
    "RosterBuilder",
    "parse_names",
    "parse_bet",
    "BlackjackGame",
    "get_game",
    "GamePhase",
    "Message",
]
