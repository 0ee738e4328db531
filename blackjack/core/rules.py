"""
Blackjack Table Rules and Constants.

This module collects the fixed parameters of a single-table session:

1. Player names are entered on one line, separated by commas.
   Each name must be 1-5 characters long.

2. Betting amounts are strictly positive integers.

3. The opening deal gives 2 cards to the dealer first, then 2 cards to
   each player in roster order, all drawn from one 52-card deck.
"""

from enum import Enum, auto


class GamePhase(Enum):
    """Lifecycle of a game session."""
    UNINITIALIZED = auto()  # No deck or roster yet
    INITIALIZED = auto()    # Deck shuffled, roster built
    OPENING_DEALT = auto()  # Two cards dealt to every participant


# Roster settings
NAME_SEPARATOR = ","
NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 5
MIN_BET = 1

# Dealing
OPENING_CARDS = 2
DECK_SIZE = 52
# 2 * (1 + MAX_PLAYERS) <= DECK_SIZE; not enforced, draw_card() is the backstop
MAX_PLAYERS = DECK_SIZE // OPENING_CARDS - 1


class Message:
    """Text shown through the line-based output collaborator."""
    GET_NAME = "Enter the players' names, separated by commas (1-5 characters each)."
    BET_PLAYER = "{name}, how much would you like to bet?"
    ERROR_INPUT = "Invalid input. Please try again."
    ERROR_CARD_EMPTY = "There are no cards left in the deck."
    OPENING_DEAL = "Dealt {count} cards each to the dealer and {names}."
    DEALER_HAND = "Dealer: {cards}"
    PLAYER_HAND = "{name}: {cards}"
