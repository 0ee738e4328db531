"""
Deck factory.

A deck is an immutable tuple of the 52 distinct cards in shuffled order.
Nothing is ever removed from it: the game session walks it with a cursor.

Usage:
    deck = create_deck()
    deck = create_deck(random.Random(42))  # reproducible order
"""

from __future__ import annotations
import logging
import random
from typing import Optional, Tuple

from blackjack.core.card import Card, Rank, Suit
from blackjack.core.rules import DECK_SIZE


logger = logging.getLogger(__name__)

Deck = Tuple[Card, ...]

# Canonical order: suit by suit, Ace to King
FULL_DECK: Deck = tuple(
    Card(rank, suit)
    for suit in Suit
    for rank in Rank
)

assert len(FULL_DECK) == DECK_SIZE


def create_deck(rng: Optional[random.Random] = None) -> Deck:
    """
    Build a full 52-card deck in uniformly random order.

    Args:
        rng: Random generator to shuffle with. Defaults to the module-level
            generator of ``random``.

    Returns:
        Tuple of all 52 cards, each exactly once.
    """
    cards = list(FULL_DECK)
    # random.shuffle is Fisher-Yates: every permutation is equally likely
    (rng or random).shuffle(cards)
    logger.debug(f"Shuffled a new deck, top card {cards[0].short_str}")
    return tuple(cards)
