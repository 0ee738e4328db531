"""
Tests for the deck factory.
"""

import random
from collections import Counter

from blackjack.core.card import Card, Rank, Suit
from blackjack.core.deck import FULL_DECK, create_deck


class TestFullDeck:
    """Tests for the canonical card set."""

    def test_full_deck_has_52_unique_cards(self):
        assert len(FULL_DECK) == 52
        assert len(set(FULL_DECK)) == 52

    def test_full_deck_covers_every_combination(self):
        expected = {Card(rank, suit) for rank in Rank for suit in Suit}
        assert set(FULL_DECK) == expected


class TestCreateDeck:
    """Tests for create_deck()."""

    def test_deck_is_a_permutation_of_the_full_set(self, deck):
        assert len(deck) == 52
        assert Counter(deck) == Counter(FULL_DECK)

    def test_unseeded_deck_is_complete(self):
        deck = create_deck()
        assert set(deck) == set(FULL_DECK)
        assert len(deck) == 52

    def test_deck_is_immutable(self, deck):
        assert isinstance(deck, tuple)

    def test_same_seed_same_order(self):
        assert create_deck(random.Random(1)) == create_deck(random.Random(1))

    def test_different_seeds_differ(self):
        assert create_deck(random.Random(1)) != create_deck(random.Random(2))

    def test_deck_is_shuffled(self, deck):
        assert deck != FULL_DECK

    def test_canonical_deck_untouched(self, rng):
        before = tuple(FULL_DECK)
        create_deck(rng)
        assert FULL_DECK == before

    def test_every_card_can_come_first(self):
        """Over many shuffles, every card shows up on top at least once."""
        rng = random.Random(2024)
        tops = {create_deck(rng)[0] for _ in range(2000)}
        assert tops == set(FULL_DECK)
