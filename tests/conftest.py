"""
Pytest configuration and shared fixtures for blackjack tests.
"""

import random

import pytest
from blackjack.console.scripted import ScriptedIO
from blackjack.core.deck import create_deck
from blackjack.core.game import get_game
from blackjack.core.roster import RosterBuilder


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible shuffles."""
    return random.Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck with a fixed order."""
    return create_deck(rng)


@pytest.fixture
def game():
    """The shared game session, reset to UNINITIALIZED."""
    session = get_game()
    session.reset()
    yield session
    session.reset()


@pytest.fixture
def three_player_io():
    """Scripted input for a valid three player roster."""
    return ScriptedIO(["Al,Bo,Cy", "100", "200", "300"])


@pytest.fixture
def three_player_game(game, three_player_io):
    """An initialized session with three players, not yet dealt."""
    game.initialize(RosterBuilder(three_player_io, three_player_io), random.Random(7))
    return game


@pytest.fixture
def make_roster():
    """Factory for a RosterBuilder over a script of input lines."""
    def _make(*lines):
        io = ScriptedIO(lines)
        return RosterBuilder(io, io), io
    return _make
