"""
Blackjack Game Session - State Machine Implementation.

This module owns one game session at a single table:
- The shuffled deck and the draw cursor walking it
- The dealer and the ordered player roster
- The opening deal (2 cards to the dealer, then 2 to each player)

Phases: UNINITIALIZED -> INITIALIZED -> OPENING_DEALT.
Calling initialize() again from any phase starts a brand new session.

Exactly one session object exists per process. It is created lazily by
get_game(); constructing BlackjackGame directly is a programming error.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import logging
import random
import threading

from blackjack.console.base import LineWriter
from blackjack.core.card import Card
from blackjack.core.deck import Deck, create_deck
from blackjack.core.exceptions import (
    DeckExhaustedError, GameStateError, SessionConstructionError,
)
from blackjack.core.participant import Dealer, Player
from blackjack.core.roster import RosterBuilder
from blackjack.core.rules import GamePhase, Message, OPENING_CARDS


logger = logging.getLogger(__name__)

_CONSTRUCTION_KEY = object()


class BlackjackGame:
    """
    Blackjack session engine.

    Usage:
        io = ConsoleIO()
        game = get_game()
        game.play_game(RosterBuilder(io, io))
        game.announce_opening_deal(io)
    """

    def __init__(self, _key: object = None):
        if _key is not _CONSTRUCTION_KEY:
            logger.error("BlackjackGame constructed directly; use get_game()")
            raise SessionConstructionError("Only one game session may exist; use get_game()")

        self.phase = GamePhase.UNINITIALIZED
        self.session_number = 0

        self.deck: Deck = ()
        self._cursor = 0

        self.dealer = Dealer()
        self.players: List[Player] = []

        # Output collaborator of the current session, for fatal error reports
        self.writer: Optional[LineWriter] = None

    @property
    def cursor(self) -> int:
        """Number of cards drawn from the deck so far."""
        return self._cursor

    @property
    def remaining(self) -> int:
        """Number of cards left to draw."""
        return len(self.deck) - self._cursor

    @property
    def dealt_cards(self) -> List[Card]:
        """Cards drawn this session, in draw order."""
        return list(self.deck[:self._cursor])

    @property
    def num_players(self) -> int:
        return len(self.players)

    def reset(self) -> None:
        """Discard the session and return to UNINITIALIZED."""
        self.phase = GamePhase.UNINITIALIZED
        self.deck = ()
        self._cursor = 0
        self.dealer = Dealer()
        self.players = []
        self.writer = None

    def initialize(
        self,
        roster_builder: RosterBuilder,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Start a new session, discarding any previous one.

        Shuffles a new deck, resets the cursor, seats a fresh dealer and
        builds the roster through ``roster_builder`` (which blocks on input).

        Args:
            roster_builder: Source of the players for this session
            rng: Optional random generator for the shuffle
        """
        # Stays UNINITIALIZED if the roster input is cut off below
        self.phase = GamePhase.UNINITIALIZED
        self.players = []
        self.session_number += 1
        logger.info(f"Starting session #{self.session_number}")

        self.deck = create_deck(rng)
        self._cursor = 0
        self.dealer = Dealer()
        self.writer = roster_builder.writer
        self.players = roster_builder.build_roster()

        self.phase = GamePhase.INITIALIZED
        logger.info(f"Session #{self.session_number} initialized with {self.num_players} players")

    def draw_card(self) -> Card:
        """
        Draw the next card and advance the cursor.

        The deck is shuffled once per session and walked linearly, so no
        card is ever returned twice.

        Raises:
            GameStateError: If no session has been initialized.
            DeckExhaustedError: If all cards have already been drawn.
        """
        if self.phase == GamePhase.UNINITIALIZED:
            raise GameStateError("Cannot draw before the session is initialized")

        if self._cursor >= len(self.deck):
            if self.writer is not None:
                self.writer.write(Message.ERROR_CARD_EMPTY)
            logger.error(f"Deck exhausted after {self._cursor} cards")
            raise DeckExhaustedError(f"No cards left after {self._cursor} draws")

        card = self.deck[self._cursor]
        self._cursor += 1
        return card

    def deal_opening_hands(self) -> None:
        """
        Deal the opening hands: dealer first, then each player in roster order.

        If the deck runs out part way, hands stay partly dealt and the phase
        stays INITIALIZED; the session must be initialized again after a
        DeckExhaustedError.

        Raises:
            GameStateError: If the session is not freshly initialized.
            DeckExhaustedError: If the roster needs more cards than the deck holds.
        """
        if self.phase != GamePhase.INITIALIZED:
            raise GameStateError(f"Cannot deal opening hands in phase {self.phase.name}")

        for _ in range(OPENING_CARDS):
            self.dealer.add_card(self.draw_card())

        for player in self.players:
            for _ in range(OPENING_CARDS):
                player.add_card(self.draw_card())

        self.phase = GamePhase.OPENING_DEALT
        logger.debug(f"Opening deal done, {self.remaining} cards remaining")

    def play_game(
        self,
        roster_builder: RosterBuilder,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Initialize a new session and deal the opening hands."""
        self.initialize(roster_builder, rng)
        self.deal_opening_hands()

    def announce_opening_deal(self, writer: LineWriter) -> None:
        """Write who was dealt what in the opening deal."""
        if self.phase != GamePhase.OPENING_DEALT:
            raise GameStateError(f"No opening deal to announce in phase {self.phase.name}")

        names = ", ".join(player.name for player in self.players)
        writer.write(Message.OPENING_DEAL.format(count=OPENING_CARDS, names=names))
        writer.write(Message.DEALER_HAND.format(cards=self.dealer.hand_str()))
        for player in self.players:
            writer.write(Message.PLAYER_HAND.format(name=player.name, cards=player.hand_str()))

    def get_state(self) -> Dict[str, Any]:
        """Get the session state as a JSON-ready dictionary."""
        return {
            "phase": self.phase.name,
            "session_number": self.session_number,
            "cursor": self._cursor,
            "remaining": self.remaining,
            "dealer": self.dealer.to_dict(),
            "players": [player.to_dict() for player in self.players],
        }

    def __repr__(self) -> str:
        return (
            f"BlackjackGame(phase={self.phase.name}, players={self.num_players}, "
            f"cursor={self._cursor})"
        )


_game: Optional[BlackjackGame] = None
_game_lock = threading.Lock()


def get_game() -> BlackjackGame:
    """Get the process-wide game session, creating it on first use."""
    global _game
    if _game is None:
        with _game_lock:
            if _game is None:
                _game = BlackjackGame(_CONSTRUCTION_KEY)
    return _game
