"""
Participants at the blackjack table.

Manages:
- The hand (ordered cards, append-only while dealing)
- Player identity: name and betting amount, fixed at creation
"""

from __future__ import annotations
from typing import Any, Dict, List
from dataclasses import dataclass, field

from blackjack.core.card import Card
from blackjack.core.rules import NAME_MIN_LENGTH, NAME_MAX_LENGTH, MIN_BET


class Participant:
    """Anyone who is dealt cards. Subclasses provide the ``hand`` field."""

    hand: List[Card]

    def add_card(self, card: Card) -> None:
        """Append a dealt card to the hand."""
        self.hand.append(card)

    @property
    def card_count(self) -> int:
        return len(self.hand)

    def hand_str(self) -> str:
        return ", ".join(str(card) for card in self.hand)

    def to_dict(self) -> Dict[str, Any]:
        return {"cards": [card.to_dict() for card in self.hand]}


@dataclass
class Dealer(Participant):
    """The house. One per session, no name and no bet."""
    hand: List[Card] = field(default_factory=list)

    def __str__(self) -> str:
        return f"Dealer [{self.hand_str() or '??'}]"


@dataclass(frozen=True, eq=False)
class Player(Participant):
    """
    A player seated at the table.

    Attributes:
        name: Display name, 1-5 characters
        bet: Betting amount, a positive integer
        hand: Cards dealt to the player

    The roster builder validates user input before a Player is created;
    the checks here only guard against programming mistakes.
    """
    name: str
    bet: int
    hand: List[Card] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not NAME_MIN_LENGTH <= len(self.name) <= NAME_MAX_LENGTH:
            raise ValueError(
                f"Player name must be {NAME_MIN_LENGTH}-{NAME_MAX_LENGTH} characters, "
                f"got {self.name!r}"
            )
        if isinstance(self.bet, bool) or not isinstance(self.bet, int) or self.bet < MIN_BET:
            raise ValueError(f"Betting amount must be a positive integer, got {self.bet!r}")

    def to_dict(self) -> Dict[str, Any]:
        result = {"name": self.name, "bet": self.bet}
        result.update(super().to_dict())
        return result

    def __str__(self) -> str:
        return f"Player {self.name} [{self.hand_str() or '??'}] ${self.bet}"
