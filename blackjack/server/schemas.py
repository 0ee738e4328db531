"""
Pydantic schemas for API request/response validation.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from blackjack.core.rules import NAME_MIN_LENGTH, NAME_MAX_LENGTH, MIN_BET, MAX_PLAYERS


# ============= Request Schemas =============

class PlayerEntry(BaseModel):
    """One seat in the roster."""
    name: str = Field(
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        pattern=r"^[^,]+$",
        description="Player name, 1-5 characters, no commas",
    )
    bet: int = Field(ge=MIN_BET, strict=True, description="Betting amount, a positive integer")


class InitGameRequest(BaseModel):
    """Request to start a new session."""
    players: List[PlayerEntry] = Field(min_length=1, max_length=MAX_PLAYERS)
    seed: Optional[int] = Field(default=None, description="Seed for a reproducible shuffle")


# ============= Response Schemas =============

class CardSchema(BaseModel):
    """Card representation."""
    rank: str
    suit: str
    text: str
    color: str


class DealerSchema(BaseModel):
    """The dealer's hand."""
    cards: List[CardSchema] = []


class PlayerSchema(BaseModel):
    """A seated player and their hand."""
    name: str
    bet: int
    cards: List[CardSchema] = []


class GameStateSchema(BaseModel):
    """Complete session state."""
    phase: str
    session_number: int
    cursor: int
    remaining: int
    dealer: DealerSchema
    players: List[PlayerSchema]

