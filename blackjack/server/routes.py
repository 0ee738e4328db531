"""
HTTP API Routes for the blackjack table.

There is one table and one session per process; every route works on
the shared session returned by get_game().
"""

import logging
import random
from typing import Any, Dict

from fastapi import APIRouter, HTTPException

from blackjack.console.scripted import ScriptedIO
from blackjack.core.exceptions import GameStateError
from blackjack.core.game import BlackjackGame, get_game
from blackjack.core.roster import RosterBuilder
from blackjack.core.rules import GamePhase, NAME_SEPARATOR
from blackjack.server.schemas import InitGameRequest, GameStateSchema


logger = logging.getLogger(__name__)

router = APIRouter()


def get_initialized_game() -> BlackjackGame:
    """Get the shared session, failing if it has not been initialized."""
    game = get_game()
    if game.phase == GamePhase.UNINITIALIZED:
        raise HTTPException(status_code=400, detail="Game not initialized")
    return game


def _roster_script(req: InitGameRequest) -> ScriptedIO:
    """
    Turn a validated request into the lines the roster builder expects:
    the comma-joined names, then one bet per name.
    """
    names_line = NAME_SEPARATOR.join(entry.name for entry in req.players)
    return ScriptedIO([names_line, *(str(entry.bet) for entry in req.players)])


def _initialize(req: InitGameRequest) -> BlackjackGame:
    io = _roster_script(req)
    rng = random.Random(req.seed) if req.seed is not None else None

    game = get_game()
    game.initialize(RosterBuilder(io, io), rng)
    return game


@router.post("/init_game")
async def init_game(req: InitGameRequest) -> Dict[str, Any]:
    """
    Start a new session with the given roster.

    Any previous session is discarded.
    """
    game = _initialize(req)
    return {
        "success": True,
        "message": f"Game initialized with {game.num_players} players",
        "player_count": game.num_players,
        "session_number": game.session_number,
    }


@router.post("/deal", response_model=GameStateSchema)
async def deal() -> Dict[str, Any]:
    """Deal the opening hands of the current session."""
    game = get_game()
    try:
        game.deal_opening_hands()
    except GameStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return game.get_state()


@router.post("/play_game", response_model=GameStateSchema)
async def play_game(req: InitGameRequest) -> Dict[str, Any]:
    """Start a new session and deal the opening hands in one call."""
    game = _initialize(req)
    game.deal_opening_hands()
    return game.get_state()


@router.get("/get_game_state", response_model=GameStateSchema)
async def get_game_state() -> Dict[str, Any]:
    """Get the current session state."""
    return get_initialized_game().get_state()


@router.post("/reset_game")
async def reset_game() -> Dict[str, Any]:
    """
    Discard the current session (for development/testing).
    """
    get_game().reset()
    logger.info("Game reset")
    return {"success": True, "message": "Game reset"}
