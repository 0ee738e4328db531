"""
Exceptions raised by the blackjack engine.

Two families are kept apart:

- ``InvalidInputError`` is recoverable. The roster builder catches it,
  reports it and prompts again.
- ``InvariantViolation`` marks a broken programming contract (empty deck,
  dealing out of phase, a second session object). It derives from
  ``AssertionError`` and is never caught by the input retry loop.
"""


class BlackjackError(Exception):
    """Base class for all blackjack engine errors."""
    pass


class InvalidInputError(BlackjackError):
    """A line of user input failed validation."""
    pass


class InputClosedError(BlackjackError):
    """The input collaborator has no more lines to give."""
    pass


class InvariantViolation(BlackjackError, AssertionError):
    """An unreachable state was reached."""
    pass


class DeckExhaustedError(InvariantViolation):
    """A card was drawn after all 52 cards had been dealt."""
    pass


class GameStateError(InvariantViolation):
    """An operation was called in the wrong session phase."""
    pass


class SessionConstructionError(InvariantViolation):
    """A second game session object was constructed."""
    pass
