"""
Blackjack Server - FastAPI HTTP layer over the single table session
"""

from blackjack.server.app import app, create_app

__all__ = ["app", "create_app"]
