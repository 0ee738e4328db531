#!/usr/bin/env python3
"""
Blackjack Table - Server Startup Script

Usage:
    python run.py [--host HOST] [--port PORT] [--reload]

The console game is started with `python -m blackjack` instead.
"""

import argparse
import uvicorn

from blackjack.config import get_settings


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Blackjack Table Server")
    parser.add_argument("--host", default=settings.host, help="Host to bind to")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    args = parser.parse_args()

    uvicorn.run(
        "blackjack.server.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
