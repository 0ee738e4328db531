"""Runtime settings read from environment variables."""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Settings:
    """
    Process settings.

    Attributes:
        log_level: Root logging level (BLACKJACK_LOG_LEVEL); None leaves the
            choice to the entry point
        host: Address the HTTP server binds to (BLACKJACK_HOST)
        port: Port the HTTP server binds to (BLACKJACK_PORT)
    """

    log_level: Optional[str] = field(
        default_factory=lambda: (os.getenv("BLACKJACK_LOG_LEVEL") or "").upper() or None
    )
    host: str = field(default_factory=lambda: os.getenv("BLACKJACK_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("BLACKJACK_PORT", "8000")))

    def logging_level(self, default: int) -> int:
        """Numeric logging level, falling back to ``default`` when unset or unknown."""
        level = logging.getLevelName(self.log_level) if self.log_level else default
        return level if isinstance(level, int) else default


def get_settings() -> Settings:
    """Load settings from the current environment."""
    return Settings()
