"""Package configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(slots=True)
class DeckhandConfig:
    """Runtime configuration shared by decks and loggers."""

    log_level: str = "WARNING"
    shuffle_seed: int | None = None

    @classmethod
    def from_env(cls) -> "DeckhandConfig":
        """Build a configuration from ``DECKHAND_*`` environment variables."""

        seed = os.getenv("DECKHAND_SHUFFLE_SEED")
        return cls(
            log_level=os.getenv("DECKHAND_LOG_LEVEL", "WARNING"),
            shuffle_seed=int(seed) if seed else None,
        )


config = DeckhandConfig.from_env()
