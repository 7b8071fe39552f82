"""
config.py
=========
Central configuration module for Detective Quest: Mansion Exploration.

All game rules, hash-table sizing and logging settings live here so they
can be adjusted without touching the data structures or the CLI.

Usage:
    from config import GAME_CONFIG, LoggingConfig
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Game rules
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GameConfig:
    """
    Fixed game rules and structure sizing.

    Attributes:
        start_room:            Name of the root room where exploration begins.
        bucket_count:          Number of buckets in the SuspectIndex. A modest
                               prime, chosen once and never resized.
        hash_seed:             Initial value of the djb2 string hash.
        accusation_threshold:  Minimum number of collected clues that must
                               point at the accused for the accusation to be
                               sustained.
    """
    start_room:           str = "Hall de Entrada"
    bucket_count:         int = 101
    hash_seed:            int = 5381
    accusation_threshold: int = 2


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL_ENV = "DETECTIVE_QUEST_LOG_LEVEL"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging settings applied once by the CLI entry point.

    The default level is WARNING so that log lines do not interleave with
    the game's own console output; set DETECTIVE_QUEST_LOG_LEVEL=DEBUG
    (shell or .env) to trace every clue insertion and room transition.
    """
    level:    str = "WARNING"
    format:   str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    datefmt:  str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        """Build a LoggingConfig, honouring the level override in the environment."""
        level = os.environ.get(LOG_LEVEL_ENV, cls.level).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            level = cls.level
        return cls(level=level)


# ---------------------------------------------------------------------------
# Singleton instances (import-ready)
# ---------------------------------------------------------------------------

GAME_CONFIG    = GameConfig()

