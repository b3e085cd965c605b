"""
config.py
=========
Environment-driven settings for the selkit command line.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

_TRUTHY = {'1', 'true', 'yes', 'on'}


def resolve_level(level: str) -> int:
    """Map a level name to a numeric logging level.

    ``ALL`` maps to ``NOTSET`` so every record is kept.

    Raises:
        ValueError: If the name is not a known logging level.

    """
    name = level.upper()
    if name == 'ALL':
        return logging.NOTSET
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        raise ValueError(f'Unknown log level: {level}')
    return numeric


@dataclass
class Settings:
    """Runtime configuration.

    Attributes:
        log_level: Level name for local file logging. Defaults to 'WARNING'.
        log_to_file: Write logs under .selkit/logs/. Defaults to False.
        logfire_token: Token passed to logfire.configure, if any.
    """

    log_level: str = 'WARNING'
    log_to_file: bool = False
    logfire_token: str | None = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization.

        Raises:
            ValueError: If log_level is not a known level name.
        """
        resolve_level(self.log_level)

    @classmethod
    def from_env(cls) -> 'Settings':
        """Load settings from the environment, reading a .env file first."""
        load_dotenv()
        return cls(
            log_level=os.getenv('SELKIT_LOG_LEVEL', 'WARNING'),
            log_to_file=os.getenv('SELKIT_LOG_TO_FILE', '').strip().lower() in _TRUTHY,
            logfire_token=os.getenv('LOGFIRE_TOKEN') or None,
        )
