"""Settings for the Barista assistant.

Context window, paging and input limits come from BARISTA_* environment
variables or a .env file read with python-dotenv.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Config:
    """Assistant configuration loaded from environment variables."""

    context_timeout_seconds: float = 300.0
    page_size: int = 5
    max_recent_items: int = 5
    max_query_length: int = 1000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """Build a Config from BARISTA_* variables and LOG_LEVEL.

        Args:
            env_file: Optional path to .env file. If None, searches for .env
                     in current directory and parent directories.

        Returns:
            Config with defaults for every unset variable.

        Raises:
            ValueError: If a variable holds an invalid value.
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()  # Auto-searches for .env

        timeout = _read_number("BARISTA_CONTEXT_TIMEOUT_SECONDS", float, 300.0)
        page_size = _read_number("BARISTA_PAGE_SIZE", int, 5)
        max_recent = _read_number("BARISTA_MAX_RECENT_ITEMS", int, 5)
        max_length = _read_number("BARISTA_MAX_QUERY_LENGTH", int, 1000)
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()

        # Validate log level
        if log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid LOG_LEVEL: {log_level}. Must be one of {VALID_LOG_LEVELS}"
            )

        return cls(
            context_timeout_seconds=timeout,
            page_size=page_size,
            max_recent_items=max_recent,
            max_query_length=max_length,
            log_level=log_level,
        )


def _read_number(name: str, kind: type, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default

    try:
        value = kind(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a {kind.__name__} (got {raw!r})") from e

    if value <= 0:
        raise ValueError(f"{name} must be > 0 (got {value})")
    return value
