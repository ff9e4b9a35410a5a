# config.py
"""Application settings read from the environment (and an optional .env file)."""

import os

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


class Settings:
    """Settings loaded from environment variables"""

    # Storage
    DATA_PATH: str = os.getenv("HABITS_DATA_PATH", "data/habits.json")

    # Logging
    LOG_FILE: str = os.getenv("HABITS_LOG_FILE", "logs/habits.log")
    LOG_LEVEL: str = os.getenv("HABITS_LOG_LEVEL", "INFO")

    # Reminders
    REMINDERS_ENABLED: bool = _env_bool("REMINDERS_ENABLED", True)
    REMINDER_INTERVAL_MS: int = _env_int("REMINDER_INTERVAL_MS", 60000)

    # Presentation / validation
    THEME: str = os.getenv("HABITS_THEME", "light")
    HISTORY_DAYS: int = _env_int("HISTORY_DAYS", 30)
    MAX_NAME_LENGTH: int = _env_int("MAX_NAME_LENGTH", 100)


settings = Settings()
