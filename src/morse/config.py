"""
Runtime settings, overridable from the environment.
"""

import logging
import os

APP_NAME = "Morse Translator"
APP_VERSION = "1.1"

DEFAULT_LOG_LEVEL = "WARNING"


def resolve_log_level(name: str | None) -> str:
    """Known level name, upper-cased; anything else falls back to WARNING."""
    level = (name or "").strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


API_URL = os.environ.get("MORSE_API_URL", "http://localhost:8000/api").rstrip("/")
LOG_LEVEL = resolve_log_level(os.environ.get("MORSE_LOG_LEVEL"))
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "MORSE_CORS_ORIGINS", "http://localhost:3000,http://localhost:5173"
    ).split(",")
    if origin.strip()
]
