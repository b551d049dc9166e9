"""Local configuration for mdblocks."""

from __future__ import annotations

import os


DEFAULT_STRICT_CLOSING_SEQUENCE = True
DEFAULT_MAX_INPUT_CHARS = 1_000_000
DEFAULT_LOG_LEVEL = "INFO"


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


# When true, a trailing run of heading markers only closes a heading if whitespace precedes it.
MDBLOCKS_STRICT_CLOSING_SEQUENCE = _env_flag(
    "MDBLOCKS_STRICT_CLOSING_SEQUENCE", DEFAULT_STRICT_CLOSING_SEQUENCE
)
MDBLOCKS_MAX_INPUT_CHARS = int(os.getenv("MDBLOCKS_MAX_INPUT_CHARS", str(DEFAULT_MAX_INPUT_CHARS)))
MDBLOCKS_LOG_LEVEL = os.getenv("MDBLOCKS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
