# state_search/config.py
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# ---- Tunables (overridable via environment variables) -----------------------
INPUT_DIR      = os.getenv("AOC_INPUT_DIR", "inputs")            # where dayNN.txt lives
MAX_EXPANSIONS = os.getenv("SEARCH_MAX_EXPANSIONS", "")           # empty = unlimited
LOG_LEVEL      = os.getenv("SEARCH_LOG_LEVEL", "WARNING")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def optional_int(raw: str, name: str) -> Optional[int]:
    raw = raw.strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def parse_log_level(raw: str, name: str) -> str:
    level = raw.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"{name} must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return level


@dataclass(frozen=True)
class Settings:
    input_dir: Path = Path("inputs")
    max_expansions: Optional[int] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            input_dir=Path(INPUT_DIR),
            max_expansions=optional_int(MAX_EXPANSIONS, "SEARCH_MAX_EXPANSIONS"),
            log_level=parse_log_level(LOG_LEVEL, "SEARCH_LOG_LEVEL"),
        )
