# src/parley/config.py
"""
Settings from the environment. CLI flags override these.
"""

import os
from dataclasses import dataclass


def _int(name: str, default: int | None) -> int | None:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


def _float(name: str, default: float) -> float:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}")


@dataclass
class Settings:
    wordnet_dir: str | None = None   # None: NLTK's installed corpus
    kb_timeout: float = 60.0
    workers: int | None = None
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            wordnet_dir=os.environ.get("PARLEY_WORDNET_DIR") or None,
            kb_timeout=_float("PARLEY_KB_TIMEOUT", 60.0),
            workers=_int("PARLEY_WORKERS", None),
            redis_host=os.environ.get("PARLEY_REDIS_HOST", "localhost"),
            redis_port=_int("PARLEY_REDIS_PORT", 6379),
            redis_db=_int("PARLEY_REDIS_DB", 0),
            log_level=os.environ.get("PARLEY_LOG_LEVEL", "WARNING").upper(),
        )
