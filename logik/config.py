"""
Single place to:
- Load env vars (from a local .env if present)
- Validate them once, so a bad setting stops the app before any game starts
"""

import logging
import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

# dev convenience; in prod the platform injects env vars
load_dotenv()

SEED_SOURCES = ("time", "random_org")

@dataclass(frozen=True)
class Settings:
    app_env: str
    log_level: str
    seed_source: str
    cors_origins: List[str]
    max_games: int
    host: str
    port: int

def load_settings() -> Settings:
    app_env = os.getenv("APP_ENV", "local")

    log_level = os.getenv("LOGIK_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"LOGIK_LOG_LEVEL={log_level!r} is not a logging level.")

    seed_source = os.getenv("LOGIK_SEED_SOURCE", "time")
    if seed_source not in SEED_SOURCES:
        raise RuntimeError(
            f"LOGIK_SEED_SOURCE={seed_source!r} is not supported. Use one of: {', '.join(SEED_SOURCES)}."
        )

    origins = [o.strip() for o in os.getenv("LOGIK_CORS_ORIGINS", "*").split(",") if o.strip()]

    try:
        max_games = int(os.getenv("LOGIK_MAX_GAMES", "1000"))
        port = int(os.getenv("LOGIK_PORT", "8000"))
    except ValueError as exc:
        raise RuntimeError(f"LOGIK_MAX_GAMES and LOGIK_PORT must be integers: {exc}")
    if max_games < 1:
        raise RuntimeError(f"LOGIK_MAX_GAMES={max_games} must be at least 1.")

    return Settings(
        app_env=app_env,
        log_level=log_level,
        seed_source=seed_source,
        cors_origins=origins or ["*"],
        max_games=max_games,
        host=os.getenv("LOGIK_HOST", "localhost"),
        port=port,
    )
