from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


@dataclass(frozen=True)
class Settings:
    log_level: str

    # Core/runtime
    run_env: str

    # Parsing
    name_fallback_max_length: int
    plausible_height_feet: tuple[str, ...]

    # Publishing
    max_field_length: int
    public_base_url: str

    # Review thresholds
    min_plausible_age: int = 18
    max_plausible_age: int = 80


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        name_fallback_max_length=int(os.getenv("NAME_FALLBACK_MAX_LENGTH", "40")),
        # Feet values accepted by the unlabeled height fallback
        plausible_height_feet=("4", "5", "6"),
        max_field_length=int(os.getenv("MAX_FIELD_LENGTH", "500")),
        public_base_url=os.getenv("PUBLIC_BASE_URL", "https://trusathi.com").rstrip("/"),
        min_plausible_age=int(os.getenv("MIN_PLAUSIBLE_AGE", "18")),
        max_plausible_age=int(os.getenv("MAX_PLAUSIBLE_AGE", "80")),
    )
