"""Runtime settings, read from ``SIMS_*`` environment variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    # Storage
    DATA_FILE: Path = _PROJECT_ROOT / "data" / "sims.json"

    # Logging
    LOG_LEVEL: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="SIMS_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
