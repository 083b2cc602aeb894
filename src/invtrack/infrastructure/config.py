"""Settings for the inventory tracker.

Loaded from ``INVTRACK_*`` environment variables or a ``.env`` file via
pydantic-settings.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):
    # Persistence
    data_file: Path = Field(_PROJECT_ROOT / "data" / "inventory.json")

    # Queries
    low_stock_threshold: int = Field(5, ge=0)

    # Logging
    log_level: str = Field("WARNING")
    json_logs: bool = Field(False)

    model_config = SettingsConfigDict(
        env_prefix="INVTRACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance to avoid repeated env parsing."""
    return Settings()


__all__ = ["Settings", "get_settings"]
