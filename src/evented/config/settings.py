"""Application settings using Pydantic Settings."""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``EVENTED_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EVENTED_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"

    # Emit a debug record for every trigger call
    trace_dispatch: bool = False

    # Prefix of the identity token given to emitters on first listen_to
    listen_id_prefix: str = "l"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        level = str(v).upper().strip()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {v!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
