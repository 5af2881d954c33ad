"""Engine settings."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ConsSingleton = Literal["exact", "tail"]


class MatchSettings(BaseSettings):
    """Matching and logging settings.

    cons_singleton picks how a one-slot Cons pattern behaves:
    - "exact": matches only one-element sequences, binds the element
    - "tail": matches any sequence, binds the whole sequence as the tail
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PATMATCH_",
        case_sensitive=False,
        extra="ignore",
    )

    cons_singleton: ConsSingleton = Field(default="exact")
    trace: bool = Field(default=False)
    log_filter: str = Field(default="info")


def load_settings(**overrides: Any) -> MatchSettings:
    """Load settings from the environment with optional explicit overrides."""
    return MatchSettings(**overrides)
