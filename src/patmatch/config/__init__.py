"""Configuration package."""

from patmatch.config.settings import ConsSingleton, MatchSettings, load_settings

__all__ = [
    "ConsSingleton",
    "MatchSettings",
    "load_settings",
]
