"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- JUNCTIONS_GRAPH_NODE_ALPHABET=ABCDEFG
- JUNCTIONS_GRAPH_ARC_SEPARATOR=;
- JUNCTIONS_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Arc specification parsing configuration.

    Environment variables prefixed with JUNCTIONS_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="JUNCTIONS_GRAPH_")

    node_alphabet: str = "ABCDE"
    arc_separator: str = ","

    @field_validator("node_alphabet")
    @classmethod
    def _alphabet_is_letters(cls, value: str) -> str:
        if not value or not value.isalpha():
            raise ValueError("node_alphabet must be a non-empty string of letters")
        return value

    @field_validator("arc_separator")
    @classmethod
    def _separator_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("arc_separator must not be empty")
        return value


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with JUNCTIONS_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="JUNCTIONS_LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level", mode="before")
    @classmethod
    def _level_upper_case(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.node_alphabet)

    Environment variables prefixed with JUNCTIONS_.
    """

    model_config = SettingsConfigDict(env_prefix="JUNCTIONS_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
