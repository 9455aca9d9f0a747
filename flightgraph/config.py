"""Centralized configuration using Pydantic Settings.

This module is the single source of truth for where the sample
descriptions live, which source files the loader accepts and how
logging is set up.

Configuration can be overridden via environment variables:
- FG_GRAPH_DATA_DIR=/path/to/data
- FG_GRAPH_TIME_FILE=airportsTime.gv
- FG_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph description sources.

    Environment variables prefixed with FG_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="FG_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    time_file: str = "airportsTime.gv"
    cost_file: str = "airports.gv"
    allowed_extensions: Tuple[str, ...] = (".gv", ".dot")
    encoding: str = "utf-8"

    @field_validator("allowed_extensions")
    @classmethod
    def _normalize_extensions(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        normalized = []
        for ext in value:
            ext = ext.strip().lower()
            if not ext:
                continue
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return tuple(normalized)

    @property
    def time_path(self) -> Path:
        """Full path to the time-weighted description."""
        return self.data_dir / self.time_file

    @property
    def cost_path(self) -> Path:
        """Full path to the cost-weighted description."""
        return self.data_dir / self.cost_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with FG_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="FG_LOG_")

    level: str = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.time_path)
        print(config.observability.level)

    Environment variables prefixed with FG_.
    """

    model_config = SettingsConfigDict(env_prefix="FG_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


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
