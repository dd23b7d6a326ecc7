"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
where relation records are read from, which path-finding algorithm
serves route queries, the bounds accepted by the HTTP layer and how
logs are emitted.

Configuration can be overridden via environment variables:
- KINROUTE_STORE_BACKEND=csv
- KINROUTE_STORE_DATA_DIR=/path/to/data
- KINROUTE_STORE_DATABASE_FILE=network.db
- KINROUTE_ROUTE_ALGORITHM=bidirectional
- KINROUTE_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_data_dir() -> Path:
    return Path(__file__).resolve().parent.parent / "data"


class StoreConfig(BaseSettings):
    """Record storage configuration.

    Environment variables prefixed with KINROUTE_STORE_.
    """

    model_config = SettingsConfigDict(env_prefix="KINROUTE_STORE_")

    backend: Literal["sqlite", "csv"] = "sqlite"
    data_dir: Path = Field(default_factory=_default_data_dir)
    database_file: str = "network.db"
    persons_file: str = "persons.csv"
    marriages_file: str = "marriages.csv"

    @property
    def database_path(self) -> Path:
        """Full path to the SQLite database."""
        return self.data_dir / self.database_file

    @property
    def persons_path(self) -> Path:
        """Full path to the persons CSV file."""
        return self.data_dir / self.persons_file

    @property
    def marriages_path(self) -> Path:
        """Full path to the marriages CSV file."""
        return self.data_dir / self.marriages_file


class RouteConfig(BaseSettings):
    """Query configuration.

    Environment variables prefixed with KINROUTE_ROUTE_.
    """

    model_config = SettingsConfigDict(env_prefix="KINROUTE_ROUTE_")

    algorithm: Literal["bfs", "bidirectional"] = "bfs"
    min_degrees: int = Field(default=1, ge=0)
    max_degrees: int = Field(default=6, ge=0)
    hydration_workers: int = Field(default=4, ge=1)

    @model_validator(mode="after")
    def _check_degree_bounds(self) -> RouteConfig:
        if self.min_degrees > self.max_degrees:
            raise ValueError("min_degrees must not exceed max_degrees")
        return self


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with KINROUTE_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="KINROUTE_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.store.database_path)
        print(config.route.algorithm)

    Environment variables prefixed with KINROUTE_.
    """

    model_config = SettingsConfigDict(env_prefix="KINROUTE_")

    store: StoreConfig = Field(default_factory=StoreConfig)
    route: RouteConfig = Field(default_factory=RouteConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
