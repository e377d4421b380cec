"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration.

Configuration can be overridden via environment variables:
- APSP_ENGINE_LOG_MATRICES=true
- APSP_GRAPH_DATA_DIR=/path/to/graphs
- APSP_REPORT_PREDECESSOR_STYLE=label
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineConfig(BaseSettings):
    """Shortest path engine configuration.

    Environment variables prefixed with APSP_ENGINE_.
    """

    model_config = SettingsConfigDict(env_prefix="APSP_ENGINE_")

    dtype: Literal["float64", "float32"] = "float64"
    log_matrices: bool = False  # Dump matrices at DEBUG before and after relaxation


class GraphConfig(BaseSettings):
    """Graph data configuration.

    Environment variables prefixed with APSP_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="APSP_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    graph_file: str = "sample.graph"
    unlabeled_weight: Optional[float] = None

    @property
    def graph_path(self) -> Path:
        """Full path to the edge-list file."""
        return self.data_dir / self.graph_file


class ReportConfig(BaseSettings):
    """Diagnostic report configuration.

    Environment variables prefixed with APSP_REPORT_.
    """

    model_config = SettingsConfigDict(env_prefix="APSP_REPORT_")

    infinity_token: str = "Infinity"
    predecessor_style: Literal["index", "label"] = "index"
    include_matrices: bool = True
    include_diagonal: bool = False


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with APSP_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="APSP_LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.engine.dtype)
        print(config.graph.graph_path)

    Environment variables prefixed with APSP_.
    """

    model_config = SettingsConfigDict(env_prefix="APSP_")

    engine: EngineConfig = Field(default_factory=EngineConfig)
    graph: GraphConfig = Field(default_factory=GraphConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
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
