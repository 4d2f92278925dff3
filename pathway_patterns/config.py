"""
Configuration for pathway-patterns.

Settings are loaded from environment variables prefixed with
``PATHWAY_PATTERNS_`` (or a local ``.env`` file). Command line flags of the
``pathway-sif`` script take precedence over these values.

Attributes:
    hgnc_file: HGNC TSV download used by the default identifier fetcher
    log_level: Level passed to ``logging.basicConfig`` by the scripts
    show_progress: Show a progress bar while miners run
    default_sif_types: SIF types mined when none are requested explicitly
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PATHWAY_PATTERNS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    hgnc_file: Path | None = None
    log_level: str = "WARNING"
    show_progress: bool = False
    default_sif_types: list[str] = Field(
        default_factory=lambda: [
            "controls-state-change",
            "controls-expression",
            "controls-degradation",
            "in-complex-with",
        ]
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
