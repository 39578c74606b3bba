"""Library configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    default_max_points: int = 64
    bezier_steps: int = 20
    prune_alignment: bool = True
    strict_paths: bool = False
    log_level: str = "info"

    model_config = SettingsConfigDict(
        env_prefix="CLIPMORPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Set up root logging for scripts and notebooks using the library."""
    name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
