"""Note store configuration loaded from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings

DEFAULT_LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


class Settings(BaseSettings):
    """Library settings loaded from the environment or a .env file."""

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "TODO_NOTES_",
        "extra": "ignore",
    }

    # Logging
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT

    # Store behaviour
    unique_ids: bool = False


def configure_logging(config: Settings | None = None) -> None:
    """Install a root handler using the configured level and format."""
    config = config or settings
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=config.log_format,
    )


settings = Settings()
