"""
Configuration management for crud-sqlgen.

Settings are read from environment variables with the ``SQLGEN_`` prefix
(for example ``SQLGEN_NAMED_PARAMS=true``) and from an optional ``.env``
file. ``SQLGEN_ENV_FILE`` points at a different env file.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_OVERRIDE = os.getenv("SQLGEN_ENV_FILE")
SETTINGS_ENV_FILE = Path(ENV_FILE_OVERRIDE).expanduser() if ENV_FILE_OVERRIDE else Path(".env")


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    - SQLGEN_LOG_LEVEL: Logging level. Default: INFO
    - SQLGEN_NAMED_PARAMS: Default placeholder style (``@name`` when true)
    - SQLGEN_SCHEMA_FILE: Default YAML schema file for the CLI
    - SQLGEN_DATABASE_URL: Default SQLAlchemy URL for introspection
    - SQLGEN_DB_SCHEMA: Database schema to introspect
    """

    log_level: str = Field(default="INFO", description="Logging level")
    named_params: bool = Field(
        default=False, description="Use named (@name) placeholders by default"
    )
    schema_file: Optional[str] = Field(
        default=None, description="YAML schema file holding table definitions"
    )
    database_url: Optional[str] = Field(
        default=None, description="SQLAlchemy URL used for table introspection"
    )
    db_schema: Optional[str] = Field(
        default=None, description="Database schema to introspect"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize to upper case and reject unknown level names."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = SettingsConfigDict(
        env_prefix="SQLGEN_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
