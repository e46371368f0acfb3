"""
Paprika MCP Configuration
=========================

Centralized application settings.

Every field can be overridden from the environment with the ``PAPRIKA_``
prefix (``PAPRIKA_RECIPES_DIR``, ``PAPRIKA_SERVER_NAME``...) or from a local
``.env`` file. Command-line flags take precedence over both.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RECIPES_DIRNAME = ".recipes"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App info
    app_name: str = "Paprika MCP"
    app_version: str = "1.0.0"
    debug: bool = False

    # MCP server
    server_name: str = "paprika"
    recipes_dir: Optional[Path] = None

    # Tool defaults
    list_limit: int = 200
    search_limit: int = 10

    model_config = SettingsConfigDict(
        env_prefix="PAPRIKA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def resolve_recipes_dir(self) -> Path:
        """Configured recipes directory, or ``./.recipes`` under the working directory."""
        if self.recipes_dir is not None:
            return self.recipes_dir
        return Path.cwd() / DEFAULT_RECIPES_DIRNAME


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
