"""envref - Configuration system with Pydantic Settings"""

from __future__ import annotations
from typing import List, Optional
import pydantic_settings
from pydantic import Field, field_validator
from pydantic_settings.main import SettingsConfigDict
from pydantic_settings import (
    PydanticBaseSettingsSource,
    EnvSettingsSource,
    DotEnvSettingsSource,
)

__all__ = [
    "DEFAULT_MAX_SUGGESTION_DISTANCE",
    "Settings",
    "get_settings",
    "reload_settings",
]

ENV_PREFIX = "ENVREF_"

# Suggestions further than this many edits away are not shown.
DEFAULT_MAX_SUGGESTION_DISTANCE = 3

DEFAULT_DOCS_URL = (
    "https://facebook.github.io/create-react-app/docs/adding-custom-environment-variables"
)


class Settings(pydantic_settings.BaseSettings):
    """Tool settings with type-safe validation.

    Every field can be overridden with an ``ENVREF_``-prefixed environment
    variable (``ENVREF_PREFIX``, ``ENVREF_MAX_SUGGESTION_DISTANCE``, ...) or the
    same key in a ``.env`` file. List fields take JSON values.
    """

    # Naming convention
    prefix: str = Field(default="REACT_APP_", min_length=1)
    access_expression: str = Field(default="process.env", min_length=1)

    # Source selection
    extensions: List[str] = Field(default_factory=lambda: [".js", ".jsx", ".ts", ".tsx"])
    excluded_dirs: List[str] = Field(default_factory=lambda: ["__tests__", "node_modules"])
    test_file_marker: str = Field(default=".test")

    # Suggestions
    max_suggestion_distance: int = Field(default=DEFAULT_MAX_SUGGESTION_DISTANCE)

    # Report / CLI
    docs_url: str = Field(default=DEFAULT_DOCS_URL)
    default_source_dir: str = Field(default="src")
    log_level: str = Field(default="WARNING")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("max_suggestion_distance")
    @classmethod
    def _non_negative_distance(cls, value: int) -> int:
        if value < 0:
            raise ValueError("max_suggestion_distance must be >= 0")
        return value

    @field_validator("extensions")
    @classmethod
    def _dotted_extensions(cls, value: List[str]) -> List[str]:
        return [ext if ext.startswith(".") else f".{ext}" for ext in value]

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[pydantic_settings.BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        del env_settings, dotenv_settings, file_secret_settings

        model_case_sensitive = settings_cls.model_config.get("case_sensitive")
        case_sensitive = model_case_sensitive if isinstance(model_case_sensitive, bool) else None

        return (
            init_settings,
            EnvSettingsSource(
                settings_cls,
                env_prefix=ENV_PREFIX,
                case_sensitive=case_sensitive,
            ),
            DotEnvSettingsSource(
                settings_cls,
                env_prefix=ENV_PREFIX,
                env_file=settings_cls.model_config.get("env_file"),
                case_sensitive=case_sensitive,
            ),
        )


# Built on first use so a bad ENVREF_* value surfaces inside the check,
# not at import time.
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton instance.

    Returns:
        The global Settings instance.

    Raises:
        pydantic.ValidationError: If a configured value is invalid.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """
    Reload settings by creating a new Settings instance.

    Returns:
        A new Settings instance with current environment values.
    """
    global _settings
    _settings = Settings()
    return _settings
