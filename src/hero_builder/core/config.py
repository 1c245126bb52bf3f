"""Configuration management for the hero builder engine.

This module provides centralized configuration using pydantic-settings,
supporting environment variables, .env files, and runtime overrides.

Example:
    >>> from hero_builder.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.factory.default_language
    'Caelian'

Environment Variables:
    HERO_BUILDER_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    HERO_BUILDER_FEATURE_MAX_DEPTH: Deepest allowed feature nesting
    HERO_BUILDER_FACTORY_DEFAULT_LANGUAGE: Language every new hero knows
    HERO_BUILDER_FACTORY_LEVEL_COUNT: Levels pre-seeded on new classes
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hero_builder.core.constants import (
    DEFAULT_LANGUAGE,
    DEFAULT_LEVEL_COUNT,
    DEFAULT_MAX_FEATURE_DEPTH,
    DEFAULT_STARTING_WEALTH,
)
from hero_builder.core.exceptions import ConfigurationError


class FeatureSettings(BaseSettings):
    """Configuration for feature tree traversal.

    Attributes:
        max_depth: Deepest nesting level flattening will descend into.
    """

    model_config = SettingsConfigDict(
        env_prefix="HERO_BUILDER_FEATURE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_depth: int = Field(
        default=DEFAULT_MAX_FEATURE_DEPTH,
        ge=1,
        le=1024,
        description="Maximum feature nesting depth",
    )


class FactorySettings(BaseSettings):
    """Configuration for entity construction defaults.

    Attributes:
        default_language: Language pre-selected on every new hero.
        level_count: Number of level records seeded on classes, subclasses and domains.
        starting_wealth: Wealth a new hero starts with.
    """

    model_config = SettingsConfigDict(
        env_prefix="HERO_BUILDER_FACTORY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_language: str = Field(
        default=DEFAULT_LANGUAGE,
        description="Language every new hero knows",
    )
    level_count: int = Field(
        default=DEFAULT_LEVEL_COUNT,
        ge=1,
        le=10,
        description="Level records seeded on new classes",
    )
    starting_wealth: int = Field(
        default=DEFAULT_STARTING_WEALTH,
        ge=0,
        description="Wealth of a new hero",
    )

    @field_validator("default_language", mode="after")
    @classmethod
    def validate_default_language(cls, value: str) -> str:
        """Reject a blank default language.

        Raises:
            ConfigurationError: If the language is empty.
        """
        if not value.strip():
            raise ConfigurationError(
                "default_language must not be blank",
                config_key="default_language",
            )
        return value.strip()


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        feature: Feature traversal settings.
        factory: Entity factory settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="HERO_BUILDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="Hero Builder",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    feature: FeatureSettings = Field(default_factory=FeatureSettings)
    factory: FactorySettings = Field(default_factory=FactorySettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is invalid.
    """
    try:
        return Settings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access.

    Example:
        >>> clear_settings_cache()
        >>> settings = get_settings()  # Reloads from environment
    """
    get_settings.cache_clear()


__all__ = [
    "FeatureSettings",
    "FactorySettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
