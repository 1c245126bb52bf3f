"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        HeroBuilderError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        FeatureError: Feature engine errors.
        FeatureNestingError: Cyclic or over-deep feature trees.
        FeatureTypeError: Unknown feature type values.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        hero_context: Tag log entries with a hero id.
"""

from __future__ import annotations

from hero_builder.core.config import (
    FactorySettings,
    FeatureSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from hero_builder.core.exceptions import (
    ConfigurationError,
    FeatureError,
    FeatureNestingError,
    FeatureTypeError,
    HeroBuilderError,
)
from hero_builder.core.logging import configure_logging, get_logger, hero_context


__all__ = [
    # Exceptions
    "HeroBuilderError",
    "ConfigurationError",
    "FeatureError",
    "FeatureNestingError",
    "FeatureTypeError",
    # Configuration
    "FeatureSettings",
    "FactorySettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "hero_context",
]
