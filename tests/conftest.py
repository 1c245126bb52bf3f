"""Pytest configuration and shared fixtures.

This module provides common fixtures for the hero builder test suite:
a settings cache reset, a factory with predictable identifiers, and a
few ready-made features and entities.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from hero_builder.core.config import FactorySettings
from hero_builder.engine.factory import EntityFactory
from hero_builder.engine.ids import SequentialIdGenerator
from hero_builder.models import (
    FeatureChoice,
    FeatureSkill,
    FeatureText,
    HeroClass,
    Kit,
)


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from hero_builder.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "HERO_BUILDER_DEBUG": "true",
        "HERO_BUILDER_LOG_LEVEL": "DEBUG",
        "HERO_BUILDER_FEATURE_MAX_DEPTH": "8",
        "HERO_BUILDER_FACTORY_DEFAULT_LANGUAGE": "Vaslorian",
        "HERO_BUILDER_FACTORY_LEVEL_COUNT": "5",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Factory Fixtures
# =============================================================================


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    """Provide predictable identifiers (test-1, test-2, ...)."""
    return SequentialIdGenerator(prefix="test")


@pytest.fixture
def factory(id_generator: SequentialIdGenerator) -> EntityFactory:
    """Provide a factory with predictable identifiers and default settings."""
    return EntityFactory(id_generator=id_generator, settings=FactorySettings())


# =============================================================================
# Feature Fixtures
# =============================================================================


@pytest.fixture
def text_feature(factory: EntityFactory) -> FeatureText:
    """A plain text feature."""
    return factory.feature.create(id="lore", name="Lore", description="You know things.")


@pytest.fixture
def skill_feature(factory: EntityFactory) -> FeatureSkill:
    """A skill feature granting Alertness."""
    return factory.feature.create_skill_feature(id="alert", skill="Alertness")


@pytest.fixture
def weighted_choice(factory: EntityFactory) -> FeatureChoice:
    """A choice needing 2 points: option A is worth 1, option B is worth 2."""
    option_a = factory.feature.create(id="option-a", name="A", description="")
    option_b = factory.feature.create(id="option-b", name="B", description="")
    return factory.feature.create_choice_feature(
        id="weighted",
        count=2,
        options=[
            factory.feature.create_option(option_a, 1),
            factory.feature.create_option(option_b, 2),
        ],
    )


@pytest.fixture
def armored_kit(factory: EntityFactory) -> Kit:
    """A kit granting two features."""
    kit = factory.create_kit()
    kit.name = "Armored"
    kit.features.extend(
        [
            factory.feature.create_speed_feature(id="kit-speed", speed=5),
            factory.feature.create_skill_feature(id="kit-skill", skill="Intimidate"),
        ]
    )
    return kit


# =============================================================================
# Entity Fixtures
# =============================================================================


@pytest.fixture
def leveled_class(factory: EntityFactory) -> HeroClass:
    """A level 2 class with one text feature at each of levels 1-3.

    It has two subclasses: ``subclass-on`` (selected) and
    ``subclass-off`` (not selected), each with a feature at every level.
    """
    hero_class = factory.create_class()
    hero_class.name = "Tactician"
    hero_class.level = 2
    for record in hero_class.features_by_level:
        record.features.append(
            factory.feature.create(
                id=f"class-{record.level}",
                name=f"Class {record.level}",
                description="",
            )
        )

    for key, selected in (("on", True), ("off", False)):
        subclass = factory.create_subclass()
        subclass.name = f"subclass-{key}"
        subclass.selected = selected
        for record in subclass.features_by_level:
            record.features.append(
                factory.feature.create(
                    id=f"sub-{key}-{record.level}",
                    name=f"Subclass {key} {record.level}",
                    description="",
                )
            )
        hero_class.subclasses.append(subclass)

    return hero_class
