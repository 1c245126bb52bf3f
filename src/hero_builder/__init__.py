"""Hero Builder - feature composition and choice resolution engine.

Heroes gain features from their ancestry, culture, career, class,
subclass, complication, items and titles. Some features are choices
(pick a skill, a kit, a domain...) that must be resolved before the
hero is complete. This package models those features, builds new
content with sensible defaults, expands resolved choices into a flat
feature list, and reports which choices are still open.

Example:
    >>> from hero_builder import get_factory, get_features_from_class, is_chosen
    >>> factory = get_factory()
    >>> hero_class = factory.create_class()
    >>> hero_class.features_by_level[0].features.append(
    ...     factory.feature.create_kit_choice_feature(id="kit")
    ... )
    >>> [is_chosen(f) for f in get_features_from_class(hero_class)]
    [False]

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 models for features, entities and monsters.
    engine: Entity factory, feature aggregation, flattening and choice checks.
"""

from __future__ import annotations

# Core
from hero_builder.core.config import Settings, get_settings
from hero_builder.core.exceptions import HeroBuilderError
from hero_builder.core.logging import configure_logging, get_logger

# Models
from hero_builder.models.enums import FeatureType
from hero_builder.models.features import Feature, parse_feature

# Engine
from hero_builder.engine.factory import EntityFactory, get_factory
from hero_builder.engine.features import (
    flatten_features,
    get_feature_type_description,
    get_features_from_ancestry,
    get_features_from_career,
    get_features_from_class,
    get_features_from_complication,
    get_features_from_culture,
    get_features_from_hero,
    get_features_from_item,
    get_unresolved_choices,
    is_choice,
    is_chosen,
)
from hero_builder.engine.ids import SequentialIdGenerator


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "HeroBuilderError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "Feature",
    "FeatureType",
    "parse_feature",
    # Engine
    "EntityFactory",
    "get_factory",
    "SequentialIdGenerator",
    "flatten_features",
    "get_features_from_ancestry",
    "get_features_from_culture",
    "get_features_from_career",
    "get_features_from_class",
    "get_features_from_complication",
    "get_features_from_item",
    "get_features_from_hero",
    "is_choice",
    "is_chosen",
    "get_unresolved_choices",
    "get_feature_type_description",
]
