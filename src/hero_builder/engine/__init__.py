"""Feature engine: entity factory, aggregation, flattening and choice checks."""

from __future__ import annotations

from hero_builder.engine.factory import (
    AbilityTypeFactory,
    DistanceFactory,
    EntityFactory,
    FeatureFactory,
    culture_id,
    get_factory,
)
from hero_builder.engine.features import (
    flatten_features,
    get_child_features,
    get_feature_type_description,
    get_features_from_ancestry,
    get_features_from_career,
    get_features_from_class,
    get_features_from_complication,
    get_features_from_culture,
    get_features_from_domain,
    get_features_from_hero,
    get_features_from_item,
    get_features_from_kit,
    get_features_from_title,
    get_unresolved_choices,
    is_choice,
    is_chosen,
)
from hero_builder.engine.ids import IdGenerator, SequentialIdGenerator, uuid_id_generator


__all__ = [
    # Factory
    "EntityFactory",
    "FeatureFactory",
    "AbilityTypeFactory",
    "DistanceFactory",
    "culture_id",
    "get_factory",
    # Identifiers
    "IdGenerator",
    "SequentialIdGenerator",
    "uuid_id_generator",
    # Features
    "flatten_features",
    "get_child_features",
    "get_features_from_ancestry",
    "get_features_from_culture",
    "get_features_from_career",
    "get_features_from_class",
    "get_features_from_domain",
    "get_features_from_complication",
    "get_features_from_item",
    "get_features_from_kit",
    "get_features_from_title",
    "get_features_from_hero",
    "is_choice",
    "is_chosen",
    "get_unresolved_choices",
    "get_feature_type_description",
]
