"""Feature composition and choice resolution.

This module answers three questions about a hero's features:

* Which features does an entity give? (``get_features_from_*``)
* What is the full list once resolved choices are expanded?
  (``flatten_features``)
* Which of those still need the user to pick something?
  (``is_choice``, ``is_chosen``, ``get_unresolved_choices``)

All functions are pure: they read the models passed in and return new
lists. After the selection UI mutates a feature's ``selected`` data,
callers simply run them again.

Example:
    >>> features = get_features_from_class(hero_class)
    >>> pending = [f.name for f in features if is_choice(f) and not is_chosen(f)]
"""

from __future__ import annotations

from collections.abc import Iterable

from hero_builder.core.config import get_settings
from hero_builder.core.exceptions import FeatureNestingError, FeatureTypeError
from hero_builder.core.logging import get_logger, hero_context
from hero_builder.models.entities import (
    Ancestry,
    Career,
    Complication,
    Culture,
    Hero,
    HeroClass,
    Item,
)
from hero_builder.models.enums import FeatureType
from hero_builder.models.features import (
    Domain,
    Feature,
    FeatureChoice,
    FeatureClassAbility,
    FeatureDomain,
    FeatureDomainFeature,
    FeatureKit,
    FeatureLanguageChoice,
    FeatureMultiple,
    FeaturePerk,
    FeaturesByLevel,
    FeatureSkillChoice,
    FeatureTitle,
    Kit,
    Title,
)


logger = get_logger(__name__)


# =============================================================================
# Flattening
# =============================================================================


def get_child_features(feature: Feature) -> list[Feature]:
    """Get the features a feature currently contributes beneath itself.

    Choice contributes its selected features, Kit and Title the features
    of their selected kits and titles, Multiple all of its features.
    Unselected options are never returned. Every other type is a leaf.
    """
    if isinstance(feature, FeatureChoice):
        return list(feature.data.selected)
    if isinstance(feature, FeatureKit):
        return [child for kit in feature.data.selected for child in kit.features]
    if isinstance(feature, FeatureMultiple):
        return list(feature.data.features)
    if isinstance(feature, FeatureTitle):
        return [child for title in feature.data.selected for child in title.features]
    return []


def flatten_features(
    features: Iterable[Feature],
    *,
    max_depth: int | None = None,
) -> list[Feature]:
    """Expand features into every feature the hero actually has.

    The walk is depth-first and pre-order: each feature is emitted before
    the features it contributes (see ``get_child_features``), and input
    order is preserved. A list without composite features comes back
    unchanged.

    Args:
        features: Declared features, in display order.
        max_depth: Deepest nesting to descend into; top-level features are
            at depth 0. Defaults to the ``feature.max_depth`` setting.

    Returns:
        The flattened feature list.

    Raises:
        FeatureNestingError: If a feature is nested inside itself or the
            nesting exceeds ``max_depth``.
    """
    limit = get_settings().feature.max_depth if max_depth is None else max_depth
    flattened: list[Feature] = []
    ancestors: set[int] = set()

    def visit(feature: Feature, depth: int) -> None:
        if id(feature) in ancestors:
            logger.warning("Feature nested inside itself", feature_id=feature.id, depth=depth)
            raise FeatureNestingError(
                "Feature is nested inside itself",
                feature_id=feature.id,
                depth=depth,
            )
        if depth > limit:
            logger.warning("Feature nesting too deep", feature_id=feature.id, depth=depth)
            raise FeatureNestingError(
                "Feature nesting exceeds the maximum depth",
                feature_id=feature.id,
                depth=depth,
                details={"max_depth": limit},
            )

        flattened.append(feature)
        ancestors.add(id(feature))
        for child in get_child_features(feature):
            visit(child, depth + 1)
        ancestors.discard(id(feature))

    declared = 0
    for feature in features:
        declared += 1
        visit(feature, 0)

    logger.debug("Features flattened", declared=declared, flattened=len(flattened))
    return flattened


# =============================================================================
# Source Aggregators
# =============================================================================


def _features_up_to_level(records: Iterable[FeaturesByLevel], level: int) -> list[Feature]:
    """Features of every record at or below ``level``, lowest level first."""
    features: list[Feature] = []
    for record in sorted(records, key=lambda r: r.level):
        if record.level <= level:
            features.extend(record.features)
    return features


def get_features_from_ancestry(ancestry: Ancestry) -> list[Feature]:
    return flatten_features(ancestry.features)


def get_features_from_culture(culture: Culture) -> list[Feature]:
    """Features from the culture's environment, organization and upbringing, in that order."""
    aspects = [culture.environment, culture.organization, culture.upbringing]
    return flatten_features(aspect for aspect in aspects if aspect is not None)


def get_features_from_career(career: Career) -> list[Feature]:
    return flatten_features(career.features)


def get_features_from_class(hero_class: HeroClass) -> list[Feature]:
    """Features the class grants at its current level.

    Class features up to the class level come first, then those of each
    selected subclass up to the same level. Unselected subclasses
    contribute nothing.
    """
    features = _features_up_to_level(hero_class.features_by_level, hero_class.level)
    for subclass in hero_class.subclasses:
        if subclass.selected:
            features.extend(_features_up_to_level(subclass.features_by_level, hero_class.level))
    return flatten_features(features)


def get_features_from_domain(domain: Domain, level: int) -> list[Feature]:
    """Features a domain grants up to ``level`` (optional features excluded)."""
    return flatten_features(_features_up_to_level(domain.features_by_level, level))


def get_features_from_complication(complication: Complication) -> list[Feature]:
    return flatten_features(complication.features)


def get_features_from_item(item: Item) -> list[Feature]:
    return flatten_features(item.features)


def get_features_from_kit(kit: Kit) -> list[Feature]:
    return flatten_features(kit.features)


def get_features_from_title(title: Title) -> list[Feature]:
    return flatten_features(title.features)


def get_features_from_hero(hero: Hero) -> list[Feature]:
    """Every feature a hero has.

    Sources are visited in a fixed order: ancestry, culture, class,
    career, complication, the hero's own features, then inventory items.
    """
    features: list[Feature] = []
    with hero_context(hero.id):
        if hero.ancestry is not None:
            features.extend(get_features_from_ancestry(hero.ancestry))
        if hero.culture is not None:
            features.extend(get_features_from_culture(hero.culture))
        if hero.hero_class is not None:
            features.extend(get_features_from_class(hero.hero_class))
        if hero.career is not None:
            features.extend(get_features_from_career(hero.career))
        if hero.complication is not None:
            features.extend(get_features_from_complication(hero.complication))
        features.extend(flatten_features(hero.features))
        for item in hero.state.inventory:
            features.extend(get_features_from_item(item))
    return features


# =============================================================================
# Choice Classification & Completion
# =============================================================================


# Choices satisfied by the number of entries in ``data.selected``
_COUNTED_CHOICES = (
    FeatureDomain,
    FeatureDomainFeature,
    FeatureKit,
    FeatureLanguageChoice,
    FeaturePerk,
    FeatureSkillChoice,
    FeatureTitle,
)


def is_choice(feature: Feature) -> bool:
    """Whether the feature asks the user to pick something.

    True for Choice, ClassAbility, Domain, DomainFeature, Kit,
    LanguageChoice, Perk, SkillChoice and Title.
    """
    return FeatureType(feature.type).is_choice


def is_chosen(feature: Feature) -> bool:
    """Whether enough selections have been made to satisfy the feature.

    Features that are not choices are always chosen. A Choice is
    satisfied when the summed ``value`` of its selected options reaches
    ``count``; a selected feature whose id no longer matches any option
    counts for nothing. Every other choice is satisfied when it has at
    least ``count`` selections. Having more than ``count`` is fine.
    """
    if isinstance(feature, FeatureChoice):
        total = 0
        for selected in feature.data.selected:
            option = next((o for o in feature.data.options if o.feature.id == selected.id), None)
            if option is not None:
                total += option.value
        return total >= feature.data.count
    if isinstance(feature, FeatureClassAbility):
        return len(feature.data.selected_ids) >= feature.data.count
    if isinstance(feature, _COUNTED_CHOICES):
        return len(feature.data.selected) >= feature.data.count
    return True


def get_unresolved_choices(features: Iterable[Feature]) -> list[Feature]:
    """The choices among ``features`` that still need selections, in order."""
    return [feature for feature in features if is_choice(feature) and not is_chosen(feature)]


# =============================================================================
# Feature Type Descriptor
# =============================================================================


def get_feature_type_description(feature_type: FeatureType | str) -> str:
    """Get a one-sentence explanation of a feature type.

    Args:
        feature_type: A FeatureType or its string value (e.g. ``"Kit"``).

    Returns:
        Human-readable description.

    Raises:
        FeatureTypeError: If the value is not a known feature type.
    """
    try:
        return FeatureType(feature_type).description
    except ValueError as exc:
        raise FeatureTypeError(
            f"Unknown feature type: {feature_type!r}",
            feature_type=str(feature_type),
        ) from exc


__all__ = [
    "get_child_features",
    "flatten_features",
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
