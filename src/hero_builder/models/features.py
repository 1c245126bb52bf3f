"""Feature variant models.

A feature is the atomic unit of hero capability. Each variant is its own
model carrying a ``type`` literal and a ``data`` payload, and ``Feature``
is the discriminated union of all of them. Pydantic rejects any document
whose ``data`` does not match its ``type``.

Content that a feature can select and that owns further features (kits,
titles, domains) lives in this module too, because the two reference
each other.

Variants:
    Leaf: Text, Ability, AbilityCost, Bonus, DamageModifier, KitType,
        Language, Malice, Size, Skill, Speed.
    Choice: Choice, ClassAbility, Domain, DomainFeature, Kit,
        LanguageChoice, Perk, SkillChoice, Title.
    Container: Multiple.

Example:
    >>> feature = parse_feature({"id": "f1", "name": "Keen", "type": "Skill",
    ...                          "data": {"skill": "Search"}})
    >>> isinstance(feature, FeatureSkill)
    True
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import Field, TypeAdapter

from hero_builder.models.abilities import Ability
from hero_builder.models.components import CoreModel, DamageModifier, KitDamageBonus, Size
from hero_builder.models.enums import (
    AbilityKeyword,
    FeatureField,
    FeatureType,
    KitType,
    PerkList,
    SkillList,
)


# =============================================================================
# Selectable Content
# =============================================================================


class FeaturesByLevel(CoreModel):
    """The features granted at one level."""

    level: int = Field(ge=1, description="Level at which the features are granted")
    features: list[Feature] = Field(default_factory=list)


class FeaturesByLevelWithOptions(FeaturesByLevel):
    """Level features plus optional features offered at that level."""

    optional_features: list[Feature] = Field(default_factory=list)


class Kit(CoreModel):
    """Equipment and fighting style package.

    Attributes:
        type: Kit family; KitType features widen which families are allowed.
        melee_damage: Melee damage bonus per tier, if any.
        ranged_damage: Ranged damage bonus per tier, if any.
        features: Features the kit grants once selected.
    """

    id: str
    name: str = Field(default="")
    description: str = Field(default="")
    type: KitType = Field(default=KitType.STANDARD)
    armor: list[str] = Field(default_factory=list)
    weapon: list[str] = Field(default_factory=list)
    stamina: int = Field(default=0)
    speed: int = Field(default=0)
    stability: int = Field(default=0)
    melee_damage: KitDamageBonus | None = Field(default=None)
    ranged_damage: KitDamageBonus | None = Field(default=None)
    melee_distance: int = Field(default=0)
    ranged_distance: int = Field(default=0)
    disengage: int = Field(default=0)
    features: list[Feature] = Field(default_factory=list)


class Title(CoreModel):
    """An honorific earned in play that grants features."""

    id: str
    name: str = Field(default="")
    description: str = Field(default="")
    echelon: int = Field(default=1, ge=1, le=4, description="Echelon at which the title becomes available")
    prerequisites: str = Field(default="")
    features: list[Feature] = Field(default_factory=list)


class Domain(CoreModel):
    """A divine domain, with features gated by level."""

    id: str
    name: str = Field(default="")
    description: str = Field(default="")
    features_by_level: list[FeaturesByLevelWithOptions] = Field(default_factory=list)


# =============================================================================
# Feature Payloads
# =============================================================================


class FeatureOption(CoreModel):
    """One option of a Choice feature.

    ``value`` is how much picking this option counts toward the choice's
    ``count``; some options count double.
    """

    feature: Feature
    value: int = Field(default=1, ge=0)


class FeatureAbilityData(CoreModel):
    ability: Ability


class FeatureAbilityCostData(CoreModel):
    keywords: list[AbilityKeyword] = Field(default_factory=list)
    modifier: int = Field(default=0)


class FeatureBonusData(CoreModel):
    field: FeatureField
    value: int = Field(default=0)
    value_per_level: int = Field(default=0)
    value_per_echelon: int = Field(default=0)


class FeatureChoiceData(CoreModel):
    options: list[FeatureOption] = Field(default_factory=list)
    count: int = Field(default=1, ge=0)
    selected: list[Feature] = Field(default_factory=list)


class FeatureClassAbilityData(CoreModel):
    cost: int = Field(default=0, ge=0, description="Cost of the abilities on offer; 0 means signature")
    count: int = Field(default=1, ge=0)
    selected_ids: list[str] = Field(default_factory=list, alias="selectedIDs")


class FeatureDamageModifierData(CoreModel):
    modifiers: list[DamageModifier] = Field(default_factory=list)


class FeatureDomainData(CoreModel):
    count: int = Field(default=1, ge=0)
    selected: list[Domain] = Field(default_factory=list)


class FeatureDomainFeatureData(CoreModel):
    level: int = Field(default=1, ge=1)
    count: int = Field(default=1, ge=0)
    selected: list[Feature] = Field(default_factory=list)


class FeatureKitData(CoreModel):
    types: list[KitType] = Field(default_factory=list)
    count: int = Field(default=1, ge=0)
    selected: list[Kit] = Field(default_factory=list)


class FeatureKitTypeData(CoreModel):
    types: list[KitType] = Field(default_factory=list)


class FeatureLanguageData(CoreModel):
    language: str


class FeatureLanguageChoiceData(CoreModel):
    options: list[str] = Field(default_factory=list)
    count: int = Field(default=1, ge=0)
    selected: list[str] = Field(default_factory=list)


class FeatureMaliceData(CoreModel):
    cost: int = Field(default=0, ge=0)


class FeatureMultipleData(CoreModel):
    features: list[Feature] = Field(default_factory=list)


class FeaturePerkData(CoreModel):
    lists: list[PerkList] = Field(default_factory=lambda: list(PerkList))
    count: int = Field(default=1, ge=0)
    selected: list[Perk] = Field(default_factory=list)


class FeatureSizeData(CoreModel):
    size: Size


class FeatureSkillData(CoreModel):
    skill: str


class FeatureSkillChoiceData(CoreModel):
    options: list[str] = Field(default_factory=list)
    list_options: list[SkillList] = Field(default_factory=list)
    count: int = Field(default=1, ge=0)
    selected: list[str] = Field(default_factory=list)


class FeatureSpeedData(CoreModel):
    speed: int = Field(ge=0)


class FeatureTitleData(CoreModel):
    count: int = Field(default=1, ge=0)
    selected: list[Title] = Field(default_factory=list)


# =============================================================================
# Feature Variants
# =============================================================================


class FeatureBase(CoreModel):
    """Fields shared by every feature variant.

    Attributes:
        id: Stable identifier, unique within the declaring entity. Used to
            match a feature with its selection state across edits; not
            globally unique.
        name: Display name.
        description: Display text, often synthesized by the factory.
    """

    id: str
    name: str = Field(default="")
    description: str = Field(default="")


class FeatureText(FeatureBase):
    type: Literal[FeatureType.TEXT] = FeatureType.TEXT
    data: None = None


class Perk(FeatureText):
    """A perk: a text feature filed under one of the perk lists."""

    perk_list: PerkList = Field(default=PerkList.CRAFTING, alias="list")


class FeatureAbility(FeatureBase):
    type: Literal[FeatureType.ABILITY] = FeatureType.ABILITY
    data: FeatureAbilityData


class FeatureAbilityCost(FeatureBase):
    type: Literal[FeatureType.ABILITY_COST] = FeatureType.ABILITY_COST
    data: FeatureAbilityCostData


class FeatureBonus(FeatureBase):
    type: Literal[FeatureType.BONUS] = FeatureType.BONUS
    data: FeatureBonusData


class FeatureChoice(FeatureBase):
    type: Literal[FeatureType.CHOICE] = FeatureType.CHOICE
    data: FeatureChoiceData


class FeatureClassAbility(FeatureBase):
    type: Literal[FeatureType.CLASS_ABILITY] = FeatureType.CLASS_ABILITY
    data: FeatureClassAbilityData


class FeatureDamageModifier(FeatureBase):
    type: Literal[FeatureType.DAMAGE_MODIFIER] = FeatureType.DAMAGE_MODIFIER
    data: FeatureDamageModifierData


class FeatureDomain(FeatureBase):
    type: Literal[FeatureType.DOMAIN] = FeatureType.DOMAIN
    data: FeatureDomainData


class FeatureDomainFeature(FeatureBase):
    type: Literal[FeatureType.DOMAIN_FEATURE] = FeatureType.DOMAIN_FEATURE
    data: FeatureDomainFeatureData


class FeatureKit(FeatureBase):
    type: Literal[FeatureType.KIT] = FeatureType.KIT
    data: FeatureKitData


class FeatureKitType(FeatureBase):
    type: Literal[FeatureType.KIT_TYPE] = FeatureType.KIT_TYPE
    data: FeatureKitTypeData


class FeatureLanguage(FeatureBase):
    type: Literal[FeatureType.LANGUAGE] = FeatureType.LANGUAGE
    data: FeatureLanguageData


class FeatureLanguageChoice(FeatureBase):
    type: Literal[FeatureType.LANGUAGE_CHOICE] = FeatureType.LANGUAGE_CHOICE
    data: FeatureLanguageChoiceData


class FeatureMalice(FeatureBase):
    type: Literal[FeatureType.MALICE] = FeatureType.MALICE
    data: FeatureMaliceData


class FeatureMultiple(FeatureBase):
    type: Literal[FeatureType.MULTIPLE] = FeatureType.MULTIPLE
    data: FeatureMultipleData


class FeaturePerk(FeatureBase):
    type: Literal[FeatureType.PERK] = FeatureType.PERK
    data: FeaturePerkData


class FeatureSize(FeatureBase):
    type: Literal[FeatureType.SIZE] = FeatureType.SIZE
    data: FeatureSizeData


class FeatureSkill(FeatureBase):
    type: Literal[FeatureType.SKILL] = FeatureType.SKILL
    data: FeatureSkillData


class FeatureSkillChoice(FeatureBase):
    type: Literal[FeatureType.SKILL_CHOICE] = FeatureType.SKILL_CHOICE
    data: FeatureSkillChoiceData


class FeatureSpeed(FeatureBase):
    type: Literal[FeatureType.SPEED] = FeatureType.SPEED
    data: FeatureSpeedData


class FeatureTitle(FeatureBase):
    type: Literal[FeatureType.TITLE] = FeatureType.TITLE
    data: FeatureTitleData


# =============================================================================
# Discriminated Union: Feature
# =============================================================================

Feature = Annotated[
    FeatureText
    | FeatureAbility
    | FeatureAbilityCost
    | FeatureBonus
    | FeatureChoice
    | FeatureClassAbility
    | FeatureDamageModifier
    | FeatureDomain
    | FeatureDomainFeature
    | FeatureKit
    | FeatureKitType
    | FeatureLanguage
    | FeatureLanguageChoice
    | FeatureMalice
    | FeatureMultiple
    | FeaturePerk
    | FeatureSize
    | FeatureSkill
    | FeatureSkillChoice
    | FeatureSpeed
    | FeatureTitle,
    Field(
        discriminator="type",
        description="A hero capability (one of the FeatureType variants)",
    ),
]
"""Discriminated union of all feature variants, keyed on ``type``."""


# Models that refer to Feature (or Perk) before it existed
for _model in (
    FeaturesByLevel,
    FeaturesByLevelWithOptions,
    Kit,
    Title,
    Domain,
    FeatureOption,
    FeatureChoiceData,
    FeatureDomainData,
    FeatureDomainFeatureData,
    FeatureKitData,
    FeatureMultipleData,
    FeaturePerkData,
    FeatureTitleData,
    FeatureChoice,
    FeatureDomain,
    FeatureDomainFeature,
    FeatureKit,
    FeatureMultiple,
    FeaturePerk,
    FeatureTitle,
):
    _model.model_rebuild()
del _model


_feature_adapter: TypeAdapter[Feature] = TypeAdapter(Feature)


def parse_feature(data: Any) -> Feature:
    """Validate a feature document (a dict, as persisted) into its variant model.

    Args:
        data: Feature document using either field names or camelCase aliases.

    Returns:
        The feature as the model matching its ``type``.

    Raises:
        pydantic.ValidationError: If ``type`` is unknown or ``data`` does not fit it.
    """
    return _feature_adapter.validate_python(data)


__all__ = [
    # Content
    "FeaturesByLevel",
    "FeaturesByLevelWithOptions",
    "Kit",
    "Title",
    "Domain",
    "Perk",
    # Payloads
    "FeatureOption",
    "FeatureAbilityData",
    "FeatureAbilityCostData",
    "FeatureBonusData",
    "FeatureChoiceData",
    "FeatureClassAbilityData",
    "FeatureDamageModifierData",
    "FeatureDomainData",
    "FeatureDomainFeatureData",
    "FeatureKitData",
    "FeatureKitTypeData",
    "FeatureLanguageData",
    "FeatureLanguageChoiceData",
    "FeatureMaliceData",
    "FeatureMultipleData",
    "FeaturePerkData",
    "FeatureSizeData",
    "FeatureSkillData",
    "FeatureSkillChoiceData",
    "FeatureSpeedData",
    "FeatureTitleData",
    # Variants
    "FeatureBase",
    "FeatureText",
    "FeatureAbility",
    "FeatureAbilityCost",
    "FeatureBonus",
    "FeatureChoice",
    "FeatureClassAbility",
    "FeatureDamageModifier",
    "FeatureDomain",
    "FeatureDomainFeature",
    "FeatureKit",
    "FeatureKitType",
    "FeatureLanguage",
    "FeatureLanguageChoice",
    "FeatureMalice",
    "FeatureMultiple",
    "FeaturePerk",
    "FeatureSize",
    "FeatureSkill",
    "FeatureSkillChoice",
    "FeatureSpeed",
    "FeatureTitle",
    # Union
    "Feature",
    "parse_feature",
]
