"""Pydantic V2 models for the hero builder engine.

Submodules:
    enums: Enumeration types (FeatureType, KitType, PerkList, etc.)
    components: Shared base model and small value components
    abilities: Abilities, power rolls and distances
    features: Feature variants and the ``Feature`` discriminated union
    entities: Feature sources (ancestry, class, career...) and heroes
    monsters: Monsters and encounters

Example:
    >>> from hero_builder.models import FeatureSkill, FeatureSkillData
    >>> feature = FeatureSkill(id="keen", name="Keen", data=FeatureSkillData(skill="Search"))
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from hero_builder.models.enums import (
    AbilityDistanceType,
    AbilityKeyword,
    AbilityUsage,
    Characteristic,
    DamageModifierType,
    FeatureField,
    FeatureType,
    KitType,
    MonsterRoleType,
    PerkList,
    PowerRollType,
    SkillList,
)

# =============================================================================
# Components
# =============================================================================
from hero_builder.models.components import (
    CharacteristicValue,
    CoreModel,
    DamageModifier,
    Element,
    KitDamageBonus,
    MonsterSpeed,
    Size,
)

# =============================================================================
# Abilities
# =============================================================================
from hero_builder.models.abilities import (
    Ability,
    AbilityDistance,
    AbilitySpend,
    AbilityType,
    PowerRoll,
)

# =============================================================================
# Features
# =============================================================================
from hero_builder.models.features import (
    Domain,
    Feature,
    FeatureAbility,
    FeatureAbilityCost,
    FeatureAbilityCostData,
    FeatureAbilityData,
    FeatureBase,
    FeatureBonus,
    FeatureBonusData,
    FeatureChoice,
    FeatureChoiceData,
    FeatureClassAbility,
    FeatureClassAbilityData,
    FeatureDamageModifier,
    FeatureDamageModifierData,
    FeatureDomain,
    FeatureDomainData,
    FeatureDomainFeature,
    FeatureDomainFeatureData,
    FeatureKit,
    FeatureKitData,
    FeatureKitType,
    FeatureKitTypeData,
    FeatureLanguage,
    FeatureLanguageChoice,
    FeatureLanguageChoiceData,
    FeatureLanguageData,
    FeatureMalice,
    FeatureMaliceData,
    FeatureMultiple,
    FeatureMultipleData,
    FeatureOption,
    FeaturePerk,
    FeaturePerkData,
    FeaturesByLevel,
    FeaturesByLevelWithOptions,
    FeatureSize,
    FeatureSizeData,
    FeatureSkill,
    FeatureSkillChoice,
    FeatureSkillChoiceData,
    FeatureSkillData,
    FeatureSpeed,
    FeatureSpeedData,
    FeatureText,
    FeatureTitle,
    FeatureTitleData,
    Kit,
    Perk,
    Title,
    parse_feature,
)

# =============================================================================
# Monsters
# =============================================================================
from hero_builder.models.monsters import (
    Encounter,
    EncounterGroup,
    EncounterSlot,
    Monster,
    MonsterFilter,
    MonsterGroup,
    MonsterRole,
    Playbook,
)

# =============================================================================
# Entities
# =============================================================================
from hero_builder.models.entities import (
    Ancestry,
    Career,
    Complication,
    Culture,
    Hero,
    HeroClass,
    HeroState,
    IncitingIncidents,
    Item,
    LanguageDefinition,
    SkillDefinition,
    Sourcebook,
    SubClass,
)


__all__ = [
    # === Enumerations ===
    "FeatureType",
    "FeatureField",
    "Characteristic",
    "KitType",
    "PerkList",
    "SkillList",
    "AbilityKeyword",
    "AbilityUsage",
    "AbilityDistanceType",
    "PowerRollType",
    "DamageModifierType",
    "MonsterRoleType",
    # === Components ===
    "CoreModel",
    "Element",
    "Size",
    "MonsterSpeed",
    "CharacteristicValue",
    "DamageModifier",
    "KitDamageBonus",
    # === Abilities ===
    "AbilityType",
    "AbilityDistance",
    "PowerRoll",
    "AbilitySpend",
    "Ability",
    # === Features ===
    "FeaturesByLevel",
    "FeaturesByLevelWithOptions",
    "Kit",
    "Title",
    "Domain",
    "Perk",
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
    "Feature",
    "parse_feature",
    # === Monsters ===
    "MonsterRole",
    "Monster",
    "MonsterGroup",
    "MonsterFilter",
    "EncounterSlot",
    "EncounterGroup",
    "Encounter",
    "Playbook",
    # === Entities ===
    "Ancestry",
    "Culture",
    "IncitingIncidents",
    "Career",
    "SubClass",
    "HeroClass",
    "Complication",
    "Item",
    "HeroState",
    "Hero",
    "SkillDefinition",
    "LanguageDefinition",
    "Sourcebook",
]
