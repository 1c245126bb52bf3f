"""Enumeration types for the hero builder engine.

This module defines the enumerations used by features, abilities and
content entities. String values are the ones written to saved hero and sourcebook
documents, so persisted data validates unchanged.
"""

from __future__ import annotations

from enum import StrEnum


class FeatureType(StrEnum):
    """Discriminator for the closed set of feature variants.

    Every member must have an entry in ``description`` and be handled by
    the dispatch in ``hero_builder.engine.features``.
    """

    TEXT = "Text"
    ABILITY = "Ability"
    ABILITY_COST = "AbilityCost"
    BONUS = "Bonus"
    CHOICE = "Choice"
    CLASS_ABILITY = "ClassAbility"
    DAMAGE_MODIFIER = "DamageModifier"
    DOMAIN = "Domain"
    DOMAIN_FEATURE = "DomainFeature"
    KIT = "Kit"
    KIT_TYPE = "KitType"
    LANGUAGE = "Language"
    LANGUAGE_CHOICE = "LanguageChoice"
    MALICE = "Malice"
    MULTIPLE = "Multiple"
    PERK = "Perk"
    SIZE = "Size"
    SKILL = "Skill"
    SKILL_CHOICE = "SkillChoice"
    SPEED = "Speed"
    TITLE = "Title"

    @property
    def description(self) -> str:
        """Get a one-sentence explanation of what this feature type does.

        Returns:
            Human-readable description of the feature type.
        """
        descriptions = {
            FeatureType.TEXT: "This feature has no special properties, just a text description.",
            FeatureType.ABILITY: "This feature grants you an ability.",
            FeatureType.ABILITY_COST: "This feature modifies the cost to use an ability.",
            FeatureType.BONUS: "This feature modifies a statistic.",
            FeatureType.CHOICE: "This feature allows you to choose from a collection of features.",
            FeatureType.CLASS_ABILITY: "This feature allows you to choose an ability from your class.",
            FeatureType.DAMAGE_MODIFIER: "This feature grants you an immunity or a weakness.",
            FeatureType.DOMAIN: "This feature allows you to choose a domain.",
            FeatureType.DOMAIN_FEATURE: "This feature allows you to choose a feature from your domain.",
            FeatureType.KIT: "This feature allows you to choose a kit.",
            FeatureType.KIT_TYPE: "This feature changes the types of kit you can select.",
            FeatureType.LANGUAGE: "This feature grants you a language.",
            FeatureType.LANGUAGE_CHOICE: "This feature allows you to choose a language.",
            FeatureType.MALICE: "This feature grants you a malice effect.",
            FeatureType.MULTIPLE: "This feature grants you a collection of features.",
            FeatureType.PERK: "This feature allows you to choose a perk.",
            FeatureType.SIZE: "This feature sets your size.",
            FeatureType.SKILL: "This feature grants you a skill.",
            FeatureType.SKILL_CHOICE: "This feature allows you to choose a skill.",
            FeatureType.SPEED: "This feature sets your base speed.",
            FeatureType.TITLE: "This feature allows you to choose a title.",
        }
        return descriptions[self]

    @property
    def is_choice(self) -> bool:
        """Whether features of this type ask the user to pick something.

        Multiple is not a choice: it bundles its children unconditionally.
        """
        return self in {
            FeatureType.CHOICE,
            FeatureType.CLASS_ABILITY,
            FeatureType.DOMAIN,
            FeatureType.DOMAIN_FEATURE,
            FeatureType.KIT,
            FeatureType.LANGUAGE_CHOICE,
            FeatureType.PERK,
            FeatureType.SKILL_CHOICE,
            FeatureType.TITLE,
        }


class FeatureField(StrEnum):
    """Hero statistics a Bonus feature can modify."""

    DISENGAGE = "Disengage"
    PROJECT_POINTS = "Project Points"
    RECOVERIES = "Recoveries"
    RECOVERY_VALUE = "Recovery Value"
    RENOWN = "Renown"
    SAVE = "Save"
    SPEED = "Speed"
    STABILITY = "Stability"
    STAMINA = "Stamina"
    WEALTH = "Wealth"


class Characteristic(StrEnum):
    """The five hero characteristics."""

    MIGHT = "Might"
    AGILITY = "Agility"
    REASON = "Reason"
    INTUITION = "Intuition"
    PRESENCE = "Presence"


class KitType(StrEnum):
    """Families of kit a hero may be allowed to pick from."""

    STANDARD = "Standard"
    STORMWIGHT = "Stormwight"


class PerkList(StrEnum):
    """Lists that perks are drawn from."""

    CRAFTING = "Crafting"
    EXPLORATION = "Exploration"
    INTERPERSONAL = "Interpersonal"
    INTRIGUE = "Intrigue"
    LORE = "Lore"
    SUPERNATURAL = "Supernatural"


class SkillList(StrEnum):
    """Lists that skills are grouped into."""

    CRAFTING = "Crafting"
    EXPLORATION = "Exploration"
    INTERPERSONAL = "Interpersonal"
    INTRIGUE = "Intrigue"
    LORE = "Lore"


class AbilityKeyword(StrEnum):
    """Keywords that tag abilities."""

    ANIMAL = "Animal"
    ANIMAPATHY = "Animapathy"
    AREA = "Area"
    CHARGE = "Charge"
    CHRONOPATHY = "Chronopathy"
    CRYOKINESIS = "Cryokinesis"
    EARTH = "Earth"
    FIRE = "Fire"
    GREEN = "Green"
    MAGIC = "Magic"
    MELEE = "Melee"
    METAMORPHOSIS = "Metamorphosis"
    PSIONIC = "Psionic"
    PYROKINESIS = "Pyrokinesis"
    RANGED = "Ranged"
    RESOPATHY = "Resopathy"
    ROT = "Rot"
    STRIKE = "Strike"
    TELEKINESIS = "Telekinesis"
    TELEPATHY = "Telepathy"
    VOID = "Void"
    WEAPON = "Weapon"


class AbilityUsage(StrEnum):
    """When an ability can be used."""

    ACTION = "Action"
    MANEUVER = "Maneuver"
    MOVE = "Move"
    TRIGGER = "Triggered Action"
    VILLAIN_ACTION = "Villain Action"
    NO_ACTION = "No Action"
    OTHER = "Other"


class AbilityDistanceType(StrEnum):
    """Shapes of an ability's reach."""

    SELF = "Self"
    MELEE = "Melee"
    RANGED = "Ranged"
    AURA = "Aura"
    BURST = "Burst"
    CUBE = "Cube"
    LINE = "Line"
    WALL = "Wall"
    SPECIAL = "Special"


class PowerRollType(StrEnum):
    """Kinds of tiered roll."""

    POWER_ROLL = "Power Roll"
    TEST = "Test"
    RESISTANCE_ROLL = "Resistance Roll"


class DamageModifierType(StrEnum):
    """Whether a damage modifier reduces or increases damage taken."""

    IMMUNITY = "Immunity"
    WEAKNESS = "Weakness"


class MonsterRoleType(StrEnum):
    """Combat roles a monster can fill."""

    AMBUSHER = "Ambusher"
    ARTILLERY = "Artillery"
    BRUTE = "Brute"
    CONTROLLER = "Controller"
    DEFENDER = "Defender"
    HARRIER = "Harrier"
    HEXER = "Hexer"
    LEADER = "Leader"
    MOUNT = "Mount"
    SOLO = "Solo"
    SUPPORT = "Support"


__all__ = [
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
]
