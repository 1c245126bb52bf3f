"""Entity models: the sources a hero draws features from.

Entities:
    Ancestry, Culture, Career, HeroClass, SubClass, Complication, Item:
        Feature sources read by the aggregators.
    Hero: A hero and the sources they have picked.
    Sourcebook: A named collection of content (official or homebrew).

Entities are created by ``hero_builder.engine.factory`` with empty
feature lists and edited by authoring flows outside this package; the
feature engine only reads them.
"""

from __future__ import annotations

from pydantic import Field

from hero_builder.models.abilities import Ability
from hero_builder.models.components import CharacteristicValue, CoreModel, Element
from hero_builder.models.enums import Characteristic, SkillList
from hero_builder.models.features import (
    Domain,
    Feature,
    FeaturesByLevel,
    FeaturesByLevelWithOptions,
    Kit,
    Perk,
    Title,
)
from hero_builder.models.monsters import MonsterGroup


class Ancestry(CoreModel):
    """A hero's ancestry."""

    id: str
    name: str = Field(default="")
    description: str = Field(default="")
    features: list[Feature] = Field(default_factory=list)


class Culture(CoreModel):
    """A hero's culture, made of three optional aspects.

    Attributes:
        languages: Languages the culture speaks.
        environment: Environment aspect, if chosen.
        organization: Organization aspect, if chosen.
        upbringing: Upbringing aspect, if chosen.
    """

    id: str
    name: str = Field(default="")
    description: str = Field(default="")
    languages: list[str] = Field(default_factory=list)
    environment: Feature | None = Field(default=None)
    organization: Feature | None = Field(default=None)
    upbringing: Feature | None = Field(default=None)


class IncitingIncidents(CoreModel):
    """Inciting incidents offered by a career and the one picked."""

    options: list[Element] = Field(default_factory=list)
    selected_id: str | None = Field(default=None, alias="selectedID")


class Career(CoreModel):
    """A hero's career before adventuring."""

    id: str
    name: str = Field(default="")
    description: str = Field(default="")
    features: list[Feature] = Field(default_factory=list)
    inciting_incidents: IncitingIncidents = Field(default_factory=IncitingIncidents)


class SubClass(CoreModel):
    """A subclass; only contributes features while ``selected``."""

    id: str
    name: str = Field(default="")
    description: str = Field(default="")
    features_by_level: list[FeaturesByLevelWithOptions] = Field(default_factory=list)
    selected: bool = Field(default=False)


class HeroClass(CoreModel):
    """A hero class at the hero's current level.

    Attributes:
        heroic_resource: Name of the class's heroic resource.
        subclass_name: What the class calls its subclasses.
        subclass_count: How many subclasses may be selected.
        features_by_level: Class features keyed by level.
        level: The hero's current level in this class.
    """

    id: str
    name: str = Field(default="")
    description: str = Field(default="")
    heroic_resource: str = Field(default="")
    subclass_name: str = Field(default="")
    subclass_count: int = Field(default=1, ge=0)
    primary_characteristics: list[Characteristic] = Field(default_factory=list)
    features_by_level: list[FeaturesByLevel] = Field(default_factory=list)
    abilities: list[Ability] = Field(default_factory=list)
    subclasses: list[SubClass] = Field(default_factory=list)
    level: int = Field(default=1, ge=1, le=10)
    characteristics: list[CharacteristicValue] = Field(default_factory=list)


class Complication(CoreModel):
    """A complication: a benefit paired with a drawback."""

    id: str
    name: str = Field(default="")
    description: str = Field(default="")
    features: list[Feature] = Field(default_factory=list)


class Item(CoreModel):
    """An item, possibly granting features while carried."""

    id: str
    name: str = Field(default="")
    description: str = Field(default="")
    features: list[Feature] = Field(default_factory=list)
    count: int = Field(default=1, ge=0)


class HeroState(CoreModel):
    """Play-time counters of a hero."""

    stamina_damage: int = Field(default=0, ge=0)
    recoveries_used: int = Field(default=0, ge=0)
    surges: int = Field(default=0, ge=0)
    victories: int = Field(default=0, ge=0)
    xp: int = Field(default=0, ge=0)
    heroic_resource: int = Field(default=0)
    hero_tokens: int = Field(default=0, ge=0)
    renown: int = Field(default=0)
    wealth: int = Field(default=1)
    project_points: int = Field(default=0, ge=0)
    conditions: list[str] = Field(default_factory=list)
    inventory: list[Item] = Field(default_factory=list)


class Hero(CoreModel):
    """A hero and the feature sources they have picked.

    Attributes:
        setting_ids: Sourcebooks the hero draws content from.
        hero_class: The hero's class (``class`` on the wire).
        features: Features the hero has regardless of their picks.
    """

    id: str
    name: str = Field(default="")
    setting_ids: list[str] = Field(default_factory=list, alias="settingIDs")
    ancestry: Ancestry | None = Field(default=None)
    culture: Culture | None = Field(default=None)
    hero_class: HeroClass | None = Field(default=None, alias="class")
    career: Career | None = Field(default=None)
    complication: Complication | None = Field(default=None)
    features: list[Feature] = Field(default_factory=list)
    state: HeroState = Field(default_factory=HeroState)


class SkillDefinition(CoreModel):
    """A skill defined by a sourcebook."""

    name: str
    description: str = Field(default="")
    skill_list: SkillList = Field(default=SkillList.CRAFTING, alias="list")


class LanguageDefinition(CoreModel):
    """A language defined by a sourcebook."""

    name: str
    description: str = Field(default="")


class Sourcebook(CoreModel):
    """A named collection of content entities.

    Attributes:
        is_homebrew: False for official content, True for user-authored.
    """

    id: str
    name: str = Field(default="")
    description: str = Field(default="")
    is_homebrew: bool = Field(default=True)
    ancestries: list[Ancestry] = Field(default_factory=list)
    cultures: list[Culture] = Field(default_factory=list)
    careers: list[Career] = Field(default_factory=list)
    classes: list[HeroClass] = Field(default_factory=list)
    domains: list[Domain] = Field(default_factory=list)
    kits: list[Kit] = Field(default_factory=list)
    complications: list[Complication] = Field(default_factory=list)
    perks: list[Perk] = Field(default_factory=list)
    titles: list[Title] = Field(default_factory=list)
    items: list[Item] = Field(default_factory=list)
    monster_groups: list[MonsterGroup] = Field(default_factory=list)
    skills: list[SkillDefinition] = Field(default_factory=list)
    languages: list[LanguageDefinition] = Field(default_factory=list)


__all__ = [
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
