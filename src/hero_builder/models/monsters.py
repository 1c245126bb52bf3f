"""Monster and encounter models.

Monsters reuse the feature model (abilities, malice, text traits);
encounters reference monsters by identifier only.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator

from hero_builder.core.constants import MONSTER_EV_RANGE, MONSTER_LEVEL_RANGE
from hero_builder.models.components import CharacteristicValue, CoreModel, Element, MonsterSpeed, Size
from hero_builder.models.enums import MonsterRoleType
from hero_builder.models.features import Feature


class MonsterRole(CoreModel):
    """A monster's combat role."""

    type: MonsterRoleType = Field(default=MonsterRoleType.AMBUSHER)
    is_minion: bool = Field(default=False)


class Monster(CoreModel):
    """A single monster stat block."""

    id: str
    name: str = Field(default="")
    description: str = Field(default="")
    level: int = Field(default=1, ge=1)
    role: MonsterRole = Field(default_factory=MonsterRole)
    keywords: list[str] = Field(default_factory=list)
    encounter_value: int = Field(default=0, ge=0)
    size: Size = Field(default_factory=Size)
    speed: MonsterSpeed = Field(default_factory=MonsterSpeed)
    stamina: int = Field(default=5, ge=0)
    stability: int = Field(default=0)
    free_strike_damage: int = Field(default=2, ge=0)
    characteristics: list[CharacteristicValue] = Field(default_factory=list)
    features: list[Feature] = Field(default_factory=list)


class MonsterGroup(CoreModel):
    """A family of monsters sharing lore and malice features."""

    id: str
    name: str = Field(default="")
    description: str = Field(default="")
    information: list[Element] = Field(default_factory=list)
    malice: list[Feature] = Field(default_factory=list)
    monsters: list[Monster] = Field(default_factory=list)


class MonsterFilter(CoreModel):
    """Criteria for browsing monsters.

    Attributes:
        is_minion: Restrict to minions ("yes"), non-minions ("no") or neither.
        level: Inclusive (min, max) level range.
        ev: Inclusive (min, max) encounter value range.
    """

    name: str = Field(default="")
    roles: list[MonsterRoleType] = Field(default_factory=list)
    is_minion: Literal["any", "yes", "no"] = Field(default="any")
    level: tuple[int, int] = Field(default=MONSTER_LEVEL_RANGE)
    ev: tuple[int, int] = Field(default=MONSTER_EV_RANGE)

    @model_validator(mode="after")
    def validate_ranges(self) -> MonsterFilter:
        """Ensure both ranges are ordered low to high."""
        for name in ("level", "ev"):
            low, high = getattr(self, name)
            if low > high:
                raise ValueError(f"{name} range must be ordered low to high, got ({low}, {high})")
        return self


class EncounterSlot(CoreModel):
    """A number of copies of one monster in an encounter group."""

    id: str
    monster_id: str = Field(alias="monsterID")
    count: int = Field(default=1, ge=1)


class EncounterGroup(CoreModel):
    """Monsters that act together in an encounter."""

    id: str
    slots: list[EncounterSlot] = Field(default_factory=list)


class Encounter(CoreModel):
    """A prepared combat encounter."""

    id: str
    name: str = Field(default="")
    description: str = Field(default="")
    groups: list[EncounterGroup] = Field(default_factory=list)


class Playbook(CoreModel):
    """A director's collection of prepared encounters."""

    encounters: list[Encounter] = Field(default_factory=list)


__all__ = [
    "MonsterRole",
    "Monster",
    "MonsterGroup",
    "MonsterFilter",
    "EncounterSlot",
    "EncounterGroup",
    "Encounter",
    "Playbook",
]
