"""Ability models.

Abilities are granted by Ability features and listed on classes. They
carry no features of their own, so they sit below the feature model.
"""

from __future__ import annotations

from pydantic import Field

from hero_builder.models.components import CoreModel
from hero_builder.models.enums import (
    AbilityDistanceType,
    AbilityKeyword,
    AbilityUsage,
    Characteristic,
    PowerRollType,
)


class AbilityType(CoreModel):
    """How and when an ability is used.

    Attributes:
        usage: Action economy slot.
        free: Whether the usage is free (free maneuver, free triggered action).
        trigger: Trigger text for triggered actions.
        time: Free-form duration for abilities used outside combat.
    """

    usage: AbilityUsage = Field(default=AbilityUsage.ACTION)
    free: bool = Field(default=False)
    trigger: str = Field(default="")
    time: str = Field(default="")


class AbilityDistance(CoreModel):
    """One reach entry of an ability (e.g. ``Melee 1`` or ``3 cube within 10``)."""

    type: AbilityDistanceType
    value: int = Field(default=0, ge=0)
    value2: int = Field(default=0, ge=0)
    within: int = Field(default=0, ge=0)
    special: str = Field(default="")


class PowerRoll(CoreModel):
    """A three-tier roll and its outcomes."""

    type: PowerRollType = Field(default=PowerRollType.POWER_ROLL)
    characteristic: list[Characteristic] = Field(default_factory=list)
    bonus: int = Field(default=0)
    tier1: str = Field(description="Outcome on 11 or lower")
    tier2: str = Field(description="Outcome on 12-16")
    tier3: str = Field(description="Outcome on 17+")


class AbilitySpend(CoreModel):
    """Extra effect bought with heroic resource."""

    value: int = Field(default=0, ge=0)
    effect: str


class Ability(CoreModel):
    """A usable ability.

    Attributes:
        id: Identifier, unique within the declaring class or monster.
        cost: Heroic resource cost (0 for signature abilities).
        power_roll: Tiered roll, if the ability has one.
        spend: Optional resource spends.
        persistence: Costs to keep the effect active.
    """

    id: str
    name: str
    description: str = Field(default="")
    type: AbilityType = Field(default_factory=AbilityType)
    keywords: list[AbilityKeyword] = Field(default_factory=list)
    distance: list[AbilityDistance] = Field(default_factory=list)
    target: str = Field(default="")
    cost: int = Field(default=0, ge=0)
    pre_effect: str = Field(default="")
    power_roll: PowerRoll | None = Field(default=None)
    effect: str = Field(default="")
    strained: str = Field(default="")
    alternate_effects: list[str] = Field(default_factory=list)
    spend: list[AbilitySpend] = Field(default_factory=list)
    persistence: list[AbilitySpend] = Field(default_factory=list)

    @property
    def is_signature(self) -> bool:
        """Signature abilities cost nothing to use."""
        return self.cost == 0


__all__ = [
    "AbilityType",
    "AbilityDistance",
    "PowerRoll",
    "AbilitySpend",
    "Ability",
]
