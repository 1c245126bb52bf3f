"""Shared model base and small value components.

Every model in the package derives from ``CoreModel``. Field names are
snake_case in Python and camelCase on the wire, so saved hero and
sourcebook documents (``featuresByLevel``, ``selectedIDs``...) can be
validated directly.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from hero_builder.models.enums import Characteristic, DamageModifierType


# =============================================================================
# Base Model
# =============================================================================


class CoreModel(BaseModel):
    """Base class for all hero builder models.

    Models are plain data containers. They are mutated in place by the
    selection UI, so assignment is validated.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


# =============================================================================
# Value Components
# =============================================================================


class Element(CoreModel):
    """A named piece of descriptive content (inciting incident, lore entry)."""

    id: str = Field(description="Identifier of the element")
    name: str = Field(default="", description="Display name")
    description: str = Field(default="", description="Display text")


class Size(CoreModel):
    """Creature size, e.g. ``1M`` or ``2``."""

    value: int = Field(default=1, ge=0, description="Size in squares")
    mod: str = Field(default="", description="Size modifier (T, S, M, L)")


class MonsterSpeed(CoreModel):
    """Movement speed with optional movement modes."""

    value: int = Field(default=5, ge=0, description="Speed in squares")
    modes: str = Field(default="", description="Movement modes (fly, climb...)")


class CharacteristicValue(CoreModel):
    """The score in one characteristic."""

    characteristic: Characteristic
    value: int = Field(default=0, description="Characteristic score")


class DamageModifier(CoreModel):
    """An immunity or weakness to a damage type.

    Attributes:
        damage_type: Damage type the modifier applies to.
        type: Immunity or weakness.
        value: Flat amount.
        value_per_level: Additional amount per hero level.
    """

    damage_type: str = Field(description="Damage type (e.g., 'fire')")
    type: DamageModifierType = Field(default=DamageModifierType.IMMUNITY)
    value: int = Field(default=0, description="Flat modifier amount")
    value_per_level: int = Field(default=0, description="Modifier gained per level")


class KitDamageBonus(CoreModel):
    """Damage a kit adds at each power roll tier."""

    tier1: int = Field(default=0)
    tier2: int = Field(default=0)
    tier3: int = Field(default=0)


__all__ = [
    "CoreModel",
    "Element",
    "Size",
    "MonsterSpeed",
    "CharacteristicValue",
    "DamageModifier",
    "KitDamageBonus",
]
