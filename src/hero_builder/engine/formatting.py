"""Text helpers used to synthesize default names and descriptions."""

from __future__ import annotations

from collections.abc import Iterable

from hero_builder.models.components import DamageModifier


def format_damage_modifier(modifier: DamageModifier) -> str:
    """Render a damage modifier, e.g. ``Fire Immunity 5``.

    A per-level component is appended as ``+N per level``.
    """
    text = f"{modifier.damage_type.capitalize()} {modifier.type.value}"
    if modifier.value:
        text += f" {modifier.value}"
    if modifier.value_per_level:
        text += f" +{modifier.value_per_level} per level"
    return text


def join_names(values: Iterable[str]) -> str:
    """Join values with commas, as used in synthesized names."""
    return ", ".join(str(value) for value in values)


def choose_text(count: int, singular: str, plural: str) -> str:
    """Build a ``Choose ...`` prompt.

    Args:
        count: Number of selections required.
        singular: Phrase used when one selection is needed ("an option").
        plural: Noun used when several are needed ("options").

    Returns:
        ``Choose N plural.`` when count > 1, otherwise ``Choose singular.``
    """
    if count > 1:
        return f"Choose {count} {plural}."
    return f"Choose {singular}."


__all__ = [
    "format_damage_modifier",
    "join_names",
    "choose_text",
]
