"""Constants shared across the hero builder engine.

Defaults here feed the settings classes and the entity factory.
"""

from __future__ import annotations

# =============================================================================
# Factory Defaults
# =============================================================================

DEFAULT_LANGUAGE = "Caelian"
"""Language every new hero starts out knowing."""

DEFAULT_LANGUAGE_FEATURE_ID = "default-language"
"""Identifier of the language choice seeded on every new hero."""

DEFAULT_LEVEL_COUNT = 3
"""Number of level records seeded on new classes, subclasses and domains."""

DEFAULT_STARTING_WEALTH = 1
"""Wealth a new hero starts with."""

CULTURE_ID_PREFIX = "culture-"
"""Prefix of the deterministic identifiers given to named cultures."""

# =============================================================================
# Feature Traversal
# =============================================================================

DEFAULT_MAX_FEATURE_DEPTH = 32
"""Deepest feature nesting that flattening will descend into."""

# =============================================================================
# Monster Defaults
# =============================================================================

MONSTER_LEVEL_RANGE = (1, 20)
"""Level bounds used by a fresh monster filter."""

MONSTER_EV_RANGE = (0, 500)
"""Encounter value bounds used by a fresh monster filter."""
