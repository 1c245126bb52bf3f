"""Tests for entity, monster and encounter models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from hero_builder.models import (
    Culture,
    EncounterSlot,
    FeatureSkill,
    Hero,
    HeroClass,
    IncitingIncidents,
    MonsterFilter,
    SkillDefinition,
    SkillList,
)


class TestHero:
    """Tests for the Hero model."""

    def test_minimal_hero(self) -> None:
        """Test a hero needs only an id."""
        hero = Hero(id="h1")

        assert hero.ancestry is None
        assert hero.hero_class is None
        assert hero.features == []
        assert hero.state.wealth == 1
        assert hero.state.inventory == []

    def test_wire_aliases(self) -> None:
        """Test ``class`` and ``settingIDs`` keys map onto Python names."""
        hero = Hero.model_validate(
            {
                "id": "h1",
                "name": "Ash",
                "settingIDs": ["core"],
                "class": {"id": "c1", "name": "Fury", "level": 3},
            }
        )

        assert hero.setting_ids == ["core"]
        assert hero.hero_class is not None
        assert hero.hero_class.level == 3

        dumped = hero.model_dump(by_alias=True)
        assert "class" in dumped
        assert "settingIDs" in dumped

    def test_populate_by_name(self) -> None:
        """Test Python field names are accepted too."""
        hero = Hero(id="h1", hero_class=HeroClass(id="c1"), setting_ids=["core"])

        assert hero.hero_class.id == "c1"


class TestHeroClass:
    """Tests for the HeroClass model."""

    def test_defaults(self) -> None:
        """Test a bare class is level 1 with no features."""
        hero_class = HeroClass(id="c1")

        assert hero_class.level == 1
        assert hero_class.subclass_count == 1
        assert hero_class.features_by_level == []
        assert hero_class.subclasses == []

    @pytest.mark.parametrize("level", [0, 11])
    def test_level_bounds(self, level: int) -> None:
        """Test the class level stays within 1-10."""
        with pytest.raises(ValidationError):
            HeroClass(id="c1", level=level)

    def test_camel_case_levels(self) -> None:
        """Test ``featuresByLevel`` documents validate."""
        hero_class = HeroClass.model_validate(
            {
                "id": "c1",
                "featuresByLevel": [
                    {"level": 1, "features": [{"id": "f", "type": "Skill", "data": {"skill": "Lift"}}]}
                ],
            }
        )

        assert isinstance(hero_class.features_by_level[0].features[0], FeatureSkill)


class TestCulture:
    """Tests for the Culture model."""

    def test_aspects_optional(self) -> None:
        """Test every aspect may be absent."""
        culture = Culture(id="culture-wode")

        assert culture.environment is None
        assert culture.organization is None
        assert culture.upbringing is None

    def test_aspect_is_feature(self) -> None:
        """Test aspects validate as features."""
        culture = Culture.model_validate(
            {
                "id": "culture-wode",
                "environment": {"id": "env", "type": "Skill", "data": {"skill": "Track"}},
            }
        )

        assert isinstance(culture.environment, FeatureSkill)


class TestCareerModels:
    """Tests for career sub-models."""

    def test_inciting_incident_alias(self) -> None:
        """Test the picked incident is stored as ``selectedID``."""
        incidents = IncitingIncidents.model_validate(
            {"options": [{"id": "i1", "name": "Fire"}], "selectedID": "i1"}
        )

        assert incidents.selected_id == "i1"
        assert incidents.options[0].name == "Fire"

    def test_skill_definition_list_alias(self) -> None:
        """Test a skill's list is stored as ``list``."""
        skill = SkillDefinition.model_validate({"name": "Search", "list": "Intrigue"})

        assert skill.skill_list == SkillList.INTRIGUE


class TestMonsterFilter:
    """Tests for the MonsterFilter model."""

    def test_defaults(self) -> None:
        """Test a default filter matches everything."""
        monster_filter = MonsterFilter()

        assert monster_filter.is_minion == "any"
        assert monster_filter.level == (1, 20)
        assert monster_filter.ev == (0, 500)
        assert monster_filter.roles == []

    def test_reversed_range_rejected(self) -> None:
        """Test ranges must run low to high."""
        with pytest.raises(ValidationError, match="level range"):
            MonsterFilter(level=(10, 2))

    def test_unknown_minion_mode_rejected(self) -> None:
        """Test the minion filter only accepts any/yes/no."""
        with pytest.raises(ValidationError):
            MonsterFilter(is_minion="maybe")


class TestEncounterSlot:
    """Tests for the EncounterSlot model."""

    def test_monster_id_alias(self) -> None:
        """Test the monster reference is stored as ``monsterID``."""
        slot = EncounterSlot.model_validate({"id": "s1", "monsterID": "goblin", "count": 3})

        assert slot.monster_id == "goblin"
        assert slot.model_dump(by_alias=True)["monsterID"] == "goblin"

    def test_count_positive(self) -> None:
        """Test an empty slot is rejected."""
        with pytest.raises(ValidationError):
            EncounterSlot(id="s1", monster_id="goblin", count=0)
