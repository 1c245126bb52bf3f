"""Tests for the entity factory."""

from __future__ import annotations

import pytest

from hero_builder.core.config import FactorySettings
from hero_builder.engine.factory import EntityFactory, culture_id, get_factory
from hero_builder.engine.features import is_chosen
from hero_builder.engine.ids import SequentialIdGenerator
from hero_builder.models import (
    AbilityDistanceType,
    AbilityKeyword,
    AbilityUsage,
    Characteristic,
    DamageModifier,
    DamageModifierType,
    FeatureField,
    FeatureLanguageChoice,
    FeatureSkill,
    FeatureText,
    FeatureType,
    KitType,
    PerkList,
    PowerRollType,
    SkillList,
)


class TestFeatureConstructors:
    """Tests for feature variant constructors."""

    def test_text(self, factory: EntityFactory) -> None:
        """Test a text feature keeps what it is given."""
        feature = factory.feature.create(id="t", name="Lore", description="You know things.")

        assert feature.type == FeatureType.TEXT
        assert feature.name == "Lore"
        assert feature.data is None

    def test_choice_defaults(self, factory: EntityFactory) -> None:
        """Test an unnamed choice with no count."""
        feature = factory.feature.create_choice_feature(id="c1", options=[])

        assert feature.name == "Choice"
        assert feature.description == "Choose an option."
        assert feature.data.count == 1
        assert feature.data.selected == []

    def test_choice_plural_description(self, factory: EntityFactory) -> None:
        """Test the description names the count when more than one is needed."""
        feature = factory.feature.create_choice_feature(id="c1", options=[], count=3)

        assert feature.description == "Choose 3 options."

    def test_explicit_zero_count_kept(self, factory: EntityFactory) -> None:
        """Test a count of 0 is not replaced by the default."""
        feature = factory.feature.create_kit_choice_feature(id="k", count=0)

        assert feature.data.count == 0
        assert is_chosen(feature)

    def test_empty_name_counts_as_omitted(self, factory: EntityFactory) -> None:
        """Test an empty name falls back to the synthesized one."""
        feature = factory.feature.create_title_feature(id="t", name="")

        assert feature.name == "Title"
        assert feature.description == "Choose a title."

    def test_option_value_defaults_to_one(
        self, factory: EntityFactory, text_feature: FeatureText
    ) -> None:
        """Test options are worth one selection unless stated."""
        assert factory.feature.create_option(text_feature).value == 1
        assert factory.feature.create_option(text_feature, 2).value == 2

    def test_bonus_defaults_to_field_name(self, factory: EntityFactory) -> None:
        """Test a bonus is named and described after its field."""
        feature = factory.feature.create_bonus_feature(
            id="b", field=FeatureField.STAMINA, value=6, value_per_level=3
        )

        assert feature.name == "Stamina"
        assert feature.description == "Stamina"
        assert feature.data.value == 6
        assert feature.data.value_per_level == 3
        assert feature.data.value_per_echelon == 0

    @pytest.mark.parametrize(
        ("cost", "count", "expected"),
        [
            (0, None, "Choose a signature ability."),
            (3, 1, "Choose a 3pt ability."),
            (5, 2, "Choose 2 5pt abilities."),
        ],
    )
    def test_class_ability_description(
        self,
        factory: EntityFactory,
        cost: int,
        count: int | None,
        expected: str,
    ) -> None:
        """Test the class ability prompt names cost and count."""
        feature = factory.feature.create_class_ability_choice_feature(id="a", cost=cost, count=count)

        assert feature.name == "Ability"
        assert feature.description == expected
        assert feature.data.selected_ids == []

    def test_ability_cost_name(self, factory: EntityFactory) -> None:
        """Test the cost modifier is named after its keywords."""
        feature = factory.feature.create_ability_cost_feature(
            id="ac",
            keywords=[AbilityKeyword.MAGIC, AbilityKeyword.PSIONIC],
            modifier=-1,
        )

        assert feature.name == "Magic, Psionic cost modifier"
        assert feature.data.modifier == -1

    def test_damage_modifier_description(self, factory: EntityFactory) -> None:
        """Test the description lists each modifier."""
        feature = factory.feature.create_damage_modifier_feature(
            id="dm",
            modifiers=[
                DamageModifier(damage_type="fire", type=DamageModifierType.IMMUNITY, value=5),
                DamageModifier(damage_type="cold", type=DamageModifierType.WEAKNESS, value=3),
            ],
        )

        assert feature.name == "Damage Modifier"
        assert feature.description == "Fire Immunity 5, Cold Weakness 3"

    def test_kit_type_description(self, factory: EntityFactory) -> None:
        """Test the kit type feature lists the allowed kit families."""
        feature = factory.feature.create_kit_type_feature(
            id="kt", types=[KitType.STANDARD, KitType.STORMWIGHT]
        )

        assert feature.description == "Allow Standard, Stormwight kits."

    def test_multiple_named_after_children(self, factory: EntityFactory) -> None:
        """Test a bundle is named after the features it holds."""
        feature = factory.feature.create_multiple_feature(
            id="m",
            features=[
                factory.feature.create_skill_feature(id="s1", skill="Climb"),
                factory.feature.create_speed_feature(id="s2", speed=6),
            ],
        )

        assert feature.name == "Climb, Speed"
        assert len(feature.data.features) == 2

    def test_perk_lists_default_to_all(self, factory: EntityFactory) -> None:
        """Test a perk feature offers every list unless restricted."""
        feature = factory.feature.create_perk_feature(id="p")
        restricted = factory.feature.create_perk_feature(id="p2", lists=[PerkList.LORE], count=2)

        assert feature.data.lists == list(PerkList)
        assert feature.description == "Choose a perk."
        assert restricted.data.lists == [PerkList.LORE]
        assert restricted.description == "Choose 2 perks."

    def test_skill_choice_name(self, factory: EntityFactory) -> None:
        """Test the skill choice name follows the count."""
        single = factory.feature.create_skill_choice_feature(id="s", options=["Climb"])
        double = factory.feature.create_skill_choice_feature(
            id="s2", list_options=[SkillList.LORE], count=2
        )

        assert single.name == "Skill"
        assert double.name == "Skills"
        assert double.data.list_options == [SkillList.LORE]

    def test_language_choice_prefilled(self, factory: EntityFactory) -> None:
        """Test a language choice may be created already resolved."""
        feature = factory.feature.create_language_choice_feature(id="l", selected=["Zaliac"])

        assert feature.data.selected == ["Zaliac"]
        assert is_chosen(feature)

    def test_size(self, factory: EntityFactory) -> None:
        """Test the size payload."""
        feature = factory.feature.create_size_feature(id="sz", size_value=1, size_mod="S")

        assert feature.data.size.value == 1
        assert feature.data.size.mod == "S"

    def test_domain_features(self, factory: EntityFactory) -> None:
        """Test domain choice and domain feature defaults."""
        domain = factory.feature.create_domain_choice_feature(id="d", count=2)
        domain_feature = factory.feature.create_domain_feature_feature(id="df", level=2)

        assert domain.description == "Choose 2 domains."
        assert domain_feature.name == "Domain Feature Choice"
        assert domain_feature.data.level == 2

    def test_ability_feature_takes_ability_identity(self, factory: EntityFactory) -> None:
        """Test an ability feature is identified by its ability."""
        ability = factory.create_ability(
            id="strike",
            name="Strike",
            description="Hit it.",
            type=factory.ability_type.create_action(),
            distance=[factory.distance.create_melee()],
            target="One creature",
        )

        feature = factory.feature.create_ability_feature(ability=ability)

        assert feature.id == "strike"
        assert feature.name == "Strike"
        assert feature.description == "Hit it."
        assert feature.data.ability == ability


class TestAbilityConstructors:
    """Tests for ability building blocks."""

    def test_ability_defaults(self, factory: EntityFactory) -> None:
        """Test optional ability fields take their defaults."""
        ability = factory.create_ability(
            id="a",
            name="Jab",
            type=factory.ability_type.create_action(),
            distance=[factory.distance.create_self()],
            target="Self",
        )

        assert ability.cost == 0
        assert ability.is_signature
        assert ability.keywords == []
        assert ability.power_roll is None
        assert ability.description == ""

    def test_spend_entries(self, factory: EntityFactory) -> None:
        """Test spend and persistence values default to 0."""
        ability = factory.create_ability(
            id="a",
            name="Burn",
            type=factory.ability_type.create_maneuver(),
            distance=[factory.distance.create_ranged()],
            target="One creature",
            cost=3,
            spend=[{"effect": "More fire"}, {"value": 2, "effect": "Even more"}],
            persistence=[{"effect": "Keep burning"}],
        )

        assert ability.cost == 3
        assert [s.value for s in ability.spend] == [0, 2]
        assert ability.persistence[0].value == 0

    def test_power_roll_defaults(self, factory: EntityFactory) -> None:
        """Test a power roll defaults to the power roll type."""
        roll = factory.create_power_roll(tier1="2", tier2="5", tier3="7")

        assert roll.type == PowerRollType.POWER_ROLL
        assert roll.characteristic == []
        assert roll.bonus == 0

    def test_distances(self, factory: EntityFactory) -> None:
        """Test distance defaults."""
        assert factory.distance.create_melee().value == 1
        assert factory.distance.create_ranged().value == 10
        assert factory.distance.create_special("Line of sight").special == "Line of sight"
        assert factory.distance.create(type=AbilityDistanceType.CUBE, value=3, within=10).within == 10

    def test_ability_types(self, factory: EntityFactory) -> None:
        """Test ability usage constructors."""
        trigger = factory.ability_type.create_trigger("An ally is hit", free=True)

        assert trigger.usage == AbilityUsage.TRIGGER
        assert trigger.free is True
        assert trigger.trigger == "An ally is hit"
        assert factory.ability_type.create_time("1 hour").usage == AbilityUsage.OTHER
        assert factory.ability_type.create_move().free is False


class TestEntityConstructors:
    """Tests for entity constructors."""

    def test_ids_from_generator(self, factory: EntityFactory) -> None:
        """Test entities take identifiers from the injected generator."""
        assert factory.create_ancestry().id == "test-1"
        assert factory.create_career().id == "test-2"
        assert factory.create_kit().id == "test-3"

    def test_hero_defaults(self, factory: EntityFactory) -> None:
        """Test a new hero knows the default language and nothing else."""
        hero = factory.create_hero(["core"])

        assert hero.setting_ids == ["core"]
        assert hero.ancestry is None
        assert hero.state.wealth == 1
        assert len(hero.features) == 1

        language = hero.features[0]
        assert isinstance(language, FeatureLanguageChoice)
        assert language.id == "default-language"
        assert language.data.selected == ["Caelian"]
        assert is_chosen(language)

    def test_hero_uses_settings(self) -> None:
        """Test factory settings feed new heroes."""
        factory = EntityFactory(
            id_generator=SequentialIdGenerator(),
            settings=FactorySettings(default_language="Vaslorian", starting_wealth=3),
        )

        hero = factory.create_hero()

        assert hero.features[0].data.selected == ["Vaslorian"]
        assert hero.state.wealth == 3

    def test_settings_fall_back_to_environment(self, mock_env_vars: dict[str, str]) -> None:
        """Test a factory without settings reads the application settings."""
        factory = EntityFactory()

        assert factory.settings.level_count == 5
        assert len(factory.create_class().features_by_level) == 5

    def test_class_defaults(self, factory: EntityFactory) -> None:
        """Test a new class is level 1 with an empty record per level."""
        hero_class = factory.create_class()

        assert hero_class.level == 1
        assert hero_class.subclass_count == 1
        assert [r.level for r in hero_class.features_by_level] == [1, 2, 3]
        assert all(r.features == [] for r in hero_class.features_by_level)

    def test_subclass_and_domain_levels(self, factory: EntityFactory) -> None:
        """Test subclasses and domains are seeded with level records."""
        subclass = factory.create_subclass()
        domain = factory.create_domain()

        assert subclass.selected is False
        assert [r.level for r in subclass.features_by_level] == [1, 2, 3]
        assert [r.level for r in domain.features_by_level] == [1, 2, 3]

    def test_named_culture_id_is_deterministic(self, factory: EntityFactory) -> None:
        """Test named cultures get the same identifier every time."""
        first = factory.create_culture(name="High Elf")
        second = factory.create_culture(name="High Elf")

        assert first.id == "culture-high-elf"
        assert first.id == second.id
        assert first.name == "High Elf"

    def test_unnamed_cultures_distinct(self, factory: EntityFactory) -> None:
        """Test unnamed cultures get fresh identifiers."""
        first = factory.create_culture()
        second = factory.create_culture()

        assert first.id != second.id
        assert first.environment is None

    def test_culture_aspects(
        self, factory: EntityFactory, skill_feature: FeatureSkill
    ) -> None:
        """Test culture aspects are stored as given."""
        culture = factory.create_culture(name="Wode", languages=["Yllyric"], upbringing=skill_feature)

        assert culture.languages == ["Yllyric"]
        assert culture.upbringing == skill_feature

    def test_career_has_no_incident(self, factory: EntityFactory) -> None:
        """Test a new career has no inciting incident picked."""
        career = factory.create_career()

        assert career.inciting_incidents.options == []
        assert career.inciting_incidents.selected_id is None

    def test_content_defaults(self, factory: EntityFactory) -> None:
        """Test defaults of the remaining content constructors."""
        assert factory.create_kit().type == KitType.STANDARD
        assert factory.create_perk().perk_list == PerkList.CRAFTING
        assert factory.create_perk().type == FeatureType.TEXT
        assert factory.create_title().echelon == 1
        assert factory.create_item().count == 1
        assert factory.create_sourcebook().is_homebrew is True
        assert factory.create_complication().features == []
        assert factory.create_playbook().encounters == []

    def test_monster_defaults(self, factory: EntityFactory) -> None:
        """Test a new monster's stat block."""
        monster = factory.create_monster()

        assert monster.level == 1
        assert monster.role.is_minion is False
        assert monster.size.value == 1
        assert monster.size.mod == "M"
        assert monster.speed.value == 5
        assert monster.stamina == 5
        assert monster.free_strike_damage == 2
        assert [c.characteristic for c in monster.characteristics] == list(Characteristic)
        assert all(c.value == 0 for c in monster.characteristics)

    def test_monster_filter_defaults(self, factory: EntityFactory) -> None:
        """Test the default filter spans every level and encounter value."""
        monster_filter = factory.create_monster_filter()

        assert monster_filter.is_minion == "any"
        assert monster_filter.level == (1, 20)
        assert monster_filter.ev == (0, 500)

    def test_encounter_parts(self, factory: EntityFactory) -> None:
        """Test encounter constructors."""
        encounter = factory.create_encounter()
        group = factory.create_encounter_group()
        slot = factory.create_encounter_slot("goblin")

        assert encounter.groups == []
        assert group.slots == []
        assert slot.monster_id == "goblin"
        assert slot.count == 1


class TestCultureId:
    """Tests for culture identifier derivation."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Wode", "culture-wode"),
            ("High Elf", "culture-high-elf"),
            ("Free City Guild", "culture-free-city guild"),
        ],
    )
    def test_rule(self, name: str, expected: str) -> None:
        """Test only the first space becomes a hyphen."""
        assert culture_id(name) == expected


def test_get_factory_cached() -> None:
    """Test the shared factory is created once."""
    assert get_factory() is get_factory()
