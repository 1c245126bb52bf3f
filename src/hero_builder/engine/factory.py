"""Entity factory: well-formed defaults for every domain entity.

Every constructor fills each field of its output. Optional inputs are
keyword arguments whose defaults are spelled out in the signature or in
the docstring when they are synthesized from other inputs.

Identifiers for new entities come from an injected generator; features
are given their identifiers by the caller, since feature ids only need
to be unique within the declaring entity.

Example:
    >>> factory = EntityFactory(id_generator=SequentialIdGenerator("x"))
    >>> ancestry = factory.create_ancestry()
    >>> ancestry.id
    'x-1'
    >>> choice = factory.feature.create_choice_feature(id="c1", options=[])
    >>> choice.description
    'Choose an option.'
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from functools import lru_cache
from typing import Any

from hero_builder.core.config import FactorySettings, get_settings
from hero_builder.core.constants import (
    CULTURE_ID_PREFIX,
    DEFAULT_LANGUAGE_FEATURE_ID,
    MONSTER_EV_RANGE,
    MONSTER_LEVEL_RANGE,
)
from hero_builder.core.logging import get_logger
from hero_builder.engine.formatting import choose_text, format_damage_modifier, join_names
from hero_builder.engine.ids import IdGenerator, uuid_id_generator
from hero_builder.models.abilities import (
    Ability,
    AbilityDistance,
    AbilitySpend,
    AbilityType,
    PowerRoll,
)
from hero_builder.models.components import CharacteristicValue, DamageModifier, MonsterSpeed, Size
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
    Sourcebook,
    SubClass,
)
from hero_builder.models.enums import (
    AbilityDistanceType,
    AbilityKeyword,
    AbilityUsage,
    Characteristic,
    FeatureField,
    KitType,
    MonsterRoleType,
    PerkList,
    PowerRollType,
    SkillList,
)
from hero_builder.models.features import (
    Domain,
    Feature,
    FeatureAbility,
    FeatureAbilityCost,
    FeatureAbilityCostData,
    FeatureAbilityData,
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
)
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


logger = get_logger(__name__)


def _count(count: int | None) -> int:
    """An unspecified count means one selection; an explicit 0 is kept.

    Earlier versions of the app used ``count || 1``, which turned an
    explicit 0 into 1. Here 0 means the choice is optional and is
    satisfied straight away.
    """
    return 1 if count is None else count


def culture_id(name: str) -> str:
    """Derive the stable identifier of a named culture.

    The first space becomes a hyphen and the result is lower-cased, so
    ``"High Elf"`` becomes ``culture-high-elf``. Built-in cultures are
    referenced by these identifiers in saved heroes; do not change the rule.
    """
    return f"{CULTURE_ID_PREFIX}{name.replace(' ', '-', 1).lower()}"


# =============================================================================
# Feature Constructors
# =============================================================================


class FeatureFactory:
    """Constructors for every feature variant.

    Omitted names and descriptions are synthesized from the payload; an
    empty string counts as omitted.
    """

    @staticmethod
    def create(*, id: str, name: str, description: str) -> FeatureText:
        return FeatureText(id=id, name=name, description=description)

    @staticmethod
    def create_option(feature: Feature, value: int = 1) -> FeatureOption:
        """Wrap a feature as a Choice option worth ``value`` selections."""
        return FeatureOption(feature=feature, value=value)

    @staticmethod
    def create_ability_feature(*, ability: Ability) -> FeatureAbility:
        """Grant an ability; the feature takes the ability's id, name and description."""
        return FeatureAbility(
            id=ability.id,
            name=ability.name,
            description=ability.description,
            data=FeatureAbilityData(ability=ability),
        )

    @staticmethod
    def create_ability_cost_feature(
        *,
        id: str,
        keywords: Sequence[AbilityKeyword],
        modifier: int,
        name: str | None = None,
        description: str | None = None,
    ) -> FeatureAbilityCost:
        """Modify the cost of abilities with the given keywords.

        Name defaults to ``"<keywords> cost modifier"``.
        """
        return FeatureAbilityCost(
            id=id,
            name=name or f"{join_names(keywords)} cost modifier",
            description=description or "",
            data=FeatureAbilityCostData(keywords=list(keywords), modifier=modifier),
        )

    @staticmethod
    def create_bonus_feature(
        *,
        id: str,
        field: FeatureField,
        name: str | None = None,
        description: str | None = None,
        value: int = 0,
        value_per_level: int = 0,
        value_per_echelon: int = 0,
    ) -> FeatureBonus:
        """Modify a hero statistic. Name and description default to the field name."""
        field = FeatureField(field)
        return FeatureBonus(
            id=id,
            name=name or field.value,
            description=description or field.value,
            data=FeatureBonusData(
                field=field,
                value=value,
                value_per_level=value_per_level,
                value_per_echelon=value_per_echelon,
            ),
        )

    @staticmethod
    def create_choice_feature(
        *,
        id: str,
        options: Iterable[FeatureOption],
        name: str | None = None,
        description: str | None = None,
        count: int | None = None,
    ) -> FeatureChoice:
        """Offer a weighted set of features to pick from.

        Name defaults to ``Choice``; description to ``Choose N options.``
        or ``Choose an option.``
        """
        count = _count(count)
        return FeatureChoice(
            id=id,
            name=name or "Choice",
            description=description or choose_text(count, "an option", "options"),
            data=FeatureChoiceData(options=list(options), count=count, selected=[]),
        )

    @staticmethod
    def create_class_ability_choice_feature(
        *,
        id: str,
        cost: int,
        name: str | None = None,
        description: str | None = None,
        count: int | None = None,
    ) -> FeatureClassAbility:
        """Pick abilities of the given cost from the hero's class.

        Description defaults to e.g. ``Choose a signature ability.`` or
        ``Choose 2 5pt abilities.``
        """
        count = _count(count)
        amount = str(count) if count > 1 else "a"
        kind = "signature" if cost == 0 else f"{cost}pt"
        noun = "abilities" if count > 1 else "ability"
        return FeatureClassAbility(
            id=id,
            name=name or "Ability",
            description=description or f"Choose {amount} {kind} {noun}.",
            data=FeatureClassAbilityData(cost=cost, count=count, selected_ids=[]),
        )

    @staticmethod
    def create_damage_modifier_feature(
        *,
        id: str,
        modifiers: Iterable[DamageModifier],
        name: str | None = None,
        description: str | None = None,
    ) -> FeatureDamageModifier:
        modifiers = list(modifiers)
        return FeatureDamageModifier(
            id=id,
            name=name or "Damage Modifier",
            description=description or join_names(format_damage_modifier(m) for m in modifiers),
            data=FeatureDamageModifierData(modifiers=modifiers),
        )

    @staticmethod
    def create_domain_choice_feature(
        *,
        id: str,
        name: str | None = None,
        description: str | None = None,
        count: int | None = None,
    ) -> FeatureDomain:
        count = _count(count)
        return FeatureDomain(
            id=id,
            name=name or "Domain",
            description=description or choose_text(count, "a domain", "domains"),
            data=FeatureDomainData(count=count, selected=[]),
        )

    @staticmethod
    def create_domain_feature_feature(
        *,
        id: str,
        level: int,
        name: str | None = None,
        description: str | None = None,
        count: int | None = None,
    ) -> FeatureDomainFeature:
        """Pick features of the given level from the hero's domains."""
        count = _count(count)
        return FeatureDomainFeature(
            id=id,
            name=name or "Domain Feature Choice",
            description=description or choose_text(count, "an option", "options"),
            data=FeatureDomainFeatureData(level=level, count=count, selected=[]),
        )

    @staticmethod
    def create_kit_choice_feature(
        *,
        id: str,
        name: str | None = None,
        description: str | None = None,
        types: Iterable[KitType] | None = None,
        count: int | None = None,
    ) -> FeatureKit:
        count = _count(count)
        return FeatureKit(
            id=id,
            name=name or "Kit",
            description=description or choose_text(count, "a kit", "kits"),
            data=FeatureKitData(types=list(types or []), count=count, selected=[]),
        )

    @staticmethod
    def create_kit_type_feature(
        *,
        id: str,
        types: Iterable[KitType],
        name: str | None = None,
        description: str | None = None,
    ) -> FeatureKitType:
        types = [KitType(t) for t in types]
        return FeatureKitType(
            id=id,
            name=name or "Kit Type",
            description=description or f"Allow {join_names(t.value for t in types)} kits.",
            data=FeatureKitTypeData(types=types),
        )

    @staticmethod
    def create_language_feature(
        *,
        id: str,
        language: str,
        name: str | None = None,
        description: str | None = None,
    ) -> FeatureLanguage:
        return FeatureLanguage(
            id=id,
            name=name or language,
            description=description or "",
            data=FeatureLanguageData(language=language),
        )

    @staticmethod
    def create_language_choice_feature(
        *,
        id: str,
        name: str | None = None,
        description: str | None = None,
        options: Iterable[str] | None = None,
        count: int | None = None,
        selected: Iterable[str] | None = None,
    ) -> FeatureLanguageChoice:
        """Pick languages; ``selected`` may be pre-filled."""
        return FeatureLanguageChoice(
            id=id,
            name=name or "Language",
            description=description or "",
            data=FeatureLanguageChoiceData(
                options=list(options or []),
                count=_count(count),
                selected=list(selected or []),
            ),
        )

    @staticmethod
    def create_malice_feature(*, id: str, name: str, description: str, cost: int) -> FeatureMalice:
        return FeatureMalice(
            id=id,
            name=name,
            description=description,
            data=FeatureMaliceData(cost=cost),
        )

    @staticmethod
    def create_multiple_feature(
        *,
        id: str,
        features: Iterable[Feature],
        name: str | None = None,
        description: str | None = None,
    ) -> FeatureMultiple:
        """Bundle features together. Name defaults to the children's names."""
        features = list(features)
        return FeatureMultiple(
            id=id,
            name=name or join_names(f.name or "Unnamed Feature" for f in features),
            description=description or "",
            data=FeatureMultipleData(features=features),
        )

    @staticmethod
    def create_perk_feature(
        *,
        id: str,
        name: str | None = None,
        description: str | None = None,
        lists: Iterable[PerkList] | None = None,
        count: int | None = None,
    ) -> FeaturePerk:
        """Pick perks. ``lists`` defaults to every perk list."""
        count = _count(count)
        return FeaturePerk(
            id=id,
            name=name or "Perk",
            description=description or choose_text(count, "a perk", "perks"),
            data=FeaturePerkData(
                lists=list(lists) if lists is not None else list(PerkList),
                count=count,
                selected=[],
            ),
        )

    @staticmethod
    def create_size_feature(
        *,
        id: str,
        size_value: int,
        size_mod: str,
        name: str | None = None,
        description: str | None = None,
    ) -> FeatureSize:
        return FeatureSize(
            id=id,
            name=name or "Size",
            description=description or "",
            data=FeatureSizeData(size=Size(value=size_value, mod=size_mod)),
        )

    @staticmethod
    def create_skill_feature(
        *,
        id: str,
        skill: str,
        name: str | None = None,
        description: str | None = None,
    ) -> FeatureSkill:
        return FeatureSkill(
            id=id,
            name=name or skill,
            description=description or "",
            data=FeatureSkillData(skill=skill),
        )

    @staticmethod
    def create_skill_choice_feature(
        *,
        id: str,
        name: str | None = None,
        description: str | None = None,
        options: Iterable[str] | None = None,
        list_options: Iterable[SkillList] | None = None,
        count: int | None = None,
        selected: Iterable[str] | None = None,
    ) -> FeatureSkillChoice:
        """Pick skills, from named ``options`` and/or whole skill lists."""
        count = _count(count)
        return FeatureSkillChoice(
            id=id,
            name=name or ("Skills" if count > 1 else "Skill"),
            description=description or "",
            data=FeatureSkillChoiceData(
                options=list(options or []),
                list_options=list(list_options or []),
                count=count,
                selected=list(selected or []),
            ),
        )

    @staticmethod
    def create_speed_feature(
        *,
        id: str,
        speed: int,
        name: str | None = None,
        description: str | None = None,
    ) -> FeatureSpeed:
        return FeatureSpeed(
            id=id,
            name=name or "Speed",
            description=description or "",
            data=FeatureSpeedData(speed=speed),
        )

    @staticmethod
    def create_title_feature(
        *,
        id: str,
        name: str | None = None,
        description: str | None = None,
        count: int | None = None,
    ) -> FeatureTitle:
        count = _count(count)
        return FeatureTitle(
            id=id,
            name=name or "Title",
            description=description or choose_text(count, "a title", "titles"),
            data=FeatureTitleData(count=count, selected=[]),
        )


# =============================================================================
# Ability Building Blocks
# =============================================================================


class AbilityTypeFactory:
    """Constructors for the ways an ability can be used."""

    @staticmethod
    def create_action(free: bool = False) -> AbilityType:
        return AbilityType(usage=AbilityUsage.ACTION, free=free)

    @staticmethod
    def create_maneuver(free: bool = False) -> AbilityType:
        return AbilityType(usage=AbilityUsage.MANEUVER, free=free)

    @staticmethod
    def create_move(free: bool = False) -> AbilityType:
        return AbilityType(usage=AbilityUsage.MOVE, free=free)

    @staticmethod
    def create_trigger(trigger: str, free: bool = False) -> AbilityType:
        return AbilityType(usage=AbilityUsage.TRIGGER, free=free, trigger=trigger)

    @staticmethod
    def create_time(time: str) -> AbilityType:
        """An ability used outside the action economy (e.g. ``1 hour``)."""
        return AbilityType(usage=AbilityUsage.OTHER, time=time)

    @staticmethod
    def create_villain_action() -> AbilityType:
        return AbilityType(usage=AbilityUsage.VILLAIN_ACTION)

    @staticmethod
    def create_no_action() -> AbilityType:
        return AbilityType(usage=AbilityUsage.NO_ACTION)


class DistanceFactory:
    """Constructors for ability distances."""

    @staticmethod
    def create(
        *,
        type: AbilityDistanceType,
        value: int,
        value2: int = 0,
        within: int = 0,
    ) -> AbilityDistance:
        return AbilityDistance(type=type, value=value, value2=value2, within=within)

    @staticmethod
    def create_self() -> AbilityDistance:
        return AbilityDistance(type=AbilityDistanceType.SELF)

    @staticmethod
    def create_melee(value: int = 1) -> AbilityDistance:
        return AbilityDistance(type=AbilityDistanceType.MELEE, value=value)

    @staticmethod
    def create_ranged(value: int = 10) -> AbilityDistance:
        return AbilityDistance(type=AbilityDistanceType.RANGED, value=value)

    @staticmethod
    def create_special(special: str) -> AbilityDistance:
        return AbilityDistance(type=AbilityDistanceType.SPECIAL, special=special)


# =============================================================================
# Entity Factory
# =============================================================================


class EntityFactory:
    """Builds new domain entities with canonical defaults.

    Attributes:
        feature: Feature variant constructors.
        ability_type: Ability usage constructors.
        distance: Ability distance constructors.

    Args:
        id_generator: Source of fresh identifiers; random UUIDs by default.
        settings: Factory defaults; the application settings by default.
    """

    def __init__(
        self,
        *,
        id_generator: IdGenerator | None = None,
        settings: FactorySettings | None = None,
    ) -> None:
        self._new_id: IdGenerator = id_generator or uuid_id_generator
        self._settings = settings
        self.feature = FeatureFactory()
        self.ability_type = AbilityTypeFactory()
        self.distance = DistanceFactory()

    @property
    def settings(self) -> FactorySettings:
        if self._settings is None:
            return get_settings().factory
        return self._settings

    def _levels(self) -> range:
        return range(1, self.settings.level_count + 1)

    def _created(self, kind: str, entity_id: str) -> None:
        logger.debug("Entity created", kind=kind, entity_id=entity_id)

    # -------------------------------------------------------------------------
    # Heroes and sourcebooks
    # -------------------------------------------------------------------------

    def create_hero(self, sourcebook_ids: Iterable[str] = ()) -> Hero:
        """Create a hero with no picks yet.

        The hero knows the configured default language through a
        pre-filled language choice with id ``default-language``.
        """
        settings = self.settings
        hero = Hero(
            id=self._new_id(),
            name="",
            setting_ids=list(sourcebook_ids),
            features=[
                self.feature.create_language_choice_feature(
                    id=DEFAULT_LANGUAGE_FEATURE_ID,
                    name="Default Language",
                    selected=[settings.default_language],
                )
            ],
            state=HeroState(wealth=settings.starting_wealth),
        )
        self._created("hero", hero.id)
        return hero

    def create_sourcebook(self) -> Sourcebook:
        """Create an empty homebrew sourcebook."""
        sourcebook = Sourcebook(id=self._new_id(), is_homebrew=True)
        self._created("sourcebook", sourcebook.id)
        return sourcebook

    @staticmethod
    def create_playbook() -> Playbook:
        return Playbook(encounters=[])

    # -------------------------------------------------------------------------
    # Feature sources
    # -------------------------------------------------------------------------

    def create_ancestry(self) -> Ancestry:
        ancestry = Ancestry(id=self._new_id())
        self._created("ancestry", ancestry.id)
        return ancestry

    def create_culture(
        self,
        name: str | None = None,
        description: str | None = None,
        languages: Iterable[str] | None = None,
        environment: Feature | None = None,
        organization: Feature | None = None,
        upbringing: Feature | None = None,
    ) -> Culture:
        """Create a culture.

        Named cultures get a deterministic identifier (see ``culture_id``);
        unnamed ones get a fresh identifier.
        """
        culture = Culture(
            id=culture_id(name) if name else self._new_id(),
            name=name or "",
            description=description or "",
            languages=list(languages or []),
            environment=environment,
            organization=organization,
            upbringing=upbringing,
        )
        self._created("culture", culture.id)
        return culture

    def create_career(self) -> Career:
        career = Career(
            id=self._new_id(),
            inciting_incidents=IncitingIncidents(options=[], selected_id=None),
        )
        self._created("career", career.id)
        return career

    def create_class(self) -> HeroClass:
        """Create a level 1 class with an empty feature record per level."""
        hero_class = HeroClass(
            id=self._new_id(),
            subclass_count=1,
            features_by_level=[FeaturesByLevel(level=n) for n in self._levels()],
            level=1,
        )
        self._created("class", hero_class.id)
        return hero_class

    def create_subclass(self) -> SubClass:
        subclass = SubClass(
            id=self._new_id(),
            features_by_level=[FeaturesByLevelWithOptions(level=n) for n in self._levels()],
            selected=False,
        )
        self._created("subclass", subclass.id)
        return subclass

    def create_complication(self) -> Complication:
        complication = Complication(id=self._new_id())
        self._created("complication", complication.id)
        return complication

    def create_domain(self) -> Domain:
        domain = Domain(
            id=self._new_id(),
            features_by_level=[FeaturesByLevelWithOptions(level=n) for n in self._levels()],
        )
        self._created("domain", domain.id)
        return domain

    def create_kit(self) -> Kit:
        kit = Kit(id=self._new_id(), type=KitType.STANDARD)
        self._created("kit", kit.id)
        return kit

    def create_perk(self) -> Perk:
        perk = Perk(id=self._new_id(), perk_list=PerkList.CRAFTING)
        self._created("perk", perk.id)
        return perk

    def create_title(self) -> Title:
        title = Title(id=self._new_id(), echelon=1)
        self._created("title", title.id)
        return title

    def create_item(self) -> Item:
        item = Item(id=self._new_id(), count=1)
        self._created("item", item.id)
        return item

    # -------------------------------------------------------------------------
    # Monsters and encounters
    # -------------------------------------------------------------------------

    def create_monster_group(self) -> MonsterGroup:
        group = MonsterGroup(id=self._new_id())
        self._created("monster_group", group.id)
        return group

    def create_monster(self) -> Monster:
        """Create a level 1 medium ambusher with every characteristic at 0."""
        monster = Monster(
            id=self._new_id(),
            level=1,
            role=MonsterRole(type=MonsterRoleType.AMBUSHER, is_minion=False),
            encounter_value=0,
            size=Size(value=1, mod="M"),
            speed=MonsterSpeed(value=5, modes=""),
            stamina=5,
            stability=0,
            free_strike_damage=2,
            characteristics=[
                CharacteristicValue(characteristic=characteristic, value=0)
                for characteristic in Characteristic
            ],
        )
        self._created("monster", monster.id)
        return monster

    @staticmethod
    def create_monster_filter() -> MonsterFilter:
        return MonsterFilter(is_minion="any", level=MONSTER_LEVEL_RANGE, ev=MONSTER_EV_RANGE)

    def create_encounter(self) -> Encounter:
        encounter = Encounter(id=self._new_id())
        self._created("encounter", encounter.id)
        return encounter

    def create_encounter_group(self) -> EncounterGroup:
        group = EncounterGroup(id=self._new_id())
        self._created("encounter_group", group.id)
        return group

    def create_encounter_slot(self, monster_id: str) -> EncounterSlot:
        slot = EncounterSlot(id=self._new_id(), monster_id=monster_id, count=1)
        self._created("encounter_slot", slot.id)
        return slot

    # -------------------------------------------------------------------------
    # Abilities
    # -------------------------------------------------------------------------

    @staticmethod
    def create_ability(
        *,
        id: str,
        name: str,
        type: AbilityType,
        distance: Iterable[AbilityDistance],
        target: str,
        description: str | None = None,
        keywords: Iterable[AbilityKeyword] | None = None,
        cost: int | None = None,
        pre_effect: str | None = None,
        power_roll: PowerRoll | None = None,
        effect: str | None = None,
        strained: str | None = None,
        alternate_effects: Iterable[str] | None = None,
        spend: Iterable[Mapping[str, Any]] | None = None,
        persistence: Iterable[Mapping[str, Any]] | None = None,
    ) -> Ability:
        """Create an ability.

        ``cost`` defaults to 0 (a signature ability). ``spend`` and
        ``persistence`` entries are mappings with an ``effect`` and an
        optional ``value`` that defaults to 0.
        """
        return Ability(
            id=id,
            name=name,
            description=description or "",
            type=type,
            keywords=list(keywords or []),
            distance=list(distance or []),
            target=target or "",
            cost=cost or 0,
            pre_effect=pre_effect or "",
            power_roll=power_roll,
            effect=effect or "",
            strained=strained or "",
            alternate_effects=list(alternate_effects or []),
            spend=[AbilitySpend(value=s.get("value") or 0, effect=s["effect"]) for s in spend or []],
            persistence=[
                AbilitySpend(value=p.get("value") or 0, effect=p["effect"]) for p in persistence or []
            ],
        )

    @staticmethod
    def create_power_roll(
        *,
        tier1: str,
        tier2: str,
        tier3: str,
        type: PowerRollType | None = None,
        characteristic: Iterable[Characteristic] | None = None,
        bonus: int | None = None,
    ) -> PowerRoll:
        return PowerRoll(
            type=type or PowerRollType.POWER_ROLL,
            characteristic=list(characteristic or []),
            bonus=bonus or 0,
            tier1=tier1,
            tier2=tier2,
            tier3=tier3,
        )


@lru_cache(maxsize=1)
def get_factory() -> EntityFactory:
    """Get a shared factory using random identifiers and application settings."""
    return EntityFactory()


__all__ = [
    "culture_id",
    "FeatureFactory",
    "AbilityTypeFactory",
    "DistanceFactory",
    "EntityFactory",
    "get_factory",
]
