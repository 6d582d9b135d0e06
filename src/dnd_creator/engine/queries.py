"""Catalog query facade.

Answers the questions a character-creation flow asks at each step: which
classes, subclasses, races, backgrounds, and spells are available, which
skills a class allows, and what its starting equipment choices look like.

Every query is pure and total. Unknown ids produce None or an empty list,
and list results keep catalog declaration order.

Example:
    >>> from dnd_creator.catalog import get_catalog
    >>> queries = CatalogQueries(get_catalog())
    >>> queries.requires_level1_subclass("cleric")
    True
"""

from __future__ import annotations

from collections import Counter

from dnd_creator.catalog import progression
from dnd_creator.catalog.store import CatalogStore
from dnd_creator.engine.ability_scores import (
    eligible_flexible_abilities,
    flexible_bonus,
    race_lineage,
)
from dnd_creator.models.catalog import (
    BackgroundDefinition,
    ClassDefinition,
    EquipmentOptionGroup,
    Feature,
    RaceDefinition,
    SpellDefinition,
    SubclassDefinition,
)
from dnd_creator.models.draft import CharacterDraft
from dnd_creator.models.enums import ItemType
from dnd_creator.models.results import (
    BaseRaceOption,
    ClassResources,
    EquipmentChoiceGroup,
    EquipmentItem,
    EquipmentOption,
    FlexibleBonusOptions,
    SkillChoice,
)


# =============================================================================
# Item Presentation
# =============================================================================

_WEAPON_IDS = frozenset({
    "club", "dagger", "dart", "greataxe", "handaxe", "javelin", "light-crossbow",
    "longbow", "longsword", "mace", "quarterstaff", "rapier", "scimitar",
    "shortbow", "shortsword", "sickle", "sling", "spear", "warhammer",
})
_ARMOR_IDS = frozenset({"shield", "wooden-shield"})
_TOOL_IDS = frozenset({"lute", "thieves-tools", "musical-instrument-choice"})
_CHOICE_SUFFIX = "-choice"


def item_type(item_id: str) -> ItemType:
    """Infer the coarse type of an item from its id.

    Args:
        item_id: Catalog item id (e.g., "leather-armor", "explorers-pack").

    Returns:
        The inferred item type. Unrecognized items are gear.
    """
    if item_id.endswith("-pack"):
        return ItemType.PACK
    if item_id in _ARMOR_IDS or item_id.endswith(("-armor", "-mail")):
        return ItemType.ARMOR
    if item_id in _TOOL_IDS or item_id.endswith("-tools"):
        return ItemType.TOOL
    if item_id in _WEAPON_IDS or "weapon" in item_id or "melee" in item_id:
        return ItemType.WEAPON
    return ItemType.GEAR


def item_name(item_id: str) -> str:
    """Display name for an item id ("martial-melee-choice" -> "Martial Melee")."""
    return item_id.removesuffix(_CHOICE_SUFFIX).replace("-", " ").title()


def _option_items(items: tuple[str, ...]) -> list[EquipmentItem]:
    counts = Counter(items)
    return [
        EquipmentItem(
            id=item_id,
            name=item_name(item_id),
            type=item_type(item_id),
            quantity=quantity,
        )
        for item_id, quantity in counts.items()
    ]


def _describe_group(group: EquipmentOptionGroup) -> str:
    return " or ".join(option.description for option in group.options)


# =============================================================================
# Query Facade
# =============================================================================


class CatalogQueries:
    """Read-only queries over a catalog store.

    Attributes:
        catalog: The catalog the queries read from.
    """

    def __init__(self, catalog: CatalogStore) -> None:
        self.catalog = catalog

    # -------------------------------------------------------------------------
    # Classes and Subclasses
    # -------------------------------------------------------------------------

    def classes_available(self) -> list[ClassDefinition]:
        """All classes, in catalog order."""
        return list(self.catalog.classes.values())

    def class_by_id(self, class_id: str | None) -> ClassDefinition | None:
        """Look up a class by id."""
        return self.catalog.get_class(class_id)

    def subclasses_for(self, class_id: str | None) -> list[SubclassDefinition]:
        """Subclasses owned by a class.

        Only subclasses whose ``class_id`` matches are returned.
        """
        class_def = self.catalog.get_class(class_id)
        if class_def is None:
            return []
        return [sub for sub in class_def.subclasses if sub.class_id == class_def.id]

    def subclass_by_id(
        self, class_id: str | None, subclass_id: str | None
    ) -> SubclassDefinition | None:
        """Look up a subclass of a specific class."""
        class_def = self.catalog.get_class(class_id)
        if class_def is None:
            return None
        return class_def.get_subclass(subclass_id)

    def requires_level1_subclass(self, class_id: str | None) -> bool:
        """Check whether a class chooses its subclass at level 1."""
        class_def = self.catalog.get_class(class_id)
        return class_def is not None and class_def.subclass_level == 1

    def requires_subclass(self, class_id: str | None, level: int) -> bool:
        """Check whether a character of this class and level must have a subclass."""
        class_def = self.catalog.get_class(class_id)
        return class_def is not None and level >= class_def.subclass_level

    def class_features_at(
        self,
        class_id: str | None,
        level: int,
        subclass_id: str | None = None,
    ) -> list[Feature]:
        """Features a character has at a level.

        Args:
            class_id: Class identifier.
            level: Character level.
            subclass_id: Selected subclass, if any.

        Returns:
            Class features from level 1 through ``level``, followed by the
            subclass's features up to ``level``.
        """
        class_def = self.catalog.get_class(class_id)
        if class_def is None:
            return []
        features = [
            feature
            for feature_level in sorted(class_def.features)
            if feature_level <= level
            for feature in class_def.features[feature_level]
        ]
        subclass = class_def.get_subclass(subclass_id)
        if subclass is not None:
            features.extend(
                feature
                for feature_level in sorted(subclass.features)
                if feature_level <= level
                for feature in subclass.features[feature_level]
            )
        return features

    def class_resources(self, class_id: str | None, level: int) -> ClassResources | None:
        """Level-dependent resources (sneak attack, martial arts, rages)."""
        class_def = self.catalog.get_class(class_id)
        if class_def is None:
            return None
        resources = ClassResources(class_id=class_def.id, level=level)
        if class_def.id == "rogue":
            resources = resources.model_copy(
                update={"sneak_attack_dice": progression.sneak_attack_dice(level)}
            )
        elif class_def.id == "monk":
            resources = resources.model_copy(
                update={"martial_arts_die": progression.martial_arts_die(level)}
            )
        elif class_def.id == "barbarian":
            resources = resources.model_copy(
                update={"rages_per_day": progression.rages_per_day(level)}
            )
        return resources

    # -------------------------------------------------------------------------
    # Races
    # -------------------------------------------------------------------------

    def races_available(self) -> list[RaceDefinition]:
        """All races and subraces, in catalog order."""
        return list(self.catalog.races.values())

    def race_by_id(self, race_id: str | None) -> RaceDefinition | None:
        """Look up a race or subrace by id."""
        return self.catalog.get_race(race_id)

    def base_race_options(self) -> list[BaseRaceOption]:
        """Selectable top-level races, one per base race."""
        subraced = {race.base_race for race in self.catalog.races.values() if race.base_race}
        options: dict[str, BaseRaceOption] = {}
        for race in self.catalog.races.values():
            if race.base_race is None and race.id not in options:
                options[race.id] = BaseRaceOption(
                    id=race.id,
                    name=race.name,
                    has_subraces=race.id in subraced,
                )
        return list(options.values())

    def subraces_for(self, base_race_id: str | None) -> list[RaceDefinition]:
        """Subraces of a base race."""
        if base_race_id is None:
            return []
        return [race for race in self.catalog.races.values() if race.base_race == base_race_id]

    def has_flexible_ability_bonuses(self, race_id: str | None) -> bool:
        """Check whether a race (or its base race) has a flexible ability bonus."""
        return flexible_bonus(race_lineage(self.catalog, race_id)) is not None

    def flexible_ability_bonus_options(self, race_id: str | None) -> FlexibleBonusOptions | None:
        """Describe a race's flexible ability bonus, or None if it has none."""
        lineage = race_lineage(self.catalog, race_id)
        entry = flexible_bonus(lineage)
        if entry is None:
            return None
        return FlexibleBonusOptions(
            choice_count=entry.choice_count or 0,
            bonus=entry.bonus,
            eligible_abilities=eligible_flexible_abilities(lineage),
        )

    # -------------------------------------------------------------------------
    # Backgrounds and Spells
    # -------------------------------------------------------------------------

    def backgrounds_available(self) -> list[BackgroundDefinition]:
        """All backgrounds, in catalog order."""
        return list(self.catalog.backgrounds.values())

    def background_by_id(self, background_id: str | None) -> BackgroundDefinition | None:
        """Look up a background by id."""
        return self.catalog.get_background(background_id)

    def spells_available(self) -> list[SpellDefinition]:
        """All spells, in catalog order."""
        return list(self.catalog.spells.values())

    def spell_by_id(self, spell_id: str | None) -> SpellDefinition | None:
        """Look up a spell by id."""
        return self.catalog.get_spell(spell_id)

    # -------------------------------------------------------------------------
    # Draft-Dependent Choices
    # -------------------------------------------------------------------------

    def equipment_choice_groups(self, class_id: str | None) -> list[EquipmentChoiceGroup]:
        """Starting-equipment decisions for a class.

        Repeated items within an option are collapsed into one entry with a
        quantity.
        """
        class_def = self.catalog.get_class(class_id)
        if class_def is None:
            return []
        return [
            EquipmentChoiceGroup(
                id=group.group_id,
                description=_describe_group(group),
                options=[
                    EquipmentOption(
                        id=option.id,
                        name=option.description,
                        items=_option_items(option.items),
                    )
                    for option in group.options
                ],
            )
            for group in class_def.equipment_options
        ]

    def valid_skill_choices(self, draft: CharacterDraft) -> SkillChoice:
        """Skill choices offered by the draft's class.

        Args:
            draft: The character draft. It is not modified.

        Returns:
            The required count, the legal options, and the draft's picks
            that are among those options. A draft without a known class
            gets a zero count and no options.
        """
        class_def = self.catalog.get_class(draft.class_id)
        if class_def is None:
            return SkillChoice(count=0, options=[], selected=[])
        options = list(dict.fromkeys(class_def.skill_choices.options))
        allowed = set(options)
        selected = [skill for skill in dict.fromkeys(draft.class_skills) if skill in allowed]
        return SkillChoice(
            count=class_def.skill_choices.choose,
            options=options,
            selected=selected,
        )


__all__ = [
    "CatalogQueries",
    "item_type",
    "item_name",
]
