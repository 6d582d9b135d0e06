"""Catalog definition models for the D&D 5E character rules engine.

This module defines the immutable Pydantic V2 schemas for everything a
player can pick while building a character: classes and their subclasses,
races and subraces, backgrounds, and spells. Instances are created once
from static data and shared read-only for the life of the process.

Structural invariants that span several entities (unique ids, subclass
ownership, base-race references) are checked by the catalog store when it
is built, so a malformed definition can still be constructed here and
rejected there with a descriptive CatalogError.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

from dnd_creator.models.enums import (
    Ability,
    FeatureSource,
    RestType,
    Size,
    Skill,
    SlotProgression,
    SpellSchool,
)


# =============================================================================
# Identifiers
# =============================================================================

KEBAB_CASE_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"

EntityId = Annotated[str, Field(pattern=KEBAB_CASE_PATTERN, description="Kebab-case id")]

# Per-catalog aliases document which table an id refers to.
ClassId = EntityId
SubclassId = EntityId
RaceId = EntityId
BackgroundId = EntityId
SpellId = EntityId
ItemId = EntityId

SRD_SOURCE = "SRD 5.1"


class CatalogModel(BaseModel):
    """Base for immutable catalog entities."""

    model_config = ConfigDict(frozen=True, extra="forbid")


# =============================================================================
# Features
# =============================================================================


class LimitedUse(CatalogModel):
    """Uses of a feature that recharge on a rest.

    Attributes:
        max_uses: Number of uses between rests.
        reset_on: Rest that restores the uses.
    """

    max_uses: int = Field(ge=1)
    reset_on: RestType


class Feature(CatalogModel):
    """A named rules feature granted by a race, class, subclass, or background."""

    id: EntityId
    name: str = Field(min_length=1)
    description: str = ""
    source: FeatureSource
    limited_use: LimitedUse | None = None


# =============================================================================
# Class Building Blocks
# =============================================================================


class SkillChoiceRule(CatalogModel):
    """Skill proficiencies a class lets the player choose.

    Attributes:
        choose: Number of skills to pick.
        options: Skills that may be picked, in display order.
    """

    choose: int = Field(ge=0)
    options: tuple[Skill, ...]


class EquipmentChoice(CatalogModel):
    """One option inside an equipment choice group.

    Attributes:
        id: Option identifier.
        description: Player-facing description (e.g., "(a) a greataxe").
        items: Item ids granted by the option. Repeated ids mean quantity.
    """

    id: EntityId
    description: str
    items: tuple[ItemId, ...]


class EquipmentOptionGroup(CatalogModel):
    """A group of mutually exclusive starting-equipment options."""

    group_id: EntityId
    options: tuple[EquipmentChoice, ...] = Field(min_length=1)


class StartingGold(CatalogModel):
    """Starting-gold formula used instead of class equipment.

    Attributes:
        dice: Dice expression rolled (e.g., "2d4").
        multiplier: Multiplier applied to the roll, in gold pieces.
    """

    dice: str = Field(pattern=r"^\d+d\d+$")
    multiplier: int = Field(default=1, ge=1)


# =============================================================================
# Spellcasting Profile
# =============================================================================


class Spellbook(CatalogModel):
    """Spellbook metadata for book-based known casters."""

    starting_spells: int = Field(ge=0)
    spells_per_level: int = Field(ge=0)


class KnownSpells(CatalogModel):
    """Known-spell economy: a fixed number of spells learned per level.

    Pact-magic casters use this economy as well.
    """

    kind: Literal["known"] = "known"
    spells_known: dict[int, int]
    spellbook: Spellbook | None = None


class PreparedSpells(CatalogModel):
    """Prepared-spell economy: a daily subset sized by a formula.

    The formula is a sum of terms such as ``WIS_MOD + LEVEL`` or
    ``CHA_MOD + HALF_LEVEL`` and is parsed when the catalog is built.
    """

    kind: Literal["prepared"] = "prepared"
    formula: str = Field(min_length=1)


SpellSelection = Annotated[KnownSpells | PreparedSpells, Field(discriminator="kind")]


class SpellcastingProfile(CatalogModel):
    """How a class casts spells.

    Attributes:
        ability: Spellcasting ability.
        cantrips_known: Cantrips known by class level. Missing levels mean 0.
        spell_selection: Exactly one of the known or prepared economies.
        slot_progression: Which slot table the class uses.
        ritual_casting: Whether the class may cast rituals.
        spell_list_id: Id used to match spells' class lists.
    """

    ability: Ability
    cantrips_known: dict[int, int] = Field(default_factory=dict)
    spell_selection: SpellSelection
    slot_progression: SlotProgression
    ritual_casting: bool = False
    spell_list_id: ClassId


# =============================================================================
# Classes
# =============================================================================


class SubclassDefinition(CatalogModel):
    """A subclass (archetype, domain, circle, ...) of one class.

    Attributes:
        id: Subclass identifier.
        name: Display name.
        class_id: Owning class.
        description: Flavor text.
        features: Features keyed by class level.
        expanded_spells: Bonus spells keyed by spell level.
        source: Source document.
    """

    id: SubclassId
    name: str
    class_id: ClassId
    description: str = ""
    features: dict[int, tuple[Feature, ...]]
    expanded_spells: dict[int, tuple[SpellId, ...]] = Field(default_factory=dict)
    source: str = SRD_SOURCE


class ClassDefinition(CatalogModel):
    """A character class with its proficiencies, features, and progression.

    Attributes:
        id: Class identifier.
        name: Display name.
        hit_die: Hit die size.
        primary_abilities: Abilities the class relies on.
        saving_throws: Saving throw proficiencies (always two).
        armor_proficiencies: Armor categories the class may wear.
        weapon_proficiencies: Weapon categories the class may use.
        tool_proficiencies: Tools the class is proficient with.
        skill_choices: Skill proficiencies the player chooses.
        equipment_options: Starting equipment choice groups.
        features: Class features keyed by class level.
        subclass_level: Level at which the subclass is chosen.
        subclasses: Available subclasses.
        starting_gold: Optional starting-gold formula.
        spellcasting: Spellcasting profile, absent for non-casters.
        description: Flavor text.
        source: Source document.
    """

    id: ClassId
    name: str
    hit_die: Literal[6, 8, 10, 12]
    primary_abilities: tuple[Ability, ...]
    saving_throws: tuple[Ability, ...]
    armor_proficiencies: tuple[str, ...] = ()
    weapon_proficiencies: tuple[str, ...] = ()
    tool_proficiencies: tuple[str, ...] = ()
    skill_choices: SkillChoiceRule
    equipment_options: tuple[EquipmentOptionGroup, ...] = ()
    features: dict[int, tuple[Feature, ...]]
    subclass_level: int
    subclasses: tuple[SubclassDefinition, ...]
    starting_gold: StartingGold | None = None
    spellcasting: SpellcastingProfile | None = None
    description: str = ""
    source: str = SRD_SOURCE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_spellcaster(self) -> bool:
        """Check whether the class has a spellcasting profile."""
        return self.spellcasting is not None

    def get_subclass(self, subclass_id: str | None) -> SubclassDefinition | None:
        """Look up one of this class's subclasses.

        Args:
            subclass_id: Subclass identifier.

        Returns:
            The subclass, or None if it does not belong to this class.
        """
        for subclass in self.subclasses:
            if subclass.id == subclass_id and subclass.class_id == self.id:
                return subclass
        return None


# =============================================================================
# Races
# =============================================================================


class AbilityBonus(CatalogModel):
    """A racial ability score increase.

    Either a fixed bonus to one ability, or a flexible entry
    (``ability == "choice"``) letting the player pick ``choice_count``
    different abilities that each receive ``bonus``.
    """

    ability: Ability | Literal["choice"]
    bonus: int = Field(ge=1)
    choice_count: int | None = None
    excluded_abilities: tuple[Ability, ...] = ()

    @property
    def is_choice(self) -> bool:
        """Check whether this is a flexible bonus entry."""
        return self.ability == "choice"


class RaceDefinition(CatalogModel):
    """A race or subrace.

    Base races that have subraces are catalog entries too; they carry the
    traits shared by all of their subraces.
    """

    id: RaceId
    name: str
    base_race: RaceId | None = None
    size: Size = Size.MEDIUM
    speed: int = Field(default=30, ge=0)
    ability_bonuses: tuple[AbilityBonus, ...] = ()
    traits: tuple[Feature, ...] = ()
    languages: tuple[str, ...] = ()
    language_choices: int = Field(default=0, ge=0)
    description: str = ""
    source: str = SRD_SOURCE

    @property
    def is_subrace(self) -> bool:
        """Check whether this race refines a base race."""
        return self.base_race is not None

    @property
    def fixed_bonuses(self) -> dict[Ability, int]:
        """Sum of fixed ability bonuses, by ability.

        Returns:
            Mapping of ability to bonus.
        """
        totals: dict[Ability, int] = {}
        for entry in self.ability_bonuses:
            if isinstance(entry.ability, Ability):
                totals[entry.ability] = totals.get(entry.ability, 0) + entry.bonus
        return totals

    @property
    def flexible_bonus(self) -> AbilityBonus | None:
        """First flexible ("choice") bonus entry, if any."""
        for entry in self.ability_bonuses:
            if entry.is_choice:
                return entry
        return None


# =============================================================================
# Backgrounds
# =============================================================================


class SuggestedCharacteristics(CatalogModel):
    """Roleplaying prompts offered by a background."""

    traits: tuple[str, ...] = ()
    ideals: tuple[str, ...] = ()
    bonds: tuple[str, ...] = ()
    flaws: tuple[str, ...] = ()


class BackgroundDefinition(CatalogModel):
    """A character background.

    Attributes:
        id: Background identifier.
        name: Display name.
        skill_proficiencies: Granted skills (always two).
        tool_proficiencies: Granted tool proficiencies.
        language_choices: Number of extra languages to choose.
        equipment: Starting equipment item ids.
        starting_gold: Gold pieces in the starting pouch.
        feature: The background feature.
        suggested_characteristics: Personality prompts.
        description: Flavor text.
        source: Source document. Required.
    """

    id: BackgroundId
    name: str
    skill_proficiencies: tuple[Skill, ...]
    tool_proficiencies: tuple[str, ...] = ()
    language_choices: int = Field(default=0, ge=0)
    equipment: tuple[ItemId, ...] = ()
    starting_gold: int = Field(default=0, ge=0)
    feature: Feature
    suggested_characteristics: SuggestedCharacteristics = Field(
        default_factory=SuggestedCharacteristics
    )
    description: str = ""
    source: str


# =============================================================================
# Spells
# =============================================================================


class SpellComponents(CatalogModel):
    """Verbal, somatic, and material components of a spell."""

    verbal: bool = False
    somatic: bool = False
    material: bool = False
    material_description: str | None = None


class SpellDefinition(CatalogModel):
    """A spell in the SRD spell list.

    Attributes:
        id: Spell identifier.
        name: Display name.
        level: Spell level, 0 for cantrips.
        school: School of magic.
        casting_time: Casting time text.
        range: Range text.
        components: Spell components.
        duration: Duration text.
        ritual: Whether the spell can be cast as a ritual.
        concentration: Whether the spell requires concentration.
        classes: Class spell lists that include this spell.
        description: Rules text summary.
        source: Source document.
    """

    id: SpellId
    name: str
    level: int = Field(ge=0, le=9)
    school: SpellSchool
    casting_time: str = "1 action"
    range: str = "Self"
    components: SpellComponents = Field(default_factory=SpellComponents)
    duration: str = "Instantaneous"
    ritual: bool = False
    concentration: bool = False
    classes: tuple[ClassId, ...]
    description: str = ""
    source: str = SRD_SOURCE

    @property
    def is_cantrip(self) -> bool:
        """Check whether this is a cantrip."""
        return self.level == 0


__all__ = [
    "KEBAB_CASE_PATTERN",
    "SRD_SOURCE",
    "EntityId",
    "ClassId",
    "SubclassId",
    "RaceId",
    "BackgroundId",
    "SpellId",
    "ItemId",
    "CatalogModel",
    "LimitedUse",
    "Feature",
    "SkillChoiceRule",
    "EquipmentChoice",
    "EquipmentOptionGroup",
    "StartingGold",
    "Spellbook",
    "KnownSpells",
    "PreparedSpells",
    "SpellSelection",
    "SpellcastingProfile",
    "SubclassDefinition",
    "ClassDefinition",
    "AbilityBonus",
    "RaceDefinition",
    "SuggestedCharacteristics",
    "BackgroundDefinition",
    "SpellComponents",
    "SpellDefinition",
]
