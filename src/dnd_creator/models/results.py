"""Result value types returned by the rules engine.

Every result is an immutable Pydantic model with no reference back to the
catalog or the draft, so it can be cached, diffed, or serialized with
``model_dump(mode="json")``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from dnd_creator.models.catalog import ItemId, SpellId
from dnd_creator.models.enums import (
    Ability,
    CreationStep,
    ItemType,
    Skill,
    SlotProgression,
    ValidationLevel,
)


class ResultModel(BaseModel):
    """Base for immutable engine outputs."""

    model_config = ConfigDict(frozen=True, extra="forbid")


# =============================================================================
# Validation Results
# =============================================================================


class ValidationError(ResultModel):
    """A single validation finding scoped to a creation step.

    Attributes:
        level: Severity. Only errors block completion.
        step: Creation step the finding belongs to.
        field: Draft field the finding refers to, if any.
        code: Stable machine-readable code.
        message: Human-readable explanation.
    """

    level: ValidationLevel
    step: CreationStep
    field: str | None = None
    code: str
    message: str

    @property
    def is_error(self) -> bool:
        """Check whether this finding blocks completion."""
        return self.level is ValidationLevel.ERROR


class ValidationSummary(ResultModel):
    """Validation findings split by severity."""

    is_valid: bool
    errors: list[ValidationError] = Field(default_factory=list)
    warnings: list[ValidationError] = Field(default_factory=list)
    info: list[ValidationError] = Field(default_factory=list)


# =============================================================================
# Query Results
# =============================================================================


class BaseRaceOption(ResultModel):
    """A selectable top-level race."""

    id: str
    name: str
    has_subraces: bool


class FlexibleBonusOptions(ResultModel):
    """What a race's flexible ability bonus allows.

    Attributes:
        choice_count: Number of different abilities to pick.
        bonus: Bonus applied to each picked ability.
        eligible_abilities: Abilities that may be picked, in canonical order.
    """

    choice_count: int
    bonus: int
    eligible_abilities: list[Ability]


class SkillChoice(ResultModel):
    """Skill choices offered by the selected class.

    Attributes:
        count: Exact number of skills to pick.
        options: Legal skills, in class declaration order.
        selected: The draft's picks restricted to the legal options.
    """

    count: int
    options: list[Skill]
    selected: list[Skill]


class EquipmentItem(ResultModel):
    """An item granted by an equipment option."""

    id: ItemId
    name: str
    type: ItemType
    quantity: int = 1


class EquipmentOption(ResultModel):
    """One option of an equipment choice group."""

    id: str
    name: str
    items: list[EquipmentItem]


class EquipmentChoiceGroup(ResultModel):
    """A starting-equipment decision presented to the player."""

    id: str
    description: str
    options: list[EquipmentOption]


class ClassResources(ResultModel):
    """Level-dependent class resources from the progression tables.

    Fields that do not apply to the class are None.
    """

    class_id: str
    level: int
    sneak_attack_dice: str | None = None
    martial_arts_die: str | None = None
    rages_per_day: int | None = None


# =============================================================================
# Spellcasting Results
# =============================================================================


class PactMagicSlots(ResultModel):
    """The homogeneous slot pool of a pact-magic caster."""

    slot_count: int
    slot_level: int


class SpellcastingInfo(ResultModel):
    """A draft's spellcasting profile.

    Fields that do not apply are None: ``max_spells_known`` is None for a
    prepared caster, ``max_spells_prepared`` is None for a known caster,
    and every optional field is None for a non-caster.
    """

    is_spellcaster: bool
    casting_ability: Ability | None = None
    level: int = 0
    proficiency_bonus: int = 0
    ability_modifier: int = 0
    spell_save_dc: int = 0
    spell_attack_bonus: int = 0
    cantrips_known: int = 0
    max_spells_known: int | None = None
    max_spells_prepared: int | None = None
    spellbook_size: int | None = None
    slot_progression: SlotProgression | None = None
    spell_slots: list[int] = Field(default_factory=list)
    pact_magic: PactMagicSlots | None = None
    ritual_casting: bool = False
    expanded_spells: list[SpellId] = Field(default_factory=list)


# =============================================================================
# Rolled Ability Scores
# =============================================================================


class AbilityRoll(ResultModel):
    """One 4d6-drop-lowest roll.

    Attributes:
        rolls: All four dice, in roll order.
        dropped: The lowest die, excluded from the total.
        total: Sum of the three highest dice.
    """

    rolls: tuple[int, ...]
    dropped: int
    total: int


class AbilityScoreRolls(ResultModel):
    """A set of six rolled scores, unassigned to abilities.

    Attributes:
        scores: Rolled totals, in roll order.
        history: The roll behind each score.
        rerolls: How many weak sets were discarded before this one.
    """

    scores: tuple[int, ...]
    history: tuple[AbilityRoll, ...]
    rerolls: int = Field(default=0, ge=0)


# =============================================================================
# Derived Stats
# =============================================================================


class HitDice(ResultModel):
    """Hit dice pool."""

    size: int
    total: int

    @property
    def notation(self) -> str:
        """Dice notation (e.g., '3d8')."""
        return f"{self.total}d{self.size}"


class DerivedStats(ResultModel):
    """Combat statistics derived from a draft.

    Attributes:
        final_ability_scores: Base scores plus racial bonuses.
        ability_modifiers: Modifier for each final score.
        proficiency_bonus: Proficiency bonus for the level.
        max_hp: Maximum hit points. Zero until a class is chosen.
        armor_class: Unarmored armor class.
        initiative: Initiative modifier.
        speed: Walking speed in feet.
        passive_perception: Passive Wisdom (Perception).
        proficient_skills: Skills the character is proficient in.
        saving_throws: Saving throw bonus for each ability.
        skill_bonuses: Check bonus for each skill.
        hit_dice: Hit dice pool, absent until a class is chosen.
    """

    final_ability_scores: dict[Ability, int]
    ability_modifiers: dict[Ability, int]
    proficiency_bonus: int
    max_hp: int
    armor_class: int
    initiative: int
    speed: int
    passive_perception: int
    proficient_skills: list[Skill]
    saving_throws: dict[Ability, int]
    skill_bonuses: dict[Skill, int]
    hit_dice: HitDice | None = None


__all__ = [
    "ResultModel",
    "ValidationError",
    "ValidationSummary",
    "BaseRaceOption",
    "FlexibleBonusOptions",
    "SkillChoice",
    "EquipmentItem",
    "EquipmentOption",
    "EquipmentChoiceGroup",
    "ClassResources",
    "PactMagicSlots",
    "SpellcastingInfo",
    "AbilityRoll",
    "AbilityScoreRolls",
    "HitDice",
    "DerivedStats",
]
