"""Enumeration types for the D&D 5E character rules engine.

This module defines the enumeration types used throughout the engine,
including ability scores, skills, spell schools, and the vocabulary of
validation results. These enums serve as the foundation for type-safe
5E character creation.
"""

from __future__ import annotations

from enum import StrEnum


class Ability(StrEnum):
    """D&D 5E ability scores.

    The six core abilities that define a character's physical
    and mental characteristics.
    """

    STR = "strength"
    DEX = "dexterity"
    CON = "constitution"
    INT = "intelligence"
    WIS = "wisdom"
    CHA = "charisma"

    @property
    def full_name(self) -> str:
        """Get the full name of the ability.

        Returns:
            Full ability name (e.g., 'Strength' for STR).
        """
        return self.value.capitalize()

    @property
    def abbreviation(self) -> str:
        """Get the three-letter abbreviation.

        Returns:
            Three-letter abbreviation (e.g., 'STR').
        """
        return self.name


class Skill(StrEnum):
    """D&D 5E skills and their associated abilities.

    Each skill is linked to a primary ability score used
    for skill checks.
    """

    # Strength skills
    ATHLETICS = "athletics"

    # Dexterity skills
    ACROBATICS = "acrobatics"
    SLEIGHT_OF_HAND = "sleight_of_hand"
    STEALTH = "stealth"

    # Intelligence skills
    ARCANA = "arcana"
    HISTORY = "history"
    INVESTIGATION = "investigation"
    NATURE = "nature"
    RELIGION = "religion"

    # Wisdom skills
    ANIMAL_HANDLING = "animal_handling"
    INSIGHT = "insight"
    MEDICINE = "medicine"
    PERCEPTION = "perception"
    SURVIVAL = "survival"

    # Charisma skills
    DECEPTION = "deception"
    INTIMIDATION = "intimidation"
    PERFORMANCE = "performance"
    PERSUASION = "persuasion"

    @property
    def ability(self) -> Ability:
        """Get the primary ability score for this skill.

        Returns:
            The Ability enum value associated with this skill.
        """
        return _SKILL_ABILITIES[self]

    @property
    def display_name(self) -> str:
        """Get the human-readable skill name.

        Returns:
            Title-cased name (e.g., 'Sleight of Hand').
        """
        words = self.value.split("_")
        return " ".join(w if w == "of" else w.capitalize() for w in words)


_SKILL_ABILITIES: dict[Skill, Ability] = {
    Skill.ATHLETICS: Ability.STR,
    Skill.ACROBATICS: Ability.DEX,
    Skill.SLEIGHT_OF_HAND: Ability.DEX,
    Skill.STEALTH: Ability.DEX,
    Skill.ARCANA: Ability.INT,
    Skill.HISTORY: Ability.INT,
    Skill.INVESTIGATION: Ability.INT,
    Skill.NATURE: Ability.INT,
    Skill.RELIGION: Ability.INT,
    Skill.ANIMAL_HANDLING: Ability.WIS,
    Skill.INSIGHT: Ability.WIS,
    Skill.MEDICINE: Ability.WIS,
    Skill.PERCEPTION: Ability.WIS,
    Skill.SURVIVAL: Ability.WIS,
    Skill.DECEPTION: Ability.CHA,
    Skill.INTIMIDATION: Ability.CHA,
    Skill.PERFORMANCE: Ability.CHA,
    Skill.PERSUASION: Ability.CHA,
}


class Size(StrEnum):
    """D&D 5E creature sizes available to player races."""

    SMALL = "small"
    MEDIUM = "medium"


class SpellSchool(StrEnum):
    """D&D 5E schools of magic."""

    ABJURATION = "abjuration"
    CONJURATION = "conjuration"
    DIVINATION = "divination"
    ENCHANTMENT = "enchantment"
    EVOCATION = "evocation"
    ILLUSION = "illusion"
    NECROMANCY = "necromancy"
    TRANSMUTATION = "transmutation"


class SlotProgression(StrEnum):
    """How a spellcasting class gains spell slots."""

    FULL = "full"
    HALF = "half"
    PACT = "pact"


class RestType(StrEnum):
    """Types of rest in D&D 5E."""

    SHORT_REST = "short_rest"
    LONG_REST = "long_rest"


class FeatureSource(StrEnum):
    """Where a character feature comes from."""

    RACE = "race"
    CLASS = "class"
    SUBCLASS = "subclass"
    BACKGROUND = "background"


class ItemType(StrEnum):
    """Coarse item categories used when presenting equipment choices."""

    WEAPON = "weapon"
    ARMOR = "armor"
    GEAR = "gear"
    TOOL = "tool"
    PACK = "pack"


class AbilityScoreMethod(StrEnum):
    """How a draft's base ability scores were generated."""

    MANUAL = "manual"
    POINT_BUY = "point_buy"
    STANDARD_ARRAY = "standard_array"
    ROLLED = "rolled"


class ValidationLevel(StrEnum):
    """Severity of a validation result. Only errors block completion."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class CreationStep(StrEnum):
    """Character-creation steps a validation result is scoped to.

    Members are declared in the order results are reported.
    """

    BASICS = "basics"
    ABILITY_SCORES = "ability_scores"
    RACE = "race"
    CLASS = "class"
    SPELLS = "spells"
    BACKGROUND = "background"
    EQUIPMENT = "equipment"


__all__ = [
    "Ability",
    "Skill",
    "Size",
    "SpellSchool",
    "SlotProgression",
    "RestType",
    "FeatureSource",
    "ItemType",
    "AbilityScoreMethod",
    "ValidationLevel",
    "CreationStep",
]
