"""Pydantic V2 schemas for catalog entities, drafts, and engine results."""

from __future__ import annotations

from dnd_creator.models.catalog import (
    AbilityBonus,
    BackgroundDefinition,
    ClassDefinition,
    EquipmentChoice,
    EquipmentOptionGroup,
    Feature,
    KnownSpells,
    LimitedUse,
    PreparedSpells,
    RaceDefinition,
    SkillChoiceRule,
    SpellComponents,
    SpellDefinition,
    Spellbook,
    SpellcastingProfile,
    StartingGold,
    SubclassDefinition,
    SuggestedCharacteristics,
)
from dnd_creator.models.draft import AbilityScores, CharacterDraft
from dnd_creator.models.enums import (
    Ability,
    AbilityScoreMethod,
    CreationStep,
    FeatureSource,
    ItemType,
    RestType,
    Size,
    Skill,
    SlotProgression,
    SpellSchool,
    ValidationLevel,
)
from dnd_creator.models.results import (
    AbilityRoll,
    AbilityScoreRolls,
    BaseRaceOption,
    ClassResources,
    DerivedStats,
    EquipmentChoiceGroup,
    EquipmentItem,
    EquipmentOption,
    FlexibleBonusOptions,
    HitDice,
    PactMagicSlots,
    SkillChoice,
    SpellcastingInfo,
    ValidationError,
    ValidationSummary,
)


__all__ = [
    # Enums
    "Ability",
    "AbilityScoreMethod",
    "CreationStep",
    "FeatureSource",
    "ItemType",
    "RestType",
    "Size",
    "Skill",
    "SlotProgression",
    "SpellSchool",
    "ValidationLevel",
    # Catalog
    "AbilityBonus",
    "BackgroundDefinition",
    "ClassDefinition",
    "EquipmentChoice",
    "EquipmentOptionGroup",
    "Feature",
    "KnownSpells",
    "LimitedUse",
    "PreparedSpells",
    "RaceDefinition",
    "SkillChoiceRule",
    "SpellComponents",
    "SpellDefinition",
    "Spellbook",
    "SpellcastingProfile",
    "StartingGold",
    "SubclassDefinition",
    "SuggestedCharacteristics",
    # Draft
    "AbilityScores",
    "CharacterDraft",
    # Results
    "AbilityRoll",
    "AbilityScoreRolls",
    "BaseRaceOption",
    "ClassResources",
    "DerivedStats",
    "EquipmentChoiceGroup",
    "EquipmentItem",
    "EquipmentOption",
    "FlexibleBonusOptions",
    "HitDice",
    "PactMagicSlots",
    "SkillChoice",
    "SpellcastingInfo",
    "ValidationError",
    "ValidationSummary",
]
