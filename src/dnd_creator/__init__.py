"""dnd_creator - D&D 5E SRD Character Rules Engine.

A pure, synchronous library that answers three questions for a character
creation flow:

- Which options are legal right now (classes, subclasses, races,
  backgrounds, spells, skills, starting equipment)?
- What statistics follow from the current draft (ability modifiers,
  hit points, armor class, spell save DC, spell slots)?
- What is still wrong with the draft, step by step?

The engine never stores or mutates the draft. Every result is an immutable
Pydantic model that serializes with ``model_dump(mode="json")``.

Example:
    >>> from dnd_creator import CharacterDraft, get_rules_engine
    >>>
    >>> engine = get_rules_engine()
    >>> draft = CharacterDraft(name="Mira", class_id="cleric", level=1)
    >>> [e.code for e in engine.validate_step(draft, "class")]
    ['SUBCLASS_REQUIRED', 'SKILL_COUNT']
    >>>
    >>> draft = draft.model_copy(update={"subclass_id": "life-domain"})
    >>> engine.spellcasting_info(draft).max_spells_prepared
    1

Modules:
    core: Configuration, logging, constants, and exceptions.
    models: Pydantic V2 schemas for catalog entities, drafts, and results.
    catalog: Static SRD data and the validated catalog store.
    engine: Queries, calculators, validation, and the rules engine facade.
"""

from __future__ import annotations

# Core
from dnd_creator.core.config import Settings, get_settings
from dnd_creator.core.exceptions import CatalogError, ConfigurationError, RulesEngineError
from dnd_creator.core.logging import configure_logging, get_logger

# Catalog
from dnd_creator.catalog import CatalogStore, get_catalog

# Engine
from dnd_creator.engine import (
    CatalogQueries,
    RulesEngine,
    SpellcastingCalculator,
    ValidationEngine,
    ability_modifier,
    derive_stats,
    get_rules_engine,
    proficiency_bonus,
)

# Models
from dnd_creator.models import (
    Ability,
    AbilityScoreMethod,
    AbilityScores,
    CharacterDraft,
    CreationStep,
    DerivedStats,
    Skill,
    SpellcastingInfo,
    ValidationError,
    ValidationLevel,
)


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "RulesEngineError",
    "ConfigurationError",
    "CatalogError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Catalog
    "CatalogStore",
    "get_catalog",
    # Engine
    "CatalogQueries",
    "SpellcastingCalculator",
    "ValidationEngine",
    "RulesEngine",
    "get_rules_engine",
    "ability_modifier",
    "derive_stats",
    "proficiency_bonus",
    # Models
    "Ability",
    "AbilityScoreMethod",
    "AbilityScores",
    "CharacterDraft",
    "CreationStep",
    "DerivedStats",
    "Skill",
    "SpellcastingInfo",
    "ValidationError",
    "ValidationLevel",
]
