"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the D&D 5E character rules engine test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dnd_creator.models import AbilityScoreMethod, AbilityScores, CharacterDraft, Skill


if TYPE_CHECKING:
    from collections.abc import Generator

    from dnd_creator.catalog.store import CatalogStore
    from dnd_creator.engine import (
        CatalogQueries,
        RulesEngine,
        SpellcastingCalculator,
        ValidationEngine,
    )


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_caches() -> Generator[None, None, None]:
    """Reset the settings, catalog, and engine caches around each test."""
    from dnd_creator.catalog.store import clear_catalog_cache
    from dnd_creator.core.config import clear_settings_cache
    from dnd_creator.engine.rules_engine import clear_rules_engine_cache

    clear_settings_cache()
    clear_catalog_cache()
    clear_rules_engine_cache()
    yield
    clear_rules_engine_cache()
    clear_catalog_cache()
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "DND_CREATOR_DEBUG": "true",
        "DND_CREATOR_LOG_LEVEL": "DEBUG",
        "DND_CREATOR_RULES_MAX_CHARACTER_LEVEL": "2",
        "DND_CREATOR_RULES_POINT_BUY_TOTAL": "30",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def catalog() -> CatalogStore:
    """Provide the bundled SRD catalog."""
    from dnd_creator.catalog import get_catalog

    return get_catalog()


@pytest.fixture
def queries(catalog: CatalogStore) -> CatalogQueries:
    """Provide a query facade over the SRD catalog."""
    from dnd_creator.engine import CatalogQueries

    return CatalogQueries(catalog)


@pytest.fixture
def spellcasting(catalog: CatalogStore) -> SpellcastingCalculator:
    """Provide a spellcasting calculator over the SRD catalog."""
    from dnd_creator.engine import SpellcastingCalculator

    return SpellcastingCalculator(catalog)


@pytest.fixture
def validator(catalog: CatalogStore) -> ValidationEngine:
    """Provide a validation engine with default rules settings."""
    from dnd_creator.core.config import RulesSettings
    from dnd_creator.engine import ValidationEngine

    return ValidationEngine(catalog, rules=RulesSettings())


@pytest.fixture
def rules_engine(catalog: CatalogStore) -> RulesEngine:
    """Provide a rules engine facade with default rules settings."""
    from dnd_creator.core.config import RulesSettings
    from dnd_creator.engine import RulesEngine

    return RulesEngine(catalog, rules=RulesSettings())


# =============================================================================
# Draft Fixtures
# =============================================================================


@pytest.fixture
def standard_array_scores() -> AbilityScores:
    """Standard array arranged for a Wisdom caster."""
    return AbilityScores(
        strength=13,
        dexterity=10,
        constitution=14,
        intelligence=8,
        wisdom=15,
        charisma=12,
    )


@pytest.fixture
def cleric_draft(standard_array_scores: AbilityScores) -> CharacterDraft:
    """A complete, valid level 1 hill dwarf Life Domain cleric acolyte."""
    return CharacterDraft(
        name="Mira Stonehand",
        level=1,
        class_id="cleric",
        subclass_id="life-domain",
        base_race_id="dwarf",
        subrace_id="hill-dwarf",
        background_id="acolyte",
        ability_scores=standard_array_scores,
        ability_score_method=AbilityScoreMethod.STANDARD_ARRAY,
        class_skills=[Skill.MEDICINE, Skill.PERSUASION],
        cantrips=["guidance", "sacred-flame", "spare-the-dying"],
        equipment_choices={
            "cleric-weapon": 0,
            "cleric-armor": 0,
            "cleric-weapon-2": 0,
            "cleric-pack": 0,
            "cleric-standard": 0,
        },
    )


@pytest.fixture
def wizard_draft() -> CharacterDraft:
    """A complete, valid level 1 high elf wizard sage."""
    return CharacterDraft(
        name="Elowen",
        level=1,
        class_id="wizard",
        base_race_id="elf",
        subrace_id="high-elf",
        background_id="sage",
        ability_scores=AbilityScores(
            strength=8,
            dexterity=14,
            constitution=13,
            intelligence=15,
            wisdom=12,
            charisma=10,
        ),
        ability_score_method=AbilityScoreMethod.STANDARD_ARRAY,
        class_skills=[Skill.INVESTIGATION, Skill.INSIGHT],
        cantrips=["fire-bolt", "mage-hand", "light"],
        spells=[
            "magic-missile",
            "shield",
            "mage-armor",
            "sleep",
            "find-familiar",
            "detect-magic",
        ],
        equipment_choices={
            "wizard-weapon": 0,
            "wizard-focus": 1,
            "wizard-pack": 0,
            "wizard-standard": 0,
        },
    )
