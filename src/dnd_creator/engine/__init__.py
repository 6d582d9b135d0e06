"""Rules engine: queries, calculators, and validation over the catalog.

Exports:
    CatalogQueries: Option queries for each creation step.
    SpellcastingCalculator: Spellcasting profile and available spells.
    ValidationEngine: Step-scoped draft validation.
    RulesEngine: Facade bundling all of the above.
    derive_stats: Combat statistics for a draft.
    roll_dice: d20-backed dice rolling used by the rolling helpers.
"""

from __future__ import annotations

from dnd_creator.engine.ability_scores import (
    apply_racial_bonuses,
    assign_rolled_scores,
    point_buy_cost,
    points_remaining,
    points_spent,
    racial_bonus_map,
    roll_ability_scores_with_reroll,
)
from dnd_creator.engine.derived_stats import (
    ability_modifier,
    derive_stats,
    level_up_hit_points,
    proficiency_bonus,
)
from dnd_creator.engine.dice import roll_dice
from dnd_creator.engine.queries import CatalogQueries
from dnd_creator.engine.rules_engine import (
    RulesEngine,
    clear_rules_engine_cache,
    get_rules_engine,
)
from dnd_creator.engine.spellcasting import SpellcastingCalculator
from dnd_creator.engine.validation import ValidationEngine


__all__ = [
    # Ability scores
    "apply_racial_bonuses",
    "assign_rolled_scores",
    "point_buy_cost",
    "points_remaining",
    "points_spent",
    "racial_bonus_map",
    "roll_ability_scores_with_reroll",
    # Derived stats
    "ability_modifier",
    "derive_stats",
    "level_up_hit_points",
    "proficiency_bonus",
    # Dice
    "roll_dice",
    # Components
    "CatalogQueries",
    "SpellcastingCalculator",
    "ValidationEngine",
    # Facade
    "RulesEngine",
    "get_rules_engine",
    "clear_rules_engine_cache",
]
