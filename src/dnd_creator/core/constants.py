"""Rules constants for the D&D 5E character rules engine.

This module defines the fixed numbers of 5E character creation that are
shared across the catalog, calculators, and validators.
"""

from __future__ import annotations

# =============================================================================
# Ability Score Constants
# =============================================================================

MIN_ABILITY_SCORE = 1
"""Minimum ability score (1 is barely functioning)."""

MAX_ABILITY_SCORE = 30
"""Maximum ability score allowed by the rules."""

ROLLED_SCORE_MIN = 3
"""Lowest total of 4d6 drop lowest."""

ROLLED_SCORE_MAX = 18
"""Highest total of 4d6 drop lowest."""

ABILITY_ROLL_EXPRESSION = "4d6kh3"
"""Dice rolled for one ability score: four d6, keep the highest three."""

ABILITY_ROLL_DICE = 4
"""Number of dice rolled for one ability score."""

REROLL_MIN_MODIFIER_TOTAL = 1
"""Rolled sets whose modifiers sum below this are rerolled."""

REROLL_HIGH_SCORE = 15
"""Rolled sets without a score at least this high are rerolled."""

MAX_REROLL_ATTEMPTS = 10
"""Default cap on rerolls of a weak ability score set."""

# =============================================================================
# Point Buy Constants (PHB p.13)
# =============================================================================

POINT_BUY_TOTAL = 27
"""Total points available for point buy character creation."""

POINT_BUY_MIN = 8
"""Minimum ability score in point buy."""

POINT_BUY_MAX = 15
"""Maximum ability score in point buy (before racial bonuses)."""

POINT_BUY_COSTS: dict[int, int] = {
    8: 0,
    9: 1,
    10: 2,
    11: 3,
    12: 4,
    13: 5,
    14: 7,
    15: 9,
}

# =============================================================================
# Standard Array (PHB p.13)
# =============================================================================

STANDARD_ARRAY: tuple[int, ...] = (15, 14, 13, 12, 10, 8)
"""Standard array values for ability scores."""

# =============================================================================
# Character Constants
# =============================================================================

DEFAULT_SPEED = 30
"""Walking speed used when no race has been chosen yet."""

BASE_ARMOR_CLASS = 10
"""Unarmored armor class before the DEX modifier."""

PASSIVE_CHECK_BASE = 10
"""Base value of passive checks such as passive Perception."""

SPELL_SAVE_DC_BASE = 8
"""Base of the spell save DC formula."""

MIN_CHARACTER_LEVEL = 1
"""Minimum character level."""

MAX_SUPPORTED_LEVEL = 3
"""Highest level covered by the bundled feature and spell tables."""

SPELL_SLOT_LEVELS = 9
"""Number of spell levels in a spell slot row."""


__all__ = [
    # Ability Scores
    "MIN_ABILITY_SCORE",
    "MAX_ABILITY_SCORE",
    "ROLLED_SCORE_MIN",
    "ROLLED_SCORE_MAX",
    "ABILITY_ROLL_EXPRESSION",
    "ABILITY_ROLL_DICE",
    "REROLL_MIN_MODIFIER_TOTAL",
    "REROLL_HIGH_SCORE",
    "MAX_REROLL_ATTEMPTS",
    # Point Buy
    "POINT_BUY_TOTAL",
    "POINT_BUY_MIN",
    "POINT_BUY_MAX",
    "POINT_BUY_COSTS",
    # Standard Array
    "STANDARD_ARRAY",
    # Character
    "DEFAULT_SPEED",
    "BASE_ARMOR_CLASS",
    "PASSIVE_CHECK_BASE",
    "SPELL_SAVE_DC_BASE",
    "MIN_CHARACTER_LEVEL",
    "MAX_SUPPORTED_LEVEL",
    "SPELL_SLOT_LEVELS",
]
