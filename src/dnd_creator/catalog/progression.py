"""D&D 5E level progression data.

This module contains the static progression tables the calculators read:
- Proficiency bonus by level
- Spell slots for full and half casters
- Pact magic slots
- Class resource dice (sneak attack, martial arts, rages)

All values come from the SRD. The full- and half-caster tables cover
levels 1-20; the pact-magic table only covers the levels the bundled
ruleset supports.
"""

from __future__ import annotations

from dnd_creator.core.constants import SPELL_SLOT_LEVELS
from dnd_creator.models.enums import SlotProgression


# =============================================================================
# Proficiency Bonus by Level (PHB p.15)
# =============================================================================


def get_proficiency_bonus(level: int) -> int:
    """Get proficiency bonus for a given level. Levels below 1 count as 1."""
    if level <= 4:
        return 2
    if level <= 8:
        return 3
    if level <= 12:
        return 4
    if level <= 16:
        return 5
    return 6  # Levels 17-20


# =============================================================================
# Spell Slots by Class Level
# =============================================================================

# Full casters: Bard, Cleric, Druid, Sorcerer, Wizard
FULL_CASTER_SLOTS: dict[int, dict[int, int]] = {
    1:  {1: 2},
    2:  {1: 3},
    3:  {1: 4, 2: 2},
    4:  {1: 4, 2: 3},
    5:  {1: 4, 2: 3, 3: 2},
    6:  {1: 4, 2: 3, 3: 3},
    7:  {1: 4, 2: 3, 3: 3, 4: 1},
    8:  {1: 4, 2: 3, 3: 3, 4: 2},
    9:  {1: 4, 2: 3, 3: 3, 4: 3, 5: 1},
    10: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2},
    11: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1},
    12: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1},
    13: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1, 7: 1},
    14: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1, 7: 1},
    15: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1, 7: 1, 8: 1},
    16: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1, 7: 1, 8: 1},
    17: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1, 7: 1, 8: 1, 9: 1},
    18: {1: 4, 2: 3, 3: 3, 4: 3, 5: 3, 6: 1, 7: 1, 8: 1, 9: 1},
    19: {1: 4, 2: 3, 3: 3, 4: 3, 5: 3, 6: 2, 7: 1, 8: 1, 9: 1},
    20: {1: 4, 2: 3, 3: 3, 4: 3, 5: 3, 6: 2, 7: 2, 8: 1, 9: 1},
}

# Half casters: Paladin, Ranger (start at level 2)
HALF_CASTER_SLOTS: dict[int, dict[int, int]] = {
    1:  {},
    2:  {1: 2},
    3:  {1: 3},
    4:  {1: 3},
    5:  {1: 4, 2: 2},
    6:  {1: 4, 2: 2},
    7:  {1: 4, 2: 3},
    8:  {1: 4, 2: 3},
    9:  {1: 4, 2: 3, 3: 2},
    10: {1: 4, 2: 3, 3: 2},
    11: {1: 4, 2: 3, 3: 3},
    12: {1: 4, 2: 3, 3: 3},
    13: {1: 4, 2: 3, 3: 3, 4: 1},
    14: {1: 4, 2: 3, 3: 3, 4: 1},
    15: {1: 4, 2: 3, 3: 3, 4: 2},
    16: {1: 4, 2: 3, 3: 3, 4: 2},
    17: {1: 4, 2: 3, 3: 3, 4: 3, 5: 1},
    18: {1: 4, 2: 3, 3: 3, 4: 3, 5: 1},
    19: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2},
    20: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2},
}

# Pact magic: level -> (num_slots, slot_level). Levels 4+ are not bundled.
PACT_MAGIC_SLOTS: dict[int, tuple[int, int]] = {
    1: (1, 1),
    2: (2, 1),
    3: (2, 2),
}

_SLOT_TABLES: dict[SlotProgression, dict[int, dict[int, int]]] = {
    SlotProgression.FULL: FULL_CASTER_SLOTS,
    SlotProgression.HALF: HALF_CASTER_SLOTS,
}


def spell_slots_for(progression: SlotProgression, level: int) -> list[int]:
    """Get the nine-entry slot row for a class level.

    Args:
        progression: The class's slot progression.
        level: Class level.

    Returns:
        Slots per spell level 1-9. Pact casters get an empty list because
        their slots are not leveled; use pact_magic_for instead.
    """
    table = _SLOT_TABLES.get(progression)
    if table is None:
        return []
    row = table.get(level, {})
    return [row.get(spell_level, 0) for spell_level in range(1, SPELL_SLOT_LEVELS + 1)]


def pact_magic_for(level: int) -> tuple[int, int] | None:
    """Get pact magic slots.

    Returns:
        Tuple of (num_slots, slot_level), or None outside the bundled levels.
    """
    return PACT_MAGIC_SLOTS.get(level)


# =============================================================================
# Class Resource Tables
# =============================================================================

# Rogue sneak attack dice by rogue level
SNEAK_ATTACK_DICE: dict[int, str] = {
    1: "1d6", 2: "1d6", 3: "2d6", 4: "2d6", 5: "3d6",
    6: "3d6", 7: "4d6", 8: "4d6", 9: "5d6", 10: "5d6",
    11: "6d6", 12: "6d6", 13: "7d6", 14: "7d6", 15: "8d6",
    16: "8d6", 17: "9d6", 18: "9d6", 19: "10d6", 20: "10d6",
}

# Monk martial arts die: (minimum level, die)
MARTIAL_ARTS_DIE: tuple[tuple[int, str], ...] = (
    (17, "1d10"),
    (11, "1d8"),
    (5, "1d6"),
    (1, "1d4"),
)

# Barbarian rages per day: (minimum level, rages). None means unlimited.
RAGES_PER_DAY: tuple[tuple[int, int | None], ...] = (
    (20, None),
    (17, 6),
    (12, 5),
    (6, 4),
    (3, 3),
    (1, 2),
)


def sneak_attack_dice(level: int) -> str | None:
    """Get sneak attack dice for a rogue level, or None outside 1-20."""
    return SNEAK_ATTACK_DICE.get(level)


def martial_arts_die(level: int) -> str | None:
    """Get the martial arts die for a monk level, or None below level 1."""
    for min_level, die in MARTIAL_ARTS_DIE:
        if level >= min_level:
            return die
    return None


def rages_per_day(level: int) -> int | None:
    """Get rages per long rest for a barbarian level.

    Returns None below level 1 and at level 20, where rages are unlimited.
    """
    for min_level, rages in RAGES_PER_DAY:
        if level >= min_level:
            return rages
    return None


__all__ = [
    "get_proficiency_bonus",
    "FULL_CASTER_SLOTS",
    "HALF_CASTER_SLOTS",
    "PACT_MAGIC_SLOTS",
    "spell_slots_for",
    "pact_magic_for",
    "SNEAK_ATTACK_DICE",
    "MARTIAL_ARTS_DIE",
    "RAGES_PER_DAY",
    "sneak_attack_dice",
    "martial_arts_die",
    "rages_per_day",
]
