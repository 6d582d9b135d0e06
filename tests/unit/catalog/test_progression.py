"""Tests for level progression tables."""

from __future__ import annotations

import pytest

from dnd_creator.catalog.progression import (
    FULL_CASTER_SLOTS,
    HALF_CASTER_SLOTS,
    get_proficiency_bonus,
    martial_arts_die,
    pact_magic_for,
    rages_per_day,
    sneak_attack_dice,
    spell_slots_for,
)
from dnd_creator.models.enums import SlotProgression


class TestProficiencyBonus:
    """Tests for the proficiency bonus step function."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [(1, 2), (3, 2), (4, 2), (5, 3), (8, 3), (9, 4), (13, 5), (17, 6), (20, 6)],
    )
    def test_steps(self, level: int, expected: int) -> None:
        """Test bonus at step boundaries."""
        assert get_proficiency_bonus(level) == expected


class TestSpellSlots:
    """Tests for leveled spell slot rows."""

    def test_tables_cover_levels_1_to_20(self) -> None:
        """Test both shared tables span the full level range."""
        assert sorted(FULL_CASTER_SLOTS) == list(range(1, 21))
        assert sorted(HALF_CASTER_SLOTS) == list(range(1, 21))

    def test_full_caster_rows(self) -> None:
        """Test full caster rows for the supported levels."""
        assert spell_slots_for(SlotProgression.FULL, 1) == [2, 0, 0, 0, 0, 0, 0, 0, 0]
        assert spell_slots_for(SlotProgression.FULL, 2) == [3, 0, 0, 0, 0, 0, 0, 0, 0]
        assert spell_slots_for(SlotProgression.FULL, 3) == [4, 2, 0, 0, 0, 0, 0, 0, 0]

    def test_half_caster_level_1_is_all_zero(self) -> None:
        """Test a half caster has nine zero slots at level 1."""
        assert spell_slots_for(SlotProgression.HALF, 1) == [0] * 9

    def test_half_caster_levels_2_and_3(self) -> None:
        """Test half casters gain first-level slots from level 2."""
        assert spell_slots_for(SlotProgression.HALF, 2)[0] == 2
        assert spell_slots_for(SlotProgression.HALF, 3)[0] == 3
        assert sum(spell_slots_for(SlotProgression.HALF, 3)[1:]) == 0

    def test_rows_always_have_nine_entries(self) -> None:
        """Test rows are nine entries wide, even off the table."""
        assert len(spell_slots_for(SlotProgression.FULL, 20)) == 9
        assert spell_slots_for(SlotProgression.FULL, 25) == [0] * 9

    def test_pact_casters_have_no_leveled_row(self) -> None:
        """Test pact magic never produces a nine-slot row."""
        assert spell_slots_for(SlotProgression.PACT, 1) == []


class TestPactMagic:
    """Tests for the pact magic table."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [(1, (1, 1)), (2, (2, 1)), (3, (2, 2))],
    )
    def test_supported_levels(self, level: int, expected: tuple[int, int]) -> None:
        """Test (slot count, slot level) per warlock level."""
        assert pact_magic_for(level) == expected

    def test_beyond_supported_levels(self) -> None:
        """Test levels past the bundled table are not extrapolated."""
        assert pact_magic_for(4) is None
        assert pact_magic_for(0) is None


class TestClassResources:
    """Tests for class resource tables."""

    def test_sneak_attack(self) -> None:
        """Test sneak attack dice scale every odd level."""
        assert sneak_attack_dice(1) == "1d6"
        assert sneak_attack_dice(3) == "2d6"
        assert sneak_attack_dice(20) == "10d6"
        assert sneak_attack_dice(0) is None

    def test_martial_arts(self) -> None:
        """Test martial arts die steps."""
        assert martial_arts_die(1) == "1d4"
        assert martial_arts_die(5) == "1d6"
        assert martial_arts_die(17) == "1d10"
        assert martial_arts_die(0) is None

    def test_rages(self) -> None:
        """Test rages per day, unlimited at level 20."""
        assert rages_per_day(1) == 2
        assert rages_per_day(3) == 3
        assert rages_per_day(19) == 6
        assert rages_per_day(20) is None
