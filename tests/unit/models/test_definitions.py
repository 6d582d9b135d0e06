"""Tests for catalog definition and result models."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from dnd_creator.catalog.races import HALF_ELF, HILL_DWARF
from dnd_creator.models import (
    Ability,
    AbilityBonus,
    CreationStep,
    EquipmentChoice,
    EquipmentOptionGroup,
    HitDice,
    KnownSpells,
    PreparedSpells,
    SpellcastingProfile,
    StartingGold,
    ValidationLevel,
)
from dnd_creator.models import ValidationError as RuleFinding
from dnd_creator.models.catalog import SpellSelection


class TestFieldConstraints:
    """Tests for field-level constraints."""

    def test_rejects_non_kebab_ids(self) -> None:
        """Test ids must be lowercase kebab-case."""
        with pytest.raises(ValidationError):
            EquipmentChoice(id="Great Axe", description="A greataxe", items=("greataxe",))

    def test_accepts_kebab_ids(self) -> None:
        """Test a well-formed id."""
        choice = EquipmentChoice(id="great-axe", description="A greataxe", items=("greataxe",))

        assert choice.id == "great-axe"

    def test_other_constraints(self) -> None:
        """Test dice notation and non-empty formulas."""
        with pytest.raises(ValidationError):
            StartingGold(dice="five")
        with pytest.raises(ValidationError):
            PreparedSpells(formula="")

    def test_equipment_group_picks_one_option(self) -> None:
        """Test a group has no per-group pick count."""
        choice = EquipmentChoice(id="great-axe", description="A greataxe", items=("greataxe",))

        group = EquipmentOptionGroup(group_id="weapon", options=(choice,))

        assert group.options == (choice,)
        with pytest.raises(ValidationError):
            EquipmentOptionGroup(group_id="weapon", choose=2, options=(choice,))  # type: ignore[call-arg]


class TestSpellSelection:
    """Tests for the known/prepared discriminated union."""

    def test_discriminator(self) -> None:
        """Test the kind field selects the economy."""
        adapter = TypeAdapter(SpellSelection)

        known = adapter.validate_python({"kind": "known", "spells_known": {1: 2}})
        prepared = adapter.validate_python({"kind": "prepared", "formula": "WIS_MOD + LEVEL"})

        assert isinstance(known, KnownSpells)
        assert isinstance(prepared, PreparedSpells)

    def test_profile_selection(self) -> None:
        """Test a profile holds exactly one economy."""
        profile = SpellcastingProfile(
            ability=Ability.WIS,
            spell_selection={"kind": "prepared", "formula": "WIS_MOD + LEVEL"},
            slot_progression="full",
            spell_list_id="cleric",
        )

        assert isinstance(profile.spell_selection, PreparedSpells)
        assert not isinstance(profile.spell_selection, KnownSpells)


class TestRaceDefinition:
    """Tests for race bonus helpers."""

    def test_fixed_bonuses(self) -> None:
        """Test fixed bonuses of a subrace entry."""
        assert HILL_DWARF.fixed_bonuses == {Ability.WIS: 1}
        assert HILL_DWARF.is_subrace

    def test_flexible_bonus(self) -> None:
        """Test the half-elf choice entry."""
        entry = HALF_ELF.flexible_bonus

        assert entry is not None
        assert entry.is_choice
        assert entry.choice_count == 2
        assert HALF_ELF.fixed_bonuses == {Ability.CHA: 2}

    def test_bonus_must_be_positive(self) -> None:
        """Test zero bonuses are rejected."""
        with pytest.raises(ValidationError):
            AbilityBonus(ability=Ability.STR, bonus=0)


class TestResults:
    """Tests for result models."""

    def test_hit_dice_notation(self) -> None:
        """Test dice notation."""
        assert HitDice(size=8, total=3).notation == "3d8"

    def test_finding_is_error(self) -> None:
        """Test only error-level findings block."""
        error = RuleFinding(
            level=ValidationLevel.ERROR, step=CreationStep.BASICS, code="X", message="x"
        )
        note = RuleFinding(
            level=ValidationLevel.INFO, step=CreationStep.BASICS, code="Y", message="y"
        )

        assert error.is_error
        assert not note.is_error
        assert error.model_dump(mode="json")["step"] == "basics"
