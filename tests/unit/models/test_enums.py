"""Tests for enumeration types."""

from __future__ import annotations

import pytest

from dnd_creator.models import Ability, CreationStep, Skill, ValidationLevel


class TestAbility:
    """Tests for the Ability enum."""

    def test_names(self) -> None:
        """Test full names and abbreviations."""
        assert Ability.STR.full_name == "Strength"
        assert Ability.WIS.abbreviation == "WIS"

    def test_canonical_order(self) -> None:
        """Test abilities iterate in STR, DEX, CON, INT, WIS, CHA order."""
        assert [a.abbreviation for a in Ability] == ["STR", "DEX", "CON", "INT", "WIS", "CHA"]


class TestSkill:
    """Tests for the Skill enum."""

    @pytest.mark.parametrize(
        "skill,ability",
        [
            (Skill.ATHLETICS, Ability.STR),
            (Skill.STEALTH, Ability.DEX),
            (Skill.RELIGION, Ability.INT),
            (Skill.PERCEPTION, Ability.WIS),
            (Skill.PERSUASION, Ability.CHA),
        ],
    )
    def test_ability(self, skill: Skill, ability: Ability) -> None:
        """Test each skill's governing ability."""
        assert skill.ability is ability

    def test_every_skill_has_an_ability(self) -> None:
        """Test the ability mapping is complete."""
        assert len(list(Skill)) == 18
        for skill in Skill:
            assert isinstance(skill.ability, Ability)

    def test_display_name(self) -> None:
        """Test human-readable names."""
        assert Skill.SLEIGHT_OF_HAND.display_name == "Sleight of Hand"
        assert Skill.ANIMAL_HANDLING.display_name == "Animal Handling"
        assert Skill.ARCANA.display_name == "Arcana"


class TestValidationVocabulary:
    """Tests for validation enums."""

    def test_step_order(self) -> None:
        """Test creation steps are declared in reporting order."""
        assert [step.value for step in CreationStep] == [
            "basics",
            "ability_scores",
            "race",
            "class",
            "spells",
            "background",
            "equipment",
        ]

    def test_levels(self) -> None:
        """Test severity values serialize as lowercase strings."""
        assert ValidationLevel.ERROR == "error"
        assert {level.value for level in ValidationLevel} == {"error", "warning", "info"}
