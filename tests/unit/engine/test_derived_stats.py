"""Tests for derived statistics."""

from __future__ import annotations

import pytest

from dnd_creator.catalog.store import CatalogStore
from dnd_creator.engine.derived_stats import (
    ability_modifier,
    derive_stats,
    level_up_hit_points,
    max_hit_points,
    proficiency_bonus,
    resolve_proficient_skills,
)
from dnd_creator.models.draft import AbilityScores, CharacterDraft
from dnd_creator.models.enums import Ability, Skill


class TestFormulas:
    """Tests for the pure formulas."""

    @pytest.mark.parametrize(
        ("score", "modifier"),
        [(1, -5), (8, -1), (9, -1), (10, 0), (11, 0), (15, 2), (20, 5)],
    )
    def test_ability_modifier(self, score: int, modifier: int) -> None:
        """Test modifiers round toward negative infinity."""
        assert ability_modifier(score) == modifier

    def test_proficiency_bonus(self) -> None:
        """Test proficiency bonus, with levels below 1 treated as 1."""
        assert proficiency_bonus(1) == 2
        assert proficiency_bonus(5) == 3
        assert proficiency_bonus(0) == 2

    def test_max_hit_points_level_1(self) -> None:
        """Test level 1 gets the full hit die."""
        assert max_hit_points(8, 1, 2) == 10
        assert max_hit_points(12, 1, 0) == 12

    def test_max_hit_points_later_levels(self) -> None:
        """Test later levels add the fixed average."""
        # 10 + 2, then (5 + 1 + 2) twice
        assert max_hit_points(10, 3, 2) == 28

    def test_max_hit_points_minimum_per_level(self) -> None:
        """Test each level adds at least 1 hit point."""
        assert max_hit_points(6, 1, -5) == 1
        assert max_hit_points(6, 2, -5) == 2


class TestLevelUpHitPoints:
    """Tests for hit points gained per level."""

    @pytest.mark.parametrize(
        ("hit_die", "con", "roll", "expected"),
        [(8, 2, 0, 7), (8, 2, 6, 8), (10, 0, 10, 10), (12, -1, 1, 1), (6, -4, 0, 1)],
    )
    def test_gain(self, hit_die: int, con: int, roll: int, expected: int) -> None:
        """Test rolled and average gains, never below 1."""
        assert level_up_hit_points(hit_die, con, roll) == expected

    @pytest.mark.parametrize("roll", [-1, 9])
    def test_impossible_roll(self, roll: int) -> None:
        """Test a roll outside the die is rejected."""
        with pytest.raises(ValueError, match="d8"):
            level_up_hit_points(8, 0, roll)

    def test_average_matches_max_hit_points(self) -> None:
        """Test max HP adds the average gain for each later level."""
        assert max_hit_points(10, 2, 1) == max_hit_points(10, 1, 1) + level_up_hit_points(10, 1)


class TestResolveProficientSkills:
    """Tests for combining skill sources."""

    def test_no_overlap(self) -> None:
        """Test class picks come first, then background skills."""
        skills = resolve_proficient_skills(
            [Skill.MEDICINE, Skill.PERSUASION],
            [Skill.INSIGHT, Skill.RELIGION],
            {},
        )

        assert skills == [Skill.MEDICINE, Skill.PERSUASION, Skill.INSIGHT, Skill.RELIGION]

    def test_overlap_without_replacement(self) -> None:
        """Test an overlapping skill is listed once."""
        skills = resolve_proficient_skills(
            [Skill.RELIGION, Skill.MEDICINE],
            [Skill.INSIGHT, Skill.RELIGION],
            {},
        )

        assert skills == [Skill.RELIGION, Skill.MEDICINE, Skill.INSIGHT]

    def test_overlap_with_replacement(self) -> None:
        """Test a valid replacement is appended."""
        skills = resolve_proficient_skills(
            [Skill.RELIGION, Skill.MEDICINE],
            [Skill.INSIGHT, Skill.RELIGION],
            {Skill.RELIGION: Skill.ARCANA},
        )

        assert skills == [Skill.RELIGION, Skill.MEDICINE, Skill.INSIGHT, Skill.ARCANA]

    def test_replacement_ignored_without_overlap(self) -> None:
        """Test replacements keyed by a non-overlapping skill do nothing."""
        skills = resolve_proficient_skills(
            [Skill.MEDICINE],
            [Skill.INSIGHT],
            {Skill.RELIGION: Skill.ARCANA},
        )

        assert Skill.ARCANA not in skills

    def test_replacement_already_granted(self) -> None:
        """Test a replacement that duplicates a granted skill is ignored."""
        skills = resolve_proficient_skills(
            [Skill.RELIGION, Skill.MEDICINE],
            [Skill.INSIGHT, Skill.RELIGION],
            {Skill.RELIGION: Skill.INSIGHT},
        )

        assert len(skills) == len(set(skills)) == 3


class TestDeriveStats:
    """Tests for full stat derivation."""

    def test_cleric(self, catalog: CatalogStore, cleric_draft: CharacterDraft) -> None:
        """Test a complete hill dwarf cleric."""
        stats = derive_stats(cleric_draft, catalog)

        # CON 14 + 2 = 16, WIS 15 + 1 = 16
        assert stats.final_ability_scores[Ability.CON] == 16
        assert stats.final_ability_scores[Ability.WIS] == 16
        assert stats.ability_modifiers[Ability.CON] == 3
        assert stats.proficiency_bonus == 2
        assert stats.max_hp == 11
        assert stats.armor_class == 10
        assert stats.initiative == 0
        assert stats.speed == 25
        assert stats.hit_dice is not None
        assert stats.hit_dice.notation == "1d8"

    def test_saving_throws(self, catalog: CatalogStore, cleric_draft: CharacterDraft) -> None:
        """Test proficient saving throws add the proficiency bonus."""
        stats = derive_stats(cleric_draft, catalog)

        assert stats.saving_throws[Ability.WIS] == 5
        assert stats.saving_throws[Ability.CHA] == 3
        assert stats.saving_throws[Ability.STR] == 1

    def test_skills(self, catalog: CatalogStore, cleric_draft: CharacterDraft) -> None:
        """Test class and background skills are proficient."""
        stats = derive_stats(cleric_draft, catalog)

        assert stats.proficient_skills == [
            Skill.MEDICINE, Skill.PERSUASION, Skill.INSIGHT, Skill.RELIGION,
        ]
        assert stats.skill_bonuses[Skill.MEDICINE] == 5
        assert stats.skill_bonuses[Skill.PERCEPTION] == 3
        assert stats.passive_perception == 13

    def test_wizard(self, catalog: CatalogStore, wizard_draft: CharacterDraft) -> None:
        """Test a high elf wizard."""
        stats = derive_stats(wizard_draft, catalog)

        # DEX 14 + 2 = 16, CON 13 -> +1
        assert stats.final_ability_scores[Ability.DEX] == 16
        assert stats.armor_class == 13
        assert stats.initiative == 3
        assert stats.max_hp == 7
        assert stats.speed == 30

    def test_wood_elf_speed(self, catalog: CatalogStore) -> None:
        """Test subrace speed overrides the base race."""
        draft = CharacterDraft(base_race_id="elf", subrace_id="wood-elf")

        assert derive_stats(draft, catalog).speed == 35

    def test_class_skills_outside_options_ignored(self, catalog: CatalogStore) -> None:
        """Test illegal class skill picks are not proficient."""
        draft = CharacterDraft(class_id="cleric", class_skills=[Skill.STEALTH, Skill.HISTORY])

        stats = derive_stats(draft, catalog)

        assert Skill.STEALTH not in stats.proficient_skills
        assert Skill.HISTORY in stats.proficient_skills

    def test_empty_draft(self, catalog: CatalogStore) -> None:
        """Test an empty draft derives without a class or race."""
        stats = derive_stats(CharacterDraft(), catalog)

        assert stats.max_hp == 0
        assert stats.hit_dice is None
        assert stats.speed == 30
        assert stats.armor_class == 10
        assert stats.proficient_skills == []
        assert stats.final_ability_scores == AbilityScores().as_dict()
