"""Derived statistics calculator.

Pure integer formulas for modifiers, proficiency, hit points, armor class,
initiative, passive Perception, saving throws, and skill bonuses.

Example:
    >>> ability_modifier(15)
    2
    >>> proficiency_bonus(3)
    2
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from dnd_creator.catalog.progression import get_proficiency_bonus
from dnd_creator.catalog.store import CatalogStore
from dnd_creator.core.constants import (
    BASE_ARMOR_CLASS,
    DEFAULT_SPEED,
    MIN_CHARACTER_LEVEL,
    PASSIVE_CHECK_BASE,
)
from dnd_creator.engine.ability_scores import (
    ability_modifier,
    apply_racial_bonuses,
    race_lineage,
)
from dnd_creator.models.draft import CharacterDraft
from dnd_creator.models.enums import Ability, Skill
from dnd_creator.models.results import DerivedStats, HitDice


def proficiency_bonus(level: int) -> int:
    """Proficiency bonus for a character level. Levels below 1 count as 1."""
    return get_proficiency_bonus(max(level, MIN_CHARACTER_LEVEL))


def level_up_hit_points(hit_die: int, con_modifier: int, hit_die_roll: int = 0) -> int:
    """Hit points gained on reaching a new level.

    Args:
        hit_die: Class hit die size.
        con_modifier: Constitution modifier.
        hit_die_roll: The hit die result, or 0 to take the fixed average
            (half the die plus one).

    Returns:
        Hit points gained, at least 1.

    Raises:
        ValueError: If the roll is negative or larger than the die.
    """
    if hit_die_roll < 0 or hit_die_roll > hit_die:
        raise ValueError(f"A d{hit_die} cannot roll {hit_die_roll}")
    gained = hit_die_roll or hit_die // 2 + 1
    return max(gained + con_modifier, 1)


def max_hit_points(hit_die: int, level: int, con_modifier: int) -> int:
    """Maximum hit points using the fixed average per level.

    Level 1 gets the full hit die; every later level adds
    :func:`level_up_hit_points` with no roll.

    Args:
        hit_die: Class hit die size.
        level: Character level.
        con_modifier: Constitution modifier.

    Returns:
        Maximum hit points.
    """
    total = max(hit_die + con_modifier, 1)
    for _ in range(max(level, MIN_CHARACTER_LEVEL) - 1):
        total += level_up_hit_points(hit_die, con_modifier)
    return total


def resolve_proficient_skills(
    class_skills: Iterable[Skill],
    background_skills: Iterable[Skill],
    replacements: Mapping[Skill, Skill],
) -> list[Skill]:
    """Combine class, background, and replacement skills.

    A replacement counts only when its key is a real class/background
    overlap and the replacement skill is not already granted.

    Returns:
        Proficient skills without duplicates: class picks first, then
        background skills, then accepted replacements.
    """
    class_list = list(dict.fromkeys(class_skills))
    background_list = list(dict.fromkeys(background_skills))
    skills = list(dict.fromkeys(class_list + background_list))
    overlaps = [skill for skill in class_list if skill in background_list]
    for overlap in overlaps:
        replacement = replacements.get(overlap)
        if replacement is not None and replacement not in skills:
            skills.append(replacement)
    return skills


def derive_stats(draft: CharacterDraft, catalog: CatalogStore) -> DerivedStats:
    """Derive combat statistics from a draft.

    Unknown or missing selections are tolerated: without a class, max HP is
    0 and there are no saving throw proficiencies; without a race, speed is
    the default and no racial bonuses apply.

    Args:
        draft: The character draft.
        catalog: Catalog to resolve selections against.

    Returns:
        The derived statistics.
    """
    level = max(draft.level, MIN_CHARACTER_LEVEL)
    lineage = race_lineage(catalog, draft.race_id)
    final_scores = apply_racial_bonuses(
        draft.ability_scores, lineage, draft.flexible_bonus_choices
    )
    modifiers = {ability: ability_modifier(score) for ability, score in final_scores.items()}
    bonus = proficiency_bonus(level)

    class_def = catalog.get_class(draft.class_id)
    background = catalog.get_background(draft.background_id)

    legal_class_skills: list[Skill] = []
    saving_throw_proficiencies: tuple[Ability, ...] = ()
    max_hp = 0
    hit_dice: HitDice | None = None
    if class_def is not None:
        allowed = set(class_def.skill_choices.options)
        legal_class_skills = [skill for skill in draft.class_skills if skill in allowed]
        saving_throw_proficiencies = class_def.saving_throws
        max_hp = max_hit_points(class_def.hit_die, level, modifiers[Ability.CON])
        hit_dice = HitDice(size=class_def.hit_die, total=level)

    proficient = resolve_proficient_skills(
        legal_class_skills,
        background.skill_proficiencies if background is not None else (),
        draft.skill_replacements,
    )
    proficient_set = set(proficient)

    saving_throws = {
        ability: modifiers[ability] + (bonus if ability in saving_throw_proficiencies else 0)
        for ability in Ability
    }
    skill_bonuses = {
        skill: modifiers[skill.ability] + (bonus if skill in proficient_set else 0)
        for skill in Skill
    }
    speed = lineage[-1].speed if lineage else DEFAULT_SPEED

    return DerivedStats(
        final_ability_scores=final_scores,
        ability_modifiers=modifiers,
        proficiency_bonus=bonus,
        max_hp=max_hp,
        armor_class=BASE_ARMOR_CLASS + modifiers[Ability.DEX],
        initiative=modifiers[Ability.DEX],
        speed=speed,
        passive_perception=PASSIVE_CHECK_BASE + skill_bonuses[Skill.PERCEPTION],
        proficient_skills=proficient,
        saving_throws=saving_throws,
        skill_bonuses=skill_bonuses,
        hit_dice=hit_dice,
    )


__all__ = [
    "ability_modifier",
    "proficiency_bonus",
    "level_up_hit_points",
    "max_hit_points",
    "resolve_proficient_skills",
    "derive_stats",
]
