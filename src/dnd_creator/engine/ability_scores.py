"""Ability score generation rules and racial bonus application.

Covers the point-buy cost table and its one-step helpers, the standard
array, 4d6-drop-lowest rolling, and how a race's fixed and flexible
ability bonuses combine with a draft's base scores.

A race lineage is the list of race definitions that apply to a selection:
``[base]`` for a race without subraces, ``[base, subrace]`` for a subrace.
Bonuses and traits of every entry in the lineage stack.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Sequence

from dnd_creator.catalog.store import CatalogStore
from dnd_creator.core.constants import (
    ABILITY_ROLL_DICE,
    ABILITY_ROLL_EXPRESSION,
    MAX_REROLL_ATTEMPTS,
    POINT_BUY_COSTS,
    POINT_BUY_MAX,
    POINT_BUY_MIN,
    POINT_BUY_TOTAL,
    REROLL_HIGH_SCORE,
    REROLL_MIN_MODIFIER_TOTAL,
    STANDARD_ARRAY,
)
from dnd_creator.core.exceptions import DiceRollError
from dnd_creator.core.logging import get_logger
from dnd_creator.engine.dice import DiceRoll, roll_dice
from dnd_creator.models.catalog import AbilityBonus, RaceDefinition
from dnd_creator.models.draft import AbilityScores
from dnd_creator.models.enums import Ability
from dnd_creator.models.results import AbilityRoll, AbilityScoreRolls


logger = get_logger(__name__)


def ability_modifier(score: int) -> int:
    """Calculate the modifier for an ability score (floor division)."""
    return (score - 10) // 2


# =============================================================================
# Point Buy and Standard Array
# =============================================================================


def point_buy_cost(score: int) -> int | None:
    """Get the point-buy cost of a base score.

    Args:
        score: Base ability score.

    Returns:
        The cost in points, or None if the score cannot be bought.
    """
    return POINT_BUY_COSTS.get(score)


def points_spent(scores: AbilityScores) -> int | None:
    """Total point-buy cost of a set of base scores.

    Returns:
        Points spent, or None if any score is outside the point-buy range.
    """
    total = 0
    for value in scores.as_dict().values():
        cost = point_buy_cost(value)
        if cost is None:
            return None
        total += cost
    return total


def points_remaining(scores: AbilityScores, total: int = POINT_BUY_TOTAL) -> int | None:
    """Points left to spend, or None if any score is outside the point-buy range."""
    spent = points_spent(scores)
    return None if spent is None else total - spent


def increase_cost(score: int) -> int:
    """Points needed to raise a point-buy score by one.

    Scores below the point-buy minimum cost nothing to raise until they
    reach it.

    Returns:
        The cost, or 0 when the score is already at the maximum.
    """
    if score >= POINT_BUY_MAX:
        return 0
    return POINT_BUY_COSTS.get(score + 1, 0) - POINT_BUY_COSTS.get(score, 0)


def decrease_refund(score: int) -> int:
    """Points returned by lowering a point-buy score by one.

    Returns:
        The refund, or 0 when the score is at the minimum or above the
        point-buy range.
    """
    if score <= POINT_BUY_MIN or score > POINT_BUY_MAX:
        return 0
    return POINT_BUY_COSTS[score] - POINT_BUY_COSTS[score - 1]


def can_increase(score: int, remaining: int) -> bool:
    """Check whether a point-buy score can go up by one with the points left."""
    return score < POINT_BUY_MAX and remaining >= increase_cost(score)


def can_decrease(score: int) -> bool:
    """Check whether a point-buy score can go down by one."""
    return score > POINT_BUY_MIN


def is_standard_array(scores: AbilityScores) -> bool:
    """Check whether the scores are a permutation of the standard array."""
    return sorted(scores.as_dict().values(), reverse=True) == list(STANDARD_ARRAY)


# =============================================================================
# Rolled Scores
# =============================================================================


def roll_4d6_drop_lowest(roll: DiceRoll = roll_dice) -> AbilityRoll:
    """Roll one ability score.

    Args:
        roll: Dice roller; must return the four faces of the roll.

    Returns:
        The four dice, the dropped die, and the total of the other three.

    Raises:
        DiceRollError: If the roller returns the wrong number of dice.
    """
    faces = list(roll(ABILITY_ROLL_EXPRESSION))
    if len(faces) != ABILITY_ROLL_DICE:
        raise DiceRollError(
            f"Expected {ABILITY_ROLL_DICE} dice, got {len(faces)}",
            expression=ABILITY_ROLL_EXPRESSION,
        )
    ordered = sorted(faces)
    return AbilityRoll(rolls=tuple(faces), dropped=ordered[0], total=sum(ordered[1:]))


def roll_ability_scores(roll: DiceRoll = roll_dice) -> AbilityScoreRolls:
    """Roll six ability scores with 4d6 drop lowest.

    Args:
        roll: Dice roller.

    Returns:
        The six totals in roll order with their roll history.
    """
    history = tuple(roll_4d6_drop_lowest(roll) for _ in Ability)
    return AbilityScoreRolls(
        scores=tuple(entry.total for entry in history),
        history=history,
    )


def should_reroll(scores: Sequence[int]) -> bool:
    """Check whether a rolled set is too weak to keep.

    A set is weak when its modifiers sum to less than +1 or when no score
    reaches 15.
    """
    modifier_total = sum(ability_modifier(score) for score in scores)
    has_high_score = any(score >= REROLL_HIGH_SCORE for score in scores)
    return modifier_total < REROLL_MIN_MODIFIER_TOTAL or not has_high_score


def roll_ability_scores_with_reroll(
    max_attempts: int = MAX_REROLL_ATTEMPTS,
    roll: DiceRoll = roll_dice,
) -> AbilityScoreRolls:
    """Roll ability scores, rerolling weak sets.

    Args:
        max_attempts: Most rerolls before the last set is kept regardless.
        roll: Dice roller.

    Returns:
        The kept set; ``rerolls`` records how many sets were discarded.
    """
    result = roll_ability_scores(roll)
    rerolls = 0
    while should_reroll(result.scores) and rerolls < max_attempts:
        rerolls += 1
        result = roll_ability_scores(roll)

    logger.debug("Rolled ability scores", scores=result.scores, rerolls=rerolls)
    return result.model_copy(update={"rerolls": rerolls})


def assign_rolled_scores(
    rolled: Sequence[int],
    assignment: Mapping[Ability, int],
) -> AbilityScores:
    """Place rolled scores on abilities.

    Args:
        rolled: The six rolled totals.
        assignment: Index into ``rolled`` for every ability.

    Returns:
        Base ability scores.

    Raises:
        ValueError: If an ability is missing, an index is out of range, or
            one roll is used twice.
    """
    missing = [ability.abbreviation for ability in Ability if ability not in assignment]
    if missing:
        raise ValueError(f"No rolled score assigned to: {', '.join(missing)}")

    indexes = [assignment[ability] for ability in Ability]
    if any(index < 0 or index >= len(rolled) for index in indexes):
        raise ValueError(f"Assignment indexes must be within 0-{len(rolled) - 1}")
    if len(set(indexes)) != len(indexes):
        raise ValueError("Each rolled score may be assigned only once")

    return AbilityScores.from_mapping(
        {ability: rolled[assignment[ability]] for ability in Ability}
    )

# =============================================================================
# Racial Bonuses
# =============================================================================


def race_lineage(catalog: CatalogStore, race_id: str | None) -> list[RaceDefinition]:
    """Resolve a race id to its lineage, base race first.

    Args:
        catalog: Catalog to resolve against.
        race_id: A race or subrace id.

    Returns:
        The lineage, or an empty list for an unknown or missing id.
    """
    race = catalog.get_race(race_id)
    if race is None:
        return []
    base = catalog.get_race(race.base_race)
    return [base, race] if base is not None else [race]


def racial_bonus_map(lineage: Sequence[RaceDefinition]) -> dict[Ability, int]:
    """Combined fixed ability bonuses of a lineage.

    Args:
        lineage: Race definitions, base race first.

    Returns:
        Mapping of ability to total fixed bonus. Abilities without a bonus
        are omitted.
    """
    totals: dict[Ability, int] = {}
    for race in lineage:
        for ability, bonus in race.fixed_bonuses.items():
            totals[ability] = totals.get(ability, 0) + bonus
    return totals


def flexible_bonus(lineage: Sequence[RaceDefinition]) -> AbilityBonus | None:
    """The flexible ("choice") bonus entry of a lineage, if any."""
    for race in reversed(lineage):
        entry = race.flexible_bonus
        if entry is not None:
            return entry
    return None


def eligible_flexible_abilities(lineage: Sequence[RaceDefinition]) -> list[Ability]:
    """Abilities a lineage's flexible bonus may be applied to.

    Abilities that already receive a fixed bonus from the lineage are
    excluded, along with the entry's explicit exclusions.

    Returns:
        Eligible abilities in canonical order; empty without a flexible bonus.
    """
    entry = flexible_bonus(lineage)
    if entry is None:
        return []
    fixed = racial_bonus_map(lineage)
    return [
        ability
        for ability in Ability
        if ability not in fixed and ability not in entry.excluded_abilities
    ]


def flexible_choice_problems(
    lineage: Sequence[RaceDefinition],
    choices: Sequence[Ability],
) -> list[tuple[str, str]]:
    """Check flexible bonus choices against a lineage.

    Args:
        lineage: Race definitions, base race first.
        choices: Abilities the player picked.

    Returns:
        ``(code, message)`` pairs, empty when the choices are valid.
    """
    entry = flexible_bonus(lineage)
    if entry is None:
        if choices:
            return [
                (
                    "FLEXIBLE_BONUS_NOT_ALLOWED",
                    "This race has no flexible ability bonus to assign",
                )
            ]
        return []

    problems: list[tuple[str, str]] = []
    required = entry.choice_count or 0
    if len(choices) != required:
        problems.append(
            (
                "FLEXIBLE_BONUS_COUNT",
                f"Choose exactly {required} abilities for the +{entry.bonus} bonus "
                f"({len(choices)} chosen)",
            )
        )

    eligible = set(eligible_flexible_abilities(lineage))
    excluded = [ability for ability in dict.fromkeys(choices) if ability not in eligible]
    if excluded:
        names = ", ".join(ability.full_name for ability in excluded)
        problems.append(
            (
                "FLEXIBLE_BONUS_EXCLUDED",
                f"The flexible bonus cannot be applied to: {names}",
            )
        )

    repeated = [ability for ability, count in Counter(choices).items() if count > 1]
    if repeated:
        names = ", ".join(ability.full_name for ability in repeated)
        problems.append(
            (
                "FLEXIBLE_BONUS_STACKING",
                f"Each flexible bonus must go to a different ability: {names}",
            )
        )
    return problems


def apply_racial_bonuses(
    scores: AbilityScores,
    lineage: Sequence[RaceDefinition],
    flexible_choices: Sequence[Ability] = (),
) -> dict[Ability, int]:
    """Apply a lineage's ability bonuses to base scores.

    Fixed bonuses always apply. Flexible bonuses apply only when the
    choices are valid, so a half-finished selection never inflates scores.

    Args:
        scores: Base ability scores.
        lineage: Race definitions, base race first.
        flexible_choices: Abilities picked for the flexible bonus.

    Returns:
        Final scores keyed by ability, in canonical order.
    """
    final = scores.as_dict()
    for ability, bonus in racial_bonus_map(lineage).items():
        final[ability] += bonus

    entry = flexible_bonus(lineage)
    if entry is not None and not flexible_choice_problems(lineage, flexible_choices):
        for ability in flexible_choices:
            final[ability] += entry.bonus
    return final


__all__ = [
    "POINT_BUY_COSTS",
    "STANDARD_ARRAY",
    "ability_modifier",
    "point_buy_cost",
    "points_spent",
    "points_remaining",
    "increase_cost",
    "decrease_refund",
    "can_increase",
    "can_decrease",
    "is_standard_array",
    "roll_4d6_drop_lowest",
    "roll_ability_scores",
    "should_reroll",
    "roll_ability_scores_with_reroll",
    "assign_rolled_scores",
    "race_lineage",
    "racial_bonus_map",
    "flexible_bonus",
    "eligible_flexible_abilities",
    "flexible_choice_problems",
    "apply_racial_bonuses",
]
