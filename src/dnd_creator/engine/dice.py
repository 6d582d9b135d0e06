"""Dice rolling for character creation.

Rolling is the only source of randomness in the engine, and it is opt-in:
validation and derived stats never roll. Every function that rolls takes a
``roll`` callable, so callers and tests can substitute fixed results for
the d20 library.

Example:
    >>> faces = roll_dice("4d6kh3")
    >>> len(faces)
    4
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import d20

from dnd_creator.core.exceptions import DiceRollError
from dnd_creator.core.logging import get_logger
from dnd_creator.models.catalog import StartingGold


logger = get_logger(__name__)

DiceRoll = Callable[[str], list[int]]
"""Roll a dice expression and return every die face rolled, in roll order."""


def roll_dice(expression: str) -> list[int]:
    """Roll a dice expression with d20.

    Args:
        expression: Dice notation (e.g., '4d6kh3', '5d4').

    Returns:
        Every die face rolled, dropped dice included, in roll order.

    Raises:
        DiceRollError: If the expression is empty or invalid.
    """
    if not expression or not expression.strip():
        raise DiceRollError("Empty dice expression", expression=expression)

    try:
        result = d20.roll(expression)
    except d20.RollError as exc:
        raise DiceRollError(
            f"Invalid dice expression: {exc}",
            expression=expression,
        ) from exc

    faces = _die_faces(result.expr)
    logger.debug("Dice rolled", expression=expression, faces=faces, total=result.total)
    return faces


def _die_faces(node: Any) -> list[int]:
    """Collect die faces from a d20 expression tree, kept or not."""
    if isinstance(node, d20.Die):
        return [node.number]
    faces: list[int] = []
    for child in node.children:
        faces.extend(_die_faces(child))
    return faces


def roll_starting_gold(starting_gold: StartingGold, roll: DiceRoll = roll_dice) -> int:
    """Roll a class's starting gold.

    Args:
        starting_gold: The class's starting-gold formula.
        roll: Dice roller.

    Returns:
        Gold pieces.
    """
    return sum(roll(starting_gold.dice)) * starting_gold.multiplier


__all__ = [
    "DiceRoll",
    "roll_dice",
    "roll_starting_gold",
]
