"""Parser and evaluator for prepared-spell formulas.

A formula is a sum of terms joined by ``+`` or ``-``. A term is an ability
modifier (``STR_MOD`` ... ``CHA_MOD``), ``LEVEL``, ``HALF_LEVEL`` (class
level halved, rounded down), or a non-negative integer. Whitespace is
ignored.

Example:
    >>> formula = PreparedSpellFormula.parse("WIS_MOD + LEVEL")
    >>> formula.evaluate({Ability.WIS: 3}, level=1)
    4
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

from dnd_creator.core.exceptions import FormulaError
from dnd_creator.models.enums import Ability


_TERM = r"(?:[A-Z]{3}_MOD|HALF_LEVEL|LEVEL|\d+)"
_FORMULA_RE = re.compile(rf"[+-]?{_TERM}(?:[+-]{_TERM})*")
_TERM_RE = re.compile(rf"([+-]?)({_TERM})")


@dataclass(frozen=True)
class FormulaTerm:
    """One signed term of a formula.

    Attributes:
        sign: +1 or -1.
        kind: ``"ability"``, ``"level"``, ``"half_level"``, or ``"constant"``.
        ability: The ability for ability-modifier terms.
        value: The value for constant terms.
    """

    sign: int
    kind: str
    ability: Ability | None = None
    value: int = 0


@dataclass(frozen=True)
class PreparedSpellFormula:
    """A parsed prepared-spell formula."""

    expression: str
    terms: tuple[FormulaTerm, ...]

    @classmethod
    def parse(cls, expression: str) -> PreparedSpellFormula:
        """Parse a formula expression.

        Args:
            expression: Formula text such as ``"CHA_MOD + HALF_LEVEL"``.

        Returns:
            The parsed formula.

        Raises:
            FormulaError: If the expression does not follow the grammar or
                names an unknown ability.
        """
        compact = "".join(expression.split())
        if not _FORMULA_RE.fullmatch(compact):
            raise FormulaError("Malformed prepared-spell formula", expression=expression)

        terms: list[FormulaTerm] = []
        for match in _TERM_RE.finditer(compact):
            sign = -1 if match.group(1) == "-" else 1
            token = match.group(2)
            if token == "LEVEL":
                terms.append(FormulaTerm(sign=sign, kind="level"))
            elif token == "HALF_LEVEL":
                terms.append(FormulaTerm(sign=sign, kind="half_level"))
            elif token.isdigit():
                terms.append(FormulaTerm(sign=sign, kind="constant", value=int(token)))
            else:
                abbreviation = token.removesuffix("_MOD")
                try:
                    ability = Ability[abbreviation]
                except KeyError as exc:
                    raise FormulaError(
                        f"Unknown ability '{abbreviation}' in prepared-spell formula",
                        expression=expression,
                    ) from exc
                terms.append(FormulaTerm(sign=sign, kind="ability", ability=ability))
        return cls(expression=expression, terms=tuple(terms))

    def evaluate(self, modifiers: Mapping[Ability, int], level: int) -> int:
        """Evaluate the formula for a character.

        Args:
            modifiers: Ability modifiers. Missing abilities count as 0.
            level: Class level.

        Returns:
            The number of spells that may be prepared, never below 0.
        """
        total = 0
        for term in self.terms:
            if term.kind == "level":
                value = level
            elif term.kind == "half_level":
                value = level // 2
            elif term.kind == "ability" and term.ability is not None:
                value = modifiers.get(term.ability, 0)
            else:
                value = term.value
            total += term.sign * value
        return max(total, 0)


__all__ = [
    "FormulaTerm",
    "PreparedSpellFormula",
]
