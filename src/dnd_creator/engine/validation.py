"""Validation engine for character drafts.

Checks a draft against the rules and reports every problem it finds as a
ValidationError value scoped to a creation step. Draft problems never
raise, and every rule runs even after earlier failures, so a caller always
gets the complete list.

Results are ordered by creation step (basics, ability scores, race, class,
spells, background, equipment) and then by rule order within the step.
Only entries at the ``error`` level block completion.

Example:
    >>> engine = ValidationEngine(get_catalog())
    >>> engine.is_character_valid(CharacterDraft())
    False
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable

from dnd_creator.catalog.store import CatalogStore
from dnd_creator.core.config import RulesSettings, get_settings
from dnd_creator.core.constants import (
    MAX_ABILITY_SCORE,
    MIN_ABILITY_SCORE,
    MIN_CHARACTER_LEVEL,
    POINT_BUY_MAX,
    POINT_BUY_MIN,
    ROLLED_SCORE_MAX,
    ROLLED_SCORE_MIN,
    STANDARD_ARRAY,
)
from dnd_creator.core.logging import get_logger
from dnd_creator.engine.ability_scores import (
    flexible_choice_problems,
    is_standard_array,
    points_spent,
)
from dnd_creator.engine.queries import CatalogQueries
from dnd_creator.engine.spellcasting import SpellcastingCalculator
from dnd_creator.models.draft import CharacterDraft
from dnd_creator.models.enums import AbilityScoreMethod, CreationStep, ValidationLevel
from dnd_creator.models.results import ValidationError, ValidationSummary


logger = get_logger(__name__)

StepValidator = Callable[[CharacterDraft], list[ValidationError]]


def _error(step: CreationStep, code: str, message: str, field: str | None = None) -> ValidationError:
    return ValidationError(
        level=ValidationLevel.ERROR, step=step, field=field, code=code, message=message
    )


def _warning(step: CreationStep, code: str, message: str, field: str | None = None) -> ValidationError:
    return ValidationError(
        level=ValidationLevel.WARNING, step=step, field=field, code=code, message=message
    )


def _info(step: CreationStep, code: str, message: str, field: str | None = None) -> ValidationError:
    return ValidationError(
        level=ValidationLevel.INFO, step=step, field=field, code=code, message=message
    )


class ValidationEngine:
    """Validates character drafts against the catalog and rules settings.

    The engine keeps no state between calls: each validation re-derives
    everything from the draft.

    Attributes:
        catalog: The catalog selections are resolved against.
        rules: Rules settings (level cap, point-buy budget, method checks).
    """

    def __init__(self, catalog: CatalogStore, *, rules: RulesSettings | None = None) -> None:
        self.catalog = catalog
        self.rules = rules if rules is not None else get_settings().rules
        self.queries = CatalogQueries(catalog)
        self.spellcasting = SpellcastingCalculator(catalog)
        self._validators: dict[CreationStep, StepValidator] = {
            CreationStep.BASICS: self._validate_basics,
            CreationStep.ABILITY_SCORES: self._validate_ability_scores,
            CreationStep.RACE: self._validate_race,
            CreationStep.CLASS: self._validate_class,
            CreationStep.SPELLS: self._validate_spells,
            CreationStep.BACKGROUND: self._validate_background,
            CreationStep.EQUIPMENT: self._validate_equipment,
        }

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def validate(self, draft: CharacterDraft) -> list[ValidationError]:
        """Validate every creation step of a draft.

        Args:
            draft: The character draft. It is not modified.

        Returns:
            All findings, ordered by step and then by rule.
        """
        results: list[ValidationError] = []
        for step in CreationStep:
            results.extend(self._validators[step](draft))

        counts = Counter(result.level for result in results)
        logger.debug(
            "Validated draft",
            errors=counts[ValidationLevel.ERROR],
            warnings=counts[ValidationLevel.WARNING],
            info=counts[ValidationLevel.INFO],
        )
        return results

    def validate_step(self, draft: CharacterDraft, step: CreationStep) -> list[ValidationError]:
        """Validate a single creation step."""
        return self._validators[CreationStep(step)](draft)

    def is_character_valid(self, draft: CharacterDraft) -> bool:
        """Check whether a draft has no error-level findings."""
        return not any(result.is_error for result in self.validate(draft))

    def validation_summary(self, draft: CharacterDraft) -> ValidationSummary:
        """Validate a draft and group the findings by severity."""
        results = self.validate(draft)
        errors = [r for r in results if r.level is ValidationLevel.ERROR]
        return ValidationSummary(
            is_valid=not errors,
            errors=errors,
            warnings=[r for r in results if r.level is ValidationLevel.WARNING],
            info=[r for r in results if r.level is ValidationLevel.INFO],
        )

    # -------------------------------------------------------------------------
    # Basics
    # -------------------------------------------------------------------------

    def _validate_basics(self, draft: CharacterDraft) -> list[ValidationError]:
        if not draft.name.strip():
            return [
                _error(CreationStep.BASICS, "NAME_REQUIRED", "Character name is required", "name")
            ]
        return []

    # -------------------------------------------------------------------------
    # Ability Scores
    # -------------------------------------------------------------------------

    def _validate_ability_scores(self, draft: CharacterDraft) -> list[ValidationError]:
        step = CreationStep.ABILITY_SCORES
        scores = draft.ability_scores.as_dict()
        results: list[ValidationError] = []

        for ability, value in scores.items():
            if not MIN_ABILITY_SCORE <= value <= MAX_ABILITY_SCORE:
                results.append(
                    _error(
                        step,
                        "SCORE_OUT_OF_RANGE",
                        f"{ability.full_name} must be between {MIN_ABILITY_SCORE} and "
                        f"{MAX_ABILITY_SCORE} (got {value})",
                        f"ability_scores.{ability.value}",
                    )
                )

        if not self.rules.enforce_ability_score_method:
            return results

        method = draft.ability_score_method
        if method is AbilityScoreMethod.POINT_BUY:
            out_of_range = False
            for ability, value in scores.items():
                if not POINT_BUY_MIN <= value <= POINT_BUY_MAX:
                    out_of_range = True
                    results.append(
                        _error(
                            step,
                            "POINT_BUY_RANGE",
                            f"Point buy scores must be between {POINT_BUY_MIN} and "
                            f"{POINT_BUY_MAX}; {ability.full_name} is {value}",
                            f"ability_scores.{ability.value}",
                        )
                    )
            spent = points_spent(draft.ability_scores)
            if not out_of_range and spent != self.rules.point_buy_total:
                results.append(
                    _error(
                        step,
                        "POINT_BUY_TOTAL",
                        f"Point buy must spend exactly {self.rules.point_buy_total} points "
                        f"({spent} spent)",
                        "ability_scores",
                    )
                )
        elif method is AbilityScoreMethod.STANDARD_ARRAY:
            if not is_standard_array(draft.ability_scores):
                expected = ", ".join(str(value) for value in STANDARD_ARRAY)
                results.append(
                    _error(
                        step,
                        "STANDARD_ARRAY_MISMATCH",
                        f"Standard array scores must be exactly {expected}",
                        "ability_scores",
                    )
                )
        elif method is AbilityScoreMethod.ROLLED:
            for ability, value in scores.items():
                if not ROLLED_SCORE_MIN <= value <= ROLLED_SCORE_MAX:
                    results.append(
                        _error(
                            step,
                            "ROLLED_SCORE_RANGE",
                            f"Rolled scores must be between {ROLLED_SCORE_MIN} and "
                            f"{ROLLED_SCORE_MAX}; {ability.full_name} is {value}",
                            f"ability_scores.{ability.value}",
                        )
                    )
        return results

    # -------------------------------------------------------------------------
    # Race
    # -------------------------------------------------------------------------

    def _validate_race(self, draft: CharacterDraft) -> list[ValidationError]:
        step = CreationStep.RACE
        if draft.base_race_id is None:
            return [_error(step, "RACE_REQUIRED", "Choose a race", "base_race_id")]

        base = self.catalog.get_race(draft.base_race_id)
        if base is None or base.is_subrace:
            return [
                _error(
                    step,
                    "RACE_UNKNOWN",
                    f"'{draft.base_race_id}' is not a selectable race",
                    "base_race_id",
                )
            ]

        results: list[ValidationError] = []
        lineage = [base]
        subraces = self.queries.subraces_for(base.id)
        if draft.subrace_id is None:
            if subraces:
                names = ", ".join(race.name for race in subraces)
                results.append(
                    _error(
                        step,
                        "SUBRACE_REQUIRED",
                        f"{base.name} requires a subrace ({names})",
                        "subrace_id",
                    )
                )
        else:
            subrace = self.catalog.get_race(draft.subrace_id)
            if subrace is None or subrace.base_race != base.id:
                results.append(
                    _error(
                        step,
                        "SUBRACE_MISMATCH",
                        f"'{draft.subrace_id}' is not a subrace of {base.name}",
                        "subrace_id",
                    )
                )
                return results
            lineage.append(subrace)

        for code, message in flexible_choice_problems(lineage, draft.flexible_bonus_choices):
            results.append(_error(step, code, message, "flexible_bonus_choices"))
        return results

    # -------------------------------------------------------------------------
    # Class
    # -------------------------------------------------------------------------

    def _validate_class(self, draft: CharacterDraft) -> list[ValidationError]:
        step = CreationStep.CLASS
        results: list[ValidationError] = []

        class_def = self.catalog.get_class(draft.class_id)
        if draft.class_id is None:
            results.append(_error(step, "CLASS_REQUIRED", "Choose a class", "class_id"))
        elif class_def is None:
            results.append(
                _error(step, "CLASS_UNKNOWN", f"Unknown class '{draft.class_id}'", "class_id")
            )

        max_level = self.rules.max_character_level
        if not MIN_CHARACTER_LEVEL <= draft.level <= max_level:
            results.append(
                _error(
                    step,
                    "LEVEL_OUT_OF_RANGE",
                    f"Level must be between {MIN_CHARACTER_LEVEL} and {max_level}",
                    "level",
                )
            )

        if class_def is None:
            return results

        if draft.subclass_id is None:
            if self.queries.requires_level1_subclass(class_def.id) or self.queries.requires_subclass(
                class_def.id, draft.level
            ):
                results.append(
                    _error(
                        step,
                        "SUBCLASS_REQUIRED",
                        f"{class_def.name} subclass required at level {class_def.subclass_level}",
                        "subclass_id",
                    )
                )
        elif class_def.get_subclass(draft.subclass_id) is None:
            results.append(
                _error(
                    step,
                    "SUBCLASS_UNKNOWN",
                    f"'{draft.subclass_id}' is not a {class_def.name} subclass",
                    "subclass_id",
                )
            )

        choice = self.queries.valid_skill_choices(draft)
        if len(draft.class_skills) != choice.count:
            results.append(
                _error(
                    step,
                    "SKILL_COUNT",
                    f"Choose exactly {choice.count} class skills "
                    f"({len(draft.class_skills)} chosen)",
                    "class_skills",
                )
            )
        allowed = set(choice.options)
        not_allowed = [skill for skill in dict.fromkeys(draft.class_skills) if skill not in allowed]
        if not_allowed:
            names = ", ".join(skill.display_name for skill in not_allowed)
            results.append(
                _error(
                    step,
                    "SKILL_NOT_ALLOWED",
                    f"{class_def.name} cannot choose: {names}",
                    "class_skills",
                )
            )
        repeated = [skill for skill, count in Counter(draft.class_skills).items() if count > 1]
        if repeated:
            names = ", ".join(skill.display_name for skill in repeated)
            results.append(
                _error(step, "SKILL_DUPLICATE", f"Skills chosen more than once: {names}", "class_skills")
            )
        return results

    # -------------------------------------------------------------------------
    # Spells
    # -------------------------------------------------------------------------

    def _validate_spells(self, draft: CharacterDraft) -> list[ValidationError]:
        step = CreationStep.SPELLS
        class_def = self.catalog.get_class(draft.class_id)
        if class_def is None:
            return []

        if class_def.spellcasting is None:
            if draft.cantrips or draft.spells:
                return [
                    _warning(
                        step,
                        "SPELLS_IGNORED",
                        f"{class_def.name} does not cast spells; selected spells are ignored",
                        "spells",
                    )
                ]
            return []

        results: list[ValidationError] = []
        info = self.spellcasting.spellcasting_info(draft)

        if len(draft.cantrips) > info.cantrips_known:
            results.append(
                _error(
                    step,
                    "CANTRIP_COUNT",
                    f"{class_def.name} knows {info.cantrips_known} cantrips at level {info.level} "
                    f"({len(draft.cantrips)} chosen)",
                    "cantrips",
                )
            )
        if info.max_spells_known is not None and len(draft.spells) > info.max_spells_known:
            results.append(
                _error(
                    step,
                    "SPELL_COUNT",
                    f"{class_def.name} knows {info.max_spells_known} spells at level {info.level} "
                    f"({len(draft.spells)} chosen)",
                    "spells",
                )
            )

        available_cantrips = {spell.id for spell in self.spellcasting.available_spells(draft, 0)}
        for spell_id in draft.cantrips:
            if spell_id not in available_cantrips:
                results.append(
                    _error(
                        step,
                        "SPELL_NOT_AVAILABLE",
                        f"'{spell_id}' is not a {class_def.name} cantrip",
                        "cantrips",
                    )
                )

        max_level = self.spellcasting.max_spell_level(draft)
        available: dict[int, set[str]] = {}
        for spell_id in draft.spells:
            spell = self.catalog.get_spell(spell_id)
            if spell is None or spell.is_cantrip:
                results.append(
                    _error(
                        step,
                        "SPELL_NOT_AVAILABLE",
                        f"'{spell_id}' is not a leveled spell",
                        "spells",
                    )
                )
                continue
            if spell.level not in available:
                available[spell.level] = {
                    s.id for s in self.spellcasting.available_spells(draft, spell.level)
                }
            if spell.id not in available[spell.level]:
                results.append(
                    _error(
                        step,
                        "SPELL_NOT_AVAILABLE",
                        f"{spell.name} is not on the {class_def.name} spell list",
                        "spells",
                    )
                )
            elif spell.level > max_level:
                results.append(
                    _error(
                        step,
                        "SPELL_LEVEL_TOO_HIGH",
                        f"{spell.name} is level {spell.level}; the highest castable level is "
                        f"{max_level}",
                        "spells",
                    )
                )

        if info.max_spells_prepared is not None:
            results.append(
                _info(
                    step,
                    "SPELLS_PREPARED_AT_PLAY",
                    f"{class_def.name} prepares up to {info.max_spells_prepared} spells each day "
                    "from the full class list",
                    "spells",
                )
            )
        return results

    # -------------------------------------------------------------------------
    # Background
    # -------------------------------------------------------------------------

    def _validate_background(self, draft: CharacterDraft) -> list[ValidationError]:
        step = CreationStep.BACKGROUND
        if draft.background_id is None:
            return [_error(step, "BACKGROUND_REQUIRED", "Choose a background", "background_id")]

        background = self.catalog.get_background(draft.background_id)
        if background is None:
            return [
                _error(
                    step,
                    "BACKGROUND_UNKNOWN",
                    f"Unknown background '{draft.background_id}'",
                    "background_id",
                )
            ]

        results: list[ValidationError] = []
        class_skills = self.queries.valid_skill_choices(draft).selected
        background_skills = list(background.skill_proficiencies)
        overlaps = [skill for skill in class_skills if skill in background_skills]
        granted = set(class_skills) | set(background_skills)
        used = Counter(
            draft.skill_replacements[skill]
            for skill in overlaps
            if skill in draft.skill_replacements
        )

        for skill in overlaps:
            replacement = draft.skill_replacements.get(skill)
            if replacement is None:
                results.append(
                    _error(
                        step,
                        "SKILL_OVERLAP",
                        f"{skill.display_name} is granted by both your class and "
                        f"{background.name}; choose a replacement skill",
                        "skill_replacements",
                    )
                )
            elif replacement in granted or used[replacement] > 1:
                results.append(
                    _error(
                        step,
                        "SKILL_REPLACEMENT_INVALID",
                        f"{replacement.display_name} cannot replace {skill.display_name}; "
                        "pick a skill you are not already proficient in",
                        "skill_replacements",
                    )
                )

        for skill in draft.skill_replacements:
            if skill not in overlaps:
                results.append(
                    _warning(
                        step,
                        "SKILL_REPLACEMENT_UNUSED",
                        f"{skill.display_name} does not overlap; its replacement is ignored",
                        "skill_replacements",
                    )
                )

        if background.language_choices:
            results.append(
                _info(
                    step,
                    "LANGUAGE_CHOICES",
                    f"{background.name} grants {background.language_choices} additional "
                    "language(s) of your choice",
                )
            )
        return results

    # -------------------------------------------------------------------------
    # Equipment
    # -------------------------------------------------------------------------

    def _validate_equipment(self, draft: CharacterDraft) -> list[ValidationError]:
        step = CreationStep.EQUIPMENT
        if draft.class_id is None:
            return [
                _error(
                    step,
                    "EQUIPMENT_CHOICE_REQUIRED",
                    "Choose a class before selecting starting equipment",
                    "class_id",
                )
            ]
        class_def = self.catalog.get_class(draft.class_id)
        if class_def is None:
            return []

        results: list[ValidationError] = []
        group_ids: set[str] = set()
        for group in class_def.equipment_options:
            group_ids.add(group.group_id)
            field = f"equipment_choices.{group.group_id}"
            index = draft.equipment_choices.get(group.group_id)
            if index is None:
                results.append(
                    _error(
                        step,
                        "EQUIPMENT_CHOICE_REQUIRED",
                        f"Choose one: {' or '.join(o.description for o in group.options)}",
                        field,
                    )
                )
            elif not 0 <= index < len(group.options):
                results.append(
                    _error(
                        step,
                        "EQUIPMENT_CHOICE_INVALID",
                        f"Option {index} does not exist for '{group.group_id}'",
                        field,
                    )
                )

        for group_id in draft.equipment_choices:
            if group_id not in group_ids:
                results.append(
                    _warning(
                        step,
                        "EQUIPMENT_CHOICE_UNKNOWN",
                        f"'{group_id}' is not a {class_def.name} equipment choice; it is ignored",
                        f"equipment_choices.{group_id}",
                    )
                )
        return results


__all__ = [
    "ValidationEngine",
]
