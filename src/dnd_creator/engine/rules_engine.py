"""Rules engine facade.

Bundles the catalog queries, spellcasting calculator, derived-stats
calculator, and validation engine behind one object bound to a catalog.

Example:
    >>> from dnd_creator.engine import get_rules_engine
    >>> engine = get_rules_engine()
    >>> engine.validate(CharacterDraft(name="Mira"))
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from dnd_creator.catalog.store import CatalogStore, get_catalog
from dnd_creator.core.config import RulesSettings, get_settings
from dnd_creator.engine.ability_scores import roll_ability_scores, roll_ability_scores_with_reroll
from dnd_creator.engine.derived_stats import derive_stats, level_up_hit_points
from dnd_creator.engine.dice import DiceRoll, roll_dice, roll_starting_gold
from dnd_creator.engine.queries import CatalogQueries
from dnd_creator.engine.spellcasting import SpellcastingCalculator
from dnd_creator.engine.validation import ValidationEngine
from dnd_creator.models.catalog import SpellDefinition
from dnd_creator.models.draft import CharacterDraft
from dnd_creator.models.enums import Ability, CreationStep
from dnd_creator.models.results import (
    AbilityScoreRolls,
    DerivedStats,
    SpellcastingInfo,
    ValidationError,
    ValidationSummary,
)


class RulesEngine:
    """D&D 5th Edition (SRD) character rules.

    Attributes:
        system_id: Stable identifier of the rule system.
        system_name: Display name of the rule system.
        version: Engine version.
        catalog: The catalog every component reads from.
        queries: Catalog query facade.
        spellcasting: Spellcasting calculator.
        validator: Validation engine.
        roll: Dice roller used by the rolling helpers.
    """

    system_id = "dnd5e"
    system_name = "D&D 5th Edition (SRD)"

    def __init__(
        self,
        catalog: CatalogStore,
        *,
        rules: RulesSettings | None = None,
        version: str | None = None,
        roll: DiceRoll = roll_dice,
    ) -> None:
        settings = get_settings()
        self.catalog = catalog
        self.version = version or settings.app_version
        self.queries = CatalogQueries(catalog)
        self.spellcasting = SpellcastingCalculator(catalog)
        self.validator = ValidationEngine(catalog, rules=rules or settings.rules)
        self.roll = roll

    def spellcasting_info(self, draft: CharacterDraft) -> SpellcastingInfo:
        """Derive the draft's spellcasting profile."""
        return self.spellcasting.spellcasting_info(draft)

    def available_spells(self, draft: CharacterDraft, spell_level: int) -> list[SpellDefinition]:
        """Spells of one level the draft may choose from."""
        return self.spellcasting.available_spells(draft, spell_level)

    def derive_stats(self, draft: CharacterDraft) -> DerivedStats:
        """Derive combat statistics from the draft."""
        return derive_stats(draft, self.catalog)

    def level_up_hit_points(self, draft: CharacterDraft, hit_die_roll: int = 0) -> int | None:
        """Hit points the draft gains on its next level.

        Args:
            draft: The character draft.
            hit_die_roll: The hit die result, or 0 to take the average.

        Returns:
            Hit points gained, or None without a known class.
        """
        class_def = self.catalog.get_class(draft.class_id)
        if class_def is None:
            return None
        con_modifier = self.derive_stats(draft).ability_modifiers[Ability.CON]
        return level_up_hit_points(class_def.hit_die, con_modifier, hit_die_roll)

    def roll_ability_scores(self, *, reroll_weak: bool = True) -> AbilityScoreRolls:
        """Roll six ability scores, optionally rerolling weak sets."""
        if reroll_weak:
            return roll_ability_scores_with_reroll(roll=self.roll)
        return roll_ability_scores(self.roll)

    def roll_starting_gold(self, class_id: str) -> int | None:
        """Roll a class's starting gold, or None if it has no gold formula."""
        class_def = self.catalog.get_class(class_id)
        if class_def is None or class_def.starting_gold is None:
            return None
        return roll_starting_gold(class_def.starting_gold, self.roll)

    def validate(self, draft: CharacterDraft) -> list[ValidationError]:
        """Validate every creation step of the draft."""
        return self.validator.validate(draft)

    def validate_step(self, draft: CharacterDraft, step: CreationStep) -> list[ValidationError]:
        """Validate one creation step of the draft."""
        return self.validator.validate_step(draft, step)

    def is_character_valid(self, draft: CharacterDraft) -> bool:
        """Check whether the draft has no error-level findings."""
        return self.validator.is_character_valid(draft)

    def validation_summary(self, draft: CharacterDraft) -> ValidationSummary:
        """Validate the draft and group the findings by severity."""
        return self.validator.validation_summary(draft)

    def get_system_info(self) -> dict[str, Any]:
        """Describe the rule system and its catalog."""
        return {
            "id": self.system_id,
            "name": self.system_name,
            "version": self.version,
            "ruleset": self.validator.rules.ruleset,
            "max_character_level": self.validator.rules.max_character_level,
            "classes": len(self.catalog.classes),
            "races": len(self.catalog.races),
            "backgrounds": len(self.catalog.backgrounds),
            "spells": len(self.catalog.spells),
        }

    def __repr__(self) -> str:
        return f"RulesEngine(system_id={self.system_id!r}, version={self.version!r})"


@lru_cache(maxsize=1)
def get_rules_engine() -> RulesEngine:
    """Get the rules engine singleton over the bundled SRD catalog."""
    return RulesEngine(get_catalog())


def clear_rules_engine_cache() -> None:
    """Clear the engine cache, forcing a rebuild on next access."""
    get_rules_engine.cache_clear()


__all__ = [
    "RulesEngine",
    "get_rules_engine",
    "clear_rules_engine_cache",
]
