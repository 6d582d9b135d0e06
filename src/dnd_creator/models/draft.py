"""Character draft model consumed by the rules engine.

The draft is owned by the calling layer (a creation wizard, an API
handler, ...). The engine reads it by value and never stores or mutates
it. Selections are plain strings so that a stale or unknown id never
fails construction; the validation engine reports such ids instead.

Example:
    >>> draft = CharacterDraft(name="Mira", class_id="cleric", subclass_id="life-domain")
    >>> updated = draft.model_copy(update={"level": 2})
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from dnd_creator.core.constants import MIN_CHARACTER_LEVEL
from dnd_creator.models.enums import Ability, AbilityScoreMethod, Skill


class AbilityScores(BaseModel):
    """The six base ability scores of a draft, before racial bonuses.

    Scores are not range-checked here; out-of-range values are reported by
    the validation engine so that a half-finished draft is still usable.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strength: int = 10
    dexterity: int = 10
    constitution: int = 10
    intelligence: int = 10
    wisdom: int = 10
    charisma: int = 10

    def get(self, ability: Ability) -> int:
        """Get the score for one ability.

        Args:
            ability: The ability to read.

        Returns:
            The base score.
        """
        return int(getattr(self, ability.value))

    def as_dict(self) -> dict[Ability, int]:
        """Return all six scores keyed by ability, in canonical order."""
        return {ability: self.get(ability) for ability in Ability}

    @classmethod
    def from_mapping(cls, scores: dict[Ability, int]) -> AbilityScores:
        """Build scores from an ability-keyed mapping.

        Args:
            scores: Mapping of ability to score. Missing abilities default to 10.

        Returns:
            A new AbilityScores instance.
        """
        return cls(**{ability.value: value for ability, value in scores.items()})


class CharacterDraft(BaseModel):
    """An in-progress character as chosen so far.

    Attributes:
        name: Character name.
        level: Target character level.
        class_id: Selected class, or None if not yet chosen.
        subclass_id: Selected subclass, or None if not yet chosen.
        base_race_id: Selected race (a base race or a race without subraces).
        subrace_id: Selected subrace, for base races that have subraces.
        background_id: Selected background.
        ability_scores: Base ability scores.
        ability_score_method: How the base scores were generated.
        flexible_bonus_choices: Abilities picked for a flexible racial bonus.
        class_skills: Skills picked from the class's skill options.
        skill_replacements: Replacement skill for each class/background overlap,
            keyed by the overlapping skill.
        cantrips: Selected cantrip ids.
        spells: Selected leveled spell ids.
        equipment_choices: Selected option index per equipment group id.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = ""
    level: int = MIN_CHARACTER_LEVEL
    class_id: str | None = None
    subclass_id: str | None = None
    base_race_id: str | None = None
    subrace_id: str | None = None
    background_id: str | None = None
    ability_scores: AbilityScores = Field(default_factory=AbilityScores)
    ability_score_method: AbilityScoreMethod = AbilityScoreMethod.MANUAL
    flexible_bonus_choices: list[Ability] = Field(default_factory=list)
    class_skills: list[Skill] = Field(default_factory=list)
    skill_replacements: dict[Skill, Skill] = Field(default_factory=dict)
    cantrips: list[str] = Field(default_factory=list)
    spells: list[str] = Field(default_factory=list)
    equipment_choices: dict[str, int] = Field(default_factory=dict)

    @property
    def race_id(self) -> str | None:
        """The most specific race selected (subrace if any, else base race)."""
        return self.subrace_id or self.base_race_id


__all__ = [
    "AbilityScores",
    "CharacterDraft",
]
