"""Immutable, validated catalog of SRD character options.

The store is built once from static definitions. Building checks every
cross-entity invariant and fails fast with a CatalogError subclass, so a
running process never sees an inconsistent catalog. Lookups by id return
None for unknown ids and never raise.

Example:
    >>> from dnd_creator.catalog.store import get_catalog
    >>> catalog = get_catalog()
    >>> catalog.get_class("wizard").hit_die
    6
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import TypeVar

from dnd_creator.catalog.formula import PreparedSpellFormula
from dnd_creator.core.constants import MAX_SUPPORTED_LEVEL, MIN_CHARACTER_LEVEL
from dnd_creator.core.exceptions import (
    CatalogError,
    CatalogInvariantError,
    DuplicateIdError,
    FormulaError,
)
from dnd_creator.core.logging import get_logger
from dnd_creator.models.catalog import (
    BackgroundDefinition,
    ClassDefinition,
    KnownSpells,
    PreparedSpells,
    RaceDefinition,
    SpellDefinition,
    SubclassDefinition,
)
from dnd_creator.models.enums import Ability


logger = get_logger(__name__)

_Entity = TypeVar("_Entity", ClassDefinition, RaceDefinition, BackgroundDefinition, SpellDefinition)

VALID_SUBCLASS_LEVELS = frozenset({1, 2, 3})
REQUIRED_SAVING_THROWS = 2
BACKGROUND_SKILL_COUNT = 2


class CatalogStore:
    """Read-only lookup tables for classes, races, backgrounds, and spells.

    Tables preserve declaration order. Use ``CatalogStore.build`` to create
    a store; it validates the data before exposing it.

    Attributes:
        classes: Class definitions keyed by id.
        races: Race and subrace definitions keyed by id.
        backgrounds: Background definitions keyed by id.
        spells: Spell definitions keyed by id.
    """

    def __init__(
        self,
        *,
        classes: Mapping[str, ClassDefinition],
        races: Mapping[str, RaceDefinition],
        backgrounds: Mapping[str, BackgroundDefinition],
        spells: Mapping[str, SpellDefinition],
        formulas: Mapping[str, PreparedSpellFormula],
    ) -> None:
        self.classes: Mapping[str, ClassDefinition] = MappingProxyType(dict(classes))
        self.races: Mapping[str, RaceDefinition] = MappingProxyType(dict(races))
        self.backgrounds: Mapping[str, BackgroundDefinition] = MappingProxyType(dict(backgrounds))
        self.spells: Mapping[str, SpellDefinition] = MappingProxyType(dict(spells))
        self._formulas: Mapping[str, PreparedSpellFormula] = MappingProxyType(dict(formulas))

    @classmethod
    def build(
        cls,
        *,
        classes: Iterable[ClassDefinition],
        races: Iterable[RaceDefinition],
        backgrounds: Iterable[BackgroundDefinition],
        spells: Iterable[SpellDefinition],
    ) -> CatalogStore:
        """Validate definitions and build a store.

        Args:
            classes: Class definitions in display order.
            races: Race and subrace definitions in display order.
            backgrounds: Background definitions in display order.
            spells: Spell definitions in display order.

        Returns:
            A validated, immutable catalog store.

        Raises:
            DuplicateIdError: If two entities in one table share an id.
            CatalogInvariantError: If an entity breaks a structural rule.
            FormulaError: If a prepared-spell formula cannot be parsed.
        """
        spell_index = _index(spells, "spells")
        class_index = _index(classes, "classes")
        race_index = _index(races, "races")
        background_index = _index(backgrounds, "backgrounds")

        formulas: dict[str, PreparedSpellFormula] = {}
        subclass_ids: set[str] = set()
        for class_def in class_index.values():
            _check_class(class_def, spell_index)
            for subclass in class_def.subclasses:
                if subclass.id in subclass_ids:
                    raise DuplicateIdError(
                        "Duplicate subclass id",
                        catalog="subclasses",
                        entity_id=subclass.id,
                    )
                subclass_ids.add(subclass.id)
            formula = _parse_formula(class_def)
            if formula is not None:
                formulas[class_def.id] = formula

        for race in race_index.values():
            _check_race(race, race_index)
        for background in background_index.values():
            _check_background(background)
        for spell in spell_index.values():
            _check_spell(spell, class_index)

        return cls(
            classes=class_index,
            races=race_index,
            backgrounds=background_index,
            spells=spell_index,
            formulas=formulas,
        )

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_class(self, class_id: str | None) -> ClassDefinition | None:
        """Get a class by id, or None if unknown."""
        if class_id is None:
            return None
        return self.classes.get(class_id)

    def get_race(self, race_id: str | None) -> RaceDefinition | None:
        """Get a race or subrace by id, or None if unknown."""
        if race_id is None:
            return None
        return self.races.get(race_id)

    def get_background(self, background_id: str | None) -> BackgroundDefinition | None:
        """Get a background by id, or None if unknown."""
        if background_id is None:
            return None
        return self.backgrounds.get(background_id)

    def get_spell(self, spell_id: str | None) -> SpellDefinition | None:
        """Get a spell by id, or None if unknown."""
        if spell_id is None:
            return None
        return self.spells.get(spell_id)

    def prepared_formula(self, class_id: str | None) -> PreparedSpellFormula | None:
        """Get the parsed prepared-spell formula of a prepared caster.

        Returns:
            The parsed formula, or None for known casters, non-casters,
            and unknown classes.
        """
        if class_id is None:
            return None
        return self._formulas.get(class_id)

    def __repr__(self) -> str:
        return (
            f"CatalogStore(classes={len(self.classes)}, races={len(self.races)}, "
            f"backgrounds={len(self.backgrounds)}, spells={len(self.spells)})"
        )


# =============================================================================
# Invariant Checks
# =============================================================================


def _index(entities: Iterable[_Entity], catalog: str) -> dict[str, _Entity]:
    index: dict[str, _Entity] = {}
    for entity in entities:
        if entity.id in index:
            raise DuplicateIdError(
                f"Duplicate id in {catalog} catalog",
                catalog=catalog,
                entity_id=entity.id,
            )
        index[entity.id] = entity
    return index


def _check_class(class_def: ClassDefinition, spells: Mapping[str, SpellDefinition]) -> None:
    def fail(message: str, **details: object) -> CatalogInvariantError:
        return CatalogInvariantError(
            message, catalog="classes", entity_id=class_def.id, details=dict(details)
        )

    saves = class_def.saving_throws
    if len(saves) != REQUIRED_SAVING_THROWS or len(set(saves)) != len(saves):
        raise fail("Class must have exactly two distinct saving throws", saving_throws=list(saves))

    if class_def.subclass_level not in VALID_SUBCLASS_LEVELS:
        raise fail("Subclass level must be 1, 2, or 3", subclass_level=class_def.subclass_level)

    if not class_def.subclasses:
        raise fail("Class must declare at least one subclass")

    rule = class_def.skill_choices
    if rule.choose > len(set(rule.options)):
        raise fail(
            "Skill choice count exceeds available options",
            choose=rule.choose,
            options=len(rule.options),
        )

    for subclass in class_def.subclasses:
        _check_subclass(class_def, subclass, spells)

    profile = class_def.spellcasting
    if profile is not None and isinstance(profile.spell_selection, KnownSpells):
        table = profile.spell_selection.spells_known
        missing = [
            level
            for level in range(MIN_CHARACTER_LEVEL, MAX_SUPPORTED_LEVEL + 1)
            if level not in table
        ]
        if missing:
            raise fail("Spells-known table does not cover every supported level", missing=missing)


def _check_subclass(
    class_def: ClassDefinition,
    subclass: SubclassDefinition,
    spells: Mapping[str, SpellDefinition],
) -> None:
    if subclass.class_id != class_def.id:
        raise CatalogInvariantError(
            f"Subclass references class '{subclass.class_id}' but is declared by '{class_def.id}'",
            catalog="subclasses",
            entity_id=subclass.id,
        )
    if not subclass.features.get(class_def.subclass_level):
        raise CatalogInvariantError(
            "Subclass has no features at its class's subclass level",
            catalog="subclasses",
            entity_id=subclass.id,
            details={"subclass_level": class_def.subclass_level},
        )
    for spell_level, spell_ids in subclass.expanded_spells.items():
        for spell_id in spell_ids:
            spell = spells.get(spell_id)
            if spell is None:
                raise CatalogInvariantError(
                    "Expanded spell is not in the spell catalog",
                    catalog="subclasses",
                    entity_id=subclass.id,
                    details={"spell_id": spell_id},
                )
            if spell.level != spell_level:
                raise CatalogInvariantError(
                    "Expanded spell is listed under the wrong spell level",
                    catalog="subclasses",
                    entity_id=subclass.id,
                    details={"spell_id": spell_id, "listed": spell_level, "actual": spell.level},
                )


def _parse_formula(class_def: ClassDefinition) -> PreparedSpellFormula | None:
    profile = class_def.spellcasting
    if profile is None or not isinstance(profile.spell_selection, PreparedSpells):
        return None
    expression = profile.spell_selection.formula
    try:
        return PreparedSpellFormula.parse(expression)
    except FormulaError as exc:
        raise FormulaError(
            exc.message,
            expression=expression,
            catalog="classes",
            entity_id=class_def.id,
        ) from exc


def _check_race(race: RaceDefinition, races: Mapping[str, RaceDefinition]) -> None:
    if race.base_race is not None:
        base = races.get(race.base_race)
        if base is None:
            raise CatalogInvariantError(
                f"Subrace references unknown base race '{race.base_race}'",
                catalog="races",
                entity_id=race.id,
            )
        if base.base_race is not None:
            raise CatalogInvariantError(
                f"Base race '{base.id}' is itself a subrace",
                catalog="races",
                entity_id=race.id,
            )

    fixed = set(race.fixed_bonuses)
    for entry in race.ability_bonuses:
        if not entry.is_choice:
            if entry.choice_count is not None or entry.excluded_abilities:
                raise CatalogInvariantError(
                    "Only flexible ability bonuses may set choice_count or exclusions",
                    catalog="races",
                    entity_id=race.id,
                )
            continue
        eligible = [
            ability
            for ability in Ability
            if ability not in fixed and ability not in entry.excluded_abilities
        ]
        if not entry.choice_count or entry.choice_count < 1:
            raise CatalogInvariantError(
                "Flexible ability bonus needs a positive choice_count",
                catalog="races",
                entity_id=race.id,
            )
        if entry.choice_count > len(eligible):
            raise CatalogInvariantError(
                "Flexible ability bonus asks for more choices than eligible abilities",
                catalog="races",
                entity_id=race.id,
                details={"choice_count": entry.choice_count, "eligible": len(eligible)},
            )


def _check_background(background: BackgroundDefinition) -> None:
    skills = background.skill_proficiencies
    if len(skills) != BACKGROUND_SKILL_COUNT or len(set(skills)) != len(skills):
        raise CatalogInvariantError(
            "Background must grant exactly two distinct skills",
            catalog="backgrounds",
            entity_id=background.id,
            details={"skills": [str(skill) for skill in skills]},
        )
    if not background.source.strip():
        raise CatalogInvariantError(
            "Background must declare a source",
            catalog="backgrounds",
            entity_id=background.id,
        )


def _check_spell(spell: SpellDefinition, classes: Mapping[str, ClassDefinition]) -> None:
    unknown = [class_id for class_id in spell.classes if class_id not in classes]
    if unknown:
        raise CatalogInvariantError(
            "Spell lists unknown classes",
            catalog="spells",
            entity_id=spell.id,
            details={"classes": unknown},
        )


# =============================================================================
# Process-wide SRD Catalog
# =============================================================================


@lru_cache(maxsize=1)
def get_catalog() -> CatalogStore:
    """Get the bundled SRD catalog singleton.

    Returns:
        The validated SRD catalog.

    Raises:
        CatalogError: If the bundled data is inconsistent.
    """
    from dnd_creator.catalog.backgrounds import BACKGROUNDS
    from dnd_creator.catalog.classes import CLASSES
    from dnd_creator.catalog.races import RACES
    from dnd_creator.catalog.spells import SPELLS

    try:
        catalog = CatalogStore.build(
            classes=CLASSES,
            races=RACES,
            backgrounds=BACKGROUNDS,
            spells=SPELLS,
        )
    except CatalogError as exc:
        logger.error("Catalog construction failed", error=exc.message, **exc.details)
        raise

    logger.info(
        "Catalog built",
        classes=len(catalog.classes),
        races=len(catalog.races),
        backgrounds=len(catalog.backgrounds),
        spells=len(catalog.spells),
    )
    return catalog


def clear_catalog_cache() -> None:
    """Clear the catalog cache, forcing a rebuild on next access."""
    get_catalog.cache_clear()


__all__ = [
    "CatalogStore",
    "get_catalog",
    "clear_catalog_cache",
]
