"""Tests for catalog store construction and lookups."""

from __future__ import annotations

from typing import Any

import pytest

from dnd_creator.catalog.backgrounds import ACOLYTE, BACKGROUNDS
from dnd_creator.catalog.classes import CLASSES, CLERIC, WIZARD
from dnd_creator.catalog.races import HALF_ELF, HIGH_ELF, RACES
from dnd_creator.catalog.spells import SPELLS
from dnd_creator.catalog.store import CatalogStore, clear_catalog_cache, get_catalog
from dnd_creator.core.exceptions import (
    CatalogError,
    CatalogInvariantError,
    ConfigurationError,
    DuplicateIdError,
    FormulaError,
)
from dnd_creator.models.catalog import (
    AbilityBonus,
    KnownSpells,
    PreparedSpells,
)
from dnd_creator.models.enums import Ability, Skill


def _replace(items: tuple[Any, ...], new: Any) -> tuple[Any, ...]:
    """Swap the entity with the same id as ``new``."""
    return tuple(new if item.id == new.id else item for item in items)


def _build(**overrides: Any) -> CatalogStore:
    tables: dict[str, Any] = {
        "classes": CLASSES,
        "races": RACES,
        "backgrounds": BACKGROUNDS,
        "spells": SPELLS,
    }
    tables.update(overrides)
    return CatalogStore.build(**tables)


def _with_subclass(class_def: Any, **update: Any) -> Any:
    subclass = class_def.subclasses[0].model_copy(update=update)
    return class_def.model_copy(update={"subclasses": (subclass,)})


class TestBuild:
    """Tests for building the bundled SRD catalog."""

    def test_table_sizes(self) -> None:
        """Test the bundled catalog has every class, race, and background."""
        store = _build()

        assert len(store.classes) == 12
        assert len(store.races) == 17
        assert len(store.backgrounds) == 6
        assert len(store.spells) == len(SPELLS)

    def test_declaration_order_preserved(self) -> None:
        """Test tables keep declaration order."""
        store = _build()

        assert list(store.classes) == [c.id for c in CLASSES]
        assert list(store.backgrounds)[0] == "acolyte"

    def test_tables_are_read_only(self) -> None:
        """Test there is no way to mutate a table."""
        store = _build()

        with pytest.raises(TypeError):
            store.classes["paladin"] = CLERIC  # type: ignore[index]

    def test_repr(self) -> None:
        """Test repr reports table sizes."""
        assert "classes=12" in repr(_build())


class TestLookups:
    """Tests for id lookups."""

    def test_known_ids(self, catalog: CatalogStore) -> None:
        """Test lookups of known ids."""
        assert catalog.get_class("wizard") is not None
        assert catalog.get_race("high-elf") is not None
        assert catalog.get_background("sage") is not None
        assert catalog.get_spell("fire-bolt") is not None

    def test_unknown_ids_return_none(self, catalog: CatalogStore) -> None:
        """Test unknown and missing ids never raise."""
        assert catalog.get_class("artificer") is None
        assert catalog.get_race("warforged") is None
        assert catalog.get_background("hermit") is None
        assert catalog.get_spell("wish") is None
        assert catalog.get_class(None) is None

    def test_prepared_formula(self, catalog: CatalogStore) -> None:
        """Test parsed formulas exist only for prepared casters."""
        assert catalog.prepared_formula("cleric") is not None
        assert catalog.prepared_formula("paladin") is not None
        assert catalog.prepared_formula("wizard") is None
        assert catalog.prepared_formula("fighter") is None
        assert catalog.prepared_formula(None) is None


class TestGetCatalog:
    """Tests for the catalog singleton."""

    def test_caching(self) -> None:
        """Test that the catalog is built once."""
        assert get_catalog() is get_catalog()

    def test_cache_clear(self) -> None:
        """Test that clearing the cache rebuilds the catalog."""
        first = get_catalog()
        clear_catalog_cache()

        assert get_catalog() is not first


class TestCatalogProperties:
    """Structural properties of the bundled catalog."""

    def test_every_class_has_two_saving_throws(self, catalog: CatalogStore) -> None:
        """Test each class declares exactly two saving throws."""
        for class_def in catalog.classes.values():
            assert len(class_def.saving_throws) == 2, class_def.id

    def test_subclass_levels(self, catalog: CatalogStore) -> None:
        """Test each class picks a subclass at level 1, 2, or 3."""
        for class_def in catalog.classes.values():
            assert class_def.subclass_level in {1, 2, 3}
            assert len(class_def.subclasses) > 0

    @pytest.mark.parametrize(
        ("class_id", "level"),
        [
            ("sorcerer", 1),
            ("warlock", 1),
            ("cleric", 1),
            ("wizard", 2),
            ("druid", 2),
            ("fighter", 3),
            ("barbarian", 3),
            ("rogue", 3),
            ("bard", 3),
        ],
    )
    def test_subclass_features_at_selection_level(
        self, catalog: CatalogStore, class_id: str, level: int
    ) -> None:
        """Test subclass features appear at the class's selection level."""
        class_def = catalog.get_class(class_id)
        assert class_def is not None
        assert class_def.subclass_level == level
        for subclass in class_def.subclasses:
            assert catalog.get_class(subclass.class_id) is class_def
            assert subclass.features[level]

    def test_spell_selection_is_exclusive(self, catalog: CatalogStore) -> None:
        """Test every caster has exactly one spell selection economy."""
        for class_def in catalog.classes.values():
            if class_def.spellcasting is None:
                continue
            selection = class_def.spellcasting.spell_selection
            assert isinstance(selection, KnownSpells) != isinstance(selection, PreparedSpells)

    def test_nine_base_races(self, catalog: CatalogStore) -> None:
        """Test there are nine base races and four with two subraces."""
        bases = [r for r in catalog.races.values() if r.base_race is None]
        subraces = [r for r in catalog.races.values() if r.base_race is not None]

        assert len(bases) == 9
        assert len(subraces) == 8


class TestBuildInvariants:
    """Tests for catalog invariant violations."""

    def test_duplicate_class_id(self) -> None:
        """Test duplicate class ids are rejected."""
        with pytest.raises(DuplicateIdError) as exc_info:
            _build(classes=(*CLASSES, CLERIC))

        assert exc_info.value.details["entity_id"] == "cleric"

    def test_duplicate_spell_id(self) -> None:
        """Test duplicate spell ids are rejected."""
        with pytest.raises(DuplicateIdError):
            _build(spells=(*SPELLS, SPELLS[0]))

    def test_errors_are_configuration_errors(self) -> None:
        """Test catalog faults are reported as configuration errors."""
        with pytest.raises(ConfigurationError):
            _build(races=(*RACES, HIGH_ELF))

    def test_saving_throw_count(self) -> None:
        """Test a class must have exactly two saving throws."""
        broken = CLERIC.model_copy(update={"saving_throws": (Ability.WIS,)})

        with pytest.raises(CatalogInvariantError, match="saving throws"):
            _build(classes=_replace(CLASSES, broken))

    def test_subclass_level_range(self) -> None:
        """Test subclass_level must be 1-3."""
        broken = CLERIC.model_copy(update={"subclass_level": 4})

        with pytest.raises(CatalogInvariantError, match="Subclass level"):
            _build(classes=_replace(CLASSES, broken))

    def test_subclasses_required(self) -> None:
        """Test a class must declare subclasses."""
        broken = CLERIC.model_copy(update={"subclasses": ()})

        with pytest.raises(CatalogInvariantError):
            _build(classes=_replace(CLASSES, broken))

    def test_subclass_owner_mismatch(self) -> None:
        """Test a subclass must point at its declaring class."""
        broken = _with_subclass(CLERIC, class_id="wizard")

        with pytest.raises(CatalogInvariantError) as exc_info:
            _build(classes=_replace(CLASSES, broken))

        assert exc_info.value.details["entity_id"] == "life-domain"

    def test_subclass_features_at_selection_level(self) -> None:
        """Test subclass features must start at the class's subclass level."""
        life = CLERIC.subclasses[0]
        broken = _with_subclass(CLERIC, features={2: life.features[1]})

        with pytest.raises(CatalogInvariantError, match="subclass level"):
            _build(classes=_replace(CLASSES, broken))

    def test_expanded_spell_unknown(self) -> None:
        """Test expanded spells must exist."""
        broken = _with_subclass(CLERIC, expanded_spells={1: ("wish",)})

        with pytest.raises(CatalogInvariantError, match="not in the spell catalog"):
            _build(classes=_replace(CLASSES, broken))

    def test_expanded_spell_wrong_level(self) -> None:
        """Test expanded spells must be listed under their own level."""
        broken = _with_subclass(CLERIC, expanded_spells={2: ("bless",)})

        with pytest.raises(CatalogInvariantError, match="wrong spell level"):
            _build(classes=_replace(CLASSES, broken))

    def test_spells_known_must_cover_levels(self) -> None:
        """Test a known caster's table must cover levels 1-3."""
        profile = WIZARD.spellcasting
        assert profile is not None
        selection = profile.spell_selection.model_copy(update={"spells_known": {1: 6, 2: 8}})
        broken = WIZARD.model_copy(
            update={"spellcasting": profile.model_copy(update={"spell_selection": selection})}
        )

        with pytest.raises(CatalogInvariantError) as exc_info:
            _build(classes=_replace(CLASSES, broken))

        assert exc_info.value.details["missing"] == [3]

    def test_bad_prepared_formula(self) -> None:
        """Test an unparseable formula fails the build."""
        profile = CLERIC.spellcasting
        assert profile is not None
        broken = CLERIC.model_copy(
            update={
                "spellcasting": profile.model_copy(
                    update={"spell_selection": PreparedSpells(formula="WIS_MOD + + LEVEL")}
                )
            }
        )

        with pytest.raises(FormulaError) as exc_info:
            _build(classes=_replace(CLASSES, broken))

        assert exc_info.value.details["entity_id"] == "cleric"
        assert exc_info.value.details["expression"] == "WIS_MOD + + LEVEL"

    def test_unknown_base_race(self) -> None:
        """Test a subrace must reference an existing base race."""
        broken = HIGH_ELF.model_copy(update={"base_race": "sea-elf"})

        with pytest.raises(CatalogInvariantError, match="unknown base race"):
            _build(races=_replace(RACES, broken))

    def test_base_race_is_subrace(self) -> None:
        """Test a subrace's base race cannot itself be a subrace."""
        broken = HIGH_ELF.model_copy(update={"base_race": "wood-elf"})

        with pytest.raises(CatalogInvariantError, match="itself a subrace"):
            _build(races=_replace(RACES, broken))

    def test_choice_bonus_needs_count(self) -> None:
        """Test a flexible bonus must have a positive choice_count."""
        broken = HALF_ELF.model_copy(
            update={
                "ability_bonuses": (
                    AbilityBonus(ability=Ability.CHA, bonus=2),
                    AbilityBonus(ability="choice", bonus=1),
                )
            }
        )

        with pytest.raises(CatalogInvariantError, match="choice_count"):
            _build(races=_replace(RACES, broken))

    def test_background_needs_two_skills(self) -> None:
        """Test a background must grant exactly two skills."""
        broken = ACOLYTE.model_copy(
            update={"skill_proficiencies": (Skill.INSIGHT, Skill.RELIGION, Skill.HISTORY)}
        )

        with pytest.raises(CatalogInvariantError, match="two distinct skills"):
            _build(backgrounds=_replace(BACKGROUNDS, broken))

    def test_background_needs_source(self) -> None:
        """Test a background must declare a source."""
        broken = ACOLYTE.model_copy(update={"source": "  "})

        with pytest.raises(CatalogInvariantError, match="source"):
            _build(backgrounds=_replace(BACKGROUNDS, broken))

    def test_spell_with_unknown_class(self) -> None:
        """Test a spell cannot name an unknown class list."""
        broken = SPELLS[0].model_copy(update={"classes": ("artificer",)})

        with pytest.raises(CatalogError, match="unknown classes"):
            _build(spells=_replace(SPELLS, broken))
