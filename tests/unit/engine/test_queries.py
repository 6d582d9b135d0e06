"""Tests for the catalog query facade."""

from __future__ import annotations

from dnd_creator.engine.queries import CatalogQueries, item_name, item_type
from dnd_creator.models.draft import CharacterDraft
from dnd_creator.models.enums import Ability, ItemType, Skill


class TestClassQueries:
    """Tests for class and subclass queries."""

    def test_classes_available(self, queries: CatalogQueries) -> None:
        """Test all twelve classes are listed in catalog order."""
        classes = queries.classes_available()

        assert len(classes) == 12
        assert classes[0].id == "barbarian"
        assert classes[-1].id == "wizard"

    def test_class_by_id(self, queries: CatalogQueries) -> None:
        """Test class lookup, including unknown ids."""
        cleric = queries.class_by_id("cleric")
        assert cleric is not None
        assert cleric.hit_die == 8
        assert queries.class_by_id("artificer") is None

    def test_subclasses_for(self, queries: CatalogQueries) -> None:
        """Test subclasses belong to the requested class."""
        subclasses = queries.subclasses_for("cleric")

        assert [s.id for s in subclasses] == ["life-domain"]
        assert all(s.class_id == "cleric" for s in subclasses)
        assert queries.subclasses_for("artificer") == []

    def test_subclass_by_id(self, queries: CatalogQueries) -> None:
        """Test subclass lookup is scoped to its class."""
        assert queries.subclass_by_id("cleric", "life-domain") is not None
        assert queries.subclass_by_id("wizard", "life-domain") is None
        assert queries.subclass_by_id("artificer", "life-domain") is None

    def test_requires_level1_subclass(self, queries: CatalogQueries) -> None:
        """Test which classes pick a subclass at level 1."""
        assert queries.requires_level1_subclass("cleric")
        assert queries.requires_level1_subclass("sorcerer")
        assert queries.requires_level1_subclass("warlock")
        assert not queries.requires_level1_subclass("wizard")
        assert not queries.requires_level1_subclass("fighter")
        assert not queries.requires_level1_subclass("artificer")

    def test_requires_subclass_by_level(self, queries: CatalogQueries) -> None:
        """Test subclass requirement follows the selection level."""
        assert not queries.requires_subclass("wizard", 1)
        assert queries.requires_subclass("wizard", 2)
        assert not queries.requires_subclass("fighter", 2)
        assert queries.requires_subclass("fighter", 3)

    def test_class_features_at(self, queries: CatalogQueries) -> None:
        """Test class features accumulate and subclass features follow."""
        level1 = queries.class_features_at("cleric", 1)
        level2 = queries.class_features_at("cleric", 2)
        with_domain = queries.class_features_at("cleric", 1, "life-domain")

        assert "spellcasting-cleric" in [f.id for f in level1]
        assert len(level2) > len(level1)
        assert [f.id for f in with_domain][: len(level1)] == [f.id for f in level1]
        assert len(with_domain) > len(level1)
        assert queries.class_features_at("artificer", 1) == []

    def test_class_resources(self, queries: CatalogQueries) -> None:
        """Test class resources come from the progression tables."""
        rogue = queries.class_resources("rogue", 3)
        monk = queries.class_resources("monk", 1)
        barbarian = queries.class_resources("barbarian", 3)
        wizard = queries.class_resources("wizard", 1)

        assert rogue is not None and rogue.sneak_attack_dice == "2d6"
        assert monk is not None and monk.martial_arts_die == "1d4"
        assert barbarian is not None and barbarian.rages_per_day == 3
        assert wizard is not None
        assert wizard.sneak_attack_dice is None
        assert queries.class_resources("artificer", 1) is None


class TestRaceQueries:
    """Tests for race queries."""

    def test_races_available_includes_subraces(self, queries: CatalogQueries) -> None:
        """Test every race entry is listed."""
        ids = [r.id for r in queries.races_available()]

        assert len(ids) == 17
        assert "elf" in ids
        assert "high-elf" in ids

    def test_base_race_options(self, queries: CatalogQueries) -> None:
        """Test base races are listed once each."""
        options = queries.base_race_options()
        ids = [o.id for o in options]

        assert len(options) == 9
        assert ids.count("elf") == 1
        elf = next(o for o in options if o.id == "elf")
        human = next(o for o in options if o.id == "human")
        assert elf.has_subraces is True
        assert human.has_subraces is False

    def test_subraces_for(self, queries: CatalogQueries) -> None:
        """Test subraces of a base race."""
        assert [r.id for r in queries.subraces_for("elf")] == ["high-elf", "wood-elf"]
        assert queries.subraces_for("human") == []
        assert queries.subraces_for("warforged") == []

    def test_flexible_bonuses(self, queries: CatalogQueries) -> None:
        """Test flexible bonus detection and options."""
        assert queries.has_flexible_ability_bonuses("half-elf")
        assert not queries.has_flexible_ability_bonuses("human")
        assert not queries.has_flexible_ability_bonuses("warforged")

        options = queries.flexible_ability_bonus_options("half-elf")
        assert options is not None
        assert options.choice_count == 2
        assert options.bonus == 1
        assert Ability.CHA not in options.eligible_abilities
        assert queries.flexible_ability_bonus_options("human") is None


class TestBackgroundAndSpellQueries:
    """Tests for background and spell queries."""

    def test_backgrounds(self, queries: CatalogQueries) -> None:
        """Test background listing and lookup."""
        assert len(queries.backgrounds_available()) == 6
        acolyte = queries.background_by_id("acolyte")
        assert acolyte is not None
        assert set(acolyte.skill_proficiencies) == {Skill.INSIGHT, Skill.RELIGION}
        assert queries.background_by_id("hermit") is None

    def test_spells(self, queries: CatalogQueries) -> None:
        """Test spell listing and lookup."""
        spells = queries.spells_available()

        assert spells[0].is_cantrip
        assert queries.spell_by_id("magic-missile") is not None
        assert queries.spell_by_id("wish") is None


class TestEquipmentChoiceGroups:
    """Tests for starting equipment presentation."""

    def test_groups_for_class(self, queries: CatalogQueries) -> None:
        """Test groups follow the class's declaration."""
        groups = queries.equipment_choice_groups("barbarian")

        assert [g.id for g in groups] == [
            "barbarian-weapon-1",
            "barbarian-weapon-2",
            "barbarian-pack",
            "barbarian-javelins",
        ]
        assert queries.equipment_choice_groups("artificer") == []

    def test_duplicate_items_collapse_into_quantity(self, queries: CatalogQueries) -> None:
        """Test four javelins become one item with quantity 4."""
        groups = {g.id: g for g in queries.equipment_choice_groups("barbarian")}
        items = groups["barbarian-javelins"].options[0].items

        assert len(items) == 1
        assert items[0].name == "Javelin"
        assert items[0].quantity == 4
        assert items[0].type is ItemType.WEAPON

    def test_choice_item_names(self, queries: CatalogQueries) -> None:
        """Test placeholder items get readable names."""
        groups = {g.id: g for g in queries.equipment_choice_groups("barbarian")}
        item = groups["barbarian-weapon-1"].options[1].items[0]

        assert item.id == "martial-melee-choice"
        assert item.name == "Martial Melee"
        assert item.type is ItemType.WEAPON

    def test_item_type_inference(self) -> None:
        """Test coarse item types."""
        assert item_type("explorers-pack") is ItemType.PACK
        assert item_type("leather-armor") is ItemType.ARMOR
        assert item_type("chain-mail") is ItemType.ARMOR
        assert item_type("shield") is ItemType.ARMOR
        assert item_type("thieves-tools") is ItemType.TOOL
        assert item_type("lute") is ItemType.TOOL
        assert item_type("light-crossbow") is ItemType.WEAPON
        assert item_type("holy-symbol") is ItemType.GEAR

    def test_item_name(self) -> None:
        """Test names are title-cased from ids."""
        assert item_name("simple-weapon-choice") == "Simple Weapon"
        assert item_name("holy-symbol") == "Holy Symbol"


class TestValidSkillChoices:
    """Tests for class skill choices."""

    def test_selected_restricted_to_options(self, queries: CatalogQueries) -> None:
        """Test picks outside the class list are filtered out."""
        draft = CharacterDraft(
            class_id="cleric",
            class_skills=[Skill.RELIGION, Skill.STEALTH],
        )

        choice = queries.valid_skill_choices(draft)

        assert choice.count == 2
        assert Skill.STEALTH not in choice.options
        assert choice.selected == [Skill.RELIGION]
        assert draft.class_skills == [Skill.RELIGION, Skill.STEALTH]

    def test_no_class(self, queries: CatalogQueries) -> None:
        """Test a draft without a class gets an empty choice."""
        choice = queries.valid_skill_choices(CharacterDraft())

        assert choice.count == 0
        assert choice.options == []
        assert choice.selected == []
