"""Spellcasting calculator.

Derives a draft's spellcasting profile: save DC, attack bonus, how many
cantrips and spells it may know or prepare, and its slots. Three economies
are supported:

- Known casters learn a fixed number of spells per level.
- Prepared casters prepare a daily subset sized by a formula.
- Pact-magic casters know spells but cast from a single pool of
  same-level slots instead of the nine-level slot row.

A half caster at level 1 is still a caster: it reports a row of zero slots,
not ``is_spellcaster=False``.
"""

from __future__ import annotations

from dnd_creator.catalog.progression import pact_magic_for, spell_slots_for
from dnd_creator.catalog.store import CatalogStore
from dnd_creator.core.constants import SPELL_SAVE_DC_BASE
from dnd_creator.core.logging import get_logger
from dnd_creator.engine.ability_scores import apply_racial_bonuses, race_lineage
from dnd_creator.engine.derived_stats import ability_modifier, proficiency_bonus
from dnd_creator.models.catalog import KnownSpells, PreparedSpells, SpellDefinition
from dnd_creator.models.draft import CharacterDraft
from dnd_creator.models.enums import SlotProgression
from dnd_creator.models.results import PactMagicSlots, SpellcastingInfo


logger = get_logger(__name__)


class SpellcastingCalculator:
    """Computes spellcasting information for drafts.

    Attributes:
        catalog: The catalog classes and spells are read from.
    """

    def __init__(self, catalog: CatalogStore) -> None:
        self.catalog = catalog

    def spellcasting_info(self, draft: CharacterDraft) -> SpellcastingInfo:
        """Derive the draft's spellcasting profile.

        Args:
            draft: The character draft.

        Returns:
            The spellcasting profile. Non-casters and drafts without a known
            class get ``is_spellcaster=False`` with every other field empty.
        """
        class_def = self.catalog.get_class(draft.class_id)
        if class_def is None or class_def.spellcasting is None:
            return SpellcastingInfo(is_spellcaster=False)

        profile = class_def.spellcasting
        level = draft.level
        scores = apply_racial_bonuses(
            draft.ability_scores,
            race_lineage(self.catalog, draft.race_id),
            draft.flexible_bonus_choices,
        )
        modifiers = {ability: ability_modifier(score) for ability, score in scores.items()}
        modifier = modifiers[profile.ability]
        bonus = proficiency_bonus(level)

        max_known: int | None = None
        max_prepared: int | None = None
        spellbook_size: int | None = None
        selection = profile.spell_selection
        if isinstance(selection, KnownSpells):
            max_known = selection.spells_known.get(level, 0)
            if selection.spellbook is not None:
                book = selection.spellbook
                spellbook_size = book.starting_spells + book.spells_per_level * max(level - 1, 0)
        elif isinstance(selection, PreparedSpells):
            formula = self.catalog.prepared_formula(class_def.id)
            if formula is not None:
                max_prepared = formula.evaluate(modifiers, level)

        pact_magic: PactMagicSlots | None = None
        if profile.slot_progression is SlotProgression.PACT:
            pact = pact_magic_for(level)
            if pact is not None:
                pact_magic = PactMagicSlots(slot_count=pact[0], slot_level=pact[1])

        subclass = class_def.get_subclass(draft.subclass_id)
        expanded = (
            [spell_id for _, ids in sorted(subclass.expanded_spells.items()) for spell_id in ids]
            if subclass is not None
            else []
        )

        info = SpellcastingInfo(
            is_spellcaster=True,
            casting_ability=profile.ability,
            level=level,
            proficiency_bonus=bonus,
            ability_modifier=modifier,
            spell_save_dc=SPELL_SAVE_DC_BASE + bonus + modifier,
            spell_attack_bonus=bonus + modifier,
            cantrips_known=profile.cantrips_known.get(level, 0),
            max_spells_known=max_known,
            max_spells_prepared=max_prepared,
            spellbook_size=spellbook_size,
            slot_progression=profile.slot_progression,
            spell_slots=spell_slots_for(profile.slot_progression, level),
            pact_magic=pact_magic,
            ritual_casting=profile.ritual_casting,
            expanded_spells=expanded,
        )
        logger.debug(
            "Derived spellcasting",
            class_id=class_def.id,
            level=level,
            save_dc=info.spell_save_dc,
            max_known=max_known,
            max_prepared=max_prepared,
        )
        return info

    def available_spells(self, draft: CharacterDraft, spell_level: int) -> list[SpellDefinition]:
        """Spells of one level the draft's class may choose from.

        Args:
            draft: The character draft.
            spell_level: Spell level, 0 for cantrips.

        Returns:
            Class-list spells of that level plus the selected subclass's
            expanded spells of that level, without duplicates, in catalog
            order. Empty for non-casters.
        """
        class_def = self.catalog.get_class(draft.class_id)
        if class_def is None or class_def.spellcasting is None:
            return []

        list_id = class_def.spellcasting.spell_list_id
        subclass = class_def.get_subclass(draft.subclass_id)
        expanded = set(subclass.expanded_spells.get(spell_level, ())) if subclass else set()
        return [
            spell
            for spell in self.catalog.spells.values()
            if spell.level == spell_level and (list_id in spell.classes or spell.id in expanded)
        ]

    def max_spell_level(self, draft: CharacterDraft) -> int:
        """Highest spell level the draft can cast with a slot, 0 if none."""
        info = self.spellcasting_info(draft)
        if info.pact_magic is not None:
            return info.pact_magic.slot_level
        highest = 0
        for index, count in enumerate(info.spell_slots, start=1):
            if count > 0:
                highest = index
        return highest


__all__ = [
    "SpellcastingCalculator",
]
