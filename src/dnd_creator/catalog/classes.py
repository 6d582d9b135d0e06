"""SRD class catalog: the twelve core classes with one subclass each.

Features are listed for levels 1-3. Every class declares the level at
which its subclass is chosen; subclass features start at that level.
"""

from __future__ import annotations

from dnd_creator.models.catalog import (
    ClassDefinition,
    EquipmentChoice,
    EquipmentOptionGroup,
    Feature,
    KnownSpells,
    LimitedUse,
    PreparedSpells,
    SkillChoiceRule,
    Spellbook,
    SpellcastingProfile,
    StartingGold,
    SubclassDefinition,
)
from dnd_creator.models.enums import Ability, FeatureSource, RestType, Skill, SlotProgression


def _feature(
    feature_id: str,
    name: str,
    description: str,
    *,
    source: FeatureSource = FeatureSource.CLASS,
    uses: int | None = None,
    reset_on: RestType = RestType.LONG_REST,
) -> Feature:
    """Build a class or subclass feature."""
    limited_use = LimitedUse(max_uses=uses, reset_on=reset_on) if uses else None
    return Feature(
        id=feature_id,
        name=name,
        description=description,
        source=source,
        limited_use=limited_use,
    )


def _subclass_feature(feature_id: str, name: str, description: str, **kwargs) -> Feature:
    return _feature(feature_id, name, description, source=FeatureSource.SUBCLASS, **kwargs)


def _option(option_id: str, description: str, *items: str) -> EquipmentChoice:
    return EquipmentChoice(id=option_id, description=description, items=items)


def _group(group_id: str, *options: EquipmentChoice) -> EquipmentOptionGroup:
    return EquipmentOptionGroup(group_id=group_id, options=options)


SIMPLE_AND_MARTIAL = ("simple weapons", "martial weapons")
ALL_ARMOR = ("light armor", "medium armor", "heavy armor", "shields")
MEDIUM_ARMOR = ("light armor", "medium armor", "shields")
ARCANE_WEAPONS = ("daggers", "darts", "slings", "quarterstaffs", "light crossbows")
FINESSE_WEAPONS = ("simple weapons", "hand crossbows", "longswords", "rapiers", "shortswords")


# =============================================================================
# Barbarian
# =============================================================================

BARBARIAN = ClassDefinition(
    id="barbarian",
    name="Barbarian",
    hit_die=12,
    primary_abilities=(Ability.STR,),
    saving_throws=(Ability.STR, Ability.CON),
    armor_proficiencies=MEDIUM_ARMOR,
    weapon_proficiencies=SIMPLE_AND_MARTIAL,
    skill_choices=SkillChoiceRule(
        choose=2,
        options=(
            Skill.ANIMAL_HANDLING,
            Skill.ATHLETICS,
            Skill.INTIMIDATION,
            Skill.NATURE,
            Skill.PERCEPTION,
            Skill.SURVIVAL,
        ),
    ),
    equipment_options=(
        _group(
            "barbarian-weapon-1",
            _option("greataxe", "A greataxe", "greataxe"),
            _option("martial-melee", "Any martial melee weapon", "martial-melee-choice"),
        ),
        _group(
            "barbarian-weapon-2",
            _option("two-handaxes", "Two handaxes", "handaxe", "handaxe"),
            _option("simple-weapon", "Any simple weapon", "simple-weapon-choice"),
        ),
        _group(
            "barbarian-pack",
            _option("explorers-pack", "An explorer's pack", "explorers-pack"),
        ),
        _group(
            "barbarian-javelins",
            _option("four-javelins", "Four javelins", *["javelin"] * 4),
        ),
    ),
    features={
        1: (
            _feature(
                "rage",
                "Rage",
                "Enter a rage as a bonus action for advantage on STR checks and saves, "
                "bonus melee damage, and resistance to physical damage.",
                uses=2,
            ),
            _feature(
                "unarmored-defense-barbarian",
                "Unarmored Defense",
                "Without armor, your AC equals 10 + DEX modifier + CON modifier.",
            ),
        ),
        2: (
            _feature(
                "reckless-attack",
                "Reckless Attack",
                "Gain advantage on STR melee attacks this turn; attacks against you "
                "have advantage until your next turn.",
            ),
            _feature(
                "danger-sense",
                "Danger Sense",
                "Advantage on DEX saves against effects you can see.",
            ),
        ),
        3: (
            _feature(
                "primal-path",
                "Primal Path",
                "Choose a path that shapes the nature of your rage.",
            ),
        ),
    },
    subclass_level=3,
    subclasses=(
        SubclassDefinition(
            id="berserker",
            name="Path of the Berserker",
            class_id="barbarian",
            description="A path of untrammeled fury, slick with blood.",
            features={
                3: (
                    _subclass_feature(
                        "frenzy",
                        "Frenzy",
                        "While raging in a frenzy, make one melee weapon attack as a bonus "
                        "action each turn; gain a level of exhaustion when the rage ends.",
                    ),
                ),
            },
        ),
    ),
    starting_gold=StartingGold(dice="2d4", multiplier=10),
    description="A fierce warrior of primitive background who can enter a battle rage.",
)


# =============================================================================
# Bard
# =============================================================================

BARD = ClassDefinition(
    id="bard",
    name="Bard",
    hit_die=8,
    primary_abilities=(Ability.CHA,),
    saving_throws=(Ability.DEX, Ability.CHA),
    armor_proficiencies=("light armor",),
    weapon_proficiencies=FINESSE_WEAPONS,
    tool_proficiencies=("three musical instruments of your choice",),
    skill_choices=SkillChoiceRule(choose=3, options=tuple(Skill)),
    equipment_options=(
        _group(
            "bard-weapon",
            _option("rapier", "A rapier", "rapier"),
            _option("longsword", "A longsword", "longsword"),
            _option("simple-weapon", "Any simple weapon", "simple-weapon-choice"),
        ),
        _group(
            "bard-pack",
            _option("diplomats-pack", "A diplomat's pack", "diplomats-pack"),
            _option("entertainers-pack", "An entertainer's pack", "entertainers-pack"),
        ),
        _group(
            "bard-instrument",
            _option("lute", "A lute", "lute"),
            _option("musical-instrument", "Any musical instrument", "musical-instrument-choice"),
        ),
        _group(
            "bard-standard",
            _option("leather-dagger", "Leather armor and a dagger", "leather-armor", "dagger"),
        ),
    ),
    features={
        1: (
            _feature(
                "spellcasting-bard",
                "Spellcasting",
                "Cast bard spells using Charisma, with a musical instrument as a focus.",
            ),
            _feature(
                "bardic-inspiration",
                "Bardic Inspiration",
                "As a bonus action, give a creature a d6 to add to one check, attack, or save.",
            ),
        ),
        2: (
            _feature(
                "jack-of-all-trades",
                "Jack of All Trades",
                "Add half your proficiency bonus to ability checks that don't already include it.",
            ),
            _feature(
                "song-of-rest",
                "Song of Rest",
                "Allies who spend hit dice during a short rest regain an extra 1d6 hit points.",
            ),
        ),
        3: (
            _feature(
                "bard-college",
                "Bard College",
                "Delve into the advanced techniques of a bard college.",
            ),
            _feature(
                "expertise-bard",
                "Expertise",
                "Double your proficiency bonus for two chosen skill proficiencies.",
            ),
        ),
    },
    subclass_level=3,
    subclasses=(
        SubclassDefinition(
            id="college-of-lore",
            name="College of Lore",
            class_id="bard",
            description="Bards who collect bits of knowledge from every source.",
            features={
                3: (
                    _subclass_feature(
                        "bonus-proficiencies-lore",
                        "Bonus Proficiencies",
                        "Gain proficiency with three skills of your choice.",
                    ),
                    _subclass_feature(
                        "cutting-words",
                        "Cutting Words",
                        "Spend a use of Bardic Inspiration to subtract the die from a "
                        "creature's attack, check, or damage roll.",
                    ),
                ),
            },
        ),
    ),
    starting_gold=StartingGold(dice="5d4", multiplier=10),
    spellcasting=SpellcastingProfile(
        ability=Ability.CHA,
        cantrips_known={1: 2, 2: 2, 3: 2},
        spell_selection=KnownSpells(spells_known={1: 4, 2: 5, 3: 6}),
        slot_progression=SlotProgression.FULL,
        ritual_casting=True,
        spell_list_id="bard",
    ),
    description="An inspiring magician whose power echoes the music of creation.",
)


# =============================================================================
# Cleric
# =============================================================================

CLERIC = ClassDefinition(
    id="cleric",
    name="Cleric",
    hit_die=8,
    primary_abilities=(Ability.WIS,),
    saving_throws=(Ability.WIS, Ability.CHA),
    armor_proficiencies=MEDIUM_ARMOR,
    weapon_proficiencies=("simple weapons",),
    skill_choices=SkillChoiceRule(
        choose=2,
        options=(
            Skill.HISTORY,
            Skill.INSIGHT,
            Skill.MEDICINE,
            Skill.PERSUASION,
            Skill.RELIGION,
        ),
    ),
    equipment_options=(
        _group(
            "cleric-weapon",
            _option("mace", "A mace", "mace"),
            _option("warhammer", "A warhammer (if proficient)", "warhammer"),
        ),
        _group(
            "cleric-armor",
            _option("scale-mail", "Scale mail", "scale-mail"),
            _option("leather-armor", "Leather armor", "leather-armor"),
            _option("chain-mail", "Chain mail (if proficient)", "chain-mail"),
        ),
        _group(
            "cleric-weapon-2",
            _option(
                "light-crossbow-bolts", "A light crossbow and 20 bolts",
                "light-crossbow", "bolts-20",
            ),
            _option("simple-weapon", "Any simple weapon", "simple-weapon-choice"),
        ),
        _group(
            "cleric-pack",
            _option("priests-pack", "A priest's pack", "priests-pack"),
            _option("explorers-pack", "An explorer's pack", "explorers-pack"),
        ),
        _group(
            "cleric-standard",
            _option("shield-holy-symbol", "A shield and a holy symbol", "shield", "holy-symbol"),
        ),
    ),
    features={
        1: (
            _feature(
                "spellcasting-cleric",
                "Spellcasting",
                "Cast cleric spells using Wisdom, with a holy symbol as a focus.",
            ),
            _feature(
                "divine-domain",
                "Divine Domain",
                "Choose a domain related to your deity.",
            ),
        ),
        2: (
            _feature(
                "channel-divinity-cleric",
                "Channel Divinity",
                "Channel divine energy to fuel magical effects.",
                uses=1,
                reset_on=RestType.SHORT_REST,
            ),
            _feature(
                "turn-undead",
                "Channel Divinity: Turn Undead",
                "Undead that fail a WIS save are turned for 1 minute.",
            ),
        ),
    },
    subclass_level=1,
    subclasses=(
        SubclassDefinition(
            id="life-domain",
            name="Life Domain",
            class_id="cleric",
            description="A domain of the positive energy that sustains all life.",
            features={
                1: (
                    _subclass_feature(
                        "domain-spells-life",
                        "Life Domain Spells",
                        "Bless and Cure Wounds are always prepared; more domain spells at 3rd level.",
                    ),
                    _subclass_feature(
                        "bonus-proficiency-life",
                        "Bonus Proficiency",
                        "Gain proficiency with heavy armor.",
                    ),
                    _subclass_feature(
                        "disciple-of-life",
                        "Disciple of Life",
                        "Healing spells of 1st level or higher restore an additional "
                        "2 + the spell's level hit points.",
                    ),
                ),
                2: (
                    _subclass_feature(
                        "preserve-life",
                        "Channel Divinity: Preserve Life",
                        "Restore hit points equal to five times your cleric level, divided "
                        "among creatures within 30 feet.",
                    ),
                ),
            },
            expanded_spells={
                1: ("bless", "cure-wounds"),
                2: ("lesser-restoration", "spiritual-weapon"),
            },
        ),
    ),
    starting_gold=StartingGold(dice="5d4", multiplier=10),
    spellcasting=SpellcastingProfile(
        ability=Ability.WIS,
        cantrips_known={1: 3, 2: 3, 3: 3},
        spell_selection=PreparedSpells(formula="WIS_MOD + LEVEL"),
        slot_progression=SlotProgression.FULL,
        ritual_casting=True,
        spell_list_id="cleric",
    ),
    description="A priestly champion who wields divine magic in service of a higher power.",
)


# =============================================================================
# Druid
# =============================================================================

DRUID = ClassDefinition(
    id="druid",
    name="Druid",
    hit_die=8,
    primary_abilities=(Ability.WIS,),
    saving_throws=(Ability.INT, Ability.WIS),
    armor_proficiencies=("light armor", "medium armor", "shields (nonmetal)"),
    weapon_proficiencies=(
        "clubs", "daggers", "darts", "javelins", "maces", "quarterstaffs",
        "scimitars", "sickles", "slings", "spears",
    ),
    tool_proficiencies=("herbalism kit",),
    skill_choices=SkillChoiceRule(
        choose=2,
        options=(
            Skill.ARCANA,
            Skill.ANIMAL_HANDLING,
            Skill.INSIGHT,
            Skill.MEDICINE,
            Skill.NATURE,
            Skill.PERCEPTION,
            Skill.RELIGION,
            Skill.SURVIVAL,
        ),
    ),
    equipment_options=(
        _group(
            "druid-shield",
            _option("wooden-shield", "A wooden shield", "shield"),
            _option("simple-weapon", "Any simple weapon", "simple-weapon-choice"),
        ),
        _group(
            "druid-weapon",
            _option("scimitar", "A scimitar", "scimitar"),
            _option("simple-melee", "Any simple melee weapon", "simple-melee-choice"),
        ),
        _group(
            "druid-standard",
            _option(
                "leather-pack-focus",
                "Leather armor, an explorer's pack, and a druidic focus",
                "leather-armor", "explorers-pack", "druidic-focus",
            ),
        ),
    ),
    features={
        1: (
            _feature(
                "druidic",
                "Druidic",
                "You know Druidic, the secret language of druids.",
            ),
            _feature(
                "spellcasting-druid",
                "Spellcasting",
                "Cast druid spells using Wisdom, with a druidic focus.",
            ),
        ),
        2: (
            _feature(
                "wild-shape",
                "Wild Shape",
                "Magically assume the shape of a beast you have seen before.",
                uses=2,
                reset_on=RestType.SHORT_REST,
            ),
            _feature(
                "druid-circle",
                "Druid Circle",
                "Choose to identify with a circle of druids.",
            ),
        ),
    },
    subclass_level=2,
    subclasses=(
        SubclassDefinition(
            id="circle-of-the-land",
            name="Circle of the Land",
            class_id="druid",
            description="Mystics and sages who safeguard ancient knowledge and rites.",
            features={
                2: (
                    _subclass_feature(
                        "bonus-cantrip-land",
                        "Bonus Cantrip",
                        "Learn one additional druid cantrip.",
                    ),
                    _subclass_feature(
                        "natural-recovery",
                        "Natural Recovery",
                        "During a short rest, recover expended spell slots with a combined "
                        "level up to half your druid level.",
                        uses=1,
                    ),
                ),
            },
        ),
    ),
    starting_gold=StartingGold(dice="2d4", multiplier=10),
    spellcasting=SpellcastingProfile(
        ability=Ability.WIS,
        cantrips_known={1: 2, 2: 2, 3: 2},
        spell_selection=PreparedSpells(formula="WIS_MOD + LEVEL"),
        slot_progression=SlotProgression.FULL,
        ritual_casting=True,
        spell_list_id="druid",
    ),
    description="A priest of the Old Faith, wielding the powers of nature.",
)


# =============================================================================
# Fighter
# =============================================================================

FIGHTER = ClassDefinition(
    id="fighter",
    name="Fighter",
    hit_die=10,
    primary_abilities=(Ability.STR, Ability.DEX),
    saving_throws=(Ability.STR, Ability.CON),
    armor_proficiencies=ALL_ARMOR,
    weapon_proficiencies=SIMPLE_AND_MARTIAL,
    skill_choices=SkillChoiceRule(
        choose=2,
        options=(
            Skill.ACROBATICS,
            Skill.ANIMAL_HANDLING,
            Skill.ATHLETICS,
            Skill.HISTORY,
            Skill.INSIGHT,
            Skill.INTIMIDATION,
            Skill.PERCEPTION,
            Skill.SURVIVAL,
        ),
    ),
    equipment_options=(
        _group(
            "fighter-armor",
            _option("chain-mail", "Chain mail", "chain-mail"),
            _option(
                "leather-longbow-arrows", "Leather armor, longbow, and 20 arrows",
                "leather-armor", "longbow", "arrows-20",
            ),
        ),
        _group(
            "fighter-weapon-1",
            _option(
                "martial-weapon-shield", "A martial weapon and a shield",
                "martial-weapon-choice", "shield",
            ),
            _option(
                "two-martial-weapons", "Two martial weapons",
                "martial-weapon-choice", "martial-weapon-choice",
            ),
        ),
        _group(
            "fighter-ranged",
            _option(
                "light-crossbow-bolts", "A light crossbow and 20 bolts",
                "light-crossbow", "bolts-20",
            ),
            _option("two-handaxes", "Two handaxes", "handaxe", "handaxe"),
        ),
        _group(
            "fighter-pack",
            _option("dungeoneers-pack", "A dungeoneer's pack", "dungeoneers-pack"),
            _option("explorers-pack", "An explorer's pack", "explorers-pack"),
        ),
    ),
    features={
        1: (
            _feature(
                "fighting-style-fighter",
                "Fighting Style",
                "Adopt a particular style of fighting as your specialty.",
            ),
            _feature(
                "second-wind",
                "Second Wind",
                "As a bonus action, regain 1d10 + fighter level hit points.",
                uses=1,
                reset_on=RestType.SHORT_REST,
            ),
        ),
        2: (
            _feature(
                "action-surge",
                "Action Surge",
                "Take one additional action on your turn.",
                uses=1,
                reset_on=RestType.SHORT_REST,
            ),
        ),
        3: (
            _feature(
                "martial-archetype",
                "Martial Archetype",
                "Choose an archetype to emulate in your combat techniques.",
            ),
        ),
    },
    subclass_level=3,
    subclasses=(
        SubclassDefinition(
            id="champion",
            name="Champion",
            class_id="fighter",
            description="Raw physical power honed to deadly perfection.",
            features={
                3: (
                    _subclass_feature(
                        "improved-critical",
                        "Improved Critical",
                        "Weapon attacks score a critical hit on a roll of 19 or 20.",
                    ),
                ),
            },
        ),
    ),
    starting_gold=StartingGold(dice="5d4", multiplier=10),
    description="A master of martial combat, skilled with a variety of weapons and armor.",
)


# =============================================================================
# Monk
# =============================================================================

MONK = ClassDefinition(
    id="monk",
    name="Monk",
    hit_die=8,
    primary_abilities=(Ability.DEX, Ability.WIS),
    saving_throws=(Ability.STR, Ability.DEX),
    weapon_proficiencies=("simple weapons", "shortswords"),
    tool_proficiencies=("one type of artisan's tools or one musical instrument",),
    skill_choices=SkillChoiceRule(
        choose=2,
        options=(
            Skill.ACROBATICS,
            Skill.ATHLETICS,
            Skill.HISTORY,
            Skill.INSIGHT,
            Skill.RELIGION,
            Skill.STEALTH,
        ),
    ),
    equipment_options=(
        _group(
            "monk-weapon",
            _option("shortsword", "A shortsword", "shortsword"),
            _option("simple-weapon", "Any simple weapon", "simple-weapon-choice"),
        ),
        _group(
            "monk-pack",
            _option("dungeoneers-pack", "A dungeoneer's pack", "dungeoneers-pack"),
            _option("explorers-pack", "An explorer's pack", "explorers-pack"),
        ),
        _group(
            "monk-darts",
            _option("ten-darts", "10 darts", *["dart"] * 10),
        ),
    ),
    features={
        1: (
            _feature(
                "unarmored-defense-monk",
                "Unarmored Defense",
                "Without armor or shield, your AC equals 10 + DEX modifier + WIS modifier.",
            ),
            _feature(
                "martial-arts",
                "Martial Arts",
                "Use DEX for unarmed strikes and monk weapons, roll a martial arts die for "
                "damage, and make an unarmed strike as a bonus action.",
            ),
        ),
        2: (
            _feature(
                "ki",
                "Ki",
                "Harness ki points equal to your monk level to fuel Flurry of Blows, "
                "Patient Defense, and Step of the Wind.",
            ),
            _feature(
                "unarmored-movement",
                "Unarmored Movement",
                "Your speed increases by 10 feet while unarmored.",
            ),
        ),
        3: (
            _feature(
                "monastic-tradition",
                "Monastic Tradition",
                "Commit yourself to a monastic tradition.",
            ),
            _feature(
                "deflect-missiles",
                "Deflect Missiles",
                "Use your reaction to reduce damage from a ranged weapon attack.",
            ),
        ),
    },
    subclass_level=3,
    subclasses=(
        SubclassDefinition(
            id="way-of-the-open-hand",
            name="Way of the Open Hand",
            class_id="monk",
            description="Ultimate masters of martial arts combat, armed or unarmed.",
            features={
                3: (
                    _subclass_feature(
                        "open-hand-technique",
                        "Open Hand Technique",
                        "Flurry of Blows hits can knock a target prone, push it, or deny "
                        "its reactions.",
                    ),
                ),
            },
        ),
    ),
    starting_gold=StartingGold(dice="5d4", multiplier=1),
    description="A master of martial arts harnessing the power of the body.",
)


# =============================================================================
# Paladin
# =============================================================================

PALADIN = ClassDefinition(
    id="paladin",
    name="Paladin",
    hit_die=10,
    primary_abilities=(Ability.STR, Ability.CHA),
    saving_throws=(Ability.WIS, Ability.CHA),
    armor_proficiencies=ALL_ARMOR,
    weapon_proficiencies=SIMPLE_AND_MARTIAL,
    skill_choices=SkillChoiceRule(
        choose=2,
        options=(
            Skill.ATHLETICS,
            Skill.INSIGHT,
            Skill.INTIMIDATION,
            Skill.MEDICINE,
            Skill.PERSUASION,
            Skill.RELIGION,
        ),
    ),
    equipment_options=(
        _group(
            "paladin-weapon",
            _option(
                "martial-weapon-shield", "A martial weapon and a shield",
                "martial-weapon-choice", "shield",
            ),
            _option(
                "two-martial-weapons", "Two martial weapons",
                "martial-weapon-choice", "martial-weapon-choice",
            ),
        ),
        _group(
            "paladin-melee",
            _option("five-javelins", "Five javelins", *["javelin"] * 5),
            _option("simple-melee", "Any simple melee weapon", "simple-melee-choice"),
        ),
        _group(
            "paladin-pack",
            _option("priests-pack", "A priest's pack", "priests-pack"),
            _option("explorers-pack", "An explorer's pack", "explorers-pack"),
        ),
        _group(
            "paladin-standard",
            _option(
                "chain-mail-holy-symbol", "Chain mail and a holy symbol",
                "chain-mail", "holy-symbol",
            ),
        ),
    ),
    features={
        1: (
            _feature(
                "divine-sense",
                "Divine Sense",
                "Detect celestials, fiends, and undead within 60 feet.",
            ),
            _feature(
                "lay-on-hands",
                "Lay on Hands",
                "A pool of healing equal to five times your paladin level.",
            ),
        ),
        2: (
            _feature(
                "fighting-style-paladin",
                "Fighting Style",
                "Adopt a style of fighting as your specialty.",
            ),
            _feature(
                "spellcasting-paladin",
                "Spellcasting",
                "Cast paladin spells using Charisma, preparing them from the paladin list.",
            ),
            _feature(
                "divine-smite",
                "Divine Smite",
                "Expend a spell slot on a melee hit to deal extra radiant damage.",
            ),
        ),
        3: (
            _feature(
                "divine-health",
                "Divine Health",
                "You are immune to disease.",
            ),
            _feature(
                "sacred-oath",
                "Sacred Oath",
                "Swear the oath that binds you as a paladin forever.",
            ),
        ),
    },
    subclass_level=3,
    subclasses=(
        SubclassDefinition(
            id="oath-of-devotion",
            name="Oath of Devotion",
            class_id="paladin",
            description="Paladins bound to the loftiest ideals of justice, virtue, and order.",
            features={
                3: (
                    _subclass_feature(
                        "oath-spells-devotion",
                        "Oath Spells",
                        "Protection from Evil and Good and Sanctuary are always prepared.",
                    ),
                    _subclass_feature(
                        "sacred-weapon",
                        "Channel Divinity: Sacred Weapon",
                        "Add your CHA modifier to attack rolls with a weapon for 1 minute.",
                        uses=1,
                        reset_on=RestType.SHORT_REST,
                    ),
                    _subclass_feature(
                        "turn-the-unholy",
                        "Channel Divinity: Turn the Unholy",
                        "Fiends and undead that fail a WIS save are turned for 1 minute.",
                    ),
                ),
            },
            expanded_spells={
                1: ("protection-from-evil-and-good", "sanctuary"),
            },
        ),
    ),
    starting_gold=StartingGold(dice="5d4", multiplier=10),
    spellcasting=SpellcastingProfile(
        ability=Ability.CHA,
        spell_selection=PreparedSpells(formula="CHA_MOD + HALF_LEVEL"),
        slot_progression=SlotProgression.HALF,
        spell_list_id="paladin",
    ),
    description="A holy warrior bound to a sacred oath.",
)


# =============================================================================
# Ranger
# =============================================================================

RANGER = ClassDefinition(
    id="ranger",
    name="Ranger",
    hit_die=10,
    primary_abilities=(Ability.DEX, Ability.WIS),
    saving_throws=(Ability.STR, Ability.DEX),
    armor_proficiencies=MEDIUM_ARMOR,
    weapon_proficiencies=SIMPLE_AND_MARTIAL,
    skill_choices=SkillChoiceRule(
        choose=3,
        options=(
            Skill.ANIMAL_HANDLING,
            Skill.ATHLETICS,
            Skill.INSIGHT,
            Skill.INVESTIGATION,
            Skill.NATURE,
            Skill.PERCEPTION,
            Skill.STEALTH,
            Skill.SURVIVAL,
        ),
    ),
    equipment_options=(
        _group(
            "ranger-armor",
            _option("scale-mail", "Scale mail", "scale-mail"),
            _option("leather-armor", "Leather armor", "leather-armor"),
        ),
        _group(
            "ranger-melee",
            _option("two-shortswords", "Two shortswords", "shortsword", "shortsword"),
            _option(
                "two-simple-melee", "Two simple melee weapons",
                "simple-melee-choice", "simple-melee-choice",
            ),
        ),
        _group(
            "ranger-pack",
            _option("dungeoneers-pack", "A dungeoneer's pack", "dungeoneers-pack"),
            _option("explorers-pack", "An explorer's pack", "explorers-pack"),
        ),
        _group(
            "ranger-standard",
            _option(
                "longbow-quiver", "A longbow and a quiver of 20 arrows",
                "longbow", "quiver", "arrows-20",
            ),
        ),
    ),
    features={
        1: (
            _feature(
                "favored-enemy",
                "Favored Enemy",
                "Advantage on checks to track and recall information about a chosen enemy type.",
            ),
            _feature(
                "natural-explorer",
                "Natural Explorer",
                "You are particularly familiar with one type of natural environment.",
            ),
        ),
        2: (
            _feature(
                "fighting-style-ranger",
                "Fighting Style",
                "Adopt a style of fighting as your specialty.",
            ),
            _feature(
                "spellcasting-ranger",
                "Spellcasting",
                "Cast ranger spells using Wisdom.",
            ),
        ),
        3: (
            _feature(
                "ranger-archetype",
                "Ranger Archetype",
                "Choose an archetype that you strive to emulate.",
            ),
            _feature(
                "primeval-awareness",
                "Primeval Awareness",
                "Expend a spell slot to sense certain creature types nearby.",
            ),
        ),
    },
    subclass_level=3,
    subclasses=(
        SubclassDefinition(
            id="hunter",
            name="Hunter",
            class_id="ranger",
            description="Rangers who stand as a bulwark between civilization and the wild.",
            features={
                3: (
                    _subclass_feature(
                        "hunters-prey",
                        "Hunter's Prey",
                        "Choose Colossus Slayer, Giant Killer, or Horde Breaker.",
                    ),
                ),
            },
        ),
    ),
    starting_gold=StartingGold(dice="5d4", multiplier=10),
    spellcasting=SpellcastingProfile(
        ability=Ability.WIS,
        spell_selection=KnownSpells(spells_known={1: 0, 2: 2, 3: 3}),
        slot_progression=SlotProgression.HALF,
        spell_list_id="ranger",
    ),
    description="A warrior who uses martial prowess and nature magic to guard the borderlands.",
)


# =============================================================================
# Rogue
# =============================================================================

ROGUE = ClassDefinition(
    id="rogue",
    name="Rogue",
    hit_die=8,
    primary_abilities=(Ability.DEX,),
    saving_throws=(Ability.DEX, Ability.INT),
    armor_proficiencies=("light armor",),
    weapon_proficiencies=FINESSE_WEAPONS,
    tool_proficiencies=("thieves' tools",),
    skill_choices=SkillChoiceRule(
        choose=4,
        options=(
            Skill.ACROBATICS,
            Skill.ATHLETICS,
            Skill.DECEPTION,
            Skill.INSIGHT,
            Skill.INTIMIDATION,
            Skill.INVESTIGATION,
            Skill.PERCEPTION,
            Skill.PERFORMANCE,
            Skill.PERSUASION,
            Skill.SLEIGHT_OF_HAND,
            Skill.STEALTH,
        ),
    ),
    equipment_options=(
        _group(
            "rogue-weapon-1",
            _option("rapier", "A rapier", "rapier"),
            _option("shortsword", "A shortsword", "shortsword"),
        ),
        _group(
            "rogue-ranged",
            _option(
                "shortbow-quiver", "A shortbow and quiver of 20 arrows",
                "shortbow", "quiver", "arrows-20",
            ),
            _option("shortsword", "A shortsword", "shortsword"),
        ),
        _group(
            "rogue-pack",
            _option("burglars-pack", "A burglar's pack", "burglars-pack"),
            _option("dungeoneers-pack", "A dungeoneer's pack", "dungeoneers-pack"),
            _option("explorers-pack", "An explorer's pack", "explorers-pack"),
        ),
        _group(
            "rogue-standard",
            _option(
                "leather-daggers-tools", "Leather armor, two daggers, and thieves' tools",
                "leather-armor", "dagger", "dagger", "thieves-tools",
            ),
        ),
    ),
    features={
        1: (
            _feature(
                "expertise-rogue",
                "Expertise",
                "Double your proficiency bonus for two skill proficiencies or thieves' tools.",
            ),
            _feature(
                "sneak-attack",
                "Sneak Attack",
                "Once per turn, deal extra damage to a creature you hit with advantage.",
            ),
            _feature(
                "thieves-cant",
                "Thieves' Cant",
                "A secret mix of dialect, jargon, and code.",
            ),
        ),
        2: (
            _feature(
                "cunning-action",
                "Cunning Action",
                "Dash, Disengage, or Hide as a bonus action.",
            ),
        ),
        3: (
            _feature(
                "roguish-archetype",
                "Roguish Archetype",
                "Choose an archetype to emulate in the exercise of your abilities.",
            ),
        ),
    },
    subclass_level=3,
    subclasses=(
        SubclassDefinition(
            id="thief",
            name="Thief",
            class_id="rogue",
            description="Burglars, bandits, cutpurses, and treasure hunters.",
            features={
                3: (
                    _subclass_feature(
                        "fast-hands",
                        "Fast Hands",
                        "Use Cunning Action for Sleight of Hand, thieves' tools, or Use an Object.",
                    ),
                    _subclass_feature(
                        "second-story-work",
                        "Second-Story Work",
                        "Climbing costs no extra movement and running jumps go farther.",
                    ),
                ),
            },
        ),
    ),
    starting_gold=StartingGold(dice="4d4", multiplier=10),
    description="A scoundrel who uses stealth and trickery to overcome obstacles.",
)


# =============================================================================
# Sorcerer
# =============================================================================

SORCERER = ClassDefinition(
    id="sorcerer",
    name="Sorcerer",
    hit_die=6,
    primary_abilities=(Ability.CHA,),
    saving_throws=(Ability.CON, Ability.CHA),
    weapon_proficiencies=ARCANE_WEAPONS,
    skill_choices=SkillChoiceRule(
        choose=2,
        options=(
            Skill.ARCANA,
            Skill.DECEPTION,
            Skill.INSIGHT,
            Skill.INTIMIDATION,
            Skill.PERSUASION,
            Skill.RELIGION,
        ),
    ),
    equipment_options=(
        _group(
            "sorcerer-weapon",
            _option(
                "light-crossbow-bolts", "A light crossbow and 20 bolts",
                "light-crossbow", "bolts-20",
            ),
            _option("simple-weapon", "Any simple weapon", "simple-weapon-choice"),
        ),
        _group(
            "sorcerer-focus",
            _option("component-pouch", "A component pouch", "component-pouch"),
            _option("arcane-focus", "An arcane focus", "arcane-focus"),
        ),
        _group(
            "sorcerer-pack",
            _option("dungeoneers-pack", "A dungeoneer's pack", "dungeoneers-pack"),
            _option("explorers-pack", "An explorer's pack", "explorers-pack"),
        ),
        _group(
            "sorcerer-standard",
            _option("two-daggers", "Two daggers", "dagger", "dagger"),
        ),
    ),
    features={
        1: (
            _feature(
                "spellcasting-sorcerer",
                "Spellcasting",
                "Cast sorcerer spells using Charisma, drawing on innate magic.",
            ),
            _feature(
                "sorcerous-origin",
                "Sorcerous Origin",
                "Choose the source of your innate magical power.",
            ),
        ),
        2: (
            _feature(
                "font-of-magic",
                "Font of Magic",
                "Sorcery points equal to your sorcerer level fuel flexible casting.",
            ),
        ),
        3: (
            _feature(
                "metamagic",
                "Metamagic",
                "Choose two Metamagic options to twist your spells.",
            ),
        ),
    },
    subclass_level=1,
    subclasses=(
        SubclassDefinition(
            id="draconic-bloodline",
            name="Draconic Bloodline",
            class_id="sorcerer",
            description="Innate magic from draconic magic mingled with your blood.",
            features={
                1: (
                    _subclass_feature(
                        "dragon-ancestor",
                        "Dragon Ancestor",
                        "Choose a dragon type; you speak Draconic.",
                    ),
                    _subclass_feature(
                        "draconic-resilience",
                        "Draconic Resilience",
                        "Your hit point maximum increases by 1 per sorcerer level, and "
                        "unarmored AC equals 13 + DEX modifier.",
                    ),
                ),
            },
        ),
    ),
    starting_gold=StartingGold(dice="3d4", multiplier=10),
    spellcasting=SpellcastingProfile(
        ability=Ability.CHA,
        cantrips_known={1: 4, 2: 4, 3: 4},
        spell_selection=KnownSpells(spells_known={1: 2, 2: 3, 3: 4}),
        slot_progression=SlotProgression.FULL,
        spell_list_id="sorcerer",
    ),
    description="A spellcaster who draws on inherent magic from a gift or bloodline.",
)


# =============================================================================
# Warlock
# =============================================================================

WARLOCK = ClassDefinition(
    id="warlock",
    name="Warlock",
    hit_die=8,
    primary_abilities=(Ability.CHA,),
    saving_throws=(Ability.WIS, Ability.CHA),
    armor_proficiencies=("light armor",),
    weapon_proficiencies=("simple weapons",),
    skill_choices=SkillChoiceRule(
        choose=2,
        options=(
            Skill.ARCANA,
            Skill.DECEPTION,
            Skill.HISTORY,
            Skill.INTIMIDATION,
            Skill.INVESTIGATION,
            Skill.NATURE,
            Skill.RELIGION,
        ),
    ),
    equipment_options=(
        _group(
            "warlock-weapon",
            _option(
                "light-crossbow-bolts", "A light crossbow and 20 bolts",
                "light-crossbow", "bolts-20",
            ),
            _option("simple-weapon", "Any simple weapon", "simple-weapon-choice"),
        ),
        _group(
            "warlock-focus",
            _option("component-pouch", "A component pouch", "component-pouch"),
            _option("arcane-focus", "An arcane focus", "arcane-focus"),
        ),
        _group(
            "warlock-pack",
            _option("scholars-pack", "A scholar's pack", "scholars-pack"),
            _option("dungeoneers-pack", "A dungeoneer's pack", "dungeoneers-pack"),
        ),
        _group(
            "warlock-standard",
            _option(
                "leather-simple-daggers", "Leather armor, any simple weapon, and two daggers",
                "leather-armor", "simple-weapon-choice", "dagger", "dagger",
            ),
        ),
    ),
    features={
        1: (
            _feature(
                "otherworldly-patron",
                "Otherworldly Patron",
                "Strike a bargain with an otherworldly being.",
            ),
            _feature(
                "pact-magic",
                "Pact Magic",
                "Cast warlock spells using Charisma; all slots share one level and "
                "recharge on a short rest.",
            ),
        ),
        2: (
            _feature(
                "eldritch-invocations",
                "Eldritch Invocations",
                "Learn two eldritch invocations.",
            ),
        ),
        3: (
            _feature(
                "pact-boon",
                "Pact Boon",
                "Your patron bestows a Pact of the Blade, Chain, or Tome.",
            ),
        ),
    },
    subclass_level=1,
    subclasses=(
        SubclassDefinition(
            id="the-fiend",
            name="The Fiend",
            class_id="warlock",
            description="A pact with a fiend from the lower planes of existence.",
            features={
                1: (
                    _subclass_feature(
                        "dark-ones-blessing",
                        "Dark One's Blessing",
                        "Reducing a hostile creature to 0 hit points grants temporary hit "
                        "points equal to CHA modifier + warlock level.",
                    ),
                ),
            },
            expanded_spells={
                1: ("burning-hands", "command"),
                2: ("blindness-deafness", "scorching-ray"),
            },
        ),
    ),
    starting_gold=StartingGold(dice="4d4", multiplier=10),
    spellcasting=SpellcastingProfile(
        ability=Ability.CHA,
        cantrips_known={1: 2, 2: 2, 3: 2},
        spell_selection=KnownSpells(spells_known={1: 2, 2: 3, 3: 4}),
        slot_progression=SlotProgression.PACT,
        spell_list_id="warlock",
    ),
    description="A wielder of magic derived from a bargain with an extraplanar entity.",
)


# =============================================================================
# Wizard
# =============================================================================

WIZARD = ClassDefinition(
    id="wizard",
    name="Wizard",
    hit_die=6,
    primary_abilities=(Ability.INT,),
    saving_throws=(Ability.INT, Ability.WIS),
    weapon_proficiencies=ARCANE_WEAPONS,
    skill_choices=SkillChoiceRule(
        choose=2,
        options=(
            Skill.ARCANA,
            Skill.HISTORY,
            Skill.INSIGHT,
            Skill.INVESTIGATION,
            Skill.MEDICINE,
            Skill.RELIGION,
        ),
    ),
    equipment_options=(
        _group(
            "wizard-weapon",
            _option("quarterstaff", "A quarterstaff", "quarterstaff"),
            _option("dagger", "A dagger", "dagger"),
        ),
        _group(
            "wizard-focus",
            _option("component-pouch", "A component pouch", "component-pouch"),
            _option("arcane-focus", "An arcane focus", "arcane-focus"),
        ),
        _group(
            "wizard-pack",
            _option("scholars-pack", "A scholar's pack", "scholars-pack"),
            _option("explorers-pack", "An explorer's pack", "explorers-pack"),
        ),
        _group(
            "wizard-standard",
            _option("spellbook", "A spellbook", "spellbook"),
        ),
    ),
    features={
        1: (
            _feature(
                "spellcasting-wizard",
                "Spellcasting",
                "Cast wizard spells using Intelligence, recorded in your spellbook.",
            ),
            _feature(
                "arcane-recovery",
                "Arcane Recovery",
                "Once per day after a short rest, recover spell slots with a combined "
                "level up to half your wizard level.",
                uses=1,
            ),
        ),
        2: (
            _feature(
                "arcane-tradition",
                "Arcane Tradition",
                "Choose an arcane tradition shaping your practice of magic.",
            ),
        ),
    },
    subclass_level=2,
    subclasses=(
        SubclassDefinition(
            id="school-of-evocation",
            name="School of Evocation",
            class_id="wizard",
            description="Wizards who create powerful elemental effects.",
            features={
                2: (
                    _subclass_feature(
                        "evocation-savant",
                        "Evocation Savant",
                        "Copying evocation spells into your spellbook costs half the gold and time.",
                    ),
                    _subclass_feature(
                        "sculpt-spells",
                        "Sculpt Spells",
                        "Protect chosen creatures from the full force of your evocation spells.",
                    ),
                ),
            },
        ),
    ),
    starting_gold=StartingGold(dice="4d4", multiplier=10),
    spellcasting=SpellcastingProfile(
        ability=Ability.INT,
        cantrips_known={1: 3, 2: 3, 3: 3},
        spell_selection=KnownSpells(
            spells_known={1: 6, 2: 8, 3: 10},
            spellbook=Spellbook(starting_spells=6, spells_per_level=2),
        ),
        slot_progression=SlotProgression.FULL,
        ritual_casting=True,
        spell_list_id="wizard",
    ),
    description="A scholarly magic-user capable of manipulating the structures of reality.",
)


CLASSES: tuple[ClassDefinition, ...] = (
    BARBARIAN,
    BARD,
    CLERIC,
    DRUID,
    FIGHTER,
    MONK,
    PALADIN,
    RANGER,
    ROGUE,
    SORCERER,
    WARLOCK,
    WIZARD,
)


__all__ = [
    "BARBARIAN",
    "BARD",
    "CLERIC",
    "DRUID",
    "FIGHTER",
    "MONK",
    "PALADIN",
    "RANGER",
    "ROGUE",
    "SORCERER",
    "WARLOCK",
    "WIZARD",
    "CLASSES",
]
