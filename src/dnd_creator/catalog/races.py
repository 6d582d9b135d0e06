"""SRD race catalog.

Races with subraces (dwarf, elf, halfling, gnome) appear as base entries
carrying the traits and ability bonuses shared by every subrace. Each
subrace lists only what it adds, plus its own size and speed. A
character's racial bonuses and traits are the base entry's followed by
the subrace's.
"""

from __future__ import annotations

from dnd_creator.models.catalog import AbilityBonus, Feature, LimitedUse, RaceDefinition
from dnd_creator.models.enums import Ability, FeatureSource, RestType, Size


def _trait(trait_id: str, name: str, description: str) -> Feature:
    return Feature(id=trait_id, name=name, description=description, source=FeatureSource.RACE)


def _bonus(ability: Ability, bonus: int) -> AbilityBonus:
    return AbilityBonus(ability=ability, bonus=bonus)


DARKVISION = _trait(
    "darkvision",
    "Darkvision",
    "See in dim light within 60 feet as if it were bright light, and in darkness "
    "as if it were dim light.",
)
FEY_ANCESTRY = _trait(
    "fey-ancestry",
    "Fey Ancestry",
    "Advantage on saves against being charmed; magic can't put you to sleep.",
)


# =============================================================================
# Dwarf
# =============================================================================

DWARF = RaceDefinition(
    id="dwarf",
    name="Dwarf",
    speed=25,
    ability_bonuses=(_bonus(Ability.CON, 2),),
    traits=(
        DARKVISION,
        _trait(
            "dwarven-resilience",
            "Dwarven Resilience",
            "Advantage on saves against poison and resistance to poison damage.",
        ),
        _trait(
            "dwarven-combat-training",
            "Dwarven Combat Training",
            "Proficiency with the battleaxe, handaxe, light hammer, and warhammer.",
        ),
        _trait(
            "stonecunning",
            "Stonecunning",
            "Double proficiency on History checks related to the origin of stonework.",
        ),
    ),
    languages=("Common", "Dwarvish"),
    description="Bold and hardy, known as skilled warriors, miners, and workers of stone.",
)

HILL_DWARF = RaceDefinition(
    id="hill-dwarf",
    name="Hill Dwarf",
    base_race="dwarf",
    speed=25,
    ability_bonuses=(_bonus(Ability.WIS, 1),),
    traits=(
        _trait(
            "dwarven-toughness",
            "Dwarven Toughness",
            "Your hit point maximum increases by 1, and by 1 every time you gain a level.",
        ),
    ),
    description="Keen senses, deep intuition, and remarkable resilience.",
)

MOUNTAIN_DWARF = RaceDefinition(
    id="mountain-dwarf",
    name="Mountain Dwarf",
    base_race="dwarf",
    speed=25,
    ability_bonuses=(_bonus(Ability.STR, 2),),
    traits=(
        _trait(
            "dwarven-armor-training",
            "Dwarven Armor Training",
            "Proficiency with light and medium armor.",
        ),
    ),
    description="Strong and hardy, accustomed to a difficult life in rugged terrain.",
)


# =============================================================================
# Elf
# =============================================================================

ELF = RaceDefinition(
    id="elf",
    name="Elf",
    ability_bonuses=(_bonus(Ability.DEX, 2),),
    traits=(
        DARKVISION,
        _trait("keen-senses", "Keen Senses", "Proficiency in the Perception skill."),
        FEY_ANCESTRY,
        _trait("trance", "Trance", "Meditate deeply for 4 hours instead of sleeping."),
    ),
    languages=("Common", "Elvish"),
    description="A magical people of otherworldly grace.",
)

HIGH_ELF = RaceDefinition(
    id="high-elf",
    name="High Elf",
    base_race="elf",
    ability_bonuses=(_bonus(Ability.INT, 1),),
    traits=(
        _trait(
            "elf-weapon-training",
            "Elf Weapon Training",
            "Proficiency with the longsword, shortsword, shortbow, and longbow.",
        ),
        _trait("cantrip-high-elf", "Cantrip", "Know one cantrip of your choice from the wizard list."),
        _trait("extra-language-high-elf", "Extra Language", "Speak, read, and write one extra language."),
    ),
    language_choices=1,
    description="Keen mind and mastery of at least the basics of magic.",
)

WOOD_ELF = RaceDefinition(
    id="wood-elf",
    name="Wood Elf",
    base_race="elf",
    speed=35,
    ability_bonuses=(_bonus(Ability.WIS, 1),),
    traits=(
        _trait(
            "elf-weapon-training-wood",
            "Elf Weapon Training",
            "Proficiency with the longsword, shortsword, shortbow, and longbow.",
        ),
        _trait("fleet-of-foot", "Fleet of Foot", "Your base walking speed increases to 35 feet."),
        _trait(
            "mask-of-the-wild",
            "Mask of the Wild",
            "Attempt to hide when only lightly obscured by natural phenomena.",
        ),
    ),
    description="Keen senses and intuition, with fleet feet and stealth.",
)


# =============================================================================
# Halfling
# =============================================================================

HALFLING = RaceDefinition(
    id="halfling",
    name="Halfling",
    size=Size.SMALL,
    speed=25,
    ability_bonuses=(_bonus(Ability.DEX, 2),),
    traits=(
        _trait("lucky", "Lucky", "Reroll a 1 on an attack roll, ability check, or saving throw."),
        _trait("brave", "Brave", "Advantage on saving throws against being frightened."),
        _trait(
            "halfling-nimbleness",
            "Halfling Nimbleness",
            "Move through the space of any creature larger than you.",
        ),
    ),
    languages=("Common", "Halfling"),
    description="Small folk who value the comforts of home.",
)

LIGHTFOOT_HALFLING = RaceDefinition(
    id="lightfoot-halfling",
    name="Lightfoot Halfling",
    base_race="halfling",
    size=Size.SMALL,
    speed=25,
    ability_bonuses=(_bonus(Ability.CHA, 1),),
    traits=(
        _trait(
            "naturally-stealthy",
            "Naturally Stealthy",
            "Attempt to hide when obscured only by a creature larger than you.",
        ),
    ),
    description="Easy hiding and a tendency to wanderlust.",
)

STOUT_HALFLING = RaceDefinition(
    id="stout-halfling",
    name="Stout Halfling",
    base_race="halfling",
    size=Size.SMALL,
    speed=25,
    ability_bonuses=(_bonus(Ability.CON, 1),),
    traits=(
        _trait(
            "stout-resilience",
            "Stout Resilience",
            "Advantage on saves against poison and resistance to poison damage.",
        ),
    ),
    description="Hardier than average, with some resistance to poison.",
)


# =============================================================================
# Human, Dragonborn
# =============================================================================

HUMAN = RaceDefinition(
    id="human",
    name="Human",
    ability_bonuses=tuple(_bonus(ability, 1) for ability in Ability),
    languages=("Common",),
    language_choices=1,
    description="The most adaptable and ambitious people among the common races.",
)

DRAGONBORN = RaceDefinition(
    id="dragonborn",
    name="Dragonborn",
    ability_bonuses=(_bonus(Ability.STR, 2), _bonus(Ability.CHA, 1)),
    traits=(
        _trait(
            "draconic-ancestry",
            "Draconic Ancestry",
            "Choose a dragon type that sets your breath weapon and damage resistance.",
        ),
        Feature(
            id="breath-weapon",
            name="Breath Weapon",
            description="Exhale destructive energy dealing 2d6 damage of your ancestry's type.",
            source=FeatureSource.RACE,
            limited_use=LimitedUse(max_uses=1, reset_on=RestType.SHORT_REST),
        ),
        _trait(
            "damage-resistance-dragonborn",
            "Damage Resistance",
            "Resistance to the damage type of your draconic ancestry.",
        ),
    ),
    languages=("Common", "Draconic"),
    description="Proud dragon-kin who walk as humanoids.",
)


# =============================================================================
# Gnome
# =============================================================================

GNOME = RaceDefinition(
    id="gnome",
    name="Gnome",
    size=Size.SMALL,
    speed=25,
    ability_bonuses=(_bonus(Ability.INT, 2),),
    traits=(
        DARKVISION,
        _trait(
            "gnome-cunning",
            "Gnome Cunning",
            "Advantage on INT, WIS, and CHA saves against magic.",
        ),
    ),
    languages=("Common", "Gnomish"),
    description="Energetic tinkerers and inventors.",
)

FOREST_GNOME = RaceDefinition(
    id="forest-gnome",
    name="Forest Gnome",
    base_race="gnome",
    size=Size.SMALL,
    speed=25,
    ability_bonuses=(_bonus(Ability.DEX, 1),),
    traits=(
        _trait("natural-illusionist", "Natural Illusionist", "You know the minor illusion cantrip."),
        _trait(
            "speak-with-small-beasts",
            "Speak with Small Beasts",
            "Communicate simple ideas with Small or smaller beasts.",
        ),
    ),
    description="A natural knack for illusion and an affinity for small animals.",
)

ROCK_GNOME = RaceDefinition(
    id="rock-gnome",
    name="Rock Gnome",
    base_race="gnome",
    size=Size.SMALL,
    speed=25,
    ability_bonuses=(_bonus(Ability.CON, 1),),
    traits=(
        _trait(
            "artificers-lore",
            "Artificer's Lore",
            "Double proficiency on History checks about magic items and technological devices.",
        ),
        _trait("tinker", "Tinker", "Construct tiny clockwork devices with tinker's tools."),
    ),
    description="A natural inventiveness and hardiness beyond that of other gnomes.",
)


# =============================================================================
# Half-Elf, Half-Orc, Tiefling
# =============================================================================

HALF_ELF = RaceDefinition(
    id="half-elf",
    name="Half-Elf",
    ability_bonuses=(
        _bonus(Ability.CHA, 2),
        AbilityBonus(
            ability="choice",
            bonus=1,
            choice_count=2,
            excluded_abilities=(Ability.CHA,),
        ),
    ),
    traits=(
        DARKVISION,
        FEY_ANCESTRY,
        _trait(
            "skill-versatility",
            "Skill Versatility",
            "Gain proficiency in two skills of your choice.",
        ),
    ),
    languages=("Common", "Elvish"),
    language_choices=1,
    description="Walking in two worlds but truly belonging to neither.",
)

HALF_ORC = RaceDefinition(
    id="half-orc",
    name="Half-Orc",
    ability_bonuses=(_bonus(Ability.STR, 2), _bonus(Ability.CON, 1)),
    traits=(
        DARKVISION,
        _trait("menacing", "Menacing", "Proficiency in the Intimidation skill."),
        Feature(
            id="relentless-endurance",
            name="Relentless Endurance",
            description="When reduced to 0 hit points but not killed, drop to 1 hit point instead.",
            source=FeatureSource.RACE,
            limited_use=LimitedUse(max_uses=1, reset_on=RestType.LONG_REST),
        ),
        _trait(
            "savage-attacks",
            "Savage Attacks",
            "Roll one extra weapon damage die on a melee critical hit.",
        ),
    ),
    languages=("Common", "Orc"),
    description="Orc strength tempered by human resolve.",
)

TIEFLING = RaceDefinition(
    id="tiefling",
    name="Tiefling",
    ability_bonuses=(_bonus(Ability.CHA, 2), _bonus(Ability.INT, 1)),
    traits=(
        DARKVISION,
        _trait("hellish-resistance", "Hellish Resistance", "Resistance to fire damage."),
        _trait(
            "infernal-legacy",
            "Infernal Legacy",
            "You know thaumaturgy, and gain hellish rebuke and darkness at higher levels.",
        ),
    ),
    languages=("Common", "Infernal"),
    description="Bearers of an infernal bloodline.",
)


RACES: tuple[RaceDefinition, ...] = (
    DWARF,
    HILL_DWARF,
    MOUNTAIN_DWARF,
    ELF,
    HIGH_ELF,
    WOOD_ELF,
    HALFLING,
    LIGHTFOOT_HALFLING,
    STOUT_HALFLING,
    HUMAN,
    DRAGONBORN,
    GNOME,
    FOREST_GNOME,
    ROCK_GNOME,
    HALF_ELF,
    HALF_ORC,
    TIEFLING,
)


__all__ = [
    "DWARF",
    "HILL_DWARF",
    "MOUNTAIN_DWARF",
    "ELF",
    "HIGH_ELF",
    "WOOD_ELF",
    "HALFLING",
    "LIGHTFOOT_HALFLING",
    "STOUT_HALFLING",
    "HUMAN",
    "DRAGONBORN",
    "GNOME",
    "FOREST_GNOME",
    "ROCK_GNOME",
    "HALF_ELF",
    "HALF_ORC",
    "TIEFLING",
    "RACES",
]
