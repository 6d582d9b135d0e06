"""SRD spell catalog: cantrips and 1st- and 2nd-level spells.

Only spell levels a level 1-3 character can learn are bundled. Each
spell lists the class spell lists it belongs to by class id.
"""

from __future__ import annotations

from dnd_creator.models.catalog import SpellComponents, SpellDefinition
from dnd_creator.models.enums import SpellSchool


def _spell(
    spell_id: str,
    name: str,
    level: int,
    school: SpellSchool,
    classes: tuple[str, ...],
    *,
    casting_time: str = "1 action",
    range_: str = "Self",
    components: str = "V, S",
    material: str | None = None,
    duration: str = "Instantaneous",
    ritual: bool = False,
    concentration: bool = False,
    description: str = "",
) -> SpellDefinition:
    """Build a spell definition from compact table arguments."""
    parts = {part.strip() for part in components.split(",")}
    return SpellDefinition(
        id=spell_id,
        name=name,
        level=level,
        school=school,
        casting_time=casting_time,
        range=range_,
        components=SpellComponents(
            verbal="V" in parts,
            somatic="S" in parts,
            material="M" in parts,
            material_description=material,
        ),
        duration=duration,
        ritual=ritual,
        concentration=concentration,
        classes=classes,
        description=description,
    )


# =============================================================================
# Cantrips
# =============================================================================

CANTRIPS: tuple[SpellDefinition, ...] = (
    _spell(
        "acid-splash", "Acid Splash", 0, SpellSchool.CONJURATION, ("sorcerer", "wizard"),
        range_="60 feet",
        description="Hurl a bubble of acid at one or two adjacent creatures for 1d6 acid damage.",
    ),
    _spell(
        "chill-touch", "Chill Touch", 0, SpellSchool.NECROMANCY,
        ("sorcerer", "warlock", "wizard"),
        range_="120 feet", duration="1 round",
        description="A ghostly hand deals 1d8 necrotic damage and prevents healing.",
    ),
    _spell(
        "dancing-lights", "Dancing Lights", 0, SpellSchool.EVOCATION,
        ("bard", "sorcerer", "wizard"),
        range_="120 feet", components="V, S, M", material="a bit of phosphorus",
        duration="Concentration, up to 1 minute", concentration=True,
        description="Create up to four torch-sized lights that hover and move.",
    ),
    _spell(
        "druidcraft", "Druidcraft", 0, SpellSchool.TRANSMUTATION, ("druid",),
        range_="30 feet",
        description="Whisper to the spirits of nature to create a minor natural effect.",
    ),
    _spell(
        "eldritch-blast", "Eldritch Blast", 0, SpellSchool.EVOCATION, ("warlock",),
        range_="120 feet",
        description="A beam of crackling energy deals 1d10 force damage.",
    ),
    _spell(
        "fire-bolt", "Fire Bolt", 0, SpellSchool.EVOCATION, ("sorcerer", "wizard"),
        range_="120 feet",
        description="Hurl a mote of fire for 1d10 fire damage.",
    ),
    _spell(
        "guidance", "Guidance", 0, SpellSchool.DIVINATION, ("cleric", "druid"),
        range_="Touch", duration="Concentration, up to 1 minute", concentration=True,
        description="The target adds 1d4 to one ability check.",
    ),
    _spell(
        "light", "Light", 0, SpellSchool.EVOCATION, ("bard", "cleric", "sorcerer", "wizard"),
        range_="Touch", components="V, M", material="a firefly or phosphorescent moss",
        duration="1 hour",
        description="An object sheds bright light in a 20-foot radius.",
    ),
    _spell(
        "mage-hand", "Mage Hand", 0, SpellSchool.CONJURATION,
        ("bard", "sorcerer", "warlock", "wizard"),
        range_="30 feet", duration="1 minute",
        description="A spectral hand manipulates objects at a distance.",
    ),
    _spell(
        "mending", "Mending", 0, SpellSchool.TRANSMUTATION,
        ("bard", "cleric", "druid", "sorcerer", "wizard"),
        casting_time="1 minute", range_="Touch", components="V, S, M",
        material="two lodestones",
        description="Repair a single break or tear in an object.",
    ),
    _spell(
        "message", "Message", 0, SpellSchool.TRANSMUTATION, ("bard", "sorcerer", "wizard"),
        range_="120 feet", components="V, S, M", material="a short piece of copper wire",
        duration="1 round",
        description="Whisper a message that only the target hears.",
    ),
    _spell(
        "minor-illusion", "Minor Illusion", 0, SpellSchool.ILLUSION,
        ("bard", "sorcerer", "warlock", "wizard"),
        range_="30 feet", components="S, M", material="a bit of fleece", duration="1 minute",
        description="Create a sound or an image of an object.",
    ),
    _spell(
        "poison-spray", "Poison Spray", 0, SpellSchool.CONJURATION,
        ("druid", "sorcerer", "warlock", "wizard"),
        range_="10 feet",
        description="A puff of noxious gas deals 1d12 poison damage.",
    ),
    _spell(
        "prestidigitation", "Prestidigitation", 0, SpellSchool.TRANSMUTATION,
        ("bard", "sorcerer", "warlock", "wizard"),
        range_="10 feet", duration="Up to 1 hour",
        description="Perform a minor magical trick.",
    ),
    _spell(
        "produce-flame", "Produce Flame", 0, SpellSchool.CONJURATION, ("druid",),
        duration="10 minutes",
        description="A flame in your hand sheds light and can be hurled for 1d8 fire damage.",
    ),
    _spell(
        "ray-of-frost", "Ray of Frost", 0, SpellSchool.EVOCATION, ("sorcerer", "wizard"),
        range_="60 feet",
        description="A frigid beam deals 1d8 cold damage and slows the target.",
    ),
    _spell(
        "resistance", "Resistance", 0, SpellSchool.ABJURATION, ("cleric", "druid"),
        range_="Touch", components="V, S, M", material="a miniature cloak",
        duration="Concentration, up to 1 minute", concentration=True,
        description="The target adds 1d4 to one saving throw.",
    ),
    _spell(
        "sacred-flame", "Sacred Flame", 0, SpellSchool.EVOCATION, ("cleric",),
        range_="60 feet",
        description="Flame-like radiance deals 1d8 radiant damage on a failed DEX save.",
    ),
    _spell(
        "shillelagh", "Shillelagh", 0, SpellSchool.TRANSMUTATION, ("druid",),
        casting_time="1 bonus action", range_="Touch", components="V, S, M",
        material="mistletoe, a shamrock leaf, and a club or quarterstaff", duration="1 minute",
        description="Your club or quarterstaff uses your spellcasting ability and a d8.",
    ),
    _spell(
        "shocking-grasp", "Shocking Grasp", 0, SpellSchool.EVOCATION, ("sorcerer", "wizard"),
        range_="Touch",
        description="Lightning deals 1d8 damage and the target can't take reactions.",
    ),
    _spell(
        "spare-the-dying", "Spare the Dying", 0, SpellSchool.NECROMANCY, ("cleric",),
        range_="Touch",
        description="A living creature at 0 hit points becomes stable.",
    ),
    _spell(
        "thaumaturgy", "Thaumaturgy", 0, SpellSchool.TRANSMUTATION, ("cleric",),
        range_="30 feet", components="V", duration="Up to 1 minute",
        description="Manifest a minor wonder, a sign of supernatural power.",
    ),
    _spell(
        "true-strike", "True Strike", 0, SpellSchool.DIVINATION,
        ("bard", "sorcerer", "warlock", "wizard"),
        range_="30 feet", components="S", duration="Concentration, up to 1 round",
        concentration=True,
        description="Gain advantage on your first attack roll against the target next turn.",
    ),
    _spell(
        "vicious-mockery", "Vicious Mockery", 0, SpellSchool.ENCHANTMENT, ("bard",),
        range_="60 feet", components="V",
        description="Insults deal 1d4 psychic damage and impose disadvantage on an attack.",
    ),
)


# =============================================================================
# 1st-Level Spells
# =============================================================================

FIRST_LEVEL_SPELLS: tuple[SpellDefinition, ...] = (
    _spell(
        "alarm", "Alarm", 1, SpellSchool.ABJURATION, ("ranger", "wizard"),
        casting_time="1 minute", range_="30 feet", components="V, S, M",
        material="a tiny bell and a piece of fine silver wire", duration="8 hours",
        ritual=True,
        description="Set an alarm against unwanted intrusion.",
    ),
    _spell(
        "animal-friendship", "Animal Friendship", 1, SpellSchool.ENCHANTMENT,
        ("bard", "druid", "ranger"),
        range_="30 feet", components="V, S, M", material="a morsel of food",
        duration="24 hours",
        description="Convince a beast that you mean it no harm.",
    ),
    _spell(
        "bane", "Bane", 1, SpellSchool.ENCHANTMENT, ("bard", "cleric"),
        range_="30 feet", components="V, S, M", material="a drop of blood",
        duration="Concentration, up to 1 minute", concentration=True,
        description="Up to three creatures subtract 1d4 from attack rolls and saves.",
    ),
    _spell(
        "bless", "Bless", 1, SpellSchool.ENCHANTMENT, ("cleric", "paladin"),
        range_="30 feet", components="V, S, M", material="a sprinkling of holy water",
        duration="Concentration, up to 1 minute", concentration=True,
        description="Up to three creatures add 1d4 to attack rolls and saves.",
    ),
    _spell(
        "burning-hands", "Burning Hands", 1, SpellSchool.EVOCATION, ("sorcerer", "wizard"),
        range_="Self (15-foot cone)",
        description="A thin sheet of flames deals 3d6 fire damage in a cone.",
    ),
    _spell(
        "charm-person", "Charm Person", 1, SpellSchool.ENCHANTMENT,
        ("bard", "druid", "sorcerer", "warlock", "wizard"),
        range_="30 feet", duration="1 hour",
        description="A humanoid regards you as a friendly acquaintance.",
    ),
    _spell(
        "color-spray", "Color Spray", 1, SpellSchool.ILLUSION, ("sorcerer", "wizard"),
        range_="Self (15-foot cone)", components="V, S, M",
        material="a pinch of powder or sand colored red, yellow, and blue",
        duration="1 round",
        description="Dazzling light blinds creatures totalling 6d10 hit points.",
    ),
    _spell(
        "command", "Command", 1, SpellSchool.ENCHANTMENT, ("cleric", "paladin"),
        range_="60 feet", components="V", duration="1 round",
        description="Speak a one-word command that the target must obey.",
    ),
    _spell(
        "comprehend-languages", "Comprehend Languages", 1, SpellSchool.DIVINATION,
        ("bard", "sorcerer", "warlock", "wizard"),
        components="V, S, M", material="a pinch of soot and salt", duration="1 hour",
        ritual=True,
        description="Understand the literal meaning of any spoken language.",
    ),
    _spell(
        "cure-wounds", "Cure Wounds", 1, SpellSchool.EVOCATION,
        ("bard", "cleric", "druid", "paladin", "ranger"),
        range_="Touch",
        description="A creature you touch regains 1d8 + your spellcasting modifier hit points.",
    ),
    _spell(
        "detect-magic", "Detect Magic", 1, SpellSchool.DIVINATION,
        ("bard", "cleric", "druid", "paladin", "ranger", "sorcerer", "wizard"),
        duration="Concentration, up to 10 minutes", ritual=True, concentration=True,
        description="Sense the presence of magic within 30 feet.",
    ),
    _spell(
        "disguise-self", "Disguise Self", 1, SpellSchool.ILLUSION, ("bard", "sorcerer", "wizard"),
        duration="1 hour",
        description="Make yourself look different.",
    ),
    _spell(
        "divine-favor", "Divine Favor", 1, SpellSchool.EVOCATION, ("paladin",),
        casting_time="1 bonus action", duration="Concentration, up to 1 minute",
        concentration=True,
        description="Your weapon attacks deal an extra 1d4 radiant damage.",
    ),
    _spell(
        "entangle", "Entangle", 1, SpellSchool.CONJURATION, ("druid",),
        range_="90 feet", duration="Concentration, up to 1 minute", concentration=True,
        description="Grasping weeds and vines restrain creatures in a 20-foot square.",
    ),
    _spell(
        "expeditious-retreat", "Expeditious Retreat", 1, SpellSchool.TRANSMUTATION,
        ("sorcerer", "warlock", "wizard"),
        casting_time="1 bonus action", duration="Concentration, up to 10 minutes",
        concentration=True,
        description="Take the Dash action as a bonus action.",
    ),
    _spell(
        "faerie-fire", "Faerie Fire", 1, SpellSchool.EVOCATION, ("bard", "druid"),
        range_="60 feet", components="V", duration="Concentration, up to 1 minute",
        concentration=True,
        description="Outline creatures in light, granting advantage on attacks against them.",
    ),
    _spell(
        "false-life", "False Life", 1, SpellSchool.NECROMANCY, ("sorcerer", "wizard"),
        components="V, S, M", material="a small amount of alcohol or distilled spirits",
        duration="1 hour",
        description="Gain 1d4 + 4 temporary hit points.",
    ),
    _spell(
        "feather-fall", "Feather Fall", 1, SpellSchool.TRANSMUTATION,
        ("bard", "sorcerer", "wizard"),
        casting_time="1 reaction", range_="60 feet", components="V, M",
        material="a small feather or piece of down", duration="1 minute",
        description="Up to five falling creatures descend slowly.",
    ),
    _spell(
        "find-familiar", "Find Familiar", 1, SpellSchool.CONJURATION, ("wizard",),
        casting_time="1 hour", range_="10 feet", components="V, S, M",
        material="10 gp worth of charcoal, incense, and herbs", ritual=True,
        description="Gain the service of a spirit familiar.",
    ),
    _spell(
        "fog-cloud", "Fog Cloud", 1, SpellSchool.CONJURATION,
        ("druid", "ranger", "sorcerer", "wizard"),
        range_="120 feet", duration="Concentration, up to 1 hour", concentration=True,
        description="Create a 20-foot-radius sphere of heavy fog.",
    ),
    _spell(
        "goodberry", "Goodberry", 1, SpellSchool.TRANSMUTATION, ("druid", "ranger"),
        range_="Touch", components="V, S, M", material="a sprig of mistletoe",
        description="Create ten berries that each restore 1 hit point.",
    ),
    _spell(
        "grease", "Grease", 1, SpellSchool.CONJURATION, ("wizard",),
        range_="60 feet", components="V, S, M", material="a bit of pork rind or butter",
        duration="1 minute",
        description="Slick grease covers a 10-foot square.",
    ),
    _spell(
        "guiding-bolt", "Guiding Bolt", 1, SpellSchool.EVOCATION, ("cleric",),
        range_="120 feet", duration="1 round",
        description="A flash of light deals 4d6 radiant damage and grants advantage.",
    ),
    _spell(
        "healing-word", "Healing Word", 1, SpellSchool.EVOCATION, ("bard", "cleric", "druid"),
        casting_time="1 bonus action", range_="60 feet", components="V",
        description="A creature regains 1d4 + your spellcasting modifier hit points.",
    ),
    _spell(
        "heroism", "Heroism", 1, SpellSchool.ENCHANTMENT, ("bard", "paladin"),
        range_="Touch", duration="Concentration, up to 1 minute", concentration=True,
        description="A willing creature is immune to fear and gains temporary hit points.",
    ),
    _spell(
        "hunters-mark", "Hunter's Mark", 1, SpellSchool.DIVINATION, ("ranger",),
        casting_time="1 bonus action", range_="90 feet", components="V",
        duration="Concentration, up to 1 hour", concentration=True,
        description="Deal an extra 1d6 damage to the marked creature.",
    ),
    _spell(
        "identify", "Identify", 1, SpellSchool.DIVINATION, ("bard", "wizard"),
        casting_time="1 minute", range_="Touch", components="V, S, M",
        material="a pearl worth at least 100 gp and an owl feather", ritual=True,
        description="Learn the properties of a magic item.",
    ),
    _spell(
        "inflict-wounds", "Inflict Wounds", 1, SpellSchool.NECROMANCY, ("cleric",),
        range_="Touch",
        description="A melee spell attack deals 3d10 necrotic damage.",
    ),
    _spell(
        "longstrider", "Longstrider", 1, SpellSchool.TRANSMUTATION,
        ("bard", "druid", "ranger", "wizard"),
        range_="Touch", components="V, S, M", material="a pinch of dirt", duration="1 hour",
        description="The target's speed increases by 10 feet.",
    ),
    _spell(
        "mage-armor", "Mage Armor", 1, SpellSchool.ABJURATION, ("sorcerer", "wizard"),
        range_="Touch", components="V, S, M", material="a piece of cured leather",
        duration="8 hours",
        description="An unarmored target's base AC becomes 13 + its DEX modifier.",
    ),
    _spell(
        "magic-missile", "Magic Missile", 1, SpellSchool.EVOCATION, ("sorcerer", "wizard"),
        range_="120 feet",
        description="Three glowing darts each deal 1d4 + 1 force damage.",
    ),
    _spell(
        "protection-from-evil-and-good", "Protection from Evil and Good", 1,
        SpellSchool.ABJURATION, ("cleric", "paladin", "warlock", "wizard"),
        range_="Touch", components="V, S, M", material="holy water or powdered silver and iron",
        duration="Concentration, up to 10 minutes", concentration=True,
        description="Protect a creature against aberrations, celestials, fiends, and more.",
    ),
    _spell(
        "sanctuary", "Sanctuary", 1, SpellSchool.ABJURATION, ("cleric",),
        casting_time="1 bonus action", range_="30 feet", components="V, S, M",
        material="a small silver mirror", duration="1 minute",
        description="Attackers must make a WIS save to target the warded creature.",
    ),
    _spell(
        "shield", "Shield", 1, SpellSchool.ABJURATION, ("sorcerer", "wizard"),
        casting_time="1 reaction", duration="1 round",
        description="Gain +5 AC until the start of your next turn.",
    ),
    _spell(
        "shield-of-faith", "Shield of Faith", 1, SpellSchool.ABJURATION, ("cleric", "paladin"),
        casting_time="1 bonus action", range_="60 feet", components="V, S, M",
        material="a small parchment with a bit of holy text",
        duration="Concentration, up to 10 minutes", concentration=True,
        description="A shimmering field grants +2 AC.",
    ),
    _spell(
        "silent-image", "Silent Image", 1, SpellSchool.ILLUSION, ("bard", "sorcerer", "wizard"),
        range_="60 feet", components="V, S, M", material="a bit of fleece",
        duration="Concentration, up to 10 minutes", concentration=True,
        description="Create the image of an object or creature no larger than a 15-foot cube.",
    ),
    _spell(
        "sleep", "Sleep", 1, SpellSchool.ENCHANTMENT, ("bard", "sorcerer", "wizard"),
        range_="90 feet", components="V, S, M",
        material="a pinch of fine sand, rose petals, or a cricket", duration="1 minute",
        description="Creatures totalling 5d8 hit points fall unconscious.",
    ),
    _spell(
        "speak-with-animals", "Speak with Animals", 1, SpellSchool.DIVINATION,
        ("bard", "druid", "ranger"),
        duration="10 minutes", ritual=True,
        description="Comprehend and verbally communicate with beasts.",
    ),
    _spell(
        "thunderwave", "Thunderwave", 1, SpellSchool.EVOCATION,
        ("bard", "druid", "sorcerer", "wizard"),
        range_="Self (15-foot cube)",
        description="A wave of thunderous force deals 2d8 thunder damage and pushes creatures.",
    ),
    _spell(
        "unseen-servant", "Unseen Servant", 1, SpellSchool.CONJURATION,
        ("bard", "warlock", "wizard"),
        range_="60 feet", components="V, S, M", material="a piece of string and a bit of wood",
        duration="1 hour", ritual=True,
        description="Create an invisible, mindless force that performs simple tasks.",
    ),
)


# =============================================================================
# 2nd-Level Spells
# =============================================================================

SECOND_LEVEL_SPELLS: tuple[SpellDefinition, ...] = (
    _spell(
        "aid", "Aid", 2, SpellSchool.ABJURATION, ("cleric", "paladin"),
        range_="30 feet", components="V, S, M", material="a tiny strip of white cloth",
        duration="8 hours",
        description="Up to three creatures gain 5 to their hit point maximum.",
    ),
    _spell(
        "blindness-deafness", "Blindness/Deafness", 2, SpellSchool.NECROMANCY,
        ("bard", "cleric", "sorcerer", "wizard"),
        range_="30 feet", components="V", duration="1 minute",
        description="Blind or deafen a foe.",
    ),
    _spell(
        "blur", "Blur", 2, SpellSchool.ILLUSION, ("sorcerer", "wizard"),
        components="V", duration="Concentration, up to 1 minute", concentration=True,
        description="Attackers have disadvantage against you.",
    ),
    _spell(
        "darkness", "Darkness", 2, SpellSchool.EVOCATION, ("sorcerer", "warlock", "wizard"),
        range_="60 feet", components="V, M", material="bat fur and a drop of pitch",
        duration="Concentration, up to 10 minutes", concentration=True,
        description="Magical darkness fills a 15-foot-radius sphere.",
    ),
    _spell(
        "enhance-ability", "Enhance Ability", 2, SpellSchool.TRANSMUTATION,
        ("bard", "cleric", "druid", "sorcerer"),
        range_="Touch", components="V, S, M", material="fur or a feather from a beast",
        duration="Concentration, up to 1 hour", concentration=True,
        description="Grant advantage on checks with one ability.",
    ),
    _spell(
        "flaming-sphere", "Flaming Sphere", 2, SpellSchool.CONJURATION, ("druid", "wizard"),
        range_="60 feet", components="V, S, M", material="a bit of tallow, brimstone, and iron",
        duration="Concentration, up to 1 minute", concentration=True,
        description="A 5-foot sphere of fire deals 2d6 fire damage.",
    ),
    _spell(
        "hold-person", "Hold Person", 2, SpellSchool.ENCHANTMENT,
        ("bard", "cleric", "druid", "sorcerer", "warlock", "wizard"),
        range_="60 feet", components="V, S, M", material="a small, straight piece of iron",
        duration="Concentration, up to 1 minute", concentration=True,
        description="Paralyze a humanoid.",
    ),
    _spell(
        "invisibility", "Invisibility", 2, SpellSchool.ILLUSION,
        ("bard", "sorcerer", "warlock", "wizard"),
        range_="Touch", components="V, S, M", material="an eyelash encased in gum arabic",
        duration="Concentration, up to 1 hour", concentration=True,
        description="A creature becomes invisible until it attacks or casts a spell.",
    ),
    _spell(
        "lesser-restoration", "Lesser Restoration", 2, SpellSchool.ABJURATION,
        ("bard", "cleric", "druid", "paladin", "ranger"),
        range_="Touch",
        description="End one disease or one condition afflicting a creature.",
    ),
    _spell(
        "misty-step", "Misty Step", 2, SpellSchool.CONJURATION, ("sorcerer", "warlock", "wizard"),
        casting_time="1 bonus action", components="V",
        description="Teleport up to 30 feet to a space you can see.",
    ),
    _spell(
        "moonbeam", "Moonbeam", 2, SpellSchool.EVOCATION, ("druid",),
        range_="120 feet", components="V, S, M", material="a moonseed leaf",
        duration="Concentration, up to 1 minute", concentration=True,
        description="A cylinder of pale light deals 2d10 radiant damage.",
    ),
    _spell(
        "pass-without-trace", "Pass without Trace", 2, SpellSchool.ABJURATION,
        ("druid", "ranger"),
        components="V, S, M", material="ashes from burned mistletoe",
        duration="Concentration, up to 1 hour", concentration=True,
        description="Allies gain +10 to Stealth checks.",
    ),
    _spell(
        "scorching-ray", "Scorching Ray", 2, SpellSchool.EVOCATION, ("sorcerer", "wizard"),
        range_="120 feet",
        description="Three rays of fire each deal 2d6 fire damage.",
    ),
    _spell(
        "shatter", "Shatter", 2, SpellSchool.EVOCATION, ("bard", "sorcerer", "warlock", "wizard"),
        range_="60 feet", components="V, S, M", material="a chip of mica",
        description="A ringing noise deals 3d8 thunder damage in a 10-foot sphere.",
    ),
    _spell(
        "spider-climb", "Spider Climb", 2, SpellSchool.TRANSMUTATION,
        ("sorcerer", "warlock", "wizard"),
        range_="Touch", components="V, S, M", material="a drop of bitumen and a spider",
        duration="Concentration, up to 1 hour", concentration=True,
        description="A creature can climb walls and ceilings.",
    ),
    _spell(
        "spiritual-weapon", "Spiritual Weapon", 2, SpellSchool.EVOCATION, ("cleric",),
        casting_time="1 bonus action", range_="60 feet", duration="1 minute",
        description="A floating spectral weapon deals 1d8 + your spellcasting modifier force damage.",
    ),
    _spell(
        "suggestion", "Suggestion", 2, SpellSchool.ENCHANTMENT,
        ("bard", "sorcerer", "warlock", "wizard"),
        range_="30 feet", components="V, M", material="a snake's tongue and honeycomb",
        duration="Concentration, up to 8 hours", concentration=True,
        description="Suggest a course of activity to a creature.",
    ),
    _spell(
        "web", "Web", 2, SpellSchool.CONJURATION, ("sorcerer", "wizard"),
        range_="60 feet", components="V, S, M", material="a bit of spiderweb",
        duration="Concentration, up to 1 hour", concentration=True,
        description="Thick, sticky webbing fills a 20-foot cube.",
    ),
    _spell(
        "zone-of-truth", "Zone of Truth", 2, SpellSchool.ENCHANTMENT,
        ("bard", "cleric", "paladin"),
        range_="60 feet", duration="10 minutes",
        description="Creatures in a 15-foot sphere can't deliberately lie.",
    ),
)


SPELLS: tuple[SpellDefinition, ...] = CANTRIPS + FIRST_LEVEL_SPELLS + SECOND_LEVEL_SPELLS


__all__ = [
    "CANTRIPS",
    "FIRST_LEVEL_SPELLS",
    "SECOND_LEVEL_SPELLS",
    "SPELLS",
]
