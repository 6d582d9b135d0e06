"""SRD background catalog: Acolyte, Criminal, Folk Hero, Noble, Sage, Soldier."""

from __future__ import annotations

from dnd_creator.models.catalog import (
    SRD_SOURCE,
    BackgroundDefinition,
    Feature,
    SuggestedCharacteristics,
)
from dnd_creator.models.enums import FeatureSource, Skill


def _background_feature(feature_id: str, name: str, description: str) -> Feature:
    return Feature(
        id=feature_id,
        name=name,
        description=description,
        source=FeatureSource.BACKGROUND,
    )


ACOLYTE = BackgroundDefinition(
    id="acolyte",
    name="Acolyte",
    skill_proficiencies=(Skill.INSIGHT, Skill.RELIGION),
    language_choices=2,
    equipment=("holy-symbol", "prayer-book", "incense", "vestments", "common-clothes"),
    starting_gold=15,
    feature=_background_feature(
        "shelter-of-the-faithful",
        "Shelter of the Faithful",
        "You and your companions can expect free healing and care at a temple of your faith.",
    ),
    suggested_characteristics=SuggestedCharacteristics(
        traits=(
            "I idolize a particular hero of my faith.",
            "I see omens in every event and action.",
            "I quote sacred texts in almost every situation.",
        ),
        ideals=(
            "Tradition. The ancient traditions of worship must be preserved.",
            "Charity. I always try to help those in need.",
            "Faith. I trust that my deity will guide my actions.",
        ),
        bonds=(
            "I would die to recover an ancient relic of my faith.",
            "I owe my life to the priest who took me in.",
        ),
        flaws=(
            "I judge others harshly, and myself even more severely.",
            "I am inflexible in my thinking.",
        ),
    ),
    description="You have spent your life in the service of a temple.",
    source=SRD_SOURCE,
)

CRIMINAL = BackgroundDefinition(
    id="criminal",
    name="Criminal",
    skill_proficiencies=(Skill.DECEPTION, Skill.STEALTH),
    tool_proficiencies=("one type of gaming set", "thieves' tools"),
    equipment=("crowbar", "dark-common-clothes"),
    starting_gold=15,
    feature=_background_feature(
        "criminal-contact",
        "Criminal Contact",
        "You have a reliable contact who acts as your liaison to a network of criminals.",
    ),
    suggested_characteristics=SuggestedCharacteristics(
        traits=(
            "I always have a plan for what to do when things go wrong.",
            "I am incredibly slow to trust.",
        ),
        ideals=(
            "Honor. I don't steal from others in the trade.",
            "Freedom. Chains are meant to be broken.",
        ),
        bonds=("I'm trying to pay off an old debt I owe to a generous benefactor.",),
        flaws=("When I see something valuable, I can't think about anything but how to steal it.",),
    ),
    description="You are an experienced criminal with a history of breaking the law.",
    source=SRD_SOURCE,
)

FOLK_HERO = BackgroundDefinition(
    id="folk-hero",
    name="Folk Hero",
    skill_proficiencies=(Skill.ANIMAL_HANDLING, Skill.SURVIVAL),
    tool_proficiencies=("one type of artisan's tools", "vehicles (land)"),
    equipment=("artisans-tools", "shovel", "iron-pot", "common-clothes"),
    starting_gold=10,
    feature=_background_feature(
        "rustic-hospitality",
        "Rustic Hospitality",
        "Common folk will shelter you from the law or anyone else searching for you.",
    ),
    suggested_characteristics=SuggestedCharacteristics(
        traits=(
            "I judge people by their actions, not their words.",
            "I'm confident in my own abilities.",
        ),
        ideals=(
            "Respect. People deserve to be treated with dignity and respect.",
            "Sincerity. There's no good in pretending to be something I'm not.",
        ),
        bonds=("I protect those who cannot protect themselves.",),
        flaws=("I'm convinced of the significance of my destiny.",),
    ),
    description="You come from a humble social rank, but you are destined for so much more.",
    source=SRD_SOURCE,
)

NOBLE = BackgroundDefinition(
    id="noble",
    name="Noble",
    skill_proficiencies=(Skill.HISTORY, Skill.PERSUASION),
    tool_proficiencies=("one type of gaming set",),
    language_choices=1,
    equipment=("fine-clothes", "signet-ring", "scroll-of-pedigree"),
    starting_gold=25,
    feature=_background_feature(
        "position-of-privilege",
        "Position of Privilege",
        "People are inclined to think the best of you and you are welcome in high society.",
    ),
    suggested_characteristics=SuggestedCharacteristics(
        traits=(
            "My eloquent flattery makes everyone I talk to feel wonderful.",
            "I take great pains to always look my best.",
        ),
        ideals=(
            "Responsibility. It is my duty to respect the authority of those above me.",
            "Noble Obligation. It is my duty to protect and care for the people beneath me.",
        ),
        bonds=("I will face any challenge to win the approval of my family.",),
        flaws=("I secretly believe that everyone is beneath me.",),
    ),
    description="You understand wealth, power, and privilege.",
    source=SRD_SOURCE,
)

SAGE = BackgroundDefinition(
    id="sage",
    name="Sage",
    skill_proficiencies=(Skill.ARCANA, Skill.HISTORY),
    language_choices=2,
    equipment=("ink", "quill", "small-knife", "letter", "common-clothes"),
    starting_gold=10,
    feature=_background_feature(
        "researcher",
        "Researcher",
        "When you don't know a piece of lore, you often know where to find it.",
    ),
    suggested_characteristics=SuggestedCharacteristics(
        traits=(
            "I use polysyllabic words that convey the impression of great erudition.",
            "I've read every book in the world's greatest libraries.",
        ),
        ideals=(
            "Knowledge. The path to power and self-improvement is through knowledge.",
            "Logic. Emotions must not cloud our logical thinking.",
        ),
        bonds=("I have an ancient text that holds terrible secrets.",),
        flaws=("I am easily distracted by the promise of information.",),
    ),
    description="You spent years learning the lore of the multiverse.",
    source=SRD_SOURCE,
)

SOLDIER = BackgroundDefinition(
    id="soldier",
    name="Soldier",
    skill_proficiencies=(Skill.ATHLETICS, Skill.INTIMIDATION),
    tool_proficiencies=("one type of gaming set", "vehicles (land)"),
    equipment=("insignia-of-rank", "trophy", "dice-set", "common-clothes"),
    starting_gold=10,
    feature=_background_feature(
        "military-rank",
        "Military Rank",
        "Soldiers loyal to your former organization still recognize your authority.",
    ),
    suggested_characteristics=SuggestedCharacteristics(
        traits=(
            "I'm always polite and respectful.",
            "I can stare down a hell hound without flinching.",
        ),
        ideals=(
            "Greater Good. Our lot is to lay down our lives in defense of others.",
            "Responsibility. I do what I must and obey just authority.",
        ),
        bonds=("I'll never forget the crushing defeat my company suffered.",),
        flaws=("I made a terrible mistake in battle that cost many lives.",),
    ),
    description="War has been your life for as long as you care to remember.",
    source=SRD_SOURCE,
)


BACKGROUNDS: tuple[BackgroundDefinition, ...] = (
    ACOLYTE,
    CRIMINAL,
    FOLK_HERO,
    NOBLE,
    SAGE,
    SOLDIER,
)


__all__ = [
    "ACOLYTE",
    "CRIMINAL",
    "FOLK_HERO",
    "NOBLE",
    "SAGE",
    "SOLDIER",
    "BACKGROUNDS",
]
