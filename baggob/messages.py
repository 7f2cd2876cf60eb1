"""Turning simulation messages into feed entries and sound effects."""

from __future__ import annotations

import logging
import random
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from baggob.catalog import FontId, SoundId
from baggob.dungeon import TextType
from baggob.feed import AddFeedItemEvent, MessageColour

log = logging.getLogger(__name__)

_DEFAULT_RNG = random.Random()


@dataclass(frozen=True)
class SimMessageEvent:
    """Request to print a message and maybe play a sound."""

    text_type: TextType


@dataclass(frozen=True)
class SimLootEvent:
    """An item found while looting."""

    item_id: str


_SOUNDS = {
    TextType.ENTER_RAT: SoundId.ENTER_RAT,
    TextType.ENTER_GOBLIN_BRAT: SoundId.ENTER_LITTLE_MONSTER,
    TextType.ENTER_GOBLIN_SWORDSMAN: SoundId.ENTER_BIG_MONSTER,
    TextType.ENTER_GOBLIN_SHIELD_BEARER: SoundId.ENTER_BIG_MONSTER,
    TextType.ENTER_SKELETON: SoundId.ENTER_SKELETON,
    TextType.ENTER_ZOMBIE: SoundId.ENTER_ZOMBIE,
    TextType.COMBAT_HERO_HIT: SoundId.SLASH_HIT,
    TextType.COMBAT_ENEMY_HIT: SoundId.SLASH_HIT,
    TextType.COMBAT_HERO_DIED: SoundId.SLASH_HIT,
    TextType.COMBAT_ENEMY_DIED: SoundId.SLASH_HIT,
    TextType.COMBAT_NO_RESOLUTION: SoundId.SWORD_CLANG,
    TextType.DOOR: SoundId.DOOR_CREAK,
}


def font_for_colour(colour: MessageColour) -> FontId:
    """Heavier fonts for more important messages."""
    if colour.is_major():
        return FontId.FIRA_SANS_BOLD
    if colour.is_minor():
        return FontId.FIRA_SANS_MEDIUM
    return FontId.FIRA_SANS_REGULAR


def sound_for_text(text_type: TextType) -> SoundId | None:
    """The sound effect that accompanies a message, if any."""
    return _SOUNDS.get(text_type)


def pick_random_from_series(
    strings: Sequence[str], rng: random.Random | None = None
) -> str | None:
    """One of the strings at random, or None when there are none."""
    if not strings:
        return None
    rng = rng if rng is not None else _DEFAULT_RNG
    return strings[rng.randrange(len(strings))]


def handle_sim_message(
    text_type: TextType,
    texts: Mapping[TextType, Sequence[str]],
    rng: random.Random | None = None,
) -> tuple[AddFeedItemEvent | None, SoundId | None]:
    """The feed entry and sound effect for a message.

    The feed entry is None when no text exists for the message kind.
    """
    message = pick_random_from_series(texts.get(text_type, ()), rng)
    colour = text_type.colour_hint()
    feed_item = None
    if message is None:
        log.error("Missing or empty dungeon text: %s", text_type)
    else:
        feed_item = AddFeedItemEvent(message=message, font=font_for_colour(colour), colour=colour)
    return feed_item, sound_for_text(text_type)