import random

import pytest

from baggob.catalog import FontId, SoundId
from baggob.dungeon import TextType
from baggob.feed import MessageColour
from baggob.messages import (
    SimLootEvent,
    SimMessageEvent,
    font_for_colour,
    handle_sim_message,
    pick_random_from_series,
    sound_for_text,
)


@pytest.mark.parametrize(
    "colour, font",
    [
        (MessageColour.MAJOR_POSITIVE, FontId.FIRA_SANS_BOLD),
        (MessageColour.MAJOR_NEGATIVE, FontId.FIRA_SANS_BOLD),
        (MessageColour.MINOR_POSITIVE, FontId.FIRA_SANS_MEDIUM),
        (MessageColour.MINOR_NEGATIVE, FontId.FIRA_SANS_MEDIUM),
        (MessageColour.NEUTRAL, FontId.FIRA_SANS_REGULAR),
    ],
)
def test_font_for_colour(colour, font):
    assert font_for_colour(colour) is font


@pytest.mark.parametrize(
    "text_type, sound",
    [
        (TextType.ENTER_RAT, SoundId.ENTER_RAT),
        (TextType.ENTER_GOBLIN_BRAT, SoundId.ENTER_LITTLE_MONSTER),
        (TextType.ENTER_GOBLIN_SHIELD_BEARER, SoundId.ENTER_BIG_MONSTER),
        (TextType.COMBAT_HERO_DIED, SoundId.SLASH_HIT),
        (TextType.COMBAT_NO_RESOLUTION, SoundId.SWORD_CLANG),
        (TextType.DOOR, SoundId.DOOR_CREAK),
        (TextType.ROOM_START, None),
        (TextType.ENTER_OGRE_NECROMANCER, None),
    ],
)
def test_sound_for_text(text_type, sound):
    assert sound_for_text(text_type) is sound


def test_pick_from_empty_series():
    assert pick_random_from_series([], random.Random(1)) is None


@pytest.mark.parametrize("seed", range(10))
def test_pick_returns_member(seed):
    options = ["first", "second", "third"]
    assert pick_random_from_series(options, random.Random(seed)) in options


def test_pick_covers_all_members():
    options = ["first", "second"]
    rng = random.Random(3)
    seen = {pick_random_from_series(options, rng) for _ in range(50)}
    assert seen == set(options)


def test_handle_message_with_text():
    texts = {TextType.DOOR: ["A door creaks open."]}
    item, sound = handle_sim_message(TextType.DOOR, texts, random.Random(0))
    assert item.message == "A door creaks open."
    assert item.colour is MessageColour.NEUTRAL
    assert item.font is FontId.FIRA_SANS_REGULAR
    assert sound is SoundId.DOOR_CREAK


def test_handle_message_colour_drives_font():
    texts = {TextType.COMBAT_HERO_HIT: ["Ouch."]}
    item, sound = handle_sim_message(TextType.COMBAT_HERO_HIT, texts, random.Random(0))
    assert item.colour is MessageColour.MAJOR_NEGATIVE
    assert item.font is FontId.FIRA_SANS_BOLD
    assert sound is SoundId.SLASH_HIT


def test_handle_message_missing_text_still_plays_sound():
    item, sound = handle_sim_message(TextType.ENTER_ZOMBIE, {}, random.Random(0))
    assert item is None
    assert sound is SoundId.ENTER_ZOMBIE


def test_event_records_hold_their_payload():
    assert SimMessageEvent(TextType.FOUND_LOOT).text_type is TextType.FOUND_LOOT
    assert SimLootEvent("Vial").item_id == "Vial"