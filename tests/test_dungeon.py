import pytest

from baggob.dungeon import DungeonLevel, Room, TextType, TimePoint, TimePointLevel
from baggob.feed import MessageColour


@pytest.mark.parametrize(
    "text_type, colour",
    [
        (TextType.ENTER_RAT, MessageColour.MINOR_NEGATIVE),
        (TextType.ENTER_ZOMBIE, MessageColour.MINOR_NEGATIVE),
        (TextType.COMBAT_HERO_HIT, MessageColour.MAJOR_NEGATIVE),
        (TextType.COMBAT_ENEMY_HIT, MessageColour.MINOR_POSITIVE),
        (TextType.COMBAT_ENEMY_DIED, MessageColour.MAJOR_POSITIVE),
        (TextType.FOUND_LOOT, MessageColour.MINOR_POSITIVE),
        (TextType.ENTER_ORC_WARRIOR, MessageColour.NEUTRAL),
        (TextType.ENTER_OGRE_NECROMANCER, MessageColour.NEUTRAL),
        (TextType.DOOR, MessageColour.NEUTRAL),
    ],
)
def test_colour_hint(text_type, colour):
    assert text_type.colour_hint() is colour


def test_text_type_parses_from_name():
    assert TextType("RoomStart") is TextType.ROOM_START
    assert TextType("LairEntrance") is TextType.LAIR_ENTRANCE


def test_room_defaults():
    room = Room()
    assert room.init is True
    assert not any(
        [room.corridor, room.door, room.description, room.search,
         room.post_search, room.end, room.start, room.combat]
    )
    assert room.flavour is None


def test_room_str():
    assert str(Room()) == (
        "init: true, corr: false, door: false, desc: false, srch: false, "
        "psrch: false, end: false, start: false, cmbt: false"
    )


@pytest.mark.parametrize(
    "room, name",
    [
        (Room(corridor=True, start=True), "|Corridor|"),
        (Room(start=True, end=True), "|First|"),
        (Room(end=True, combat=True), "|Last|"),
        (Room(combat=True), "|Fight|"),
        (Room(), "|Empty|"),
    ],
)
def test_diag_name_priority(room, name):
    assert room.diag_name() == name


def test_timepoint_str_and_default():
    assert str(TimePoint(400)) == "timepoint: 400"
    assert TimePoint().timepoint == 0
    assert TimePoint().flavour is None


def test_levels_hold_their_parts():
    level = TimePointLevel(2, [TimePoint(400), TimePoint(0)])
    assert [p.timepoint for p in level.timepoints] == [400, 0]
    dungeon = DungeonLevel(depth=1, rooms=[Room(start=True)])
    assert dungeon.rooms[0].diag_name() == "|First|"
    assert dungeon.enemies == []