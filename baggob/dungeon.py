"""Building blocks of a dungeon: rooms, time points and message kinds."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from baggob.feed import MessageColour

if TYPE_CHECKING:
    from baggob.combat import DropTable, Enemy


class TextType(Enum):
    """Kinds of message the dungeon simulation can produce."""

    ROOM_START = "RoomStart"
    ROOM_END = "RoomEnd"
    ENTERED_ROOM = "EnteredRoom"
    CORRIDOR = "Corridor"
    DOOR = "Door"
    SEARCHING_ROOM = "SearchingRoom"
    SEARCHING_BODY = "SearchingBody"
    FOUND_LOOT = "FoundLoot"
    FOUND_NOTHING = "FoundNothing"
    COMBAT_ENEMY_HIT = "CombatEnemyHit"
    COMBAT_HERO_HIT = "CombatHeroHit"
    COMBAT_NO_RESOLUTION = "CombatNoResolution"
    COMBAT_ENEMY_DIED = "CombatEnemyDied"
    COMBAT_HERO_DIED = "CombatHeroDied"
    ENTERED_START_ROOM = "EnteredStartRoom"
    ENTERED_END_ROOM = "EnteredEndRoom"
    ENTER_RAT = "EnterRat"
    ENTER_GOBLIN_BRAT = "EnterGoblinBrat"
    ENTER_GOBLIN_SWORDSMAN = "EnterGoblinSwordsman"
    ENTER_GOBLIN_SHIELD_BEARER = "EnterGoblinShieldBearer"
    ENTER_ORC_WARRIOR = "EnterOrcWarrior"
    ENTER_SKELETON = "EnterSkeleton"
    ENTER_ZOMBIE = "EnterZombie"
    ENTER_OGRE_NECROMANCER = "EnterOgreNecromancer"
    PLANT_ROOM = "PlantRoom"
    ALCHEMY_LAB = "AlchemyLab"
    ARMORY = "Armory"
    UNDEAD_ENTRANCE = "UndeadEntrance"
    LAIR_ENTRANCE = "LairEntrance"

    def colour_hint(self) -> MessageColour:
        """The colour a message of this kind is shown in."""
        return _COLOUR_HINTS.get(self, MessageColour.NEUTRAL)


_COLOUR_HINTS = {
    TextType.ENTER_RAT: MessageColour.MINOR_NEGATIVE,
    TextType.ENTER_GOBLIN_BRAT: MessageColour.MINOR_NEGATIVE,
    TextType.ENTER_GOBLIN_SWORDSMAN: MessageColour.MINOR_NEGATIVE,
    TextType.ENTER_GOBLIN_SHIELD_BEARER: MessageColour.MINOR_NEGATIVE,
    TextType.ENTER_SKELETON: MessageColour.MINOR_NEGATIVE,
    TextType.ENTER_ZOMBIE: MessageColour.MINOR_NEGATIVE,
    TextType.COMBAT_HERO_HIT: MessageColour.MAJOR_NEGATIVE,
    TextType.COMBAT_ENEMY_HIT: MessageColour.MINOR_POSITIVE,
    TextType.COMBAT_ENEMY_DIED: MessageColour.MAJOR_POSITIVE,
    TextType.FOUND_LOOT: MessageColour.MINOR_POSITIVE,
}


def _flag(value: bool) -> str:
    return "true" if value else "false"


@dataclass
class Room:
    """Processing flags of one room; they fix message order and room kind."""

    init: bool = True
    corridor: bool = False
    door: bool = False
    description: bool = False
    search: bool = False
    post_search: bool = False
    end: bool = False
    start: bool = False
    combat: bool = False
    flavour: TextType | None = None

    def __str__(self) -> str:
        return (
            f"init: {_flag(self.init)}, corr: {_flag(self.corridor)}, "
            f"door: {_flag(self.door)}, desc: {_flag(self.description)}, "
            f"srch: {_flag(self.search)}, psrch: {_flag(self.post_search)}, "
            f"end: {_flag(self.end)}, start: {_flag(self.start)}, "
            f"cmbt: {_flag(self.combat)}"
        )

    def diag_name(self) -> str:
        """Short label used when listing generated rooms."""
        if self.corridor:
            return "|Corridor|"
        if self.start:
            return "|First|"
        if self.end:
            return "|Last|"
        if self.combat:
            return "|Fight|"
        return "|Empty|"


@dataclass
class TimePoint:
    timepoint: int = 0
    flavour: TextType | None = None

    def __str__(self) -> str:
        return f"timepoint: {self.timepoint}"


@dataclass
class DungeonLevel:
    depth: int
    rooms: list[Room] = field(default_factory=list)
    enemies: list[Enemy] = field(default_factory=list)
    loot: list[DropTable] = field(default_factory=list)


@dataclass
class TimePointLevel:
    timenum: int
    timepoints: list[TimePoint] = field(default_factory=list)