"""Dungeon generation: room and monster choice from weighted blueprints."""

from __future__ import annotations

import copy
import logging
import random
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TypeVar

from baggob.combat import DropTable, Enemy, EnemyId
from baggob.dungeon import Room, TextType, TimePoint, TimePointLevel

log = logging.getLogger(__name__)

_DEFAULT_RNG = random.Random()
_K = TypeVar("_K")


class RoomType(Enum):
    EMPTY = "Empty"
    FIGHT = "Fight"
    CORRIDOR = "Corridor"
    START = "Start"
    END = "End"


@dataclass
class SegmentBlueprint:
    """One segment of a level design; it yields exactly one room.

    Room and enemy percentages are meant to add up to 100. Custom loot only
    applies to empty rooms.
    """

    types: dict[RoomType, int] = field(default_factory=dict)
    enemies: dict[EnemyId, int] | None = None
    custom_loot: DropTable | None = None
    custom_flavour: TextType | None = None


@dataclass
class LevelBlueprint:
    depth: int
    default_loot: DropTable = field(default_factory=DropTable)
    segments: list[SegmentBlueprint] = field(default_factory=list)


def _choose_weighted(
    weights: Mapping[_K, int], default: _K, rng: random.Random | None
) -> _K:
    rng = rng if rng is not None else _DEFAULT_RNG
    roll = rng.randint(1, 100)
    total = 0
    for key, weight in weights.items():
        total += weight
        if roll <= total:
            return key
    return default


def choose_room_type(
    weights: Mapping[RoomType, int], rng: random.Random | None = None
) -> RoomType:
    """Pick a room type by percentage; falls back to an empty room."""
    return _choose_weighted(weights, RoomType.EMPTY, rng)


def choose_monster_type(
    weights: Mapping[EnemyId, int], rng: random.Random | None = None
) -> EnemyId:
    """Pick a monster by percentage; falls back to no enemy."""
    return _choose_weighted(weights, EnemyId.NONE, rng)


def generate_first_room() -> Room:
    return Room(start=True)


def generate_last_room() -> Room:
    return Room(end=True)


def generate_corridor() -> Room:
    return Room(corridor=True)


def generate_empty() -> Room:
    return Room(door=True, description=True, search=True)


def generate_fight() -> Room:
    return Room(door=True, search=True, combat=True)


def get_enemy(enemies: Iterable[Enemy], enemy_id: EnemyId) -> Enemy:
    """A fresh copy of the first enemy with the given id, or a default enemy."""
    for enemy in enemies:
        if enemy.enemy_id == enemy_id:
            return copy.deepcopy(enemy)
    log.error("Error during enemy generation, returning default enemy!")
    return Enemy()


def generate_level() -> TimePointLevel:
    """The level of time points the hero travels between."""
    timepoints = [TimePoint(timepoint=400), TimePoint(timepoint=0)]
    return TimePointLevel(timenum=len(timepoints), timepoints=timepoints)