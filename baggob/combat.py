"""Combatants, enemies and the dice-based combat round."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum

from baggob.dungeon import TextType

log = logging.getLogger(__name__)

_DICE = 12
_MIN_DAMAGE = 1
_MAX_DAMAGE = 500
_DEFAULT_RNG = random.Random()


@dataclass
class Combatant:
    health: int = 0
    max_health: int = 0
    proficiency: int = 0
    damage_res: int = 0
    damage_bonus: int = 0
    negative_feedback: int = 0

    def __str__(self) -> str:
        return (
            f"{self.health}/{self.max_health}/{self.proficiency}/"
            f"{self.damage_res}/{self.damage_bonus}"
        )


class CombatState(Enum):
    INIT = "init"
    IN_PROGRESS = "in_progress"
    ENEMY_DEAD = "enemy_dead"
    HERO_DEAD = "hero_dead"
    ENDED = "ended"


@dataclass
class Hero:
    combat_stats: Combatant = field(default_factory=Combatant)


class EnemyId(Enum):
    NONE = "None"
    RAT = "Rat"
    GOBLIN_BRAT = "GoblinBrat"
    GOBLIN_SHIELDBEARER = "GoblinShieldbearer"
    GOBLIN_SWORDSMAN = "GoblinSwordsman"
    ORC_WARRIOR = "OrcWarrior"
    SKELETON = "Skeleton"
    ZOMBIE = "Zombie"
    OGRE_NECROMANCER = "OgreNecromancer"


@dataclass
class DropTable:
    """Items an enemy or room may yield, each with a percentage chance."""

    items: list[str] = field(default_factory=list)
    chances: list[int] = field(default_factory=list)


@dataclass
class Enemy:
    enemy_id: EnemyId = EnemyId.NONE
    combat_stats: Combatant = field(default_factory=Combatant)
    name: str = "Empty enemy"
    enter_combat_text: TextType = TextType.ENTER_RAT
    drop_table: DropTable = field(default_factory=DropTable)

    def __str__(self) -> str:
        return f"id: {self.name}, stats: {self.combat_stats}"


def _half_rounded(diff: int) -> int:
    # Positive differences only; halves round up, away from zero.
    return (diff + 1) // 2


def process_combat(
    monster: Combatant,
    hero: Combatant,
    state: CombatState = CombatState.IN_PROGRESS,
    rng: random.Random | None = None,
) -> tuple[CombatState, TextType]:
    """Play one round, updating both combatants.

    Returns the combat state after the round and the message it produced.
    """
    rng = rng if rng is not None else _DEFAULT_RNG
    monster_roll = rng.randrange(_DICE) + monster.proficiency - monster.negative_feedback
    hero_roll = rng.randrange(_DICE) + hero.proficiency - hero.negative_feedback

    if monster_roll > hero_roll:
        diff = _half_rounded(monster_roll - hero_roll)
        damage = min(max(monster.damage_bonus - hero.damage_res + diff, _MIN_DAMAGE), _MAX_DAMAGE)
        hero.health -= damage
        message = TextType.COMBAT_HERO_HIT
        monster.negative_feedback += 1
        hero.negative_feedback = 0
        log.debug("Hero hit for %s: HP at %s.", damage, hero.health)
    elif hero_roll > monster_roll:
        diff = _half_rounded(hero_roll - monster_roll)
        damage = min(max(hero.damage_bonus + diff - monster.damage_res, _MIN_DAMAGE), _MAX_DAMAGE)
        monster.health -= damage
        message = TextType.COMBAT_ENEMY_HIT
        log.debug("Monster hit for %s: HP at %s.", damage, monster.health)
        monster.negative_feedback = 0
        hero.negative_feedback += 1
    else:
        message = TextType.COMBAT_NO_RESOLUTION

    if hero.health < 1:
        state = CombatState.HERO_DEAD
    elif monster.health < 1:
        state = CombatState.ENEMY_DEAD
    return state, message