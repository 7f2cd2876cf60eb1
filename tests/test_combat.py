import random

import pytest

from baggob.combat import (
    CombatState,
    Combatant,
    DropTable,
    Enemy,
    EnemyId,
    Hero,
    process_combat,
)
from baggob.dungeon import TextType


class ScriptedRng:
    """Returns the given rolls in order: monster first, then hero."""

    def __init__(self, *rolls):
        self._rolls = iter(rolls)
        self.stops = []

    def randrange(self, stop):
        self.stops.append(stop)
        return next(self._rolls)


def fighter(**kwargs):
    stats = dict(health=20, max_health=20)
    stats.update(kwargs)
    return Combatant(**stats)


def test_combatant_str():
    assert str(Combatant(20, 20, 1, 0, 0, 0)) == "20/20/1/0/0"


def test_enemy_defaults_and_str():
    enemy = Enemy()
    assert enemy.enemy_id is EnemyId.NONE
    assert enemy.name == "Empty enemy"
    assert enemy.enter_combat_text is TextType.ENTER_RAT
    assert enemy.drop_table == DropTable()
    assert str(enemy) == f"id: Empty enemy, stats: {enemy.combat_stats}"


def test_hero_default_stats():
    assert Hero().combat_stats == Combatant()


def test_monster_wins_round():
    monster, hero = fighter(), fighter(negative_feedback=3)
    rng = ScriptedRng(9, 2)
    state, message = process_combat(monster, hero, CombatState.IN_PROGRESS, rng)
    assert message is TextType.COMBAT_HERO_HIT
    assert hero.health < 20
    assert monster.health == 20
    assert monster.negative_feedback == 1
    assert hero.negative_feedback == 0
    assert state is CombatState.IN_PROGRESS
    assert rng.stops == [12, 12]


def test_hero_wins_round():
    monster, hero = fighter(negative_feedback=2), fighter()
    state, message = process_combat(monster, hero, CombatState.IN_PROGRESS, ScriptedRng(1, 8))
    assert message is TextType.COMBAT_ENEMY_HIT
    assert monster.health < 20
    assert hero.health == 20
    assert monster.negative_feedback == 0
    assert hero.negative_feedback == 1
    assert state is CombatState.IN_PROGRESS


def test_tie_changes_nothing():
    monster, hero = fighter(), fighter()
    state, message = process_combat(monster, hero, CombatState.IN_PROGRESS, ScriptedRng(5, 5))
    assert message is TextType.COMBAT_NO_RESOLUTION
    assert monster == fighter()
    assert hero == fighter()
    assert state is CombatState.IN_PROGRESS


def test_damage_is_at_least_one():
    monster, hero = fighter(), fighter(damage_res=100)
    process_combat(monster, hero, CombatState.IN_PROGRESS, ScriptedRng(11, 0))
    assert hero.health == 20 - 1


def test_damage_is_capped():
    monster, hero = fighter(health=10000), fighter(damage_bonus=10000)
    process_combat(monster, hero, CombatState.IN_PROGRESS, ScriptedRng(0, 11))
    assert monster.health == 10000 - 500


def test_hero_death():
    monster, hero = fighter(damage_bonus=50), fighter(health=1)
    state, _ = process_combat(monster, hero, CombatState.IN_PROGRESS, ScriptedRng(11, 0))
    assert state is CombatState.HERO_DEAD


def test_enemy_death():
    monster, hero = fighter(health=1), fighter(damage_bonus=50)
    state, _ = process_combat(monster, hero, CombatState.IN_PROGRESS, ScriptedRng(0, 11))
    assert state is CombatState.ENEMY_DEAD


@pytest.mark.parametrize("seed", range(20))
def test_random_rounds_hurt_at_most_one_side(seed):
    monster, hero = fighter(), fighter()
    process_combat(monster, hero, CombatState.IN_PROGRESS, random.Random(seed))
    assert monster.health == 20 or hero.health == 20