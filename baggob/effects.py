"""Temporary stat modifiers that wear off as game time passes."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from baggob.clock import Timer
from baggob.combat import Combatant, Enemy, Hero

_TICK_SECONDS = 1.0


@dataclass
class TemporaryModifier:
    """A stat change on the hero or the enemy that lasts for a number of seconds."""

    time: float = 1.0
    max_health_mod: int = 0
    combat_prof_mod: int = 0
    damage_mod: int = 0
    damage_res_mod: int = 0
    on_hero: bool = False
    applied: bool = False
    expired: bool = False


@dataclass
class DamageOverTime:
    ticks: float
    damage: float
    on_hero: bool = False


def _shift(stats: Combatant, modifier: TemporaryModifier, sign: int) -> None:
    stats.damage_bonus += sign * modifier.damage_mod
    stats.max_health += sign * modifier.max_health_mod
    stats.damage_res += sign * modifier.damage_res_mod
    stats.proficiency += sign * modifier.combat_prof_mod


class TimedEffectTicker:
    """Applies, counts down and removes temporary modifiers once per period."""

    def __init__(self, period: float = _TICK_SECONDS) -> None:
        self.timer = Timer(period, repeating=True)

    def tick(
        self,
        delta: float,
        modifiers: Iterable[TemporaryModifier],
        hero: Hero,
        enemy: Enemy,
    ) -> list[TemporaryModifier]:
        """Advance by delta seconds and return the modifiers still in effect.

        A modifier is applied on the first period it sees, removed early when
        its target has died, and removed once its time has run out. Removed
        modifiers have their stat changes undone and are marked expired.
        """
        modifiers = list(modifiers)
        if not self.timer.tick(delta).just_finished:
            return modifiers
        # Whole seconds of the period are taken off each modifier.
        step = int(self.timer.duration * 1000) // 1000
        active: list[TemporaryModifier] = []
        for modifier in modifiers:
            stats = hero.combat_stats if modifier.on_hero else enemy.combat_stats
            if not modifier.applied:
                modifier.applied = True
                _shift(stats, modifier, 1)
                stats.health = min(stats.health, stats.max_health)

            if stats.health < 1:
                _shift(stats, modifier, -1)
                modifier.expired = True
                continue

            modifier.time -= step
            if modifier.time <= 0.0:
                _shift(stats, modifier, -1)
                modifier.expired = True
                continue
            active.append(modifier)
        return active


def modifiers_for_keys(m_pressed: bool, n_pressed: bool) -> list[TemporaryModifier]:
    """Test modifiers: M boosts the hero's damage, N weakens the enemy's skill."""
    created: list[TemporaryModifier] = []
    if m_pressed:
        created.append(TemporaryModifier(time=10.0, damage_mod=4, on_hero=True))
    if n_pressed:
        created.append(TemporaryModifier(time=10.0, combat_prof_mod=-3, on_hero=False))
    return created