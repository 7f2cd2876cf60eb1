"""The gold counter shown in the HUD, which grows over time."""

from __future__ import annotations

from dataclasses import dataclass, field

from baggob.clock import Timer

_INCOME = 10
_INCOME_PERIOD_SECONDS = 1.0


@dataclass
class Gold:
    """An amount of gold plus the timer that pays out the next income."""

    amount: int = 0
    timer: Timer = field(default_factory=lambda: Timer(0.0))

    def add(self, amount: int) -> None:
        self.amount += amount

    def remove(self, amount: int) -> None:
        self.amount -= amount

    def tick(self, delta: float) -> str | None:
        """Advance by delta seconds.

        Each time the timer runs out, income is added and the timer restarts
        for another period. Returns the new amount as display text when it
        changed, otherwise None.
        """
        self.timer.tick(delta)
        if not self.timer.finished:
            return None
        self.timer = Timer(_INCOME_PERIOD_SECONDS)
        self.add(_INCOME)
        return str(self.amount)