"""A countdown timer driven by explicit time deltas."""

from __future__ import annotations

import math


class Timer:
    """Counts elapsed seconds towards a duration, optionally repeating.

    A non-repeating timer stops at its duration and stays finished. A repeating
    timer wraps around and reports how many times it completed on each tick.
    """

    def __init__(self, duration: float, repeating: bool = False) -> None:
        if duration < 0:
            raise ValueError(f"timer duration must not be negative: {duration}")
        self._duration = float(duration)
        self.repeating = repeating
        self._elapsed = 0.0
        self._finished = False
        self._times_finished = 0

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def finished(self) -> bool:
        """True once the duration has been reached."""
        return self._finished

    @property
    def just_finished(self) -> bool:
        """True only on the tick that reached the duration."""
        return self._times_finished > 0

    @property
    def times_finished_this_tick(self) -> int:
        return self._times_finished

    def tick(self, delta: float) -> Timer:
        """Advance by delta seconds and return the timer itself."""
        if delta < 0:
            raise ValueError(f"cannot tick a timer backwards: {delta}")
        if not self.repeating and self._finished:
            self._times_finished = 0
            return self
        self._elapsed += delta
        self._finished = self._elapsed >= self._duration
        if not self._finished:
            self._times_finished = 0
        elif not self.repeating:
            self._times_finished = 1
            self._elapsed = self._duration
        elif self._duration == 0:
            self._times_finished = 1
            self._elapsed = 0.0
        else:
            self._times_finished = int(self._elapsed // self._duration)
            self._elapsed = math.fmod(self._elapsed, self._duration)
        return self

    def reset(self) -> None:
        """Start counting again from zero."""
        self._elapsed = 0.0
        self._finished = False
        self._times_finished = 0

    def percent(self) -> float:
        """Fraction of the duration that has elapsed."""
        if self._duration == 0:
            return 1.0
        return self._elapsed / self._duration

    def percent_left(self) -> float:
        """Fraction of the duration that remains."""
        return 1.0 - self.percent()