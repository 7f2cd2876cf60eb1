"""Discrete grid positions and dimensions."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Pos:
    """A discrete grid position. Orders by x first, then y."""

    x: int = 0
    y: int = 0

    def plus_x(self, x: int) -> Pos:
        return Pos(self.x + x, self.y)

    def plus_y(self, y: int) -> Pos:
        return Pos(self.x, self.y + y)

    def plus_xy(self, x: int, y: int) -> Pos:
        """Offset by both axes; for another Pos, use the + operator."""
        return Pos(self.x + x, self.y + y)

    def __add__(self, other: Pos) -> Pos:
        if not isinstance(other, Pos):
            return NotImplemented
        return Pos(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Pos) -> Pos:
        if not isinstance(other, Pos):
            return NotImplemented
        return Pos(self.x - other.x, self.y - other.y)


@dataclass(frozen=True, order=True)
class Dimens:
    """A width and height in discrete grid units. Orders by x first, then y."""

    x: int = 0
    y: int = 0

    def plus_x(self, x: int) -> Dimens:
        return Dimens(self.x + x, self.y)

    def plus_y(self, y: int) -> Dimens:
        return Dimens(self.x, self.y + y)

    def plus_xy(self, x: int, y: int) -> Dimens:
        """Grow by both axes; for another Dimens, use the + operator."""
        return Dimens(self.x + x, self.y + y)

    def __add__(self, other: Dimens) -> Dimens:
        if not isinstance(other, Dimens):
            return NotImplemented
        return Dimens(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Dimens) -> Dimens:
        if not isinstance(other, Dimens):
            return NotImplemented
        return Dimens(self.x - other.x, self.y - other.y)


def pos_from_floats(x: float, y: float) -> Pos:
    """Build a Pos from world coordinates, flooring each component."""
    return Pos(math.floor(x), math.floor(y))


def unit_dimens() -> Dimens:
    """Dimensions of a single grid tile."""
    return Dimens(1, 1)