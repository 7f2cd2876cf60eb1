"""Game rules for a backpack-management dungeon crawler: vectors, combat, dungeon rooms, feed, effects, mouse and transitions."""

__version__ = "0.1.0"