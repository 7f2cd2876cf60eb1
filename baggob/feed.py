"""The scrolling message feed: colours, ids and vertical stacking."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from baggob.catalog import FontId

Colour = tuple[float, float, float, float]


class MessageColour(Enum):
    NEUTRAL = "neutral"
    MINOR_POSITIVE = "minor_positive"
    MAJOR_POSITIVE = "major_positive"
    MINOR_NEGATIVE = "minor_negative"
    MAJOR_NEGATIVE = "major_negative"

    def rgba(self) -> Colour:
        return _RGBA[self]

    def is_major(self) -> bool:
        return self in (MessageColour.MAJOR_POSITIVE, MessageColour.MAJOR_NEGATIVE)

    def is_minor(self) -> bool:
        return self in (MessageColour.MINOR_POSITIVE, MessageColour.MINOR_NEGATIVE)


_RGBA: dict[MessageColour, Colour] = {
    MessageColour.NEUTRAL: (1.0, 1.0, 1.0, 0.5),
    MessageColour.MINOR_POSITIVE: (0.5, 1.0, 0.5, 0.5),
    MessageColour.MAJOR_POSITIVE: (0.5, 1.0, 0.5, 0.8),
    MessageColour.MINOR_NEGATIVE: (1.0, 0.5, 0.5, 0.5),
    MessageColour.MAJOR_NEGATIVE: (1.0, 0.5, 0.5, 0.8),
}

_EVEN_BACKGROUND: Colour = (0.1, 0.1, 0.1, 1.0)
_ODD_BACKGROUND: Colour = (0.15, 0.15, 0.15, 1.0)


@dataclass(frozen=True)
class AddFeedItemEvent:
    """Request to print a message in the feed."""

    message: str
    font: FontId
    colour: MessageColour


class EventFeed:
    """Hands out increasing ids for feed items."""

    def __init__(self, first_id: int = 0) -> None:
        self._next = first_id

    def next_id(self) -> int:
        item_id = self._next
        self._next += 1
        return item_id


def stack_feed_items(heights: Mapping[int, float]) -> dict[int, tuple[float, float]]:
    """Map each item id to (height, running total from the newest item down).

    Totals accumulate from the highest id downwards for as long as the ids stay
    contiguous; items below a gap keep a total of 0.
    """
    stacked = {item_id: (height, 0.0) for item_id, height in heights.items()}
    if not stacked:
        return stacked
    item_id = max(stacked)
    running_total = 0.0
    while item_id in stacked:
        height = stacked[item_id][0]
        running_total += height
        stacked[item_id] = (height, running_total)
        item_id -= 1
    return stacked


def background_colour(item_id: int) -> Colour:
    """Alternating background shade for a feed item."""
    return _EVEN_BACKGROUND if item_id % 2 == 0 else _ODD_BACKGROUND


def is_out_of_bounds(total_height: float, text_factor: float, available_height: float) -> bool:
    """True when an item stacked this high no longer fits in the feed."""
    return total_height / text_factor > available_height