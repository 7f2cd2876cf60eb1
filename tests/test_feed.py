import pytest

from baggob.catalog import FontId
from baggob.feed import (
    AddFeedItemEvent,
    EventFeed,
    MessageColour,
    background_colour,
    is_out_of_bounds,
    stack_feed_items,
)


def test_rgba_values():
    assert MessageColour.NEUTRAL.rgba() == (1.0, 1.0, 1.0, 0.5)
    assert MessageColour.MAJOR_NEGATIVE.rgba() == (1.0, 0.5, 0.5, 0.8)
    assert MessageColour.MINOR_POSITIVE.rgba() == (0.5, 1.0, 0.5, 0.5)


@pytest.mark.parametrize(
    "colour,major,minor",
    [
        (MessageColour.NEUTRAL, False, False),
        (MessageColour.MINOR_POSITIVE, False, True),
        (MessageColour.MAJOR_POSITIVE, True, False),
        (MessageColour.MINOR_NEGATIVE, False, True),
        (MessageColour.MAJOR_NEGATIVE, True, False),
    ],
)
def test_major_minor(colour, major, minor):
    assert colour.is_major() is major
    assert colour.is_minor() is minor


def test_major_messages_are_more_opaque():
    for colour in MessageColour:
        alpha = colour.rgba()[3]
        if colour.is_major():
            assert alpha > MessageColour.NEUTRAL.rgba()[3]
        else:
            assert alpha == MessageColour.NEUTRAL.rgba()[3]


def test_event_carries_fields():
    event = AddFeedItemEvent("hello", FontId.FIRA_SANS_BOLD, MessageColour.NEUTRAL)
    assert event.message == "hello"
    assert event.font is FontId.FIRA_SANS_BOLD


def test_next_id_increments():
    feed = EventFeed(first_id=7)
    ids = [feed.next_id() for _ in range(4)]
    assert ids[0] == 7
    assert all(b - a == 1 for a, b in zip(ids, ids[1:]))


def test_stack_empty():
    assert stack_feed_items({}) == {}


def test_stack_contiguous_totals_accumulate_from_newest():
    heights = {0: 10.0, 1: 20.0, 2: 30.0}
    stacked = stack_feed_items(heights)
    assert stacked[2] == (30.0, 30.0)
    for item_id in (0, 1):
        height, total = stacked[item_id]
        assert height == heights[item_id]
        assert total == stacked[item_id + 1][1] + height


def test_stack_gap_leaves_older_items_at_zero():
    stacked = stack_feed_items({0: 5.0, 2: 7.0})
    assert stacked[2] == (7.0, 7.0)
    assert stacked[0] == (5.0, 0.0)


def test_background_alternates():
    assert background_colour(0) == background_colour(2)
    assert background_colour(1) == background_colour(3)
    assert background_colour(0) != background_colour(1)
    assert background_colour(-1) == background_colour(1)
    assert background_colour(0) == (0.1, 0.1, 0.1, 1.0)


def test_out_of_bounds():
    assert is_out_of_bounds(100.0, 2.0, 49.0) is True
    assert is_out_of_bounds(100.0, 2.0, 50.0) is False