"""Mouse state, hover detection, cursor appearance and window mode toggling."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

# Smallest float32 step above one; z values closer than this count as equal.
_Z_EPSILON = 1.1920929e-07
_LOWEST_Z = -1000.0


@dataclass
class Mouse:
    """Where the mouse is and what it is doing."""

    position: tuple[float, float] = (0.0, 0.0)
    screen_position: tuple[float, float] = (0.0, 0.0)
    screen_pos_inverted: tuple[float, float] = (0.0, 0.0)
    is_dragging: bool = False
    disabled: bool = False
    out_of_bounds: bool = False


@dataclass
class MouseInteractive:
    """An area the mouse can hover over and click."""

    size: tuple[float, float]
    clickable: bool = False
    hovered: bool = False
    clicked: bool = False
    shift_clicked: bool = False
    ctrl_alt_clicked: bool = False

    def contains(self, x: float, y: float) -> bool:
        """True if a point, given as an offset from the area's centre, is strictly inside."""
        half_w, half_h = self.size[0] * 0.5, self.size[1] * 0.5
        return -half_w < x < half_w and -half_h < y < half_h


@dataclass
class HoverTarget:
    """An interactive area placed in the world."""

    interactive: MouseInteractive
    x: float
    y: float
    z: float = 0.0
    visible: bool = True


class CursorIcon(Enum):
    DEFAULT = "default"
    HAND = "hand"
    GRABBING = "grabbing"


class WindowMode(Enum):
    WINDOWED = "windowed"
    BORDERLESS_FULLSCREEN = "borderless_fullscreen"
    SIZED_FULLSCREEN = "sized_fullscreen"
    FULLSCREEN = "fullscreen"


def update_screen_position(
    mouse: Mouse,
    screen_x: float | None,
    screen_y: float | None,
    width: float,
    height: float,
) -> None:
    """Record the cursor's window position; None means the cursor is outside."""
    if screen_x is None or screen_y is None:
        mouse.out_of_bounds = True
        return
    mouse.screen_position = (screen_x, screen_y)
    mouse.screen_pos_inverted = (screen_x, height - screen_y)
    mouse.out_of_bounds = not (0.0 <= screen_x <= width and 0.0 <= screen_y <= height)


def track_mouse_hover(
    mouse: Mouse,
    targets: Iterable[HoverTarget],
    left_just_pressed: bool = False,
    shift: bool = False,
    ctrl: bool = False,
    alt: bool = False,
) -> list[HoverTarget]:
    """Update hover and click flags; only the topmost hovered targets stay hovered.

    Returns the targets that are hovered afterwards.
    """
    targets = list(targets)
    mx, my = mouse.position
    highest_z = _LOWEST_Z
    hovered_count = 0
    for target in targets:
        interactive = target.interactive
        interactive.hovered = (
            not mouse.disabled
            and target.visible
            and interactive.contains(mx - target.x, my - target.y)
        )
        pressed = interactive.hovered and left_just_pressed
        interactive.clicked = pressed
        interactive.shift_clicked = pressed and shift
        interactive.ctrl_alt_clicked = pressed and ctrl and alt
        if interactive.hovered:
            highest_z = max(highest_z, target.z)
            hovered_count += 1

    if hovered_count > 1:
        for target in targets:
            if target.interactive.hovered and abs(target.z - highest_z) > _Z_EPSILON:
                target.interactive.hovered = False
                target.interactive.clicked = False
    return [target for target in targets if target.interactive.hovered]


def cursor_appearance(
    mouse: Mouse, interactives: Iterable[MouseInteractive]
) -> tuple[bool, CursorIcon | None] | None:
    """Cursor visibility and icon, or None when the cursor is outside the window.

    A disabled mouse hides the cursor and leaves the icon as it is (None).
    """
    if mouse.out_of_bounds:
        return None
    if mouse.disabled:
        return False, None
    if mouse.is_dragging:
        return True, CursorIcon.GRABBING
    if any(item.clickable and item.hovered for item in interactives):
        return True, CursorIcon.HAND
    return True, CursorIcon.DEFAULT


def toggle_window_mode(mode: WindowMode) -> WindowMode:
    """Fullscreen toggle: any fullscreen mode becomes windowed and vice versa."""
    if mode is not WindowMode.WINDOWED:
        return WindowMode.WINDOWED
    return WindowMode.BORDERLESS_FULLSCREEN