"""Application states and the animated move between menu and game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from baggob.clock import Timer

_MENU_TO_GAME_SECONDS = 1.5
_GAME_TO_MENU_SECONDS = 0.5


class AppState(Enum):
    """Top-level state of the application."""

    LOADING = "loading"
    OPENING = "opening"
    MAIN_MENU = "main_menu"
    TRANSITION = "transition"
    IN_GAME = "in_game"
    GAME_ENDED = "game_ended"


class GameResult(Enum):
    LOST = "lost"
    WON = "won"


class TransitionKind(Enum):
    INACTIVE_MENU = "inactive_menu"
    INACTIVE_GAME = "inactive_game"
    FROM_MENU_TO_GAME = "from_menu_to_game"
    FROM_GAME_TO_MENU = "from_game_to_menu"


@dataclass
class CameraZoom:
    zoom: float
    game_zoom: float
    menu_zoom: float

    def _blend(self, progress: float) -> None:
        self.zoom = self.game_zoom + (self.menu_zoom - self.game_zoom) * progress


@dataclass(frozen=True)
class TransitionView:
    """How the menu backpack and the mouse should look after a step."""

    visible: bool
    alpha: float
    mouse_disabled: bool
    sprite_index: int | None = None
    next_state: AppState | None = None


@dataclass
class MenuTransition:
    """Where the menu backpack is between the menu and the game."""

    kind: TransitionKind = TransitionKind.INACTIVE_MENU
    timer: Timer | None = None

    def step(self, delta: float, camera: CameraZoom) -> TransitionView:
        """Advance the animation by delta seconds, updating the camera zoom."""
        if self.kind is TransitionKind.INACTIVE_MENU:
            camera.zoom = camera.menu_zoom
            return TransitionView(visible=True, alpha=1.0, mouse_disabled=False)
        if self.kind is TransitionKind.INACTIVE_GAME:
            camera.zoom = camera.game_zoom
            return TransitionView(visible=False, alpha=0.0, mouse_disabled=False)

        timer = self.timer
        if timer is None:
            raise RuntimeError(f"{self.kind.value} transition has no timer")
        timer.tick(delta)
        if self.kind is TransitionKind.FROM_MENU_TO_GAME:
            progress = 1.0 - timer.percent() ** 2
            arrival, settled = AppState.IN_GAME, TransitionKind.INACTIVE_GAME
        else:
            progress = 1.0 - timer.percent_left()
            arrival, settled = AppState.MAIN_MENU, TransitionKind.INACTIVE_MENU
        camera._blend(progress)
        next_state = None
        if timer.finished:
            next_state = arrival
            self.kind, self.timer = settled, None
        return TransitionView(
            visible=True,
            alpha=progress,
            mouse_disabled=True,
            sprite_index=1,
            next_state=next_state,
        )


def menu_to_game() -> MenuTransition:
    return MenuTransition(TransitionKind.FROM_MENU_TO_GAME, Timer(_MENU_TO_GAME_SECONDS))


def game_to_menu() -> MenuTransition:
    return MenuTransition(TransitionKind.FROM_GAME_TO_MENU, Timer(_GAME_TO_MENU_SECONDS))


@dataclass(frozen=True)
class EscapeOutcome:
    """What pressing escape leads to."""

    exit: bool = False
    next_state: AppState | None = None


def handle_escape(state: AppState, menu: MenuTransition) -> EscapeOutcome:
    """React to escape in the given state, updating the menu transition in place."""
    if state is AppState.MAIN_MENU:
        return EscapeOutcome(exit=True)
    if state is AppState.TRANSITION:
        menu.kind, menu.timer = TransitionKind.INACTIVE_MENU, None
        return EscapeOutcome(next_state=AppState.MAIN_MENU)
    if state in (AppState.IN_GAME, AppState.GAME_ENDED):
        back = game_to_menu()
        menu.kind, menu.timer = back.kind, back.timer
        return EscapeOutcome(next_state=AppState.TRANSITION)
    return EscapeOutcome()


_TITLES = {
    GameResult.WON: "The Ogre Necromancer is dead! You win!",
    GameResult.LOST: "You lost! Keep Sir Hoardalot alive!",
}


def result_title(result: GameResult) -> str:
    """Headline of the game-over screen."""
    return _TITLES[result]