"""The narrated opening slideshow shown before the main menu."""

from __future__ import annotations

from dataclasses import dataclass, field

from baggob.catalog import AlbumId, TextureId
from baggob.clock import Timer
from baggob.feed import Colour

_BLACK: Colour = (0.0, 0.0, 0.0, 1.0)
_WHITE: Colour = (1.0, 1.0, 1.0, 1.0)
_SCENE_SECONDS = 5.0
_ZOOM_PER_FRAME = 0.001
_PLACEHOLDER_SUBTITLE = "測試"


@dataclass
class OpeningScene:
    """One slide: an image that slowly zooms in under a subtitle."""

    texture: TextureId
    subtitle: str
    subtitle_colour: Colour
    timer: Timer
    album: AlbumId | None = None
    visible: bool = False
    scale: float = 1.0
    played: bool = False


@dataclass(frozen=True)
class OpeningFrame:
    """What changed during one update of the opening."""

    subtitle: str | None = None
    subtitle_colour: Colour | None = None
    album: AlbumId | None = None
    done: bool = False


@dataclass
class OpeningSequence:
    """Plays its scenes one after another, then reports that it is done.

    When done, music and sound effects should stop and the main menu follow.
    """

    scenes: list[OpeningScene]
    subtitle: str = _PLACEHOLDER_SUBTITLE
    subtitle_colour: Colour = _BLACK
    done: bool = field(default=False)

    def update(self, delta: float) -> OpeningFrame:
        """Advance the current scene by delta seconds."""
        for index, scene in enumerate(self.scenes):
            if not scene.timer.finished:
                scene.timer.tick(delta)
                scene.scale += _ZOOM_PER_FRAME
                if scene.played:
                    return OpeningFrame()
                scene.played = True
                self.subtitle = scene.subtitle
                self.subtitle_colour = scene.subtitle_colour
                return OpeningFrame(
                    subtitle=scene.subtitle,
                    subtitle_colour=scene.subtitle_colour,
                    album=scene.album,
                )
            scene.visible = False
            if index + 1 < len(self.scenes):
                self.scenes[index + 1].visible = True
        self.done = True
        return OpeningFrame(done=True)


def default_opening() -> OpeningSequence:
    """The game's three-slide introduction."""
    scenes = [
        OpeningScene(
            texture=TextureId.START01,
            subtitle="你是部落中的巫師\n你一直以來都認為自己的部落是最強大的\n",
            subtitle_colour=_BLACK,
            timer=Timer(_SCENE_SECONDS, repeating=True),
            album=AlbumId.OPENING,
            visible=True,
        ),
        OpeningScene(
            texture=TextureId.START02,
            subtitle="直到外來勢力的入侵打破了這個平衡\n這些入侵者帶來了疾病、屠殺和毀滅\n你感到非常絕望",
            subtitle_colour=_BLACK,
            timer=Timer(_SCENE_SECONDS),
        ),
        OpeningScene(
            texture=TextureId.START03,
            subtitle=(
                "在你的絕望之中，你啟動了一個神秘的法術\n讓你連接到400年前的世界\n"
                "你可以帶著現代的東西回到過去\n並利用時間的力量去改變部落的命運"
            ),
            subtitle_colour=_WHITE,
            timer=Timer(_SCENE_SECONDS),
        ),
    ]
    return OpeningSequence(scenes=scenes)