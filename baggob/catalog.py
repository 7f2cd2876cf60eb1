"""Identifiers and file locations of every asset and config the game loads."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import PurePosixPath


class TextureId(Enum):
    NOT_FOUND = auto()
    UI_PANEL_TEXTURE = auto()
    TOOLTIP_BACKGROUND = auto()
    MENU_CAVE_BG = auto()
    OVERSEER = auto()
    OVERSEER_EYES_WHITE = auto()
    OVERSEER_IRIS = auto()
    VIAL = auto()
    TILE_EIGHT = auto()
    TILE_SIXTEEN = auto()
    TILE_THIRTY_TWO = auto()
    HERB_RED = auto()
    HERB_GREEN = auto()
    HERB_VIOLET = auto()
    ESSENCE_ALACRITY = auto()
    ESSENCE_MIGHT = auto()
    ESSENCE_VITALITY = auto()
    FLASK_HEALING = auto()
    FLASK_STRENGTH = auto()
    FLASK_SKILL = auto()
    FLASK_TOUGHNESS = auto()
    SWORD_RUSTY = auto()
    SWORD = auto()
    SWORD_MASTERWORK = auto()
    SWORD_OF_SPEED = auto()
    MASTERWORK_SWORD_OF_SPEED = auto()
    SWORD_OF_WOUNDING = auto()
    MASTERWORK_SWORD_OF_WOUNDING = auto()
    COMBINE_BUTTON = auto()
    SCROLL = auto()
    AXE_RUSTY = auto()
    AXE = auto()
    AXE_MASTERWORK = auto()
    ARMOR_RUSTY = auto()
    ARMOR = auto()
    ARMOR_MASTERWORK = auto()
    SHIELD_RUSTY = auto()
    SHIELD = auto()
    SHIELD_MASTERWORK = auto()
    START01 = auto()
    START02 = auto()
    START03 = auto()
    BACKPACK = auto()
    RECORD_PLAYER = auto()


class SoundId(Enum):
    COMBINE_ALCHEMY = auto()
    COMBINE_CANT = auto()
    COMBINE_SMITHING = auto()
    DOOR_CREAK = auto()
    GOBLIN_AHAH = auto()
    ENTER_RAT = auto()
    ENTER_LITTLE_MONSTER = auto()
    ENTER_BIG_MONSTER = auto()
    ENTER_SKELETON = auto()
    ENTER_ZOMBIE = auto()
    SLASH_HIT = auto()
    SWORD_CLANG = auto()
    WATER_DRIPPING = auto()
    START01_NAR = auto()
    START02_NAR = auto()
    START03_NAR = auto()


class FontId(Enum):
    FIRA_SANS_LIGHT = auto()
    FIRA_SANS_REGULAR = auto()
    FIRA_SANS_MEDIUM = auto()
    FIRA_SANS_BOLD = auto()
    FIRA_SANS_ITALIC = auto()
    NOTO_SANS_CJK_TC_VF = auto()
    MS_BOLD = auto()


class AlbumId(Enum):
    OPENING = auto()
    OMINOUS = auto()
    JAZZ = auto()


_TEXTURE_DIR = PurePosixPath("textures")
_FONT_DIR = PurePosixPath("fonts")
_SFX_DIR = PurePosixPath("audio/sfx")


@dataclass(frozen=True)
class _AtlasSheet:
    texture: TextureId
    path: str
    tile_size: tuple[float, float]
    columns: int
    rows: int


_ATLAS_SHEETS = (
    _AtlasSheet(TextureId.BACKPACK, "textures/sheet_backpack.png", (320.0, 320.0), 3, 1),
    _AtlasSheet(TextureId.RECORD_PLAYER, "textures/sheet_record_player.png", (640.0, 640.0), 1, 1),
)


@dataclass
class LoadingConfig:
    """Everything that must be loaded before the game can start."""

    textures: dict[TextureId, str] = field(default_factory=dict)
    atlases: dict[TextureId, str] = field(default_factory=dict)
    sfx: dict[SoundId, list[str]] = field(default_factory=dict)
    fonts: dict[FontId, str] = field(default_factory=dict)

    def asset_paths(self) -> list[tuple[Enum, str]]:
        """Full asset paths keyed by identifier: textures, atlases, fonts, then sfx."""
        return list(self._iter_paths())

    def _iter_paths(self) -> Iterator[tuple[Enum, str]]:
        for texture, path in self.textures.items():
            yield texture, str(_TEXTURE_DIR / path)
        for texture, path in self.atlases.items():
            yield texture, str(_TEXTURE_DIR / path)
        for font, path in self.fonts.items():
            yield font, str(_FONT_DIR / path)
        for sound, paths in self.sfx.items():
            for path in paths:
                yield sound, str(_SFX_DIR / path)


def prepare_loading_config() -> LoadingConfig:
    """The game's full list of textures, sounds and fonts."""
    t = TextureId
    s = SoundId
    f = FontId
    textures = {
        t.NOT_FOUND: "not_found.png",
        t.UI_PANEL_TEXTURE: "MyPanel2.png",
        t.TOOLTIP_BACKGROUND: "Stone_Tablet_Panel_Shrinked_Uniform_Borders.png",
        t.MENU_CAVE_BG: "menu_cave_bg.png",
        t.OVERSEER: "overseer.png",
        t.OVERSEER_EYES_WHITE: "overseer_eyes_white.png",
        t.OVERSEER_IRIS: "overseer_eyes_black.png",
        t.VIAL: "Vial.png",
        t.TILE_EIGHT: "Grid_Tile_8x8.png",
        t.TILE_SIXTEEN: "Grid_Tile_16x16.png",
        t.TILE_THIRTY_TWO: "Grid_Tile_32x32.png",
        t.HERB_RED: "HerbRed.png",
        t.HERB_GREEN: "HerbGreen.png",
        t.HERB_VIOLET: "HerbViolet.png",
        t.ESSENCE_ALACRITY: "EssenceAlacrity.png",
        t.ESSENCE_MIGHT: "EssenceMight.png",
        t.ESSENCE_VITALITY: "EssenceVitality.png",
        t.FLASK_HEALING: "FlaskHealing.png",
        t.FLASK_STRENGTH: "FlaskStrength.png",
        t.FLASK_SKILL: "FlaskSkill.png",
        t.FLASK_TOUGHNESS: "FlaskToughness.png",
        t.SWORD_RUSTY: "SwordRusty.png",
        t.SWORD: "Sword.png",
        t.SWORD_MASTERWORK: "SwordMasterwork.png",
        t.SWORD_OF_SPEED: "SwordSpeed.png",
        t.MASTERWORK_SWORD_OF_SPEED: "SwordMasterworkSpeed.png",
        t.SWORD_OF_WOUNDING: "SwordWounding.png",
        t.MASTERWORK_SWORD_OF_WOUNDING: "SwordMasterworkWounding.png",
        t.COMBINE_BUTTON: "Combine_Button.png",
        t.SCROLL: "Scroll.png",
        t.AXE_RUSTY: "AxeRusty.png",
        t.AXE: "Axe.png",
        t.AXE_MASTERWORK: "AxeMasterwork.png",
        t.ARMOR_RUSTY: "ArmorRusty.png",
        t.ARMOR: "Armor.png",
        t.ARMOR_MASTERWORK: "ArmorMasterwork.png",
        t.SHIELD_RUSTY: "ShieldRusty.png",
        t.SHIELD: "Shield.png",
        t.SHIELD_MASTERWORK: "ShieldMasterwork.png",
        t.START01: "start1.png",
        t.START02: "start2.png",
        t.START03: "start3.png",
    }
    sfx = {
        s.COMBINE_ALCHEMY: ["combine_alchemy/alchemy.ogg"],
        s.COMBINE_CANT: ["combine_cant/combine_cant.ogg"],
        s.COMBINE_SMITHING: ["combine_smithing/upgrade_weapon.ogg"],
        s.DOOR_CREAK: ["door_creak/door1.ogg", "door_creak/door2.ogg"],
        s.GOBLIN_AHAH: [
            f"goblin_ahah/{name}.ogg"
            for name in ("ahah1", "ahah2", "ahah3", "haha1", "haha2", "haha3", "ooh1", "ooh2")
        ],
        s.ENTER_RAT: [f"monsters/rat/rat{i}.ogg" for i in (1, 2, 3)],
        s.ENTER_LITTLE_MONSTER: [f"monsters/little_monster/little{i}.ogg" for i in (1, 2, 3)],
        s.ENTER_BIG_MONSTER: [f"monsters/big_monster/big{i}.ogg" for i in (1, 2, 3)],
        s.ENTER_SKELETON: [f"monsters/skeleton/skeleton{i}.ogg" for i in (1, 2, 3)],
        s.ENTER_ZOMBIE: [f"monsters/zombie/zombie{i}.ogg" for i in (1, 2)],
        s.SLASH_HIT: [f"slash_hit/hit{i}.ogg" for i in (1, 2, 3)],
        s.SWORD_CLANG: [f"sword_clang/clang{i}.ogg" for i in (1, 2, 3)],
        s.WATER_DRIPPING: ["water_dripping/drip1.ogg"],
        s.START01_NAR: ["narration/start01.ogg"],
        s.START02_NAR: ["narration/start02.ogg"],
        s.START03_NAR: ["narration/start03.ogg"],
    }
    fonts = {
        f.FIRA_SANS_LIGHT: "FiraSans-Light.ttf",
        f.FIRA_SANS_REGULAR: "FiraSans-Regular.ttf",
        f.FIRA_SANS_MEDIUM: "FiraSans-Medium.ttf",
        f.FIRA_SANS_BOLD: "FiraSans-Bold.ttf",
        f.FIRA_SANS_ITALIC: "FiraSans-Italic.ttf",
        f.NOTO_SANS_CJK_TC_VF: "NotoSansCJKtc-VF.ttf",
        f.MS_BOLD: "MSBold.ttf",
    }
    return LoadingConfig(textures=textures, sfx=sfx, fonts=fonts)


def atlas_sheets() -> tuple[_AtlasSheet, ...]:
    """The sprite sheets that are cut into texture atlases."""
    return _ATLAS_SHEETS


def music_tracks() -> list[tuple[AlbumId, str, str]]:
    """Music as (album, path, title), in the order tracks join their albums."""
    return [
        (AlbumId.OPENING, "audio/music/opening/OP.ogg", "OP"),
        (AlbumId.OMINOUS, "audio/music/ominous/main_menu_theme.ogg", "Main Menu Theme"),
        (AlbumId.JAZZ, "audio/music/jazz/rustlin_in_the_pack.ogg", "Rustlin' in the Pack"),
        (AlbumId.JAZZ, "audio/music/jazz/bobbin_backpack_goblin.ogg", "Bobbin' Backpack Goblin"),
        (AlbumId.JAZZ, "audio/music/jazz/infernal_infamous_imp.ogg", "Infernal Infamous Imp"),
    ]


def config_paths() -> dict[str, str]:
    """Locations of the configuration and data files, by name."""
    base = "config/default"
    return {
        "audio": f"{base}/config.audio.ron",
        "debug": f"{base}/config.debug.ron",
        "sim": f"{base}/config.sim.ron",
        "blueprint": f"{base}/data.blueprint.ron",
        "enemies": f"{base}/data.enemies.ron",
        "items": f"{base}/data.items.ron",
        "layout": f"{base}/data.layout.ron",
        "recipes": f"{base}/data.recipes.ron",
        "texts": f"{base}/data.texts.ron",
    }