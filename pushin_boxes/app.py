"""The game window, its main loop and the scene switching."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pygame

from . import colors
from .context import GameContext, Scene, SilentAudio, load_context
from .inputs import ActionInput, DirectionInput, key_to_input
from .level import Level
from .sounds import INITIAL_VOLUME, Sound
from .states import GameState
from .timing import TITLE_CHARACTER_POSITION, WIN_CHARACTER_POSITION
from .ui import Button, DynamicText, Text
from .scenes.editor import EditorScene
from .scenes.instructions import InstructionsScene
from .scenes.limit import LimitScene
from .scenes.options import OptionsScene
from .scenes.passed import PassedScene
from .scenes.playing import LevelScene
from .scenes.selection import SelectionScene
from .scenes.title import TitleScene
from .scenes.win import WinScene

TITLE = "Pushin' Boxes"
FONT_PATH = "fonts/upheaval/upheaval.ttf"
CHARACTER_SHEET = "images/character/spritesheet.png"
FRAME_WIDTH = 64
FRAME_HEIGHT = 96
FRAME_PADDING = 4
FRAME_COLUMNS = 4
FRAMES_PER_SECOND = 60
MARGIN = 24
GAP = 8

_SCENES: dict[GameState, type[Scene]] = {
    GameState.TITLE: TitleScene,
    GameState.INSTRUCTIONS: InstructionsScene,
    GameState.EDITOR: EditorScene,
    GameState.LIMIT: LimitScene,
    GameState.PASSED: PassedScene,
    GameState.OPTIONS: OptionsScene,
    GameState.SELECTION_STOCK: SelectionScene,
    GameState.SELECTION_CUSTOM: SelectionScene,
    GameState.LEVEL: LevelScene,
    GameState.WIN: WinScene,
}

_MAP_STATES = (GameState.LEVEL, GameState.EDITOR)
_SELECTION_STATES = (GameState.SELECTION_STOCK, GameState.SELECTION_CUSTOM)


def scene_for(state: GameState) -> Scene:
    """A fresh scene for ``state``; loading has one that does nothing."""
    return _SCENES.get(state, Scene)()


class App:
    """Routes input to the current scene and switches scenes on request."""

    def __init__(self, ctx: GameContext) -> None:
        self.ctx = ctx
        self.scene: Scene = scene_for(ctx.state)
        self._next: GameState | None = None

    def _collect(self) -> None:
        pending = self.ctx.take_transition()
        if pending is not None and self._next is None:
            self._next = pending

    def _change(self, state: GameState) -> None:
        self.scene.on_exit(self.ctx)
        self.ctx.enter_state(state)
        self.scene = scene_for(state)
        self.scene.on_enter(self.ctx)

    def dispatch_key(self, key: str) -> None:
        """Hand a pressed key to the scene; input is dropped while a scene change waits."""
        self._collect()
        if self._next is not None:
            return
        self.scene.on_key(self.ctx, key)
        self._collect()
        if self._next is not None:
            return
        bound = key_to_input(key)
        if isinstance(bound, ActionInput):
            self.scene.on_action(self.ctx, bound)
        elif isinstance(bound, DirectionInput):
            self.scene.on_direction(self.ctx, bound)
        self._collect()

    def step(self, delta: float) -> None:
        """Apply a requested scene change, then advance the scene by ``delta`` seconds."""
        self._collect()
        if self._next is not None:
            state, self._next = self._next, None
            self._change(state)
            self._collect()
        self.scene.update(self.ctx, delta)
        self._collect()

    def run(self) -> None:
        """Open the window and play until the player quits."""
        pygame.init()
        pygame.display.set_caption(TITLE)
        surface = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        renderer = _Renderer(self.ctx.assets_dir, surface)
        clock = pygame.time.Clock()
        try:
            while not self.ctx.exit_requested:
                delta = clock.tick(FRAMES_PER_SECOND) / 1000.0
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.ctx.request_exit()
                    elif event.type == pygame.KEYDOWN:
                        self.dispatch_key(_key_name(event))
                self.step(delta)
                renderer.draw(self)
                pygame.display.flip()
        finally:
            pygame.quit()


def _key_name(event: Any) -> str:
    text = getattr(event, "unicode", "")
    if len(text) == 1 and text.isprintable() and text != " ":
        return text
    return pygame.key.name(event.key)


class _MixerAudio:
    """Plays effects and looped music through pygame's mixer."""

    def __init__(self, assets_dir: Path) -> None:
        self._assets = Path(assets_dir)
        self._cache: dict[Sound, Any] = {}
        self._volume = INITIAL_VOLUME

    def _sound(self, sound: Sound) -> Any:
        if sound not in self._cache:
            self._cache[sound] = pygame.mixer.Sound(str(self._assets / sound.path()))
        return self._cache[sound]

    def play(self, sound: Sound) -> None:
        effect = self._sound(sound)
        effect.set_volume(self._volume)
        effect.play()

    def play_music(self, sound: Sound) -> None:
        pygame.mixer.music.load(str(self._assets / sound.path()))
        pygame.mixer.music.set_volume(self._volume)
        pygame.mixer.music.play(loops=-1)

    def stop_music(self) -> None:
        pygame.mixer.music.stop()

    def set_volume(self, volume: float) -> None:
        self._volume = volume
        pygame.mixer.music.set_volume(volume)


class _Renderer:
    """Draws the map, the character and the scene's elements."""

    def __init__(self, assets_dir: Path, surface: Any) -> None:
        self._assets = Path(assets_dir)
        self._surface = surface
        self._images: dict[str, Any] = {}
        self._fonts: dict[int, Any] = {}

    def _image(self, relative: str) -> Any:
        if relative not in self._images:
            loaded = pygame.image.load(str(self._assets / relative))
            self._images[relative] = loaded.convert_alpha()
        return self._images[relative]

    def _font(self, size: float) -> Any:
        key = int(size)
        if key not in self._fonts:
            path = self._assets / FONT_PATH
            self._fonts[key] = pygame.font.Font(str(path) if path.is_file() else None, key)
        return self._fonts[key]

    def _character(self, index: int) -> Any:
        sheet = self._image(CHARACTER_SHEET)
        column, row = index % FRAME_COLUMNS, index // FRAME_COLUMNS
        rect = pygame.Rect(
            column * (FRAME_WIDTH + FRAME_PADDING),
            row * (FRAME_HEIGHT + FRAME_PADDING),
            FRAME_WIDTH,
            FRAME_HEIGHT,
        ).clip(sheet.get_rect())
        return sheet.subsurface(rect)

    def _blit_at(self, image: Any, translation: Sequence[float]) -> None:
        width, height = self._surface.get_size()
        x = width / 2 + translation[0] - image.get_width() / 2
        y = height / 2 - translation[1] - image.get_height() / 2
        self._surface.blit(image, (round(x), round(y)))

    def _draw_map(self, level: Level, scene: Scene) -> None:
        sprites = []
        for position, entity in level.cells():
            image = self._image(f"images/entities/{entity.image_name()}.png")
            if (
                isinstance(scene, EditorScene)
                and scene.highlight
                and position == scene.brush.position
            ):
                image = image.copy()
                image.fill(colors.PRIMARY, special_flags=pygame.BLEND_RGBA_MULT)
            sprites.append((position.translation(), image))
        index = scene.sprite_index if isinstance(scene, LevelScene) else level.animation_row
        x, y, z = level.character_position.translation()
        sprites.append(((x, y, z + 0.5), self._character(index)))
        if isinstance(scene, EditorScene):
            bx, by, _ = scene.brush.position.translation()
            brush = self._image(f"images/brushes/{scene.brush.entity.image_name()}.png")
            sprites.append(((bx, by + 20.0, 20.0), brush))
        for translation, image in sorted(sprites, key=lambda sprite: sprite[0][2]):
            self._blit_at(image, translation)

    def _text(self, value: str, size: float, color: tuple[int, int, int, int]) -> Any:
        font = self._font(size)
        lines = [font.render(line, True, color[:3]) for line in value.split("\n")]
        width = max(line.get_width() for line in lines)
        height = sum(line.get_height() for line in lines)
        block = pygame.Surface((max(width, 1), max(height, 1)), pygame.SRCALPHA)
        if color[3] == 0:
            return block
        top = 0
        for line in lines:
            block.blit(line, ((width - line.get_width()) // 2, top))
            top += line.get_height()
        return block

    def _button(self, button: Button) -> Any:
        surface = pygame.Surface((int(button.width), int(button.height)), pygame.SRCALPHA)
        surface.fill(button.background)
        label = self._text(button.label, button.size.value, colors.LIGHT)
        shadow = self._text(button.label, button.size.value, colors.DARK)
        x = (surface.get_width() - label.get_width()) // 2
        y = (surface.get_height() - label.get_height()) // 2
        relief = round(button.relief())
        surface.blit(shadow, (x + relief, y + relief))
        surface.blit(label, (x, y))
        return surface

    def _render(self, element: Any) -> Any:
        if isinstance(element, str):
            return self._image(element)
        if isinstance(element, Button):
            return self._button(element)
        if isinstance(element, DynamicText):
            return self._text(element.display(), element.size.value, element.color)
        if isinstance(element, Text):
            return self._text(element.value, element.size.value, element.color)
        raise TypeError(f"cannot draw {element!r}")

    def _column(self, surfaces: list[Any], top: int) -> int:
        width = self._surface.get_width()
        for surface in surfaces:
            self._surface.blit(surface, ((width - surface.get_width()) // 2, top))
            top += surface.get_height() + GAP
        return top

    def _height(self, surfaces: list[Any]) -> int:
        return sum(surface.get_height() for surface in surfaces) + GAP * max(len(surfaces) - 1, 0)

    def _grid(self, cells: list[list[Any]], top: int) -> None:
        width = self._surface.get_width()
        cell_width = width // 4
        row_height = 0
        for number, cell in enumerate(cells):
            column = number % 4
            if column == 0 and number:
                top += row_height + GAP
                row_height = 0
            y = top
            for surface in cell:
                x = column * cell_width + (cell_width - surface.get_width()) // 2
                self._surface.blit(surface, (x, y))
                y += surface.get_height() + GAP
            row_height = max(row_height, y - top)

    def draw(self, app: App) -> None:
        ctx, scene = app.ctx, app.scene
        self._surface.fill(colors.DARK[:3])
        if ctx.level is not None and ctx.state in _MAP_STATES:
            self._draw_map(ctx.level, scene)
        if isinstance(scene, TitleScene):
            self._blit_at(self._character(scene.sprite_index), TITLE_CHARACTER_POSITION)
        elif isinstance(scene, WinScene):
            self._blit_at(
                self._character(scene.animation.sprite_index()), WIN_CHARACTER_POSITION
            )

        surfaces = [self._render(element) for element in scene.view(ctx)]
        if not surfaces:
            return
        height = self._surface.get_height()
        if ctx.state in _SELECTION_STATES:
            top = self._column(surfaces[:1], MARGIN)
            middle = surfaces[1:-2]
            self._grid([middle[i : i + 2] for i in range(0, len(middle), 2)], top)
            footer = surfaces[-2:]
            self._column(footer, height - MARGIN - self._height(footer))
        elif ctx.state in _MAP_STATES:
            half = (len(surfaces) + 1) // 2
            self._column(surfaces[:half], MARGIN)
            bottom = surfaces[half:]
            self._column(bottom, height - MARGIN - self._height(bottom))
        else:
            self._column(surfaces, (height - self._height(surfaces)) // 2)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="pushin-boxes", description="A box pushing puzzle game.")
    parser.add_argument("--assets", default="assets", help="directory holding the game assets")
    args = parser.parse_args(argv)
    assets = Path(args.assets)

    pygame.init()
    try:
        pygame.mixer.init()
        audio: Any = _MixerAudio(assets)
    except pygame.error:
        audio = SilentAudio()
    try:
        ctx = load_context(assets, audio)
    except (OSError, ValueError) as error:
        pygame.quit()
        parser.exit(1, f"cannot load the game assets: {error}\n")
    App(ctx).run()
    return 0