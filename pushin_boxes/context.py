"""Shared game resources and the interface every scene implements."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from .inputs import ActionInput, DirectionInput
from .level import Level, LevelHandles, create_level, load_level_handles
from .levelstate import LevelKind
from .savefile import SAVE_FILE_NAME, SaveFile, load_save_file
from .sounds import INITIAL_VOLUME, Sound, Sounds, music_for
from .states import GameState


class Audio(Protocol):
    def play(self, sound: Sound) -> None: ...

    def play_music(self, sound: Sound) -> None: ...

    def stop_music(self) -> None: ...

    def set_volume(self, volume: float) -> None: ...


@dataclass
class SilentAudio:
    """An audio backend that plays nothing and remembers what it was asked."""

    played: list[Sound] = field(default_factory=list)
    music: Sound | None = None
    volume: float = INITIAL_VOLUME

    def play(self, sound: Sound) -> None:
        self.played.append(sound)

    def play_music(self, sound: Sound) -> None:
        self.music = sound

    def stop_music(self) -> None:
        self.music = None

    def set_volume(self, volume: float) -> None:
        self.volume = volume


class Scene:
    """A screen of the game; every hook does nothing unless overridden."""

    def on_enter(self, ctx: GameContext) -> None:
        """Called when the scene becomes active."""

    def on_exit(self, ctx: GameContext) -> None:
        """Called when the scene is left."""

    def on_action(self, ctx: GameContext, action: ActionInput) -> None:
        """Called for each action input."""

    def on_direction(self, ctx: GameContext, direction: DirectionInput) -> None:
        """Called for each direction input."""

    def on_key(self, ctx: GameContext, key: str) -> None:
        """Called for each key press, with the key's name or character."""

    def update(self, ctx: GameContext, delta: float) -> None:
        """Called once per frame with the seconds since the last one."""

    def view(self, ctx: GameContext) -> list[Any]:
        """Elements to draw: ui texts and buttons, or image paths as strings."""
        return []


@dataclass(eq=False)
class GameContext:
    """Everything the scenes share: saves, levels, sound and the current state."""

    assets_dir: Path
    save_file: SaveFile
    handles: LevelHandles
    sounds: Sounds = field(default_factory=Sounds)
    audio: Audio = field(default_factory=SilentAudio)
    state: GameState = GameState.LOADING
    level: Level | None = None
    exit_requested: bool = False
    _pending: GameState | None = field(default=None, init=False)

    @property
    def save_path(self) -> Path:
        return Path(self.assets_dir) / SAVE_FILE_NAME

    def play(self, sound: Sound) -> None:
        self.audio.play(sound)

    def transition(self, state: GameState) -> None:
        """Ask to move to ``state``; the first request of a frame wins."""
        if self._pending is None:
            self._pending = state

    def take_transition(self) -> GameState | None:
        """The requested state, clearing the request."""
        pending, self._pending = self._pending, None
        return pending

    def enter_state(self, state: GameState) -> None:
        """Make ``state`` current and start its music."""
        self.state = state
        self.audio.stop_music()
        music = music_for(state)
        if music is not None:
            self.audio.play_music(music)

    def insert_level(self, kind: LevelKind) -> None:
        """Set up the level of ``kind`` and ask to play it."""
        self.level = create_level(kind, self.save_file, self.handles)
        self.transition(GameState.LEVEL)

    def save(self) -> None:
        self.save_file.save(self.save_path)

    def request_exit(self) -> None:
        self.exit_requested = True


def load_context(assets_dir: str | Path, audio: Audio | None = None) -> GameContext:
    """Load the save file and levels, then ask to continue to the title."""
    assets = Path(assets_dir)
    save_file = load_save_file(assets / SAVE_FILE_NAME)
    handles = load_level_handles(
        assets, [key for key, _ in save_file.ordered_custom_records()]
    )
    sounds = Sounds(volume=save_file.volume)
    backend = audio if audio is not None else SilentAudio()
    backend.set_volume(sounds.volume)
    ctx = GameContext(
        assets_dir=assets, save_file=save_file, handles=handles, sounds=sounds, audio=backend
    )
    ctx.transition(GameState.TITLE)
    return ctx