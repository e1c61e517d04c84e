"""Sound effects, music and the volume setting."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .states import GameState

INITIAL_VOLUME = 0.5
VOLUME_STEP = 0.25


class Sound(enum.Enum):
    """Every sound the game plays, by asset path."""

    MOVE_CHARACTER = "sounds/sfx/move_character.wav"
    PUSH_BOX = "sounds/sfx/push_box.wav"
    SET_ZONE = "sounds/sfx/set_zone.wav"
    TOGGLE_VOLUME = "sounds/sfx/toggle_volume.wav"
    UNDO_MOVE = "sounds/sfx/undo_move.wav"
    RELOAD_LEVEL = "sounds/sfx/reload_level.wav"
    MUSIC_LEVEL = "sounds/music/level.wav"
    MUSIC_SELECTION = "sounds/music/selection.wav"
    MUSIC_TITLE = "sounds/music/title.wav"
    MUSIC_WIN = "sounds/music/win.wav"

    def path(self) -> str:
        """Path of the sound relative to the assets directory."""
        return self.value


@dataclass
class Sounds:
    """The volume shared by music and effects, from 0 to 1."""

    volume: float = INITIAL_VOLUME

    def decrease_volume(self) -> None:
        """Step the volume down, wrapping from silence to full."""
        if self.volume > 0.0:
            self.volume -= VOLUME_STEP
        else:
            self.volume = 1.0

    def increase_volume(self) -> None:
        """Step the volume up, wrapping from full to silence."""
        if self.volume < 1.0:
            self.volume += VOLUME_STEP
        else:
            self.volume = 0.0


_MUSIC = {
    GameState.TITLE: Sound.MUSIC_TITLE,
    GameState.INSTRUCTIONS: Sound.MUSIC_TITLE,
    GameState.SELECTION_STOCK: Sound.MUSIC_SELECTION,
    GameState.SELECTION_CUSTOM: Sound.MUSIC_SELECTION,
    GameState.OPTIONS: Sound.MUSIC_SELECTION,
    GameState.LIMIT: Sound.MUSIC_SELECTION,
    GameState.LEVEL: Sound.MUSIC_LEVEL,
    GameState.EDITOR: Sound.MUSIC_LEVEL,
    GameState.WIN: Sound.MUSIC_WIN,
    GameState.PASSED: Sound.MUSIC_WIN,
}


def music_for(state: GameState) -> Sound | None:
    """The looped music of a scene; None while loading."""
    return _MUSIC.get(state)