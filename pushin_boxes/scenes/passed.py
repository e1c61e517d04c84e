"""The screen where a playtested level is named and saved."""

from __future__ import annotations

import re
import uuid
from pathlib import Path
from typing import Any

from ..context import GameContext, Scene
from ..inputs import ActionInput
from ..level import Level
from ..levelstate import Playtest
from ..sounds import Sound
from ..states import GameState, SelectionKind, selection_state
from ..timing import Timer
from ..ui import DynamicText, Text, TextSize

LEVEL_NAME_ID = 1
MAX_NAME_LENGTH = 16
CURSOR_BLINK = 0.5

_NAME_CHARACTER = re.compile(r"[a-zA-Z ]")
_BACKSPACE_KEYS = {"backspace"}
_ENTER_KEYS = {"return", "enter"}


def is_name_character(character: str) -> bool:
    """Whether a single character may appear in a level name."""
    return _NAME_CHARACTER.fullmatch(character) is not None


class PassedScene(Scene):
    """Takes a name for the level just passed and stores it as a custom level."""

    def __init__(self) -> None:
        self.level_name = ""
        self.cursor = Timer(CURSOR_BLINK, repeating=True)
        self.cursor_hidden = True

    def on_enter(self, ctx: GameContext) -> None:
        self.level_name = ""
        self.cursor = Timer(CURSOR_BLINK, repeating=True)
        self.cursor_hidden = True

    def on_action(self, ctx: GameContext, action: ActionInput) -> None:
        if action is ActionInput.EXIT:
            ctx.transition(GameState.TITLE)

    def on_key(self, ctx: GameContext, key: str) -> None:
        if key == "space":
            key = " "
        if len(key) == 1:
            self._type(ctx, key)
        elif key in _BACKSPACE_KEYS:
            ctx.play(Sound.UNDO_MOVE)
            self.level_name = self.level_name[:-1]
        elif key in _ENTER_KEYS:
            self._save(ctx)

    def _type(self, ctx: GameContext, character: str) -> None:
        if len(self.level_name) < MAX_NAME_LENGTH and is_name_character(character):
            ctx.play(Sound.MOVE_CHARACTER)
            self.level_name += character

    def _save(self, ctx: GameContext) -> None:
        if not self.level_name:
            return
        level: Level | None = ctx.level
        if level is None or not isinstance(level.kind, Playtest):
            raise ValueError("Cannot get a state from a level kind that is not playtest")
        ctx.play(Sound.SET_ZONE)
        ident = uuid.uuid4()
        state = level.kind.state
        path = Path(ctx.assets_dir) / "levels" / "custom" / f"{ident}.lvl"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(state.to_ron(), encoding="utf-8")
        ctx.handles.insert_custom(ident, state.copy())
        ctx.save_file.insert_custom_record(
            f"{self.level_name.lower()}${ident}", level.current_result()
        )
        self.level_name = ""
        ctx.save()
        ctx.transition(selection_state(SelectionKind.CUSTOM))

    def update(self, ctx: GameContext, delta: float) -> None:
        if self.cursor.tick(delta).just_finished():
            self.cursor_hidden = not self.cursor_hidden

    def view(self, ctx: GameContext) -> list[Any]:
        name = DynamicText(
            self.level_name,
            TextSize.MEDIUM,
            id=LEVEL_NAME_ID,
            value=" " if self.cursor_hidden else "_",
        ).secondary()
        return [
            Text("Level Passed!", TextSize.LARGE).primary(),
            Text("Give this level a name:", TextSize.MEDIUM),
            name,
            Text("Press ENTER to save the level", TextSize.SMALL),
        ]