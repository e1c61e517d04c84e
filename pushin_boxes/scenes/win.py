"""The screen shown after solving a level."""

from __future__ import annotations

from typing import Any

from ..context import GameContext, Scene
from ..inputs import ActionInput
from ..level import Level
from ..levelstate import Custom, Playtest, Stock
from ..states import GameState, SelectionKind, selection_state
from ..timing import CharacterAnimation, happy_animation
from ..ui import Text, TextSize

_NO_RECORD = " \n "


def _level(ctx: GameContext) -> Level:
    if ctx.level is None:
        raise RuntimeError("there is no level that was won")
    return ctx.level


class WinScene(Scene):
    """Saves the result and offers the next level."""

    def __init__(self) -> None:
        self.animation: CharacterAnimation = happy_animation()
        self.record_text = _NO_RECORD

    def on_enter(self, ctx: GameContext) -> None:
        level = _level(ctx)
        ctx.save_file.set_new_record(level)
        ctx.save_file.unlock_new_level(level)
        ctx.save()
        if level.is_new_record():
            self.record_text = f"NEW RECORD:\n{level.moves_in_time(' ')}"
        else:
            self.record_text = _NO_RECORD
        self.animation = happy_animation()

    def on_action(self, ctx: GameContext, action: ActionInput) -> None:
        if action is ActionInput.EXIT:
            ctx.transition(GameState.TITLE)
            return
        if action is not ActionInput.SELECT:
            return
        level = _level(ctx)
        match level.kind:
            case Stock(index=index):
                if level.is_last():
                    ctx.transition(selection_state(SelectionKind.STOCK))
                else:
                    ctx.insert_level(Stock(index + 1))
            case Custom():
                ctx.transition(selection_state(SelectionKind.CUSTOM))
            case Playtest():
                raise ValueError("A playtest level cannot be won")
            case _:
                raise ValueError("An editable level cannot be won")

    def update(self, ctx: GameContext, delta: float) -> None:
        self.animation.tick(delta)
        if self.animation.primary_timer.just_finished():
            self.animation.next_index()

    def view(self, ctx: GameContext) -> list[Any]:
        return [
            Text(self.record_text, TextSize.MEDIUM).secondary(),
            Text("You Win!   ", TextSize.LARGE).primary(),
            Text("Press SPACE to continue", TextSize.SMALL),
        ]