"""The notice shown when no more custom levels can be made."""

from __future__ import annotations

from typing import Any

from ..context import GameContext, Scene
from ..inputs import ActionInput
from ..sounds import Sound
from ..states import SelectionKind, selection_state
from ..ui import Text, TextSize


class LimitScene(Scene):
    """Explains the custom level limit; SPACE goes to the custom selection."""

    def on_action(self, ctx: GameContext, action: ActionInput) -> None:
        if action is ActionInput.SELECT:
            ctx.play(Sound.PUSH_BOX)
            ctx.transition(selection_state(SelectionKind.CUSTOM))

    def view(self, ctx: GameContext) -> list[Any]:
        return [
            Text("You reached the limit\nfor the custom levels", TextSize.MEDIUM).primary(),
            Text("Press SPACE to continue to the custom level selection", TextSize.SMALL),
        ]