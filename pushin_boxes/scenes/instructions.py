"""The screen explaining how to play."""

from __future__ import annotations

from typing import Any

from ..context import GameContext, Scene
from ..inputs import ActionInput
from ..sounds import Sound
from ..states import GameState
from ..ui import Text, TextSize

INSTRUCTIONS_IMAGE = "images/instructions.png"


class InstructionsScene(Scene):
    """Shows the instructions picture until ESC returns to the title."""

    def on_action(self, ctx: GameContext, action: ActionInput) -> None:
        if action is ActionInput.EXIT:
            ctx.play(Sound.PUSH_BOX)
            ctx.transition(GameState.TITLE)

    def view(self, ctx: GameContext) -> list[Any]:
        return [
            Text("How to Play", TextSize.MEDIUM).primary(),
            INSTRUCTIONS_IMAGE,
            Text("Press ESC to return to the title screen", TextSize.SMALL).primary(),
        ]