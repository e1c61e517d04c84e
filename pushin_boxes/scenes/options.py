"""The options screen with the volume setting."""

from __future__ import annotations

from typing import Any

from ..context import GameContext, Scene
from ..inputs import ActionInput, DirectionInput
from ..sounds import Sound
from ..states import GameState
from ..ui import DynamicText, Text, TextSize

VOLUME_ID = 1


def volume_label(volume: float) -> str:
    """The volume as a percentage between arrows."""
    return f"<{volume * 100.0:>4.0f}%>"


class OptionsScene(Scene):
    """Left and right change the volume; ESC saves and returns to the title."""

    def on_action(self, ctx: GameContext, action: ActionInput) -> None:
        if action is ActionInput.EXIT:
            ctx.play(Sound.PUSH_BOX)
            ctx.save()
            ctx.transition(GameState.TITLE)

    def on_direction(self, ctx: GameContext, direction: DirectionInput) -> None:
        match direction:
            case DirectionInput.LEFT:
                ctx.sounds.decrease_volume()
            case DirectionInput.RIGHT:
                ctx.sounds.increase_volume()
            case _:
                return
        ctx.save_file.volume = ctx.sounds.volume
        ctx.audio.set_volume(ctx.sounds.volume)
        ctx.play(Sound.MOVE_CHARACTER)

    def view(self, ctx: GameContext) -> list[Any]:
        volume = DynamicText(
            "Volume: ", TextSize.MEDIUM, id=VOLUME_ID, value=volume_label(ctx.sounds.volume)
        ).secondary()
        return [
            Text("Options", TextSize.MEDIUM).primary(),
            volume,
            Text("Press ESC to return to the title screen", TextSize.SMALL).primary(),
        ]