"""The title screen with the main menu."""

from __future__ import annotations

from typing import Any

from ..context import GameContext, Scene
from ..inputs import ActionInput, DirectionInput
from ..sounds import Sound
from ..states import GameState, SelectionKind, selection_state
from ..timing import BLINK_ROW_LAST_FRAME_INDEX, CharacterAnimation, blinking_animation
from ..ui import Button, Text, TextSize

PLAY_ID = 0
INSTRUCTIONS_ID = 1
EDITOR_ID = 2
OPTIONS_ID = 3
QUIT_ID = 4

_ORDER = (PLAY_ID, INSTRUCTIONS_ID, EDITOR_ID, OPTIONS_ID, QUIT_ID)

_LABELS = {
    PLAY_ID: "Play",
    INSTRUCTIONS_ID: "Instructions",
    EDITOR_ID: "Editor",
    OPTIONS_ID: "Options",
    QUIT_ID: "Quit",
}

_TARGETS = {
    PLAY_ID: selection_state(SelectionKind.STOCK),
    INSTRUCTIONS_ID: GameState.INSTRUCTIONS,
    EDITOR_ID: GameState.EDITOR,
    OPTIONS_ID: GameState.OPTIONS,
}

_ACTION_SOUNDS = {
    ActionInput.EXIT: Sound.PUSH_BOX,
    ActionInput.SELECT: Sound.SET_ZONE,
}


def next_button(current: int, up: bool) -> int:
    """The menu button above or below ``current``, wrapping around."""
    if current not in _ORDER:
        raise ValueError(f"The button id {current} was not declared")
    step = -1 if up else 1
    return _ORDER[(_ORDER.index(current) + step) % len(_ORDER)]


def _menu() -> list[Button]:
    buttons = [Button(_LABELS[ident], id=ident) for ident in _ORDER]
    buttons[0].select()
    return buttons


class TitleScene(Scene):
    """The main menu, with a blinking character."""

    def __init__(self) -> None:
        self.buttons = _menu()
        self.animation: CharacterAnimation = blinking_animation()
        self.sprite_index = 0

    @property
    def selected(self) -> int | None:
        return next((button.id for button in self.buttons if button.selected), None)

    def on_enter(self, ctx: GameContext) -> None:
        self.buttons = _menu()
        self.animation = blinking_animation()
        self.sprite_index = 0

    def on_action(self, ctx: GameContext, action: ActionInput) -> None:
        sound = _ACTION_SOUNDS.get(action)
        if sound is not None:
            ctx.play(sound)
        if action is ActionInput.EXIT:
            ctx.request_exit()
            return
        if action is not ActionInput.SELECT:
            return
        for button in self.buttons:
            if not button.selected:
                continue
            if button.id == QUIT_ID:
                ctx.request_exit()
            elif button.id in _TARGETS:
                ctx.transition(_TARGETS[button.id])
            else:
                raise ValueError(f"The button id {button.id} was not declared")

    def on_direction(self, ctx: GameContext, direction: DirectionInput) -> None:
        ctx.play(Sound.MOVE_CHARACTER)
        if direction not in (DirectionInput.UP, DirectionInput.DOWN):
            return
        current = self.selected
        if current is None:
            return
        target = next_button(current, direction is DirectionInput.UP)
        for button in self.buttons:
            button.selected = button.id == target

    def update(self, ctx: GameContext, delta: float) -> None:
        animation = self.animation
        animation.tick(delta)

        if animation.secondary_timer.just_finished():
            animation.blink()
            animation.primary_timer.reset()
            animation.secondary_timer.reset()

        if animation.primary_timer.just_finished():
            if self.sprite_index == BLINK_ROW_LAST_FRAME_INDEX:
                animation.face_front()
                animation.primary_timer.reset()
                animation.secondary_timer.reset()
            else:
                animation.next_index()

        self.sprite_index = animation.sprite_index()

    def view(self, ctx: GameContext) -> list[Any]:
        return [Text("Pushin'\nBoxes", TextSize.EXTRA_LARGE).primary(), *self.buttons]