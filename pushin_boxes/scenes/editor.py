"""The level editor: paint a map, then playtest it."""

from __future__ import annotations

from typing import Any

from ..brush import Brush, BrushEntity, LevelValidity
from ..context import GameContext, Scene
from ..inputs import ActionInput, DirectionInput
from ..level import TOTAL_CUSTOM_LEVELS, Level, editable_level
from ..levelstate import Playtest
from ..mapgrid import MapEntity
from ..sounds import Sound
from ..states import GameState
from ..ui import DynamicText, Text, TextSize

VALID_ID = 0

_PAINT = {
    BrushEntity.FLOOR: MapEntity.F,
    BrushEntity.VOID: MapEntity.V,
    BrushEntity.ZONE: MapEntity.Z,
    BrushEntity.BOX_IN_FLOOR: MapEntity.B,
    BrushEntity.BOX_IN_ZONE: MapEntity.P,
}

_UNDER_CHARACTER = {
    BrushEntity.FLOOR: MapEntity.F,
    BrushEntity.ZONE: MapEntity.Z,
}

_ACTION_SOUNDS = {
    ActionInput.EXIT: Sound.PUSH_BOX,
    ActionInput.TOGGLE: Sound.TOGGLE_VOLUME,
    ActionInput.SELECT: Sound.SET_ZONE,
}


def apply_brush(brush: Brush, level: Level, validity: LevelValidity) -> None:
    """Paint the brush's entity at its position, keeping the counts in step."""
    position = brush.position
    entity = brush.entity

    if entity is BrushEntity.CHARACTER:
        if level[position] in (MapEntity.F, MapEntity.Z):
            level.character_position = position
        return

    if level.character_position == position:
        # Only floor and zone may lie under the character; counts are left alone.
        painted = _UNDER_CHARACTER.get(entity)
        if painted is not None:
            level[position] = painted
        return

    current = level[position]
    if (
        entity in (BrushEntity.FLOOR, BrushEntity.VOID, BrushEntity.BOX_IN_FLOOR)
        and current is MapEntity.Z
    ):
        validity.zones -= 1
        level.state.remaining_zones -= 1
    elif entity is BrushEntity.ZONE and current in (MapEntity.F, MapEntity.V, MapEntity.B):
        validity.zones += 1
        level.state.remaining_zones += 1

    if entity is not BrushEntity.BOX_IN_FLOOR and current is MapEntity.B:
        validity.boxes -= 1
    elif entity is BrushEntity.BOX_IN_FLOOR and current is not MapEntity.B:
        validity.boxes += 1

    level[position] = _PAINT[entity]


def _level(ctx: GameContext) -> Level:
    if ctx.level is None:
        raise RuntimeError("the editor has no level")
    return ctx.level


class EditorScene(Scene):
    """Paints entities on a blank map and starts a playtest when it is valid."""

    def __init__(self) -> None:
        self.brush = Brush()
        self.validity = LevelValidity()
        self.highlight = False

    def on_enter(self, ctx: GameContext) -> None:
        if ctx.save_file.number_custom_levels() == TOTAL_CUSTOM_LEVELS:
            ctx.transition(GameState.LIMIT)
        self.brush = Brush()
        self.highlight = False
        ctx.level = editable_level()
        self.validity.reset()

    def on_action(self, ctx: GameContext, action: ActionInput) -> None:
        sound = _ACTION_SOUNDS.get(action)
        if sound is not None:
            ctx.play(sound)
        match action:
            case ActionInput.TOGGLE:
                self.brush.cycle()
            case ActionInput.SELECT:
                if self.validity.is_valid():
                    ctx.insert_level(Playtest(_level(ctx).state.copy()))
            case ActionInput.EXIT:
                ctx.transition(GameState.TITLE)

    def on_direction(self, ctx: GameContext, direction: DirectionInput) -> None:
        self.brush.move(direction)
        ctx.play(Sound.MOVE_CHARACTER)

    def update(self, ctx: GameContext, delta: float) -> None:
        if self.brush.blink_timer.tick(delta).just_finished():
            self.highlight = not self.highlight
        apply_brush(self.brush, _level(ctx), self.validity)

    def view(self, ctx: GameContext) -> list[Any]:
        valid = DynamicText(
            "Valid: ",
            TextSize.MEDIUM,
            id=VALID_ID,
            value="YES" if self.validity.is_valid() else "NO",
        )
        return [
            Text("Editor", TextSize.MEDIUM),
            Text("Custom Level Creation", TextSize.SMALL).secondary(),
            valid,
            Text("A valid level has at least one box and a zone per box", TextSize.SMALL),
            Text("(ENTER) - Toggle Entity", TextSize.SMALL).primary(),
            Text("(SPACE) - Playtest Level", TextSize.SMALL).primary(),
        ]