"""The scene where a level is played."""

from __future__ import annotations

from typing import Any

from ..context import GameContext, Scene
from ..inputs import ActionInput, DirectionInput
from ..level import Level
from ..levelstate import Custom, Playtest, Stock
from ..mapgrid import MapEntity, MapPosition
from ..sounds import Sound
from ..states import GameState, SelectionKind, selection_state
from ..timing import CharacterAnimation, level_animation
from ..ui import DynamicText, Text, TextSize

STOPWATCH_COUNTER_ID = 0
MOVES_COUNTER_ID = 1
UNDOS_COUNTER_ID = 2

NEW_LEVEL = "New Level!"


def _step(position: MapPosition, direction: DirectionInput) -> MapPosition:
    moved = MapPosition(position.x, position.y)
    moved.update_position(direction)
    return moved


def move_character(level: Level, direction: DirectionInput) -> list[Sound]:
    """Turn and move the character, pushing a box if there is one.

    Returns the sounds the move makes; an empty list when it is blocked.
    """
    level.face(direction)
    target = _step(level.character_position, direction)
    ahead = level[target]

    if ahead is MapEntity.V:
        return []

    if ahead in (MapEntity.B, MapEntity.P):
        in_zone = ahead is MapEntity.P
        left_behind = MapEntity.Z if in_zone else MapEntity.F
        beyond = _step(target, direction)
        landing = level[beyond]
        if landing is MapEntity.F:
            level.save_snapshot()
            level[target] = left_behind
            level[beyond] = MapEntity.B
            level.character_position = target
            level.moves += 1
            if in_zone:
                level.state.remaining_zones += 1
            return [Sound.MOVE_CHARACTER, Sound.PUSH_BOX]
        if landing is MapEntity.Z:
            level.save_snapshot()
            level[target] = left_behind
            level[beyond] = MapEntity.P
            level.character_position = target
            level.moves += 1
            if not in_zone:
                level.state.remaining_zones -= 1
            return [Sound.MOVE_CHARACTER, Sound.PUSH_BOX, Sound.SET_ZONE]
        return []

    level.save_snapshot()
    level.character_position = target
    level.moves += 1
    return [Sound.MOVE_CHARACTER]


def _level(ctx: GameContext) -> Level:
    if ctx.level is None:
        raise RuntimeError("there is no level to play")
    return ctx.level


class LevelScene(Scene):
    """Moves the character, counts moves and time, and ends when all zones are filled."""

    def __init__(self) -> None:
        self.animation: CharacterAnimation = level_animation()
        self.sprite_index = 0

    def on_enter(self, ctx: GameContext) -> None:
        level = _level(ctx)
        self.animation = level_animation()
        self.sprite_index = level.animation_row

    def on_action(self, ctx: GameContext, action: ActionInput) -> None:
        level = _level(ctx)
        if level.no_remaining_zones():
            return
        match action:
            case ActionInput.UNDO:
                if level.undo():
                    ctx.play(Sound.UNDO_MOVE)
            case ActionInput.RELOAD:
                if level.reload(ctx.handles):
                    ctx.play(Sound.RELOAD_LEVEL)
            case ActionInput.EXIT:
                ctx.play(Sound.PUSH_BOX)
                kind = SelectionKind.STOCK if level.is_stock() else SelectionKind.CUSTOM
                ctx.transition(selection_state(kind))

    def on_direction(self, ctx: GameContext, direction: DirectionInput) -> None:
        level = _level(ctx)
        if level.no_remaining_zones():
            return
        for sound in move_character(level, direction):
            ctx.play(sound)

    def _animate(self, level: Level, delta: float) -> None:
        animation = self.animation
        level_row = level.animation_row
        animation.tick(delta)

        if level_row == 0:
            if animation.secondary_timer.just_finished():
                animation.blink()
                animation.primary_timer.reset()
            if animation.tertiary_timer.just_finished():
                animation.sleep()
                animation.primary_timer.reset()
        else:
            animation.secondary_timer.reset()
            animation.tertiary_timer.reset()

        if (
            animation.row != level_row
            and not animation.secondary_timer.finished()
            and not animation.tertiary_timer.finished()
        ):
            animation.primary_timer.reset()
            animation.switch_row(level_row)

        if animation.primary_timer.just_finished():
            animation.next_index()

        self.sprite_index = animation.sprite_index()

    def update(self, ctx: GameContext, delta: float) -> None:
        level = _level(ctx)
        self._animate(level, delta)

        if level.no_remaining_zones():
            level.tick_timer(delta)
        else:
            level.tick_stopwatch(delta)

        if level.done():
            match level.kind:
                case Stock() | Custom():
                    ctx.transition(GameState.WIN)
                case Playtest():
                    ctx.transition(GameState.PASSED)
                case _:
                    raise ValueError("An editable level cannot trigger the level timer")

    def view(self, ctx: GameContext) -> list[Any]:
        level = _level(ctx)
        record = level.record
        record_text = record.moves_in_time(" ") if record.is_set() else NEW_LEVEL
        return [
            Text(f"Level {level.name()}", TextSize.MEDIUM),
            Text(record_text, TextSize.SMALL).secondary(),
            DynamicText("Moves: ", TextSize.MEDIUM, id=MOVES_COUNTER_ID, value=str(level.moves)),
            DynamicText(
                "Time: ",
                TextSize.SMALL,
                id=STOPWATCH_COUNTER_ID,
                value=level.stopwatch_string(),
            ),
            Text("(F5) - Reload Level", TextSize.SMALL).primary(),
            Text("(ESC) - Level Selection", TextSize.SMALL).primary(),
            DynamicText("Undos: ", TextSize.MEDIUM, id=UNDOS_COUNTER_ID, value=str(level.undos)),
            Text("(Z) - Undo Movement", TextSize.SMALL).primary(),
        ]