"""The level selection screens for stock and custom levels."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..context import GameContext, Scene
from ..inputs import ActionInput, DirectionInput
from ..levelstate import Custom, Stock
from ..record import LevelRecord
from ..savefile import SaveFile
from ..sounds import Sound
from ..states import GameState, SelectionKind, selection_state
from ..ui import Button, Text, TextSize

ROW_LENGTH = 4
SQUARE_SIZE = 60.0

_ACTION_SOUNDS = {
    ActionInput.EXIT: Sound.PUSH_BOX,
    ActionInput.DELETE: Sound.PUSH_BOX,
    ActionInput.TOGGLE: Sound.TOGGLE_VOLUME,
    ActionInput.SELECT: Sound.SET_ZONE,
}


def next_index(current: int, direction: DirectionInput, count: int) -> int:
    """The button reached from ``current`` on a grid four wide, kept below ``count``."""
    if count <= 0:
        raise ValueError("there are no buttons to select")
    match direction:
        case DirectionInput.UP:
            index = max(current - ROW_LENGTH, 0)
        case DirectionInput.DOWN:
            index = current + ROW_LENGTH
        case DirectionInput.LEFT:
            index = max(current - 1, 0)
        case DirectionInput.RIGHT:
            index = current + 1
    return index if index < count else count - 1


def _record_text(record: LevelRecord) -> Text:
    if record.is_set():
        return Text(f"Record: {record.moves_in_time(chr(10))}", TextSize.SMALL)
    return Text("New Level!\n ", TextSize.SMALL).secondary()


def _stock_buttons(save_file: SaveFile) -> list[tuple[Button, Text]]:
    last_unlocked = save_file.unlocked_levels() - 1
    entries = []
    for index, record in enumerate(save_file.stock_records):
        button = Button(str(index + 1), id=index, width=SQUARE_SIZE, height=SQUARE_SIZE)
        if index == last_unlocked:
            button.select()
        entries.append((button, _record_text(record)))
    return entries


def _custom_buttons(save_file: SaveFile) -> list[tuple[Button, Text]]:
    entries = []
    for index, (key, record) in enumerate(save_file.ordered_custom_records()):
        button = Button(key.split("$")[0], id=index, payload=key)
        if index == 0:
            button.select()
        entries.append((button, _record_text(record)))
    return entries


def _payload(button: Button) -> str:
    if button.payload is None:
        raise ValueError("The button payload was empty")
    return button.payload


class SelectionScene(Scene):
    """A grid of levels to choose from; ENTER switches between stock and custom."""

    def __init__(self) -> None:
        self.kind = SelectionKind.STOCK
        self.entries: list[tuple[Button, Text]] = []

    @property
    def buttons(self) -> list[Button]:
        return [button for button, _ in self.entries]

    @property
    def selected(self) -> Button | None:
        return next((button for button in self.buttons if button.selected), None)

    def _count(self, ctx: GameContext) -> int:
        if self.kind.is_stock():
            return ctx.save_file.unlocked_levels()
        return ctx.save_file.number_custom_levels()

    def on_enter(self, ctx: GameContext) -> None:
        self.kind = ctx.state.selection_kind()
        if self.kind.is_stock():
            self.entries = _stock_buttons(ctx.save_file)
        else:
            self.entries = _custom_buttons(ctx.save_file)

    def on_action(self, ctx: GameContext, action: ActionInput) -> None:
        sound = _ACTION_SOUNDS.get(action)
        if sound is not None:
            ctx.play(sound)
        match action:
            case ActionInput.SELECT:
                button = self.selected
                if button is None:
                    return
                if self.kind.is_stock():
                    ctx.insert_level(Stock(button.id))
                else:
                    ctx.insert_level(Custom(_payload(button)))
            case ActionInput.TOGGLE:
                ctx.transition(selection_state(self.kind.toggle()))
            case ActionInput.DELETE:
                button = self.selected
                if button is not None and not self.kind.is_stock():
                    self._delete(ctx, _payload(button))
            case ActionInput.EXIT:
                ctx.transition(GameState.TITLE)

    def _delete(self, ctx: GameContext, key: str) -> None:
        ident = Custom(key).uuid()
        ctx.save_file.delete_custom_record(key)
        ctx.save()
        (Path(ctx.assets_dir) / "levels" / "custom" / f"{ident}.lvl").unlink()
        ctx.handles.custom.pop(ident, None)
        ctx.transition(selection_state(SelectionKind.CUSTOM))

    def on_direction(self, ctx: GameContext, direction: DirectionInput) -> None:
        ctx.play(Sound.MOVE_CHARACTER)
        current = self.selected
        if current is None:
            return
        target = next_index(current.id, direction, self._count(ctx))
        for button in self.buttons:
            button.selected = button.id == target

    def view(self, ctx: GameContext) -> list[Any]:
        items: list[Any] = [Text(f"Select a {self.kind.label()} Level", TextSize.MEDIUM).primary()]
        for button, record in self.entries:
            items.extend((button, record))
        items.append(
            Text(f"(ENTER) - Switch to {self.kind.toggle().label()} levels", TextSize.SMALL).primary()
        )
        items.append(Text("(DELETE) - Remove a custom level", TextSize.SMALL).primary())
        return items