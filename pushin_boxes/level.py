"""A level in play: its state, counters, undo history and timers."""

from __future__ import annotations

import uuid
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from .inputs import DirectionInput
from .levelstate import (
    Custom,
    Editable,
    LevelKind,
    LevelState,
    Playtest,
    Stock,
    editor_state,
    parse_level_state,
)
from .mapgrid import MAP_COLS, MAP_ROWS, MapEntity, MapPosition
from .record import LevelRecord, format_clock
from .timing import Stopwatch, Timer

TOTAL_STOCK_LEVELS = 16
TOTAL_CUSTOM_LEVELS = 16
MAX_SNAPSHOTS = 4
MAX_UNDOS = 4
DONE_DELAY = 0.25

_ANIMATION_ROWS = {
    DirectionInput.DOWN: 0,
    DirectionInput.UP: 1,
    DirectionInput.LEFT: 2,
    DirectionInput.RIGHT: 3,
}


class _RecordSource(Protocol):
    def record_for(self, kind: LevelKind) -> LevelRecord: ...


@dataclass
class LevelHandles:
    """The loaded layouts of stock and custom levels."""

    stock: list[LevelState] = field(default_factory=list)
    custom: dict[uuid.UUID, LevelState] = field(default_factory=dict)

    def stock_state(self, index: int) -> LevelState:
        """A fresh copy of stock level ``index``."""
        return self.stock[index].copy()

    def custom_state(self, uuid: uuid.UUID) -> LevelState:
        """A fresh copy of the custom level with ``uuid``."""
        try:
            return self.custom[uuid].copy()
        except KeyError:
            raise KeyError(f"Cannot get custom level {uuid}") from None

    def insert_custom(self, uuid: uuid.UUID, state: LevelState) -> None:
        self.custom[uuid] = state


def load_level_handles(assets_dir: str | Path, custom_keys: Iterable[str]) -> LevelHandles:
    """Read the stock levels and the custom levels named by ``custom_keys``."""
    levels = Path(assets_dir) / "levels"
    stock = [
        parse_level_state((levels / "stock" / f"{number}.lvl").read_text(encoding="utf-8"))
        for number in range(1, TOTAL_STOCK_LEVELS + 1)
    ]
    handles = LevelHandles(stock=stock)
    for key in custom_keys:
        ident = Custom(key).uuid()
        text = (levels / "custom" / f"{ident}.lvl").read_text(encoding="utf-8")
        handles.insert_custom(ident, parse_level_state(text))
    return handles


@dataclass(eq=False)
class Level:
    """A level being played or edited."""

    kind: LevelKind
    state: LevelState
    record: LevelRecord = field(default_factory=LevelRecord)
    undos: int = field(default=MAX_UNDOS, init=False)
    moves: int = field(default=0, init=False)
    snapshots: deque[LevelState] = field(
        default_factory=lambda: deque(maxlen=MAX_SNAPSHOTS), init=False
    )
    stopwatch: Stopwatch = field(default_factory=Stopwatch, init=False)
    done_timer: Timer = field(default_factory=lambda: Timer(DONE_DELAY), init=False)

    def reset(self, state: LevelState) -> None:
        """Replace the state and clear history, undos and moves."""
        self.snapshots.clear()
        self.state = state
        self.undos = MAX_UNDOS
        self.moves = 0

    def cells(self) -> Iterator[tuple[MapPosition, MapEntity]]:
        """Every position with its entity, column by column."""
        for column in range(MAP_COLS):
            for row in range(MAP_ROWS):
                position = MapPosition(column, row)
                yield position, self.state[position]

    def __getitem__(self, position: MapPosition) -> MapEntity:
        return self.state[position]

    def __setitem__(self, position: MapPosition, entity: MapEntity) -> None:
        self.state[position] = entity

    @property
    def character_position(self) -> MapPosition:
        return self.state.character_position

    @character_position.setter
    def character_position(self, position: MapPosition) -> None:
        self.state.character_position = MapPosition(position.x, position.y)

    @property
    def animation_row(self) -> int:
        return self.state.animation_row

    def face(self, direction: DirectionInput) -> None:
        """Turn the character towards ``direction``."""
        self.state.animation_row = _ANIMATION_ROWS[direction]

    def no_remaining_zones(self) -> bool:
        return self.state.remaining_zones == 0

    def current_result(self) -> LevelRecord:
        """Moves made and time spent so far."""
        return LevelRecord(self.moves, self.stopwatch.elapsed())

    def is_new_record(self) -> bool:
        return self.current_result().is_better_than(self.record)

    def is_stock(self) -> bool:
        return isinstance(self.kind, Stock)

    def name(self) -> str:
        match self.kind:
            case Stock(index=index):
                return str(index + 1)
            case Custom():
                return self.kind.name()
            case Playtest():
                return "Playtest"
        raise ValueError("An editable level does not have a name")

    def save_snapshot(self) -> None:
        """Remember the current state; only the latest few are kept."""
        self.snapshots.appendleft(self.state.copy())

    def undo(self) -> bool:
        """Go back to the latest snapshot; False when none or no undos left."""
        if self.undos <= 0 or not self.snapshots:
            return False
        self.state = self.snapshots.popleft()
        self.undos = max(0, self.undos - 1)
        self.moves = max(0, self.moves - 1)
        return True

    def tick_timer(self, delta: float) -> None:
        self.done_timer.tick(delta)

    def tick_stopwatch(self, delta: float) -> None:
        self.stopwatch.tick(delta)

    def done(self) -> bool:
        """True once the pause after solving the level is over."""
        return self.done_timer.finished()

    def stopwatch_string(self) -> str:
        return format_clock(self.stopwatch.elapsed())

    def moves_in_time(self, separator: str) -> str:
        return f"{self.moves} moves{separator}in {self.stopwatch_string()}"

    def reload(self, handles: LevelHandles) -> bool:
        """Restart from the original layout; False when nothing changed yet."""
        if self.moves == 0 and self.undos >= MAX_UNDOS:
            return False
        match self.kind:
            case Stock(index=index):
                self.reset(handles.stock_state(index))
            case Custom():
                self.reset(handles.custom_state(self.kind.uuid()))
            case Playtest(state=state):
                self.reset(state.copy())
            case _:
                raise ValueError("An editable level can't be reloaded")
        return True

    def is_last(self) -> bool:
        """Whether this is the final stock level."""
        if not isinstance(self.kind, Stock):
            raise ValueError("There is no last level in other level kinds")
        return self.kind.index + 1 == TOTAL_STOCK_LEVELS


def editable_level() -> Level:
    """A blank level for the editor."""
    return Level(Editable(), editor_state(), LevelRecord())


def create_level(kind: LevelKind, save_file: _RecordSource, handles: LevelHandles) -> Level:
    """Build the level to play for ``kind`` with its saved record."""
    match kind:
        case Stock(index=index):
            return Level(kind, handles.stock_state(index), save_file.record_for(kind))
        case Custom():
            return Level(kind, handles.custom_state(kind.uuid()), save_file.record_for(kind))
        case Playtest(state=state):
            return Level(kind, state.copy(), LevelRecord())
    raise ValueError("An editable level cannot be inserted for play")