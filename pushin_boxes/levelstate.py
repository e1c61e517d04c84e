"""A level's layout and the kinds of level that can be played."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any

from . import ron
from .mapgrid import MAP_COLS, MAP_ROWS, Map, MapEntity, MapPosition, filled_map

EDITOR_START = (4, 4)


@dataclass
class LevelState:
    """The map, the character's place on it and the zones still empty."""

    animation_row: int = 0
    map: Map = field(default_factory=lambda: filled_map(MapEntity.V))
    character_position: MapPosition = field(default_factory=MapPosition)
    remaining_zones: int = 0

    def copy(self) -> LevelState:
        """An independent copy of this state."""
        return LevelState(
            animation_row=self.animation_row,
            map=[list(row) for row in self.map],
            character_position=MapPosition(
                self.character_position.x, self.character_position.y
            ),
            remaining_zones=self.remaining_zones,
        )

    def to_ron(self) -> str:
        """The state in the RON form of level files."""
        grid = tuple(
            tuple(ron.Ident(entity.value) for entity in row) for row in self.map
        )
        position = ron.Struct(
            {"x": self.character_position.x, "y": self.character_position.y}
        )
        return ron.dumps(
            ron.Struct(
                {
                    "animation_row": self.animation_row,
                    "map": grid,
                    "character_position": position,
                    "remaining_zones": self.remaining_zones,
                }
            )
        )

    def __getitem__(self, position: MapPosition) -> MapEntity:
        return self.map[position.y][position.x]

    def __setitem__(self, position: MapPosition, entity: MapEntity) -> None:
        self.map[position.y][position.x] = entity


def _required(fields: dict[str, Any], name: str) -> Any:
    try:
        return fields[name]
    except KeyError:
        raise ValueError(f"missing field {name!r}") from None


def _count(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
    return value


def _struct(value: Any, name: str) -> dict[str, Any]:
    if not isinstance(value, ron.Struct):
        raise ValueError(f"{name} must be a struct")
    return value.fields


def _row(value: Any) -> list[MapEntity]:
    if not isinstance(value, (list, tuple)) or len(value) != MAP_COLS:
        raise ValueError(f"each map row must hold {MAP_COLS} cells")
    row = []
    for cell in value:
        if not isinstance(cell, ron.Ident):
            raise ValueError(f"invalid map cell {cell!r}")
        try:
            row.append(MapEntity(cell.name))
        except ValueError:
            raise ValueError(f"unknown map entity {cell.name!r}") from None
    return row


def _map(value: Any) -> Map:
    if not isinstance(value, (list, tuple)) or len(value) != MAP_ROWS:
        raise ValueError(f"the map must hold {MAP_ROWS} rows")
    return [_row(row) for row in value]


def parse_level_state(text: str) -> LevelState:
    """Read a level state from RON text; raises ValueError when malformed."""
    fields = _struct(ron.loads(text), "a level state")
    position = _struct(_required(fields, "character_position"), "character_position")
    x = _count(_required(position, "x"), "x")
    y = _count(_required(position, "y"), "y")
    if x >= MAP_COLS or y >= MAP_ROWS:
        raise ValueError(f"character position ({x}, {y}) is off the map")
    return LevelState(
        animation_row=_count(_required(fields, "animation_row"), "animation_row"),
        map=_map(_required(fields, "map")),
        character_position=MapPosition(x, y),
        remaining_zones=_count(_required(fields, "remaining_zones"), "remaining_zones"),
    )


def editor_state() -> LevelState:
    """The blank floor the editor starts from."""
    return LevelState(
        map=filled_map(MapEntity.F),
        character_position=MapPosition(*EDITOR_START),
    )


@dataclass(frozen=True)
class Stock:
    """One of the levels shipped with the game, by index."""

    index: int = 0


@dataclass(frozen=True)
class Editable:
    """The level being built in the editor."""


@dataclass(frozen=True)
class Custom:
    """A saved player level, keyed as ``name$uuid``."""

    key: str

    def name(self) -> str:
        return self.key.split("$")[0]

    def uuid(self) -> uuid.UUID:
        parts = self.key.split("$")
        if len(parts) < 2:
            raise ValueError(f"custom level key {self.key!r} has no uuid")
        return uuid.UUID(parts[1])


@dataclass
class Playtest:
    """An editor level being tried out before it is saved."""

    state: LevelState


LevelKind = Stock | Editable | Custom | Playtest