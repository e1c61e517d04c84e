"""The level grid: its cells and positions on it."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .inputs import DirectionInput

MAP_COLS = 10
MAP_ROWS = 10

SPRITE_SIZE = 64
SPRITE_OFFSET = 32
ENTITY_SURFACE = 36
ENTITY_SURFACE_OFFSET = 18

MAP_WIDTH = 640.0
MAP_HEIGHT = 388.0


class MapEntity(enum.Enum):
    """What occupies a cell of the map."""

    V = "V"  # void
    F = "F"  # floor
    Z = "Z"  # zone
    B = "B"  # box on floor
    P = "P"  # box on zone

    def image_name(self) -> str:
        """Name of the image that draws this entity."""
        return _IMAGE_NAMES[self]


_IMAGE_NAMES = {
    MapEntity.V: "void",
    MapEntity.F: "floor",
    MapEntity.Z: "zone",
    MapEntity.B: "box",
    MapEntity.P: "placed_box",
}

Map = list[list[MapEntity]]


def filled_map(entity: MapEntity) -> Map:
    """A fresh map with every cell set to ``entity``, indexed ``[y][x]``."""
    return [[entity] * MAP_COLS for _ in range(MAP_ROWS)]


@dataclass
class MapPosition:
    """A cell coordinate; moves are clamped to the map bounds."""

    x: int = 0
    y: int = 0

    def increment_x(self) -> None:
        if self.x < MAP_COLS - 1:
            self.x += 1

    def increment_y(self) -> None:
        if self.y < MAP_ROWS - 1:
            self.y += 1

    def decrement_x(self) -> None:
        if self.x > 0:
            self.x -= 1

    def decrement_y(self) -> None:
        if self.y > 0:
            self.y -= 1

    def update_position(self, direction: DirectionInput) -> None:
        """Move one cell in ``direction``, staying on the map."""
        match direction:
            case DirectionInput.UP:
                self.decrement_y()
            case DirectionInput.LEFT:
                self.decrement_x()
            case DirectionInput.DOWN:
                self.increment_y()
            case DirectionInput.RIGHT:
                self.increment_x()

    def translation(self) -> tuple[float, float, float]:
        """Screen coordinates centred on the origin; z grows with depth."""
        x = float(self.x * SPRITE_SIZE + SPRITE_OFFSET)
        y = float((MAP_ROWS - self.y) * ENTITY_SURFACE - ENTITY_SURFACE_OFFSET)
        return (x - MAP_WIDTH / 2.0, y - MAP_HEIGHT / 2.0, float(self.y))