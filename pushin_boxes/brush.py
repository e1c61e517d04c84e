"""The editor's brush and the validity of the level being built."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .inputs import DirectionInput
from .mapgrid import MapPosition
from .timing import Timer

BLINK_INTERVAL = 0.1


class BrushEntity(enum.Enum):
    """What the brush paints, in cycling order."""

    FLOOR = "floor"
    VOID = "void"
    ZONE = "zone"
    BOX_IN_FLOOR = "box"
    BOX_IN_ZONE = "placed_box"
    CHARACTER = "character"

    def next(self) -> BrushEntity:
        """The entity after this one, wrapping around."""
        members = list(BrushEntity)
        return members[(members.index(self) + 1) % len(members)]

    def image_name(self) -> str:
        """Name of the brush image for this entity."""
        return self.value


@dataclass
class LevelValidity:
    """Counts of zones and boxes placed in the editor."""

    zones: int = 0
    boxes: int = 0

    def reset(self) -> None:
        self.zones = 0
        self.boxes = 0

    def is_valid(self) -> bool:
        """At least one zone, and one box per zone."""
        return self.zones > 0 and self.zones == self.boxes


@dataclass
class Brush:
    """The entity being painted and where."""

    entity: BrushEntity = BrushEntity.FLOOR
    position: MapPosition = field(default_factory=MapPosition)
    blink_timer: Timer = field(default_factory=lambda: Timer(BLINK_INTERVAL, repeating=True))

    def cycle(self) -> None:
        self.entity = self.entity.next()

    def move(self, direction: DirectionInput) -> None:
        """Move one cell, staying on the map."""
        self.position.update_position(direction)