"""Text and button elements shown on screen."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from . import colors

Color = tuple[int, int, int, int]


class TextSize(enum.Enum):
    """Font sizes in pixels."""

    SMALL = 18.0
    MEDIUM = 36.0
    LARGE = 90.0
    EXTRA_LARGE = 108.0


@dataclass
class Text:
    """A fixed, centred line or block of text."""

    value: str = ""
    size: TextSize = TextSize.MEDIUM
    color: Color = colors.LIGHT

    def primary(self) -> Text:
        self.color = colors.PRIMARY
        return self

    def secondary(self) -> Text:
        self.color = colors.SECONDARY
        return self

    def light(self) -> Text:
        self.color = colors.LIGHT
        return self


@dataclass
class DynamicText:
    """A label followed by a value that changes while the scene runs."""

    label: str = ""
    size: TextSize = TextSize.MEDIUM
    id: int = 0
    value: str = ""
    color: Color = colors.LIGHT

    def primary(self) -> DynamicText:
        self.color = colors.PRIMARY
        return self

    def secondary(self) -> DynamicText:
        self.color = colors.SECONDARY
        return self

    def display(self) -> str:
        """The label and value as shown."""
        return self.label + self.value


@dataclass
class Button:
    """A selectable button with embossed text."""

    label: str
    id: int = 0
    selected: bool = False
    payload: str | None = None
    width: float = 400.0
    height: float = 60.0
    size: TextSize = TextSize.MEDIUM

    @property
    def background(self) -> Color:
        return colors.PRIMARY_DARK if self.selected else colors.TRANSPARENT

    def select(self) -> Button:
        self.selected = True
        return self

    def relief(self) -> float:
        """Offset in pixels of the text's shadow."""
        return self.size.value / TextSize.SMALL.value