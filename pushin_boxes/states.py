"""Game scenes and the two kinds of level selection."""

from __future__ import annotations

import enum


class SelectionKind(enum.Enum):
    """Which set of levels a selection screen shows."""

    STOCK = "Stock"
    CUSTOM = "Custom"

    def is_stock(self) -> bool:
        return self is SelectionKind.STOCK

    def label(self) -> str:
        return self.value

    def toggle(self) -> SelectionKind:
        return SelectionKind.CUSTOM if self is SelectionKind.STOCK else SelectionKind.STOCK


class GameState(enum.Enum):
    """The scene the game is in."""

    LOADING = enum.auto()
    TITLE = enum.auto()
    INSTRUCTIONS = enum.auto()
    EDITOR = enum.auto()
    LIMIT = enum.auto()
    PASSED = enum.auto()
    OPTIONS = enum.auto()
    SELECTION_STOCK = enum.auto()
    SELECTION_CUSTOM = enum.auto()
    LEVEL = enum.auto()
    WIN = enum.auto()

    def selection_kind(self) -> SelectionKind:
        """The kind of a selection state; other states raise ValueError."""
        if self is GameState.SELECTION_STOCK:
            return SelectionKind.STOCK
        if self is GameState.SELECTION_CUSTOM:
            return SelectionKind.CUSTOM
        raise ValueError(f"{self.name} is not a selection state")


def selection_state(kind: SelectionKind) -> GameState:
    """The selection state that shows levels of ``kind``."""
    return GameState.SELECTION_STOCK if kind.is_stock() else GameState.SELECTION_CUSTOM