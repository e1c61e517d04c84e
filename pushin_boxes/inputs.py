"""Keyboard keys mapped to game actions and directions."""

from __future__ import annotations

import enum


class ActionInput(enum.Enum):
    """An action the player can trigger."""

    UNDO = "undo"
    RELOAD = "reload"
    SELECT = "select"
    TOGGLE = "toggle"
    DELETE = "delete"
    EXIT = "exit"


class DirectionInput(enum.Enum):
    """A direction the player can press."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


_KEY_BINDINGS: dict[str, ActionInput | DirectionInput] = {
    "up": DirectionInput.UP,
    "down": DirectionInput.DOWN,
    "left": DirectionInput.LEFT,
    "right": DirectionInput.RIGHT,
    "z": ActionInput.UNDO,
    "f5": ActionInput.RELOAD,
    "escape": ActionInput.EXIT,
    "space": ActionInput.SELECT,
    "return": ActionInput.TOGGLE,
    "delete": ActionInput.DELETE,
}


def key_to_input(key: str) -> ActionInput | DirectionInput | None:
    """Return the input bound to a key name, or None for unbound keys."""
    return _KEY_BINDINGS.get(key.lower())