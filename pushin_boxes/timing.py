"""Timers, stopwatches and the character's sprite animation."""

from __future__ import annotations

from dataclasses import dataclass, field

FRAMES_PER_ROW = 4

FRONT_ROW = 0
BLINK_ROW = 4
SLEEP_ROW = 5
HAPPY_ROW = 6

BLINK_ROW_LAST_FRAME_INDEX = 19

TITLE_CHARACTER_POSITION = (0.0, 74.0, 1.0)
WIN_CHARACTER_POSITION = (222.0, 12.0, 1.0)


class Timer:
    """Counts towards a duration in seconds, once or repeatedly."""

    def __init__(self, duration: float = 0.0, repeating: bool = False) -> None:
        if duration < 0:
            raise ValueError("timer duration cannot be negative")
        self.duration = float(duration)
        self.repeating = repeating
        self._elapsed = 0.0
        self._finished = False
        self._times_finished = 0

    def tick(self, delta: float) -> Timer:
        """Advance by ``delta`` seconds."""
        if delta < 0:
            raise ValueError("cannot tick by a negative delta")
        if self._finished and not self.repeating:
            self._times_finished = 0
            return self
        self._elapsed += delta
        self._finished = self._elapsed >= self.duration
        if not self._finished:
            self._times_finished = 0
        elif not self.repeating:
            self._times_finished = 1
            self._elapsed = self.duration
        elif self.duration == 0:
            self._times_finished = 1
            self._elapsed = 0.0
        else:
            self._times_finished = int(self._elapsed // self.duration)
            self._elapsed %= self.duration
        return self

    def reset(self) -> None:
        self._elapsed = 0.0
        self._finished = False
        self._times_finished = 0

    def finished(self) -> bool:
        """True once a one-shot timer is done, or on the tick a repeating one wraps."""
        return self._finished

    def just_finished(self) -> bool:
        """True only on the tick that completed the duration."""
        return self._times_finished > 0


class Stopwatch:
    """Accumulates elapsed seconds."""

    def __init__(self) -> None:
        self._elapsed = 0.0

    def tick(self, delta: float) -> Stopwatch:
        if delta < 0:
            raise ValueError("cannot tick by a negative delta")
        self._elapsed += delta
        return self

    def elapsed(self) -> float:
        return self._elapsed


@dataclass
class CharacterAnimation:
    """Frame selection in the character's sprite sheet."""

    primary_timer: Timer = field(default_factory=Timer)
    secondary_timer: Timer = field(default_factory=Timer)
    tertiary_timer: Timer = field(default_factory=Timer)
    row: int = FRONT_ROW
    index: int = 0

    def tick(self, delta: float) -> None:
        self.primary_timer.tick(delta)
        self.secondary_timer.tick(delta)
        self.tertiary_timer.tick(delta)

    def switch_row(self, row: int) -> None:
        """Start ``row`` from its first frame."""
        self.index = 0
        self.row = row

    def blink(self) -> None:
        self.switch_row(BLINK_ROW)

    def face_front(self) -> None:
        self.switch_row(FRONT_ROW)

    def sleep(self) -> None:
        self.switch_row(SLEEP_ROW)

    def next_index(self) -> None:
        self.index = (self.index + 1) % FRAMES_PER_ROW

    def sprite_index(self) -> int:
        return self.index + FRAMES_PER_ROW * self.row


def blinking_animation() -> CharacterAnimation:
    """The title screen character, blinking every few seconds."""
    return CharacterAnimation(
        primary_timer=Timer(0.25, repeating=True),
        secondary_timer=Timer(3.0),
    )


def happy_animation() -> CharacterAnimation:
    """The win screen character."""
    return CharacterAnimation(primary_timer=Timer(0.125, repeating=True), row=HAPPY_ROW)


def level_animation() -> CharacterAnimation:
    """The playing character, blinking and then falling asleep when idle."""
    return CharacterAnimation(
        primary_timer=Timer(0.25, repeating=True),
        secondary_timer=Timer(7.0),
        tertiary_timer=Timer(10.0),
        row=FRONT_ROW,
        index=0,
    )