"""The player's saved progress: volume and best records per level."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from . import ron
from .level import TOTAL_STOCK_LEVELS, Level
from .levelstate import Custom, LevelKind, Playtest, Stock
from .record import LevelRecord
from .sounds import INITIAL_VOLUME

SAVE_FILE_NAME = "game.dat"


def _first_records() -> list[LevelRecord]:
    return [LevelRecord()]


@dataclass
class SaveFile:
    """Volume, one record per unlocked stock level and custom level records."""

    volume: float = INITIAL_VOLUME
    stock_records: list[LevelRecord] = field(default_factory=_first_records)
    custom_records: dict[str, LevelRecord] = field(default_factory=dict)

    def record_for(self, kind: LevelKind) -> LevelRecord:
        """The saved record of a level; playtests never have one."""
        match kind:
            case Stock(index=index):
                return self.stock_records[index]
            case Playtest():
                return LevelRecord()
            case Custom(key=key):
                try:
                    return self.custom_records[key]
                except KeyError:
                    raise KeyError(f"Cannot get custom record {key!r}") from None
        raise ValueError("An editable level does not have a record")

    def set_new_record(self, level: Level) -> None:
        """Keep the level's current result when it beats the saved one."""
        new_record = level.current_result()
        if not new_record.is_better_than(self.record_for(level.kind)):
            return
        match level.kind:
            case Stock(index=index):
                self.stock_records[index] = new_record
            case Custom(key=key):
                self.custom_records[key] = new_record
            case Playtest():
                raise ValueError("Cannot set a record for a playtest level")
            case _:
                raise ValueError("Cannot set a record for an editable level")

    def insert_custom_record(self, key: str, record: LevelRecord) -> None:
        self.custom_records[key] = record

    def delete_custom_record(self, key: str) -> None:
        self.custom_records.pop(key, None)

    def unlock_new_level(self, level: Level) -> None:
        """Unlock the next stock level after winning the last unlocked one."""
        if not isinstance(level.kind, Stock):
            return
        unlocked = self.unlocked_levels()
        if unlocked == level.kind.index + 1 and unlocked < TOTAL_STOCK_LEVELS:
            self.stock_records.append(LevelRecord())

    def unlocked_levels(self) -> int:
        return len(self.stock_records)

    def number_custom_levels(self) -> int:
        return len(self.custom_records)

    def ordered_custom_records(self) -> list[tuple[str, LevelRecord]]:
        """Custom level keys with their records, sorted by key."""
        return sorted(self.custom_records.items(), key=lambda item: item[0])

    def to_ron(self) -> str:
        """The save file in its RON form."""
        return ron.dumps(
            ron.Struct(
                {
                    "volume": float(self.volume),
                    "stock_records": [_record_struct(r) for r in self.stock_records],
                    "custom_records": {
                        key: _record_struct(r) for key, r in self.custom_records.items()
                    },
                }
            )
        )

    def save(self, path: str | Path) -> None:
        """Write the save file to ``path``."""
        Path(path).write_text(self.to_ron(), encoding="utf-8")


def _record_struct(record: LevelRecord) -> ron.Struct:
    return ron.Struct({"moves": record.moves, "time": float(record.time)})


def _fields(value: Any, name: str) -> dict[str, Any]:
    if not isinstance(value, ron.Struct):
        raise ValueError(f"{name} must be a struct")
    return value.fields


def _required(fields: dict[str, Any], name: str) -> Any:
    try:
        return fields[name]
    except KeyError:
        raise ValueError(f"missing field {name!r}") from None


def _number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    return float(value)


def _record(value: Any) -> LevelRecord:
    fields = _fields(value, "a level record")
    moves = _required(fields, "moves")
    if isinstance(moves, bool) or not isinstance(moves, int) or moves < 0:
        raise ValueError(f"moves must be a non-negative integer, got {moves!r}")
    time = _number(_required(fields, "time"), "time")
    if time < 0:
        raise ValueError("time cannot be negative")
    return LevelRecord(moves, time)


def parse_save_file(text: str) -> SaveFile:
    """Read a save file from RON text; raises ValueError when malformed."""
    fields = _fields(ron.loads(text), "a save file")
    stock = _required(fields, "stock_records")
    if not isinstance(stock, (list, tuple)):
        raise ValueError("stock_records must be a list")
    custom = _required(fields, "custom_records")
    if not isinstance(custom, dict):
        raise ValueError("custom_records must be a map")
    custom_records = {}
    for key, value in custom.items():
        if not isinstance(key, str):
            raise ValueError(f"custom record key must be a string, got {key!r}")
        custom_records[key] = _record(value)
    return SaveFile(
        volume=_number(_required(fields, "volume"), "volume"),
        stock_records=[_record(value) for value in stock],
        custom_records=custom_records,
    )


def load_save_file(path: str | Path) -> SaveFile:
    """Read the save file at ``path``, or a fresh one if it is missing or broken."""
    try:
        return parse_save_file(Path(path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError):
        return SaveFile()