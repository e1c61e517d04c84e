import uuid

import pytest

from pushin_boxes.inputs import DirectionInput
from pushin_boxes.level import (
    MAX_UNDOS,
    TOTAL_STOCK_LEVELS,
    Level,
    LevelHandles,
    create_level,
    editable_level,
    load_level_handles,
)
from pushin_boxes.levelstate import Custom, Editable, Playtest, Stock, editor_state
from pushin_boxes.mapgrid import MapEntity, MapPosition
from pushin_boxes.record import LevelRecord


class FakeSaveFile:
    def __init__(self, records):
        self.records = records
        self.asked = []

    def record_for(self, kind):
        self.asked.append(kind)
        return self.records[kind]


def _state(zones):
    state = editor_state()
    state.remaining_zones = zones
    return state


def _handles():
    return LevelHandles(stock=[_state(i) for i in range(TOTAL_STOCK_LEVELS)])


def test_new_level_counters():
    level = Level(Stock(0), _state(1))
    assert level.undos == MAX_UNDOS
    assert level.moves == 0
    assert level.undo() is False


def test_undo_restores_snapshot():
    level = Level(Stock(0), _state(1))
    level.save_snapshot()
    level[MapPosition(1, 1)] = MapEntity.B
    level.moves += 1
    assert level.undo() is True
    assert level[MapPosition(1, 1)] is MapEntity.F
    assert level.moves == 0
    assert level.undos == MAX_UNDOS - 1


def test_undos_run_out():
    level = Level(Stock(0), _state(1))
    for _ in range(MAX_UNDOS + 1):
        level.save_snapshot()
    results = [level.undo() for _ in range(MAX_UNDOS + 1)]
    assert results == [True] * MAX_UNDOS + [False]
    assert level.undos == 0


def test_snapshot_history_is_bounded():
    level = Level(Stock(0), _state(0))
    level.undos = 10
    for zones in range(6):
        level.state.remaining_zones = zones
        level.save_snapshot()
    restored = []
    while level.undo():
        restored.append(level.state.remaining_zones)
    assert restored == [5, 4, 3, 2]


def test_reload_only_after_changes():
    handles = _handles()
    level = Level(Stock(3), handles.stock_state(3))
    assert level.reload(handles) is False
    level.save_snapshot()
    level[MapPosition(0, 0)] = MapEntity.V
    level.moves += 1
    assert level.reload(handles) is True
    assert level.state == handles.stock[3]
    assert level.moves == 0
    assert len(level.snapshots) == 0


def test_reload_playtest_uses_original_state():
    original = _state(2)
    level = create_level(Playtest(original), FakeSaveFile({}), LevelHandles())
    level.state.remaining_zones = 0
    level.moves = 1
    assert level.reload(LevelHandles()) is True
    assert level.state == original
    assert level.state is not original


def test_reload_editable_raises():
    level = editable_level()
    level.moves = 1
    with pytest.raises(ValueError):
        level.reload(LevelHandles())


def test_names():
    assert Level(Stock(0), _state(0)).name() == "1"
    assert Level(Custom(f"castle${uuid.uuid4()}"), _state(0)).name() == "castle"
    assert Level(Playtest(_state(0)), _state(0)).name() == "Playtest"
    with pytest.raises(ValueError):
        editable_level().name()


def test_is_last_and_is_stock():
    assert Level(Stock(TOTAL_STOCK_LEVELS - 1), _state(0)).is_last() is True
    assert Level(Stock(0), _state(0)).is_last() is False
    custom = Level(Custom(f"a${uuid.uuid4()}"), _state(0))
    assert custom.is_stock() is False
    with pytest.raises(ValueError):
        custom.is_last()


def test_cells_cover_map_column_by_column():
    cells = list(editable_level().cells())
    assert len(cells) == 100
    assert cells[0] == (MapPosition(0, 0), MapEntity.F)
    assert cells[1][0] == MapPosition(0, 1)
    assert len({(p.x, p.y) for p, _ in cells}) == 100


def test_face_sets_animation_row():
    level = editable_level()
    level.face(DirectionInput.DOWN)
    assert level.animation_row == 0
    level.face(DirectionInput.UP)
    assert level.animation_row == 1
    level.face(DirectionInput.LEFT)
    assert level.animation_row == 2
    level.face(DirectionInput.RIGHT)
    assert level.animation_row == 3


def test_character_position_setter_copies():
    level = editable_level()
    target = MapPosition(2, 3)
    level.character_position = target
    target.x = 9
    assert level.character_position == MapPosition(2, 3)


def test_done_after_delay():
    level = Level(Stock(0), _state(0))
    assert level.done() is False
    level.tick_timer(0.1)
    assert level.done() is False
    level.tick_timer(0.15)
    assert level.done() is True


def test_stopwatch_and_result():
    level = Level(Stock(0), _state(1))
    level.tick_stopwatch(61.5)
    level.moves = 7
    assert level.stopwatch_string() == "01:01:500"
    assert level.current_result() == LevelRecord(7, 61.5)
    assert level.moves_in_time(" ") == "7 moves in " + level.stopwatch_string()


def test_new_record_against_saved():
    level = Level(Stock(0), _state(1), LevelRecord(5, 10.0))
    level.moves = 4
    assert level.is_new_record() is True
    level.moves = 6
    assert level.is_new_record() is False
    assert Level(Stock(0), _state(1)).is_new_record() is True


def test_create_level_stock_and_custom():
    handles = _handles()
    ident = uuid.uuid4()
    handles.insert_custom(ident, _state(3))
    stock_kind = Stock(2)
    custom_kind = Custom(f"mine${ident}")
    saved = FakeSaveFile({stock_kind: LevelRecord(3, 1.0), custom_kind: LevelRecord(9, 2.0)})
    stock = create_level(stock_kind, saved, handles)
    custom = create_level(custom_kind, saved, handles)
    assert stock.state == handles.stock[2]
    assert stock.state is not handles.stock[2]
    assert stock.record == LevelRecord(3, 1.0)
    assert custom.state.remaining_zones == 3
    assert custom.record == LevelRecord(9, 2.0)
    with pytest.raises(ValueError):
        create_level(Editable(), saved, handles)


def test_custom_state_missing_raises():
    with pytest.raises(KeyError):
        LevelHandles().custom_state(uuid.uuid4())


def test_load_level_handles(tmp_path):
    stock_dir = tmp_path / "levels" / "stock"
    custom_dir = tmp_path / "levels" / "custom"
    stock_dir.mkdir(parents=True)
    custom_dir.mkdir(parents=True)
    for number in range(1, TOTAL_STOCK_LEVELS + 1):
        (stock_dir / f"{number}.lvl").write_text(_state(number).to_ron(), encoding="utf-8")
    ident = uuid.uuid4()
    (custom_dir / f"{ident}.lvl").write_text(_state(42).to_ron(), encoding="utf-8")
    handles = load_level_handles(tmp_path, [f"tower${ident}"])
    assert [s.remaining_zones for s in handles.stock] == list(range(1, TOTAL_STOCK_LEVELS + 1))
    assert handles.custom_state(ident).remaining_zones == 42


def test_load_level_handles_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_level_handles(tmp_path, [])