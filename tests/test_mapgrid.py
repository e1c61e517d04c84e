import pytest

from pushin_boxes.inputs import DirectionInput
from pushin_boxes.mapgrid import (
    ENTITY_SURFACE,
    MAP_COLS,
    MAP_ROWS,
    SPRITE_SIZE,
    MapEntity,
    MapPosition,
    filled_map,
)


def test_filled_map_dimensions_and_content():
    grid = filled_map(MapEntity.F)
    assert len(grid) == MAP_ROWS
    assert all(len(row) == MAP_COLS for row in grid)
    assert all(cell is MapEntity.F for row in grid for cell in row)


def test_filled_map_rows_are_independent():
    grid = filled_map(MapEntity.V)
    grid[0][0] = MapEntity.B
    assert grid[1][0] is MapEntity.V


@pytest.mark.parametrize(
    "entity, name",
    [
        (MapEntity.V, "void"),
        (MapEntity.F, "floor"),
        (MapEntity.Z, "zone"),
        (MapEntity.B, "box"),
        (MapEntity.P, "placed_box"),
    ],
)
def test_image_names(entity, name):
    assert entity.image_name() == name


def test_increment_is_clamped_at_edge():
    position = MapPosition(MAP_COLS - 1, MAP_ROWS - 1)
    position.increment_x()
    position.increment_y()
    assert position == MapPosition(MAP_COLS - 1, MAP_ROWS - 1)


def test_decrement_is_clamped_at_zero():
    position = MapPosition(0, 0)
    position.decrement_x()
    position.decrement_y()
    assert position == MapPosition(0, 0)


@pytest.mark.parametrize(
    "direction, expected",
    [
        (DirectionInput.UP, MapPosition(4, 3)),
        (DirectionInput.DOWN, MapPosition(4, 5)),
        (DirectionInput.LEFT, MapPosition(3, 4)),
        (DirectionInput.RIGHT, MapPosition(5, 4)),
    ],
)
def test_update_position(direction, expected):
    position = MapPosition(4, 4)
    position.update_position(direction)
    assert position == expected


def test_translation_column_step():
    left = MapPosition(2, 3).translation()
    right = MapPosition(3, 3).translation()
    assert right[0] - left[0] == SPRITE_SIZE
    assert right[1] == left[1]


def test_translation_row_step_and_depth():
    upper = MapPosition(0, 2).translation()
    lower = MapPosition(0, 3).translation()
    assert upper[1] - lower[1] == ENTITY_SURFACE
    assert lower[2] == 3.0
    assert upper[2] == 2.0


def test_translation_is_horizontally_centred():
    first = MapPosition(0, 0).translation()
    last = MapPosition(MAP_COLS - 1, 0).translation()
    assert first[0] == -last[0]