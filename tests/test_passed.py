import uuid

import pytest

from pushin_boxes.context import GameContext
from pushin_boxes.inputs import ActionInput
from pushin_boxes.level import LevelHandles, create_level
from pushin_boxes.levelstate import Playtest, Stock, editor_state, parse_level_state
from pushin_boxes.mapgrid import MapEntity, MapPosition
from pushin_boxes.savefile import SaveFile, load_save_file
from pushin_boxes.scenes.passed import MAX_NAME_LENGTH, PassedScene, is_name_character
from pushin_boxes.sounds import Sound
from pushin_boxes.states import GameState


def make_ctx(tmp_path, kind=None):
    ctx = GameContext(
        assets_dir=tmp_path,
        save_file=SaveFile(),
        handles=LevelHandles(stock=[editor_state() for _ in range(16)]),
    )
    state = editor_state()
    state[MapPosition(1, 1)] = MapEntity.Z
    ctx.level = create_level(kind or Playtest(state), ctx.save_file, ctx.handles)
    ctx.level.moves = 7
    return ctx


def type_text(scene, ctx, text):
    for character in text:
        scene.on_key(ctx, character)


@pytest.mark.parametrize("character", ["a", "Z", " "])
def test_name_characters_accepted(character):
    assert is_name_character(character)


@pytest.mark.parametrize("character", ["1", "é", "ab", "", "-"])
def test_other_characters_rejected(character):
    assert not is_name_character(character)


def test_typing_builds_name(tmp_path):
    ctx = make_ctx(tmp_path)
    scene = PassedScene()
    scene.on_enter(ctx)
    type_text(scene, ctx, "Hi1")
    scene.on_key(ctx, "space")
    assert scene.level_name == "Hi "
    assert ctx.audio.played == [Sound.MOVE_CHARACTER] * 3


def test_name_is_limited(tmp_path):
    ctx = make_ctx(tmp_path)
    scene = PassedScene()
    type_text(scene, ctx, "a" * (MAX_NAME_LENGTH + 4))
    assert len(scene.level_name) == MAX_NAME_LENGTH


def test_backspace_removes_last(tmp_path):
    ctx = make_ctx(tmp_path)
    scene = PassedScene()
    type_text(scene, ctx, "abc")
    scene.on_key(ctx, "backspace")
    assert scene.level_name == "ab"
    assert ctx.audio.played[-1] is Sound.UNDO_MOVE


def test_enter_with_empty_name_does_nothing(tmp_path):
    ctx = make_ctx(tmp_path)
    scene = PassedScene()
    scene.on_key(ctx, "return")
    assert ctx.take_transition() is None
    assert ctx.save_file.number_custom_levels() == 0


def test_enter_saves_custom_level(tmp_path):
    ctx = make_ctx(tmp_path)
    original = ctx.level.kind.state
    scene = PassedScene()
    type_text(scene, ctx, "My Level")
    scene.on_key(ctx, "return")

    (key, record), = ctx.save_file.ordered_custom_records()
    name, ident = key.split("$")
    assert name == "my level"
    assert record.moves == 7
    level_file = tmp_path / "levels" / "custom" / f"{ident}.lvl"
    assert parse_level_state(level_file.read_text(encoding="utf-8")) == original
    assert ctx.handles.custom_state(uuid.UUID(ident)) == original
    assert key in load_save_file(tmp_path / "game.dat").custom_records
    assert scene.level_name == ""
    assert ctx.take_transition() is GameState.SELECTION_CUSTOM


def test_enter_requires_playtest(tmp_path):
    ctx = make_ctx(tmp_path, Stock(0))
    scene = PassedScene()
    type_text(scene, ctx, "abc")
    with pytest.raises(ValueError):
        scene.on_key(ctx, "return")


def test_cursor_blinks(tmp_path):
    ctx = make_ctx(tmp_path)
    scene = PassedScene()
    scene.on_enter(ctx)
    assert scene.cursor_hidden
    scene.update(ctx, 0.5)
    assert not scene.cursor_hidden
    assert scene.view(ctx)[2].value == "_"
    scene.update(ctx, 0.25)
    assert not scene.cursor_hidden
    scene.update(ctx, 0.25)
    assert scene.cursor_hidden


def test_exit_returns_to_title(tmp_path):
    ctx = make_ctx(tmp_path)
    scene = PassedScene()
    scene.on_action(ctx, ActionInput.EXIT)
    assert ctx.take_transition() is GameState.TITLE


def test_view_shows_typed_name(tmp_path):
    ctx = make_ctx(tmp_path)
    scene = PassedScene()
    type_text(scene, ctx, "Box")
    view = scene.view(ctx)
    assert view[0].value == "Level Passed!"
    assert view[2].label == "Box"