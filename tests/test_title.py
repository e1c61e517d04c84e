import pytest

from pushin_boxes.context import GameContext
from pushin_boxes.inputs import ActionInput, DirectionInput
from pushin_boxes.level import LevelHandles
from pushin_boxes.savefile import SaveFile
from pushin_boxes.scenes.title import (
    EDITOR_ID,
    INSTRUCTIONS_ID,
    OPTIONS_ID,
    PLAY_ID,
    QUIT_ID,
    TitleScene,
    next_button,
)
from pushin_boxes.sounds import Sound
from pushin_boxes.states import GameState
from pushin_boxes.timing import BLINK_ROW, BLINK_ROW_LAST_FRAME_INDEX, FRONT_ROW
from pushin_boxes.ui import Button, Text

ALL_IDS = [PLAY_ID, INSTRUCTIONS_ID, EDITOR_ID, OPTIONS_ID, QUIT_ID]


@pytest.fixture
def ctx(tmp_path):
    return GameContext(assets_dir=tmp_path, save_file=SaveFile(), handles=LevelHandles())


@pytest.fixture
def scene(ctx):
    title = TitleScene()
    title.on_enter(ctx)
    return title


def test_next_button_down_order():
    assert next_button(PLAY_ID, up=False) == INSTRUCTIONS_ID
    assert next_button(QUIT_ID, up=False) == PLAY_ID
    assert next_button(PLAY_ID, up=True) == QUIT_ID


@pytest.mark.parametrize("ident", ALL_IDS)
def test_next_button_up_undoes_down(ident):
    assert next_button(next_button(ident, up=False), up=True) == ident


def test_next_button_cycles():
    current = PLAY_ID
    seen = []
    for _ in ALL_IDS:
        current = next_button(current, up=False)
        seen.append(current)
    assert current == PLAY_ID
    assert sorted(seen) == sorted(ALL_IDS)


def test_next_button_unknown():
    with pytest.raises(ValueError):
        next_button(99, up=False)


def test_play_selected_on_enter(scene):
    assert scene.selected == PLAY_ID
    assert sum(button.selected for button in scene.buttons) == 1


def test_direction_moves_selection(ctx, scene):
    scene.on_direction(ctx, DirectionInput.DOWN)
    assert scene.selected == INSTRUCTIONS_ID
    assert sum(button.selected for button in scene.buttons) == 1
    assert ctx.audio.played == [Sound.MOVE_CHARACTER]


def test_sideways_keeps_selection(ctx, scene):
    scene.on_direction(ctx, DirectionInput.LEFT)
    assert scene.selected == PLAY_ID
    assert ctx.audio.played == [Sound.MOVE_CHARACTER]


@pytest.mark.parametrize(
    "presses, expected",
    [
        (0, GameState.SELECTION_STOCK),
        (1, GameState.INSTRUCTIONS),
        (2, GameState.EDITOR),
        (3, GameState.OPTIONS),
    ],
)
def test_select_transitions(ctx, scene, presses, expected):
    for _ in range(presses):
        scene.on_direction(ctx, DirectionInput.DOWN)
    scene.on_action(ctx, ActionInput.SELECT)
    assert ctx.take_transition() is expected
    assert ctx.audio.played[-1] is Sound.SET_ZONE


def test_select_quit_requests_exit(ctx, scene):
    scene.on_direction(ctx, DirectionInput.UP)
    scene.on_action(ctx, ActionInput.SELECT)
    assert ctx.exit_requested is True
    assert ctx.take_transition() is None


def test_escape_requests_exit(ctx, scene):
    scene.on_action(ctx, ActionInput.EXIT)
    assert ctx.exit_requested is True
    assert ctx.audio.played == [Sound.PUSH_BOX]


def test_character_blinks_and_returns_front(ctx, scene):
    scene.update(ctx, 3.0)
    assert scene.animation.row == BLINK_ROW
    for _ in range(3):
        scene.update(ctx, 0.25)
    assert scene.sprite_index == BLINK_ROW_LAST_FRAME_INDEX
    scene.update(ctx, 0.25)
    assert scene.animation.row == FRONT_ROW
    assert scene.sprite_index == scene.animation.sprite_index()


def test_view_lists_title_and_buttons(ctx, scene):
    elements = scene.view(ctx)
    assert isinstance(elements[0], Text)
    assert elements[0].value == "Pushin'\nBoxes"
    labels = [e.label for e in elements if isinstance(e, Button)]
    assert labels == ["Play", "Instructions", "Editor", "Options", "Quit"]