import pytest

from pushin_boxes.inputs import ActionInput, DirectionInput, key_to_input


@pytest.mark.parametrize(
    "key, expected",
    [
        ("up", DirectionInput.UP),
        ("down", DirectionInput.DOWN),
        ("left", DirectionInput.LEFT),
        ("right", DirectionInput.RIGHT),
    ],
)
def test_arrow_keys_map_to_directions(key, expected):
    assert key_to_input(key) is expected


@pytest.mark.parametrize(
    "key, expected",
    [
        ("z", ActionInput.UNDO),
        ("f5", ActionInput.RELOAD),
        ("escape", ActionInput.EXIT),
        ("space", ActionInput.SELECT),
        ("return", ActionInput.TOGGLE),
        ("delete", ActionInput.DELETE),
    ],
)
def test_action_keys(key, expected):
    assert key_to_input(key) is expected


def test_key_names_are_case_insensitive():
    assert key_to_input("Z") is ActionInput.UNDO


@pytest.mark.parametrize("key", ["a", "x", "f1", "tab", ""])
def test_unbound_keys_give_none(key):
    assert key_to_input(key) is None


def test_every_action_has_a_key():
    bound = {key_to_input(k) for k in ["z", "f5", "escape", "space", "return", "delete"]}
    assert bound == set(ActionInput)