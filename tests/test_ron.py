import math

import pytest

from pushin_boxes.ron import Ident, RonError, Struct, dumps, loads


def test_loads_struct_with_enum_grid():
    text = "(animation_row:0,map:[[V,F],[Z,B]],character_position:(x:4,y:4),remaining_zones:1)"
    assert loads(text) == Struct(
        {
            "animation_row": 0,
            "map": [[Ident("V"), Ident("F")], [Ident("Z"), Ident("B")]],
            "character_position": Struct({"x": 4, "y": 4}),
            "remaining_zones": 1,
        }
    )


def test_compact_document_round_trips_exactly():
    text = '(volume:0.5,stock_records:[(moves:0,time:0.0)],custom_records:{"a$b":(moves:3,time:1.5)})'
    assert dumps(loads(text)) == text


def test_whitespace_comments_and_trailing_commas():
    text = """
    #![enable(implicit_some)]
    // a level
    (
        x: 4, /* nested /* comment */ here */
        y: 4,
    )
    """
    assert loads(text) == Struct({"x": 4, "y": 4})


def test_named_struct_keeps_name():
    value = loads("LevelState(remaining_zones: 2)")
    assert value.name == "LevelState"
    assert value.fields == {"remaining_zones": 2}


def test_scalars():
    assert loads("true") is True
    assert loads("false") is False
    assert loads("None") is None
    assert loads("Some(3)") == 3
    assert loads("-12") == -12
    assert loads("0.5") == 0.5
    assert loads("0x1F") == 31
    assert math.isinf(loads("-inf"))
    assert math.isnan(loads("NaN"))


def test_strings_and_escapes_round_trip():
    original = 'quote " back \\ tab\t line\n'
    assert loads(dumps(original)) == original
    assert loads('"\\u{48}i"') == "Hi"
    assert loads('r#"raw "text""#') == 'raw "text"'


def test_tuples_round_trip():
    assert loads(dumps((1, 2))) == (1, 2)
    assert loads(dumps((1,))) == (1,)
    assert loads("()") == ()


def test_complex_value_round_trip():
    value = {
        "key": Struct({"items": [1, 2.25, "x", Ident("P")], "flag": False}, name="Thing"),
        "other": [None, (3, 4)],
    }
    assert loads(dumps(value)) == value


def test_dumps_float_keeps_decimal_point():
    assert dumps(1.0) == "1.0"
    assert loads(dumps(1.0)) == 1.0


@pytest.mark.parametrize(
    "text",
    [
        "(x:1",
        "[1,2] extra",
        '"abc',
        "(x:1,x:2)",
        "/* open",
        "[1 2]",
        "",
        "@",
        "{(x:1):2}",
    ],
)
def test_invalid_documents_raise(text):
    with pytest.raises(RonError):
        loads(text)


def test_ron_error_is_value_error():
    with pytest.raises(ValueError):
        loads("]")


def test_dumps_rejects_unknown_types():
    with pytest.raises(TypeError):
        dumps(object())