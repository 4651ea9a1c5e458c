import pytest

from tictacn.game.errors import BadX, BadY, MoveError, OutOfBounds, WrongTokenCount
from tictacn.ui.prompts import parse_move, prompt


def test_parse_move_converts_to_zero_indexed():
    assert parse_move("1 1", 3) == (0, 0)
    assert parse_move("  3   2 \n", 3) == (2, 1)


@pytest.mark.parametrize(
    "raw, err",
    [
        ("", WrongTokenCount),
        ("1", WrongTokenCount),
        ("1 2 3", WrongTokenCount),
        ("a 1", BadX),
        ("-1 1", BadX),
        ("1 b", BadY),
        ("1 2.5", BadY),
        ("0 1", OutOfBounds),
        ("1 4", OutOfBounds),
        ("4 4", OutOfBounds),
    ],
)
def test_parse_move_rejections(raw, err):
    with pytest.raises(err):
        parse_move(raw, 3)


def test_rejections_have_distinct_messages():
    messages = set()
    for raw in ["1", "a 1", "1 b", "9 9"]:
        with pytest.raises(MoveError) as exc:
            parse_move(raw, 3)
        messages.add(str(exc.value))
    assert len(messages) == 4


def test_prompt_names_player():
    assert prompt("O").startswith("O, your move")
