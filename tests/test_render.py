from tictacn.core.board import Board
from tictacn.ui.colors import REVERSE
from tictacn.ui.render import format_board, render


def test_format_board_plain():
    text = format_board(Board.parse("X__,_O_,___"), color=False)
    rows = text.splitlines()
    assert rows[0].split() == ["1", "2", "3"]
    assert rows[1] == "1 [X][_][_]"
    assert rows[2] == "2 [_][O][_]"
    assert rows[3] == "3 [_][_][_]"


def test_format_board_highlights_line():
    b = Board.parse("XXX,OO_,___")
    res = b.evaluate(3)
    text = format_board(b, highlight=res.line, color=True)
    assert text.count(REVERSE) == 3


def test_render_emits_board_and_status():
    out = []
    render(Board.new(2), status="O to move", color=False, emit=out.append)
    assert out[-1] == "O to move"
    assert "[_][_]" in out[0]
