import pytest

from tictacn.core.board import Board, BoardParseError


def test_new_board_is_empty():
    b = Board.new(4)
    assert b.dimension == 4
    assert b.cells == [None] * 16
    assert b.empty_count() == 16
    assert not b.is_full()


def test_default_board_is_3x3():
    assert Board() == Board.new(3)


def test_zero_dimension_board():
    b = Board.new(0)
    assert b.dimension == 0
    assert b.is_full()
    assert b.render() == ""
    assert b.to_compact_string() == ""


def test_parse_empty_board_matches_new():
    assert Board.parse("NNN,NNN,NNN") == Board.new(3)
    assert Board.parse("___\n___\n___") == Board.new(3)


def test_parse_is_case_insensitive_and_skips_separators():
    b = Board.parse("xOn | oXn | Onx")
    assert b == Board.parse("XONOXNONX")
    assert b.get(0, 0) == "X"
    assert b.get(1, 0) == "O"
    assert b.get(2, 0) is None
    assert b.get(0, 2) == "O"


def test_parse_skips_characters_that_only_look_like_marks():
    # "\u0149" upper-cases to "\u02bcN"; it is not an N
    assert Board.parse("\u0149") == Board.new(0)
    assert Board.parse("X\u0149\u00d7\uff2f") == Board.parse("X")
    assert Board.parse("XN\u0149OX") == Board.parse("XNOX")


def test_parse_rejects_non_square_count():
    with pytest.raises(BoardParseError):
        Board.parse("XX")
    with pytest.raises(ValueError):
        Board.parse("XXX,OOO,NN")


def test_constructor_rejects_non_square_count():
    with pytest.raises(BoardParseError):
        Board([None] * 5)


def test_row_major_indexing():
    b = Board.new(3)
    b.set(2, 1, "O")
    assert b.cells[2 + 1 * 3] == "O"
    assert b.get(2, 1) == "O"
    assert b.get(1, 2) is None


def test_set_refuses_occupied_cell():
    b = Board.parse("X__,___,___")
    with pytest.raises(ValueError):
        b.set(0, 0, "O")
    assert b.get(0, 0) == "X"


def test_set_refuses_non_player_mark():
    b = Board.new(2)
    with pytest.raises(ValueError):
        b.set(0, 0, None)  # type: ignore[arg-type]


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_out_of_range_access_raises(x, y):
    b = Board.new(3)
    with pytest.raises(IndexError):
        b.get(x, y)
    with pytest.raises(IndexError):
        b.set(x, y, "X")


def test_compact_string():
    assert Board.parse("XXX,NNN,NNN").to_compact_string() == "XXX______"


def test_compact_string_parses_back():
    b = Board.parse("XO_,_X_,O__")
    assert Board.parse(b.to_compact_string()) == b


def test_render_is_bracketed_rows():
    b = Board.parse("XO_,___,__X")
    assert b.render() == "[X][O][_]\n[_][_][_]\n[_][_][X]\n"
    assert str(b) == b.render()
