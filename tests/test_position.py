import pytest

from pestle.position import Position

MIXED = "a\rb\nc\r\nd嗨"


def measure_skip(input, pos, n):
    position = Position(input, pos)
    if position.skip(n):
        return position.pos - pos
    return None


def test_new_rejects_inside_code_point():
    heart = "💖"
    with pytest.raises(ValueError):
        Position(heart, 1)
    assert Position(heart, 4).pos == 4


def test_new_rejects_out_of_range():
    with pytest.raises(ValueError):
        Position("ab", 3)
    assert Position("ab", 2).pos == 2


def test_from_start():
    assert Position.from_start("").pos == 0


def test_empty():
    assert Position("", 0).match_string("") is True
    assert Position("", 0).match_string("a") is False


def test_parts():
    input = "asdasdf"
    assert Position(input, 0).match_string("asd") is True
    assert Position(input, 3).match_string("asdf") is True


def test_match_string_advances_only_on_success():
    position = Position.from_start("abc")
    assert position.match_string("ab") is True
    assert position.pos == 2
    assert position.match_string("x") is False
    assert position.pos == 2


@pytest.mark.parametrize(
    "pos, expected",
    [
        (0, (1, 1)),
        (1, (1, 2)),
        (2, (1, 3)),
        (3, (1, 4)),
        (4, (2, 1)),
        (5, (2, 2)),
        (6, (2, 3)),
        (7, (3, 1)),
        (8, (3, 2)),
        (11, (3, 3)),
    ],
)
def test_line_col(pos, expected):
    assert Position(MIXED, pos).line_col() == expected


def test_line_col_after_newline():
    position = Position.from_start("\na")
    assert position.match_string("\na")
    assert position.line_col() == (2, 2)
    assert position.line_of() == "a"


@pytest.mark.parametrize(
    "pos, expected",
    [
        (0, "a\rb\n"),
        (1, "a\rb\n"),
        (2, "a\rb\n"),
        (3, "a\rb\n"),
        (4, "c\r\n"),
        (5, "c\r\n"),
        (6, "c\r\n"),
        (7, "d嗨"),
        (8, "d嗨"),
        (11, "d嗨"),
    ],
)
def test_line_of(pos, expected):
    assert Position(MIXED, pos).line_of() == expected


def test_line_of_empty():
    assert Position("", 0).line_of() == ""


def test_line_of_new_line():
    assert Position("\n", 0).line_of() == "\n"


def test_line_of_between_new_line():
    assert Position("\n\n", 1).line_of() == "\n"


def test_skip_empty():
    assert measure_skip("", 0, 0) == 0
    assert measure_skip("", 0, 1) is None


def test_skip():
    input = "d嗨"
    assert measure_skip(input, 0, 0) == 0
    assert measure_skip(input, 0, 1) == 1
    assert measure_skip(input, 1, 1) == 3


def test_skip_failure_keeps_position():
    position = Position("d嗨", 1)
    assert position.skip(2) is False
    assert position.pos == 1


def test_skip_back():
    position = Position("d嗨x", 5)
    assert position.skip_back(1) is True
    assert position.pos == 4
    assert position.skip_back(1) is True
    assert position.pos == 1
    assert position.skip_back(2) is False
    assert position.pos == 1


def test_skip_until():
    pos = Position.from_start("ab ac")

    test_pos = pos.copy()
    test_pos.skip_until(["a", "b"])
    assert test_pos.pos == 0

    test_pos = pos.copy()
    test_pos.skip_until(["b"])
    assert test_pos.pos == 1

    test_pos = pos.copy()
    test_pos.skip_until(["ab"])
    assert test_pos.pos == 0

    test_pos = pos.copy()
    test_pos.skip_until(["ac", "z"])
    assert test_pos.pos == 3

    test_pos = pos.copy()
    assert test_pos.skip_until(["z"]) is False
    assert test_pos.pos == 5


def test_copy_is_independent():
    start = Position.from_start("abc")
    moved = start.copy()
    assert moved.skip(2)
    assert start.pos == 0
    assert moved.pos == 2


def test_match_range():
    input = "b"
    assert Position(input, 0).match_range("a", "c") is True
    assert Position(input, 0).match_range("b", "b") is True
    assert Position(input, 0).match_range("a", "a") is False
    assert Position(input, 0).match_range("c", "c") is False
    assert Position(input, 0).match_range("a", "嗨") is True


def test_match_range_multibyte_advance():
    position = Position.from_start("嗨")
    assert position.match_range("a", "\U0010ffff")
    assert position.pos == 3


def test_match_insensitive():
    input = "AsdASdF"
    assert Position(input, 0).match_insensitive("asd") is True
    assert Position(input, 3).match_insensitive("asdf") is True


def test_match_insensitive_failure():
    position = Position.from_start("abc")
    assert position.match_insensitive("abd") is False
    assert position.pos == 0
    assert position.match_insensitive("abcd") is False


def test_match_char_by():
    position = Position.from_start("嗨a")
    assert position.match_char_by(lambda c: c == "a") is False
    assert position.pos == 0
    assert position.match_char_by(lambda c: c == "嗨") is True
    assert position.pos == 3
    assert position.match_char_by(str.isalpha) is True
    assert position.match_char_by(lambda c: True) is False


def test_at_start_and_end():
    position = Position.from_start("ab")
    assert position.at_start() is True
    assert position.at_end() is False
    assert position.skip(2)
    assert position.at_start() is False
    assert position.at_end() is True


def test_find_line_bounds():
    position = Position("ab\ncd\nef", 4)
    assert position.find_line_start() == 3
    assert position.find_line_end() == 6


def test_cmp():
    start = Position.from_start("a")
    end = start.copy()
    assert end.skip(1)
    assert start < end
    assert end >= start
    assert not end <= start


def test_cmp_different_inputs():
    pos1 = Position.from_start("a")
    pos2 = Position.from_start("b")
    with pytest.raises(ValueError):
        pos1 < pos2
    assert (pos1 == pos2) is False
    assert pos1 <= pos1.copy()


def test_span_from_different_inputs():
    pos1 = Position.from_start("a")
    pos2 = Position.from_start("b")
    with pytest.raises(ValueError):
        pos1.span(pos2)
    assert pos1.pos == 0


def test_hash():
    start = Position.from_start("a")
    positions = {start}
    assert start.copy() in positions
    assert len(positions) == 1


def test_repr():
    assert repr(Position("abc", 2)) == "Position(pos=2)"