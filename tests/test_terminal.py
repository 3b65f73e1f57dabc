import io

import pytest

from whitequeen.terminal import (
    INVALID_INPUT_MESSAGE,
    Key,
    clear_screen,
    exit_game,
    get_validated_input,
    read_key,
    set_text_color,
)


def test_clear_screen_writes_clear_sequence():
    out = io.StringIO()
    clear_screen(out)
    assert out.getvalue() == "\033[2J\033[H"


def test_bright_cyan_attribute():
    out = io.StringIO()
    set_text_color(11, out)
    assert out.getvalue() == "\033[96;40m"


def test_distinct_attributes_give_distinct_sequences():
    outputs = set()
    for color in range(16):
        out = io.StringIO()
        set_text_color(color, out)
        outputs.add(out.getvalue())
    assert len(outputs) == 16


@pytest.mark.parametrize("color", [-1, 256])
def test_colour_out_of_range(color):
    with pytest.raises(ValueError):
        set_text_color(color, io.StringIO())


def test_exit_game_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        exit_game()
    assert info.value.code == 0


def test_validated_input_retries_until_in_range():
    out = io.StringIO()
    value = get_validated_input(1, 5, io.StringIO("abc\n7\n3\n"), out)
    assert value == 3
    assert out.getvalue() == INVALID_INPUT_MESSAGE * 2


def test_validated_input_skips_blank_lines_and_extra_tokens():
    out = io.StringIO()
    value = get_validated_input(1, 5, io.StringIO("\n   \n4 more\n"), out)
    assert value == 4
    assert out.getvalue() == ""


def test_validated_input_accepts_bounds():
    assert get_validated_input(2, 9, io.StringIO("9\n"), io.StringIO()) == 9
    assert get_validated_input(2, 9, io.StringIO("2\n"), io.StringIO()) == 2


def test_validated_input_raises_at_end_of_input():
    with pytest.raises(EOFError):
        get_validated_input(1, 3, io.StringIO("0\n"), io.StringIO())


@pytest.mark.parametrize(
    "data, expected",
    [
        ("\x1b[A", Key.UP),
        ("\x1b[B", Key.DOWN),
        ("\x1bOA", Key.UP),
        ("\r", Key.ENTER),
        ("\n", Key.ENTER),
        ("\x1b[C", Key.OTHER),
        ("q", "q"),
    ],
)
def test_read_key_decodes(data, expected):
    assert read_key(io.StringIO(data)) == expected


def test_read_key_reads_one_key_at_a_time():
    stream = io.StringIO("1\x1b[B\r")
    assert [read_key(stream) for _ in range(3)] == ["1", Key.DOWN, Key.ENTER]


def test_read_key_at_end_raises():
    with pytest.raises(EOFError):
        read_key(io.StringIO(""))