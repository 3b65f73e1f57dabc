"""Console helpers: clearing, colours, validated number input and key reading."""

from __future__ import annotations

import enum
import os
import re
import sys
from typing import Callable, TextIO

CLEAR_SEQUENCE = "\033[2J\033[H"
INVALID_INPUT_MESSAGE = "Invalid input. Try again: "

_INTEGER = re.compile(r"[+-]?\d+")
# Console attribute colour index (blue, green, red bits) to ANSI index (red, green, blue bits).
_ANSI_ORDER = (0, 4, 2, 6, 1, 5, 3, 7)


class Key(enum.Enum):
    """Special keys recognised by the game; ordinary keys are plain strings."""

    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    OTHER = "other"


def clear_screen(out: TextIO | None = None) -> None:
    """Clear the terminal and move the cursor to the top-left corner."""
    sink = out or sys.stdout
    sink.write(CLEAR_SEQUENCE)
    sink.flush()


def set_text_color(color: int, out: TextIO | None = None) -> None:
    """Set text colour from a console attribute byte (low nibble text, high nibble background)."""
    if not 0 <= color <= 0xFF:
        raise ValueError(f"colour attribute must be between 0 and 255, got {color}")
    foreground = (90 if color & 0x08 else 30) + _ANSI_ORDER[color & 0x07]
    background = (100 if color & 0x80 else 40) + _ANSI_ORDER[(color >> 4) & 0x07]
    sink = out or sys.stdout
    sink.write(f"\033[{foreground};{background}m")
    sink.flush()


def exit_game() -> None:
    """Leave the game with a successful exit status."""
    sys.exit(0)


def get_validated_input(
    minimum: int,
    maximum: int,
    stream: TextIO | None = None,
    out: TextIO | None = None,
) -> int:
    """Read lines until one starts with an integer in [minimum, maximum] and return it."""
    sink = out or sys.stdout
    for line in stream or sys.stdin:
        tokens = line.split()
        if not tokens:
            continue
        match = _INTEGER.match(tokens[0])
        if match and minimum <= int(match.group()) <= maximum:
            return int(match.group())
        sink.write(INVALID_INPUT_MESSAGE)
        sink.flush()
    raise EOFError("input ended before a valid number was entered")


def _decode_key(read: Callable[[int], str]) -> Key | str:
    char = read(1)
    if not char:
        raise EOFError("no more keys to read")
    if char in ("\r", "\n"):
        return Key.ENTER
    if char != "\x1b":
        return char
    if read(1) not in ("[", "O"):
        return Key.OTHER
    return {"A": Key.UP, "B": Key.DOWN}.get(read(1), Key.OTHER)


def _read_console_key() -> Key | str:
    if sys.platform == "win32":
        import msvcrt

        char = msvcrt.getwch()
        if char in ("\x00", "\xe0"):
            return {"H": Key.UP, "P": Key.DOWN}.get(msvcrt.getwch(), Key.OTHER)
        return Key.ENTER if char == "\r" else char

    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return _decode_key(lambda size: os.read(fd, size).decode(errors="replace"))
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def read_key(stream: TextIO | None = None) -> Key | str:
    """Read one key press, waiting for it; arrows and Enter come back as Key members."""
    if stream is not None:
        return _decode_key(stream.read)
    return _read_console_key()