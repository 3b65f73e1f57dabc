"""The title screen and its menu."""

from __future__ import annotations

import sys
import time
from collections.abc import Collection
from dataclasses import dataclass
from typing import TextIO

from whitequeen.terminal import Key, clear_screen, set_text_color

MENU_OPTIONS = ("New Game", "Load Game", "Exit")
EXIT_OPTION = MENU_OPTIONS.index("Exit")

ART_COLOR = 11
HINT_COLOR = 14

_WIDTH = 46
_WHITE = (
    "     ██╗    ██╗██╗  ██╗██╗████████╗███████╗",
    "     ██║    ██║██║  ██║██║╚══██╔══╝██╔════╝",
    "     ██║ █╗ ██║███████║██║   ██║   █████╗",
    "     ██║███╗██║██╔══██║██║   ██║   ██╔══╝",
    "     ╚███╔███╔╝██║  ██║██║   ██║   ███████╗",
    "      ╚══╝╚══╝ ╚═╝  ╚═╝╚═╝   ╚═╝   ╚══════╝",
)
_QUEEN = (
    "   ██████╗ ██╗   ██╗███████╗███████╗███╗   ██╗",
    "  ██╔═══██╗██║   ██║██╔════╝██╔════╝████╗  ██║",
    "  ██║   ██║██║   ██║█████╗  █████╗  ██╔██╗ ██║",
    "  ██║   ██║╚██╗ ██╔╝██╔══╝  ██╔══╝  ██║╚██╗██║",
    "  ╚██████╔╝ ╚████╔╝ ███████╗███████╗██║ ╚████║",
    "   ╚═════╝   ╚═══╝  ╚══════╝╚══════╝╚═╝  ╚═══╝",
)


def _build_art() -> str:
    indent = " " * 11
    menu = [
        indent + "┌" + "─" * 22 + "┐",
        *(f"{indent}│{' ' * 7}{option:<15}│" for option in MENU_OPTIONS),
        indent + "└" + "─" * 22 + "┘",
    ]
    rows = [*_WHITE, "", *_QUEEN, "", " " * 14 + " ".join("As it Began"), "", *menu]
    lines = [
        "  ╔" + "═" * _WIDTH + "╗",
        *(f"  ║{row:<{_WIDTH}}║" for row in rows),
        "  ╚" + "═" * _WIDTH + "╝",
    ]
    return "\n" + "\n".join(lines) + "\n    "


TITLE_ART = _build_art()

HINT = "\n           [ ↑ ↓ Select | Enter Confirm ]\n"


@dataclass
class TitleScreen:
    """Title screen with a menu cursor that remembers its position."""

    selected: int = 0
    repeat_delay: float = 0.15

    def render(self, out: TextIO | None = None) -> None:
        """Draw the title art and the key hint."""
        sink = sys.stdout if out is None else out
        clear_screen(sink)
        set_text_color(ART_COLOR, sink)
        sink.write(TITLE_ART + "\n")
        set_text_color(HINT_COLOR, sink)
        sink.write(HINT)
        sink.flush()

    def _pause(self) -> None:
        if self.repeat_delay > 0:
            time.sleep(self.repeat_delay)

    def handle_input(self, keys: Collection[Key | str]) -> bool:
        """Move the cursor for the pressed keys; False when Exit is confirmed."""
        if Key.UP in keys:
            self.selected = (self.selected - 1) % len(MENU_OPTIONS)
            self._pause()
        if Key.DOWN in keys:
            self.selected = (self.selected + 1) % len(MENU_OPTIONS)
            self._pause()
        return not (Key.ENTER in keys and self.selected == EXIT_OPTION)