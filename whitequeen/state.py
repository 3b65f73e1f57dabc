"""The top-level game state machine."""

from __future__ import annotations

import enum
import sys
from collections.abc import Callable, Collection
from typing import TextIO

from whitequeen.audio import play_music, stop_music
from whitequeen.terminal import Key, clear_screen, exit_game, set_text_color
from whitequeen.title import TitleScreen

TITLE_MUSIC = "assets/audio/music/title.wav"
DIALOGUE_TEXT = "[DIALOGUE PLACEHOLDER - PRESS ENTER TO CONTINUE]\n"
BATTLE_TEXT = "[BATTLE PLACEHOLDER - PRESS ENTER TO FINISH]\n"
DIALOGUE_COLOR = 15
BATTLE_COLOR = 12


class State(enum.Enum):
    TITLE = enum.auto()
    DIALOGUE = enum.auto()
    BATTLE = enum.auto()
    EXIT = enum.auto()


class GameState:
    """Moves between the title, dialogue and battle screens."""

    def __init__(
        self,
        title_screen: TitleScreen | None = None,
        *,
        out: TextIO | None = None,
        play: Callable[[str], object] = play_music,
        stop: Callable[[], object] = stop_music,
    ) -> None:
        self.title_screen = TitleScreen() if title_screen is None else title_screen
        self.current_state = State.TITLE
        self._out = out
        self._stop_music = stop
        play(TITLE_MUSIC)

    def update(self, keys: Collection[Key | str]) -> None:
        """Advance the state for the keys held this frame."""
        if self.current_state is State.TITLE:
            if not self.title_screen.handle_input(keys):
                self.current_state = State.EXIT
            else:
                self.current_state = State.DIALOGUE
                self._stop_music()
        elif self.current_state is State.DIALOGUE:
            if Key.ENTER in keys:
                self.current_state = State.BATTLE
        elif self.current_state is State.BATTLE:
            if Key.ENTER in keys:
                self.current_state = State.DIALOGUE
        else:
            exit_game()

    def render(self, out: TextIO | None = None) -> None:
        """Draw the screen for the current state."""
        sink = sys.stdout if out is None else out
        if self.current_state is State.TITLE:
            self.title_screen.render(sink)
        elif self.current_state is State.DIALOGUE:
            clear_screen(sink)
            set_text_color(DIALOGUE_COLOR, sink)
            sink.write(DIALOGUE_TEXT)
        elif self.current_state is State.BATTLE:
            clear_screen(sink)
            set_text_color(BATTLE_COLOR, sink)
            sink.write(BATTLE_TEXT)

    def switch_state(self, new_state: State) -> None:
        """Jump straight to new_state and clear the screen."""
        self.current_state = new_state
        clear_screen(self._out)