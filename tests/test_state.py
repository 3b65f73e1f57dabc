import io

import pytest

from whitequeen.state import (
    BATTLE_TEXT,
    DIALOGUE_TEXT,
    TITLE_MUSIC,
    GameState,
    State,
)
from whitequeen.terminal import Key, clear_screen
from whitequeen.title import EXIT_OPTION, TitleScreen


class _Audio:
    def __init__(self):
        self.played = []
        self.stops = 0

    def play(self, path):
        self.played.append(path)

    def stop(self):
        self.stops += 1


def _game(selected=0, out=None):
    audio = _Audio()
    game = GameState(
        TitleScreen(selected=selected, repeat_delay=0),
        out=out,
        play=audio.play,
        stop=audio.stop,
    )
    return game, audio


def test_starts_on_title_with_music():
    game, audio = _game()
    assert game.current_state is State.TITLE
    assert audio.played == [TITLE_MUSIC]


def test_title_moves_to_dialogue_and_stops_music():
    game, audio = _game()
    game.update(set())
    assert game.current_state is State.DIALOGUE
    assert audio.stops == 1


def test_confirming_exit_leaves_game():
    game, _ = _game(selected=EXIT_OPTION)
    game.update({Key.ENTER})
    assert game.current_state is State.EXIT
    with pytest.raises(SystemExit) as info:
        game.update(set())
    assert info.value.code == 0


def test_enter_toggles_dialogue_and_battle():
    game, _ = _game()
    game.update(set())
    game.update({Key.ENTER})
    assert game.current_state is State.BATTLE
    game.update({Key.ENTER})
    assert game.current_state is State.DIALOGUE


def test_dialogue_waits_without_enter():
    game, _ = _game()
    game.update(set())
    game.update({Key.DOWN, "x"})
    assert game.current_state is State.DIALOGUE


def test_render_dialogue_and_battle():
    game, _ = _game()
    game.switch_state(State.DIALOGUE) if False else None
    game.update(set())
    out = io.StringIO()
    game.render(out)
    assert out.getvalue().endswith(DIALOGUE_TEXT)

    game.update({Key.ENTER})
    out = io.StringIO()
    game.render(out)
    assert out.getvalue().endswith(BATTLE_TEXT)


def test_render_exit_draws_nothing():
    game, _ = _game(selected=EXIT_OPTION)
    game.update({Key.ENTER})
    out = io.StringIO()
    game.render(out)
    assert out.getvalue() == ""


def test_switch_state_clears_screen():
    out = io.StringIO()
    game, _ = _game(out=out)
    game.switch_state(State.BATTLE)
    expected = io.StringIO()
    clear_screen(expected)
    assert game.current_state is State.BATTLE
    assert out.getvalue() == expected.getvalue()