# whitequeen

A small role-playing game for the terminal. It has a turn-based fight
against a goblin, drawn with ANSI escape codes, and a state machine that
moves between a title screen, a dialogue screen and a battle screen.

## Installing

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## The goblin fight

Start the fight:

```
whitequeen-battle
```

The screen shows the hero and the goblin, a health bar for each, and a
text box. On your turn, press a key:

- `1` attacks the goblin for your attack value (15).
- `2` raises your guard.
- `3` uses a healing herb, which restores 20 HP but never goes past your
  maximum of 100.

Any other key is an invalid choice, and your turn comes round again.
After each turn the game waits for a key press. After your turn the
goblin attacks for 10. The fight ends when the goblin or you reach 0 HP.

## Using it as a library

- `whitequeen.combat`: `CharacterSprite`, `TextBox`, `RPGCharacter` and
  `Battle`. The drawing methods (`CharacterSprite.render`, `TextBox.draw`,
  `TextBox.render_text`, `RPGCharacter.render_status`) return strings of
  escape sequences and text. `Battle.player_turn`, `Battle.enemy_turn` and
  `Battle.outcome` play the fight without any terminal.
- `whitequeen.state`: `State` and `GameState`. `GameState.update` takes the
  keys held in one frame and `GameState.render` writes the current screen
  to a stream. Choosing **Exit** on the title screen moves to
  `State.EXIT`; any other confirmation leads to dialogue, and Enter then
  switches between dialogue and battle. Creating a `GameState` starts the
  title music, `assets/audio/music/title.wav`.
- `whitequeen.title`: `TitleScreen`, with its menu cursor and art.
- `whitequeen.audio`: `play_music` loops a sound file and `stop_music`
  stops it. On Windows this uses `winsound`; elsewhere it uses the first
  of `afplay`, `aplay` or `paplay` found on the system, and `play_music`
  returns `False` if none is.
- `whitequeen.terminal`: `clear_screen`, `set_text_color`, `read_key`,
  `get_validated_input`, `exit_game` and `Key`.

Functions that draw take the stream to write to, and functions that read
input take the keys or stream to read from, so they can be driven from
tests or from your own front end.

## What it does not do

There is no command that starts the title screen. `GameState` has no
frame loop of its own: to play the title, dialogue and battle screens you
call `update` and `render` from a loop you write yourself, passing in the
keys pressed each frame. The dialogue and battle screens show only
placeholder text.