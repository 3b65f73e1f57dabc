"""A small turn-based fight drawn with terminal escape sequences."""

from __future__ import annotations

import argparse
import enum
import sys
from dataclasses import dataclass, field

from whitequeen.terminal import Key, clear_screen, read_key

COLOR_RESET = "\033[0m"
COLOR_RED = "\033[31m"
COLOR_GREEN = "\033[32m"
COLOR_BLUE = "\033[34m"
COLOR_YELLOW = "\033[33m"
COLOR_CYAN = "\033[36m"

BAR_WIDTH = 20
HEAL_AMOUNT = 20

HERO_ART = ["  O ", " /|\\", " / \\"]
GOBLIN_ART = [" ( ) ", " ) ( ", "|   |"]

PROMPT = "What will you do?\n1. Attack\n2. Defend\n3. Use Item"
INVALID_CHOICE = "Invalid choice!"


def _move(row: int, column: int) -> str:
    return f"\033[{row};{column}H"


@dataclass
class CharacterSprite:
    art: list[str]
    name: str
    color: str

    def render(self, x: int, y: int) -> str:
        """Return the sprite drawn with its top-left corner at column x, row y."""
        return "".join(
            f"{_move(y + offset, x)}{self.color}{line}{COLOR_RESET}"
            for offset, line in enumerate(self.art)
        )


@dataclass
class TextBox:
    width: int
    height: int
    x: int
    y: int

    def draw(self) -> str:
        """Return the empty bordered box."""
        edge = "+" + "-" * (self.width - 2) + "+"
        inner = "|" + " " * (self.width - 2) + "|"
        rows = [_move(self.y, self.x) + edge]
        rows.extend(_move(self.y + row, self.x) + inner for row in range(1, self.height - 1))
        rows.append(_move(self.y + self.height - 1, self.x) + edge)
        return "".join(rows)

    def render_text(self, text: str) -> str:
        """Return text placed inside the box, wrapped and cut to fit."""
        line = 1
        column = 0
        parts = [_move(self.y + line, self.x + 2)]
        for char in text:
            if char == "\n" or column >= self.width - 4:
                line += 1
                column = 0
                if line >= self.height - 1:
                    break
                parts.append(_move(self.y + line, self.x + 2))
                if char == "\n":
                    continue
            parts.append(char)
            column += 1
        return "".join(parts)


@dataclass
class RPGCharacter:
    name: str
    max_hp: int
    attack: int
    hp: int = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.hp is None:
            self.hp = self.max_hp

    def render_status(self, x: int, y: int) -> str:
        """Return the name, a coloured health bar and the hit points."""
        percent = self.hp / self.max_hp
        bars = int(BAR_WIDTH * percent)
        if percent > 0.6:
            colour = COLOR_GREEN
        elif percent > 0.3:
            colour = COLOR_YELLOW
        else:
            colour = COLOR_RED
        bar = "".join(colour + "=" if i < bars else " " for i in range(BAR_WIDTH))
        return f"{_move(y, x)}{self.name}: [{bar}{COLOR_RESET}] {self.hp}/{self.max_hp}"


class Outcome(enum.Enum):
    VICTORY = enum.auto()
    DEFEAT = enum.auto()


@dataclass
class Battle:
    """The player and one enemy taking turns, the player first."""

    player: RPGCharacter = field(default_factory=lambda: RPGCharacter("Hero", 100, 15))
    enemy: RPGCharacter = field(default_factory=lambda: RPGCharacter("Goblin", 60, 10))
    turn: int = 0

    @property
    def is_player_turn(self) -> bool:
        return self.turn % 2 == 0

    def player_turn(self, choice: str) -> str:
        """Carry out the player's menu choice and return what happened."""
        if choice == "1":
            damage = self.player.attack
            self.enemy.hp -= damage
            message = f"You attack the {self.enemy.name} for {damage} damage!"
        elif choice == "2":
            message = "You raise your guard!\n(Defense increased next turn)"
        elif choice == "3":
            message = f"You use a healing herb!\nHP + {HEAL_AMOUNT}"
            self.player.hp = min(self.player.hp + HEAL_AMOUNT, self.player.max_hp)
        else:
            return INVALID_CHOICE
        self.turn += 1
        return message

    def enemy_turn(self) -> str:
        """Let the enemy attack and return what happened."""
        damage = self.enemy.attack
        self.player.hp -= damage
        self.turn += 1
        return f"{self.enemy.name} attacks you for {damage} damage!"

    def outcome(self) -> Outcome | None:
        """Return how the fight ended, or None while it goes on."""
        if self.enemy.hp <= 0:
            return Outcome.VICTORY
        if self.player.hp <= 0:
            return Outcome.DEFEAT
        return None


def _outcome_text(battle: Battle, result: Outcome) -> str:
    if result is Outcome.VICTORY:
        return f"You defeated the {battle.enemy.name}!\nPress any key to continue..."
    return "You were defeated...\nGame Over"


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        prog="whitequeen-combat", description="Fight a goblin in the terminal."
    ).parse_args(argv)

    out = sys.stdout
    battle = Battle()
    hero = CharacterSprite(HERO_ART, battle.player.name, COLOR_BLUE)
    goblin = CharacterSprite(GOBLIN_ART, battle.enemy.name, COLOR_RED)
    box = TextBox(60, 10, 5, 15)

    while True:
        clear_screen(out)
        out.write("=== DRAGON REALM ADVENTURE ===\n")
        out.write(hero.render(10, 3))
        out.write(goblin.render(50, 3))
        out.write(battle.player.render_status(5, 8))
        out.write(battle.enemy.render_status(45, 8))
        out.write(box.draw())

        if battle.is_player_turn:
            out.write(box.render_text(PROMPT))
            out.write(_move(box.y + box.height - 1, box.x) + "> ")
            out.flush()
            key = read_key()
            message = battle.player_turn(key if isinstance(key, str) else "")
        else:
            message = battle.enemy_turn()
        out.write(box.draw() + box.render_text(message))

        result = battle.outcome()
        if result is not None:
            out.write(box.draw() + box.render_text(_outcome_text(battle, result)))
        out.flush()
        read_key()
        if result is not None:
            out.write(COLOR_RESET + "\n")
            return 0


if __name__ == "__main__" and Key:
    raise SystemExit(main())