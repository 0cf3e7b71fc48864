"""Console game loop: setup, turns, gifts and round statistics."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Protocol, TextIO

from .player import Gift, Orientation, Player, gift_for_roll, gift_ship_for_roll
from .starship import Starship

RULE = "--------------------------------------------------"

_GRID_SIZES: dict[int, tuple[int, int]] = {1: (5, 8), 2: (8, 10), 3: (10, 12)}

_PATTERN_PROMPT = (
    "Enter the pattern of your ships: 'H' for horizontal, "
    "'V' for Vertical and 'D' for Diagonal: \n"
)


class _Roller(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class Console:
    """Whitespace-separated token input and line output over text streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._tokens: list[str] = []

    def ask(self, prompt: str) -> str:
        """Write ``prompt`` and return the next whitespace-separated token.

        Raises EOFError when the input runs out.
        """
        if prompt:
            self._out.write(prompt)
            self._out.flush()
        while not self._tokens:
            line = self._in.readline()
            if not line:
                raise EOFError("input ended")
            self._tokens.extend(reversed(line.split()))
        return self._tokens.pop()

    def ask_int(self, prompt: str) -> int:
        """Ask until the next token is a whole number and return it."""
        while True:
            token = self.ask(prompt)
            try:
                return int(token)
            except ValueError:
                self.say("Please enter a whole number.")

    def say(self, text: str) -> None:
        """Write ``text`` followed by a newline."""
        self._out.write(text + "\n")
        self._out.flush()


def grid_size_for_level(level: int) -> tuple[int, int]:
    """Return (rows, cols) of the board for a level of 1, 2 or 3."""
    try:
        return _GRID_SIZES[level]
    except KeyError:
        raise ValueError(f"level must be 1, 2 or 3, got {level}") from None


def parse_row(letter: str) -> int:
    """Turn a row letter into a 1-based row number ('a' is 1, case ignored)."""
    if len(letter) != 1:
        raise ValueError(f"row must be a single letter, got {letter!r}")
    return ord(letter.lower()) - ord("a") + 1


def _ask_cell(console: Console, prompt: str) -> tuple[int, int]:
    token = console.ask(prompt)
    row = parse_row(token[0])
    rest = token[1:]
    col = int(rest) if rest else console.ask_int("")
    return row, col


def _show_grid(console: Console, text: str) -> None:
    console.say(text.rstrip("\n") + "\n")


def allowed_shots(attacker: Player, defender: Player) -> int:
    """Return how many shots ``attacker`` may fire this turn (at least one)."""
    shots = attacker.maximum_shots() + attacker.bonus_shots - defender.shot_penalty
    if attacker.shot_cap is not None:
        shots = attacker.shot_cap
    return max(shots, 1)


def place_fleet(player: Player, console: Console) -> None:
    """Ask for a placement of every ship in the fleet until each one fits."""
    count = 0
    for index, ship in enumerate(player.fleet, start=1):
        while True:
            pattern = console.ask(_PATTERN_PROMPT)
            while pattern not in {o.value for o in Orientation}:
                console.say("Invalid pattern!!")
                pattern = console.ask(_PATTERN_PROMPT)
            try:
                row, col = _ask_cell(
                    console,
                    "Enter the start row[character] and column[int] separated by "
                    f"a space to place ship {index} :\n",
                )
            except ValueError:
                console.say("Invalid coordinates. Try again.")
                continue
            try:
                player.deploy_ship(ship, row, col, pattern)
            except ValueError as exc:
                console.say(str(exc))
                continue
            console.say("Ship placed successfully.")
            count += 1
            break
    console.say(f"A total of {count} ships have placed successfully on the grid.")


def place_gift_ship(player: Player, ship: Starship, console: Console) -> None:
    """Ask for a placement of a gift ship until it fits, then add it to the fleet."""
    while True:
        pattern = console.ask("GIFT SHIP: Enter pattern (H, V, D): ")
        try:
            row, col = _ask_cell(console, "GIFT SHIP: Enter start row[char] and column[int]: ")
        except ValueError:
            console.say("Invalid coordinates. Try again.")
            continue
        if not player.valid_coords(row, col):
            console.say("Invalid coordinates. Try again.")
            continue
        try:
            player.add_gift_ship(ship, row, col, pattern)
        except ValueError:
            console.say("Invalid placement. Ship would go out of bounds or overlap.")
            console.say("Could not place ship. Try again.")
            continue
        console.say("Ship placed successfully.")
        console.say("Gift ship placed successfully!")
        return


def take_shot(attacker: Player, defender: Player, console: Console) -> bool:
    """Ask for a new target cell and fire at it; return True on a hit."""
    while True:
        try:
            row, col = _ask_cell(console, "Enter row and column of the shot: ")
        except ValueError:
            console.say("Invalid coordinates. Try again.")
            continue
        if not defender.valid_coords(row, col):
            console.say("Invalid coordinates. Try again.")
            continue
        if attacker.already_shot(row, col):
            console.say("You have already shot at this cell. Choose a different one.")
            continue
        break
    hit = attacker.fire_at(defender, row, col)
    if hit and defender.last_sunk is not None:
        console.say(f"SUNK SHIP of size {defender.last_sunk.size} (will mark it):")
    return hit


def receive_gift(
    attacker: Player, defender: Player, console: Console, rng: _Roller
) -> Gift:
    """Roll a gift for ``attacker``, apply it and return it."""
    gift = gift_for_roll(rng.randint(1, 100))
    console.say(gift.description)
    if gift is Gift.SECRET_SHIP:
        ship = gift_ship_for_roll(rng.randint(1, 100))
        console.say(f"Random gift ship is of size {ship.size}.")
        choice = console.ask("Do you want to try placing it? (y/n): ")
        if choice[0].lower() == "y":
            place_gift_ship(attacker, ship, console)
        else:
            console.say("Gift ship skipped.")
    else:
        attacker.apply_gift(gift, defender)
    return gift


def round_stats(first: Player, second: Player) -> str:
    """Return the statistics block shown after each turn."""
    lines = ["---------------- Stats ----------------"]
    for player in (first, second):
        lines += [
            f"Player: {player.name}",
            f"Total Shots: {player.total_shots}",
            f"Hits: {player.total_hits}",
            f"Misses: {player.total_misses}",
            f"Lost Cells: {player.lost_cells()}",
            f"Lost Star Destroyer: {player.lost_ships_of_size(5)}",
            f"Lost Mon Calamari Cruiser: {player.lost_ships_of_size(4)}",
            f"Lost X-Wing Squadron: {player.lost_ships_of_size(3)}",
            f"Lost TIE Fighter: {player.lost_ships_of_size(1)}",
            "",
        ]
    lines.append("--------------------------------------\n")
    return "\n".join(lines)


def take_turn(attacker: Player, defender: Player, console: Console, rng: _Roller) -> int:
    """Play one turn for ``attacker`` and return the number of hits."""
    console.say(f"===> Entering the turn for {attacker.name}")
    console.say("Here is your attack grid:")
    _show_grid(console, attacker.attack_grid.render())

    max_shots = allowed_shots(attacker, defender)
    requested = console.ask_int(f"{attacker.name} shoots now (can shoot {max_shots}): ")
    while not 1 <= requested <= max_shots:
        requested = console.ask_int(
            f"Invalid number of shots. Please enter between 1 and {max_shots}: "
        )

    hits = sum(1 for _ in range(requested) if take_shot(attacker, defender, console))
    misses = requested - hits

    attacker.total_shots += requested
    attacker.total_hits += hits
    attacker.total_misses += misses

    console.say(RULE)
    console.say(f"Total Shots: {requested}")
    console.say(f"Hits: {hits}")
    console.say(f"Misses: {misses}")
    console.say(RULE)
    console.say(f"{attacker.name}'s attack grid:")
    _show_grid(console, attacker.attack_grid.render())

    if hits >= 2:
        if rng.randint(1, 100) <= 30:
            console.say(f"{attacker.name} has earned a GIFT!")
            receive_gift(attacker, defender, console, rng)
        else:
            console.say(f"{attacker.name} just missed the gift roll.")

    attacker.reset_shot_modifiers()
    defender.reset_shot_modifiers()

    console.say(round_stats(attacker, defender))
    return hits


def play(console: Console, rng: _Roller) -> Player:
    """Run a whole game and return the winner."""
    console.say("Welcome to THE GALACTIC STAR WARS BATTLE.")
    console.say(RULE)
    first_name = console.ask("Enter player 1 name: ")
    second_name = console.ask("Enter player 2 name: ")

    while True:
        level = console.ask_int("Enter level (1, 2, or 3): ")
        try:
            rows, cols = grid_size_for_level(level)
        except ValueError:
            console.say("Invalid level. Try again.")
            continue
        break
    console.say(f"The grid size is: {rows}x{cols}")

    rebel = Player(first_name, level, rows, cols)
    commander = Player(second_name, level, rows, cols)

    for player in (rebel, commander):
        console.say(f"{player.name}, place your ships:")
        place_fleet(player, console)
        _show_grid(console, player.defense_grid.render())

    console.say(RULE)
    console.say("Battle Begins!")

    while not rebel.has_lost() and not commander.has_lost():
        take_turn(rebel, commander, console, rng)
        if commander.has_lost():
            break
        if rebel.extra_turn:
            console.say(f"{rebel.name} gets a bonus turn!")
            take_turn(rebel, commander, console, rng)
            rebel.extra_turn = False
            if commander.has_lost():
                break

        take_turn(commander, rebel, console, rng)
        if rebel.has_lost():
            break
        if commander.extra_turn:
            console.say(f"{commander.name} gets a bonus turn!")
            take_turn(commander, rebel, console, rng)
            commander.extra_turn = False

    winner = rebel if commander.has_lost() else commander
    console.say(RULE)
    console.say(f"{winner.name} wins the battle! ")
    console.say("Game Over.")
    console.say(RULE)
    return winner


def main(argv: list[str] | None = None) -> int:
    """Play a two-player game on standard input and output."""
    parser = argparse.ArgumentParser(description="Two-player galactic fleet battle.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the gift rolls")
    args = parser.parse_args(argv)
    console = Console()
    try:
        play(console, random.Random(args.seed))
    except EOFError:
        console.say("")
        return 1
    return 0