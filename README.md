# starbattle

Two players take turns firing at each other's hidden fleets in the terminal.
The fleets are made of starships. The last player with a ship still flying wins.

## Installing

```
pip install .
```

## Playing

```
starbattle
```

To make the gift rolls repeatable, pass a seed:

```
starbattle --seed 42
```

The game asks for the two players' names and a level:

| Level | Grid    | Fleet                                                     |
|-------|---------|-----------------------------------------------------------|
| 1     | 5 x 8   | 1 Star Destroyer, 1 Mon Calamari Cruiser, 1 X-Wing, 2 TIE |
| 2     | 8 x 10  | 2 of each large ship, 4 TIE Fighters                      |
| 3     | 10 x 12 | 4 Star Destroyers, 3 Cruisers, 2 X-Wings, 4 TIE Fighters  |

Each player then places their ships. For each ship you choose a pattern:
`H` (horizontal), `V` (vertical) or `D` (diagonal, down and to the right).
You then give a start cell as a row letter and a column number, for example
`b 3` or `b3`. Row letters are not case-sensitive. A ship must lie inside the
grid and must not overlap another ship. If it does not fit, you are asked again.

Ship sizes are 5 (Star Destroyer), 4 (Mon Calamari Cruiser), 3 (X-Wing Squadron)
and 1 (TIE Fighter). A ship sinks after 4, 3, 2 and 1 hits respectively.
On each turn you may fire as many shots as the size of your largest ship still
in play, changed by any gifts from the round before, and never fewer than one.
You cannot fire twice at the same cell. On your attack grid a miss is shown as
`0`. When you sink a ship, its whole outline is shown with its size digit.

A turn with two or more hits has a 30% chance to earn a gift:

- a secret extra ship, which you may place on your grid or skip
- a bonus shot next round
- one shot fewer for your opponent
- a one-shot cap on your opponent
- a full bonus turn

After every turn the game shows statistics for both players: shots, hits,
misses, lost cells and lost ships of each type.

If the input ends before the game is over, `starbattle` exits with status 1.

## Using the pieces

The game logic can be used without the console:

```python
from starbattle.player import Player, Orientation

rebel = Player("Rebel", 1, 5, 8)
commander = Player("Commander", 1, 5, 8)
rebel.deploy_ship(rebel.fleet[0], 1, 1, Orientation.HORIZONTAL)
hit = commander.fire_at(rebel, 1, 3)   # True
```

- `starbattle.starship` holds `Starship` and the four ship types
  `StarDestroyer`, `MonCalamariCruiser`, `XWingSquadron` and `TIEFighter`.
- `starbattle.grid.Grid` is a board addressed by 1-based row and column, at most
  12 x 12; `render()` returns it as text.
- `starbattle.player` holds `Player`, `Orientation`, `Gift`, `build_fleet`,
  `ship_cells`, `gift_for_roll` and `gift_ship_for_roll`.
  `Player.deploy_ship` and `Player.fire_at` raise `ValueError` on an invalid
  placement or shot.
- `starbattle.game.play(console, rng)` runs a whole game with any `Console`
  (which can read from and write to any text streams) and any random source
  that has `randint`, and returns the winning `Player`.

## What it does not do

Both players share one terminal, and each player's grid is printed after
placement, so nothing is hidden from the other player. There is no computer
opponent, no network play, and no way to save or resume a game.