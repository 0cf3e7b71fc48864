"""Players, their fleets and the shooting and gift rules between them."""

from __future__ import annotations

from enum import Enum

from .grid import EMPTY, Grid
from .starship import (
    MonCalamariCruiser,
    StarDestroyer,
    Starship,
    TIEFighter,
    XWingSquadron,
)

MISS_MARK = "0"
HIT_MARK = EMPTY

_FLEETS: dict[int, tuple[tuple[type[Starship], int], ...]] = {
    1: ((StarDestroyer, 1), (MonCalamariCruiser, 1), (XWingSquadron, 1), (TIEFighter, 2)),
    2: ((StarDestroyer, 2), (MonCalamariCruiser, 2), (XWingSquadron, 2), (TIEFighter, 4)),
    3: ((StarDestroyer, 4), (MonCalamariCruiser, 3), (XWingSquadron, 2), (TIEFighter, 4)),
}

_SUMMARY_ORDER: tuple[type[Starship], ...] = (
    StarDestroyer,
    MonCalamariCruiser,
    XWingSquadron,
    TIEFighter,
)


class Orientation(Enum):
    """Direction in which a ship extends from its start cell."""

    HORIZONTAL = "H"
    VERTICAL = "V"
    DIAGONAL = "D"


class Gift(Enum):
    """Rewards a player may earn after a good round."""

    SECRET_SHIP = "Gift: You can add a secret battleship!"
    BONUS_SHOT = "Gift: Bonus Shot Next Round!"
    SHOT_PENALTY = "Gift: Opponent loses one shot next round."
    SHOT_CAP = "Gift: Opponent limited to 1 shot next round."
    EXTRA_TURN = "Gift: You get a full bonus round!"

    @property
    def description(self) -> str:
        return self.value


def _check_roll(roll: int) -> None:
    if not 1 <= roll <= 100:
        raise ValueError(f"roll must be between 1 and 100, got {roll}")


def build_fleet(level: int) -> list[Starship]:
    """Return the active ships a player starts with at ``level`` (1, 2 or 3)."""
    try:
        composition = _FLEETS[level]
    except KeyError:
        raise ValueError(f"level must be 1, 2 or 3, got {level}") from None
    fleet = [ship_type() for ship_type, count in composition for _ in range(count)]
    for ship in fleet:
        ship.active = True
    return fleet


def gift_for_roll(roll: int) -> Gift:
    """Map a roll in 1..100 to the gift it earns."""
    _check_roll(roll)
    if roll <= 10:
        return Gift.SECRET_SHIP
    if roll <= 40:
        return Gift.BONUS_SHOT
    if roll <= 60:
        return Gift.SHOT_PENALTY
    if roll <= 80:
        return Gift.SHOT_CAP
    return Gift.EXTRA_TURN


def gift_ship_for_roll(roll: int) -> Starship:
    """Return a new, inactive ship chosen by a roll in 1..100."""
    _check_roll(roll)
    if roll <= 10:
        return StarDestroyer()
    if roll <= 30:
        return MonCalamariCruiser()
    if roll <= 60:
        return XWingSquadron()
    return TIEFighter()


def ship_cells(
    start_row: int, start_col: int, size: int, orientation: Orientation | str
) -> list[tuple[int, int]]:
    """Return the cells a ship of ``size`` covers from its start cell."""
    direction = Orientation(orientation)
    row_step = 1 if direction in (Orientation.VERTICAL, Orientation.DIAGONAL) else 0
    col_step = 1 if direction in (Orientation.HORIZONTAL, Orientation.DIAGONAL) else 0
    return [(start_row + i * row_step, start_col + i * col_step) for i in range(size)]


class Player:
    """One side of the battle: a fleet, a defense grid and an attack grid."""

    def __init__(self, name: str, level: int, rows: int, cols: int) -> None:
        self.name = name
        self.defense_grid = Grid(rows, cols)
        self.attack_grid = Grid(rows, cols)
        self.fleet: list[Starship] = build_fleet(level)
        self.last_sunk: Starship | None = None
        self.bonus_shots = 0
        self.shot_penalty = 0
        self.shot_cap: int | None = None
        self.extra_turn = False
        self.total_shots = 0
        self.total_hits = 0
        self.total_misses = 0

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, ships={self.ship_count})"

    @property
    def ship_count(self) -> int:
        return len(self.fleet)

    def can_place_ship(
        self, start_row: int, start_col: int, size: int, orientation: Orientation | str
    ) -> bool:
        """Return True if every cell of the ship is on the board and empty."""
        return all(
            self.defense_grid.in_bounds(row, col) and self.defense_grid.is_free(row, col)
            for row, col in ship_cells(start_row, start_col, size, orientation)
        )

    def deploy_ship(
        self, ship: Starship, start_row: int, start_col: int, orientation: Orientation | str
    ) -> None:
        """Place ``ship`` on the defense grid, or raise ValueError if it does not fit."""
        if not self.can_place_ship(start_row, start_col, ship.size, orientation):
            raise ValueError("Invalid placement. Ship would go out of bounds or overlap.")
        for row, col in ship_cells(start_row, start_col, ship.size, orientation):
            self.defense_grid.place_ship(row, col, ship.size)
            ship.add_cell(row, col)

    def add_gift_ship(
        self, ship: Starship, start_row: int, start_col: int, orientation: Orientation | str
    ) -> None:
        """Place a gift ship, activate it and add it to the fleet."""
        if not self.valid_coords(start_row, start_col):
            raise ValueError("Invalid coordinates.")
        self.deploy_ship(ship, start_row, start_col, orientation)
        ship.active = True
        self.fleet.append(ship)

    def maximum_shots(self) -> int:
        """Return the size of the largest ship still afloat, or 0."""
        return max((ship.size for ship in self.fleet if ship.active), default=0)

    def has_lost(self) -> bool:
        """Return True once every ship in the fleet is sunk."""
        return not any(ship.active for ship in self.fleet)

    def valid_coords(self, row: int, col: int) -> bool:
        return self.defense_grid.in_bounds(row, col)

    def is_miss(self, row: int, col: int) -> bool:
        """Return True if no ship sits on (row, col) of the defense grid."""
        return self.defense_grid.cell(row, col) == EMPTY

    def handle_hit_at(self, row: int, col: int) -> Starship | None:
        """Register a hit on the ship at (row, col); return it if that sank it."""
        ship = next((s for s in self.fleet if s.occupies(row, col)), None)
        if ship is None:
            return None
        was_active = ship.active
        ship.register_hit()
        if was_active and not ship.active:
            self.last_sunk = ship
            return ship
        return None

    def already_shot(self, row: int, col: int) -> bool:
        """Return True if this player's attack grid already records (row, col)."""
        return self.attack_grid.cell(row, col) != EMPTY

    def fire_at(self, opponent: Player, row: int, col: int) -> bool:
        """Shoot at (row, col) of ``opponent``; return True on a hit.

        When the shot sinks a ship, ``opponent.last_sunk`` holds it and its
        whole position is revealed on this player's attack grid.
        """
        if not opponent.valid_coords(row, col):
            raise ValueError("Invalid coordinates.")
        if self.already_shot(row, col):
            raise ValueError("You have already shot at this cell.")
        if opponent.is_miss(row, col):
            self.attack_grid.mark(row, col, MISS_MARK)
            return False
        opponent.last_sunk = None
        opponent.handle_hit_at(row, col)
        self.attack_grid.mark(row, col, HIT_MARK)
        sunk = opponent.last_sunk
        if sunk is not None:
            for sunk_row, sunk_col in sunk.cells:
                self.attack_grid.place_ship(sunk_row, sunk_col, sunk.size)
        return True

    def apply_gift(self, gift: Gift, opponent: Player) -> None:
        """Apply a shot or turn gift; a secret ship goes through add_gift_ship."""
        if gift is Gift.BONUS_SHOT:
            self.bonus_shots += 1
        elif gift is Gift.SHOT_PENALTY:
            opponent.shot_penalty += 1
        elif gift is Gift.SHOT_CAP:
            opponent.shot_cap = 1
        elif gift is Gift.EXTRA_TURN:
            self.extra_turn = True
        else:
            raise ValueError("a secret ship gift must be placed with add_gift_ship")

    def reset_shot_modifiers(self) -> None:
        self.bonus_shots = 0
        self.shot_penalty = 0
        self.shot_cap = None

    def lost_cells(self) -> int:
        """Return the number of cells covered by sunk ships."""
        return sum(len(ship.cells) for ship in self.fleet if not ship.active)

    def lost_ships_of_size(self, size: int) -> int:
        return sum(1 for ship in self.fleet if not ship.active and ship.size == size)

    def lost_ships_summary(self) -> str:
        """Return one line counting sunk ships of each type."""
        return "\t".join(
            f"Lost {ship_type.name}: {self.lost_ships_of_size(ship_type.SIZE)}"
            for ship_type in _SUMMARY_ORDER
        )