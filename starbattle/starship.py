"""Starship types that make up a player's fleet."""

from __future__ import annotations

from typing import ClassVar


class Starship:
    """A ship occupying cells on a grid, sunk once it takes enough hits.

    Concrete ship types set the class attributes; the base class itself
    cannot be instantiated.
    """

    name: ClassVar[str] = ""
    SIZE: ClassVar[int] = 0
    HITS_TO_DESTROY: ClassVar[int] = 0
    LASER_BURSTS: ClassVar[int] = 0

    def __init__(self) -> None:
        if type(self) is Starship:
            raise TypeError("Starship is abstract; use a concrete ship type")
        self.size: int = self.SIZE
        self.hits_to_destroy: int = self.HITS_TO_DESTROY
        self.laser_bursts: int = self.LASER_BURSTS
        self.active: bool = False
        self.cells: list[tuple[int, int]] = []

    def __repr__(self) -> str:
        state = "active" if self.active else "inactive"
        return (
            f"{type(self).__name__}(size={self.size}, "
            f"hits_to_destroy={self.hits_to_destroy}, {state}, cells={self.cells})"
        )

    def add_cell(self, row: int, col: int) -> None:
        """Record that the ship occupies the cell at (row, col)."""
        self.cells.append((row, col))

    def occupies(self, row: int, col: int) -> bool:
        """Return True if the ship sits on the cell at (row, col)."""
        return (row, col) in self.cells

    def register_hit(self) -> None:
        """Take one hit; the ship is sunk when no hits remain."""
        self.hits_to_destroy -= 1
        if self.hits_to_destroy <= 0:
            self.hits_to_destroy = 0
            self.active = False

    def reduce_hits(self, hits: int) -> None:
        """Lower the remaining hits by ``hits``, never below zero."""
        self.hits_to_destroy = max(self.hits_to_destroy - hits, 0)


class StarDestroyer(Starship):
    name = "Star Destroyer"
    SIZE = 5
    HITS_TO_DESTROY = 4
    LASER_BURSTS = 3


class MonCalamariCruiser(Starship):
    name = "Mon Calamari Cruiser"
    SIZE = 4
    HITS_TO_DESTROY = 3
    LASER_BURSTS = 4


class XWingSquadron(Starship):
    name = "X-Wing Squadron"
    SIZE = 3
    HITS_TO_DESTROY = 2
    LASER_BURSTS = 2


class TIEFighter(Starship):
    name = "TIE Fighter"
    SIZE = 1
    HITS_TO_DESTROY = 1
    LASER_BURSTS = 1