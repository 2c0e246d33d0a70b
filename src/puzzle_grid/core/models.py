"""
Types de base partagés par la grille, les régions et la recherche de chemins.

Toutes les coordonnées sont des tuples `(row, column)` indexés à partir de zéro.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

Coord = Tuple[int, int]


class Direction(Enum):
    """Directions cardinales et intercardinales, en (d_row, d_col).

    L'ordre de déclaration est l'ordre horaire en partant du nord.
    """

    NORTH = (-1, 0)
    NORTHEAST = (-1, 1)
    EAST = (0, 1)
    SOUTHEAST = (1, 1)
    SOUTH = (1, 0)
    SOUTHWEST = (1, -1)
    WEST = (0, -1)
    NORTHWEST = (-1, -1)

    @property
    def is_cardinal(self) -> bool:
        d_row, d_col = self.value
        return d_row == 0 or d_col == 0

    @classmethod
    def cardinal(cls) -> List["Direction"]:
        """Retourne uniquement les directions cardinales (N, E, S, O)."""
        return [d for d in cls if d.is_cardinal]

    @classmethod
    def ordinal(cls) -> List["Direction"]:
        """Retourne uniquement les diagonales (NE, SE, SO, NO)."""
        return [d for d in cls if not d.is_cardinal]

    @classmethod
    def clockwise(cls, cardinal: bool = True, ordinal: bool = False) -> List["Direction"]:
        """Directions sélectionnées, dans l'ordre horaire depuis le nord."""
        return [d for d in cls if (cardinal if d.is_cardinal else ordinal)]

    def step(self, coord: Coord) -> Coord:
        row, column = coord
        d_row, d_col = self.value
        return row + d_row, column + d_col


class Rotation(Enum):
    """Sens de rotation d'une grille (quart de tour)."""

    CLOCKWISE = "clockwise"
    ANTICLOCKWISE = "anticlockwise"


@dataclass(frozen=True)
class BoundingBox:
    """Boîte englobante axis-alignée, bornes incluses."""

    min_row: int
    min_column: int
    max_row: int
    max_column: int

    @property
    def height(self) -> int:
        return self.max_row - self.min_row + 1

    @property
    def width(self) -> int:
        return self.max_column - self.min_column + 1

    @property
    def area(self) -> int:
        return self.width * self.height

    def contains(self, coord: Coord) -> bool:
        """Vérifie si une coordonnée est dans la boîte."""
        row, column = coord
        return self.min_row <= row <= self.max_row and self.min_column <= column <= self.max_column


__all__ = [
    "Coord",
    "Direction",
    "Rotation",
    "BoundingBox",
]
