"""
Régions : composantes connexes (4-connexité, même valeur) d'une grille.

Une `Region` est un instantané de coordonnées ; elle ne garde aucune
référence vers la grille dont elle provient.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Set, Tuple, Union

import numpy as np

from puzzle_grid.core.errors import InvalidArgumentError
from puzzle_grid.core.grid import Grid
from puzzle_grid.core.models import BoundingBox, Coord, Direction
from puzzle_grid.perception.disjoint_set import DisjointSet

logger = logging.getLogger(__name__)

# (case intérieure, case extérieure) : un segment unitaire du contour
Edge = Tuple[Coord, Coord]


def _is_coord(value: Any) -> bool:
    return isinstance(value, tuple) and len(value) == 2 and all(isinstance(v, (int, np.integer)) for v in value)


@dataclass(frozen=True, init=False, repr=False)
class Region:
    """
    Ensemble de coordonnées connexes.

    `cells` accepte une coordonnée seule ou un itérable de coordonnées.
    `value` est la valeur commune des cases ; elle n'intervient ni dans
    l'égalité ni dans le hash.
    """

    cells: FrozenSet[Coord]
    value: Any = field(default=None, compare=False)

    def __init__(self, cells: Union[Coord, Iterable[Coord]], value: Any = None) -> None:
        if _is_coord(cells):
            cells = [cells]
        object.__setattr__(self, "cells", frozenset(tuple(int(v) for v in cell) for cell in cells))
        object.__setattr__(self, "value", value)

    @classmethod
    def flood_fill(cls, grid: Grid, start: Coord) -> "Region":
        """
        Composante maximale contenant `start`.

        Parcours en profondeur avec une pile explicite.
        """
        row, column = start
        if grid.beyond_grid(row, column):
            raise InvalidArgumentError(f"flood fill start {start} is outside the grid")

        target = grid.cell(row, column)
        component: Set[Coord] = {(row, column)}
        stack = [(row, column)]

        while stack:
            current = stack.pop()
            for neighbour in grid.neighbours(*current, predicate=lambda v: v == target):
                if neighbour not in component:
                    component.add(neighbour)
                    stack.append(neighbour)

        return cls(component, value=target)

    # ------------------------------------------------------------------ #
    # Mesures
    # ------------------------------------------------------------------ #

    def area(self) -> int:
        return len(self.cells)

    def perimeter(self) -> int:
        """Nombre de côtés de cases bordant une case hors de la région."""
        return len(self._boundary_edges())

    def edge_count(self) -> int:
        """
        Nombre de côtés droits du contour (un mur rectiligne compte pour 1).

        Chaque segment unitaire du contour reçoit une étiquette entière ; deux
        segments du même type décalés d'une case le long du mur sont réunis
        dans un union-find. Le résultat est le nombre de groupes.
        """
        edges = self._boundary_edges()
        labels: Dict[Edge, int] = {edge: index for index, edge in enumerate(edges)}
        sides = DisjointSet(len(edges))

        for edge, label in labels.items():
            for neighbour in self._edge_neighbours(edge):
                sides.union(label, labels[neighbour])

        return sides.count

    def bounding_box(self) -> BoundingBox:
        """Boîte englobante des cases de la région."""
        if not self.cells:
            raise InvalidArgumentError("an empty region has no bounding box")

        rows = [row for row, _ in self.cells]
        columns = [column for _, column in self.cells]
        return BoundingBox(min_row=min(rows), min_column=min(columns), max_row=max(rows), max_column=max(columns))

    # ------------------------------------------------------------------ #
    # Contour
    # ------------------------------------------------------------------ #

    def _boundary_edges(self) -> List[Edge]:
        edges: List[Edge] = []
        for cell in sorted(self.cells):
            for direction in Direction.cardinal():
                outside = direction.step(cell)
                if outside not in self.cells:
                    edges.append((cell, outside))
        return edges

    def _edge_neighbours(self, edge: Edge) -> List[Edge]:
        (in_row, in_column), (out_row, out_column) = edge

        if in_column == out_column:
            shifts = [(0, -1), (0, 1)]
        else:
            shifts = [(-1, 0), (1, 0)]

        neighbours: List[Edge] = []
        for d_row, d_column in shifts:
            inside = (in_row + d_row, in_column + d_column)
            outside = (out_row + d_row, out_column + d_column)
            if inside in self.cells and outside not in self.cells:
                neighbours.append((inside, outside))
        return neighbours

    # ------------------------------------------------------------------ #
    # Protocoles
    # ------------------------------------------------------------------ #

    def each_cell(self) -> Iterator[Coord]:
        """Coordonnées dans l'ordre de lecture."""
        return iter(sorted(self.cells))

    def __iter__(self) -> Iterator[Coord]:
        return self.each_cell()

    def __len__(self) -> int:
        return len(self.cells)

    def __contains__(self, coord: object) -> bool:
        return coord in self.cells

    def __repr__(self) -> str:
        return f"Region(area={self.area()}, value={self.value!r})"


def regions_of(grid: Grid) -> Set[Region]:
    """
    Partitionne toutes les cases de la grille en régions maximales.
    """
    unvisited: Set[Coord] = {coord for coord, _ in grid.each_cell()}
    regions: Set[Region] = set()

    for coord, _ in grid.each_cell():
        if coord not in unvisited:
            continue

        region = Region.flood_fill(grid, coord)
        unvisited -= region.cells
        regions.add(region)

    logger.debug("Decomposed %r into %d region(s)", grid, len(regions))
    return regions


__all__ = ["Region", "regions_of"]
