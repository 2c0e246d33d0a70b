"""
Carte : grille munie d'une règle d'adjacence et d'une recherche de plus courts chemins (Dijkstra).
"""

from __future__ import annotations

import heapq
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Set, Tuple, Union

import numpy as np

from puzzle_grid.core import config
from puzzle_grid.core.errors import InvalidArgumentError, RouteBlockedError
from puzzle_grid.core.grid import Grid
from puzzle_grid.core.models import Coord

logger = logging.getLogger(__name__)

INFINITY = float("inf")

Cost = Union[int, float]
WeightedNeighbour = Tuple[Coord, Cost]
NeighboursFn = Callable[["Map", Coord], Iterable[WeightedNeighbour]]
Destination = Union[Coord, Sequence[Coord]]


def _destinations(to: Destination) -> List[Coord]:
    """Une coordonnée seule, ou une liste de destinations acceptables."""
    if len(to) == 0:
        raise InvalidArgumentError("at least one destination is required")
    if isinstance(to[0], (tuple, list)):
        return [tuple(destination) for destination in to]
    return [tuple(to)]


class Map(Grid):
    """
    Grille sur laquelle on cherche des chemins.

    Par défaut, toute case différente de `obstacle` est praticable, avec un
    coût de 1 par pas cardinal. `set_neighbours_of` permet de remplacer
    cette règle par une fonction (map, coord) -> [(voisin, coût), ...].
    """

    def __init__(
        self,
        rows: Union[Sequence[Sequence[Any]], np.ndarray],
        obstacle: Any = config.OBSTACLE_MARKER,
    ) -> None:
        super().__init__(rows)
        self.obstacle = obstacle
        self.cardinal = True
        self.ordinal = False
        self._neighbours_fn: Optional[NeighboursFn] = None

    def set_neighbours_of(
        self,
        function: Optional[NeighboursFn],
        cardinal: bool = True,
        ordinal: bool = False,
    ) -> None:
        """
        Installe une règle d'adjacence personnalisée (None rétablit la règle par défaut).

        `cardinal` et `ordinal` restent consultables par la fonction via
        `map.cardinal` / `map.ordinal`, et sont appliqués par la règle par défaut.
        """
        self._neighbours_fn = function
        self.cardinal = cardinal
        self.ordinal = ordinal

    def neighbours_of(self, coord: Coord) -> List[WeightedNeighbour]:
        """Voisins pondérés de `coord` selon la règle en vigueur."""
        if self._neighbours_fn is not None:
            return [(tuple(neighbour), cost) for neighbour, cost in self._neighbours_fn(self, coord)]

        row, column = coord
        neighbours = self.neighbours(
            row,
            column,
            cardinal=self.cardinal,
            ordinal=self.ordinal,
            predicate=lambda value: value != self.obstacle,
        )
        return [(neighbour, config.DEFAULT_STEP_COST) for neighbour in neighbours]

    # ------------------------------------------------------------------ #
    # Recherche
    # ------------------------------------------------------------------ #

    def shortest_path(
        self, start: Coord, to: Destination, algorithm: str = config.DEFAULT_ALGORITHM
    ) -> List[Coord]:
        """
        Un chemin de coût minimal de `start` à `to` (bornes incluses).

        Si `to` est une liste, la recherche s'arrête dès qu'une des
        destinations est atteinte et le chemin mène à celle-ci.
        """
        self._check_algorithm(algorithm)
        _, paths = self._dijkstra(start, to, all_paths=False)
        return paths[0]

    def shortest_paths(
        self, start: Coord, to: Destination, algorithm: str = config.DEFAULT_ALGORITHM
    ) -> List[List[Coord]]:
        """Tous les chemins distincts de coût minimal vers la destination atteinte."""
        self._check_algorithm(algorithm)
        _, paths = self._dijkstra(start, to, all_paths=True)
        return paths

    @staticmethod
    def _check_algorithm(algorithm: str) -> None:
        if algorithm not in config.SUPPORTED_ALGORITHMS:
            raise InvalidArgumentError(
                f"unsupported algorithm {algorithm!r}, expected one of {config.SUPPORTED_ALGORITHMS}"
            )

    def _dijkstra(
        self, start: Coord, to: Destination, all_paths: bool
    ) -> Tuple[Coord, List[List[Coord]]]:
        start = tuple(start)
        if self.beyond_grid(*start):
            raise InvalidArgumentError(f"search start {start} is outside the grid")
        destinations = _destinations(to)
        targets = set(destinations)

        distances: Dict[Coord, Cost] = {start: 0}
        paths: Dict[Coord, List[List[Coord]]] = {start: [[start]]}
        visited: Set[Coord] = set()
        # (distance, coord) : à distance égale, la plus petite coordonnée sort en premier
        frontier: List[Tuple[Cost, Coord]] = [(0, start)]

        while frontier:
            distance, current = heapq.heappop(frontier)
            if current in visited or distance > distances[current]:
                continue

            for neighbour, cost in self.neighbours_of(current):
                if neighbour in visited:
                    continue

                new_distance = distance + cost
                best = distances.get(neighbour, INFINITY)
                extended = [path + [neighbour] for path in paths[current]]

                if new_distance < best:
                    distances[neighbour] = new_distance
                    paths[neighbour] = extended if all_paths else extended[:1]
                    heapq.heappush(frontier, (new_distance, neighbour))
                elif all_paths and new_distance == best:
                    known = paths[neighbour]
                    known.extend(path for path in extended if path not in known)

            visited.add(current)

            if current in targets:
                logger.debug(
                    "Reached %s from %s at cost %s after visiting %d cell(s)",
                    current,
                    start,
                    distance,
                    len(visited),
                )
                return current, paths[current]

        raise RouteBlockedError(start, destinations)


__all__ = ["Map", "INFINITY"]
