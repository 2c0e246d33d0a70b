"""
Exceptions levées par puzzle_grid.
"""

from __future__ import annotations

from typing import Any, Sequence


class PuzzleGridError(Exception):
    """Base commune de toutes les erreurs du paquet."""


class InvalidArgumentError(PuzzleGridError, ValueError):
    """Requête structurellement invalide (dimensions, sens de rotation, algorithme...)."""


class RouteBlockedError(PuzzleGridError, RuntimeError):
    """Aucune destination demandée n'est atteignable depuis le point de départ."""

    def __init__(self, start: Any, destinations: Sequence[Any]) -> None:
        self.start = start
        self.destinations = list(destinations)
        super().__init__(f"route blocked: no path from {start} to any of {self.destinations}")


__all__ = ["PuzzleGridError", "InvalidArgumentError", "RouteBlockedError"]
