"""
puzzle_grid - Grids, regions and shortest paths for discrete puzzles
====================================================================

Flow:
    Raw text / 2D list -> Grid -> Region decomposition (perception)
                               -> Map shortest paths (reasoning)

The matplotlib helpers live in `puzzle_grid.perception.visualize` and are
not imported here.
"""

import logging

from .core.errors import InvalidArgumentError, PuzzleGridError, RouteBlockedError
from .core.grid import Grid
from .core.models import BoundingBox, Coord, Direction, Rotation
from .perception.disjoint_set import DisjointSet
from .perception.region import Region, regions_of
from .reasoning.map import Map

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Data Types
    "Coord",
    "Direction",
    "Rotation",
    "BoundingBox",

    # Grid core
    "Grid",

    # Regions
    "Region",
    "regions_of",
    "DisjointSet",

    # Path search
    "Map",

    # Errors
    "PuzzleGridError",
    "InvalidArgumentError",
    "RouteBlockedError",
]
