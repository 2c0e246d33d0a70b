"""
Outils de visualisation pour le debug des grilles, régions et chemins.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Rectangle as MPLRect

from puzzle_grid.core.grid import Grid
from puzzle_grid.core.models import Coord
from puzzle_grid.perception.region import Region


def value_indices(grid: Grid) -> Tuple[np.ndarray, Dict[Any, int]]:
    """Remplace chaque valeur par un indice entier, dans l'ordre de première apparition."""
    palette: Dict[Any, int] = {}
    indices = np.zeros(grid.shape, dtype=int)

    for (row, column), value in grid.each_cell():
        indices[row, column] = palette.setdefault(value, len(palette))

    return indices, palette


class GridVisualizer:
    """Visualisation basique des grilles, régions détectées et chemins."""

    @staticmethod
    def plot_grid(grid: Grid, title: str = "Grid", figsize: Tuple[int, int] = (8, 8)):
        indices, _ = value_indices(grid)

        fig, ax = plt.subplots(figsize=figsize)
        ax.imshow(indices, cmap="tab10", interpolation="nearest")
        ax.set_title(title)
        ax.grid(True, which="minor", color="gray", linewidth=0.5, alpha=0.3)
        ax.set_xticks(np.arange(-0.5, grid.width, 1), minor=True)
        ax.set_yticks(np.arange(-0.5, grid.height, 1), minor=True)
        plt.tight_layout()
        return fig, ax

    @staticmethod
    def plot_regions(
        grid: Grid,
        regions: Iterable[Region],
        title: str = "Regions",
        figsize: Tuple[int, int] = (10, 10),
    ):
        fig, ax = GridVisualizer.plot_grid(grid, title, figsize)

        ordered = sorted(regions, key=lambda region: min(region.cells))
        for i, region in enumerate(ordered):
            GridVisualizer._add_region_overlay(ax, region, i)

        return fig, ax

    @staticmethod
    def _add_region_overlay(ax: plt.Axes, region: Region, index: int):
        """Helper to add a bounding box and label for a region to an axes."""
        bbox = region.bounding_box()
        rect = MPLRect(
            (bbox.min_column - 0.5, bbox.min_row - 0.5),
            bbox.width,
            bbox.height,
            linewidth=2,
            edgecolor="red",
            facecolor="none",
            linestyle="--",
        )
        ax.add_patch(rect)

        label = f"{region.value!s} #{index+1}"
        ax.text(
            bbox.min_column,
            bbox.min_row - 0.7,
            label,
            color="red",
            fontsize=10,
            fontweight="bold",
            bbox=dict(boxstyle="round", facecolor="white", alpha=0.7),
        )

    @staticmethod
    def plot_path(
        grid: Grid,
        path: Sequence[Coord],
        title: str = "Shortest path",
        figsize: Tuple[int, int] = (8, 8),
    ):
        """Trace le chemin (centres des cases) par-dessus la grille."""
        fig, ax = GridVisualizer.plot_grid(grid, title, figsize)

        if path:
            rows = [row for row, _ in path]
            columns = [column for _, column in path]
            ax.plot(columns, rows, color="red", linewidth=2, marker="o", markersize=4)
            ax.plot(columns[0], rows[0], color="green", marker="s", markersize=10)
            ax.plot(columns[-1], rows[-1], color="blue", marker="*", markersize=12)

        return fig, ax

    @staticmethod
    def region_summary(region: Region) -> List[str]:
        """Lignes décrivant une région (valeur, aire, périmètre, côtés, boîte)."""
        bbox = region.bounding_box()
        return [
            f"Value: {region.value!r}",
            f"Area: {region.area()}",
            f"Perimeter: {region.perimeter()}",
            f"Sides: {region.edge_count()}",
            f"Bounding box: ({bbox.min_row}, {bbox.min_column}) to ({bbox.max_row}, {bbox.max_column})",
        ]

    @staticmethod
    def print_region_info(region: Region) -> None:
        """Affiche des infos détaillées pour une région."""
        print(f"\n{'='*60}")
        for line in GridVisualizer.region_summary(region):
            print(line)


__all__ = ["GridVisualizer", "value_indices"]
