"""
Grille rectangulaire de valeurs arbitraires.

Le stockage est un tableau numpy de dtype `object` de forme (rows, columns) :
les valeurs restent des objets Python (caractères, entiers, ...), sans
conversion de type.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from puzzle_grid.core import config
from puzzle_grid.core.errors import InvalidArgumentError
from puzzle_grid.core.models import Coord, Direction, Rotation

CellPredicate = Callable[[Any], bool]
CellTransform = Callable[[Coord, Any], Any]
RowTransform = Callable[[int, List[Any]], Sequence[Any]]


def _to_array(rows: Union[Sequence[Sequence[Any]], np.ndarray]) -> np.ndarray:
    """Copie une séquence 2D dans un nouveau tableau objet, en vérifiant qu'elle est rectangulaire."""
    if isinstance(rows, np.ndarray):
        if rows.ndim != 2:
            raise InvalidArgumentError(f"expected a two-dimensional array, got {rows.ndim} dimension(s)")
        return rows.astype(object)

    rows = [list(row) for row in rows]
    height = len(rows)
    width = len(rows[0]) if rows else 0

    for index, row in enumerate(rows):
        if len(row) != width:
            raise InvalidArgumentError(f"row {index} has {len(row)} cells, expected {width}")

    # Remplissage case par case : np.array() éclaterait des valeurs séquentielles (tuples, listes).
    cells = np.empty((height, width), dtype=object)
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            cells[r, c] = value
    return cells


def _as_candidates(value_or_list: Any) -> List[Any]:
    return list(value_or_list) if isinstance(value_or_list, list) else [value_or_list]


def _check_dimension(name: str, value: Any, limit: int) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be positive, got {value}")
    if value > limit:
        raise InvalidArgumentError(f"{name}={value} exceeds the grid size ({limit})")


class Grid:
    """
    Grille 2D indexée en (row, column), de taille fixe et de contenu mutable.

    Les accès hors bornes ne lèvent pas d'erreur : `cell` et `set_cell`
    retournent `None`.
    """

    def __init__(self, rows: Union[Sequence[Sequence[Any]], np.ndarray]) -> None:
        self._cells = _to_array(rows)

    @classmethod
    def from_input(cls, text: str, **kwargs: Any) -> "Grid":
        """Une ligne non vide par rangée, un caractère par case."""
        return cls([list(line) for line in text.splitlines() if line], **kwargs)

    # ------------------------------------------------------------------ #
    # Dimensions
    # ------------------------------------------------------------------ #

    @property
    def height(self) -> int:
        """Nombre de rangées."""
        return self._cells.shape[0]

    @property
    def width(self) -> int:
        """Nombre de colonnes."""
        return self._cells.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.height, self.width

    def includes_coords(self, row: int, column: int) -> bool:
        return 0 <= row < self.height and 0 <= column < self.width

    def beyond_grid(self, row: int, column: int) -> bool:
        return not self.includes_coords(row, column)

    # ------------------------------------------------------------------ #
    # Accès aux cases
    # ------------------------------------------------------------------ #

    def cell(self, row: int, column: int) -> Any:
        """Valeur en (row, column), ou None hors de la grille."""
        if self.beyond_grid(row, column):
            return None
        return self._cells[row, column]

    def set_cell(self, row: int, column: int, value: Any) -> Any:
        """Écrit la valeur si la case existe ; retourne la valeur écrite, sinon None."""
        if self.beyond_grid(row, column):
            return None
        self._cells[row, column] = value
        return value

    def to_list(self) -> List[List[Any]]:
        """Copie sous forme de listes imbriquées."""
        return [list(row) for row in self._cells]

    # ------------------------------------------------------------------ #
    # Comparaison et copie
    # ------------------------------------------------------------------ #

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return False
        if self.shape != other.shape:
            return False
        return bool(np.array_equal(self._cells, other._cells))

    __hash__ = None  # type: ignore[assignment]

    def dup(self) -> "Grid":
        """Copie indépendante : même classe, même contenu, stockage distinct."""
        duplicate = self.__class__.__new__(self.__class__)
        duplicate.__dict__.update(self.__dict__)
        duplicate._cells = self._cells.copy()
        return duplicate

    __copy__ = dup

    # ------------------------------------------------------------------ #
    # Rotations
    # ------------------------------------------------------------------ #

    def rotate(self, direction: Union[Rotation, str] = config.DEFAULT_ROTATION) -> "Grid":
        """
        Fait tourner la grille d'un quart de tour, en place, et retourne self.

        Horaire : transposition puis inversion de chaque rangée.
        Anti-horaire : inversion de chaque rangée puis transposition.
        """
        try:
            direction = Rotation(direction)
        except ValueError:
            raise InvalidArgumentError(f"unknown rotation direction {direction!r}") from None

        if direction is Rotation.CLOCKWISE:
            self._cells = self._cells.T[:, ::-1].copy()
        else:
            self._cells = self._cells[:, ::-1].T.copy()
        return self

    def all_rotations(self) -> List["Grid"]:
        """Les quatre orientations (0°, 90°, 180°, 270° horaires), chacune étant une copie."""
        rotations: List[Grid] = []
        current = self.dup()

        for _ in range(4):
            rotations.append(current.dup())
            current.rotate(Rotation.CLOCKWISE)

        return rotations

    def matches_with_rotations(self, other: object) -> bool:
        """True si une des rotations de `other` est égale à self."""
        if not isinstance(other, Grid):
            return False
        return any(self == rotated for rotated in other.all_rotations())

    # ------------------------------------------------------------------ #
    # Sous-grilles
    # ------------------------------------------------------------------ #

    def each_subgrid(self, rows: int, columns: int) -> Iterator["Grid"]:
        """
        Itère sur chaque fenêtre contiguë de taille rows x columns,
        de haut en bas puis de gauche à droite.

        Les dimensions sont validées immédiatement, avant toute itération.
        """
        _check_dimension("rows", rows, self.height)
        _check_dimension("columns", columns, self.width)
        return self._iter_subgrids(int(rows), int(columns))

    def _iter_subgrids(self, rows: int, columns: int) -> Iterator["Grid"]:
        for top in range(self.height - rows + 1):
            for left in range(self.width - columns + 1):
                yield Grid(self._cells[top : top + rows, left : left + columns])

    def subgrids(self, rows: int, columns: int) -> List["Grid"]:
        return list(self.each_subgrid(rows, columns))

    # ------------------------------------------------------------------ #
    # Parcours
    # ------------------------------------------------------------------ #

    def each_cell(self) -> Iterator[Tuple[Coord, Any]]:
        """Paires ((row, column), valeur) dans l'ordre de lecture."""
        for row in range(self.height):
            for column in range(self.width):
                yield (row, column), self._cells[row, column]

    def each_cell_mutate(self, transform: CellTransform) -> "Grid":
        """Remplace chaque case par transform(coord, valeur), dans l'ordre de lecture."""
        for row in range(self.height):
            for column in range(self.width):
                self._cells[row, column] = transform((row, column), self._cells[row, column])
        return self

    def each_row(self) -> Iterator[List[Any]]:
        """Copie de chaque rangée, de haut en bas."""
        for row in self._cells:
            yield list(row)

    def each_row_mutate(self, transform: RowTransform) -> "Grid":
        """Remplace chaque rangée par transform(index, copie_de_la_rangée)."""
        for index in range(self.height):
            replacement = list(transform(index, list(self._cells[index])))
            if len(replacement) != self.width:
                raise InvalidArgumentError(
                    f"replacement for row {index} has {len(replacement)} cells, expected {self.width}"
                )
            for column, value in enumerate(replacement):
                self._cells[index, column] = value
        return self

    # ------------------------------------------------------------------ #
    # Voisinage et recherche
    # ------------------------------------------------------------------ #

    def neighbours(
        self,
        row: int,
        column: int,
        cardinal: bool = True,
        ordinal: bool = False,
        predicate: Optional[CellPredicate] = None,
    ) -> List[Coord]:
        """
        Voisins dans la grille, dans l'ordre horaire en partant du nord.

        Si `predicate` est fourni, il reçoit la valeur de chaque voisin et
        seuls ceux pour lesquels il retourne True sont conservés.
        """
        neighbours: List[Coord] = []

        for direction in Direction.clockwise(cardinal=cardinal, ordinal=ordinal):
            n_row, n_column = direction.step((row, column))

            if self.beyond_grid(n_row, n_column):
                continue
            if predicate is not None and not predicate(self._cells[n_row, n_column]):
                continue

            neighbours.append((n_row, n_column))

        return neighbours

    def locate(self, value_or_list: Any) -> Optional[Coord]:
        """
        Première case (ordre de lecture) contenant la valeur.

        Avec une liste, les valeurs sont essayées dans l'ordre de la liste :
        la première valeur présente dans la grille l'emporte.
        """
        for candidate in _as_candidates(value_or_list):
            for coord, value in self.each_cell():
                if value == candidate:
                    return coord
        return None

    def locate_all(self, value_or_list: Any) -> List[Coord]:
        candidates = _as_candidates(value_or_list)
        return [coord for coord, value in self.each_cell() if any(value == c for c in candidates)]

    # ------------------------------------------------------------------ #
    # Représentation
    # ------------------------------------------------------------------ #

    def __str__(self) -> str:
        return "\n".join("".join(str(value) for value in row) for row in self._cells)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.height}x{self.width})"


__all__ = ["Grid"]
