import copy

import numpy as np
import pytest

from puzzle_grid.core.errors import InvalidArgumentError
from puzzle_grid.core.grid import Grid
from puzzle_grid.core.models import Rotation

INPUT_TEXT = "abcd\nefgh\nijkl\nmnop"
ROTATED_TEXT = "miea\nnjfb\nokgc\nplhd"


def _make_grid() -> Grid:
    return Grid.from_input(INPUT_TEXT)


def test_from_input_builds_one_row_per_line() -> None:
    grid = Grid.from_input("ab\ncd\n\n")

    assert grid.shape == (2, 2)
    assert grid.to_list() == [["a", "b"], ["c", "d"]]
    assert str(grid) == "ab\ncd"


def test_constructor_copies_caller_rows() -> None:
    rows = [[0, 1], [2, 3]]
    grid = Grid(rows)
    rows[0][0] = 9

    assert grid.cell(0, 0) == 0


def test_constructor_rejects_ragged_rows() -> None:
    with pytest.raises(InvalidArgumentError):
        Grid([[1, 2], [3]])


def test_constructor_accepts_numpy_arrays() -> None:
    grid = Grid(np.array([[1, 2], [3, 4]]))

    assert grid.cell(1, 0) == 3
    assert type(grid.cell(1, 0)) is int


def test_tuple_values_are_kept_as_single_cells() -> None:
    grid = Grid([[(0, 0), (0, 1)]])

    assert grid.shape == (1, 2)
    assert grid.cell(0, 1) == (0, 1)


def test_cell_returns_value_or_none() -> None:
    grid = _make_grid()

    assert grid.cell(0, 0) == "a"
    assert grid.cell(3, 3) == "p"
    assert grid.cell(4, 0) is None
    assert grid.cell(0, -1) is None
    assert grid.cell(-1, 0) is None


def test_set_cell_in_and_out_of_bounds() -> None:
    grid = _make_grid()
    before = grid.dup()

    assert grid.set_cell(0, 0, "z") == "z"
    assert grid.cell(0, 0) == "z"

    assert grid.set_cell(0, 4, "y") is None
    assert grid.set_cell(-1, 0, "y") is None
    before.set_cell(0, 0, "z")
    assert grid == before


def test_includes_coords_and_beyond_grid() -> None:
    grid = Grid([[0, 1], [2, 3]])

    for coords in [(0, 0), (0, 1), (1, 0), (1, 1)]:
        assert grid.includes_coords(*coords)
        assert not grid.beyond_grid(*coords)

    for coords in [(-1, 0), (0, -1), (0, 2), (2, 0)]:
        assert not grid.includes_coords(*coords)
        assert grid.beyond_grid(*coords)


def test_equality() -> None:
    grid_1 = _make_grid()
    grid_2 = _make_grid()

    assert grid_1 == grid_2

    grid_2.set_cell(0, 0, "z")
    assert grid_1 != grid_2
    assert grid_1 != "non-grid object"
    assert Grid([[1, 2]]) != Grid([[1], [2]])


def test_rotate_clockwise_by_default() -> None:
    grid = Grid([[0, 1], [2, 3]])

    assert grid.rotate() is grid
    assert grid == Grid([[2, 0], [3, 1]])


def test_rotate_anticlockwise() -> None:
    grid = Grid([[2, 0], [3, 1]])
    grid.rotate("anticlockwise")

    assert grid == Grid([[0, 1], [2, 3]])

    grid.rotate(Rotation.ANTICLOCKWISE)
    assert grid == Grid([[1, 3], [0, 2]])


def test_rotate_text_grid_and_four_turns_restore_it() -> None:
    grid = _make_grid()

    assert grid.rotate(Rotation.CLOCKWISE) == Grid.from_input(ROTATED_TEXT)

    for _ in range(3):
        grid.rotate()
    assert grid == _make_grid()


def test_rotate_non_square_grid() -> None:
    grid = Grid([[1, 2, 3]])

    assert grid.dup().rotate() == Grid([[1], [2], [3]])
    assert grid.dup().rotate("anticlockwise") == Grid([[3], [2], [1]])


def test_rotate_rejects_unknown_direction() -> None:
    with pytest.raises(InvalidArgumentError):
        _make_grid().rotate("sideways")

    with pytest.raises(ValueError):
        _make_grid().rotate("sideways")


def test_all_rotations_are_independent_copies() -> None:
    grid = _make_grid()
    rotations = grid.all_rotations()

    assert len(rotations) == 4
    assert rotations[0] == grid
    assert rotations[0] is not grid
    assert rotations[1] == Grid.from_input(ROTATED_TEXT)

    rotations[0].set_cell(0, 0, "z")
    assert grid.cell(0, 0) == "a"
    assert rotations[2].cell(3, 3) == "a"


def test_matches_with_rotations() -> None:
    grid = _make_grid()

    assert grid.matches_with_rotations(_make_grid())
    assert grid.matches_with_rotations(Grid.from_input(ROTATED_TEXT))
    assert all(grid.matches_with_rotations(rotation) for rotation in grid.all_rotations())
    assert not grid.matches_with_rotations("non-grid object")


def test_matches_with_rotations_fails_for_different_grids() -> None:
    grid = _make_grid()
    different = _make_grid()
    different.set_cell(2, 3, ".")

    assert not any(grid.matches_with_rotations(rotation) for rotation in different.all_rotations())


def test_subgrids_returns_expected_windows_in_order() -> None:
    grid = _make_grid()

    assert grid.subgrids(3, 3) == [
        Grid.from_input("abc\nefg\nijk"),
        Grid.from_input("bcd\nfgh\njkl"),
        Grid.from_input("efg\nijk\nmno"),
        Grid.from_input("fgh\njkl\nnop"),
    ]
    assert grid.subgrids(2, 4) == [
        Grid.from_input("abcd\nefgh"),
        Grid.from_input("efgh\nijkl"),
        Grid.from_input("ijkl\nmnop"),
    ]


def test_subgrid_count() -> None:
    grid = _make_grid()

    assert len(grid.subgrids(2, 3)) == (4 - 2 + 1) * (4 - 3 + 1)
    assert len(grid.subgrids(1, 1)) == 16


def test_subgrids_rejects_invalid_dimensions() -> None:
    grid = _make_grid()

    for rows, columns in [("3", 3), (3, "3"), (0, 3), (3, 0), (-1, 3), (5, 3), (3, 5), (True, 3), (2.0, 3)]:
        with pytest.raises(InvalidArgumentError):
            grid.subgrids(rows, columns)


def test_each_subgrid_validates_before_iterating() -> None:
    with pytest.raises(InvalidArgumentError):
        _make_grid().each_subgrid(0, 1)


def test_each_subgrid_is_lazy() -> None:
    iterator = _make_grid().each_subgrid(3, 3)

    assert next(iterator) == Grid.from_input("abc\nefg\nijk")
    assert len(list(iterator)) == 3


def test_full_size_subgrid_is_a_copy() -> None:
    grid = _make_grid()
    results = grid.subgrids(4, 4)

    assert len(results) == 1
    assert results[0] == grid
    assert results[0] is not grid

    results[0].set_cell(0, 0, "z")
    assert grid.cell(0, 0) == "a"


def test_each_cell_row_major_and_restartable() -> None:
    grid = Grid([[0, 1], [2, 3]])

    assert list(grid.each_cell()) == [((0, 0), 0), ((0, 1), 1), ((1, 0), 2), ((1, 1), 3)]
    assert list(grid.each_cell()) == list(grid.each_cell())


def test_each_cell_mutate() -> None:
    grid = _make_grid()

    assert grid.each_cell_mutate(lambda coord, value: value.upper()) is grid
    assert str(grid) == INPUT_TEXT.upper()

    numbers = Grid([[1, 2], [3, 4]])
    numbers.each_cell_mutate(lambda coord, value: value * 10 + coord[1])
    assert numbers == Grid([[10, 21], [30, 41]])


def test_each_row_yields_copies() -> None:
    grid = Grid([[0, 1], [2, 3]])

    rows = list(grid.each_row())
    rows[0][0] = 9

    assert rows == [[9, 1], [2, 3]]
    assert grid.cell(0, 0) == 0


def test_each_row_mutate() -> None:
    grid = Grid([[0, 1], [2, 3]])

    grid.each_row_mutate(lambda index, row: list(reversed(row)))
    assert grid == Grid([[1, 0], [3, 2]])

    with pytest.raises(InvalidArgumentError):
        grid.each_row_mutate(lambda index, row: row + [0])


def test_neighbours_skip_out_of_bounds_in_clockwise_order() -> None:
    grid = Grid([[0, 1], [2, 3]])

    assert grid.neighbours(0, 0) == [(0, 1), (1, 0)]
    assert grid.neighbours(1, 1) == [(0, 1), (1, 0)]


def test_neighbours_cardinal_and_ordinal() -> None:
    grid = Grid([[1, 2, 3], [4, 5, 6], [7, 8, 9]])

    assert grid.neighbours(1, 1, ordinal=True) == [
        (0, 1), (0, 2), (1, 2), (2, 2), (2, 1), (2, 0), (1, 0), (0, 0),
    ]
    assert grid.neighbours(1, 1, cardinal=False, ordinal=True) == [(0, 2), (2, 2), (2, 0), (0, 0)]
    assert grid.neighbours(1, 1, cardinal=False) == []


def test_neighbours_with_predicate() -> None:
    grid = Grid([[1, 2, 3], [4, 5, 6], [7, 8, 9]])

    assert grid.neighbours(1, 1, predicate=lambda value: value > 4) == [(1, 2), (2, 1)]


def test_locate() -> None:
    grid = _make_grid()

    assert grid.locate("f") == (1, 1)
    assert grid.locate("z") is None
    assert grid.locate(["z", "b"]) == (0, 1)
    # la première valeur de la liste présente dans la grille l'emporte
    assert grid.locate(["p", "b"]) == (3, 3)
    assert grid.locate(["y", "z"]) is None


def test_locate_all() -> None:
    grid = Grid.from_input("a.b\n..a")

    assert grid.locate_all("a") == [(0, 0), (1, 2)]
    assert grid.locate_all(["b", "a"]) == [(0, 0), (0, 2), (1, 2)]
    assert grid.locate_all("z") == []


def test_dup_is_independent() -> None:
    grid = _make_grid()

    for duplicate in (grid.dup(), copy.copy(grid), copy.deepcopy(grid)):
        assert duplicate == grid
        assert duplicate is not grid
        duplicate.set_cell(1, 1, "z")
        assert grid.cell(1, 1) == "f"


def test_grids_are_unhashable() -> None:
    with pytest.raises(TypeError):
        hash(_make_grid())


def test_empty_grid() -> None:
    grid = Grid([])

    assert grid.shape == (0, 0)
    assert list(grid.each_cell()) == []
    assert grid.cell(0, 0) is None
    assert repr(grid) == "Grid(0x0)"
