import pytest

from adventkit.y2022.day08_grid import UGrid


def test_from_text_dimensions():
    grid = UGrid.from_text("01\n23\n45")
    assert (grid.rows, grid.columns) == (3, 2)
    assert grid.values == [0, 1, 2, 3, 4, 5]


def test_from_text_ignores_blank_and_space_lines():
    grid = UGrid.from_text("533\n     \n354\n     \n539")
    assert (grid.rows, grid.columns) == (3, 3)
    assert grid.values == [5, 3, 3, 3, 5, 4, 5, 3, 9]


def test_from_text_empty_raises():
    with pytest.raises(ValueError):
        UGrid.from_text("\n \n")


def test_index_to_coord():
    grid = UGrid.from_text("01\n23\n45")
    assert grid.index_to_coord(0) == (0, 0)
    assert grid.index_to_coord(1) == (1, 0)
    assert grid.index_to_coord(2) == (0, 1)
    assert grid.index_to_coord(3) == (1, 1)
    assert grid.index_to_coord(4) == (0, 2)
    assert grid.index_to_coord(5) == (1, 2)


def test_index_to_coord_out_of_range():
    grid = UGrid.from_text("01\n23\n45")
    with pytest.raises(IndexError):
        grid.index_to_coord(6)


def test_coord_to_index():
    grid = UGrid.from_text("01\n23\n45")
    assert grid.coord_to_index(0, 0) == 0
    assert grid.coord_to_index(1, 0) == 1
    assert grid.coord_to_index(0, 1) == 2
    assert grid.coord_to_index(1, 1) == 3
    assert grid.coord_to_index(0, 2) == 4
    assert grid.coord_to_index(1, 2) == 5


def test_getitem():
    grid = UGrid.from_text("01\n23\n45")
    assert grid[(1, 2)] == 5
    assert grid[(0, 1)] == 2
    with pytest.raises(IndexError):
        grid[(0, 3)]


def test_iter_row():
    grid = UGrid.from_text("12\n34\n56")
    row = grid.iter_row(0)
    assert next(row) == 1
    assert next(row) == 2
    assert next(row, None) is None
    assert list(grid.iter_row(1)) == [3, 4]
    assert list(grid.iter_row(2)) == [5, 6]


def test_iter_rows():
    grid = UGrid.from_text("12\n34\n56")
    assert [max(row) for row in grid.iter_rows()] == [2, 4, 6]
    assert [sum(row) for row in grid.iter_rows()] == [1 + 2, 3 + 4, 5 + 6]


def test_iter_col():
    grid = UGrid.from_text("12\n34\n56")
    assert list(grid.iter_col(0)) == [1, 3, 5]
    assert list(grid.iter_col(1)) == [2, 4, 6]


def test_iter_columns():
    grid = UGrid.from_text("12\n34\n56")
    assert [max(col) for col in grid.iter_columns()] == [5, 6]
    assert [sum(col) for col in grid.iter_columns()] == [1 + 3 + 5, 2 + 4 + 6]


def test_edge():
    grid = UGrid.from_text("123\n456\n789")
    assert grid.edge() == [1, 2, 3, 4, 6, 7, 8, 9]


def test_subgrid_center_1x1():
    grid = UGrid.from_text("123\n456\n789")
    assert list(grid.sub_grid_iter(range(1, 2), range(1, 2))) == [5]


def test_subgrid_center_2x2():
    grid = UGrid.from_text("1111\n1221\n1221\n1111")
    assert list(grid.sub_grid_iter(range(1, 3), range(1, 3))) == [2, 2, 2, 2]


def test_coord():
    grid = UGrid.from_text("12\n34")
    assert grid.coord() == [((0, 0), 1), ((1, 0), 2), ((0, 1), 3), ((1, 1), 4)]