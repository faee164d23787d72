"""Tests for grid helpers and win detection."""

import pytest

from coinbot.core.grid import OFF_BOARD, cell_at, copy_grid, drop_into, empty_grid, is_open, legal_columns, other
from coinbot.core.rules import check_winner, check_winner_with_line, is_full, outcome_of, winner_through
from coinbot.errors import ColumnFullError
from coinbot.types import GameOutcome

from conftest import grid_from


def test_other():
    assert other("R") == "Y"
    assert other("Y") == "R"


def test_drop_into_raw_grid():
    grid = empty_grid()
    assert drop_into(grid, 0, "R") == 5
    assert drop_into(grid, 0, "Y") == 4
    assert grid[5][0] == "R"
    assert grid[4][0] == "Y"


def test_drop_into_full_column():
    grid = grid_from([
        "Y......",
        "R......",
        "Y......",
        "R......",
        "Y......",
        "R......",
    ])
    with pytest.raises(ColumnFullError):
        drop_into(grid, 0, "R")
    assert legal_columns(grid) == [1, 2, 3, 4, 5, 6]


def test_copy_grid_is_independent():
    grid = empty_grid()
    dup = copy_grid(grid)
    dup[5][5] = "R"
    assert grid[5][5] is None


def test_cell_at_and_is_open():
    grid = grid_from([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "RY.....",
    ])
    assert cell_at(grid, 5, 0) == "R"
    assert cell_at(grid, 6, 0) is OFF_BOARD
    assert cell_at(grid, 0, -1) is OFF_BOARD
    assert cell_at(grid, 0, 7) is OFF_BOARD

    assert is_open(cell_at(grid, 5, 0), "R")
    assert not is_open(cell_at(grid, 5, 1), "R")
    assert is_open(cell_at(grid, 5, 2), "R")
    assert not is_open(OFF_BOARD, "R")


def test_no_winner_on_empty_grid():
    grid = empty_grid()
    assert check_winner(grid) is None
    assert check_winner_with_line(grid) is None
    assert outcome_of(grid) is GameOutcome.ONGOING
    assert not is_full(grid)


@pytest.mark.parametrize("rows, mark, line", [
    (
        [".......", ".......", ".......", ".......", ".......", "...YYYY"],
        "Y", [(5, 3), (5, 4), (5, 5), (5, 6)],
    ),
    (
        [".......", ".......", "......R", "......R", "......R", "......R"],
        "R", [(2, 6), (3, 6), (4, 6), (5, 6)],
    ),
    (
        ["Y......", ".Y.....", "..Y....", "...Y...", ".......", "......."],
        "Y", [(0, 0), (1, 1), (2, 2), (3, 3)],
    ),
    (
        [".......", ".......", "...R...", "..R....", ".R.....", "R......"],
        "R", [(2, 3), (3, 2), (4, 1), (5, 0)],
    ),
])
def test_each_orientation(rows, mark, line):
    grid = grid_from(rows)
    assert check_winner_with_line(grid) == (mark, line)
    assert check_winner(grid) == mark


def test_outcome_of_maps_marks():
    red = grid_from([".......", ".......", ".......", ".......", ".......", "RRRR..."])
    yellow = grid_from([".......", ".......", ".......", ".......", ".......", "YYYY..."])
    assert outcome_of(red) is GameOutcome.FIRST_WON
    assert outcome_of(yellow) is GameOutcome.SECOND_WON


def test_gap_in_line_is_not_a_win():
    grid = grid_from([".......", ".......", ".......", ".......", ".......", "RRR.RRR"])
    assert check_winner(grid) is None


def test_winner_through_only_sees_lines_through_the_cell():
    grid = grid_from([".......", ".......", ".......", ".......", "Y......", "RRRR..."])
    assert winner_through(grid, 5, 3) == "R"
    assert winner_through(grid, 5, 0) == "R"
    assert winner_through(grid, 4, 0) is None
    assert winner_through(grid, 0, 0) is None
