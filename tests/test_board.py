from typing import List, Tuple

import numpy as np
import pytest

from inarow.board import Board
from inarow.config import GOMOKU, TIC_TAC_TOE, GameConfig
from inarow.coordinates import Coordinates as C
from inarow.errors import AlreadyOccupied, MoveError, OutOfBounds
from inarow.player import Player

X, O = Player.X, Player.O


def _board(config: GameConfig, moves: List[Tuple[int, int, Player]]) -> Board:
    b = Board.new(config)
    for x, y, p in moves:
        b = b.insert(C(x, y), p)
    return b


@pytest.mark.parametrize("config", [TIC_TAC_TOE, GOMOKU])
def test_new_board_is_empty_with_config_bounds(config: GameConfig):
    b = Board.new(config)
    assert b.move_count == 0
    assert (b.min_x, b.max_x, b.min_y, b.max_y) == (config.min_x, config.max_x, config.min_y, config.max_y)


@pytest.mark.parametrize("x,y", [(-2, 0), (2, 0), (0, -2), (0, 2), (5, 5)])
def test_insert_out_of_bounds(x: int, y: int):
    b = Board.new(TIC_TAC_TOE)
    with pytest.raises(OutOfBounds) as exc:
        b.insert(C(x, y), X)
    assert exc.value.coordinates == C(x, y)


def test_insert_returns_new_board_and_keeps_receiver():
    empty = Board.new(TIC_TAC_TOE)
    b = empty.insert(C(0, 0), X)
    assert b.get(C(0, 0)) is X
    assert C(0, 0) in b
    assert empty.get(C(0, 0)) is None
    assert empty.move_count == 0
    # the old board is still usable
    assert empty.insert(C(0, 0), O).get(C(0, 0)) is O


@pytest.mark.parametrize("second", [X, O])
def test_insert_already_occupied(second: Player):
    b = Board.new(TIC_TAC_TOE).insert(C(0, 0), X)
    with pytest.raises(AlreadyOccupied):
        b.insert(C(0, 0), second)
    assert b.get(C(0, 0)) is X


def test_move_errors_share_base_class():
    assert issubclass(OutOfBounds, MoveError)
    assert issubclass(AlreadyOccupied, MoveError)


def test_cells_mapping_is_read_only():
    b = Board.new(TIC_TAC_TOE).insert(C(0, 0), X)
    with pytest.raises(TypeError):
        b.cells[C(1, 1)] = O  # type: ignore[index]


def test_constructor_rejects_off_board_cells():
    with pytest.raises(OutOfBounds):
        Board(-1, 1, -1, 1, {C(3, 3): X})


def test_equality_and_hash_by_value():
    a = _board(TIC_TAC_TOE, [(0, 0, X), (1, 1, O)])
    b = _board(TIC_TAC_TOE, [(1, 1, O), (0, 0, X)])
    assert a == b
    assert hash(a) == hash(b)
    assert a != Board.new(TIC_TAC_TOE)


ALL_CELLS = [(x, y) for y in (-1, 0, 1) for x in (-1, 0, 1)]


def test_is_draw_empty():
    assert Board.new(TIC_TAC_TOE).is_draw() is False


def test_is_draw_one_cell_left():
    b = _board(TIC_TAC_TOE, [(x, y, X) for x, y in ALL_CELLS[:-1]])
    assert b.is_draw() is False


def test_is_draw_full():
    b = _board(TIC_TAC_TOE, [(x, y, X) for x, y in ALL_CELLS])
    assert b.is_draw() is True


def test_legal_moves_row_major():
    b = _board(TIC_TAC_TOE, [(-1, -1, X), (0, 0, O)])
    moves = b.legal_moves()
    assert len(moves) == 7
    assert moves[0] == C(0, -1)
    assert C(0, 0) not in moves


def test_affected_rows_center():
    rows = Board.new(TIC_TAC_TOE).affected_rows(C(0, 0))
    assert len(rows) == 4
    assert (C(-1, 0), C(0, 0), C(1, 0)) in rows
    assert (C(0, -1), C(0, 0), C(0, 1)) in rows
    assert (C(-1, -1), C(0, 0), C(1, 1)) in rows
    assert (C(-1, 1), C(0, 0), C(1, -1)) in rows


def test_affected_rows_corner():
    rows = Board.new(TIC_TAC_TOE).affected_rows(C(-1, -1))
    assert len(rows) == 3
    assert (C(-1, -1), C(0, -1), C(1, -1)) in rows
    assert (C(-1, -1), C(-1, 0), C(-1, 1)) in rows
    assert (C(-1, -1), C(0, 0), C(1, 1)) in rows


def test_affected_rows_edge_middle():
    rows = Board.new(TIC_TAC_TOE).affected_rows(C(-1, 0))
    assert rows == [
        (C(-1, 0), C(0, 0), C(1, 0)),
        (C(-1, -1), C(-1, 0), C(-1, 1)),
        (C(-1, 0), C(0, 1)),
        (C(-1, 0), C(0, -1)),
    ]


def test_affected_rows_off_main_diagonal_on_gomoku():
    rows = Board.new(GOMOKU).affected_rows(C(3, 0))
    assert len(rows) == 4
    descending = rows[2]
    assert descending[0] == C(-4, -7)
    assert descending[-1] == C(7, 4)
    assert len(descending) == 12
    ascending = rows[3]
    assert ascending[0] == C(-4, 7)
    assert ascending[-1] == C(7, -4)


def test_affected_rows_non_square_board():
    wide = GameConfig(min_x=-2, max_x=2, min_y=-1, max_y=1, goal=3)
    rows = Board.new(wide).affected_rows(C(0, 0))
    assert [len(r) for r in rows] == [5, 3, 3, 3]
    # corner of the wide board: the ascending diagonal leaves the board at once
    rows = Board.new(wide).affected_rows(C(2, 1))
    assert rows == [
        (C(-2, 1), C(-1, 1), C(0, 1), C(1, 1), C(2, 1)),
        (C(2, -1), C(2, 0), C(2, 1)),
        (C(0, -1), C(1, 0), C(2, 1)),
    ]


def test_affected_rows_degenerate_boards():
    column = GameConfig(min_x=0, max_x=0, min_y=-2, max_y=2, goal=3)
    assert Board.new(column).affected_rows(C(0, 0)) == [
        (C(0, -2), C(0, -1), C(0, 0), C(0, 1), C(0, 2)),
    ]
    single = GameConfig(min_x=0, max_x=0, min_y=0, max_y=0, goal=1)
    assert Board.new(single).affected_rows(C(0, 0)) == [(C(0, 0),)]


def test_affected_rows_off_board_is_empty():
    assert Board.new(TIC_TAC_TOE).affected_rows(C(4, 4)) == []


def test_is_winning_move_missing():
    b = _board(TIC_TAC_TOE, [(-1, -1, X), (0, -1, X)])
    assert b.is_winning_move(C(1, -1), 3) is False


def test_is_winning_move_blocked():
    b = _board(TIC_TAC_TOE, [(-1, -1, X), (0, -1, X), (1, -1, O)])
    assert b.is_winning_move(C(1, -1), 3) is False


def test_is_winning_move():
    b = _board(TIC_TAC_TOE, [(-1, -1, X), (0, -1, X), (1, -1, X)])
    assert b.is_winning_move(C(1, -1), 3) is True
    assert b.winning_run(C(1, -1), 3) == (C(-1, -1), C(0, -1), C(1, -1))


@pytest.mark.parametrize("cells", [
    [(0, -1), (0, 0), (0, 1)],
    [(-1, -1), (0, 0), (1, 1)],
    [(-1, 1), (0, 0), (1, -1)],
])
def test_is_winning_move_all_directions(cells):
    b = _board(TIC_TAC_TOE, [(x, y, O) for x, y in cells])
    for x, y in cells:
        assert b.is_winning_move(C(x, y), 3)


def test_gomoku_diagonal_away_from_center():
    cells = [(1, -2), (2, -1), (3, 0), (4, 1), (5, 2)]
    b = _board(GOMOKU, [(x, y, X) for x, y in cells])
    assert b.is_winning_move(C(3, 0), 5)
    assert b.winning_run(C(5, 2), 5) == tuple(C(x, y) for x, y in cells)

    cells = [(0, 4), (1, 3), (2, 2), (3, 1), (4, 0)]
    b = _board(GOMOKU, [(x, y, O) for x, y in cells])
    assert b.is_winning_move(C(2, 2), 5)


def test_window_must_contain_the_move():
    row = [(x, 0, X) for x in range(-7, -2)]
    b = _board(GOMOKU, row + [(3, 0, X)])
    assert b.is_winning_move(C(-5, 0), 5) is True
    assert b.is_winning_move(C(3, 0), 5) is False


def test_gap_in_window_is_not_a_win():
    b = _board(GOMOKU, [(x, 0, X) for x in (0, 1, 2, 4, 5)])
    assert b.is_winning_move(C(2, 0), 5) is False


def test_overline_counts_as_win():
    b = _board(GOMOKU, [(x, 0, X) for x in range(0, 6)])
    assert b.is_winning_move(C(5, 0), 5) is True


def test_goal_longer_than_line_never_wins():
    narrow = GameConfig(min_x=-2, max_x=2, min_y=-1, max_y=1, goal=5)
    b = _board(narrow, [(0, y, X) for y in (-1, 0, 1)])
    assert b.is_winning_move(C(0, 0), 5) is False
    b = _board(narrow, [(x, 0, X) for x in range(-2, 3)])
    assert b.is_winning_move(C(0, 0), 5) is True


def test_is_winning_move_on_empty_or_off_board_cell():
    b = Board.new(TIC_TAC_TOE)
    assert b.is_winning_move(C(0, 0), 3) is False
    assert b.is_winning_move(C(9, 9), 3) is False


def test_to_array_encoding():
    b = _board(TIC_TAC_TOE, [(1, -1, X), (-1, 1, O)])
    arr = b.to_array()
    assert arr.shape == (3, 3)
    assert arr.dtype == np.int8
    assert arr[0, 2] == 1
    assert arr[2, 0] == 2
    assert int(arr.sum()) == 3


def test_to_array_non_square():
    wide = GameConfig(min_x=-2, max_x=2, min_y=-1, max_y=1, goal=3)
    arr = _board(wide, [(2, 1, O)]).to_array()
    assert arr.shape == (3, 5)
    assert arr[2, 4] == 2


@pytest.mark.parametrize("goal", [0, -1, -3])
def test_non_positive_goal_never_wins(goal: int):
    b = _board(TIC_TAC_TOE, [(-1, -1, X), (0, -1, X), (1, -1, X)])
    assert b.winning_run(C(1, -1), goal) is None
    assert b.is_winning_move(C(1, -1), goal) is False
