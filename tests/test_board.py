import random

import pytest

from blocks_board import clear_full_lines, collides, create_board, is_occupied, merge
from blocks_geometry import SHAPES, height, rotate_cw, width
from blocks_piece import Piece

ROWS, COLS = 20, 10


def piece(t, x, y, color="red"):
    return Piece(t, SHAPES[t], color, x, y)


def test_create_board_is_empty():
    board = create_board(ROWS, COLS)
    assert len(board) == ROWS
    assert all(row == [None] * COLS for row in board)


def test_create_board_rejects_bad_size():
    with pytest.raises(ValueError):
        create_board(0, 10)


def test_is_occupied_bounds():
    board = create_board(ROWS, COLS)
    assert is_occupied(board, -1, 5)
    assert is_occupied(board, COLS, 5)
    assert is_occupied(board, 3, ROWS)
    assert not is_occupied(board, 3, -1)
    assert not is_occupied(board, 3, ROWS - 1)
    board[4][3] = "green"
    assert is_occupied(board, 3, 4)


def test_collides_at_exact_boundaries():
    board = create_board(ROWS, COLS)
    assert collides(board, piece("I", -1, 0))
    assert collides(board, piece("I", COLS - 3, 0))  # right cell lands on x == COLS
    assert collides(board, piece("I", 0, ROWS))
    assert not collides(board, piece("I", 0, ROWS - 1))
    assert not collides(board, piece("I", COLS - 4, ROWS - 1))


def test_every_shape_and_rotation_respects_boundaries():
    board = create_board(ROWS, COLS)
    for t, shape in SHAPES.items():
        for _ in range(4):
            w, h = width(shape), height(shape)
            p = Piece(t, shape, "red", 0, 0)
            assert collides(board, p.moved(-1, 0)), t
            assert collides(board, p.moved(COLS - w + 1, 0)), t
            assert collides(board, p.moved(0, ROWS - h + 1)), t
            assert not collides(board, p.moved(0, ROWS - h)), t
            assert not collides(board, p.moved(COLS - w, ROWS - h)), t
            shape = rotate_cw(shape)


def test_cells_above_grid_never_collide():
    board = create_board(ROWS, COLS)
    fill = piece("O", 4, -2)
    assert not collides(board, fill)
    board[0][4] = "blue"
    assert not collides(board, fill)
    assert collides(board, fill.moved(0, 1))


def test_collides_with_locked_cells():
    board = create_board(ROWS, COLS)
    board[10][5] = "blue"
    assert collides(board, piece("T", 4, 9))   # T stem at (5, 10)
    assert not collides(board, piece("T", 4, 8))


def test_merge_writes_color_and_drops_cells_above_grid():
    board = create_board(ROWS, COLS)
    merged = merge(board, piece("O", 0, -1, "yellow"))
    assert merged[0][:2] == ["yellow", "yellow"]
    assert sum(cell is not None for row in merged for cell in row) == 2
    assert all(cell is None for row in board for cell in row)


def test_clear_full_lines_compacts_and_keeps_order():
    board = create_board(5, 3)
    board[1] = ["a", "a", "a"]
    board[2] = ["b", None, None]
    board[3] = ["c", "c", "c"]
    board[4] = [None, "d", None]
    cleared_board, cleared = clear_full_lines(board)
    assert cleared == 2
    assert cleared_board == [
        [None, None, None],
        [None, None, None],
        [None, None, None],
        ["b", None, None],
        [None, "d", None],
    ]


def test_clear_full_lines_nothing_full():
    board = create_board(4, 4)
    board[3][0] = "x"
    out, cleared = clear_full_lines(board)
    assert cleared == 0
    assert out == board


def test_clear_full_lines_on_random_boards():
    rng = random.Random(7)
    for _ in range(200):
        rows, cols = rng.randint(1, 8), rng.randint(1, 6)
        board = [[rng.choice((None, "x", "y")) if rng.random() < 0.8 else "z" for _ in range(cols)]
                 for _ in range(rows)]
        full = [i for i, row in enumerate(board) if all(row)]
        survivors = [row for row in board if not all(row)]
        out, cleared = clear_full_lines(board)
        assert cleared == len(full)
        assert len(out) == rows
        assert all(len(row) == cols for row in out)
        assert out[:cleared] == [[None] * cols] * cleared
        assert out[cleared:] == survivors
