
"""Board helpers: occupancy, collide, merge, line clear"""
from typing import List, Optional, Tuple

from blocks_piece import Piece

Board = List[List[Optional[str]]]

def create_board(rows: int, cols: int) -> Board:
    if rows <= 0 or cols <= 0:
        raise ValueError(f"board size must be positive, got {rows}x{cols}")
    return [[None] * cols for _ in range(rows)]

def is_occupied(board: Board, x: int, y: int) -> bool:
    rows, cols = len(board), len(board[0])
    if x < 0 or x >= cols or y >= rows: return True
    if y < 0: return False
    return board[y][x] is not None

def collides(board: Board, piece: Piece) -> bool:
    return any(is_occupied(board, x, y) for x, y in piece.cells())

def merge(board: Board, piece: Piece) -> Board:
    """Return a copy of the board with the piece written in; cells above row 0 are dropped."""
    merged = [row[:] for row in board]
    rows, cols = len(board), len(board[0])
    for x, y in piece.cells():
        if 0 <= y < rows and 0 <= x < cols:
            merged[y][x] = piece.color
    return merged

def clear_full_lines(board: Board) -> Tuple[Board, int]:
    cols = len(board[0])
    kept = [row[:] for row in board if not all(cell is not None for cell in row)]
    cleared = len(board) - len(kept)
    return [[None] * cols for _ in range(cleared)] + kept, cleared
