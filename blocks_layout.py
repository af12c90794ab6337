# blocks_layout.py
from dataclasses import dataclass
from typing import Optional
from blocks_config import CONFIG

@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int
    preview_cell: int
    preview_x: int
    preview_y: int

def compute_dims(cols: Optional[int] = None, rows: Optional[int] = None) -> Dims:
    cols = CONFIG["COLS"] if cols is None else cols
    rows = CONFIG["ROWS"] if rows is None else rows
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    panel_w = 200

    board_w = cols * cell
    board_h = rows * cell

    total_w = margin + board_w + margin + panel_w + margin
    total_h = margin + board_h + margin

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    # Next-piece preview: 4x4 box of smaller cells below the score block
    preview_cell = 20
    preview_x = panel_x + 20
    preview_y = panel_y + 150

    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y,
        preview_cell=preview_cell, preview_x=preview_x, preview_y=preview_y,
    )
