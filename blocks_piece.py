
"""Piece model: spawn, translate, rotate"""
from dataclasses import dataclass, replace
from typing import Optional

from blocks_config import CONFIG
from blocks_geometry import SHAPES, Shape, rotate_cw, width

@dataclass(frozen=True)
class Piece:
    t: str
    shape: Shape
    color: str
    x: int
    y: int

    @staticmethod
    def spawn(t: str, color: str, cols: Optional[int] = None) -> "Piece":
        if cols is None:
            cols = CONFIG["COLS"]
        shape = SHAPES[t]
        return Piece(t, shape, color, (cols - width(shape)) // 2, 0)

    def moved(self, dx: int, dy: int) -> "Piece":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def rotated(self) -> "Piece":
        return replace(self, shape=rotate_cw(self.shape))

    def cells(self):
        """Yield board (x, y) of every occupied cell, including ones above the grid."""
        for dy, row in enumerate(self.shape):
            for dx, v in enumerate(row):
                if v:
                    yield self.x + dx, self.y + dy
