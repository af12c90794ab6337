
"""Shape catalog, color palette, rotation"""
from typing import Dict, Tuple

Shape = Tuple[Tuple[int, ...], ...]

SHAPES: Dict[str, Shape] = {
    "I": ((1,1,1,1),),
    "T": ((1,1,1),(0,1,0)),
    "L": ((1,1,1),(1,0,0)),
    "J": ((1,1,1),(0,0,1)),
    "O": ((1,1),(1,1)),
    "Z": ((1,1,0),(0,1,1)),
    "S": ((0,1,1),(1,1,0)),
}

KINDS: Tuple[str, ...] = tuple(SHAPES)

COLORS: Tuple[str, ...] = ("cyan", "blue", "orange", "yellow", "green", "purple", "red")

def rotate_cw(m: Shape) -> Shape: return tuple(zip(*m[::-1]))

def width(m: Shape) -> int: return len(m[0])

def height(m: Shape) -> int: return len(m)
