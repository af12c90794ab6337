
"""Piece randomizers: uniform shape/color source and a replay source for tests"""
import random
from typing import Iterable, List, Optional, Tuple

from blocks_geometry import COLORS, KINDS

Entry = Tuple[str, str]

class PieceSource:
    def __init__(self, seed: Optional[int] = None):
        # None seeds from the OS
        self.rng = random.Random(seed)

    def next(self) -> Entry:
        """Pick a shape kind and a color, independently and uniformly."""
        return self.rng.choice(KINDS), self.rng.choice(COLORS)

class SequenceSource:
    """Replays a fixed list of (kind, color) entries, cycling when exhausted."""
    def __init__(self, entries: Iterable[Entry]):
        self.entries: List[Entry] = list(entries)
        if not self.entries:
            raise ValueError("SequenceSource needs at least one entry")
        self.index = 0

    def next(self) -> Entry:
        entry = self.entries[self.index % len(self.entries)]
        self.index += 1
        return entry
