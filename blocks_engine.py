
"""
Game engine: the single owner of board, pieces, score and mode.

The engine never raises for game-rule outcomes. Blocked moves return False,
commands sent in a mode that does not accept them are ignored, and the end
of a game is reported through ``mode``.

Mode transitions:

  READY / GAME_OVER --start--> RUNNING
  RUNNING <--toggle_pause--> PAUSED
  RUNNING --lock at row 0--> GAME_OVER
  any --restart--> RUNNING
"""
from __future__ import annotations
import enum
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from blocks_board import Board, clear_full_lines, collides, create_board, merge
from blocks_config import CONFIG
from blocks_piece import Piece
from blocks_rng import PieceSource

logger = logging.getLogger(__name__)

# Points for clearing 1..4 lines in one lock, indexed by lines - 1
LINE_SCORES = (100, 300, 600, 1000)
SCORE_PER_LEVEL = 1000


class Mode(enum.Enum):
    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Command(enum.Enum):
    START = "start"
    TICK = "tick"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    ROTATE = "rotate"
    SOFT_DROP = "soft_drop"
    HARD_DROP = "hard_drop"
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"


def line_score(cleared: int) -> int:
    assert 1 <= cleared <= len(LINE_SCORES), f"impossible line clear count {cleared}"
    return LINE_SCORES[cleared - 1]


def level_for_score(score: int) -> int:
    return score // SCORE_PER_LEVEL + 1


@dataclass(frozen=True)
class LockResult:
    """Outcome of one lock event."""
    lines: int
    points: int
    game_over: bool


@dataclass(frozen=True)
class Snapshot:
    board: Tuple[Tuple[Optional[str], ...], ...]
    active: Optional[Piece]
    next: Optional[Piece]
    score: int
    level: int
    lines: int
    mode: Mode


class Game:
    def __init__(self, source=None, rows: Optional[int] = None, cols: Optional[int] = None):
        self.rows = CONFIG["ROWS"] if rows is None else rows
        self.cols = CONFIG["COLS"] if cols is None else cols
        self.source = source if source is not None else PieceSource(CONFIG["SEED"])
        self.board: Board = create_board(self.rows, self.cols)
        self.active: Optional[Piece] = None
        self.next: Optional[Piece] = None
        self.score = 0
        self.level = 1
        self.lines = 0
        self.mode = Mode.READY

    # ---------- lifecycle ----------
    def start(self) -> bool:
        if self.mode not in (Mode.READY, Mode.GAME_OVER):
            return False
        self.board = create_board(self.rows, self.cols)
        self.score = 0
        self.level = 1
        self.lines = 0
        self.active = self._spawn()
        self.next = self._spawn()
        self.mode = Mode.RUNNING
        logger.debug("game started: active=%s next=%s", self.active.t, self.next.t)
        return True

    def restart(self) -> bool:
        self.mode = Mode.GAME_OVER
        return self.start()

    def toggle_pause(self) -> bool:
        if self.mode is Mode.RUNNING:
            self.mode = Mode.PAUSED
        elif self.mode is Mode.PAUSED:
            self.mode = Mode.RUNNING
        else:
            return False
        return True

    def _spawn(self) -> Piece:
        t, color = self.source.next()
        return Piece.spawn(t, color, self.cols)

    # ---------- movement ----------
    def _try(self, candidate: Piece) -> bool:
        if collides(self.board, candidate):
            return False
        self.active = candidate
        return True

    def move_left(self) -> bool:
        return self.mode is Mode.RUNNING and self._try(self.active.moved(-1, 0))

    def move_right(self) -> bool:
        return self.mode is Mode.RUNNING and self._try(self.active.moved(1, 0))

    def rotate(self) -> bool:
        return self.mode is Mode.RUNNING and self._try(self.active.rotated())

    def tick(self) -> Optional[LockResult]:
        """Advance the active piece one row; lock it if the row below is blocked."""
        if self.mode is not Mode.RUNNING:
            return None
        if self._try(self.active.moved(0, 1)):
            return None
        return self._lock()

    def soft_drop(self) -> Optional[LockResult]:
        return self.tick()

    def hard_drop(self) -> Optional[LockResult]:
        if self.mode is not Mode.RUNNING:
            return None
        while not collides(self.board, self.active.moved(0, 1)):
            self.active = self.active.moved(0, 1)
        return self._lock()

    # ---------- lock / score ----------
    def _lock(self) -> LockResult:
        piece = self.active
        self.board, cleared = clear_full_lines(merge(self.board, piece))
        points = 0
        if cleared:
            points = line_score(cleared)
            self.score += points
            self.lines += cleared
            level = level_for_score(self.score)
            if level != self.level:
                logger.debug("level up: %d -> %d", self.level, level)
            self.level = level
            logger.debug("cleared %d line(s) for %d points, score=%d", cleared, points, self.score)
        # A piece that locks while still on row 0 ends the game, even if the
        # spawn position itself was free.
        if piece.y == 0:
            self.mode = Mode.GAME_OVER
            logger.info("game over: score=%d level=%d lines=%d", self.score, self.level, self.lines)
            return LockResult(cleared, points, True)
        self.active = self.next
        self.next = self._spawn()
        logger.debug("locked %s at (%d, %d); next=%s", piece.t, piece.x, piece.y, self.next.t)
        return LockResult(cleared, points, False)

    # ---------- external surface ----------
    def dispatch(self, command: Command):
        return getattr(self, command.value)()

    def snapshot(self) -> Snapshot:
        return Snapshot(
            board=tuple(tuple(row) for row in self.board),
            active=self.active, next=self.next,
            score=self.score, level=self.level, lines=self.lines,
            mode=self.mode,
        )
