from blocks_engine import Game
from blocks_rng import SequenceSource


def make_game(*entries, rows=20, cols=10):
    """A started game whose pieces come from the given (kind, color) entries."""
    if not entries:
        entries = (("O", "yellow"),)
    game = Game(SequenceSource(entries), rows=rows, cols=cols)
    game.start()
    return game


def fill_row(board, y, color="blue", gap=None):
    for x in range(len(board[y])):
        board[y][x] = None if x == gap else color
