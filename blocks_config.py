
CONFIG = {
    "COLS": 10,
    "ROWS": 20,
    "CELL_SIZE": 30,
    "BASE_TICK_MS": 1000,
    "TICK_STEP_MS": 100,
    "MIN_TICK_MS": 100,
    "SEED": None,
    "FPS": 60,
}
