
"""Tick timing: level-based interval and a dt-driven scheduler"""
from blocks_config import CONFIG


def tick_interval_ms(level: int) -> int:
    base, step = CONFIG["BASE_TICK_MS"], CONFIG["TICK_STEP_MS"]
    return max(CONFIG["MIN_TICK_MS"], base - (level - 1) * step)


class TickScheduler:
    """
    Fires game.tick() once per elapsed interval.

    The interval is read from the level after each tick returns, so a
    level-up shortens the very next wait. Pausing does not stop the
    scheduler; the engine simply ignores ticks while paused.
    """
    def __init__(self, game):
        self.game = game
        self.elapsed_ms = 0.0

    @property
    def interval_ms(self) -> int:
        return tick_interval_ms(self.game.level)

    def reset(self):
        self.elapsed_ms = 0.0

    def update(self, dt_ms: float) -> int:
        self.elapsed_ms += dt_ms
        fired = 0
        while self.elapsed_ms >= self.interval_ms:
            self.elapsed_ms -= self.interval_ms
            self.game.tick()
            fired += 1
        return fired
