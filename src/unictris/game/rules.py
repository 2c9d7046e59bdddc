from __future__ import annotations

from dataclasses import dataclass


LEVEL_TICK_INCREASE = 6000
FRAMES_PER_DROP = 30
# Unsigned 64-bit tick counter wraps at its max value
TICK_MODULUS = 0xFFFF_FFFF_FFFF_FFFF


@dataclass(frozen=True)
class SpeedCurve:
    level_tick_increase: int = LEVEL_TICK_INCREASE
    frames_per_drop: int = FRAMES_PER_DROP

    def level(self, tick: int) -> int:
        return 1 + tick // self.level_tick_increase

    def gravity_due(self, tick: int) -> bool:
        """Gravity fires on ``level`` ticks out of every ``frames_per_drop``,
        so on every tick once ``level >= frames_per_drop``."""
        return tick % self.frames_per_drop <= tick // self.level_tick_increase


def next_tick(tick: int) -> int:
    return (tick + 1) % TICK_MODULUS
