from __future__ import annotations

from unictris.game import SpeedCurve
from unictris.game.rules import TICK_MODULUS, next_tick


def test_level_progression():
    curve = SpeedCurve()
    assert curve.level(0) == 1
    assert curve.level(5999) == 1
    assert curve.level(6000) == 2
    assert curve.level(18000) == 4


def test_gravity_fires_more_often_as_levels_rise():
    curve = SpeedCurve()
    first = sum(curve.gravity_due(t) for t in range(0, 6000))
    second = sum(curve.gravity_due(t) for t in range(6000, 12000))
    assert first == 200
    assert second == 400


def test_gravity_every_tick_once_capped():
    curve = SpeedCurve()
    start = 30 * 6000
    assert all(curve.gravity_due(t) for t in range(start, start + 90))
    assert not all(curve.gravity_due(t) for t in range(start - 2 * 6000, start - 6000))


def test_tick_counter_wraps():
    assert next_tick(0) == 1
    assert next_tick(TICK_MODULUS - 1) == 0
