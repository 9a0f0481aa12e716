import random

import pytest

from fmsound.lfo import LfoController, LfoParams

SPEED = 75
QPERIOD = 900 * 150 // (4 * SPEED)


def _params(wave_form, sync=False):
    return LfoParams(
        wave_form=wave_form, speed=SPEED, pmd=2, pms=3, amd=4,
        ams=(1, 0, 2, 0), sync=sync,
    )


def _step(controller, count):
    for _ in range(count):
        controller.increment()


def test_square_starts_at_positive_maximum():
    lfo = LfoController()
    lfo.init_for_timbre(_params(1))
    assert lfo.adj_p == pytest.approx(2 * 3 / 2)
    assert lfo.adj_v == pytest.approx([4 * 1 / 2, 0, 4 * 2 / 2, 0])


def test_square_flips_every_half_period():
    lfo = LfoController()
    lfo.init_for_timbre(_params(1))
    start = lfo.adj_p
    _step(lfo, QPERIOD)
    assert lfo.adj_p == pytest.approx(start)
    _step(lfo, QPERIOD)
    assert lfo.adj_p == pytest.approx(-start)
    _step(lfo, 2 * QPERIOD)
    assert lfo.adj_p == pytest.approx(start)


def test_square_sync_restarts_phase():
    lfo = LfoController()
    params = _params(1, sync=True)
    lfo.init_for_timbre(params)
    start = lfo.adj_p
    lfo.init_for_keyon(params)
    assert lfo.adj_p == pytest.approx(-start)


def test_no_sync_keyon_keeps_state():
    lfo = LfoController()
    params = _params(1, sync=False)
    lfo.init_for_timbre(params)
    start = lfo.adj_p
    lfo.init_for_keyon(params)
    assert lfo.adj_p == start


def test_triangle_symmetric_and_returns_to_zero():
    lfo = LfoController()
    lfo.init_for_timbre(_params(2))
    assert lfo.adj_p == 0
    _step(lfo, QPERIOD - 1)
    peak = lfo.adj_p
    assert 0 < peak <= 3.0
    _step(lfo, 2 * QPERIOD)
    assert lfo.adj_p == pytest.approx(-peak)
    _step(lfo, QPERIOD + 1)
    assert lfo.adj_p == pytest.approx(0.0, abs=1e-9)
    assert lfo.adj_v == pytest.approx([0.0] * 4, abs=1e-9)


def test_triangle_stays_within_bounds():
    lfo = LfoController()
    lfo.init_for_timbre(_params(2))
    for _ in range(4 * QPERIOD):
        lfo.increment()
        assert abs(lfo.adj_p) <= 3.0 + 1e-9
        assert abs(lfo.adj_v[2]) <= 4.0 + 1e-9


def test_saw_rises_then_negates():
    lfo = LfoController()
    lfo.init_for_timbre(_params(0))
    _step(lfo, 2 * QPERIOD - 1)
    before = lfo.adj_p
    assert before > 0
    lfo.increment()
    assert lfo.adj_p == pytest.approx(-before)


def test_zero_speed_never_changes():
    lfo = LfoController()
    lfo.init_for_timbre(LfoParams(wave_form=2, speed=0, pmd=2, pms=3))
    _step(lfo, 100)
    assert lfo.adj_p == 0


def test_sample_and_hold_is_bounded_and_reproducible():
    first = LfoController(random.Random(7))
    second = LfoController(random.Random(7))
    first.init_for_timbre(_params(3))
    second.init_for_timbre(_params(3))
    assert first.adj_p == second.adj_p
    assert abs(first.adj_p) <= 3.0
    _step(first, QPERIOD)
    held = first.adj_p
    assert abs(first.adj_v[0]) <= 2.0
    _step(first, QPERIOD - 1)
    assert first.adj_p == held