import random

import pytest

from bullethell.util import Interval, Timer, random_range


def test_random_range_stays_in_bounds():
    rng = random.Random(1234)
    values = [random_range(-5, 5, rng) for _ in range(500)]
    assert min(values) >= -5
    assert max(values) <= 5


def test_random_range_reaches_both_ends():
    rng = random.Random(99)
    values = {random_range(1, 3, rng) for _ in range(300)}
    assert values == {1, 2, 3}


def test_random_range_single_value():
    assert random_range(7, 7) == 7


def test_random_range_is_reproducible_with_seeded_rng():
    first = [random_range(10, 30, random.Random(5)) for _ in range(3)]
    second = [random_range(10, 30, random.Random(5)) for _ in range(3)]
    assert first == second


def test_random_range_rejects_empty_range():
    with pytest.raises(ValueError):
        random_range(5, 1)


class FakeClock:
    def __init__(self, *readings):
        self._readings = list(readings)

    def __call__(self):
        return self._readings.pop(0)


def test_interval_first_poll_fires():
    interval = Interval(0.5, FakeClock(10.0))
    assert interval.poll() is True


def test_interval_waits_for_delay():
    interval = Interval(0.5, FakeClock(10.0, 10.2, 10.5, 10.6))
    assert interval.poll() is True
    assert interval.poll() is False
    assert interval.poll() is True
    assert interval.poll() is False


def test_timer_starts_at_zero_and_counts():
    timer = Timer(1.0, 0.25)
    assert timer.time == 0.0
    timer.count()
    assert timer.time == pytest.approx(0.25)


def test_timer_overflow():
    timer = Timer(1.0, 0.25)
    for _ in range(3):
        timer.count()
    assert not timer.has_overflowed()
    timer.count()
    assert timer.has_overflowed()


def test_timer_reset():
    timer = Timer(1.0, 0.5)
    timer.count()
    timer.count()
    assert timer.has_overflowed()
    timer.reset()
    assert timer.time == 0.0
    assert not timer.has_overflowed()