import pytest

from ptsd.clock import Clock, default_clock


class _FakeCounter:
    def __init__(self, start=0):
        self.value = start

    def __call__(self):
        return self.value


def test_initial_delta_is_zero():
    counter = _FakeCounter(50)
    clock = Clock(counter=counter, frequency=1000)
    assert clock.delta_ms == 0.0


def test_elapsed_measured_from_creation():
    counter = _FakeCounter(100)
    clock = Clock(counter=counter, frequency=1000)
    assert clock.elapsed_ms() == 0.0
    counter.value = 350
    assert clock.elapsed_ms() == pytest.approx(250.0)


def test_frequency_scales_ticks():
    counter = _FakeCounter(0)
    clock = Clock(counter=counter, frequency=2000)
    counter.value = 2000
    assert clock.elapsed_ms() == pytest.approx(1000.0)


def test_update_computes_delta_between_frames():
    counter = _FakeCounter(10)
    clock = Clock(counter=counter, frequency=1000)
    counter.value = 26
    clock.update()
    assert clock.delta_ms == pytest.approx(16.0)
    counter.value = 59
    clock.update()
    assert clock.delta_ms == pytest.approx(33.0)


def test_update_without_time_passing_gives_zero_delta():
    counter = _FakeCounter(10)
    clock = Clock(counter=counter, frequency=1000)
    counter.value = 40
    clock.update()
    clock.update()
    assert clock.delta_ms == 0.0


def test_delta_seconds_is_deprecated_and_scaled():
    counter = _FakeCounter(0)
    clock = Clock(counter=counter, frequency=1000)
    counter.value = 500
    clock.update()
    with pytest.warns(DeprecationWarning):
        seconds = clock.delta_seconds
    assert seconds == pytest.approx(clock.delta_ms / 1000.0)


def test_invalid_frequency_rejected():
    with pytest.raises(ValueError):
        Clock(counter=_FakeCounter(), frequency=0)


def test_real_clock_elapsed_is_non_decreasing():
    clock = Clock()
    first = clock.elapsed_ms()
    second = clock.elapsed_ms()
    assert 0.0 <= first <= second


def test_default_clock_is_shared():
    first = default_clock()
    second = default_clock()
    assert first is second
    earlier = first.elapsed_ms()
    later = second.elapsed_ms()
    assert 0.0 <= earlier <= later