import time
from types import SimpleNamespace

import pytest

from femur.utils import timing
from femur.utils.exceptions import FemurError, InvalidResolutionError, TimerNotStartedError
from femur.utils.timing import Resolution, Timer, start_timer


def test_duration_without_start_raises():
    timer = Timer()
    with pytest.raises(TimerNotStartedError) as exc:
        timer.duration()
    assert exc.value.code == "FEM-TMR-0001"
    assert isinstance(exc.value, RuntimeError)


def test_duration_rejects_unknown_resolution():
    timer = start_timer()
    with pytest.raises(InvalidResolutionError) as exc:
        timer.duration("bogus")
    assert exc.value.code == "FEM-ARG-0001"
    assert exc.value.resolution == "bogus"
    assert isinstance(exc.value, ValueError)
    assert isinstance(exc.value, FemurError)


def test_precondition_checked_before_resolution():
    with pytest.raises(TimerNotStartedError):
        Timer().duration("bogus")


def test_resolutions_agree():
    timer = start_timer()
    time.sleep(0.02)
    s = timer.duration("s")
    ms = timer.duration("ms")
    ns = timer.duration("ns")

    assert s == 0
    assert ms >= 20
    assert ns >= ms * 1_000_000
    # ms was read before ns, so it can only lag behind.
    assert ns // 1_000_000 - ms < 50


def test_duration_floors_to_unit(monkeypatch):
    clock = iter([1_000, 1_000 + 2_999_999, 1_000 + 2_999_999])
    monkeypatch.setattr(timing, "time", SimpleNamespace(perf_counter_ns=lambda: next(clock)))

    timer = start_timer()
    assert timer.duration("ms") == 2
    assert timer.duration("s") == 0


def test_duration_is_non_decreasing_from_same_start():
    timer = start_timer()
    first = timer.duration("ns")
    second = timer.duration("ns")
    assert 0 <= first <= second


def test_restart_resets_measurement(monkeypatch):
    clock = iter([0, 5_000_000, 5_000_000, 6_000_000])
    monkeypatch.setattr(timing, "time", SimpleNamespace(perf_counter_ns=lambda: next(clock)))

    timer = Timer()
    timer.start()
    timer.start()
    assert timer.duration() == 0
    assert timer.elapsed_ms == 1


def test_resolution_accepts_enum_and_strings():
    timer = start_timer()
    assert isinstance(timer.duration(Resolution.NS), int)
    assert isinstance(timer.duration("ns"), int)
    assert timer.started
    assert not Timer().started


def test_duration_none_means_milliseconds(monkeypatch):
    clock = iter([0, 7_654_321])
    monkeypatch.setattr(timing, "time", SimpleNamespace(perf_counter_ns=lambda: next(clock)))

    timer = start_timer()

    assert timer.duration(None) == 7
