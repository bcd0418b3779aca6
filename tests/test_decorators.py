import logging

import femur
from femur import wrapper
from femur.utils.decorators import log_duration, timed


def test_timed_decorator_reports_durations():
    durations = []

    @timed(durations.append)
    def add(a, b):
        """Add two numbers."""
        return a + b

    assert add(1, 2) == 3
    assert add.__name__ == "add"
    assert add.__doc__ == "Add two numbers."
    assert len(durations) == 1


def test_timed_decorator_respects_rate(monkeypatch):
    monkeypatch.setattr(wrapper.random, "random", lambda: 0.75)
    durations = []

    @timed(durations.append, rate=0.5)
    def identity(x):
        return x

    assert identity("x") == "x"
    assert durations == []


def test_timed_decorator_handles_callbacks():
    events = []

    @timed(lambda dur: events.append("duration"))
    def fetch(key, cb):
        cb(key.upper())

    fetch("k", events.append)

    assert events == ["duration", "K"]


def test_log_duration_logs_one_record_per_call(caplog):
    caplog.set_level(logging.INFO, logger="femur")

    @log_duration("store.get")
    def get(key):
        return {"a": 1}.get(key)

    assert get("a") == 1
    assert get("b") is None

    records = [r for r in caplog.records if r.name == "femur.telemetry"]
    assert len(records) == 2
    assert all(r.span == "store.get" for r in records)
    assert all(r.resolution == "ms" for r in records)
    assert records[0].getMessage().startswith("span=store.get duration=")


def test_log_duration_defaults_to_qualified_name(caplog):
    caplog.set_level(logging.INFO, logger="femur")

    @log_duration(resolution="ns")
    def compute():
        return 7

    assert compute() == 7
    record = next(r for r in caplog.records if r.name == "femur.telemetry")
    assert record.span.endswith("compute")
    assert record.resolution == "ns"


def test_public_api_exports():
    for name in femur.__all__:
        assert hasattr(femur, name)
