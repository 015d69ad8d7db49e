# tests/io/test_service_logging.py
import io
import json
import logging

import pytest

from ride_match.domain.entities.driver import Driver
from ride_match.domain.entities.geography import Location
from ride_match.domain.entities.rider import Rider
from ride_match.io.business_events import TripCreatedBiz, TripRejectedBiz, TripRequestedBiz
from ride_match.io.recorder import JsonlSink, MemorySink, Recorder
from ride_match.io.service_logging import ServiceLogging, default_json_logger
from ride_match.policy.dispatch import NearestDriverDispatch
from ride_match.policy.pricing import StandardPricing
from ride_match.services.ride_service import RideService


@pytest.fixture
def buf():
    return io.StringIO()


def _lines(buf) -> list[dict]:
    return [json.loads(line) for line in buf.getvalue().splitlines()]


def _rider() -> Rider:
    return Rider(id=5, name="Alex", pickup=Location(0.0, 0.0), dropoff=Location(4.0, 3.0))


def test_json_logger_writes_one_object_per_line(buf):
    log = default_json_logger(level="DEBUG", stream=buf)
    hooks = ServiceLogging(run_id="r-1", logger=log)
    s = RideService(StandardPricing(), NearestDriverDispatch(), hooks=hooks)
    s.add_driver(Driver(id=1, name="Maya", rating=4.98, position=Location(1.0, 2.0)))
    s.request_trip(_rider())

    recs = _lines(buf)
    assert [r["msg"] for r in recs] == ["driver_added", "trip_requested", "trip_created"]
    assert all(r["run_id"] == "r-1" and r["logger"] == "ride_match" for r in recs)
    created = recs[-1]
    assert created["level"] == "INFO"
    assert created["trip_id"] == 1 and created["driver_id"] == 1 and created["rider_id"] == 5
    assert created["pricing"] == "Standard"


def test_level_filters_debug(buf):
    log = default_json_logger(level="INFO", stream=buf)
    s = RideService(StandardPricing(), NearestDriverDispatch(), hooks=ServiceLogging(logger=log))
    s.add_driver(Driver(id=1, name="Maya", rating=4.98, position=Location(1.0, 2.0)))
    s.set_pricing_strategy(StandardPricing())
    assert [r["msg"] for r in _lines(buf)] == ["strategy_changed"]


def test_rejections_are_logged_with_reason(buf):
    log = default_json_logger(level="INFO", stream=buf)
    s = RideService(StandardPricing(), None, hooks=ServiceLogging(logger=log))
    s.request_trip(_rider())
    s.set_dispatch_strategy(NearestDriverDispatch())
    s.request_trip(_rider())

    rejected = [r for r in _lines(buf) if r["msg"] == "trip_rejected"]
    assert [(r["level"], r["reason"]) for r in rejected] == [
        ("WARNING", "not_configured"),
        ("INFO", "no_driver"),
    ]


def test_business_events_go_to_recorder(buf):
    sink = MemorySink()
    log = default_json_logger(stream=buf)
    hooks = ServiceLogging(run_id="r-2", logger=log, recorder=Recorder(sink))
    s = RideService(StandardPricing(), NearestDriverDispatch(), hooks=hooks)
    s.request_trip(_rider())
    s.add_driver(Driver(id=1, name="Maya", rating=4.98, position=Location(1.0, 2.0)))
    s.request_trip(_rider())

    kinds = [type(ev) for ev in sink.events]
    assert kinds == [TripRequestedBiz, TripRejectedBiz, TripRequestedBiz, TripCreatedBiz]
    assert sink.events[1].reason == "no_driver"
    assert sink.events[0].pickup == (0.0, 0.0)
    assert sink.events[3].fare == pytest.approx(11.375)


def test_jsonl_sink_serializes_dataclasses(buf):
    Recorder(JsonlSink(buf)).emit(
        TripRejectedBiz(run_id="r", seq=1, name="TripRejected", rider_id=3, reason="no_driver")
    )
    assert _lines(buf) == [
        {"run_id": "r", "seq": 1, "name": "TripRejected", "rider_id": 3, "reason": "no_driver"}
    ]


class _BrokenSink:
    def write(self, ev):
        raise OSError("disk full")


def test_broken_sink_does_not_break_others(caplog):
    good = MemorySink()
    with caplog.at_level(logging.ERROR, logger="ride_match.recorder"):
        Recorder(_BrokenSink(), good).emit("ev")
    assert good.events == ["ev"]
    assert "sink _BrokenSink failed" in caplog.text


def test_jsonl_sink_defaults_to_current_stdout(capsys):
    sink = JsonlSink()
    Recorder(sink).emit(
        TripRejectedBiz(run_id="r", seq=2, name="TripRejected", rider_id=4, reason="no_driver")
    )
    out = capsys.readouterr().out
    assert json.loads(out) == {
        "run_id": "r",
        "seq": 2,
        "name": "TripRejected",
        "rider_id": 4,
        "reason": "no_driver",
    }
