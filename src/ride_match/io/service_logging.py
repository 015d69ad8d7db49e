# io/service_logging.py
import json
import logging
import sys

from ride_match.domain.entities.driver import Driver
from ride_match.domain.entities.rider import Rider
from ride_match.domain.trip import Trip
from ride_match.io.business_events import TripCreatedBiz, TripRejectedBiz, TripRequestedBiz
from ride_match.io.recorder import Recorder
from ride_match.services.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload)


def default_json_logger(name="ride_match", level="INFO", stream=None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(stream or sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class ServiceLogging(NoopHooks):
    """
    Structured JSON logs for everything the RideService does, plus business
    events for the recorder when one is attached.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id = run_id
        self.recorder = recorder
        self.log = logger or default_json_logger(level=level)
        self._seq = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, **extra}
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    def _next_seq(self) -> int:
        self._seq += 1
        return self._seq

    # --------------------------------------------------------

    # pool & configuration

    def driver_added(self, driver: Driver, *, pool_size: int):
        self._emit(
            "DEBUG",
            "driver_added",
            driver_id=driver.id,
            rating=driver.rating,
            position=driver.position.as_tuple(),
            pool_size=pool_size,
        )

    def strategy_changed(self, *, slot: str, name: str | None):
        self._emit("INFO", "strategy_changed", slot=slot, strategy=name)

    # trip lifecycle

    def trip_requested(self, rider: Rider):
        self._emit("DEBUG", "trip_requested", rider_id=rider.id)
        self.biz(
            TripRequestedBiz(
                run_id=self.run_id,
                seq=self._next_seq(),
                name="TripRequested",
                rider_id=rider.id,
                pickup=rider.pickup.as_tuple(),
                dropoff=rider.dropoff.as_tuple(),
            )
        )

    def trip_created(self, trip: Trip):
        self._emit(
            "INFO",
            "trip_created",
            trip_id=trip.id,
            rider_id=trip.rider_id,
            driver_id=trip.driver_id,
            fare=round(trip.fare, 2),
            pricing=trip.pricing_model,
            dispatch=trip.dispatch_model,
        )
        self.biz(
            TripCreatedBiz(
                run_id=self.run_id,
                seq=self._next_seq(),
                name="TripCreated",
                trip_id=trip.id,
                rider_id=trip.rider_id,
                driver_id=trip.driver_id,
                distance_km=trip.distance_km,
                duration_minutes=trip.duration_minutes,
                fare=trip.fare,
                pricing_model=trip.pricing_model,
                dispatch_model=trip.dispatch_model,
            )
        )

    def trip_rejected(self, rider: Rider, *, reason: str, detail: str):
        level = "WARNING" if reason == "not_configured" else "INFO"
        self._emit(level, "trip_rejected", rider_id=rider.id, reason=reason, detail=detail)
        self.biz(
            TripRejectedBiz(
                run_id=self.run_id,
                seq=self._next_seq(),
                name="TripRejected",
                rider_id=rider.id,
                reason=reason,
            )
        )

    def error(self, rider: Rider, *, exc: BaseException, driver_id: int):
        self._emit(
            "ERROR",
            "trip_error",
            rider_id=rider.id,
            driver_id=driver_id,
            error=f"{type(exc).__name__}: {exc}",
        )

    # ------------- Business Event Reporting --------------------------

    def biz(self, ev):
        if self.recorder:
            self.recorder.emit(ev)
