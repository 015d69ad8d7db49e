from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from ride_match.domain.entities.driver import Driver
from ride_match.domain.entities.rider import Rider


# --------------- Policies -------------------------


@runtime_checkable
class PricingStrategy(Protocol):
    """
    Responsibilities:
      • Turn a trip's distance (km) and duration (minutes) into a fare.
      • Report a human-readable model name for trip records.
    Must not mutate anything outside its own fixed parameters.
    """

    @property
    def name(self) -> str: ...

    def calculate_fare(self, distance_km: float, minutes: float) -> float: ...


@runtime_checkable
class DispatchStrategy(Protocol):
    """
    Responsibilities:
      • Pick one available driver for a rider.
      • Return the driver's index in the pool, or None when nobody is available.
    Only drivers whose ``available`` flag is set may be chosen; drivers are read, never mutated.
    """

    @property
    def name(self) -> str: ...

    def choose_driver(self, drivers: Sequence[Driver], rider: Rider) -> int | None: ...


# ------------- Services --------------------


@runtime_checkable
class TravelTimeModel(Protocol):
    def duration_minutes(self, distance_km: float) -> float: ...
