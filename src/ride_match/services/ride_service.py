# ride_match/services/ride_service.py
import threading
from collections.abc import Sequence

from ride_match.app.protocols import DispatchStrategy, PricingStrategy, TravelTimeModel
from ride_match.domain.entities.driver import Driver
from ride_match.domain.entities.rider import Rider
from ride_match.domain.trip import Trip
from ride_match.services.errors import NoDriverAvailable, RideMatchError, StrategyNotConfigured
from ride_match.services.hooks import NoopHooks, ServiceHooks
from ride_match.services.travel_time import AverageSpeedTravelTime


class RideService:
    """
    Owns the driver pool and the active pricing/dispatch strategies.

    A trip request is one transaction: pick a driver and mark it busy (under the
    pool lock), price the trip, issue the Trip, move the driver to the dropoff
    and release it. The driver is released on every exit path.
    """

    def __init__(
        self,
        pricing: PricingStrategy | None,
        dispatch: DispatchStrategy | None,
        *,
        travel_time: TravelTimeModel | None = None,
        hooks: ServiceHooks | None = None,
    ):
        self._pricing = pricing
        self._dispatch = dispatch
        self.travel_time = travel_time or AverageSpeedTravelTime()
        self._hooks = hooks or NoopHooks()
        self._drivers: list[Driver] = []
        self._next_trip_id = 1
        self._lock = threading.Lock()

    # ---------------- pool -----------------------

    def add_driver(self, driver: Driver) -> None:
        # duplicate ids are accepted; dispatch works on pool positions
        with self._lock:
            self._drivers.append(driver)
            n = len(self._drivers)
        self._hooks.driver_added(driver, pool_size=n)

    def drivers(self) -> Sequence[Driver]:
        return tuple(self._drivers)

    # ---------------- strategies -----------------

    @property
    def pricing(self) -> PricingStrategy | None:
        return self._pricing

    @property
    def dispatch(self) -> DispatchStrategy | None:
        return self._dispatch

    def set_pricing_strategy(self, strategy: PricingStrategy | None) -> None:
        self._pricing = strategy
        self._hooks.strategy_changed(slot="pricing", name=strategy.name if strategy else None)

    def set_dispatch_strategy(self, strategy: DispatchStrategy | None) -> None:
        self._dispatch = strategy
        self._hooks.strategy_changed(slot="dispatch", name=strategy.name if strategy else None)

    # ---------------- trips ----------------------

    def estimate_duration_minutes(self, distance_km: float) -> float:
        return self.travel_time.duration_minutes(distance_km)

    def request_trip(self, rider: Rider) -> Trip | None:
        """Book a trip, or return None if the service is unconfigured or nobody is free."""
        try:
            return self.book(rider)
        except RideMatchError as e:
            self._hooks.trip_rejected(rider, reason=e.reason, detail=str(e))
            return None

    def book(self, rider: Rider) -> Trip:
        """Like ``request_trip`` but raises StrategyNotConfigured / NoDriverAvailable."""
        self._hooks.trip_requested(rider)

        # snapshot both slots so a concurrent swap cannot split one trip across strategies
        pricing, dispatch = self._pricing, self._dispatch
        if pricing is None:
            raise StrategyNotConfigured("pricing")
        if dispatch is None:
            raise StrategyNotConfigured("dispatch")

        with self._lock:
            idx = dispatch.choose_driver(self._drivers, rider)
            if idx is None:
                raise NoDriverAvailable(rider.id, dispatch.name)
            driver = self._drivers[idx]
            driver.set_available(False)

        try:
            distance = rider.trip_distance_km
            minutes = self.estimate_duration_minutes(distance)
            fare = pricing.calculate_fare(distance, minutes)

            with self._lock:
                trip_id = self._next_trip_id
                self._next_trip_id += 1

            trip = Trip(
                id=trip_id,
                rider_id=rider.id,
                rider_name=rider.name,
                driver_id=driver.id,
                driver_name=driver.name,
                distance_km=distance,
                duration_minutes=minutes,
                fare=fare,
                pricing_model=pricing.name,
                dispatch_model=dispatch.name,
            )
            driver.move_to(rider.dropoff)
        except Exception as e:
            self._hooks.error(rider, exc=e, driver_id=driver.id)
            raise
        finally:
            with self._lock:
                driver.set_available(True)

        self._hooks.trip_created(trip)
        return trip
