# services/hooks.py
from typing import Protocol

from ride_match.domain.entities.driver import Driver
from ride_match.domain.entities.rider import Rider
from ride_match.domain.trip import Trip


class ServiceHooks(Protocol):
    def driver_added(self, driver: Driver, *, pool_size: int): ...
    def strategy_changed(self, *, slot: str, name: str | None): ...
    def trip_requested(self, rider: Rider): ...
    def trip_created(self, trip: Trip): ...
    def trip_rejected(self, rider: Rider, *, reason: str, detail: str): ...
    def error(self, rider: Rider, *, exc: BaseException, driver_id: int): ...


class NoopHooks:
    def driver_added(self, *_, **__):
        pass

    def strategy_changed(self, **_):
        pass

    def trip_requested(self, *_, **__):
        pass

    def trip_created(self, *_, **__):
        pass

    def trip_rejected(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass
