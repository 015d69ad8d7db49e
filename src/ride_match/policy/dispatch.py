# ride_match/policy/dispatch.py
import math
from collections.abc import Sequence

from ride_match.app.protocols import DispatchStrategy
from ride_match.domain.entities.driver import Driver
from ride_match.domain.entities.rider import Rider


class HighestRatedDispatch(DispatchStrategy):
    """Best-rated available driver; rider location is ignored. Ties keep pool order."""

    @property
    def name(self) -> str:
        return "Highest rated"

    def choose_driver(self, drivers: Sequence[Driver], rider: Rider) -> int | None:
        best, best_rating = None, -math.inf
        for i, d in enumerate(drivers):
            if not d.available:
                continue
            if d.rating > best_rating:
                best, best_rating = i, d.rating
        return best


class NearestDriverDispatch(DispatchStrategy):
    """Available driver closest to the rider's pickup (straight line). Ties keep pool order."""

    @property
    def name(self) -> str:
        return "Nearest driver"

    def choose_driver(self, drivers: Sequence[Driver], rider: Rider) -> int | None:
        best, best_dist = None, math.inf
        for i, d in enumerate(drivers):
            if not d.available:
                continue
            dist = d.distance_to(rider.pickup)
            if dist < best_dist:
                best, best_dist = i, dist
        return best
