# domain/entities/rider.py
from dataclasses import dataclass

from ride_match.domain.entities.geography import Location


@dataclass(frozen=True)
class Rider:
    id: int
    name: str
    pickup: Location
    dropoff: Location

    @property
    def trip_distance_km(self) -> float:
        return self.pickup.distance_to(self.dropoff)
