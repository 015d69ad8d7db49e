# domain/entities/driver.py
from dataclasses import dataclass

from ride_match.domain.entities.geography import Location


@dataclass
class Driver:
    id: int
    name: str
    rating: float
    position: Location
    available: bool = True

    def set_available(self, value: bool) -> None:
        self.available = value

    def move_to(self, destination: Location) -> None:
        self.position = destination

    def distance_to(self, loc: Location) -> float:
        return self.position.distance_to(loc)
