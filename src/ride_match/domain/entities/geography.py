import math
from dataclasses import dataclass


# Planar coordinates in kilometres; routing is straight-line only
@dataclass(frozen=True)
class Location:
    x: float
    y: float

    def distance_to(self, other: "Location") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


Pt = Location | tuple[float, float]


def to_location(p: Pt) -> Location:
    return p if isinstance(p, Location) else Location(float(p[0]), float(p[1]))
