# ride_match/services/travel_time.py
from ride_match.app.protocols import TravelTimeModel


class AverageSpeedTravelTime(TravelTimeModel):
    """Distance over a flat city-average speed, with a floor for near-zero trips."""

    def __init__(
        self,
        speed_kmh: float = 40.0,
        short_trip_km: float = 0.01,
        min_hours: float = 0.05,
    ):
        self.speed_kmh = speed_kmh
        self.short_trip_km = short_trip_km
        self.min_hours = min_hours

    def duration_minutes(self, distance_km: float) -> float:
        if distance_km <= self.short_trip_km:
            hours = self.min_hours
        else:
            hours = distance_km / self.speed_kmh
        return hours * 60.0


class FixedDurationTravelTime(TravelTimeModel):
    """Helper for tests; every trip takes the same time."""

    def __init__(self, minutes: float = 10.0):
        self.minutes = minutes

    def duration_minutes(self, distance_km: float) -> float:
        return self.minutes
