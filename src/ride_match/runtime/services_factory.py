# ride_match/runtime/services_factory.py
from ride_match.app.protocols import TravelTimeModel
from ride_match.config.models import (
    TravelTimeAverageSpeedModel,
    TravelTimeFixedModel,
    TravelTimeUnion,
)
from ride_match.services.travel_time import AverageSpeedTravelTime, FixedDurationTravelTime


def make_travel_time(cfg: TravelTimeUnion) -> TravelTimeModel:
    if isinstance(cfg, TravelTimeAverageSpeedModel):
        return AverageSpeedTravelTime(
            speed_kmh=cfg.speed_kmh,
            short_trip_km=cfg.short_trip_km,
            min_hours=cfg.min_hours,
        )
    elif isinstance(cfg, TravelTimeFixedModel):
        return FixedDurationTravelTime(minutes=cfg.minutes)
    else:
        raise TypeError(cfg)
