# ride_match/io/business_events.py

from dataclasses import dataclass


# Base type for analytics events
@dataclass
class BizEvent:
    run_id: str
    seq: int  # emission order within the run
    name: str  # stable event name


@dataclass
class TripRequestedBiz(BizEvent):
    rider_id: int
    pickup: tuple[float, float]
    dropoff: tuple[float, float]


@dataclass
class TripCreatedBiz(BizEvent):
    trip_id: int
    rider_id: int
    driver_id: int
    distance_km: float
    duration_minutes: float
    fare: float
    pricing_model: str
    dispatch_model: str


@dataclass
class TripRejectedBiz(BizEvent):
    rider_id: int
    reason: str  # "not_configured" | "no_driver"
