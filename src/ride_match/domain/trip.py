# ride_match/domain/trip.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Trip:
    """Snapshot of one matching + pricing decision.

    Rider and driver identity are copied by value so the record stays valid
    after the rider goes away or the driver moves on.
    """

    id: int
    rider_id: int
    rider_name: str
    driver_id: int
    driver_name: str
    distance_km: float
    duration_minutes: float
    fare: float
    pricing_model: str
    dispatch_model: str
