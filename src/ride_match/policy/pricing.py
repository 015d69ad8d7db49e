# ride_match/policy/pricing.py

from ride_match.app.protocols import PricingStrategy

BASE_FARE = 2.50
PER_KM = 1.25
PER_MINUTE = 0.35


class StandardPricing(PricingStrategy):
    def __init__(
        self, base_fare: float = BASE_FARE, per_km: float = PER_KM, per_minute: float = PER_MINUTE
    ):
        self.base_fare = base_fare
        self.per_km = per_km
        self.per_minute = per_minute

    @property
    def name(self) -> str:
        return "Standard"

    def calculate_fare(self, distance_km: float, minutes: float) -> float:
        return self.base_fare + distance_km * self.per_km + minutes * self.per_minute


class SurgePricing(PricingStrategy):
    """Standard fare scaled by a multiplier. The multiplier is not range-checked here."""

    def __init__(self, multiplier: float, base: StandardPricing | None = None):
        self.multiplier = multiplier
        self.base = base or StandardPricing()

    @property
    def name(self) -> str:
        return f"Surge x{self.multiplier:g}"

    def calculate_fare(self, distance_km: float, minutes: float) -> float:
        return self.base.calculate_fare(distance_km, minutes) * self.multiplier


class EcoPricing(PricingStrategy):
    def __init__(
        self,
        discount: float = 0.10,
        minimum_fare: float = 5.00,
        base: StandardPricing | None = None,
    ):
        self.discount = discount
        self.minimum_fare = minimum_fare
        self.base = base or StandardPricing()

    @property
    def name(self) -> str:
        return f"Eco ({self.discount:.0%} off)"

    def calculate_fare(self, distance_km: float, minutes: float) -> float:
        fare = self.base.calculate_fare(distance_km, minutes)
        return max(self.minimum_fare, fare * (1.0 - self.discount))
