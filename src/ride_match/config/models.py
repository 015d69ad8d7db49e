from math import isfinite
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

Coord = tuple[float, float]


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


# ------------------ PRICING -----------------------------


class PricingStandardModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["standard"] = "standard"


class PricingSurgeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["surge"] = "surge"
    multiplier: float = Field(gt=0)


class PricingEcoModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["eco"] = "eco"


PricingUnion = Annotated[
    PricingStandardModel | PricingSurgeModel | PricingEcoModel,
    Field(discriminator="kind"),
]


# ------------------ DISPATCH -----------------------------


class DispatchHighestRatedModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["highest_rated"] = "highest_rated"


class DispatchNearestModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["nearest"] = "nearest"


DispatchUnion = Annotated[
    DispatchHighestRatedModel | DispatchNearestModel,
    Field(discriminator="kind"),
]


# ------------------ TRAVEL TIME -----------------------------


class TravelTimeAverageSpeedModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["average_speed"] = "average_speed"
    speed_kmh: float = Field(default=40.0, gt=0)
    short_trip_km: float = 0.01
    min_hours: float = 0.05


class TravelTimeFixedModel(BaseModel):
    """Test stub with a fixed duration."""

    model_config = ConfigDict(extra="forbid")
    kind: Literal["fixed"] = "fixed"
    minutes: float = 10.0

    @field_validator("minutes")
    def _nonneg(cls, v: float, info: ValidationInfo) -> float:
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0")
        return v


TravelTimeUnion = Annotated[
    TravelTimeAverageSpeedModel | TravelTimeFixedModel, Field(discriminator="kind")
]


# ------------------ ENTITIES -----------------------------


class DriverModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: int
    name: str
    rating: float
    position: Coord
    available: bool = True


class RiderModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: int
    name: str
    pickup: Coord
    dropoff: Coord


class RequestModel(BaseModel):
    """One rider request; strategy overrides stay active for later requests."""

    model_config = ConfigDict(extra="forbid")
    rider: RiderModel
    pricing: PricingUnion | None = None
    dispatch: DispatchUnion | None = None


# ------------------ DEMAND -----------------------------


class DemandModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    riders: int = Field(default=0, ge=0)
    first_id: int = 1000
    zones: list[tuple[float, float, float, float]] = Field(
        default_factory=lambda: [(0.0, 0.0, 10.0, 10.0)], min_length=1
    )
    weights: list[float] | None = None

    @field_validator("weights", mode="before")
    @classmethod
    def _empty_to_none(cls, v):
        # [] or "" means "uniform"
        if v is None:
            return None
        if isinstance(v, (list, tuple, str)) and len(v) == 0:
            return None
        return v

    @model_validator(mode="after")
    def _check_weights(self):
        if self.weights is None:
            return self
        n = len(self.zones)
        w = self.weights
        if len(w) != n:
            raise ValueError(f"weights must have length {n}, got {len(w)}")
        if any(not isfinite(float(x)) for x in w):
            raise ValueError("weights must be finite")
        if any(float(x) < 0 for x in w):
            raise ValueError("weights must be non-negative")
        if sum(float(x) for x in w) <= 0:
            raise ValueError("weights must sum to a positive value")
        return self


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    seed: int = 0
    log: LogModel = LogModel()
    travel_time: TravelTimeUnion = Field(default_factory=TravelTimeAverageSpeedModel)
    pricing: PricingUnion = Field(default_factory=PricingStandardModel)
    dispatch: DispatchUnion = Field(default_factory=DispatchNearestModel)
    drivers: list[DriverModel] = Field(default_factory=list)
    requests: list[RequestModel] = Field(default_factory=list)
    demand: DemandModel | None = None

    @model_validator(mode="after")
    def _unique_driver_ids(self):
        seen: set[int] = set()
        for d in self.drivers:
            if d.id in seen:
                raise ValueError(f"duplicate driver id {d.id}")
            seen.add(d.id)
        return self
