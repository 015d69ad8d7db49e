# ride_match/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass, field

from ride_match.config.models import DriverModel, RequestModel, RiderModel, ScenarioModel
from ride_match.domain.demand import DemandSampler
from ride_match.domain.entities.driver import Driver
from ride_match.domain.entities.geography import to_location
from ride_match.domain.entities.rider import Rider
from ride_match.domain.trip import Trip
from ride_match.io.recorder import Recorder
from ride_match.io.service_logging import ServiceLogging
from ride_match.runtime.policy_factory import make_dispatch_strategy, make_pricing_strategy
from ride_match.runtime.services_factory import make_travel_time
from ride_match.services.hooks import NoopHooks, ServiceHooks
from ride_match.services.ride_service import RideService
from ride_match.sim.rng import RNGRegistry


@dataclass
class Outcome:
    rider: Rider
    trip: Trip | None


def driver_from_model(m: DriverModel) -> Driver:
    return Driver(
        id=m.id,
        name=m.name,
        rating=m.rating,
        position=to_location(m.position),
        available=m.available,
    )


def rider_from_model(m: RiderModel) -> Rider:
    return Rider(id=m.id, name=m.name, pickup=to_location(m.pickup), dropoff=to_location(m.dropoff))


@dataclass
class App:
    model: ScenarioModel
    service: RideService
    hooks: ServiceHooks
    rng: RNGRegistry
    demand: DemandSampler | None = None
    outcomes: list[Outcome] = field(default_factory=list)

    def issue(self, req: RequestModel) -> Outcome:
        if req.pricing is not None:
            self.service.set_pricing_strategy(make_pricing_strategy(req.pricing))
        if req.dispatch is not None:
            self.service.set_dispatch_strategy(make_dispatch_strategy(req.dispatch))
        rider = rider_from_model(req.rider)
        out = Outcome(rider, self.service.request_trip(rider))
        self.outcomes.append(out)
        return out

    def run(self) -> list[Outcome]:
        """Issue the configured requests in order, then any sampled demand."""
        produced = [self.issue(req) for req in self.model.requests]
        if self.demand is not None and self.model.demand is not None:
            for rider in self.demand.sample(self.model.demand.riders):
                out = Outcome(rider, self.service.request_trip(rider))
                self.outcomes.append(out)
                produced.append(out)
        return produced


def build(
    cfg: ScenarioModel | Mapping,
    *,
    use_logging: bool = True,
    recorder: Recorder | None = None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) RNG
    rng_registry = RNGRegistry(model.seed, scenario=model.name)

    # 2) Hooks
    hooks = (
        ServiceLogging(run_id=model.run_id, level=model.log.level, recorder=recorder)
        if use_logging
        else NoopHooks()
    )

    # 3) Service & policies
    service = RideService(
        make_pricing_strategy(model.pricing),
        make_dispatch_strategy(model.dispatch),
        travel_time=make_travel_time(model.travel_time),
        hooks=hooks,
    )
    for d in model.drivers:
        service.add_driver(driver_from_model(d))

    # 4) Demand
    demand = None
    if model.demand is not None:
        demand = DemandSampler(
            zones=model.demand.zones,
            weights=model.demand.weights,
            rng=rng_registry.stream("demand"),
            first_id=model.demand.first_id,
        )

    return App(model=model, service=service, hooks=hooks, rng=rng_registry, demand=demand)
