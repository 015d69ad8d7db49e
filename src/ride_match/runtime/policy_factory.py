from ride_match.app.protocols import DispatchStrategy, PricingStrategy
from ride_match.config.models import (
    DispatchHighestRatedModel,
    DispatchNearestModel,
    DispatchUnion,
    PricingEcoModel,
    PricingStandardModel,
    PricingSurgeModel,
    PricingUnion,
)
from ride_match.policy.dispatch import HighestRatedDispatch, NearestDriverDispatch
from ride_match.policy.pricing import EcoPricing, StandardPricing, SurgePricing


def make_pricing_strategy(cfg: PricingUnion) -> PricingStrategy:
    if isinstance(cfg, PricingStandardModel):
        return StandardPricing()
    elif isinstance(cfg, PricingSurgeModel):
        return SurgePricing(multiplier=cfg.multiplier)
    elif isinstance(cfg, PricingEcoModel):
        return EcoPricing()
    else:
        raise TypeError(cfg)


def make_dispatch_strategy(cfg: DispatchUnion) -> DispatchStrategy:
    if isinstance(cfg, DispatchHighestRatedModel):
        return HighestRatedDispatch()
    elif isinstance(cfg, DispatchNearestModel):
        return NearestDriverDispatch()
    else:
        raise TypeError(cfg)
