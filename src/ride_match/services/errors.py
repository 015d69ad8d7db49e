# ride_match/services/errors.py


class RideMatchError(Exception):
    """Base class for trip-request failures."""

    reason = "error"


class StrategyNotConfigured(RideMatchError):
    reason = "not_configured"

    def __init__(self, missing: str):
        super().__init__(f"no {missing} strategy set")
        self.missing = missing


class NoDriverAvailable(RideMatchError):
    reason = "no_driver"

    def __init__(self, rider_id: int, dispatch_model: str):
        super().__init__(f"no driver available for rider {rider_id} ({dispatch_model})")
        self.rider_id = rider_id
        self.dispatch_model = dispatch_model
