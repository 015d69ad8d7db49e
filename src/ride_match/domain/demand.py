# ride_match/domain/demand.py
import numpy as np

from ride_match.domain.entities.geography import Location
from ride_match.domain.entities.rider import Rider

Zone = tuple[float, float, float, float]  # x0, y0, x1, y1


class DemandSampler:
    """Draws riders with pickup and dropoff uniform inside weighted rectangular zones."""

    def __init__(
        self,
        *,
        zones: list[Zone],
        rng: np.random.Generator,
        weights: list[float] | None = None,
        first_id: int = 1,
    ):
        if not zones:
            raise ValueError("at least one zone is required")
        self.zones, self.rng = zones, rng
        self.p = None
        if weights:
            w = np.asarray(weights, dtype=float)
            self.p = w / w.sum()
        self._next_id = first_id

    def _pick(self) -> Zone:
        if self.p is None:
            idx = self.rng.integers(0, len(self.zones))
        else:
            idx = self.rng.choice(len(self.zones), p=self.p)
        return self.zones[int(idx)]

    def _uniform(self, zone: Zone) -> Location:
        x0, y0, x1, y1 = zone
        return Location(float(self.rng.uniform(x0, x1)), float(self.rng.uniform(y0, y1)))

    def sample_rider(self) -> Rider:
        rid = self._next_id
        self._next_id += 1
        pickup = self._uniform(self._pick())
        dropoff = self._uniform(self._pick())
        return Rider(id=rid, name=f"rider-{rid}", pickup=pickup, dropoff=dropoff)

    def sample(self, n: int) -> list[Rider]:
        return [self.sample_rider() for _ in range(n)]
