# sim/rng.py
from __future__ import annotations

from zlib import crc32

import numpy as np


def _u32(x: int) -> int:
    return int(x & 0xFFFFFFFF)


def _tag(p: object) -> int:
    if isinstance(p, (int, np.integer)):
        return _u32(int(p))
    s = p if isinstance(p, str) else repr(p)
    return _u32(crc32(s.encode("utf-8")))


class RNGRegistry:
    """
    Named numpy Generator streams derived from [seed, scenario, *key].
    The same (seed, scenario, key) always yields the same draws, independent of
    the order in which streams are requested.
    """

    def __init__(self, seed: int, *, scenario: str | int = 0):
        self.seed = _u32(seed)
        self.scenario_tag = _tag(str(scenario))
        self._streams: dict[tuple[int, ...], np.random.Generator] = {}

    def stream(self, name: str, *parts: object) -> np.random.Generator:
        key = (_tag(name), *(_tag(p) for p in parts))
        g = self._streams.get(key)
        if g is None:
            ss = np.random.SeedSequence(entropy=[self.seed, self.scenario_tag, *key])
            g = self._streams[key] = np.random.Generator(np.random.PCG64(ss))
        return g
