# gauss_rng/sim/rng.py
from __future__ import annotations
import random
from typing import Iterable, List, Optional, Protocol


class UniformSource(Protocol):
    def random(self) -> float: ...


class RNG:
    """Process-wide default source. Any object with random() -> [0, 1) can stand in for it."""
    _rng = random.Random()

    @classmethod
    def seed(cls, s: int):
        cls._rng.seed(s)

    @classmethod
    def random(cls) -> float:
        return cls._rng.random()


class ReplaySource:
    """
    Replays a fixed list of "uniform" values, wrapping around at the end.
    Useful for checking the transform math exactly.
    """
    def __init__(self, values: Iterable[float]):
        self._values: List[float] = [float(v) for v in values]
        if not self._values:
            raise ValueError("ReplaySource needs at least one value")
        self._i = 0
        self.draws = 0

    def random(self) -> float:
        v = self._values[self._i]
        self._i = (self._i + 1) % len(self._values)
        self.draws += 1
        return v

    def reset(self) -> None:
        self._i = 0
        self.draws = 0


def get_source(rng: Optional[UniformSource] = None) -> UniformSource:
    return RNG if rng is None else rng
