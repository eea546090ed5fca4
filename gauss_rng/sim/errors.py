# gauss_rng/sim/errors.py
from __future__ import annotations


class InvalidParameter(ValueError):
    """Raised before any draw when sampling parameters are unusable."""


class SamplingExhausted(RuntimeError):
    """
    Raised by the bounded sampler when an attempt cap is configured and every
    draw up to that cap fell outside [min, max].
    """
    def __init__(self, attempts: int, min_v: float, max_v: float):
        self.attempts = attempts
        self.min = min_v
        self.max = max_v
        super().__init__(
            f"No sample landed in [{min_v}, {max_v}] after {attempts} attempts."
        )
