# gauss_rng/sim/config.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import InvalidParameter

STD_DEV_MSG = "Standard deviation must be greater than zero."
BOUNDS_MSG = "Minimum bound must be less than maximum bound."
MISSING_MSG = "Either min/max or mean/std_dev must be provided."

# ------------------------------------------------------------
# SAMPLER TUNING
# ------------------------------------------------------------
@dataclass(frozen=True)
class SamplerConfig:
    # None = keep rejecting until a draw lands inside the bounds
    max_attempts: Optional[int] = None

    def validate(self) -> None:
        if self.max_attempts is not None and self.max_attempts <= 0:
            raise InvalidParameter("max_attempts must be a positive integer or None.")


# ------------------------------------------------------------
# REQUEST PARAMETERS
# ------------------------------------------------------------
@dataclass(frozen=True)
class SampleRequest:
    """
    Parameters for one draw from the unified entry point.

    Priority rule: a complete mean/std_dev pair wins and the bounds are
    ignored. Otherwise a complete min/max pair selects the bounded sampler,
    with any partial mean/std_dev overriding its derived defaults.
    """
    min: Optional[float] = None
    max: Optional[float] = None
    mean: Optional[float] = None
    std_dev: Optional[float] = None
    skew: float = 0.0

    @property
    def unbounded(self) -> bool:
        return self.mean is not None and self.std_dev is not None

    @property
    def bounded(self) -> bool:
        return self.min is not None and self.max is not None

    def validate(self) -> None:
        if self.unbounded:
            check_std_dev(self.std_dev)
            return
        if not self.bounded:
            raise InvalidParameter(MISSING_MSG)
        check_bounds(self.min, self.max)
        _, std_dev, _ = self.resolve()
        check_std_dev(std_dev)

    def resolve(self) -> Tuple[float, float, Optional[Tuple[float, float]]]:
        """Return (mean, std_dev, bounds); bounds is None for the unbounded branch."""
        if self.unbounded:
            return float(self.mean), float(self.std_dev), None
        if not self.bounded:
            raise InvalidParameter(MISSING_MSG)
        lo, hi = float(self.min), float(self.max)
        mean = float(self.mean) if self.mean is not None else (lo + hi) / 2
        # +/-3 sigma lands on the bounds when unskewed
        std_dev = float(self.std_dev) if self.std_dev is not None else (hi - lo) / 6
        return mean, std_dev, (lo, hi)


def check_std_dev(std_dev: float) -> None:
    # written as "not >" so NaN fails too
    if not std_dev > 0:
        raise InvalidParameter(STD_DEV_MSG)


def check_bounds(min_v: float, max_v: float) -> None:
    if not min_v < max_v:
        raise InvalidParameter(BOUNDS_MSG)


# ------------------------------------------------------------
# HEADLESS DEMO SETTINGS
# ------------------------------------------------------------
@dataclass(frozen=False)
class DemoConfig:
    samples: int = 100_000
    min: float = 0.0
    max: float = 100.0
    mean: float | None = None
    std_dev: float | None = None
    skew: float = 0.0
    seed: int = 42
    track_csv: str | None = "runs/samples.csv"
    outdir: str = "reports"
    enable_plot: bool = False

# ------------------------------------------------------------
# EXPORT SINGLETONS
# ------------------------------------------------------------
SAMPLER = SamplerConfig()
DEMO = DemoConfig()
