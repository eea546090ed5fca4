# gauss_rng/sim/sampler.py
from __future__ import annotations
import math
from typing import List, Optional

from .config import SAMPLER, SampleRequest, SamplerConfig, check_bounds, check_std_dev
from .errors import SamplingExhausted
from .rng import UniformSource, get_source

TWO_PI = 2.0 * math.pi


def skew_adjust(z0: float, skew: float) -> float:
    """
    Cubic skew: z0 + skew * (z0^3 - z0).

    The correction vanishes at z0 = 0 and z0 = +/-1. Outside (-1, 1) a positive
    skew pushes values further out along the tail they are on; inside (-1, 1)
    it pulls them towards the opposite side.
    """
    return z0 + skew * (z0 ** 3 - z0)


def standard_normal(rng: Optional[UniformSource] = None) -> float:
    """One standard normal variate via Box-Muller (trig form)."""
    src = get_source(rng)
    u1 = src.random()
    # log(0) is undefined; draw again
    while u1 <= 0.0:
        u1 = src.random()
    u2 = src.random()
    return math.sqrt(-2.0 * math.log(u1)) * math.cos(TWO_PI * u2)


def gaussian_random(mean: float = 0.0, std_dev: float = 1.0, skew: float = 0.0,
                    rng: Optional[UniformSource] = None) -> float:
    """
    Draw a normally distributed value, optionally skewed.

    Raises InvalidParameter if std_dev is not greater than zero.
    """
    check_std_dev(std_dev)
    return _draw(mean, std_dev, skew, get_source(rng))


def bounded_gaussian_random(min: float, max: float,
                            mean: Optional[float] = None,
                            std_dev: Optional[float] = None,
                            skew: float = 0.0,
                            rng: Optional[UniformSource] = None,
                            config: Optional[SamplerConfig] = None) -> float:
    """
    Draw a Gaussian value guaranteed to lie in [min, max] by rejection sampling.

    mean defaults to the midpoint and std_dev to (max - min) / 6. The loop is
    unbounded unless config.max_attempts is set, in which case
    SamplingExhausted is raised once that many draws have been rejected.
    """
    cfg = config or SAMPLER
    cfg.validate()
    check_bounds(min, max)
    mean, std_dev, _ = SampleRequest(min=min, max=max, mean=mean, std_dev=std_dev, skew=skew).resolve()
    check_std_dev(std_dev)
    return _draw_inside(min, max, mean, std_dev, skew, get_source(rng), cfg.max_attempts)


def generate_gaussian_random(min: Optional[float] = None,
                             max: Optional[float] = None,
                             mean: Optional[float] = None,
                             std_dev: Optional[float] = None,
                             skew: float = 0.0,
                             rng: Optional[UniformSource] = None,
                             config: Optional[SamplerConfig] = None) -> float:
    """
    Dispatch to the unbounded or bounded sampler.

    A complete mean/std_dev pair takes priority and any bounds are ignored.
    Otherwise min/max must both be given; a lone mean or std_dev then overrides
    the bounded sampler's defaults.
    """
    req = SampleRequest(min=min, max=max, mean=mean, std_dev=std_dev, skew=skew)
    return sample_request(req, rng=rng, config=config)


def sample_request(req: SampleRequest,
                   rng: Optional[UniformSource] = None,
                   config: Optional[SamplerConfig] = None) -> float:
    return sample_many(req, 1, rng=rng, config=config)[0]


def sample_many(req: SampleRequest, n: int,
                rng: Optional[UniformSource] = None,
                config: Optional[SamplerConfig] = None) -> List[float]:
    """
    Draw n values for one request. Parameters are validated and resolved once,
    so every draw uses the same mean/std_dev/bounds as generate_gaussian_random.
    """
    cfg = config or SAMPLER
    cfg.validate()
    req.validate()
    mean, std_dev, bounds = req.resolve()
    src = get_source(rng)
    if bounds is None:
        return [_draw(mean, std_dev, req.skew, src) for _ in range(n)]
    lo, hi = bounds
    return [_draw_inside(lo, hi, mean, std_dev, req.skew, src, cfg.max_attempts) for _ in range(n)]


def _draw(mean: float, std_dev: float, skew: float, src: UniformSource) -> float:
    return skew_adjust(standard_normal(src), skew) * std_dev + mean


def _draw_inside(lo: float, hi: float, mean: float, std_dev: float, skew: float,
                 src: UniformSource, max_attempts: Optional[int]) -> float:
    attempts = 0
    while True:
        num = _draw(mean, std_dev, skew, src)
        if lo <= num <= hi:
            return num
        attempts += 1
        if max_attempts is not None and attempts >= max_attempts:
            raise SamplingExhausted(attempts, lo, hi)
