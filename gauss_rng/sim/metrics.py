# gauss_rng/sim/metrics.py
from __future__ import annotations
import math
from typing import Dict, Iterable, List


def _quantiles(xs: List[float]) -> Dict[str, float]:
    """Nearest-rank quantiles on an already sorted list."""
    n = len(xs)
    def at(p: float) -> float:
        if n == 1:
            return xs[0]
        i = int(round(p * (n - 1)))
        return xs[max(0, min(n - 1, i))]
    return dict(q25=at(0.25), median=at(0.50), q75=at(0.75))


def summarize_samples(values: Iterable[float]) -> Dict[str, float]:
    xs = sorted(float(v) for v in values)
    n = len(xs)
    if n == 0:
        nan = float("nan")
        return dict(n=0, mean=nan, std=nan, min=nan, q25=nan, median=nan, q75=nan, max=nan)
    mean = sum(xs) / n
    std = math.sqrt(sum((x - mean) ** 2 for x in xs) / n)
    return dict(n=n, mean=mean, std=std, min=xs[0], **_quantiles(xs), max=xs[-1])
