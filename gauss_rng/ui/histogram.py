# gauss_rng/ui/histogram.py
from __future__ import annotations
import math
import os
import time
from typing import Iterable, Tuple

import numpy as np

# Use non-interactive backend for headless operation
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt


def timestamp(tag: str | None = None) -> str:
    t = time.strftime("%Y%m%d_%H%M%S")
    return f"{t}__{tag}" if tag else t


MAX_BUCKETS = 1000


def bucket_counts(values: Iterable[float], lo: float, hi: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Round each value to the nearest integer and count hits per integer in
    [ceil(lo), floor(hi)]. Returns (bucket_labels, counts); values that round
    outside the range are dropped.

    When the range spans more than MAX_BUCKETS integers, falls back to
    MAX_BUCKETS equal-width bins over [lo, hi] and labels them by bin centre.
    """
    xs = np.fromiter(values, dtype=np.float64)
    first, last = math.ceil(lo), math.floor(hi)
    if last - first + 1 > MAX_BUCKETS:
        counts, edges = np.histogram(xs, bins=MAX_BUCKETS, range=(lo, hi))
        return (edges[:-1] + edges[1:]) / 2, counts
    if last < first:
        return np.zeros(0, np.int64), np.zeros(0, np.int64)
    labels = np.arange(first, last + 1, dtype=np.int64)
    rounded = np.rint(xs)
    arr = rounded[(rounded >= first) & (rounded <= last)].astype(np.int64)
    counts = np.bincount(arr - first, minlength=len(labels))
    return labels, counts


def plot_histogram(values: Iterable[float], lo: float, hi: float,
                   outdir: str, tag: str | None = None, title: str = "") -> str:
    labels, counts = bucket_counts(values, lo, hi)
    width = float(labels[1] - labels[0]) if len(labels) > 1 else 1.0
    os.makedirs(outdir, exist_ok=True)

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.bar(labels, counts, width=width, color="tab:blue", alpha=0.8)
    ax.set_xlim(lo - width / 2, hi + width / 2)
    ax.set_xlabel("Value (rounded)")
    ax.set_ylabel("Count")
    ax.set_title(title or "Gaussian samples")
    ax.grid(alpha=0.25)

    fig.tight_layout()
    png = os.path.join(outdir, f"histogram_{timestamp(tag)}.png")
    fig.savefig(png, dpi=160)
    plt.close(fig)
    print(f"[OK] Saved {png}")
    return png
