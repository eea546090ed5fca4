# gauss_rng/main.py
from __future__ import annotations
import argparse
import sys
from typing import Dict, List, Optional

from .sim.config import DEMO, SAMPLER, SamplerConfig, SampleRequest
from .sim.errors import InvalidParameter, SamplingExhausted
from .sim.metrics import summarize_samples
from .sim.rng import RNG
from .sim.sampler import sample_many
from .ui.csv_writer import SampleCsvLogger
from .ui.histogram import plot_histogram


def _plot_range(req: SampleRequest):
    mean, std_dev, bounds = req.resolve()
    if bounds is not None:
        return bounds
    return mean - 4 * std_dev, mean + 4 * std_dev


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Gaussian random numbers with skew and optional bounds")
    parser.add_argument("--samples", type=int, default=DEMO.samples)
    parser.add_argument("--min", type=float, default=DEMO.min)
    parser.add_argument("--max", type=float, default=DEMO.max)
    parser.add_argument("--mean", type=float, default=DEMO.mean,
                        help="with --std-dev, sample unbounded and ignore --min/--max")
    parser.add_argument("--std-dev", type=float, default=DEMO.std_dev)
    parser.add_argument("--skew", type=float, default=DEMO.skew)
    parser.add_argument("--seed", type=int, default=DEMO.seed)
    parser.add_argument("--max-attempts", type=int, default=SAMPLER.max_attempts,
                        help="cap on rejected draws per bounded sample (default: unbounded)")
    parser.add_argument("--csv", type=str, default=DEMO.track_csv, help="summary CSV ('' to disable)")
    parser.add_argument("--outdir", type=str, default=DEMO.outdir)
    parser.add_argument("--tag", type=str, default="")
    parser.add_argument("--plot", action="store_true", default=DEMO.enable_plot,
                        help="save a histogram PNG under --outdir")
    return parser


def run(argv: Optional[List[str]] = None) -> Dict[str, float]:
    args = build_parser().parse_args(argv)

    req = SampleRequest(min=args.min, max=args.max, mean=args.mean, std_dev=args.std_dev, skew=args.skew)
    config = SamplerConfig(max_attempts=args.max_attempts)
    try:
        RNG.seed(args.seed)
        values = sample_many(req, args.samples, config=config)
    except (InvalidParameter, SamplingExhausted) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)

    summary = summarize_samples(values)
    mode = "mean/std" if req.unbounded else "bounded"
    print(
        f"[OK] {mode} n={summary['n']} mean={summary['mean']:.3f} std={summary['std']:.3f} "
        f"min={summary['min']:.3f} median={summary['median']:.3f} max={summary['max']:.3f}"
    )

    if args.csv:
        logger = SampleCsvLogger(args.csv)
        logger.append_run(req, summary, notes=args.tag or None)
        print(f"[OK] Appended run to {args.csv} (session_id={logger.session_id})")

    if args.plot:
        lo, hi = _plot_range(req)
        plot_histogram(values, lo, hi, args.outdir, tag=(args.tag or None),
                       title=f"{summary['n']} samples, skew={req.skew}")

    return summary


def main() -> None:
    run()


if __name__ == "__main__":
    main()
