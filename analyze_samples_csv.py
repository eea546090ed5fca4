#!/usr/bin/env python3
"""
Analyze the summary CSV produced by SampleCsvLogger (gauss_rng.main --csv).

Features:
  - --session latest|<id> filters to a single invocation's runs
  - Saves a timestamped cleaned CSV and a PNG plot under --outdir
  - Plot:
      (1) requested vs empirical mean per run
      (2) requested vs empirical std per run
Usage example:
  python analyze_samples_csv.py --csv runs/samples.csv --outdir reports --tag demo --session latest
"""
import argparse
import os
import sys
import time
import pandas as pd

# Use non-interactive backend for headless operation
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

NUMERIC = ("run", "req_min", "req_max", "req_mean", "req_std_dev", "skew",
           "n", "mean", "std", "min", "q25", "median", "q75", "max")


# ------------------------- utilities -------------------------
def ensure_dir(p: str) -> None:
    os.makedirs(p, exist_ok=True)

def timestamp(tag: str | None = None) -> str:
    t = time.strftime("%Y%m%d_%H%M%S")
    return f"{t}__{tag}" if tag else t


# ------------------------- loading ---------------------------
def load_csv(path: str) -> pd.DataFrame:
    if not (path and os.path.exists(path)):
        print(
            "\n[ERROR] Summary CSV not found.\n"
            f"  Expected: {path}\n"
            "Hint: run `python -m gauss_rng.main --csv runs/samples.csv` first.\n",
            file=sys.stderr
        )
        sys.exit(1)
    # session ids are hex; keep them as text so "12345678" or "1234e567" survive
    return pd.read_csv(path, dtype={"session_id": str})


def latest_session_id(df: pd.DataFrame) -> str | None:
    """Return the last session_id in file order (used by --session latest)."""
    if "session_id" not in df.columns or len(df) == 0:
        return None
    s = df["session_id"].dropna()
    return s.iloc[-1] if len(s) else None


def clean(df: pd.DataFrame) -> pd.DataFrame:
    d = df.copy()
    for col in NUMERIC:
        if col in d.columns:
            d[col] = pd.to_numeric(d[col], errors="coerce")
    d["mean_error"] = d["mean"] - d["req_mean"]
    d["std_error"] = d["std"] - d["req_std_dev"]
    keys = [k for k in ("session_id", "run") if k in d.columns]
    return d.sort_values(keys) if keys else d


# ------------------------- plotting --------------------------
def plot_runs(df: pd.DataFrame, outdir: str, tag: str | None) -> str:
    ensure_dir(outdir)
    fig, ax = plt.subplots(2, 1, figsize=(10, 8), sharex=True)
    x = range(len(df))

    ax[0].plot(x, df["req_mean"], "o--", color="black", label="Requested mean")
    ax[0].plot(x, df["mean"], "o-", color="tab:blue", label="Empirical mean")
    ax[0].set_ylabel("Mean")
    ax[0].legend(loc="best")
    ax[0].grid(alpha=0.25)

    ax[1].plot(x, df["req_std_dev"], "o--", color="black", label="Requested std")
    ax[1].plot(x, df["std"], "o-", color="tab:purple", label="Empirical std")
    ax[1].set_xlabel("Run")
    ax[1].set_ylabel("Std dev")
    ax[1].legend(loc="best")
    ax[1].grid(alpha=0.25)

    fig.tight_layout()
    png = os.path.join(outdir, f"runs_{timestamp(tag)}.png")
    fig.savefig(png, dpi=160)
    plt.close(fig)
    print(f"[OK] Saved {png}")
    return png


def export_csv(df: pd.DataFrame, outdir: str, base: str, tag: str | None) -> str:
    ensure_dir(outdir)
    path = os.path.join(outdir, f"{base}_{timestamp(tag)}.csv")
    df.to_csv(path, index=False)
    print(f"[OK] Wrote {path}")
    return path


# ------------------------- main ------------------------------
def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--csv", type=str, default="runs/samples.csv",
                    help="Path to the summary CSV written by gauss_rng.main")
    ap.add_argument("--outdir", type=str, default="reports",
                    help="Output directory for plots and exported CSVs")
    ap.add_argument("--tag", type=str, default="",
                    help="Optional label to append to filenames")
    ap.add_argument("--session", type=str, default="",
                    help="Session ID to analyze; use 'latest' to pick the most recent session automatically.")
    args = ap.parse_args(argv)

    raw = load_csv(args.csv)
    df = raw.copy()

    if args.session:
        if "session_id" not in df.columns:
            print("[WARN] --session provided but CSV has no session_id; ignoring.")
        else:
            sid = args.session
            if sid == "latest":
                sid = latest_session_id(raw)
            if sid:
                df = df[df["session_id"] == sid].copy()
                print(f"[OK] Filtering analysis to session_id={sid}")
            else:
                print("[WARN] Could not resolve latest session_id; analyzing all data.")

    print(f"[INFO] Rows after filter: {len(df)}")
    if len(df) == 0:
        print("[INFO] Nothing to analyze.")
        return

    df = clean(df)
    export_csv(df, args.outdir, base="samples_summary", tag=(args.tag or None))
    plot_runs(df, args.outdir, tag=(args.tag or None))

    print(f"\nDone. Outputs are in: {args.outdir}")

if __name__ == "__main__":
    main()
