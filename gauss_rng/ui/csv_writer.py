# gauss_rng/ui/csv_writer.py
from __future__ import annotations
import csv
import os
import uuid
from typing import Dict, Optional

from ..sim.config import SampleRequest


class SampleCsvLogger:
    """
    Append one summary row per sampling run to a CSV file.
    - path: runs/samples.csv
    Each logger gets its own session_id so runs from different invocations can
    be told apart later (see analyze_samples_csv.py --session).

    Usage:
        logger = SampleCsvLogger()
        logger.append_run(request, summarize_samples(values))
    """
    HEADER = [
        "session_id", "run",
        "req_min", "req_max", "req_mean", "req_std_dev", "skew",
        "n", "mean", "std", "min", "q25", "median", "q75", "max",
        "notes",
    ]

    def __init__(self, path: str = "runs/samples.csv"):
        self.path = path
        self.session_id = uuid.uuid4().hex[:8]
        self.runs = 0

        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        if not os.path.exists(self.path):
            with open(self.path, "w", newline="") as f:
                csv.DictWriter(f, fieldnames=self.HEADER).writeheader()

    @staticmethod
    def _blank(v: Optional[float]):
        return "" if v is None else v

    def _row(self, req: SampleRequest, summary: Dict[str, float], notes: Optional[str]) -> Dict:
        # requested values are the resolved ones so defaulted mean/std show up
        mean, std_dev, bounds = req.resolve()
        lo, hi = bounds if bounds is not None else (None, None)
        return dict(
            session_id=self.session_id,
            run=self.runs,
            req_min=self._blank(lo),
            req_max=self._blank(hi),
            req_mean=mean,
            req_std_dev=std_dev,
            skew=req.skew,
            n=summary["n"],
            mean=summary["mean"],
            std=summary["std"],
            min=summary["min"],
            q25=summary["q25"],
            median=summary["median"],
            q75=summary["q75"],
            max=summary["max"],
            notes=(notes or ""),
        )

    def append_run(self, req: SampleRequest, summary: Dict[str, float], notes: Optional[str] = None) -> Dict:
        row = self._row(req, summary, notes)
        with open(self.path, "a", newline="") as f:
            csv.DictWriter(f, fieldnames=self.HEADER).writerow(row)
        self.runs += 1
        return row
