import contextlib
import csv
import glob
import io
import os
import tempfile
import unittest

import analyze_samples_csv
from gauss_rng.main import build_parser, run
from gauss_rng.sim.config import SAMPLER, SampleRequest
from gauss_rng.sim.metrics import summarize_samples
from gauss_rng.ui.csv_writer import SampleCsvLogger


class TestRun(unittest.TestCase):
    def test_bounded_run_logs_and_plots(self):
        with tempfile.TemporaryDirectory() as d:
            csv_path = os.path.join(d, "runs", "samples.csv")
            out = os.path.join(d, "reports")
            with contextlib.redirect_stdout(io.StringIO()):
                summary = run(["--samples", "2000", "--min", "10", "--max", "20",
                               "--csv", csv_path, "--outdir", out, "--plot"])
            self.assertEqual(summary["n"], 2000)
            self.assertTrue(10 <= summary["min"] <= summary["max"] <= 20)
            self.assertTrue(os.path.exists(csv_path))
            self.assertEqual(len(glob.glob(os.path.join(out, "histogram_*.png"))), 1)

    def test_mean_std_run(self):
        with contextlib.redirect_stdout(io.StringIO()):
            summary = run(["--samples", "5000", "--mean", "50", "--std-dev", "10", "--csv", ""])
        self.assertAlmostEqual(summary["mean"], 50, delta=1.0)
        self.assertAlmostEqual(summary["std"], 10, delta=1.0)

    def test_same_seed_same_summary(self):
        with contextlib.redirect_stdout(io.StringIO()):
            a = run(["--samples", "100", "--seed", "3", "--csv", ""])
            b = run(["--samples", "100", "--seed", "3", "--csv", ""])
        self.assertEqual(a, b)

    def test_invalid_bounds_exit(self):
        err = io.StringIO()
        with contextlib.redirect_stderr(err), self.assertRaises(SystemExit) as cm:
            run(["--min", "20", "--max", "10", "--csv", ""])
        self.assertEqual(cm.exception.code, 1)
        self.assertIn("[ERROR] Minimum bound must be less than maximum bound.", err.getvalue())

    def test_exhausted_exit(self):
        err = io.StringIO()
        with contextlib.redirect_stderr(err), self.assertRaises(SystemExit) as cm:
            run(["--samples", "1", "--min", "0", "--max", "1", "--mean", "1000",
                 "--max-attempts", "3", "--csv", ""])
        self.assertEqual(cm.exception.code, 1)
        self.assertIn("after 3 attempts", err.getvalue())

    def test_max_attempts_defaults_from_sampler_config(self):
        self.assertEqual(build_parser().parse_args([]).max_attempts, SAMPLER.max_attempts)
        self.assertEqual(build_parser().parse_args(["--max-attempts", "7"]).max_attempts, 7)


class TestAnalyzeSamplesCsv(unittest.TestCase):
    def test_latest_session_report(self):
        with tempfile.TemporaryDirectory() as d:
            csv_path = os.path.join(d, "samples.csv")
            out = os.path.join(d, "reports")
            with contextlib.redirect_stdout(io.StringIO()):
                run(["--samples", "500", "--csv", csv_path])
                run(["--samples", "500", "--skew", "0.5", "--csv", csv_path])
                analyze_samples_csv.main(["--csv", csv_path, "--outdir", out, "--session", "latest"])
            exported = glob.glob(os.path.join(out, "samples_summary_*.csv"))
            self.assertEqual(len(exported), 1)
            self.assertEqual(len(glob.glob(os.path.join(out, "runs_*.png"))), 1)
            with open(exported[0]) as f:
                # header + the second invocation only
                self.assertEqual(len(f.read().splitlines()), 2)

    def test_numeric_looking_session_ids(self):
        for sid in ("12345678", "1234e567"):
            with self.subTest(sid=sid), tempfile.TemporaryDirectory() as d:
                csv_path = os.path.join(d, "samples.csv")
                out = os.path.join(d, "reports")
                other = SampleCsvLogger(csv_path)
                other.append_run(SampleRequest(min=0, max=1), summarize_samples([0.5]))
                logger = SampleCsvLogger(csv_path)
                logger.session_id = sid
                logger.append_run(SampleRequest(min=10, max=20), summarize_samples([14.0, 16.0]))
                with contextlib.redirect_stdout(io.StringIO()):
                    analyze_samples_csv.main(["--csv", csv_path, "--outdir", out, "--session", sid])
                exported = glob.glob(os.path.join(out, "samples_summary_*.csv"))
                self.assertEqual(len(exported), 1)
                with open(exported[0]) as f:
                    rows = list(csv.DictReader(f))
                self.assertEqual([r["session_id"] for r in rows], [sid])

    def test_session_filter_without_session_column(self):
        with tempfile.TemporaryDirectory() as d:
            csv_path = os.path.join(d, "samples.csv")
            out = os.path.join(d, "reports")
            with open(csv_path, "w", newline="") as f:
                f.write("run,req_mean,req_std_dev,mean,std\n0,15,1.5,15.1,1.4\n")
            buf = io.StringIO()
            with contextlib.redirect_stdout(buf):
                analyze_samples_csv.main(["--csv", csv_path, "--outdir", out, "--session", "abc"])
            self.assertIn("[WARN] --session provided but CSV has no session_id", buf.getvalue())
            self.assertIn("Rows after filter: 1", buf.getvalue())

    def test_missing_csv_exits(self):
        with tempfile.TemporaryDirectory() as d:
            with contextlib.redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
                analyze_samples_csv.main(["--csv", os.path.join(d, "nope.csv")])


if __name__ == "__main__":
    unittest.main()
