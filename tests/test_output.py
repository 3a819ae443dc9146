"""Unit tests for the ui package -- text/JSON formatting and progress bar."""

import io
import json
import unittest

from rich.console import Console

from meter.config import Settings
from meter.report import SpeedtestReport
from ui import dashboard
from ui.dashboard import ProgressDisplay
from ui.output import create_result_json, format_text_result


REPORT = SpeedtestReport(ping_ms=30.0, download_mbps=40.0, upload_mbps=16.0)


class TestSpeedtestReport(unittest.TestCase):
    def test_to_dict_rounds(self):
        r = SpeedtestReport(ping_ms=12.3456, download_mbps=1.005, upload_mbps=2.0)
        d = r.to_dict()
        self.assertEqual(d["ping_ms"], 12.35)
        self.assertEqual(d["upload_mbps"], 2.0)

    def test_frozen(self):
        with self.assertRaises(AttributeError):
            REPORT.ping_ms = 1.0


class TestFormatTextResult(unittest.TestCase):
    def test_contains_values(self):
        text = format_text_result(REPORT)
        self.assertIn("Final Results", text)
        self.assertIn("Ping: 30.00 ms", text)
        self.assertIn("Download: 40.00 Mbps", text)
        self.assertIn("Upload: 16.00 Mbps", text)

    def test_line_order(self):
        lines = format_text_result(REPORT).splitlines()
        self.assertEqual(lines[0], "Final Results")
        self.assertTrue(lines[2].startswith("Ping:"))
        self.assertTrue(lines[3].startswith("Download:"))
        self.assertTrue(lines[4].startswith("Upload:"))


class TestCreateResultJson(unittest.TestCase):
    def test_basic_structure(self):
        r = create_result_json(
            REPORT,
            latency_results={"url": "http://p", "samples": [29.0, 31.0], "min_ms": 29.0, "max_ms": 31.0},
            download_results={"bytes_total": 100, "duration_ms": 10.0},
            upload_results={"bytes_total": 200, "duration_ms": 20.0},
        )
        self.assertIn("timestamp", r)
        self.assertEqual(r["ping"], 30.0)
        self.assertEqual(r["download"], 40.0)
        self.assertEqual(r["upload"], 16.0)
        self.assertEqual(r["latency"]["samples"], [29.0, 31.0])
        self.assertEqual(r["transfer"]["upload"]["bytes"], 200)
        json.dumps(r)

    def test_settings_section(self):
        r = create_result_json(REPORT, settings=Settings().to_dict())
        self.assertEqual(r["settings"]["ping_count"], 5)
        self.assertEqual(r["settings"]["fallback_total"], 10 * 1024 * 1024)

    def test_missing_details(self):
        r = create_result_json(REPORT)
        self.assertEqual(r["settings"], {})
        self.assertEqual(r["transfer"]["upload"]["status"], 0)
        self.assertEqual(r["latency"]["samples"], [])
        self.assertEqual(r["transfer"]["download"]["bytes"], 0)


class TestPrintFinalResults(unittest.TestCase):
    def test_summary_lines(self):
        buf = io.StringIO()
        original = dashboard.console
        dashboard.console = Console(file=buf, force_terminal=False, width=80)
        try:
            dashboard.print_final_results(REPORT)
        finally:
            dashboard.console = original
        out = buf.getvalue()
        self.assertIn("Final Results", out)
        self.assertIn("Ping: 30.00 ms", out)
        self.assertIn("Download: 40.00 Mbps", out)
        self.assertIn("Upload: 16.00 Mbps", out)


class TestProgressDisplay(unittest.TestCase):
    def _display(self):
        return ProgressDisplay(Console(file=io.StringIO(), force_terminal=False, width=100))

    def test_update_and_stop(self):
        d = self._display()
        d.start("Downloading")
        d.update(50.0, 8.0)
        self.assertAlmostEqual(d.progress.tasks[0].completed, 50.0)
        d.update(100.0, 8.0)
        d.stop()
        self.assertAlmostEqual(d.progress.tasks[0].completed, 100.0)

    def test_small_changes_flushed_on_stop(self):
        d = self._display()
        d.start("Downloading")
        d.update(0.5, 0.1)
        self.assertAlmostEqual(d.progress.tasks[0].completed, 0.0)
        d.stop()
        self.assertAlmostEqual(d.progress.tasks[0].completed, 0.5)

    def test_update_before_start_ignored(self):
        d = self._display()
        d.update(50.0, 8.0)
        self.assertEqual(d.progress.tasks, [])


if __name__ == "__main__":
    unittest.main()
