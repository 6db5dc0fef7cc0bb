import sys
import unittest
from unittest import mock

from rich.console import Console

from intervalstore.modes.StressMode import StressMode


class TestStressMode(unittest.TestCase):
    def test_stress_prints_report(self):
        console = Console(record=True, width=120)
        with mock.patch.object(sys, "argv", ["intervalstore stress", "iterations=50", "seed=3", "--show"]):
            StressMode(console).run()
        output = console.export_text()

        self.assertIn("Stress Report", output)
        self.assertIn("Interval Store", output)
        self.assertIn("done!", output)

    def test_stress_logs_summary(self):
        console = Console(record=True, width=120)
        with mock.patch.object(sys, "argv", ["intervalstore stress", "iterations=10", "seed=1"]):
            with self.assertLogs("intervalstore.stress.StressDriver", level="INFO") as logs:
                StressMode(console).run()

        self.assertTrue(any("Stress run done" in line for line in logs.output))

    def test_invalid_override_raises(self):
        console = Console(record=True)
        with mock.patch.object(sys, "argv", ["intervalstore stress", "iterations"]):
            with self.assertRaises(ValueError):
                StressMode(console).run()


if __name__ == "__main__":
    unittest.main()
