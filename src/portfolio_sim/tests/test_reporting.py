# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Tests for text reports.
"""

import io
import unittest

from ..montecarlo.results import MonteCarloResults
from ..reporting import format_success_rate, format_summary, report


class TestReporting(unittest.TestCase):
    """Tests for the reporting helpers."""

    def setUp(self):
        self.summary = MonteCarloResults([1.0, 2.0, 3.0, 0.0]).summarize()

    def test_success_line_format(self):
        """Test the exact success-rate sentence."""
        self.assertEqual(format_success_rate(self.summary),
                         "Out of 4 simulations you passed 75.0% of the time")

    def test_success_line_unrounded(self):
        """Test that the percentage keeps its full precision."""
        summary = MonteCarloResults([1.0, 0.0, 0.0]).summarize()
        self.assertEqual(format_success_rate(summary),
                         f"Out of 3 simulations you passed {1 / 3 * 100}% of the time")

    def test_format_summary(self):
        """Test the detailed summary starts with the success line."""
        text = format_summary(self.summary)
        lines = text.splitlines()
        self.assertEqual(lines[0], format_success_rate(self.summary))
        self.assertIn("median", text)
        self.assertIn("p95:", text)

    def test_report_writes_to_stream(self):
        """Test that report() writes one line by default."""
        stream = io.StringIO()
        report(self.summary, stream)
        self.assertEqual(stream.getvalue(),
                         "Out of 4 simulations you passed 75.0% of the time\n")

    def test_report_detailed(self):
        """Test that the detailed report adds statistics lines."""
        stream = io.StringIO()
        report(self.summary, stream, detailed=True)
        self.assertGreater(len(stream.getvalue().splitlines()), 1)


if __name__ == '__main__':
    unittest.main()
