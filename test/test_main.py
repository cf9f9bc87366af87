"""
Test cases for the main.py functions.
"""

import json
import logging
import os
import tempfile
import unittest
from unittest.mock import patch

import main
from solarscope.classification import AnomalySeverity

# silence logs
logging.disable(logging.CRITICAL)


class TestGetArgs(unittest.TestCase):
    """Test cases for the argument parsing."""

    def test_defaults(self):
        """Summary of the latest year by default."""
        args = main.get_args(["--data", "snapshot.json"])

        self.assertEqual(args.data, "snapshot.json")
        self.assertEqual(args.mode, "summary")
        self.assertIsNone(args.year)
        self.assertFalse(args.all_years)
        self.assertEqual(args.severity, AnomalySeverity.LOW)
        self.assertEqual(args.count, 10)

    def test_severity_is_parsed(self):
        """Severity names become AnomalySeverity values."""
        args = main.get_args(["--mode", "anomalies", "--severity", "High"])
        self.assertEqual(args.severity, AnomalySeverity.HIGH)

    def test_invalid_combinations(self):
        """Conflicting or invalid options raise ValueError."""
        with self.assertRaises(ValueError):
            main.get_args(["--year", "2023", "--all-years"])

        with self.assertRaises(ValueError):
            main.get_args(["--count", "-1"])

        with self.assertRaises(ValueError):
            main.get_args(["--severity", "extreme"])


class TestMain(unittest.TestCase):
    """Test cases for the main function."""

    def setUp(self):
        """Write a small snapshot."""
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp_dir.name, "data.json")
        with open(self.path, "w", encoding="utf-8") as handle:
            json.dump(
                {
                    "2023": [
                        {"D": 1, "P": 20, "U": 15, "MS": {"tsun": 9}},
                        {"D": 2, "P": 0, "U": 10, "MS": {"tsun": 1, "prcp": 6}},
                        {"D": 3, "P": 18, "U": 14, "MS": {"tsun": 8.5}},
                    ]
                },
                handle,
            )

    def tearDown(self):
        """Remove the snapshot."""
        self.tmp_dir.cleanup()

    @patch("main.config_logger")
    def test_every_mode_runs(self, mock_config_logger):
        """Each mode completes on a valid snapshot."""
        for mode in main.MODES:
            with self.subTest(mode=mode):
                self.assertEqual(main.main(["--data", self.path, "--mode", mode]), 0)

        mock_config_logger.assert_called_with(debug=False)

    @patch("main.config_logger")
    @patch("main.log_summary")
    def test_latest_year_is_default(self, mock_log_summary, _):
        """Without --year the latest year is analyzed."""
        main.main(["--data", self.path])

        data, year = mock_log_summary.call_args.args
        self.assertEqual(year, 2023)
        self.assertEqual(data.total_days, 3)

    @patch("main.config_logger")
    @patch("main.log_correlation")
    def test_all_years(self, mock_log_correlation, _):
        """--all-years passes None as the year."""
        main.main(["--data", self.path, "--all-years", "--mode", "correlation"])

        _, year = mock_log_correlation.call_args.args
        self.assertIsNone(year)

    @patch("main.config_logger")
    def test_missing_file_fails(self, _):
        """A load error gives a non-zero exit code."""
        missing = os.path.join(self.tmp_dir.name, "missing.json")
        self.assertEqual(main.main(["--data", missing]), 1)

    @patch("main.config_logger")
    def test_empty_snapshot_fails(self, _):
        """A snapshot without years has nothing to analyze."""
        empty = os.path.join(self.tmp_dir.name, "empty.json")
        with open(empty, "w", encoding="utf-8") as handle:
            json.dump({}, handle)

        self.assertEqual(main.main(["--data", empty]), 1)


if __name__ == "__main__":
    unittest.main()
