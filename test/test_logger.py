"""
Test cases for the logger.py configuration.
"""

import logging
import unittest

from solarscope.logger import ColoredFormatter, config_logger


class TestLogger(unittest.TestCase):
    """Test cases for the colored logger."""

    def setUp(self):
        """Remember the root logger state."""
        self.root = logging.getLogger()
        self.handlers = self.root.handlers[:]
        self.level = self.root.level

    def tearDown(self):
        """Restore the root logger state."""
        self.root.handlers = self.handlers
        self.root.setLevel(self.level)

    def test_config_logger_replaces_handlers(self):
        """Repeated calls leave a single colored handler."""
        config_logger()
        config_logger(debug=True)

        self.assertEqual(len(self.root.handlers), 1)
        self.assertIsInstance(self.root.handlers[0].formatter, ColoredFormatter)
        self.assertEqual(self.root.level, logging.DEBUG)

    def test_format_wraps_colors(self):
        """Warnings are yellow and reset at the end."""
        record = logging.LogRecord("solarscope", logging.WARNING, __file__, 1, "careful", None, None)
        message = ColoredFormatter("%(levelname)s: %(message)s").format(record)

        self.assertTrue(message.startswith("\033[33m"))
        self.assertTrue(message.endswith(ColoredFormatter.RESET))
        self.assertIn("WARNING: careful", message)


if __name__ == "__main__":
    unittest.main()
