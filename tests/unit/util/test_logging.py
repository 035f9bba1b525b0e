"""Unit tests for logging setup."""

import logging

from tally.config import Settings
from tally.util.logging import setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_debug_setting_controls_level(self):
        """Debug mode turns the application logger to DEBUG."""
        setup_logging(Settings(debug=True))
        assert logging.getLogger("tally").level == logging.DEBUG

        setup_logging(Settings(debug=False))
        assert logging.getLogger("tally").level == logging.INFO
