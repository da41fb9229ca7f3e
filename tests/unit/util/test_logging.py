"""Unit tests for logging setup."""

import logging

from civic.config import Settings
from civic.util.logging import level_for


class TestLevelFor:
    def test_debug_wins_over_environment(self):
        assert level_for(Settings(debug=True, environment="production")) == logging.DEBUG

    def test_production_logs_warnings(self):
        assert level_for(Settings(debug=False, environment="production")) == logging.WARNING

    def test_development_logs_info(self):
        assert level_for(Settings(debug=False, environment="development")) == logging.INFO
