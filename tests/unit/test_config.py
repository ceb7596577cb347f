"""
Unit tests for warmpath/common/config.py and the threshold snapshot.
"""

import pytest

from warmpath.common.config import Config
from warmpath.common.error_handling import ConfigurationError, WarmpathError
from warmpath.pathfinder.types import StrategyThresholds


class TestConfigValidate:
    """Tests for Config.validate."""

    def test_defaults_are_valid(self):
        Config.validate()

    def test_threshold_out_of_range(self, monkeypatch):
        monkeypatch.setattr(Config, "DIRECT_HIGH_THRESHOLD", 1.5)
        with pytest.raises(ConfigurationError, match="DIRECT_HIGH_THRESHOLD"):
            Config.validate()

    def test_cold_above_direct(self, monkeypatch):
        monkeypatch.setattr(Config, "COLD_PERSONALIZATION_THRESHOLD", 0.8)
        with pytest.raises(ConfigurationError, match="must not exceed"):
            Config.validate()

    def test_non_positive_limits(self, monkeypatch):
        monkeypatch.setattr(Config, "BATCH_MAX_CONCURRENT", 0)
        with pytest.raises(ConfigurationError, match="BATCH_MAX_CONCURRENT"):
            Config.validate()

    def test_configuration_error_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)
        assert issubclass(ConfigurationError, WarmpathError)

    def test_summary_mentions_thresholds(self):
        summary = Config.summary()
        assert "Direct similarity: >= 0.65" in summary
        assert "Batch floor: > 0.45" in summary

    def test_thresholds_are_the_consumed_ones(self):
        assert set(Config.thresholds()) == {
            "DIRECT_HIGH_THRESHOLD",
            "COLD_PERSONALIZATION_THRESHOLD",
            "INTERMEDIARY_GOOD_THRESHOLD",
            "BATCH_CONFIDENCE_FLOOR",
        }


class TestStrategyThresholds:
    """Tests for the per-call threshold snapshot."""

    def test_from_config(self, monkeypatch):
        monkeypatch.setattr(Config, "INTERMEDIARY_GOOD_THRESHOLD", 0.4)
        thresholds = StrategyThresholds.from_config()
        assert thresholds.intermediary_good == 0.4
        assert thresholds.direct_high == 0.65

    def test_defaults(self):
        assert StrategyThresholds() == StrategyThresholds.from_config()
