"""
Tests for the config module.
"""
import logging

import pytest

from courseplanner.config import PlannerConfig
from courseplanner.core.exceptions import ConfigurationError


class TestPlannerConfig:
    """Test cases for PlannerConfig class."""

    def test_defaults(self):
        config = PlannerConfig()

        assert config.catalog_file is None
        assert config.lookup_cache_size == 256
        assert config.log_level == "WARNING"
        assert config.logging_level == logging.WARNING

    def test_from_empty_env(self):
        assert PlannerConfig.from_env({}) == PlannerConfig()

    def test_from_env(self):
        config = PlannerConfig.from_env({
            "COURSEPLANNER_CATALOG": "courses.csv",
            "COURSEPLANNER_CACHE_SIZE": "32",
            "COURSEPLANNER_LOG_LEVEL": "debug",
        })

        assert config.catalog_file == "courses.csv"
        assert config.lookup_cache_size == 32
        assert config.log_level == "DEBUG"
        assert config.logging_level == logging.DEBUG

    def test_from_process_env(self, monkeypatch):
        monkeypatch.setenv("COURSEPLANNER_CACHE_SIZE", "8")
        assert PlannerConfig.from_env().lookup_cache_size == 8

    def test_invalid_cache_size(self):
        with pytest.raises(ConfigurationError, match="must be an integer"):
            PlannerConfig.from_env({"COURSEPLANNER_CACHE_SIZE": "lots"})

    def test_non_positive_cache_size(self):
        with pytest.raises(ConfigurationError, match="must be positive"):
            PlannerConfig(lookup_cache_size=0)

    def test_unknown_log_level(self):
        with pytest.raises(ConfigurationError, match="Unknown log level"):
            PlannerConfig(log_level="chatty")
