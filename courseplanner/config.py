"""
Runtime configuration for the course planner.

Values come from defaults, then from COURSEPLANNER_* environment
variables, then from the command line.
"""
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .core.exceptions import ConfigurationError

ENV_CATALOG_FILE = "COURSEPLANNER_CATALOG"
ENV_CACHE_SIZE = "COURSEPLANNER_CACHE_SIZE"
ENV_LOG_LEVEL = "COURSEPLANNER_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class PlannerConfig:
    """Settings shared by the catalog and the interactive shell."""

    """📂 Course file loaded before the menu starts, if any"""
    catalog_file: Optional[str] = None

    """🗃️ Maximum number of course lookups kept in the LRU cache"""
    lookup_cache_size: int = 256

    """📝 Name of the logging level"""
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.lookup_cache_size < 1:
            raise ConfigurationError(
                f"Lookup cache size must be positive, got {self.lookup_cache_size}")

        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level}")

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None) -> 'PlannerConfig':
        """Build a configuration from COURSEPLANNER_* environment variables."""
        environ = os.environ if environ is None else environ
        settings = {}

        if environ.get(ENV_CATALOG_FILE):
            settings["catalog_file"] = environ[ENV_CATALOG_FILE]

        if environ.get(ENV_CACHE_SIZE):
            try:
                settings["lookup_cache_size"] = int(environ[ENV_CACHE_SIZE])
            except ValueError:
                raise ConfigurationError(
                    f"{ENV_CACHE_SIZE} must be an integer, got '{environ[ENV_CACHE_SIZE]}'")

        if environ.get(ENV_LOG_LEVEL):
            settings["log_level"] = environ[ENV_LOG_LEVEL]

        return cls(**settings)
