"""Configuration for the schedule repository."""

import os
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Mapping, Optional

from node_lifecycle.exceptions import ConfigurationError

DEFAULT_CACHE_TTL = timedelta(hours=24)
CACHE_SUBDIRECTORY = "node-lifecycle"

# Environment variables recognised by ScheduleConfig.from_env
ENV_CACHE_TTL = "NODE_EOL_CACHE_TTL"  # milliseconds
ENV_CACHE_DIR = "NODE_EOL_CACHE_DIR"
ENV_XDG_CACHE_HOME = "XDG_CACHE_HOME"


def default_cache_directory() -> Path:
    """Default cache location (~/.cache/node-lifecycle)."""
    return Path.home() / ".cache" / CACHE_SUBDIRECTORY


@dataclass
class ScheduleConfig:
    """
    Settings for fetching and caching release schedules.

    Attributes:
        cache_ttl: How long a cached feed stays fresh; zero disables cache hits
        cache_directory: Where cached feed files are stored
    """

    cache_ttl: timedelta = DEFAULT_CACHE_TTL
    cache_directory: Path = field(default_factory=default_cache_directory)

    def validate(self) -> None:
        """
        Validate configuration settings.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if self.cache_ttl < timedelta(0):
            raise ConfigurationError(f"Cache TTL must not be negative: {self.cache_ttl}")
        if not str(self.cache_directory):
            raise ConfigurationError("Cache directory must not be empty")

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        cache_ttl: Optional[timedelta] = None,
        cache_directory: Optional[Path] = None,
    ) -> "ScheduleConfig":
        """
        Build a validated configuration from environment variables.

        Explicit arguments take precedence over the environment.

        Args:
            environ: Environment mapping (defaults to os.environ)
            cache_ttl: Overrides NODE_EOL_CACHE_TTL
            cache_directory: Overrides NODE_EOL_CACHE_DIR / XDG_CACHE_HOME

        Raises:
            ConfigurationError: If an environment value is invalid
        """
        env = os.environ if environ is None else environ

        if cache_ttl is None:
            raw_ttl = env.get(ENV_CACHE_TTL, "").strip()
            if raw_ttl:
                try:
                    cache_ttl = timedelta(milliseconds=float(raw_ttl))
                except (ValueError, OverflowError):
                    raise ConfigurationError(f"Invalid {ENV_CACHE_TTL} value: {raw_ttl}")
            else:
                cache_ttl = DEFAULT_CACHE_TTL

        if cache_directory is None:
            if env.get(ENV_CACHE_DIR):
                cache_directory = Path(env[ENV_CACHE_DIR]).expanduser()
            elif env.get(ENV_XDG_CACHE_HOME):
                cache_directory = Path(env[ENV_XDG_CACHE_HOME]).expanduser() / CACHE_SUBDIRECTORY
            else:
                cache_directory = default_cache_directory()

        config = cls(cache_ttl=cache_ttl, cache_directory=cache_directory)
        config.validate()
        return config
