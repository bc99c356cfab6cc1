"""
Configuration settings for lodash_lite.

**Conceptual**: This module provides strongly-typed configuration objects that
load from environment variables (via .env files). Settings are validated when
loaded, so a typo such as LODASH_LITE_SCHEDULER=threads fails fast with a clear
message instead of silently falling back to a different timer backend.

**What is configurable?**
  - Which timer backend debounce/throttle use by default.
  - The seed of the random-number generator behind random().
  - The log level applied by configure_logging().

The data helpers themselves take no configuration: their behavior is fixed.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root (dev/local environments); existing variables win.
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

SCHEDULER_CHOICES = ("thread", "asyncio", "manual")
LOG_LEVEL_CHOICES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class TimingSettings:
    """
    Configuration for the default timer backend of debounce/throttle.

    **Choices**:
      - "thread": threading.Timer per scheduled callback (default).
      - "asyncio": loop.call_later on the running event loop.
      - "manual": virtual clock; nothing fires until advanced (tests only).

    Attributes:
        scheduler: Name of the scheduler backend.
    """
    scheduler: str = "thread"

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.scheduler not in SCHEDULER_CHOICES:
            raise ValueError(
                f"LODASH_LITE_SCHEDULER must be one of {', '.join(SCHEDULER_CHOICES)}, "
                f"got: {self.scheduler!r}"
            )

    @classmethod
    def from_env(cls) -> "TimingSettings":
        """
        Load timing settings from environment variables.

        **Environment variables**:
          - LODASH_LITE_SCHEDULER (optional): thread, asyncio or manual.
            Defaults to "thread".

        Raises:
            ValueError: If the scheduler name is not recognised.
        """
        scheduler = os.getenv("LODASH_LITE_SCHEDULER", "thread").strip().lower()
        return cls(scheduler=scheduler)


@dataclass(frozen=True)
class RandomSettings:
    """
    Configuration for the random-number generator behind random().

    Attributes:
        seed: Seed for numpy's default generator. None draws fresh entropy
              from the OS, so results differ between runs.
    """
    seed: Optional[int] = None

    @classmethod
    def from_env(cls) -> "RandomSettings":
        """
        Load random settings from environment variables.

        **Environment variables**:
          - LODASH_LITE_RANDOM_SEED (optional): integer seed.

        Raises:
            ValueError: If LODASH_LITE_RANDOM_SEED is not an integer.
        """
        seed_str = os.getenv("LODASH_LITE_RANDOM_SEED", "").strip()
        if not seed_str:
            return cls(seed=None)

        try:
            seed = int(seed_str)
        except ValueError:
            raise ValueError(
                f"LODASH_LITE_RANDOM_SEED must be an integer, got: {seed_str}"
            )
        return cls(seed=seed)


@dataclass(frozen=True)
class LoggingSettings:
    """
    Configuration for configure_logging().

    Attributes:
        level: Standard logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    level: str = "WARNING"

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.level not in LOG_LEVEL_CHOICES:
            raise ValueError(
                f"LODASH_LITE_LOG_LEVEL must be one of {', '.join(LOG_LEVEL_CHOICES)}, "
                f"got: {self.level!r}"
            )

    @property
    def level_number(self) -> int:
        """Numeric logging level (e.g. logging.WARNING)."""
        return logging.getLevelName(self.level)

    @classmethod
    def from_env(cls) -> "LoggingSettings":
        """
        Load logging settings from environment variables.

        **Environment variables**:
          - LODASH_LITE_LOG_LEVEL (optional): defaults to WARNING.
        """
        level = os.getenv("LODASH_LITE_LOG_LEVEL", "WARNING").strip().upper()
        return cls(level=level)


@dataclass(frozen=True)
class Settings:
    """
    Global settings for lodash_lite.

    **Conceptual**: Top-level settings object aggregating the subsystem
    settings. Tests construct it directly (Settings(timing=TimingSettings("manual")))
    instead of touching the environment.

    Attributes:
        timing: Default timer backend.
        random: Random generator seed.
        logging: Log level.
    """
    timing: TimingSettings = field(default_factory=TimingSettings)
    random: RandomSettings = field(default_factory=RandomSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load global settings from environment variables.

        Returns:
            Settings object with all subsystem settings loaded from environment.

        Raises:
            ValueError: If any variable holds an invalid value.

        Usage example:
            >>> settings = Settings.from_env()
            >>> settings.timing.scheduler
            'thread'
        """
        return cls(
            timing=TimingSettings.from_env(),
            random=RandomSettings.from_env(),
            logging=LoggingSettings.from_env(),
        )


# Lazily-loaded singleton; tests call reset_settings() to force a reload.
_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from the environment on first call, then cached.

    Returns:
        Global Settings singleton.

    Raises:
        ValueError: If an environment variable holds an invalid value.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    **Testing pattern**:
      ```python
      def test_something(monkeypatch):
          monkeypatch.setenv("LODASH_LITE_SCHEDULER", "manual")
          reset_settings()
          assert get_settings().timing.scheduler == "manual"
      ```
    """
    global _default_settings
    _default_settings = None
