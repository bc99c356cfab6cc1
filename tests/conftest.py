"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import lodash_lite...' works
without installing the package, and provides shared fixtures.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from lodash_lite.config.settings import reset_settings  # noqa: E402
from lodash_lite.utils.time import ManualScheduler  # noqa: E402


@pytest.fixture
def scheduler():
    """
    Virtual-time scheduler for debounce/throttle tests.

    Nothing fires until the test calls scheduler.advance(ms), so timing
    assertions are exact and never depend on the wall clock.
    """
    return ManualScheduler()


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Clear cached settings and library env vars around every test."""
    for name in ("LODASH_LITE_SCHEDULER", "LODASH_LITE_RANDOM_SEED", "LODASH_LITE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
