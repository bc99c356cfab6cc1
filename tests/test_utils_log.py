"""
Tests for lodash_lite/utils/log.py
"""

import logging

from lodash_lite.utils import log


def test_configure_logging_uses_level_from_settings(monkeypatch):
    """Test that the level defaults to LODASH_LITE_LOG_LEVEL."""
    captured = {}
    monkeypatch.setenv("LODASH_LITE_LOG_LEVEL", "INFO")
    monkeypatch.setattr(log.logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    log.configure_logging()

    assert captured["level"] == logging.INFO
    assert "%(name)s" in captured["format"]


def test_configure_logging_explicit_level_wins(monkeypatch):
    """Test that an explicit level overrides the environment."""
    captured = {}
    monkeypatch.setenv("LODASH_LITE_LOG_LEVEL", "ERROR")
    monkeypatch.setattr(log.logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    log.configure_logging("DEBUG")

    assert captured["level"] == "DEBUG"
