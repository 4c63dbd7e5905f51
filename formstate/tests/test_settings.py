"""
Unit tests for environment-driven settings.
"""

import logging

import pytest
from pydantic import ValidationError

from formstate.settings import DEFAULT_LOG_FORMAT, Settings, configure_logging, get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("FORMSTATE_LOG_LEVEL", raising=False)
        monkeypatch.delenv("FORMSTATE_LOG_FORMAT", raising=False)
        settings = get_settings()
        assert settings.log_level == "WARNING"
        assert settings.log_format == DEFAULT_LOG_FORMAT

    def test_level_from_env_is_normalized(self, monkeypatch):
        monkeypatch.setenv("FORMSTATE_LOG_LEVEL", " debug ")
        assert get_settings().log_level == "DEBUG"

    def test_unknown_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_configure_logging_applies_level(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        configure_logging(Settings(log_level="debug", log_format="%(message)s"))
        assert calls == [{"level": logging.DEBUG, "format": "%(message)s"}]
