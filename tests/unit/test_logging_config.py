"""Tests for centralized logging configuration and settings."""

import logging

import pytest
from pydantic import ValidationError

from logging_config import setup_logging


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_root_logger_level_default_warning(self, monkeypatch):
        """Without LOG_LEVEL the root logger stays at WARNING."""
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        from config import Settings
        test_settings = Settings(_env_file=None)
        monkeypatch.setattr("logging_config.settings", test_settings)

        setup_logging()

        assert logging.getLogger().level == logging.WARNING

    def test_root_logger_level_from_settings(self, monkeypatch):
        """LOG_LEVEL setting should control root logger level."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        from config import Settings
        test_settings = Settings()
        monkeypatch.setattr("logging_config.settings", test_settings)

        setup_logging()

        assert logging.getLogger().level == logging.DEBUG

    def test_invalid_log_level_rejected(self, monkeypatch):
        """Invalid LOG_LEVEL values should raise a validation error."""
        monkeypatch.setenv("LOG_LEVEL", "VERBOS")
        from config import Settings
        with pytest.raises(ValidationError, match="LOG_LEVEL"):
            Settings()

    def test_log_level_case_insensitive(self, monkeypatch):
        """LOG_LEVEL should accept lowercase values."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        from config import Settings
        test_settings = Settings()
        assert test_settings.LOG_LEVEL == "DEBUG"


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("DECIMAL_PRECISION", "DECIMAL_MAX_EXPONENT", "PRICE_PLACES", "QUANTITY_PLACES"):
            monkeypatch.delenv(name, raising=False)
        from config import Settings
        test_settings = Settings(_env_file=None)

        assert test_settings.DECIMAL_PRECISION == 28
        assert test_settings.DECIMAL_MAX_EXPONENT == 28
        assert test_settings.PRICE_PLACES == 2
        assert test_settings.QUANTITY_PLACES == 8

    def test_precision_from_env(self, monkeypatch):
        monkeypatch.setenv("DECIMAL_PRECISION", "34")
        from config import Settings
        assert Settings().DECIMAL_PRECISION == 34

    def test_zero_precision_rejected(self, monkeypatch):
        monkeypatch.setenv("DECIMAL_PRECISION", "0")
        from config import Settings
        with pytest.raises(ValidationError, match="DECIMAL_PRECISION"):
            Settings()

    def test_negative_places_rejected(self, monkeypatch):
        monkeypatch.setenv("QUANTITY_PLACES", "-1")
        from config import Settings
        with pytest.raises(ValidationError, match="QUANTITY_PLACES"):
            Settings()
