"""Tests for settings."""

import logging

import pytest
from hexcodec.config import Settings, get_settings, reset_settings, configure_logging
from hexcodec.exceptions import ConfigurationError


class TestSettings:
    """Tests for settings loading."""

    def test_defaults(self):
        """Test default values."""
        settings = get_settings()
        assert settings.read_buffer_size == 32 * 1024
        assert settings.log_level == "WARNING"

    def test_cached(self):
        """Test the same instance is returned until reset."""
        first = get_settings()
        assert get_settings() is first
        reset_settings()
        assert get_settings() is not first

    def test_environment_override(self, monkeypatch):
        """Test HEXCODEC_* variables are read."""
        monkeypatch.setenv("HEXCODEC_READ_BUFFER_SIZE", "1024")
        monkeypatch.setenv("HEXCODEC_LOG_LEVEL", "debug")
        settings = get_settings()
        assert settings.read_buffer_size == 1024
        assert settings.log_level == "DEBUG"

    def test_env_file(self, tmp_path):
        """Test a .env file in the working directory is read."""
        (tmp_path / ".env").write_text("HEXCODEC_READ_BUFFER_SIZE=2048\n")
        assert get_settings().read_buffer_size == 2048

    @pytest.mark.parametrize("name,value", [
        ("HEXCODEC_READ_BUFFER_SIZE", "0"),
        ("HEXCODEC_READ_BUFFER_SIZE", "abc"),
        ("HEXCODEC_LOG_LEVEL", "LOUD"),
    ])
    def test_invalid_values(self, monkeypatch, name, value):
        """Test invalid settings raise ConfigurationError."""
        monkeypatch.setenv(name, value)
        with pytest.raises(ConfigurationError):
            get_settings()

    def test_configure_logging(self, monkeypatch):
        """Test the configured level reaches the root logger."""
        calls = []
        monkeypatch.setattr(logging.getLogger("hexcodec"), "level", logging.NOTSET)
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        configure_logging(Settings(log_level="info"))
        assert calls[0]["level"] == logging.INFO

    def test_configure_logging_with_configured_root(self, monkeypatch):
        """Test the package level applies even when basicConfig is a no-op."""
        package_logger = logging.getLogger("hexcodec")
        monkeypatch.setattr(package_logger, "level", logging.NOTSET)
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: None)
        configure_logging(Settings(log_level="debug"))
        assert package_logger.level == logging.DEBUG
        assert logging.getLogger("hexcodec.utils.io").getEffectiveLevel() == logging.DEBUG
