"""Unit tests for environment-driven configuration."""

import pytest

from doctemplates.core import config
from doctemplates.errors import ConfigurationError


class TestLoadConfig:
    def test_defaults(self, monkeypatch):
        for var in (
            "DOCTEMPLATES_LOG_LEVEL",
            "DOCTEMPLATES_LOGO_URL",
            "DOCTEMPLATES_CLONE_COUNT",
            "DOCTEMPLATES_TIMESTAMP_FORMAT",
        ):
            monkeypatch.delenv(var, raising=False)
        cfg = config._load_config()
        assert cfg.log_level == "INFO"
        assert cfg.logo_url == "https://company.com/logo.png"
        assert cfg.clone_count == 5
        assert cfg.timestamp_format == "%d/%m/%Y %H:%M:%S"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("DOCTEMPLATES_LOG_LEVEL", "debug")
        monkeypatch.setenv("DOCTEMPLATES_CLONE_COUNT", "12")
        cfg = config._load_config()
        assert cfg.log_level == "DEBUG"
        assert cfg.clone_count == 12


class TestValidateConfig:
    def _cfg(self, **overrides):
        values = dict(
            log_level="INFO",
            logo_url="https://company.com/logo.png",
            clone_count=5,
            timestamp_format="%Y",
        )
        values.update(overrides)
        return config.AppConfig(**values)

    def test_valid(self):
        config._validate_config(self._cfg())

    def test_bad_values_collected(self):
        with pytest.raises(ConfigurationError) as exc:
            config._validate_config(self._cfg(log_level="LOUD", clone_count=0))
        assert len(exc.value.errors) == 2

    def test_empty_logo(self):
        with pytest.raises(ConfigurationError):
            config._validate_config(self._cfg(logo_url=""))
