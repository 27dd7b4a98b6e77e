"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from safemap.config import SafeMapConfig


class TestSafeMapConfig:
    def test_defaults(self, monkeypatch):
        for name in ("SAFEMAP_OPENWEATHER_KEY", "SAFEMAP_DEFAULT_COUNTRY"):
            monkeypatch.delenv(name, raising=False)
        config = SafeMapConfig()
        assert config.request_timeout == 10
        assert config.openweather_key == ""
        assert config.default_country == "US"
        assert config.default_city == "New York"
        assert config.use_base_profile is True
        assert config.output_file == Path("safemap_countries.json")
        assert config.output_format == "json"

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("SAFEMAP_OPENWEATHER_KEY", "abc123")
        monkeypatch.setenv("SAFEMAP_REQUEST_TIMEOUT", "30")
        monkeypatch.setenv("SAFEMAP_USE_BASE_PROFILE", "false")
        config = SafeMapConfig()
        assert config.openweather_key == "abc123"
        assert config.request_timeout == 30
        assert config.use_base_profile is False

    def test_constructor_overrides_env(self, monkeypatch):
        monkeypatch.setenv("SAFEMAP_DEFAULT_CITY", "Paris")
        assert SafeMapConfig(default_city="Lima").default_city == "Lima"

    @pytest.mark.parametrize("timeout", [0, 500])
    def test_timeout_bounds(self, timeout):
        with pytest.raises(ValidationError):
            SafeMapConfig(request_timeout=timeout)

    def test_invalid_output_format(self):
        with pytest.raises(ValidationError):
            SafeMapConfig(output_format="xml")
