"""
Tests for config.settings: defaults and environment overrides.
"""

from __future__ import annotations

import pytest

from config.settings import Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DATEKIT_HOLIDAY_FETCH_DELAY_S", raising=False)
        monkeypatch.delenv("DATEKIT_LOG_LEVEL", raising=False)
        cfg = Settings(_env_file=None)
        assert cfg.holiday_fetch_delay_s == 0.1
        assert cfg.log_level == "INFO"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATEKIT_HOLIDAY_FETCH_DELAY_S", "0.5")
        monkeypatch.setenv("DATEKIT_LOG_LEVEL", "DEBUG")
        cfg = Settings(_env_file=None)
        assert cfg.holiday_fetch_delay_s == 0.5
        assert cfg.log_level == "DEBUG"

    def test_unprefixed_env_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DATEKIT_LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert Settings(_env_file=None).log_level == "INFO"
