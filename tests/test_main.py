"""
Tests for the main.py entrypoint.
"""

from __future__ import annotations

import pytest

import main
from config.settings import settings


@pytest.fixture(autouse=True)
def no_fetch_delay(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "holiday_fetch_delay_s", 0.0)


class TestMain:
    @pytest.mark.asyncio
    async def test_holiday_argument(self) -> None:
        assert await main.main(["2024-12-25"]) is True

    @pytest.mark.asyncio
    async def test_ordinary_day_argument(self) -> None:
        assert await main.main(["2024-07-02"]) is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("arg", ["not-a-date", "2024-13-45", ""])
    async def test_malformed_argument_exits_non_zero(self, arg: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            await main.main([arg])
        assert exc_info.value.code == 1
