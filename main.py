"""
datekit: command-line entrypoint.

Logs the holidays for a date's year and whether that date is a holiday.

Usage:
    python main.py                 # today
    python main.py 2024-12-25
    DATEKIT_LOG_LEVEL=DEBUG python main.py
"""

from __future__ import annotations

import asyncio
import logging
import sys

import pandas as pd
import structlog

from config.settings import settings
from services.date_utils import get_current_year, get_holidays, is_holiday

# ── Logging setup ─────────────────────────────────────────────────────────────

structlog.configure(
    processors=[
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    stream=sys.stdout,
)

log = structlog.get_logger("datekit.main")


async def main(argv: list[str] | None = None) -> bool:
    argv = sys.argv[1:] if argv is None else argv
    if argv:
        try:
            target = pd.Timestamp(argv[0])
        except ValueError:
            target = pd.NaT
        if pd.isna(target):
            log.error("invalid date argument", value=argv[0], expected="YYYY-MM-DD")
            sys.exit(1)
    else:
        target = pd.Timestamp.now().normalize()

    log.info("datekit starting", current_year=get_current_year())

    # Both lookups hit the holiday source independently
    holidays, holiday = await asyncio.gather(
        get_holidays(target.year),
        is_holiday(target),
    )
    log.info(
        "holidays fetched",
        year=target.year,
        holidays=[h.date().isoformat() for h in holidays],
    )
    log.info("holiday check", date=target.date().isoformat(), is_holiday=holiday)
    return holiday


if __name__ == "__main__":
    asyncio.run(main())
