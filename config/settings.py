"""
Global configuration for datekit.

All values are read from environment variables (prefixed DATEKIT_).
Defaults are safe for local development; override via .env or the environment.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DATEKIT_", env_file=".env")

    # ── Holiday lookup ────────────────────────────────────────────────────
    holiday_fetch_delay_s: float = 0.1     # Simulated latency of the holiday source

    # ── Logging ───────────────────────────────────────────────────────────
    log_level: str = "INFO"                # Root level applied by main.py


settings = Settings()
