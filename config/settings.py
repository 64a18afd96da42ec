"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., MAX_JOBS env var → Settings.MAX_JOBS)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

Every module imports `settings` from here instead of hardcoding values.
The spool capacity in particular is a configuration value, not a constant
buried inside the repository.
"""

from pydantic_settings import BaseSettings

from models.enums import SchedulingPolicy


class Settings(BaseSettings):
    # ── Spool ───────────────────────────────────────────────────
    MAX_JOBS: int = 100                    # capacity of the print queue

    # ── Scheduler ───────────────────────────────────────────────
    DEFAULT_SCHEDULING_POLICY: SchedulingPolicy = SchedulingPolicy.FCFS

    # ── App ─────────────────────────────────────────────────────
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton, import this everywhere
settings = Settings()
