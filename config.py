from __future__ import annotations

import logging
import os


def _env_bool(name: str, default: bool = False) -> bool:
    raw = str(os.getenv(name, "") or "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "y", "on"}


class Config:
    """
    Process configuration, read from the environment.

    Call `load_dotenv()` before constructing so values from `.env` are visible.
    """

    def __init__(self):
        self.APP_ENV = os.getenv("APP_ENV", "development").strip() or "development"
        self.DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./ccp.db").strip()
        self.DB_ECHO = _env_bool("DB_ECHO", False)
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
        self.SEED_DEFAULT_PASSWORD = os.getenv("SEED_DEFAULT_PASSWORD", "SecurePass123!")

    def validate(self) -> None:
        if not self.DATABASE_URL:
            raise RuntimeError("DATABASE_URL is required")
        if not isinstance(logging.getLevelName(self.LOG_LEVEL), int):
            raise RuntimeError(f"Unknown LOG_LEVEL: {self.LOG_LEVEL}")


def get_config() -> Config:
    cfg = Config()
    cfg.validate()
    return cfg
