# backend/prodreg/config.py
from __future__ import annotations
import os


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    # Optional "SECRET_KEY", with default dev key
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")

    # SQLite DB stored in backend/instance/prodreg.sqlite3
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL", #optional alternative location
        "sqlite:///prodreg.sqlite3", #default local location
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Dashboard sizes
    STATISTICS_TOP_N = int(os.environ.get("STATISTICS_TOP_N", "5"))
    RECENT_ACTIVITY_LIMIT = int(os.environ.get("RECENT_ACTIVITY_LIMIT", "10"))

    # Serve the built-in demonstration dataset when the database is unreachable
    DEMO_FALLBACK_ENABLED = _env_flag("DEMO_FALLBACK_ENABLED", True)

    # Product import uploads (bytes)
    MAX_IMPORT_BYTES = int(os.environ.get("MAX_IMPORT_BYTES", str(2 * 1024 * 1024)))
