"""Application configuration read from the environment."""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path.cwd()
DEFAULT_SECRET_KEY = "dev-secret"
load_dotenv(BASE_DIR / ".env")


def _database_url() -> str | None:
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    db_path = os.getenv("EXPENSETRACK_DB_PATH")
    if db_path:
        return f"sqlite:///{db_path}"
    # Resolved to the default SQLite file by create_database
    return None


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", DEFAULT_SECRET_KEY)
    DATABASE_URL = _database_url()
    TOKEN_MAX_AGE = int(os.getenv("TOKEN_MAX_AGE", str(7 * 24 * 3600)))
    API_PREFIX = os.getenv("API_PREFIX", "/api")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
