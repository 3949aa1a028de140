"""
Database initialization script.

Creates the tables and seeds ``user_timezone`` with ``DEFAULT_TIMEZONE``.
Use Alembic (``alembic upgrade head``) for an existing Postgres database.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

import structlog

from app.core.config import settings
from app.core.logging import configure_logging
from app.db.init_db import init_db

if __name__ == "__main__":
    configure_logging(settings.LOG_LEVEL, json_logs=False)
    logger = structlog.get_logger()
    try:
        init_db()
    except Exception:
        logger.exception("database_init_failed", database_url=settings.DATABASE_URL.split("@")[-1])
        sys.exit(1)
    print(f"Database ready ({settings.DATABASE_URL.split('@')[-1]}), timezone {settings.DEFAULT_TIMEZONE}")
