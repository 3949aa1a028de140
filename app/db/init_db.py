"""
Database initialization.

Creates all tables and seeds the default time zone setting.
"""

import structlog
from sqlmodel import Session, SQLModel

from app.core.config import settings
from app.db.session import engine
from app.models.app_setting import USER_TIMEZONE_KEY, AppSetting

logger = structlog.get_logger()


def init_db() -> None:
    """
    Initialize database schema.

    - Creates all SQLModel tables
    - Seeds ``user_timezone`` with the process default when missing
    """

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    logger.info("creating_tables")
    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        if session.get(AppSetting, USER_TIMEZONE_KEY) is None:
            session.add(AppSetting(key=USER_TIMEZONE_KEY, value=settings.DEFAULT_TIMEZONE))
            session.commit()
            logger.info("seeded_timezone", timezone=settings.DEFAULT_TIMEZONE)

    logger.info("database_initialized")


if __name__ == "__main__":
    init_db()
