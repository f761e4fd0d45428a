"""
Runtime Configuration

Reads service settings from environment variables once at import time.

Variables:
- ORDER_API_DATABASE_URL: SQLAlchemy URL (defaults to a SQLite file in the data dir)
- ORDER_API_SQL_ECHO: log every SQL statement emitted by the engine
- ORDER_API_SEED_DATA: load the sample members/orders when the store is empty
- ORDER_API_LOG_DIR: directory for the rotating log file
- ORDER_API_LOG_LEVEL: root log level (INFO by default)
"""
import os
import logging
from pathlib import Path
from sqlalchemy.engine import make_url

logger = logging.getLogger(__name__)

DATA_DIR = Path(os.environ.get('ORDER_API_DATA_DIR', Path.home() / ".order-api"))


def _env_flag(name: str, default: bool) -> bool:
    """Parse a boolean environment variable ('true', '1', 'yes' are truthy)."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ('true', '1', 'yes')


def get_database_url() -> str:
    """
    Resolve the database URL.

    Returns:
        Value of ORDER_API_DATABASE_URL, or a SQLite file under DATA_DIR
    """
    url = os.environ.get('ORDER_API_DATABASE_URL')
    if url:
        return url
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{DATA_DIR / 'orders.db'}"


DATABASE_URL = get_database_url()
SQL_ECHO = _env_flag('ORDER_API_SQL_ECHO', False)
SEED_DATA = _env_flag('ORDER_API_SEED_DATA', True)

LOG_DIR = Path(os.environ.get('ORDER_API_LOG_DIR', DATA_DIR / "logs"))
LOG_LEVEL = os.environ.get('ORDER_API_LOG_LEVEL', 'INFO').upper()


def log_settings(database_url: str = DATABASE_URL) -> None:
    """Log the resolved settings; the database password is masked."""
    safe_url = make_url(database_url).render_as_string(hide_password=True)
    logger.info(f"Database: {safe_url} (echo={SQL_ECHO}, seed sample data={SEED_DATA})")
    logger.info(f"Log directory: {LOG_DIR} (level={LOG_LEVEL})")


log_settings()
