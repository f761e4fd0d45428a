from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker, declarative_base

from config.app_config import DATABASE_URL, SQL_ECHO


def build_engine(url: str = DATABASE_URL, echo: bool = SQL_ECHO, **kwargs):
    """Create an engine; SQLite connections get foreign keys enforced."""
    is_sqlite = make_url(url).get_backend_name() == 'sqlite'
    if is_sqlite:
        kwargs.setdefault('connect_args', {'check_same_thread': False})
    else:
        kwargs.setdefault('pool_size', 10)
        kwargs.setdefault('max_overflow', 20)
        kwargs.setdefault('pool_recycle', 3600)  # Recycle connections after 1 hour

    new_engine = create_engine(url, echo=echo, pool_pre_ping=True, **kwargs)

    if is_sqlite:
        @event.listens_for(new_engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


engine = build_engine()

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()

def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
