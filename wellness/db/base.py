import logging
from contextlib import contextmanager

from fastapi_sqlalchemy import db
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session

from wellness.core.config import settings

logger = logging.getLogger(__name__)

_is_sqlite = settings.DATABASE_URL.startswith('sqlite')

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    connect_args={'check_same_thread': False} if _is_sqlite else {},
)

if _is_sqlite:
    @event.listens_for(engine, 'connect')
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()


def get_db() -> Session:
    """Request-scoped session opened by DBSessionMiddleware."""
    return db.session


@contextmanager
def atomic(session: Session):
    """
    Commit everything done inside the block as one unit, or nothing.
    """
    try:
        yield session
        session.commit()
    except Exception:
        logger.warning('Rolling back transaction', exc_info=True)
        session.rollback()
        raise
