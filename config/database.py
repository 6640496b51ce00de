"""
Database Configuration and Management (SQLAlchemy)

Provides the string-keyed local store used as the mock user database. Two
interchangeable implementations share the same get_item/set_item interface:
DatabaseStorage keeps entries in a SQLite (or any SQLAlchemy) table and
MemoryStorage keeps them in a dict.
"""

import logging
from pathlib import Path
from sqlalchemy import create_engine, select, delete
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from config.models import Base, StorageEntry
from config.settings import DATABASE_URL

logger = logging.getLogger(__name__)


class DatabaseStorage:
    """Key/value store backed by the local_storage table."""

    def __init__(self, database_url=DATABASE_URL):
        self.database_url = database_url
        url = make_url(database_url)
        connect_args = {"check_same_thread": False} if url.get_backend_name() == "sqlite" else {}
        self.engine = create_engine(database_url, echo=False, connect_args=connect_args)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def get_db_session(self):
        """
        Get a new database session.

        Returns:
            sqlalchemy.orm.Session: Database session
        """
        return self.SessionLocal()

    def init_database(self):
        """
        Create the storage table, and the SQLite data directory if needed.
        """
        logger.info("Initializing database...")

        url = make_url(self.database_url)
        if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)

        try:
            Base.metadata.create_all(bind=self.engine)
            logger.info("Database initialized successfully!")
        except SQLAlchemyError as e:
            logger.error(f"Error initializing database: {e}")
            raise

    def get_item(self, key):
        """
        Get the stored value for a key.

        Returns:
            str or None: The stored text, None when the key is absent
        """
        session = self.get_db_session()
        try:
            entry = session.execute(
                select(StorageEntry).where(StorageEntry.storage_key == key)
            ).scalar_one_or_none()
            return entry.value if entry else None
        finally:
            session.close()

    def set_item(self, key, value):
        """
        Insert or replace the value stored under a key.
        """
        session = self.get_db_session()
        try:
            entry = session.get(StorageEntry, key)
            if entry:
                entry.value = value
            else:
                session.add(StorageEntry(storage_key=key, value=value))
            session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error writing storage key {key}: {e}")
            session.rollback()
            raise
        finally:
            session.close()

    def remove_item(self, key):
        """
        Delete a key. Returns True if something was removed.
        """
        session = self.get_db_session()
        try:
            result = session.execute(delete(StorageEntry).where(StorageEntry.storage_key == key))
            session.commit()
            return result.rowcount > 0
        except SQLAlchemyError as e:
            logger.error(f"Error removing storage key {key}: {e}")
            session.rollback()
            raise
        finally:
            session.close()

    def keys(self):
        session = self.get_db_session()
        try:
            return list(session.execute(
                select(StorageEntry.storage_key).order_by(StorageEntry.storage_key)
            ).scalars())
        finally:
            session.close()

    def dispose(self):
        self.engine.dispose()


class MemoryStorage:
    """Dict-backed store with the same interface, used by tests and demos."""

    def __init__(self, initial=None):
        self._items = dict(initial or {})

    def init_database(self):
        pass

    def get_item(self, key):
        return self._items.get(key)

    def set_item(self, key, value):
        self._items[key] = str(value)

    def remove_item(self, key):
        return self._items.pop(key, None) is not None

    def keys(self):
        return sorted(self._items)

    def dispose(self):
        pass
