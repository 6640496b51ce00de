"""
SQLAlchemy ORM Models
"""

from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()

class StorageEntry(Base):
    """One key/value pair of the local store."""
    __tablename__ = 'local_storage'

    storage_key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
