"""
KVEntry model — a single key/value pair in the durable run store.

Runs are stored under their id as a JSON document; loaded law texts are
cached under the "law_text:<lawId>" namespace in the same table.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """SQLAlchemy declarative base for all models."""

    pass


class KVEntry(Base):
    """One opaque string value keyed by an application-defined string."""

    __tablename__ = "kv_entries"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
