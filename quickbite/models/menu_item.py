"""
ORM mapping for the `menu_items` table.
"""
from datetime import datetime, timezone
from typing import Optional
import logging

from sqlalchemy import Column, DateTime, Integer, Numeric, String
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator

logger = logging.getLogger(__name__)

Base = declarative_base()


class UTCDateTime(TypeDecorator):
    """Timezone-aware UTC datetimes, also on backends that store naive values."""

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value: Optional[datetime], dialect) -> Optional[datetime]:
        # SQLite drops the offset; stored values are always UTC.
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


class TimestampMixin:
    """Columns stamped by the persistence layer before every commit."""

    created_at = Column(UTCDateTime(timezone=True), nullable=False)
    updated_at = Column(UTCDateTime(timezone=True), nullable=False)


class MenuItem(TimestampMixin, Base):
    """A single dish or drink offered on the menu."""

    __tablename__ = "menu_items"
    __mapper_args__ = {"eager_defaults": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=False, default="")
    price = Column(Numeric(6, 2), nullable=False)
    category = Column(String(50), nullable=False, index=True)
    # Default lives in the schema only; the service never coerces blank tags.
    dietary_tag = Column(String(50), nullable=False, server_default="None", index=True)

    def __repr__(self) -> str:
        return f"<MenuItem id={self.id} name={self.name!r} category={self.category!r}>"
