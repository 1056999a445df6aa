"""
Common column helpers shared by the table models
"""
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime"""
    return datetime.now(timezone.utc)


def timestamp_column(index: bool = False, onupdate: bool = False) -> Column:
    """
    Timezone-aware, non-null timestamp column.

    Each model field needs its own Column instance, so call this once per field:

        created_at: datetime = Field(default_factory=utcnow, sa_column=timestamp_column(index=True))
    """
    return Column(
        DateTime(timezone=True),
        nullable=False,
        index=index,
        onupdate=utcnow if onupdate else None,
    )
