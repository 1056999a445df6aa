"""
Static page models
"""
from sqlmodel import SQLModel, Field, Column
from sqlalchemy import Text
from typing import Optional
from datetime import datetime

from app.common.fields import timestamp_column, utcnow


class Page(SQLModel, table=True):
    """
    Editable static page, keyed by slug (e.g. "home")
    Table: pages
    """
    __tablename__ = "pages"

    slug: str = Field(max_length=100, primary_key=True)
    title: str = Field(max_length=255)
    content: Optional[str] = Field(default=None, sa_column=Column(Text))
    hero_video_url: Optional[str] = Field(default=None, max_length=500)
    hero_video_is_local: bool = Field(default=False)
    updated_at: datetime = Field(default_factory=utcnow, sa_column=timestamp_column(onupdate=True))
