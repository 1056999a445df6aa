"""
Content models - one table per resource type
"""
from sqlmodel import SQLModel, Field, Column
from sqlalchemy import JSON, Text
from typing import Optional, List
from datetime import date as date_type, datetime

from app.common.fields import timestamp_column, utcnow


class News(SQLModel, table=True):
    """
    News article
    Table: news
    """
    __tablename__ = "news"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    content: str = Field(default="", sa_column=Column(Text))
    date: date_type = Field(index=True)
    image_url: Optional[str] = Field(default=None, max_length=500)


class Event(SQLModel, table=True):
    """
    School event
    Table: events
    """
    __tablename__ = "events"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    content: str = Field(default="", sa_column=Column(Text))
    date: date_type = Field(index=True)
    image_url: Optional[str] = Field(default=None, max_length=500)
    location: Optional[str] = Field(default=None, max_length=255)


class BlogPost(SQLModel, table=True):
    """
    Blog post, also reachable by its slug
    Table: blog
    """
    __tablename__ = "blog"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    content: str = Field(default="", sa_column=Column(Text))
    date: date_type = Field(index=True)
    image_url: Optional[str] = Field(default=None, max_length=500)
    author: str = Field(default="Admin", max_length=100)
    slug: str = Field(max_length=255, unique=True, index=True)


class NewsEvent(SQLModel, table=True):
    """
    Combined news/event entry with attached media
    Table: news_events
    """
    __tablename__ = "news_events"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    content: str = Field(default="", sa_column=Column(Text))
    media_type: Optional[str] = Field(default=None, max_length=20)  # "image", "video" or "link"
    media_path: Optional[str] = Field(default=None, max_length=500)
    is_news: bool = Field(default=True)
    event_date: Optional[date_type] = Field(default=None)
    created_at: datetime = Field(default_factory=utcnow, sa_column=timestamp_column(index=True))


class Document(SQLModel, table=True):
    """
    Downloadable document (forms, resources)
    Table: documents
    """
    __tablename__ = "documents"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    url: str = Field(max_length=500)
    type: str = Field(max_length=100)  # e.g. "CSEC Resources", "Admissions Form"
    date: date_type = Field(default_factory=date_type.today, index=True)


class GalleryAlbum(SQLModel, table=True):
    """
    Photo album
    Table: gallery_albums
    """
    __tablename__ = "gallery_albums"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))
    images: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    date: date_type = Field(default_factory=date_type.today, index=True)


class CarouselImage(SQLModel, table=True):
    """
    Home page carousel slide
    Table: carousel_images
    """
    __tablename__ = "carousel_images"

    id: Optional[int] = Field(default=None, primary_key=True)
    path: str = Field(max_length=500)
    caption: Optional[str] = Field(default=None, max_length=255)
    uploaded_at: datetime = Field(default_factory=utcnow, sa_column=timestamp_column(index=True))
