"""
Pydantic schemas for static pages
"""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from app.apps.content.schemas import UpdateSchema


class PageSummary(BaseModel):
    """Entry of the page list"""
    slug: str
    title: str

    class Config:
        from_attributes = True


class PageResponse(BaseModel):
    """Page response schema"""
    slug: str
    title: str
    content: Optional[str] = None
    hero_video_url: Optional[str] = None
    hero_video_is_local: bool = False
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class PageUpdate(UpdateSchema):
    """
    Update page schema - only supplied fields change.
    The admin front end historically sent camelCase hero video fields, so
    both spellings are accepted.
    """
    non_nullable = frozenset({"title", "hero_video_is_local"})

    title: Optional[str] = Field(None, max_length=255)
    content: Optional[str] = None
    hero_video_url: Optional[str] = Field(None, alias="heroVideoUrl")
    hero_video_is_local: Optional[bool] = Field(None, alias="heroVideoIsLocal")

    class Config:
        populate_by_name = True
