"""
Pydantic schemas for content resources

Create/Update schemas are the allow-list of fields a caller may set for a
resource type; anything else in the request body is rejected.
"""
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Any, ClassVar, FrozenSet, Optional, List
from datetime import date as date_type, datetime
import re

SLUG_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


def validate_slug(value: Optional[str]) -> Optional[str]:
    """
    Slugs share the detail path with numeric ids, so an all-digit slug
    would never be reachable.
    """
    if value is None:
        return value
    if not SLUG_PATTERN.fullmatch(value):
        raise ValueError("slug may only contain letters, digits, hyphens and underscores")
    if value.isdigit():
        raise ValueError("slug cannot be only digits")
    return value


class ContentSchema(BaseModel):
    """Base for request schemas - unknown fields are an error"""

    class Config:
        extra = "forbid"


class UpdateSchema(ContentSchema):
    """
    Base for partial updates. Omitted fields are left alone; fields listed
    in ``non_nullable`` map to NOT NULL columns and may not be sent as null.
    """
    non_nullable: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def reject_null_required(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        for name, field in cls.model_fields.items():
            if name not in cls.non_nullable:
                continue
            for key in {name, field.alias or name}:
                if key in data and data[key] is None:
                    raise ValueError(f"{key} cannot be null")
        return data


class ResponseSchema(BaseModel):
    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    """Acknowledgement for update and delete"""
    message: str


# News
class NewsCreate(ContentSchema):
    title: str = Field(..., max_length=255)
    content: str = ""
    date: date_type
    image_url: Optional[str] = None


class NewsUpdate(UpdateSchema):
    non_nullable = frozenset({"title", "content", "date"})

    title: Optional[str] = Field(None, max_length=255)
    content: Optional[str] = None
    date: Optional[date_type] = None
    image_url: Optional[str] = None


class NewsResponse(ResponseSchema):
    id: int
    title: str
    content: str
    date: date_type
    image_url: Optional[str] = None


# Events
class EventCreate(NewsCreate):
    location: Optional[str] = None


class EventUpdate(NewsUpdate):
    location: Optional[str] = None


class EventResponse(NewsResponse):
    location: Optional[str] = None


# Blog
class BlogPostCreate(NewsCreate):
    author: str = "Admin"
    slug: str = Field(..., min_length=1, max_length=255)

    @field_validator("slug")
    @classmethod
    def check_slug(cls, value):
        return validate_slug(value)


class BlogPostUpdate(NewsUpdate):
    non_nullable = NewsUpdate.non_nullable | {"author", "slug"}

    author: Optional[str] = None
    slug: Optional[str] = Field(None, min_length=1, max_length=255)

    @field_validator("slug")
    @classmethod
    def check_slug(cls, value):
        return validate_slug(value)


class BlogPostResponse(NewsResponse):
    author: str
    slug: str


# News-events
class NewsEventCreate(ContentSchema):
    title: str = Field(..., max_length=255)
    content: str = ""
    media_type: Optional[str] = None
    media_path: Optional[str] = None
    is_news: bool = True
    event_date: Optional[date_type] = None


class NewsEventUpdate(UpdateSchema):
    non_nullable = frozenset({"title", "content", "is_news"})

    title: Optional[str] = Field(None, max_length=255)
    content: Optional[str] = None
    media_type: Optional[str] = None
    media_path: Optional[str] = None
    is_news: Optional[bool] = None
    event_date: Optional[date_type] = None


class NewsEventResponse(ResponseSchema):
    id: int
    title: str
    content: str
    media_type: Optional[str] = None
    media_path: Optional[str] = None
    is_news: bool
    event_date: Optional[date_type] = None
    created_at: datetime


# Documents
class DocumentCreate(ContentSchema):
    title: str = Field(..., max_length=255)
    url: str
    type: str = Field(..., max_length=100)
    date: Optional[date_type] = None


class DocumentUpdate(UpdateSchema):
    non_nullable = frozenset({"title", "url", "type", "date"})

    title: Optional[str] = Field(None, max_length=255)
    url: Optional[str] = None
    type: Optional[str] = Field(None, max_length=100)
    date: Optional[date_type] = None


class DocumentResponse(ResponseSchema):
    id: int
    title: str
    url: str
    type: str
    date: date_type


# Gallery
class GalleryAlbumCreate(ContentSchema):
    title: str = Field(..., max_length=255)
    description: Optional[str] = None
    images: List[str] = []
    date: Optional[date_type] = None


class GalleryAlbumUpdate(UpdateSchema):
    non_nullable = frozenset({"title", "images", "date"})

    title: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    images: Optional[List[str]] = None
    date: Optional[date_type] = None


class GalleryAlbumResponse(ResponseSchema):
    id: int
    title: str
    description: Optional[str] = None
    images: List[str]
    date: date_type


# Carousel
class CarouselImageCreate(ContentSchema):
    path: str
    caption: Optional[str] = None


class CarouselImageUpdate(UpdateSchema):
    non_nullable = frozenset({"path"})

    path: Optional[str] = None
    caption: Optional[str] = None


class CarouselImageResponse(ResponseSchema):
    id: int
    path: str
    caption: Optional[str] = None
    uploaded_at: datetime


class CarouselUploadResponse(BaseModel):
    """Carousel image upload response"""
    message: str
    id: int
    image_path: str
