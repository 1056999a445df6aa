"""
Resource type registry

Every CRUD collection exposed under /api/<name> is described here. The
router factory and the site front end both read this table, so adding a
resource type is a configuration change, not new endpoint code.
"""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Type

from pydantic import BaseModel
from sqlmodel import SQLModel

from app.apps.content.models import (
    News,
    Event,
    BlogPost,
    NewsEvent,
    Document,
    GalleryAlbum,
    CarouselImage,
)
from app.apps.content import schemas


@dataclass(frozen=True)
class ResourceType:
    name: str  # URL segment, e.g. "news-events"
    label: str  # Human readable title
    model: Type[SQLModel]
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]
    response_schema: Type[BaseModel]
    order_field: str = "date"
    slug_field: Optional[str] = None
    public_listing: bool = True  # rendered as list/detail pages on the site
    form_fields: Tuple[str, ...] = ()  # fields the admin dashboard edits
    accepts_image: bool = False  # admin form offers an image upload

    @property
    def tag(self) -> str:
        return self.name.replace("-", "_")


RESOURCE_TYPES: Dict[str, ResourceType] = {
    resource.name: resource
    for resource in (
        ResourceType(
            name="news",
            label="News",
            model=News,
            create_schema=schemas.NewsCreate,
            update_schema=schemas.NewsUpdate,
            response_schema=schemas.NewsResponse,
            form_fields=("title", "content", "date"),
            accepts_image=True,
        ),
        ResourceType(
            name="events",
            label="Events",
            model=Event,
            create_schema=schemas.EventCreate,
            update_schema=schemas.EventUpdate,
            response_schema=schemas.EventResponse,
            form_fields=("title", "content", "date", "location"),
        ),
        ResourceType(
            name="blog",
            label="Blog",
            model=BlogPost,
            create_schema=schemas.BlogPostCreate,
            update_schema=schemas.BlogPostUpdate,
            response_schema=schemas.BlogPostResponse,
            slug_field="slug",
            form_fields=("title", "content", "date", "author", "slug"),
            accepts_image=True,
        ),
        ResourceType(
            name="news-events",
            label="News & Events",
            model=NewsEvent,
            create_schema=schemas.NewsEventCreate,
            update_schema=schemas.NewsEventUpdate,
            response_schema=schemas.NewsEventResponse,
            order_field="created_at",
            form_fields=("title", "content", "media_type", "media_path", "is_news", "event_date"),
        ),
        ResourceType(
            name="documents",
            label="Documents",
            model=Document,
            create_schema=schemas.DocumentCreate,
            update_schema=schemas.DocumentUpdate,
            response_schema=schemas.DocumentResponse,
            form_fields=("title", "url", "type", "date"),
        ),
        ResourceType(
            name="gallery",
            label="Gallery",
            model=GalleryAlbum,
            create_schema=schemas.GalleryAlbumCreate,
            update_schema=schemas.GalleryAlbumUpdate,
            response_schema=schemas.GalleryAlbumResponse,
            form_fields=("title", "description", "images", "date"),
        ),
        ResourceType(
            name="carousel-images",
            label="Carousel Images",
            model=CarouselImage,
            create_schema=schemas.CarouselImageCreate,
            update_schema=schemas.CarouselImageUpdate,
            response_schema=schemas.CarouselImageResponse,
            order_field="uploaded_at",
            public_listing=False,
            form_fields=("path", "caption"),
        ),
    )
}


def get_resource_type(name: str) -> Optional[ResourceType]:
    return RESOURCE_TYPES.get(name)


def public_resource_names() -> Tuple[str, ...]:
    return tuple(name for name, resource in RESOURCE_TYPES.items() if resource.public_listing)
