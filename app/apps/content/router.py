"""
Content router factory - list/get/create/update/delete for each resource type
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging

from app.dependencies import get_db, get_current_user
from app.apps.authentication.schemas import TokenData
from app.apps.content.registry import RESOURCE_TYPES, ResourceType
from app.apps.content.repository import ResourceRepository
from app.apps.content.schemas import MessageResponse

logger = logging.getLogger(__name__)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")


def _server_error(action: str, resource: ResourceType) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Server error {action} {resource.name}",
    )


def is_unique_violation(error: IntegrityError) -> bool:
    """True when an integrity error comes from a unique constraint (Postgres 23505 or SQLite)"""
    orig = error.orig
    if getattr(orig, "sqlstate", None) == "23505" or getattr(orig, "pgcode", None) == "23505":
        return True
    return "unique" in str(orig).lower()


def create_crud_router(resource: ResourceType) -> APIRouter:
    """
    Build the router for one resource type.

    Reads are public; create, update and delete require a valid session
    token. Request bodies are checked against the resource's schemas.
    """
    router = APIRouter()
    CreateSchema = resource.create_schema
    UpdateSchema = resource.update_schema
    ResponseSchema = resource.response_schema

    @router.get("", response_model=List[ResponseSchema], status_code=status.HTTP_200_OK)
    async def list_items(session: AsyncSession = Depends(get_db)):
        try:
            return await ResourceRepository(resource, session).list()
        except Exception as e:
            logger.error(f"Error fetching {resource.name}: {str(e)}", exc_info=True)
            raise _server_error("fetching", resource)

    @router.post("", response_model=ResponseSchema, status_code=status.HTTP_201_CREATED)
    async def create_item(
        request: CreateSchema,
        session: AsyncSession = Depends(get_db),
        current_user: TokenData = Depends(get_current_user),
    ):
        try:
            return await ResourceRepository(resource, session).create(request.model_dump(exclude_none=True))
        except IntegrityError as e:
            await session.rollback()
            if not is_unique_violation(e):
                logger.error(f"Error creating {resource.name} item: {e.orig}", exc_info=True)
                raise _server_error("creating item in", resource)
            logger.warning(f"Conflict creating {resource.name} item: {e.orig}")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"A {resource.name} item with these values already exists",
            )
        except Exception as e:
            await session.rollback()
            logger.error(f"Error creating {resource.name} item: {str(e)}", exc_info=True)
            raise _server_error("creating item in", resource)

    @router.get("/{item_id:int}", response_model=ResponseSchema, status_code=status.HTTP_200_OK)
    async def get_item(item_id: int, session: AsyncSession = Depends(get_db)):
        try:
            item = await ResourceRepository(resource, session).get(item_id)
        except Exception as e:
            logger.error(f"Error fetching {resource.name} item {item_id}: {str(e)}", exc_info=True)
            raise _server_error("fetching item from", resource)

        if item is None:
            raise _not_found()
        return item

    @router.put("/{item_id:int}", response_model=MessageResponse, status_code=status.HTTP_200_OK)
    async def update_item(
        item_id: int,
        request: UpdateSchema,
        session: AsyncSession = Depends(get_db),
        current_user: TokenData = Depends(get_current_user),
    ):
        try:
            item = await ResourceRepository(resource, session).update(
                item_id, request.model_dump(exclude_unset=True)
            )
        except IntegrityError as e:
            await session.rollback()
            if not is_unique_violation(e):
                logger.error(f"Error updating {resource.name} item {item_id}: {e.orig}", exc_info=True)
                raise _server_error("updating item in", resource)
            logger.warning(f"Conflict updating {resource.name} item {item_id}: {e.orig}")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail=f"A {resource.name} item with these values already exists",
            )
        except Exception as e:
            await session.rollback()
            logger.error(f"Error updating {resource.name} item {item_id}: {str(e)}", exc_info=True)
            raise _server_error("updating item in", resource)

        if item is None:
            raise _not_found()
        return MessageResponse(message="Item updated successfully")

    @router.delete("/{item_id:int}", response_model=MessageResponse, status_code=status.HTTP_200_OK)
    async def delete_item(
        item_id: int,
        session: AsyncSession = Depends(get_db),
        current_user: TokenData = Depends(get_current_user),
    ):
        try:
            deleted = await ResourceRepository(resource, session).delete(item_id)
        except Exception as e:
            await session.rollback()
            logger.error(f"Error deleting {resource.name} item {item_id}: {str(e)}", exc_info=True)
            raise _server_error("deleting item in", resource)

        if not deleted:
            raise _not_found()
        return MessageResponse(message="Item deleted successfully")

    if resource.slug_field:
        # Registered after the numeric routes so "/42" never reaches the slug lookup
        @router.get("/{slug}", response_model=ResponseSchema, status_code=status.HTTP_200_OK)
        async def get_item_by_slug(slug: str, session: AsyncSession = Depends(get_db)):
            try:
                item = await ResourceRepository(resource, session).get_by_slug(slug)
            except Exception as e:
                logger.error(f"Error fetching {resource.name} item {slug}: {str(e)}", exc_info=True)
                raise _server_error("fetching item from", resource)

            if item is None:
                raise _not_found()
            return item

    return router


def include_resource_routers(app, prefix: str = "/api") -> None:
    """Mount a CRUD router for every registered resource type"""
    for resource in RESOURCE_TYPES.values():
        app.include_router(
            create_crud_router(resource),
            prefix=f"{prefix}/{resource.name}",
            tags=[resource.tag],
        )
