"""
Generic CRUD operations for a registered resource type
"""
from typing import Any, Dict, List, Optional
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from app.apps.content.registry import ResourceType

logger = logging.getLogger(__name__)


class ResourceRepository:
    """
    Reads and writes one resource type's table through an AsyncSession.

    Every call is a direct round-trip to the database; concurrent updates to
    the same row are last-write-wins.
    """

    def __init__(self, resource: ResourceType, session: AsyncSession):
        self.resource = resource
        self.model = resource.model
        self.session = session

    async def list(self) -> List[SQLModel]:
        """All items, most recent first"""
        order_column = getattr(self.model, self.resource.order_field)
        stmt = select(self.model).order_by(order_column.desc(), self.model.id.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get(self, item_id: int) -> Optional[SQLModel]:
        return await self.session.get(self.model, item_id)

    async def get_by_slug(self, slug: str) -> Optional[SQLModel]:
        if not self.resource.slug_field:
            return None
        slug_column = getattr(self.model, self.resource.slug_field)
        result = await self.session.execute(select(self.model).where(slug_column == slug))
        return result.scalar_one_or_none()

    async def create(self, fields: Dict[str, Any]) -> SQLModel:
        item = self.model(**fields)
        self.session.add(item)
        await self.session.commit()
        await self.session.refresh(item)
        logger.info(f"Created {self.resource.name} item {item.id}")
        return item

    async def update(self, item_id: int, fields: Dict[str, Any]) -> Optional[SQLModel]:
        """Overwrite exactly the supplied fields; None if the item does not exist"""
        item = await self.get(item_id)
        if item is None:
            return None

        for field, value in fields.items():
            setattr(item, field, value)

        await self.session.commit()
        await self.session.refresh(item)
        logger.info(f"Updated {self.resource.name} item {item_id}: {', '.join(fields) or 'no fields'}")
        return item

    async def delete(self, item_id: int) -> bool:
        """False if the item does not exist"""
        item = await self.get(item_id)
        if item is None:
            return False

        await self.session.delete(item)
        await self.session.commit()
        logger.info(f"Deleted {self.resource.name} item {item_id}")
        return True
