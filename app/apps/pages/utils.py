"""
Page helpers
"""
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from app.apps.pages.models import Page

# Pages that exist from the first deploy; the API never creates or deletes pages
DEFAULT_PAGES = (
    ("home", "Welcome to Wesley High School"),
    ("about-us", "About Us"),
    ("admissions", "Admissions"),
    ("academics", "Academics"),
    ("student-life", "Student Life"),
)


async def seed_default_pages(session: AsyncSession) -> List[str]:
    """Insert any missing default page; returns the slugs that were created"""
    created = []
    for slug, title in DEFAULT_PAGES:
        if await session.get(Page, slug) is None:
            session.add(Page(slug=slug, title=title, content=""))
            created.append(slug)

    if created:
        await session.commit()
    return created
