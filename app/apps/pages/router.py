"""
Pages router - pre-seeded static pages, read publicly and updated by the admin
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from app.common.fields import utcnow
import logging

from app.dependencies import get_db, get_current_user
from app.apps.authentication.schemas import TokenData
from app.apps.content.schemas import MessageResponse
from app.apps.pages.models import Page
from app.apps.pages.schemas import PageResponse, PageSummary, PageUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[PageSummary], status_code=status.HTTP_200_OK)
async def list_pages(session: AsyncSession = Depends(get_db)):
    """
    List all pages (slug and title only)
    """
    try:
        result = await session.execute(select(Page).order_by(Page.slug))
        return result.scalars().all()
    except Exception as e:
        logger.error(f"Error listing pages: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error retrieving pages list",
        )


@router.get("/{slug}", response_model=PageResponse, status_code=status.HTTP_200_OK)
async def get_page(slug: str, session: AsyncSession = Depends(get_db)):
    """
    Get a page by slug (public endpoint, no auth required)
    """
    try:
        page = await session.get(Page, slug)
    except Exception as e:
        logger.error(f"Error getting page {slug}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )

    if page is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Page not found")
    return page


@router.put("/{slug}", response_model=MessageResponse, status_code=status.HTTP_200_OK)
async def update_page(
    slug: str,
    request: PageUpdate,
    session: AsyncSession = Depends(get_db),
    current_user: TokenData = Depends(get_current_user),
):
    """
    Update an existing page in place (requires authentication)
    """
    try:
        page = await session.get(Page, slug)
        if page is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Page not found")

        for field, value in request.model_dump(exclude_unset=True).items():
            setattr(page, field, value)
        page.updated_at = utcnow()

        await session.commit()
        logger.info(f"Page {slug} updated by user {current_user.user_id}")
        return MessageResponse(message="Page updated successfully")
    except HTTPException:
        raise
    except Exception as e:
        await session.rollback()
        logger.error(f"Error updating page {slug}: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error updating page",
        )
