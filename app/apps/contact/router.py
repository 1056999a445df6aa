"""
Contact router - public submission, admin-only listing
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
import logging

from app.dependencies import get_db, get_current_user
from app.apps.authentication.schemas import TokenData
from app.apps.contact.models import ContactInquiry
from app.apps.contact.schemas import (
    ContactInquiryCreate,
    ContactInquiryResponse,
    ContactSubmitResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=ContactSubmitResponse, status_code=status.HTTP_201_CREATED)
async def submit_inquiry(
    request: ContactInquiryCreate,
    session: AsyncSession = Depends(get_db),
):
    """
    Store a contact form submission (public endpoint)
    """
    try:
        inquiry = ContactInquiry(**request.model_dump())
        session.add(inquiry)
        await session.commit()
        await session.refresh(inquiry)
    except Exception as e:
        await session.rollback()
        logger.error(f"Error submitting inquiry: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error submitting inquiry",
        )

    logger.info(f"Contact inquiry {inquiry.id} received")
    return ContactSubmitResponse(message="Inquiry submitted successfully!", id=inquiry.id)


@router.get("", response_model=List[ContactInquiryResponse], status_code=status.HTTP_200_OK)
async def list_inquiries(
    session: AsyncSession = Depends(get_db),
    current_user: TokenData = Depends(get_current_user),
):
    """
    List all inquiries, newest first (requires authentication)
    """
    try:
        stmt = select(ContactInquiry).order_by(ContactInquiry.created_at.desc(), ContactInquiry.id.desc())
        result = await session.execute(stmt)
        return result.scalars().all()
    except Exception as e:
        logger.error(f"Error fetching inquiries: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error fetching inquiries",
        )
