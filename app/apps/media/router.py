"""
Media router - file uploads for the admin area
"""
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from datetime import date
import logging

from app.dependencies import get_db, get_current_user
from app.apps.authentication.schemas import TokenData
from app.apps.content.models import CarouselImage, NewsEvent
from app.apps.content.schemas import CarouselUploadResponse
from app.apps.media.schemas import UploadResponse
from app.apps.media.utils import store_upload

logger = logging.getLogger(__name__)

router = APIRouter()


def _no_file() -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded.")


async def _save(file: UploadFile, upload_type: Optional[str]) -> str:
    content = await file.read()
    try:
        return store_upload(content, file.filename, upload_type)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/upload", response_model=UploadResponse, status_code=status.HTTP_200_OK)
async def upload_media(
    media: Optional[UploadFile] = File(None),
    upload_type: Optional[str] = Form(None),
    current_user: TokenData = Depends(get_current_user),
):
    """
    Store a single file and return its public path (requires authentication)

    Args:
        media: the file to store
        upload_type: optional sub-directory, e.g. "news_media"
    """
    if media is None or not media.filename:
        raise _no_file()

    try:
        file_path = await _save(media, upload_type)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error uploading file: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error uploading file",
        )

    return UploadResponse(file_path=file_path)


@router.post("/upload-carousel-image", response_model=CarouselUploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_carousel_image(
    carousel_image: Optional[UploadFile] = File(None),
    caption: Optional[str] = Form(None),
    session: AsyncSession = Depends(get_db),
    current_user: TokenData = Depends(get_current_user),
):
    """
    Store a carousel image and register it for the home page (requires authentication)
    """
    if carousel_image is None or not carousel_image.filename:
        raise _no_file()

    try:
        image_path = await _save(carousel_image, "carousel_images")
        image = CarouselImage(path=image_path, caption=caption)
        session.add(image)
        await session.commit()
        await session.refresh(image)
    except HTTPException:
        raise
    except Exception as e:
        await session.rollback()
        logger.error(f"Image upload error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error uploading image",
        )

    return CarouselUploadResponse(message="Image uploaded successfully!", id=image.id, image_path=image_path)


@router.post("/admin/news-events", status_code=status.HTTP_201_CREATED)
async def save_news_event(
    title: str = Form(...),
    content: str = Form(""),
    media_type: Optional[str] = Form(None),
    media_link: Optional[str] = Form(None),
    event_date: Optional[date] = Form(None),
    is_news: bool = Form(True),
    item_id: Optional[int] = Form(None, alias="id"),
    media_file: Optional[UploadFile] = File(None),
    session: AsyncSession = Depends(get_db),
    current_user: TokenData = Depends(get_current_user),
):
    """
    Create a news-event, or update it when an id is supplied, with an
    optional attached media file (requires authentication).

    An uploaded file takes precedence over media_link. Event dates are only
    kept for events (is_news false).
    """
    try:
        media_path = media_link
        if media_file is not None and media_file.filename:
            media_path = await _save(media_file, "news_media")

        data = {
            "title": title,
            "content": content,
            "media_type": media_type,
            "media_path": media_path,
            "is_news": is_news,
            "event_date": None if is_news else event_date,
        }

        if item_id is not None:
            item = await session.get(NewsEvent, item_id)
            if item is None:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
            for field, value in data.items():
                setattr(item, field, value)
            await session.commit()
            logger.info(f"News-event {item_id} updated")
            return JSONResponse(
                status_code=status.HTTP_200_OK,
                content={"message": "Item updated successfully.", "id": item_id},
            )

        item = NewsEvent(**data)
        session.add(item)
        await session.commit()
        await session.refresh(item)
        logger.info(f"News-event {item.id} created")
        return {"message": "Item added successfully.", "id": item.id}
    except HTTPException:
        raise
    except Exception as e:
        await session.rollback()
        logger.error(f"Error saving news-event: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error saving news-event",
        )
