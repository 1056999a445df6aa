"""
Authentication router
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from app.database import get_async_session
from app.apps.authentication.schemas import LoginRequest, LoginResponse
from app.apps.authentication.utils import (
    InvalidCredentialsError,
    authenticate_user,
    create_access_token,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=LoginResponse, status_code=status.HTTP_200_OK)
async def login(
    request: LoginRequest,
    session: AsyncSession = Depends(get_async_session),
):
    """
    Exchange admin credentials for a session token.
    """
    if not request.identifier or not request.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email or username and password are required",
        )

    logger.info("Attempting to log in admin")

    try:
        user = await authenticate_user(session, request.identifier, request.password)
    except InvalidCredentialsError:
        logger.warning("Login failed: Invalid credentials")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )
    except Exception as e:
        logger.error(f"Unexpected error during login: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error",
        )

    logger.info(f"Admin logged in successfully, User ID: {user.id}")
    return LoginResponse(token=create_access_token(user))
