"""
Authentication utilities: password hashing, credential checks and session tokens
"""
from datetime import timedelta
from typing import Optional
import logging

import bcrypt
from jose import JWTError, jwt
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.apps.authentication.models import User
from app.apps.authentication.schemas import TokenData
from app.common.fields import utcnow
from app.config import JWT_ALGORITHM, JWT_EXPIRE_HOURS, JWT_SECRET

logger = logging.getLogger(__name__)


class InvalidCredentialsError(Exception):
    """Unknown account or wrong password"""


class InvalidTokenError(Exception):
    """Token signature, expiry or claims check failed"""


def hash_password(password: str) -> str:
    """Hash password with a fresh salt"""
    # Bcrypt has a 72 byte limit - truncate password if necessary
    password_bytes = password.encode('utf-8')[:72]
    return bcrypt.hashpw(password_bytes, bcrypt.gensalt()).decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against a stored bcrypt hash"""
    password_bytes = plain_password.encode('utf-8')[:72]
    try:
        return bcrypt.checkpw(password_bytes, hashed_password.encode('utf-8'))
    except ValueError:
        # Stored value is not a bcrypt hash
        logger.warning("Stored password hash has an invalid format")
        return False


async def authenticate_user(session: AsyncSession, identifier: str, password: str) -> User:
    """
    Look up an account by email or username and check its password.

    Raises:
        InvalidCredentialsError: no such account, or the password does not match
    """
    stmt = select(User).where(or_(User.email == identifier, User.username == identifier))
    result = await session.execute(stmt)
    user = result.scalars().first()

    if user is None or not verify_password(password, user.password_hash):
        raise InvalidCredentialsError(identifier)

    return user


async def upsert_admin(
    session: AsyncSession,
    email: str,
    password: str,
    username: Optional[str] = None,
) -> User:
    """Create the admin account or reset its password"""
    result = await session.execute(select(User).where(User.email == email))
    user = result.scalar_one_or_none()

    if user is None:
        user = User(email=email, username=username, password_hash=hash_password(password))
        session.add(user)
        logger.info(f"Created admin account {email}")
    else:
        user.password_hash = hash_password(password)
        if username is not None:
            user.username = username
        logger.info(f"Reset password for admin account {email}")

    await session.commit()
    await session.refresh(user)
    return user


def create_access_token(user: User, expires_delta: Optional[timedelta] = None) -> str:
    """Create a signed, time-bound session token for a user"""
    issued_at = utcnow()
    expire = issued_at + (expires_delta or timedelta(hours=JWT_EXPIRE_HOURS))
    claims = {
        "sub": str(user.id),
        "email": user.email,
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(claims, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> TokenData:
    """
    Validate a session token. No server-side state is consulted: a token
    stays valid until it expires.

    Raises:
        InvalidTokenError: bad signature, expired, or malformed claims
    """
    try:
        payload = jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except JWTError as e:
        raise InvalidTokenError(str(e))

    try:
        return TokenData(user_id=int(payload["sub"]), email=payload.get("email"))
    except (KeyError, TypeError, ValueError):
        raise InvalidTokenError("Token payload is missing a valid subject")
