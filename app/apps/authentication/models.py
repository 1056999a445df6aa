"""
Authentication models
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime

from app.common.fields import timestamp_column, utcnow


class User(SQLModel, table=True):
    """
    Site administrator account
    Table: users

    Rows are created by reset_admin_password.py, never through the API.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(max_length=100, unique=True, index=True)
    username: Optional[str] = Field(default=None, max_length=80, unique=True, index=True)
    password_hash: str = Field(max_length=255)
    created_at: datetime = Field(default_factory=utcnow, sa_column=timestamp_column())
