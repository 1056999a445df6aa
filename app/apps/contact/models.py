"""
Contact inquiry models
"""
from sqlmodel import SQLModel, Field, Column
from sqlalchemy import Text
from typing import Optional
from datetime import datetime

from app.common.fields import timestamp_column, utcnow


class ContactInquiry(SQLModel, table=True):
    """
    Message submitted through the public contact form
    Table: contact_inquiries
    """
    __tablename__ = "contact_inquiries"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    email: str = Field(max_length=255)
    subject: str = Field(max_length=255)
    message: str = Field(sa_column=Column(Text, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_column=timestamp_column(index=True))
