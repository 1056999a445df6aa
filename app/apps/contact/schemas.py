"""
Pydantic schemas for contact inquiries
"""
from pydantic import BaseModel, EmailStr, Field
from datetime import datetime


class ContactInquiryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)

    class Config:
        extra = "forbid"


class ContactInquiryResponse(BaseModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime

    class Config:
        from_attributes = True


class ContactSubmitResponse(BaseModel):
    message: str
    id: int
