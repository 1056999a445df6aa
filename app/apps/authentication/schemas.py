"""
Pydantic schemas for authentication
"""
from pydantic import BaseModel
from typing import Optional


class LoginRequest(BaseModel):
    """Login request schema - either email or username identifies the account"""
    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None

    @property
    def identifier(self) -> Optional[str]:
        return self.email or self.username


class LoginResponse(BaseModel):
    """Login response schema"""
    token: str


class TokenData(BaseModel):
    """Claims carried by a validated session token"""
    user_id: int
    email: Optional[str] = None
