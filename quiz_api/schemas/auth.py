"""
Pydantic schemas for admin authentication
"""
from pydantic import BaseModel
from typing import Optional
from uuid import UUID
from datetime import datetime


class LoginRequest(BaseModel):
    email: str
    password: str


class UserResponse(BaseModel):
    """Full user row, as returned after a successful login"""
    id: UUID
    email: str
    password_hash: str
    role: str
    last_login: Optional[datetime] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class LoginResponse(BaseModel):
    success: bool = True
    user: UserResponse
