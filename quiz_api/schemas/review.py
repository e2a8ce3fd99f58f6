"""
Pydantic schemas for review requests and responses
"""
from pydantic import BaseModel
from typing import Optional
from uuid import UUID
from datetime import datetime


class ReviewCreate(BaseModel):
    """
    Schema for submitting a review

    user_name is accepted for client compatibility but reviews are not
    bound to a user.
    """
    test_id: UUID
    user_name: Optional[str] = None
    rating: int
    comment: Optional[str] = None


class ReviewResponse(BaseModel):
    """Review row"""
    id: UUID
    test_id: UUID
    user_id: Optional[UUID] = None
    rating: int
    comment: Optional[str] = None
    is_approved: bool
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ReviewEnvelope(BaseModel):
    success: bool = True
    data: ReviewResponse
