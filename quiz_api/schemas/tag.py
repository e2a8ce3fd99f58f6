"""
Pydantic schemas for tag requests and responses
"""
from pydantic import BaseModel, Field
from typing import Optional
from uuid import UUID


class TagRef(BaseModel):
    """Tag reference inside a test payload"""
    id: UUID


class TagCreate(BaseModel):
    """Schema for creating a tag"""
    name: str = Field(..., min_length=1, max_length=100)
    user_id: Optional[UUID] = Field(None, description="Admin performing the action")


class TagResponse(BaseModel):
    """Tag row"""
    id: UUID
    name: str
    is_active: bool

    class Config:
        from_attributes = True


class TagEnvelope(BaseModel):
    success: bool = True
    data: TagResponse
