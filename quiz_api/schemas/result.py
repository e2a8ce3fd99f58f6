"""
Pydantic schemas for result submission and listing
"""
from pydantic import BaseModel
from typing import Any, Optional
from uuid import UUID
from datetime import datetime


class ResultCreate(BaseModel):
    """
    Schema for a completed attempt

    Either max_score or total_questions + percentage is sent,
    depending on the client.
    """
    test_id: UUID
    user_name: Optional[str] = None
    answers: Any = None
    score: Optional[float] = None
    max_score: Optional[float] = None
    total_questions: Optional[int] = None
    percentage: Optional[float] = None


class ResultResponse(BaseModel):
    """Stored result row"""
    id: UUID
    test_id: UUID
    user_name: Optional[str] = None
    answers: Any = None
    score: Optional[float] = None
    max_score: Optional[float] = None
    total_questions: Optional[int] = None
    percentage: Optional[float] = None
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ResultTestInfo(BaseModel):
    title: str
    description: Optional[str] = None

    class Config:
        from_attributes = True


class ResultWithTest(ResultResponse):
    """Result joined with its test's title and description"""
    test: Optional[ResultTestInfo] = None


class ResultEnvelope(BaseModel):
    success: bool = True
    data: ResultResponse
